"""Attack/release envelope wrapped around another audio node."""

from __future__ import annotations

from .audio_node import AudioNode


class AREnvelope(AudioNode):
    """Shapes a source with a linear attack and release over a fixed duration."""

    def __init__(
        self,
        source: AudioNode | None = None,
        duration: float = 0.1,
        attack: float = 0.05,
        release: float = 0.05,
    ) -> None:
        super().__init__()
        self.source = source
        self.duration = duration
        self.attack = attack
        self.release = release
        self.time = 0.0

    def start(self) -> None:
        if self.source is None:
            raise ValueError("envelope has no source")
        self.source.sample_rate = self.sample_rate
        self.source.start()
        self.time = 0.0

    def generate(self) -> bool:
        if self.source is None:
            raise ValueError("envelope has no source")
        self.source.generate()

        if self.time < self.attack:
            gain = self.time / self.attack
        elif self.time > self.duration - self.release:
            gain = (self.duration - self.time) / self.release
        else:
            gain = 1.0
        self.frame = [sample * gain for sample in self.source.frame]

        self.time += self.sample_period
        return self.time < self.duration