"""A sine wave oscillator."""

from __future__ import annotations

import math

from .audio_node import AudioNode


class SineWave(AudioNode):
    """Endless sine tone with a settable frequency and amplitude."""

    def __init__(self, freq: float = 440.0, amplitude: float = 0.1) -> None:
        super().__init__()
        self.freq = freq
        self.amplitude = amplitude
        self.phase = 0.0

    def start(self) -> None:
        self.phase = 0.0

    def generate(self) -> bool:
        value = self.amplitude * math.sin(self.phase * 2 * math.pi)
        self.frame = [value, value]
        self.phase += self.freq * self.sample_period
        return True