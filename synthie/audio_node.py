"""Base class for anything that produces audio one frame at a time."""

from __future__ import annotations

from abc import ABC, abstractmethod

DEFAULT_SAMPLE_RATE = 44100.0
DEFAULT_BPM = 120.0


class AudioNode(ABC):
    """A generator of stereo audio frames.

    ``frame`` holds the most recently generated left and right samples.
    """

    def __init__(self, bpm: float = DEFAULT_BPM) -> None:
        self.frame: list[float] = [0.0, 0.0]
        self.bpm = bpm
        self._sample_rate = DEFAULT_SAMPLE_RATE
        self._sample_period = 1.0 / DEFAULT_SAMPLE_RATE

    @abstractmethod
    def start(self) -> None:
        """Prepare the node to generate audio."""

    @abstractmethod
    def generate(self) -> bool:
        """Generate one frame; return False once the node has finished."""

    @property
    def sample_rate(self) -> float:
        """Sample rate in samples per second."""
        return self._sample_rate

    @sample_rate.setter
    def sample_rate(self, rate: float) -> None:
        self._sample_rate = rate
        self._sample_period = 1.0 / rate

    @property
    def sample_period(self) -> float:
        """Duration of one sample in seconds."""
        return self._sample_period