"""Base class for instruments that play score notes."""

from __future__ import annotations

from abc import abstractmethod

from .audio_node import DEFAULT_BPM, AudioNode
from .note import Note

NUM_EFFECTS_CHANNELS = 2


class Instrument(AudioNode):
    """An audio node configured from a note, with per-effect send levels."""

    def __init__(self, bpm: float = DEFAULT_BPM) -> None:
        super().__init__(bpm)
        self._sends: tuple[float, ...] = (1.0, 0.0)

    @abstractmethod
    def set_note(self, note: Note) -> None:
        """Configure the instrument from a note."""

    def send(self, index: int) -> float:
        """Send level for effects channel ``index``; channel 0 is dry."""
        return self._sends[index]