"""A plucked-string (Karplus-Strong) instrument."""

from __future__ import annotations

import random
from collections import deque

from .audio_node import DEFAULT_BPM
from .envelope import AREnvelope
from .instrument import Instrument
from .note import Note
from .notes import note_to_frequency

SECONDS_PER_MINUTE = 60.0
DECAY_FACTOR = 0.996


class PianoInstrument(Instrument):
    """Averages a recirculating delay line seeded with noise."""

    def __init__(self, bpm: float = DEFAULT_BPM, rng: random.Random | None = None) -> None:
        super().__init__(bpm)
        self.decay_factor = DECAY_FACTOR
        self.frequency = 0.0
        self.envelope = AREnvelope()
        self._rng = rng if rng is not None else random.Random()
        self._line: deque[float] = deque()

    @property
    def delay_line(self) -> tuple[float, ...]:
        """Current contents of the delay line, oldest first."""
        return tuple(self._line)

    def _line_length(self) -> int:
        if self.frequency <= 0:
            raise ValueError(f"invalid note frequency: {self.frequency}")
        return int(self.sample_rate / self.frequency)

    def start(self) -> None:
        length = self._line_length()
        self._line = deque(self._rng.random() - 0.5 for _ in range(length))

    def generate(self) -> bool:
        if not self._line:
            return False
        first = self._line.popleft()
        following = self._line[0] if self._line else first
        sample = self.decay_factor * 0.5 * (first + following)
        self._line.append(sample)
        self.frame = [sample, sample]
        return True

    def set_note_frequency(self, frequency: float) -> None:
        """Set the pitch and reset the delay line to silence of the matching length."""
        self.frequency = frequency
        self._line = deque([0.0] * self._line_length())

    def set_note(self, note: Note) -> None:
        """Take the pitch and the duration in beats from the note's element."""
        if note.element is None:
            raise ValueError("note has no element to read attributes from")
        for name, value in note.element.attrib.items():
            if name == "duration":
                self.envelope.duration = float(value) * (SECONDS_PER_MINUTE / self.bpm)
            elif name == "note":
                self.set_note_frequency(note_to_frequency(value))