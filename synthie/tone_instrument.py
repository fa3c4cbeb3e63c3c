"""A sine tone shaped by an attack/release envelope."""

from __future__ import annotations

from .audio_node import DEFAULT_BPM
from .envelope import AREnvelope
from .instrument import Instrument
from .note import Note
from .notes import note_to_frequency
from .sine_wave import SineWave

SECONDS_PER_MINUTE = 60.0


class ToneInstrument(Instrument):
    """Plays a sine wave for a note's duration, measured in beats."""

    def __init__(self, bpm: float = DEFAULT_BPM) -> None:
        super().__init__(bpm)
        self.sine = SineWave()
        self.envelope = AREnvelope(source=self.sine)
        self.time = 0.0

    @property
    def freq(self) -> float:
        """Frequency of the tone in Hz."""
        return self.sine.freq

    @freq.setter
    def freq(self, value: float) -> None:
        self.sine.freq = value

    @property
    def amplitude(self) -> float:
        """Peak amplitude of the tone."""
        return self.sine.amplitude

    @amplitude.setter
    def amplitude(self, value: float) -> None:
        self.sine.amplitude = value

    def start(self) -> None:
        self.envelope.source = self.sine
        self.envelope.sample_rate = self.sample_rate
        self.envelope.start()
        self.time = 0.0

    def generate(self) -> bool:
        valid = self.envelope.generate()
        self.frame = list(self.envelope.frame)
        self.time += self.sample_period
        return valid

    def set_note(self, note: Note) -> None:
        """Take the pitch and the duration in beats from the note's element."""
        if note.element is None:
            raise ValueError("note has no element to read attributes from")
        for name, value in note.element.attrib.items():
            if name == "duration":
                self.envelope.duration = float(value) * (SECONDS_PER_MINUTE / self.bpm)
            elif name == "note":
                self.freq = note_to_frequency(value)