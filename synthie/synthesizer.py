"""Score loading and frame-by-frame synthesis with an effects mix."""

from __future__ import annotations

import os
import xml.etree.ElementTree as ET
from xml.etree.ElementTree import Element

from .effects import Chorus, Reverb, RingModulation
from .instrument import Instrument
from .note import Note
from .piano_instrument import PianoInstrument
from .tone_instrument import ToneInstrument

_INSTRUMENTS: dict[str, type[Instrument]] = {
    "ToneInstrument": ToneInstrument,
    "PianoInstrument": PianoInstrument,
}

_DRY_MIX = 0.4
_EFFECT_MIX = 0.2


def _parse_bool(value: str) -> bool:
    text = value.strip().lower()
    if text == "true":
        return True
    if text == "false":
        return False
    try:
        return float(text) != 0
    except ValueError:
        raise ValueError(f"not a boolean value: {value!r}") from None


class Synthesizer:
    """Plays the notes of a score through instruments and global effects.

    After each call to ``generate`` the mixed output is in ``frame``.
    """

    def __init__(self) -> None:
        self.channels = 2
        self._sample_rate = 44100.0
        self._sample_period = 1.0 / self._sample_rate
        self.bpm = 120.0
        self.beats_per_measure = 4
        self.sec_per_beat = 0.5
        self.notes: list[Note] = []
        self.instruments: list[Instrument] = []
        self.frame: list[float] = [0.0] * self.channels
        self.current_note = 0
        self.measure = 0
        self.beat = 0.0
        self.time = 0.0
        self.reverb = Reverb()
        self.ring_modulation = RingModulation()
        self.chorus = Chorus()
        self.reverb.sample_rate = self._sample_rate
        self.ring_modulation.sample_rate = self._sample_rate
        self.chorus.sample_rate = self._sample_rate

    @property
    def sample_rate(self) -> float:
        return self._sample_rate

    @sample_rate.setter
    def sample_rate(self, rate: float) -> None:
        self._sample_rate = rate
        self._sample_period = 1.0 / rate

    @property
    def sample_period(self) -> float:
        return self._sample_period

    def start(self) -> None:
        """Rewind to the beginning of the score."""
        self.instruments.clear()
        self.current_note = 0
        self.measure = 0
        self.beat = 0.0
        self.time = 0.0
        self.reverb.sample_rate = self.sample_rate

    def _start_due_notes(self) -> None:
        while self.current_note < len(self.notes):
            note = self.notes[self.current_note]
            if note.measure > self.measure:
                break
            if note.measure == self.measure and note.beat > self.beat:
                break
            factory = _INSTRUMENTS.get(note.instrument)
            if factory is not None:
                instrument = factory(self.bpm)
                instrument.sample_rate = self.sample_rate
                instrument.set_note(note)
                instrument.start()
                self.instruments.append(instrument)
            self.current_note += 1

    def generate(self) -> bool:
        """Produce one frame into ``frame``; return False once the score is over."""
        self._start_due_notes()

        dry = [0.0] * self.channels
        still_playing = []
        for instrument in self.instruments:
            if instrument.generate():
                for c in range(self.channels):
                    dry[c] += instrument.frame[c]
                still_playing.append(instrument)
        self.instruments = still_playing

        wet = self.reverb.process(dry)
        ring = self.ring_modulation.process(dry)
        chorus = self.chorus.process(dry)
        self.frame = [
            d * _DRY_MIX + (w + r + ch) * _EFFECT_MIX
            for d, w, r, ch in zip(dry, wet, ring, chorus)
        ]

        self.time += self.sample_period
        self.beat += self.sample_period / self.sec_per_beat
        if self.beat > self.beats_per_measure:
            self.beat -= self.beats_per_measure
            self.measure += 1

        return bool(self.instruments) or self.current_note < len(self.notes)

    def clear(self) -> None:
        """Forget all notes and playing instruments."""
        self.instruments.clear()
        self.notes.clear()

    def open_score(self, path: str | os.PathLike[str]) -> None:
        """Load a score file, replacing whatever was loaded before."""
        self.clear()
        root = ET.parse(path).getroot()
        if root.tag == "score":
            self.load_score(root)
        self.notes.sort(key=Note.sort_key)

    def load_score(self, element: Element) -> None:
        """Read tempo settings and the instruments of a ``<score>`` element."""
        for name, value in element.attrib.items():
            if name == "bpm":
                self.bpm = float(value)
                self.sec_per_beat = 1 / (self.bpm / 60)
            elif name == "beatspermeasure":
                self.beats_per_measure = int(value)
        for child in element:
            if child.tag == "instrument":
                self.load_instrument(child)

    def load_instrument(self, element: Element) -> None:
        """Read the notes of an ``<instrument>`` element; effect notes configure effects."""
        instrument = element.attrib.get("instrument", "")
        for child in element:
            if child.tag != "note":
                continue
            if instrument == "Reverb":
                self.reverb.configure(child)
            elif instrument == "RingModulation":
                self.ring_modulation.configure(child)
            elif instrument == "Chorus":
                self.chorus.configure(child)
            else:
                self.load_note(child, instrument)

    def load_note(self, element: Element, instrument: str) -> Note:
        """Append a note read from a ``<note>`` element and return it."""
        note = Note.from_element(element, instrument)
        reverb = element.attrib.get("reverb")
        if reverb is not None:
            note.reverb = _parse_bool(reverb)
        self.notes.append(note)
        return note