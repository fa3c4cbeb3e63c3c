"""A single note read from a score."""

from __future__ import annotations

from dataclasses import dataclass, field
from xml.etree.ElementTree import Element


@dataclass
class Note:
    """A note with its zero-based measure and beat and the element it came from."""

    instrument: str
    measure: int = 0
    beat: float = 0.0
    element: Element | None = field(default=None, compare=False, repr=False)
    reverb: bool = False

    @classmethod
    def from_element(cls, element: Element, instrument: str) -> "Note":
        """Build a note from a ``<note>`` element; score measures and beats count from 1."""
        note = cls(instrument=instrument, element=element)
        for name, value in element.attrib.items():
            if name == "measure":
                note.measure = int(value) - 1
            elif name == "beat":
                note.beat = float(value) - 1
        return note

    def sort_key(self) -> tuple[int, float]:
        return (self.measure, self.beat)

    def __lt__(self, other: "Note") -> bool:
        if not isinstance(other, Note):
            return NotImplemented
        return self.sort_key() < other.sort_key()