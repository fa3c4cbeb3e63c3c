"""Frame-by-frame audio effects: reverb, ring modulation and chorus."""

from __future__ import annotations

import math
from collections.abc import Sequence
from xml.etree.ElementTree import Element

_TWO_PI = 2.0 * math.pi
_DEFAULT_RATE = 44100.0


class Reverb:
    """Feedback comb-filter reverb with four fixed-length delay lines."""

    DELAY_LENGTHS = (441, 353, 647, 907)

    def __init__(self) -> None:
        self.sample_rate = _DEFAULT_RATE
        self.feedback = 0.7
        self.wet = 0.5
        self.dry = 0.5
        self.delay_time = 1.0
        self._lines = [[0.0] * length for length in self.DELAY_LENGTHS]
        self._indices = [0] * len(self.DELAY_LENGTHS)

    def configure(self, element: Element) -> None:
        """Read ``wet``, ``dry`` and ``delay`` attributes from an element."""
        for name, value in element.attrib.items():
            if name == "wet":
                self.wet = float(value)
            elif name == "dry":
                self.dry = float(value)
            elif name == "delay":
                self.delay_time = float(value)

    def process(self, frame: Sequence[float]) -> list[float]:
        output = []
        for sample in frame:
            echoed = 0.0
            for i, line in enumerate(self._lines):
                index = self._indices[i]
                delayed = line[index]
                line[index] = sample + delayed * self.feedback
                echoed += delayed
                self._indices[i] = (index + 1) % len(line)
            output.append(sample * self.dry + echoed * self.wet)
        return output


class RingModulation:
    """Multiplies the signal by a sine carrier."""

    def __init__(self) -> None:
        self._sample_rate = _DEFAULT_RATE
        self._modulation_frequency = 440.0
        self.wet = 0.5
        self.dry = 0.5
        self._phase = 0.0
        self._update_increment()

    def _update_increment(self) -> None:
        self._phase_increment = _TWO_PI * self._modulation_frequency / self._sample_rate

    @property
    def sample_rate(self) -> float:
        return self._sample_rate

    @sample_rate.setter
    def sample_rate(self, rate: float) -> None:
        self._sample_rate = rate
        self._update_increment()

    @property
    def modulation_frequency(self) -> float:
        return self._modulation_frequency

    @modulation_frequency.setter
    def modulation_frequency(self, freq: float) -> None:
        self._modulation_frequency = freq
        self._update_increment()

    def configure(self, element: Element) -> None:
        """Read ``modulationFrequency``, ``wet`` and ``dry`` attributes from an element."""
        for name, value in element.attrib.items():
            if name == "modulationFrequency":
                self.modulation_frequency = float(value)
            elif name == "wet":
                self.wet = float(value)
            elif name == "dry":
                self.dry = float(value)

    def process(self, frame: Sequence[float]) -> list[float]:
        output = []
        for sample in frame:
            modulated = sample * math.sin(self._phase)
            output.append(sample * self.dry + modulated * self.wet)
            self._phase += self._phase_increment
            if self._phase >= _TWO_PI:
                self._phase -= _TWO_PI
        return output


class Chorus:
    """Delay line whose length is swept by a sine LFO."""

    def __init__(self) -> None:
        self._sample_rate = _DEFAULT_RATE
        self.wet = 0.5
        self.dry = 0.5
        self.delay_time = 0.03
        self.depth = 0.002
        self._rate = 0.25
        self._index = 0
        self._lfo_phase = 0.0
        self._line: list[float] = []
        self._update_increment()
        self._resize_line()

    def _update_increment(self) -> None:
        self._lfo_increment = _TWO_PI * self._rate / self._sample_rate

    def _resize_line(self) -> None:
        length = int((self.delay_time + self.depth) * self._sample_rate)
        if length < 1:
            raise ValueError("chorus delay line would be empty")
        self._line = self._line[:length] + [0.0] * (length - len(self._line))
        self._index %= length

    @property
    def sample_rate(self) -> float:
        return self._sample_rate

    @sample_rate.setter
    def sample_rate(self, rate: float) -> None:
        self._sample_rate = rate
        self._update_increment()
        self._resize_line()

    @property
    def rate(self) -> float:
        """LFO rate in Hz."""
        return self._rate

    @rate.setter
    def rate(self, rate: float) -> None:
        self._rate = rate
        self._update_increment()

    @property
    def line_length(self) -> int:
        return len(self._line)

    def configure(self, element: Element) -> None:
        """Read ``wet``, ``dry``, ``delay``, ``depth`` and ``rate`` attributes from an element."""
        for name, value in element.attrib.items():
            if name == "wet":
                self.wet = float(value)
            elif name == "dry":
                self.dry = float(value)
            elif name == "delay":
                self.delay_time = float(value)
            elif name == "depth":
                self.depth = float(value)
            elif name == "rate":
                self.rate = float(value)

    def process(self, frame: Sequence[float]) -> list[float]:
        output = []
        size = len(self._line)
        for sample in frame:
            current_delay = self.delay_time + self.depth * math.sin(self._lfo_phase)
            delay_samples = int(current_delay * self._sample_rate)
            delayed = self._line[(self._index - delay_samples) % size]
            self._line[self._index] = sample
            self._index = (self._index + 1) % size
            output.append(sample * self.dry + delayed * self.wet)
            self._lfo_phase += self._lfo_increment
            if self._lfo_phase >= _TWO_PI:
                self._lfo_phase -= _TWO_PI
        return output