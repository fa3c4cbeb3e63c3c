"""Bounded store of recent audio samples for waveform displays."""

from __future__ import annotations

from collections.abc import Callable, Sequence

View = Callable[[], None]


class WaveformBuffer:
    """Accumulates up to ``capacity`` seconds of samples, one list per channel.

    Views are callables invoked whenever the display should refresh: once per
    second of audio received, when the buffer fills, and at ``end``.
    """

    def __init__(self, capacity: float = 10.0) -> None:
        self.capacity = capacity
        self._channels = 0
        self._sample_rate = 44100.0
        self._redraw_rate = 1
        self._capacity_samples = 0
        self._count = 0
        self._buffer: list[list[int]] = []
        self._views: set[View] = set()

    @property
    def channels(self) -> int:
        return self._channels

    @property
    def sample_rate(self) -> float:
        return self._sample_rate

    @property
    def capacity_samples(self) -> int:
        """How many frames the buffer holds, fixed when ``start`` is called."""
        return self._capacity_samples

    @property
    def count(self) -> int:
        """Frames stored since the last ``start``."""
        return self._count

    @property
    def waveform(self) -> tuple[tuple[int, ...], ...]:
        """Stored samples, one tuple per channel."""
        return tuple(tuple(channel) for channel in self._buffer)

    def start(self, channels: int, sample_rate: float) -> None:
        """Empty the buffer and prepare it for audio of the given format."""
        if channels < 0:
            raise ValueError(f"channel count must not be negative: {channels}")
        if int(sample_rate) < 1:
            raise ValueError(f"sample rate must be at least 1: {sample_rate}")
        self._channels = channels
        self._sample_rate = sample_rate
        self._buffer = [[] for _ in range(channels)]
        self._redraw_rate = int(sample_rate)
        self._capacity_samples = int(sample_rate * self.capacity)
        self._count = 0

    def add_frame(self, frame: Sequence[int]) -> None:
        """Store one frame if there is room; extra frames are dropped."""
        if self._count >= self._capacity_samples:
            return
        for channel, sample in zip(self._buffer, frame[: self._channels]):
            channel.append(sample)
        self._count += 1
        if self._count % self._redraw_rate == 0 or self._count == self._capacity_samples:
            self.update_all_views()

    def end(self) -> None:
        self.update_all_views()

    def add_view(self, view: View) -> None:
        self._views.add(view)

    def remove_view(self, view: View) -> None:
        self._views.discard(view)

    def update_all_views(self) -> None:
        for view in list(self._views):
            view()