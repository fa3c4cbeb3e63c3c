"""Reading and writing PCM WAVE files frame by frame."""

from __future__ import annotations

import os
import struct
from collections.abc import Iterator, Sequence
from types import TracebackType
from typing import BinaryIO

PCM_FORMAT = 1
_FMT_CHUNK_SIZE = 16
_SUPPORTED_SAMPLE_SIZES = (8, 16)


class WaveError(Exception):
    """Raised when a WAVE file cannot be opened, read or written."""


def _bytes_per_sample(sample_size: int) -> int:
    return (sample_size + 7) // 8


class WaveReader:
    """Reads audio frames from a PCM WAVE file.

    Frames come back as tuples of signed integers, one per channel.
    """

    def __init__(self, path: str | os.PathLike[str]) -> None:
        try:
            self._file: BinaryIO = open(path, "rb")
        except OSError as exc:
            raise WaveError(f"Unable to open file {os.fspath(path)} for reading.") from exc
        self.num_channels = 0
        self.sample_rate = 0.0
        self.sample_size = 0
        self.num_sample_frames = 0
        self.current_frame = 0
        self._sound_start = 0
        try:
            self._parse_headers()
        except BaseException:
            self._file.close()
            raise

    @property
    def _frame_bytes(self) -> int:
        return self.num_channels * _bytes_per_sample(self.sample_size)

    def _parse_headers(self) -> None:
        riff = self._file.read(12)
        if len(riff) < 12 or riff[:4] != b"RIFF" or riff[8:12] != b"WAVE":
            raise WaveError("File is not a valid Wave file")

        sound_start: int | None = None
        have_format = False
        while True:
            header = self._file.read(8)
            if len(header) < 8:
                break
            chunk_id = header[:4]
            (chunk_size,) = struct.unpack("<I", header[4:])
            after_chunk = self._file.tell() + chunk_size

            if chunk_id == b"fmt ":
                body = self._file.read(_FMT_CHUNK_SIZE)
                if len(body) < _FMT_CHUNK_SIZE:
                    raise WaveError("Error reading Wave file.")
                fmt_type, channels, rate, _byte_rate, _block_align, bits = struct.unpack(
                    "<HHIIHH", body
                )
                if fmt_type != PCM_FORMAT:
                    raise WaveError("Only PCM WAVE files are supported")
                if channels < 1:
                    raise WaveError("Wave file declares no audio channels")
                if bits not in _SUPPORTED_SAMPLE_SIZES:
                    raise WaveError(f"Unsupported sample size: {bits} bits")
                self.num_channels = channels
                self.sample_rate = float(rate)
                self.sample_size = bits
                have_format = True
            elif chunk_id == b"data":
                if not have_format:
                    raise WaveError("Wave data chunk comes before its format chunk")
                sound_start = self._file.tell()
                self.num_sample_frames = chunk_size // self._frame_bytes

            self._file.seek(after_chunk)

        if sound_start is None:
            raise WaveError("Unable to find sound data in Wave file.")
        self._sound_start = sound_start
        self.seek_frame(0)

    def read_frame(self) -> tuple[int, ...] | None:
        """Return the next frame, or None once the sound data is exhausted."""
        if self.current_frame >= self.num_sample_frames:
            return None
        data = self._file.read(self._frame_bytes)
        if len(data) < self._frame_bytes:
            return None
        self.current_frame += 1
        if self.sample_size == 16:
            return struct.unpack(f"<{self.num_channels}h", data)
        return struct.unpack(f"{self.num_channels}b", data)

    def seek_frame(self, frame: int) -> None:
        """Position the reader at the given frame of the sound data."""
        if frame < 0:
            raise ValueError(f"frame must not be negative: {frame}")
        self.current_frame = frame
        self._file.seek(self._sound_start + frame * self._frame_bytes)

    def rewind(self) -> None:
        self.seek_frame(0)

    def close(self) -> None:
        self._file.close()

    def __iter__(self) -> Iterator[tuple[int, ...]]:
        while (frame := self.read_frame()) is not None:
            yield frame

    def __enter__(self) -> "WaveReader":
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()


class WaveWriter:
    """Writes audio frames to a PCM WAVE file.

    The format may be changed until the first frame is written; the header
    is written then, and its lengths are filled in on ``close``.
    """

    def __init__(
        self,
        path: str | os.PathLike[str],
        num_channels: int = 1,
        sample_rate: float = 44100.0,
        sample_size: int = 16,
    ) -> None:
        self.num_channels = num_channels
        self.sample_rate = sample_rate
        self.sample_size = sample_size
        self.frames_written = 0
        self._started = False
        self._len_loc = 0
        try:
            self._file: BinaryIO = open(path, "wb")
        except OSError as exc:
            raise WaveError(f"Unable to open file {os.fspath(path)} for writing.") from exc
        self._open = True

    @property
    def closed(self) -> bool:
        return not self._open

    def _write_headers(self) -> None:
        if self.sample_size not in _SUPPORTED_SAMPLE_SIZES:
            raise WaveError(f"Unsupported sample size: {self.sample_size} bits")
        if self.num_channels < 1:
            raise WaveError("A Wave file needs at least one channel")
        self._started = True

        bytes_per = _bytes_per_sample(self.sample_size)
        rate = int(self.sample_rate)
        out = self._file
        out.write(b"RIFF" + struct.pack("<I", 0) + b"WAVE")
        out.write(b"fmt " + struct.pack("<I", _FMT_CHUNK_SIZE))
        out.write(
            struct.pack(
                "<HHIIHH",
                PCM_FORMAT,
                self.num_channels,
                rate,
                rate * self.num_channels * bytes_per,
                self.num_channels * bytes_per,
                self.sample_size,
            )
        )
        self._len_loc = out.tell()
        out.write(b"data" + struct.pack("<I", 0))
        self.frames_written = 0

    def write_frame(self, frame: Sequence[int]) -> None:
        """Write one frame; only the first ``num_channels`` samples are used."""
        if not self._open:
            raise WaveError("Wave file is closed")
        if len(frame) < self.num_channels:
            raise ValueError(
                f"frame has {len(frame)} samples, {self.num_channels} channels expected"
            )
        if not self._started:
            self._write_headers()
        width = _bytes_per_sample(self.sample_size)
        mask = (1 << (8 * width)) - 1
        self._file.write(
            b"".join((int(sample) & mask).to_bytes(width, "little") for sample in frame[: self.num_channels])
        )
        self.frames_written += 1

    def close(self) -> None:
        """Fill in the chunk lengths and close the file."""
        if not self._open:
            return
        try:
            if not self._started:
                self._write_headers()
            file_length = self._file.tell()
            self._file.seek(self._len_loc + 4)
            self._file.write(struct.pack("<I", file_length - self._len_loc - 8))
            self._file.seek(4)
            self._file.write(struct.pack("<I", file_length - 8))
        finally:
            self._open = False
            self._file.close()

    def __enter__(self) -> "WaveWriter":
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()