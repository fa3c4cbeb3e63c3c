"""Command-line front end: render a score or a test tone to a WAVE file."""

from __future__ import annotations

import argparse
import math
import os
import sys
import xml.etree.ElementTree as ET
from collections.abc import Iterator, Sequence

from .synthesizer import Synthesizer
from .wavefile import WaveError, WaveWriter

NUM_CHANNELS = 2
SAMPLE_RATE = 44100.0
TONE_AMPLITUDE = 3200
SHORT_MIN = -32768
SHORT_MAX = 32767

Frame = tuple[int, int]


def range_bound(value: float) -> int:
    """Clamp a sample to the 16-bit range, truncating toward zero."""
    if value < SHORT_MIN:
        return SHORT_MIN
    if value > SHORT_MAX:
        return SHORT_MAX
    return int(value)


def tone_frames(
    frequency: float = 1000.0,
    duration: float = 5.0,
    sample_rate: float = SAMPLE_RATE,
) -> Iterator[Frame]:
    """Yield stereo 16-bit frames of a sine tone of the given length in seconds."""
    if sample_rate <= 0:
        raise ValueError(f"sample rate must be positive: {sample_rate}")
    period = 1.0 / sample_rate
    time = 0.0
    while time < duration:
        sample = int(TONE_AMPLITUDE * math.sin(time * 2 * math.pi * frequency))
        yield (sample, sample)
        time += period


def synthesizer_frames(synthesizer: Synthesizer) -> Iterator[Frame]:
    """Start the synthesizer and yield its output as stereo 16-bit frames."""
    synthesizer.start()
    while synthesizer.generate():
        left, right = synthesizer.frame[0], synthesizer.frame[1]
        yield (range_bound(left * SHORT_MAX), range_bound(right * SHORT_MAX))


def _write_frames(frames: Iterator[Frame], output_path: str | os.PathLike[str], sample_rate: float) -> int:
    count = 0
    with WaveWriter(output_path, num_channels=NUM_CHANNELS, sample_rate=sample_rate) as writer:
        for frame in frames:
            writer.write_frame(frame)
            count += 1
    return count


def render_score(
    score_path: str | os.PathLike[str],
    output_path: str | os.PathLike[str],
) -> int:
    """Synthesize a score file into a stereo WAVE file; return the frame count."""
    synthesizer = Synthesizer()
    synthesizer.channels = NUM_CHANNELS
    synthesizer.sample_rate = SAMPLE_RATE
    synthesizer.open_score(score_path)
    return _write_frames(synthesizer_frames(synthesizer), output_path, SAMPLE_RATE)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="synthie", description="Render audio to WAVE files.")
    commands = parser.add_subparsers(dest="command", required=True)

    render = commands.add_parser("render", help="synthesize a score file")
    render.add_argument("score", help="score file to read")
    render.add_argument("output", help="WAVE file to write")

    tone = commands.add_parser("tone", help="generate a sine test tone")
    tone.add_argument("output", help="WAVE file to write")
    tone.add_argument("--frequency", type=float, default=1000.0, help="tone frequency in Hz")
    tone.add_argument("--duration", type=float, default=5.0, help="length in seconds")
    tone.add_argument("--sample-rate", type=float, default=SAMPLE_RATE, help="samples per second")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)
    try:
        if args.command == "render":
            count = render_score(args.score, args.output)
        else:
            count = _write_frames(
                tone_frames(args.frequency, args.duration, args.sample_rate),
                args.output,
                args.sample_rate,
            )
    except (WaveError, ET.ParseError, OSError, ValueError) as exc:
        print(f"synthie: {exc}", file=sys.stderr)
        return 1
    print(f"wrote {count} frames to {args.output}")
    return 0


if __name__ == "__main__":
    sys.exit(main())