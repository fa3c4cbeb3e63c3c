# synthie

A small software synthesizer. It reads a musical score written in XML,
plays the notes on simple instruments, runs the mix through a few effects
and writes the result as a 16-bit stereo WAVE file at 44100 Hz. It can
also write a plain sine test tone.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Command line

The package installs a `synthie` command with two subcommands:

```
synthie render song.score song.wav
synthie tone tone.wav --frequency 1000 --duration 5 --sample-rate 44100
```

- `render SCORE OUTPUT` synthesizes a score file into a stereo WAVE file.
- `tone OUTPUT` writes a stereo sine tone of amplitude 3200.
  `--frequency` (Hz, default 1000), `--duration` (seconds, default 5) and
  `--sample-rate` (default 44100) set its shape.

On success the command prints how many frames it wrote and exits with 0.
If the score cannot be parsed or a file cannot be read or written, it
prints the error and exits with 1. `synthie --help` lists the options.

## Scores

A score is an XML document whose top element is `<score>`. The score sets
the tempo (`bpm`, default 120) and the beats per measure
(`beatspermeasure`, default 4); each `<instrument>` element names, in its
`instrument` attribute, what its `<note>` children are played on.

```xml
<score bpm="120" beatspermeasure="4">
  <instrument instrument="ToneInstrument">
    <note measure="1" beat="1" duration="1" note="A4"/>
    <note measure="1" beat="2" duration="1" note="C#5"/>
    <note measure="2" beat="1" duration="2" note="E4"/>
  </instrument>
  <instrument instrument="Reverb">
    <note wet="0.4" dry="0.6"/>
  </instrument>
</score>
```

Measures and beats count from 1. Durations are in beats, so their length
in seconds follows from `bpm`. Note names run from `A0` to `C8`, with
sharps written `#` and flats `b` (`F#3`, `Bb2`); an unknown name gives a
frequency of 0. A note may also carry a `reverb` attribute
(`true`/`false` or a number), which is stored on the note.

Instruments:

- `ToneInstrument` – a sine tone shaped by a linear attack/release
  envelope, lasting the note's duration.
- `PianoInstrument` – a plucked-string tone from a decaying delay line
  seeded with noise. Its `duration` is read but not applied: the note
  keeps sounding, so a score that uses it never finishes rendering. An
  unknown note name raises `ValueError`.

Notes for any other instrument name are loaded but produce no sound.

Effects are configured by a `<note>` element inside an instrument of that
name and apply to the whole mix. The output is 0.4 × the dry mix plus
0.2 × each of the reverb, ring-modulation and chorus outputs.

- `Reverb` – attributes `wet`, `dry`, `delay` (`delay` is stored but the
  four delay lines keep their fixed lengths).
- `RingModulation` – attributes `modulationFrequency`, `wet`, `dry`.
- `Chorus` – attributes `wet`, `dry`, `delay`, `depth`, `rate`.

## Library use

Render a score file straight to a WAVE file:

```python
from synthie.cli import render_score

frames = render_score("song.score", "song.wav")
```

Look up the frequency of a note name:

```python
from synthie.notes import note_to_frequency

note_to_frequency("A4")   # 440.0
```

Read a WAVE file frame by frame:

```python
from synthie.wavefile import WaveReader

with WaveReader("song.wav") as reader:
    for frame in reader:
        ...
```

The building blocks live in their own modules:

- `synthie.synthesizer.Synthesizer` loads scores (`open_score`) and plays
  them one frame per `generate()` call, leaving the mix in `frame`.
- `synthie.wavefile.WaveReader` and `synthie.wavefile.WaveWriter` read and
  write 8- or 16-bit PCM WAVE files; problems raise `WaveError`.
- `synthie.effects` holds `Reverb`, `RingModulation` and `Chorus`.
- `synthie.sine_wave.SineWave`, `synthie.envelope.AREnvelope`,
  `synthie.tone_instrument.ToneInstrument` and
  `synthie.piano_instrument.PianoInstrument` generate audio frame by frame.
- `synthie.waveform_buffer.WaveformBuffer` keeps up to a set number of
  seconds of samples and calls registered view callables to refresh.

## What it does not do

synthie only writes WAVE files. It does not play audio through a sound
device, has no window or waveform display of its own, and does not load
or play recorded sound samples.