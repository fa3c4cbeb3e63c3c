import xml.etree.ElementTree as ET

import pytest

from synthie.piano_instrument import PianoInstrument
from synthie.synthesizer import Synthesizer

SCORE = """<?xml version="1.0"?>
<score bpm="120" beatspermeasure="4">
  <instrument instrument="ToneInstrument">
    <note measure="1" beat="2" duration="0.5" note="A4"/>
    <note measure="1" beat="1" duration="0.5" note="C4"/>
  </instrument>
  <instrument instrument="Reverb">
    <note wet="0.3" dry="0.7"/>
  </instrument>
</score>
"""


def _synth_from(tmp_path, text, rate=1000):
    path = tmp_path / "song.score"
    path.write_text(text)
    synth = Synthesizer()
    synth.sample_rate = rate
    synth.open_score(path)
    return synth


def _run(synth, limit=100000):
    synth.start()
    frames = []
    for _ in range(limit):
        more = synth.generate()
        frames.append(list(synth.frame))
        if not more:
            return frames
    raise AssertionError("synthesizer did not finish")


def test_open_score_loads_sorted_notes(tmp_path):
    synth = _synth_from(tmp_path, SCORE)
    assert [note.beat for note in synth.notes] == [0.0, 1.0]
    assert {note.instrument for note in synth.notes} == {"ToneInstrument"}


def test_effect_notes_configure_effects(tmp_path):
    synth = _synth_from(tmp_path, SCORE)
    assert synth.reverb.wet == 0.3
    assert synth.reverb.dry == 0.7
    assert len(synth.notes) == 2


def test_load_score_sets_tempo():
    synth = Synthesizer()
    synth.load_score(ET.fromstring('<score bpm="60" beatspermeasure="3"/>'))
    assert synth.bpm == 60
    assert synth.sec_per_beat == pytest.approx(1 / (60 / 60))
    assert synth.beats_per_measure == 3


def test_load_note_reads_reverb_flag():
    synth = Synthesizer()
    on = synth.load_note(ET.fromstring('<note measure="1" beat="1" reverb="true"/>'), "ToneInstrument")
    off = synth.load_note(ET.fromstring('<note measure="1" beat="1" reverb="0"/>'), "ToneInstrument")
    assert on.reverb is True
    assert off.reverb is False
    assert synth.notes == [on, off]


def test_bad_reverb_flag_raises():
    synth = Synthesizer()
    with pytest.raises(ValueError):
        synth.load_note(ET.fromstring('<note reverb="maybe"/>'), "ToneInstrument")


def test_unknown_instrument_is_skipped(tmp_path):
    text = '<score><instrument instrument="Kazoo"><note measure="1" beat="1" note="A4" duration="1"/></instrument></score>'
    synth = _synth_from(tmp_path, text)
    synth.start()
    assert synth.generate() is False
    assert synth.frame == [0.0, 0.0]


def test_later_measure_waits_for_its_time(tmp_path):
    text = (
        '<score bpm="120" beatspermeasure="4"><instrument instrument="ToneInstrument">'
        '<note measure="2" beat="1" duration="1" note="A4"/></instrument></score>'
    )
    synth = _synth_from(tmp_path, text, rate=100)
    synth.start()
    while not synth.instruments:
        assert synth.generate() is True
    assert synth.time >= 4 * 60 / 120
    assert synth.measure == 1


def test_piano_note_starts_piano(tmp_path):
    text = '<score><instrument instrument="PianoInstrument"><note measure="1" beat="1" duration="1" note="A4"/></instrument></score>'
    synth = _synth_from(tmp_path, text)
    synth.start()
    assert synth.generate() is True
    assert isinstance(synth.instruments[0], PianoInstrument)


def test_clear_and_start_reset_state(tmp_path):
    synth = _synth_from(tmp_path, SCORE)
    synth.start()
    synth.generate()
    synth.start()
    assert (synth.current_note, synth.measure, synth.beat, synth.time) == (0, 0, 0.0, 0.0)
    synth.clear()
    assert synth.notes == []
    assert synth.instruments == []


def test_non_score_root_loads_nothing(tmp_path):
    synth = _synth_from(tmp_path, '<music><instrument instrument="ToneInstrument"><note/></instrument></music>')
    assert synth.notes == []


def test_malformed_score_raises(tmp_path):
    path = tmp_path / "broken.score"
    path.write_text("<score><instrument>")
    with pytest.raises(ET.ParseError):
        Synthesizer().open_score(path)