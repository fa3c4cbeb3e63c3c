import xml.etree.ElementTree as ET

import pytest

from synthie.effects import Chorus, Reverb, RingModulation


def _mono_impulse(effect, count):
    return [effect.process([1.0 if i == 0 else 0.0])[0] for i in range(count)]


def test_reverb_silence_stays_silent():
    reverb = Reverb()
    for _ in range(2000):
        assert reverb.process([0.0, 0.0]) == [0.0, 0.0]


def test_reverb_first_sample_is_dry_only():
    reverb = Reverb()
    assert reverb.process([1.0]) == [0.5]


def test_reverb_echoes_at_delay_lengths():
    out = _mono_impulse(Reverb(), 500)
    assert out[353] == 0.5
    assert out[441] == 0.5
    assert all(v == 0.0 for v in out[1:353])


def test_reverb_configure_dry_only_is_identity():
    reverb = Reverb()
    reverb.configure(ET.fromstring('<note wet="0" dry="1" delay="2"/>'))
    assert reverb.delay_time == 2.0
    for value in (0.3, -0.2, 0.9, 0.1):
        assert reverb.process([value, value]) == [value, value]


def test_reverb_configure_bad_value():
    with pytest.raises(ValueError):
        Reverb().configure(ET.fromstring('<note wet="loud"/>'))


def test_ring_first_sample_is_dry_only():
    ring = RingModulation()
    assert ring.process([0.8]) == [pytest.approx(0.4)]


def test_ring_wet_only_bounded_by_input():
    ring = RingModulation()
    ring.configure(ET.fromstring('<note wet="1" dry="0" modulationFrequency="1000"/>'))
    assert ring.modulation_frequency == 1000.0
    for _ in range(300):
        left, right = ring.process([0.5, -0.5])
        assert abs(left) <= 0.5
        assert abs(right) <= 0.5


def test_ring_dry_only_is_identity():
    ring = RingModulation()
    ring.configure(ET.fromstring('<note wet="0" dry="1"/>'))
    for value in (0.1, 0.7, -0.4):
        assert ring.process([value]) == [value]


def test_chorus_dry_only_is_identity():
    chorus = Chorus()
    chorus.configure(ET.fromstring('<note wet="0" dry="1" rate="2" depth="0.001"/>'))
    assert chorus.rate == 2.0
    assert chorus.depth == 0.001
    for value in (0.2, -0.6, 0.9):
        assert chorus.process([value, value]) == [value, value]


def test_chorus_delays_impulse():
    chorus = Chorus()
    chorus.configure(ET.fromstring('<note wet="1" dry="0"/>'))
    out = _mono_impulse(chorus, chorus.line_length)
    assert all(v == 0.0 for v in out[:1000])
    assert max(out) == 1.0


def test_chorus_line_follows_sample_rate():
    chorus = Chorus()
    before = chorus.line_length
    chorus.sample_rate = 22050.0
    assert chorus.line_length < before
    assert chorus.process([0.0]) == [0.0]