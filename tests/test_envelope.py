import pytest

from synthie.audio_node import AudioNode
from synthie.envelope import AREnvelope


class _Constant(AudioNode):
    def __init__(self):
        super().__init__()
        self.started = False

    def start(self):
        self.started = True

    def generate(self):
        self.frame = [1.0, 1.0]
        return True


def _collect(env):
    env.start()
    values = []
    while True:
        more = env.generate()
        values.append(env.frame[0])
        if not more:
            return values


def test_start_without_source_raises():
    with pytest.raises(ValueError):
        AREnvelope().start()


def test_start_propagates_rate_to_source():
    source = _Constant()
    env = AREnvelope(source)
    env.sample_rate = 100.0
    env.start()
    assert source.started is True
    assert source.sample_rate == 100.0


def test_shape_rises_then_falls():
    env = AREnvelope(_Constant())
    env.sample_rate = 100.0
    values = _collect(env)
    assert 10 <= len(values) <= 11
    assert values[0] == 0.0
    assert all(0.0 <= v <= 1.0 + 1e-9 for v in values)
    peak = values.index(max(values))
    rising = values[: peak + 1]
    falling = values[peak:]
    assert rising == sorted(rising)
    assert falling == sorted(falling, reverse=True)


def test_sustain_is_full_level():
    env = AREnvelope(_Constant(), duration=1.0, attack=0.1, release=0.1)
    env.sample_rate = 100.0
    values = _collect(env)
    assert values[50] == 1.0
    assert values[-1] < values[50]


def test_longer_duration_gives_more_samples():
    short = AREnvelope(_Constant(), duration=0.2)
    long = AREnvelope(_Constant(), duration=0.4)
    short.sample_rate = long.sample_rate = 100.0
    assert len(_collect(long)) > len(_collect(short))