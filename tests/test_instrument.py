import pytest

from synthie.instrument import Instrument


class _Silent(Instrument):
    def __init__(self, *args):
        super().__init__(*args)
        self.note = None

    def start(self):
        pass

    def generate(self):
        return False

    def set_note(self, note):
        self.note = note


def test_abstract_instrument_cannot_be_created():
    with pytest.raises(TypeError):
        Instrument()


def test_default_sends_are_dry_only():
    inst = _Silent()
    assert Instrument.send(inst, 0) == 1.0
    assert Instrument.send(inst, 1) == 0.0


def test_send_out_of_range():
    with pytest.raises(IndexError):
        Instrument.send(_Silent(), 2)


def test_bpm_is_stored():
    inst = _Silent()
    Instrument.__init__(inst, 90.0)
    assert inst.bpm == 90.0
    Instrument.__init__(inst)
    assert inst.bpm == 120.0


def test_set_note_is_called():
    inst = _Silent()
    inst.set_note("marker")
    assert inst.note == "marker"
    assert inst.generate() is False
    assert Instrument.send(inst, 0) == 1.0