"""
Tests for the desktop mido MIDI output.
A fake port stands in for the device, so no MIDI interface is needed.

Run with: python test/test_hal_computer.py
     or: pytest
"""
import os
import sys

TEST_DIR = os.path.dirname(os.path.abspath(__file__))
sys.path.insert(0, os.path.join(TEST_DIR, "..", "src", "lib"))
sys.path.insert(0, os.path.join(TEST_DIR, "..", "src"))
sys.path.insert(0, TEST_DIR)

import mido

from plat_computer import hal_computer
from plat_computer.hal_computer import (
    MidoMidiOutputHAL,
    instrument_session,
    open_midi_output,
)
from mock_hal import FakeMidoPort


class patched_mido:
    """Swap mido's port functions for fakes within a with-block."""

    def __init__(self, output_names):
        self.output_names = output_names
        self.opened = []

    def open_output(self, name=None, virtual=False):
        port = FakeMidoPort(name, virtual)
        self.opened.append(port)
        return port

    def get_output_names(self):
        return list(self.output_names)

    def __enter__(self):
        self._saved = (hal_computer.mido.open_output, hal_computer.mido.get_output_names)
        hal_computer.mido.open_output = self.open_output
        hal_computer.mido.get_output_names = self.get_output_names
        return self

    def __exit__(self, *exc_info):
        hal_computer.mido.open_output, hal_computer.mido.get_output_names = self._saved
        return False


class TestMidoMidiOutput:
    """Tests for message translation."""

    def test_note_messages(self):
        port = FakeMidoPort()
        midi = MidoMidiOutputHAL(port)
        midi.send_note_on(0, 60, 64)
        midi.send_note_off(0, 60)
        assert port.messages == [
            mido.Message("note_on", channel=0, note=60, velocity=64),
            mido.Message("note_off", channel=0, note=60, velocity=0),
        ]

    def test_chord_on(self):
        port = FakeMidoPort()
        midi = MidoMidiOutputHAL(port)
        midi.send_chord_on(1, [48, 60, 64], 64)
        assert [msg.note for msg in port.messages] == [48, 60, 64]
        assert all(msg.type == "note_on" and msg.channel == 1 for msg in port.messages)

    def test_control_and_pitch(self):
        port = FakeMidoPort()
        midi = MidoMidiOutputHAL(port)
        midi.send_control_change(0, 7, 100)
        midi.send_pitch_bend(0, 2000)
        midi.send_reset()
        assert port.messages[0] == mido.Message("control_change", channel=0, control=7, value=100)
        assert port.messages[1] == mido.Message("pitchwheel", channel=0, pitch=2000)
        assert port.messages[2].type == "reset"

    def test_close(self):
        port = FakeMidoPort()
        MidoMidiOutputHAL(port).close()
        assert port.closed


class TestOpenOutput:
    """Tests for opening ports and instrument sessions."""

    def test_opens_first_port(self):
        with patched_mido(["Synth A", "Synth B"]) as fake:
            midi = open_midi_output()
        assert midi.port.name == "Synth A"
        assert not midi.port.virtual
        assert fake.opened == [midi.port]

    def test_opens_named_port(self):
        with patched_mido(["Synth A", "Synth B"]):
            midi = open_midi_output("Synth B")
        assert midi.port.name == "Synth B"

    def test_opens_virtual_port(self):
        with patched_mido([]):
            midi = open_midi_output(virtual=True)
        assert midi.port.name == "keys-harmony-output"
        assert midi.port.virtual

    def test_no_ports_is_an_error(self):
        with patched_mido([]):
            try:
                open_midi_output()
            except OSError:
                pass
            else:
                raise AssertionError("Expected OSError with no output ports")

    def test_session_starts_and_closes(self):
        with patched_mido(["Synth A"]) as fake:
            with instrument_session(key=62) as instrument:
                assert instrument.get_current_tonality() == "D"
                label = instrument.play_chord(5)
        port = fake.opened[0]
        assert label.label == "D: V"
        assert port.closed
        # start() silences all 128 notes and resets before anything else
        assert [msg.note for msg in port.messages[:128]] == list(range(128))
        assert port.messages[128].type == "reset"

    def test_session_closes_on_error(self):
        with patched_mido(["Synth A"]) as fake:
            try:
                with instrument_session():
                    raise RuntimeError("handler failed")
            except RuntimeError:
                pass
        assert fake.opened[0].closed


def run_tests():
    """Run all tests and report results."""
    test_classes = [TestMidoMidiOutput, TestOpenOutput]
    passed = 0
    failed = 0

    for test_class in test_classes:
        instance = test_class()
        print("")
        print(test_class.__name__)
        print("-" * 40)

        for method_name in dir(instance):
            if method_name.startswith("test_"):
                try:
                    getattr(instance, method_name)()
                    print("  [OK] " + method_name)
                    passed += 1
                except AssertionError as e:
                    print("  [FAIL] " + method_name + ": " + str(e))
                    failed += 1
                except Exception as e:
                    print("  [ERROR] " + method_name + ": " + str(e))
                    failed += 1

    print("")
    print("=" * 40)
    print("Results: " + str(passed) + " passed, " + str(failed) + " failed")
    return failed == 0


if __name__ == "__main__":
    success = run_tests()
    sys.exit(0 if success else 1)
