#!/usr/bin/env python3
"""
Desktop computer Hardware Implementation.
MIDI output through mido (python-rtmidi backend) to a hardware interface,
a software synth, or a virtual port other programs can listen on.

Run directly to list the output ports and check one can be opened:
    python src/plat_computer/hal_computer.py [port name]
"""
import logging
import sys
from contextlib import contextmanager

import mido

from keys_harmony.hal_protocol import MidiOutputHAL
from keys_harmony.instrument import Instrument
from keys_harmony.constants import Midi as MidiConst

logger = logging.getLogger(__name__)


class MidoMidiOutputHAL(MidiOutputHAL):
    """MIDI output implementation on an open mido output port."""

    def __init__(self, port):
        """
        Args:
            port: mido output port (anything with send() and close())
        """
        self.port = port

    def send_note_on(self, channel, note, velocity):
        self.port.send(mido.Message("note_on", channel=channel, note=note, velocity=velocity))

    def send_note_off(self, channel, note, velocity=0):
        self.port.send(mido.Message("note_off", channel=channel, note=note, velocity=velocity))

    def send_control_change(self, channel, control, value):
        self.port.send(mido.Message("control_change", channel=channel, control=control, value=value))

    def send_pitch_bend(self, channel, value):
        self.port.send(mido.Message("pitchwheel", channel=channel, pitch=value))

    def send_reset(self):
        self.port.send(mido.Message("reset"))

    def close(self):
        self.port.close()


def list_outputs():
    """List all available MIDI output ports."""
    outputs = mido.get_output_names()
    if not outputs:
        print("No MIDI output ports found!")
        return []
    print("Available MIDI outputs:")
    for i, name in enumerate(outputs):
        print(f"  [{i}] {name}")
    return outputs


def open_midi_output(port_name=None, virtual=False):
    """
    Open a MIDI output device.

    Args:
        port_name: Output port name; first available port when None
        virtual: Create a virtual port instead (named port_name, or
                 "keys-harmony-output")

    Returns:
        MidoMidiOutputHAL

    Raises:
        OSError: No port available or the port could not be opened
    """
    if virtual:
        port_name = port_name or MidiConst.VIRTUAL_PORT_NAME
        port = mido.open_output(port_name, virtual=True)
    else:
        if port_name is None:
            outputs = mido.get_output_names()
            if not outputs:
                raise OSError("No MIDI output ports found")
            port_name = outputs[0]
        port = mido.open_output(port_name)
    logger.info("Opened MIDI output: %s", port_name)
    return MidoMidiOutputHAL(port)


@contextmanager
def instrument_session(port_name=None, virtual=False, **instrument_options):
    """
    Open the device, start an Instrument on it, and always close it.

    Args:
        port_name: Output port name (see open_midi_output)
        virtual: Create a virtual output port
        **instrument_options: midi_channel, velocity, key for the Instrument

    Yields:
        Started Instrument
    """
    midi_output = open_midi_output(port_name, virtual=virtual)
    instrument = Instrument(midi_output, **instrument_options)
    try:
        instrument.start()
        yield instrument
    finally:
        instrument.close()


def main(port_name=None):
    """List the outputs and check the instrument starts on one of them."""
    list_outputs()
    try:
        with instrument_session(port_name) as instrument:
            print(f"\nInstrument ready in {instrument.get_current_tonality()}")
    except OSError as e:
        print(f"Error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format="%(name)s - %(levelname)s - %(message)s")
    # Optional: pass port name as command line argument
    main(sys.argv[1] if len(sys.argv) > 1 else None)
