"""
Hardware Abstraction Layer Protocol Definitions.
These are abstract base classes that each platform must implement.

The instrument only talks to the sound-producing device through these,
so the same core runs against:
- a mido output port on a desktop computer
- a recording mock in the tests
"""


class MidiOutputHAL:
    """Abstract interface for MIDI output."""

    def send_note_on(self, channel, note, velocity):
        """
        Send MIDI Note On message.

        Args:
            channel: MIDI channel 0-15
            note: MIDI note number 0-127
            velocity: Note velocity 0-127
        """
        raise NotImplementedError

    def send_note_off(self, channel, note, velocity=0):
        """
        Send MIDI Note Off message.

        Args:
            channel: MIDI channel 0-15
            note: MIDI note number 0-127
            velocity: Release velocity 0-127
        """
        raise NotImplementedError

    def send_control_change(self, channel, control, value):
        """
        Send MIDI Control Change message.

        Args:
            channel: MIDI channel 0-15
            control: CC number 0-127
            value: CC value 0-127
        """
        raise NotImplementedError

    def send_pitch_bend(self, channel, value):
        """
        Send MIDI Pitch Bend message.

        Args:
            channel: MIDI channel 0-15
            value: Bend amount -8192..8191 (0 = centre)
        """
        raise NotImplementedError

    def send_reset(self):
        """Send a System Reset message."""
        raise NotImplementedError

    def close(self):
        """Release the output device."""
        raise NotImplementedError

    def send_chord_on(self, channel, notes, velocity):
        """
        Convenience: send Note On for multiple notes.

        Args:
            channel: MIDI channel 0-15
            notes: List of MIDI note numbers
            velocity: Note velocity 0-127
        """
        for note in notes:
            self.send_note_on(channel, note, velocity)

    def send_chord_off(self, channel, notes, velocity=0):
        """
        Convenience: send Note Off for multiple notes.

        Args:
            channel: MIDI channel 0-15
            notes: List of MIDI note numbers
            velocity: Release velocity 0-127
        """
        for note in notes:
            self.send_note_off(channel, note, velocity)
