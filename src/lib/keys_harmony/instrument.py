"""
Keys Harmony instrument.
Ties together chord selection and the MIDI output device.
Platform-independent - receives the device through dependency injection.
"""
import logging
from collections import namedtuple

from .chord_selector import ChordSelector
from .constants import Midi as MidiConst, Music

logger = logging.getLogger(__name__)


ChordLabel = namedtuple("ChordLabel", ["label", "grade_name"])


class Instrument:
    """
    The instrument served to input handlers.
    Handlers pass the chord to be played, e.g. the V7 of the iii chord,
    and get back its label for display.
    """

    def __init__(self, midi_output, midi_channel=MidiConst.DEFAULT_CHANNEL,
                 velocity=MidiConst.VELOCITY_DEFAULT,
                 key=MidiConst.DEFAULT_KEY):
        """
        Initialize the instrument.

        Args:
            midi_output: MidiOutputHAL implementation
            midi_channel: MIDI channel 0-15
            velocity: Note velocity 0-127 for every note the instrument plays
            key: Starting key root note (60 = C4)
        """
        # Business logic
        self.chord_selector = ChordSelector(key=key)

        # Hardware (injected)
        self.midi_output = midi_output

        # Config
        self.midi_channel = midi_channel
        self.velocity = velocity

        # Notes of the last chord, for the ones above the pedal range
        self._chord_notes = []

    # ------------------------------------------------------------------
    # Playing
    # ------------------------------------------------------------------
    def start(self):
        """Silence the device before the first chord."""
        logger.info("Starting instrument on channel %d in %s",
                    self.midi_channel, self.get_current_tonality())
        self.release_pedal()

    def play_chord(self, grade, sec_dom=False, sub_min=False):
        """
        Play the chord for a grade of the current key.

        Args:
            grade: Scale degree 1-7
            sec_dom: Play the secondary dominant of the grade
            sub_min: Borrow the chord from the key a minor third up

        Returns:
            ChordLabel of (label, grade_name)
        """
        notes, label, grade_name = self.chord_selector.select_chord(
            grade, sec_dom, sub_min
        )

        self.release_chords_pedal()
        self.midi_output.send_chord_on(self.midi_channel, notes, self.velocity)
        self._chord_notes = list(notes)
        return ChordLabel(label, grade_name)

    def play_single_note(self, offset):
        """Play a note offset semitones above the octave over the key."""
        note = self.chord_selector.current_key + Music.NOTES_PER_OCTAVE + offset
        self.midi_output.send_note_on(self.midi_channel, note, self.velocity)

    def move_tonality(self, delta):
        """Shift the key by delta semitones."""
        self.chord_selector.move_tonality(delta)

    def get_current_tonality(self):
        """Return the name of the current key."""
        return self.chord_selector.get_current_tonality()

    def send_control_change(self, value, controller=MidiConst.DEFAULT_CONTROLLER):
        """Send a controller value (channel volume unless told otherwise)."""
        self.midi_output.send_control_change(self.midi_channel, controller, value)

    def send_pitch_change(self, value):
        """Send a pitch bend value (-8192..8191)."""
        self.midi_output.send_pitch_bend(self.midi_channel, value)

    # ------------------------------------------------------------------
    # Pedals
    # ------------------------------------------------------------------
    def release_pedal(self):
        """Turn off every note on the channel and reset the device."""
        for note in range(MidiConst.NOTE_COUNT):
            self.midi_output.send_note_off(self.midi_channel, note, 0)
        self.midi_output.send_reset()
        self._chord_notes = []

    def release_chords_pedal(self):
        """
        Turn off the chord register: every note below the octave over the key.
        Single notes played above it keep sounding, so no device reset here.
        """
        ceiling = min(
            self.chord_selector.current_key + Music.NOTES_PER_OCTAVE,
            MidiConst.NOTE_COUNT,
        )
        for note in range(ceiling):
            self.midi_output.send_note_off(self.midi_channel, note, 0)

        # Sub-minor chords are voiced from a higher key and can reach above
        overhang = [note for note in self._chord_notes if note >= ceiling]
        self.midi_output.send_chord_off(self.midi_channel, overhang)
        self._chord_notes = []

    # ------------------------------------------------------------------
    # Config / lifecycle
    # ------------------------------------------------------------------
    def set_velocity(self, velocity):
        """Set the velocity for notes."""
        self.velocity = max(MidiConst.VELOCITY_MIN, min(MidiConst.VELOCITY_MAX, velocity))

    def set_midi_channel(self, channel):
        """Set the MIDI channel."""
        self.midi_channel = max(MidiConst.CHANNEL_MIN, min(MidiConst.CHANNEL_MAX, channel))

    def close(self):
        """Release the output device."""
        logger.info("Closing instrument")
        self.midi_output.close()
