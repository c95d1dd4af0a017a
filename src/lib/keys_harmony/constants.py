"""
Constants for the Keys Harmony instrument.
All magic strings and numbers are defined here for easy maintenance.
"""


# ============================================================================
# MIDI CONSTANTS
# ============================================================================
class Midi:
    """MIDI-related constants."""
    # Channel range
    CHANNEL_MIN = 0
    CHANNEL_MAX = 15
    DEFAULT_CHANNEL = 0

    # Velocity range
    VELOCITY_MIN = 0
    VELOCITY_MAX = 127
    VELOCITY_DEFAULT = 64

    # Note range is 0-127
    NOTE_COUNT = 128

    # Default key (C4)
    DEFAULT_KEY = 60

    # CC 7 = channel volume
    DEFAULT_CONTROLLER = 7

    # Name used when the computer platform opens a virtual output
    VIRTUAL_PORT_NAME = "keys-harmony-output"


# ============================================================================
# MUSIC CONSTANTS
# ============================================================================
class Music:
    """Music theory constants."""
    NOTES_PER_OCTAVE = 12
    SCALE_DEGREES = 7

    # Grades are 1-indexed: 1 = tonic ... 7 = leading tone
    FIRST_GRADE = 1
    LAST_GRADE = 7
    DOMINANT_GRADE = 5

    # Sub-minor substitution borrows from the key a minor third up
    SUB_MINOR_SHIFT = 3
