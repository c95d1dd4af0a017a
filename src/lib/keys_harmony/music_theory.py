"""
Pure music theory calculations - no hardware dependencies.
Tonality names, grade names and the major scale the chord tables are built on.
"""
from .constants import Music

# Interval definitions (in semitones)
INTERVALS = {
    "unison": 0,
    "minor_second": 1,
    "major_second": 2,
    "minor_third": 3,
    "major_third": 4,
    "perfect_fourth": 5,
    "tritone": 6,
    "perfect_fifth": 7,
    "minor_sixth": 8,
    "major_sixth": 9,
    "minor_seventh": 10,
    "major_seventh": 11,
    "octave": 12,
    "minor_ninth": 13,
    "major_ninth": 14,
}

# Major scale as interval pattern from root
MAJOR_SCALE = [0, 2, 4, 5, 7, 9, 11]  # W-W-H-W-W-W-H

# Conventional key names for each pitch class
TONALITY_NAMES = ["C", "Db", "D", "Eb", "E", "F", "F#", "G", "Ab", "A", "Bb", "B"]

# Chord quality based on intervals
CHORD_TYPES = {
    "major": [0, 4, 7],
    "minor": [0, 3, 7],
    "diminished": [0, 3, 6],
    "augmented": [0, 4, 8],
    "dominant7": [0, 4, 7, 10],
}

# Roman numeral labels
ROMAN_NUMERALS = ["I", "II", "III", "IV", "V", "VI", "VII"]


def tonality_name(semitone_offset):
    """Name of a pitch class. Offsets outside 0-11 wrap by octaves."""
    return TONALITY_NAMES[semitone_offset % Music.NOTES_PER_OCTAVE]


def get_scale_note(degree):
    """
    Get the semitone offset of a major scale degree.
    Supports extended degrees beyond the 7-note scale (wraps with octaves).

    Args:
        degree: Scale degree, 0-indexed
                0 = root
                7 = root + 1 octave
                8 = ninth, etc.

    Returns:
        Semitones above the root
    """
    octave_offset = degree // Music.SCALE_DEGREES
    scale_degree = degree % Music.SCALE_DEGREES
    return MAJOR_SCALE[scale_degree] + (octave_offset * Music.NOTES_PER_OCTAVE)


def get_chord_quality_in_scale(degree):
    """
    Determine triad quality for a major scale degree (0-6).
    Returns: 'major', 'minor', 'diminished', or 'augmented'
    """
    third_size = get_scale_note(degree + 2) - get_scale_note(degree)
    fifth_size = get_scale_note(degree + 4) - get_scale_note(degree)

    if third_size == 4 and fifth_size == 7:
        return "major"
    elif third_size == 3 and fifth_size == 7:
        return "minor"
    elif third_size == 3 and fifth_size == 6:
        return "diminished"
    elif third_size == 4 and fifth_size == 8:
        return "augmented"
    else:
        return "major"  # fallback


def get_grade_name(grade):
    """
    Roman numeral for a grade (1-7) of a major key.
    Uppercase for major, lowercase for minor/dim, e.g. "IV", "ii", "vii°".
    """
    degree = grade - 1
    quality = get_chord_quality_in_scale(degree)
    numeral = ROMAN_NUMERALS[degree]
    if quality in ["minor", "diminished"]:
        numeral = numeral.lower()
    if quality == "diminished":
        numeral += "°"
    return numeral


def get_chord_name(tonality, grade):
    """Display label for a grade within a tonality, e.g. "C: ii"."""
    return tonality + ": " + get_grade_name(grade)
