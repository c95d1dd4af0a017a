"""
Chord table construction - pure business logic.
Builds the diatonic and secondary dominant chords of a key as MIDI notes.
"""
from collections import namedtuple

from .music_theory import (
    CHORD_TYPES,
    INTERVALS,
    get_chord_quality_in_scale,
    get_scale_note,
)
from .constants import Music


ChordTables = namedtuple("ChordTables", ["diatonic", "sec_dom"])

# Tensions added to each diatonic chord, as extended scale steps above the
# chord root (8 = ninth, 10 = eleventh, 12 = thirteenth).
# Keyed by grade: the tonic/subdominant chords take the ninth, iii and vii
# take the eleventh (their diatonic ninth is a minor ninth), V takes the 13th.
DIATONIC_TENSIONS = {
    1: (8,),
    2: (8,),
    3: (10,),
    4: (8,),
    5: (12,),
    6: (8,),
    7: (10,),
}

# Stacked thirds: root, third, fifth, seventh
SEVENTH_CHORD_STEPS = (0, 2, 4, 6)


def invert(notes, times=1):
    """
    Invert a chord without changing its pitch classes.

    Args:
        notes: List of MIDI note numbers
        times: Positive moves the lowest note up an octave, negative moves
               the highest note down an octave, repeated abs(times) times

    Returns:
        New ascending list of MIDI note numbers
    """
    voiced = sorted(notes)
    for _ in range(abs(times)):
        if times > 0:
            voiced = voiced[1:] + [voiced[0] + Music.NOTES_PER_OCTAVE]
        else:
            voiced = [voiced[-1] - Music.NOTES_PER_OCTAVE] + voiced[:-1]
    return sorted(voiced)


def add_tension(notes, root, intervals):
    """Add tension notes at the given semitone intervals above the root."""
    return sorted(list(notes) + [root + interval for interval in intervals])


def voice_below(notes, ceiling):
    """Invert downwards until every note is below the ceiling."""
    voiced = sorted(notes)
    while voiced[-1] >= ceiling:
        voiced = invert(voiced, -1)
    return voiced


def with_bass(notes, root):
    """
    Put the root's pitch class in the bass, below the lowest voice.
    The bass can fall up to an octave under the lowest voice.
    """
    lowest = min(notes)
    distance = (lowest - root) % Music.NOTES_PER_OCTAVE or Music.NOTES_PER_OCTAVE
    return [lowest - distance] + sorted(notes)


def _voice(notes, root, key):
    # Chords sit in the register below key + 12, the chord pedal range
    ceiling = key + Music.NOTES_PER_OCTAVE
    return with_bass(voice_below(notes, ceiling), root)


def diatonic_chord(key, grade):
    """Seventh chord plus tension on a grade (1-7) of the major key."""
    degree = grade - 1
    root = key + get_scale_note(degree)
    notes = [key + get_scale_note(degree + step) for step in SEVENTH_CHORD_STEPS]
    tensions = [
        get_scale_note(degree + step) - get_scale_note(degree)
        for step in DIATONIC_TENSIONS[grade]
    ]
    return _voice(add_tension(notes, root, tensions), root, key)


def sec_dom_chord(key, grade):
    """
    Dominant seventh resolving to a grade (1-7) of the major key,
    i.e. "V7 of grade".
    Minor and diminished targets get a flat nine, major targets a nine.
    """
    degree = grade - 1
    target = key + get_scale_note(degree)
    root = target + INTERVALS["perfect_fifth"]
    notes = [root + interval for interval in CHORD_TYPES["dominant7"]]
    if get_chord_quality_in_scale(degree) in ["minor", "diminished"]:
        ninth = INTERVALS["minor_ninth"]
    else:
        ninth = INTERVALS["major_ninth"]
    return _voice(add_tension(notes, root, [ninth]), root, key)


def diatonic_chords(key):
    """Map of grade (1-7) to diatonic chord notes."""
    return {
        grade: diatonic_chord(key, grade)
        for grade in range(Music.FIRST_GRADE, Music.LAST_GRADE + 1)
    }


def sec_dom_chords(key):
    """Map of grade (1-7) to the secondary dominant of that grade."""
    return {
        grade: sec_dom_chord(key, grade)
        for grade in range(Music.FIRST_GRADE, Music.LAST_GRADE + 1)
    }


def build_tables(key):
    """
    Build both chord tables for a key. Same key, same tables.

    Every note lies in [key - 12, key + 12), so keys 12-116 keep all notes
    inside the MIDI range 0-127. Other keys are not checked.
    """
    return ChordTables(diatonic=diatonic_chords(key), sec_dom=sec_dom_chords(key))
