"""
Chord selection - pure business logic.
Holds the current key and picks chords from its cached tables.
No hardware dependencies.
"""
import logging
from collections import namedtuple

from .chord_tables import ChordTables, build_tables
from .music_theory import (
    MAJOR_SCALE,
    get_chord_name,
    get_grade_name,
    tonality_name,
)
from .constants import Midi, Music

logger = logging.getLogger(__name__)


ChordSelection = namedtuple("ChordSelection", ["notes", "label", "grade_name"])


def _copy_tables(tables):
    return ChordTables(
        diatonic={grade: list(notes) for grade, notes in tables.diatonic.items()},
        sec_dom={grade: list(notes) for grade, notes in tables.sec_dom.items()},
    )


class ChordSelector:
    """
    Picks the chord for a grade of the current key.
    The cached tables always match the current key.
    """

    def __init__(self, key=Midi.DEFAULT_KEY):
        """
        Args:
            key: MIDI note number of the key's root (60 = C4)
        """
        self._key = key
        self._tables = build_tables(key)

    @property
    def current_key(self):
        return self._key

    @property
    def tables(self):
        """Copy of the cached tables; changing it leaves the cache alone."""
        return _copy_tables(self._tables)

    def get_chords(self, key=None):
        """Return the chord tables for a key (default: the current key)."""
        if key is None or key == self._key:
            return self.tables
        return build_tables(key)

    def get_current_tonality(self):
        """Return the name of the current key, e.g. "C"."""
        return tonality_name(self._key % Music.NOTES_PER_OCTAVE)

    def move_tonality(self, delta):
        """Shift the key by delta semitones and rebuild the tables."""
        self._key += delta
        self._tables = build_tables(self._key)
        logger.debug("Moved tonality by %d to key %d (%s)",
                     delta, self._key, self.get_current_tonality())

    def select_chord(self, grade, sec_dom=False, sub_min=False):
        """
        Select the chord for a grade.

        Args:
            grade: Scale degree 1-7
            sec_dom: Use the secondary dominant of the grade
            sub_min: Borrow from the key a minor third up, with the grade
                     remapped to its relative position in that key

        Returns:
            ChordSelection of (notes, label, grade_name)
            - notes: ascending list of MIDI note numbers
            - label: e.g. "C: ii", "G: V"
            - grade_name: e.g. "ii"
        """
        chord_key = self._key
        tables = self._tables

        if sub_min:
            chord_key = self._key + Music.SUB_MINOR_SHIFT
            tables = build_tables(chord_key)
            grade = ((grade + 4) % Music.SCALE_DEGREES) + 1

        if sec_dom:
            notes = tables.sec_dom[grade]
            # Named as the V of the tonality built on the target grade
            target = chord_key + MAJOR_SCALE[grade - 1]
            label = get_chord_name(
                tonality_name(target % Music.NOTES_PER_OCTAVE),
                Music.DOMINANT_GRADE,
            )
        else:
            notes = tables.diatonic[grade]
            label = get_chord_name(
                tonality_name(chord_key % Music.NOTES_PER_OCTAVE), grade
            )

        logger.debug("Selected %s for grade %d (sec_dom=%s, sub_min=%s): %s",
                     label, grade, sec_dom, sub_min, notes)
        return ChordSelection(list(notes), label, get_grade_name(grade))
