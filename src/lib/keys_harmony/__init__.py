"""
Keys Harmony - Platform-independent chord instrument and MIDI output.
"""

from .music_theory import (
    INTERVALS,
    MAJOR_SCALE,
    TONALITY_NAMES,
    CHORD_TYPES,
    ROMAN_NUMERALS,
    tonality_name,
    get_scale_note,
    get_chord_quality_in_scale,
    get_grade_name,
    get_chord_name,
)
from .chord_tables import (
    ChordTables,
    invert,
    add_tension,
    diatonic_chords,
    sec_dom_chords,
    build_tables,
)
from .chord_selector import ChordSelector, ChordSelection
from .hal_protocol import MidiOutputHAL
from .instrument import Instrument, ChordLabel

__all__ = [
    # Music Theory
    "INTERVALS",
    "MAJOR_SCALE",
    "TONALITY_NAMES",
    "CHORD_TYPES",
    "ROMAN_NUMERALS",
    "tonality_name",
    "get_scale_note",
    "get_chord_quality_in_scale",
    "get_grade_name",
    "get_chord_name",
    # Chord Tables
    "ChordTables",
    "invert",
    "add_tension",
    "diatonic_chords",
    "sec_dom_chords",
    "build_tables",
    # Selector
    "ChordSelector",
    "ChordSelection",
    # HAL Protocol
    "MidiOutputHAL",
    # Instrument
    "Instrument",
    "ChordLabel",
]
