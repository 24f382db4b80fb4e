"""Find easier ways to play guitar chords.

This library parses chord names, looks up fingerings in a bundled chord
table, ranks them by playing difficulty, and derives power chord shapes.

Examples
--------
>>> from chord_helper import parse_chord, find_alternatives

>>> chord = parse_chord("C#m7")
>>> chord.root, chord.quality, chord.extension
('C#', 'minor', 7)

>>> [r.name for r in find_alternatives("F")][:2]
['F (Easy - 3 strings)', 'Fmaj7 (Easier)']
"""

from chord_helper.alternatives import AlternativeFinder
from chord_helper.api import (
    Suggestion,
    find_alternatives,
    get_power_chords,
    lookup_chord,
    search_chord_names,
    suggest,
)
from chord_helper.database import ChordDatabase, normalize_chord_name
from chord_helper.difficulty import calculate_difficulty, has_barre
from chord_helper.models import AlternativeResult, ChordDescriptor, ChordEntry, Fingering
from chord_helper.parser import ParseError, get_intervals, is_valid, parse_chord
from chord_helper.power_chords import convert_to_power_chord, get_power_chord_for_chord

__all__ = [
    "AlternativeFinder",
    "AlternativeResult",
    "ChordDatabase",
    "ChordDescriptor",
    "ChordEntry",
    "Fingering",
    "ParseError",
    "Suggestion",
    "calculate_difficulty",
    "convert_to_power_chord",
    "find_alternatives",
    "get_intervals",
    "get_power_chord_for_chord",
    "get_power_chords",
    "has_barre",
    "is_valid",
    "lookup_chord",
    "normalize_chord_name",
    "parse_chord",
    "search_chord_names",
    "suggest",
]
