"""Static chord fingering table.

The table is hand-authored and built once at import time. Entries refer to
each other only by name through ``alternatives``; lookups go back through
:class:`ChordDatabase`.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from functools import lru_cache
from types import MappingProxyType

from chord_helper.models import ChordEntry, Fingering, Quality
from chord_helper.notes import replace_flat_prefix

logger = logging.getLogger(__name__)

MAX_SEARCH_RESULTS = 10

x = None  # muted string, keeps the shape tables readable


def _shape(
    name: str,
    difficulty: int,
    frets: tuple[int | None, ...],
    fingers: tuple[int | None, ...],
) -> Fingering:
    return Fingering(name=name, difficulty=difficulty, frets=frets, fingers=fingers)


def _entry(
    root: str,
    quality: Quality,
    fingerings: list[Fingering],
    alternatives: tuple[str, ...] = (),
) -> ChordEntry:
    return ChordEntry(
        root=root,
        quality=quality,
        fingerings=tuple(fingerings),
        alternatives=alternatives,
    )


# fmt: off
_CHORDS: dict[str, ChordEntry] = {
    # Major chords
    "C": _entry("C", "major", [
        _shape("C (Open)", 1, (x, 3, 2, 0, 1, 0), (x, 2, 1, 0, 3, 0)),
        _shape("C (Barre)", 4, (3, 3, 5, 5, 5, 3), (1, 1, 2, 3, 4, 1)),
    ], ("Cmaj7",)),
    "D": _entry("D", "major", [
        _shape("D (Open)", 1, (x, x, 0, 2, 3, 2), (x, x, 0, 1, 3, 2)),
        _shape("D (Barre)", 4, (5, 5, 7, 7, 7, 5), (1, 1, 2, 3, 4, 1)),
    ], ("Dmaj7",)),
    "E": _entry("E", "major", [
        _shape("E (Open)", 1, (0, 2, 2, 1, 0, 0), (0, 2, 3, 1, 0, 0)),
        _shape("E (Barre)", 4, (12, 12, 14, 14, 14, 12), (1, 1, 2, 3, 4, 1)),
    ], ("Emaj7",)),
    "F": _entry("F", "major", [
        _shape("F (Barre)", 4, (1, 3, 3, 2, 1, 1), (1, 3, 4, 2, 1, 1)),
        _shape("F (Easy - 3 strings)", 2, (x, x, 3, 3, 1, 1), (x, x, 2, 3, 1, 1)),
        _shape("Fmaj7 (Easier)", 2, (x, x, 3, 2, 1, 0), (x, x, 3, 2, 1, 0)),
    ], ("Fmaj7",)),
    "G": _entry("G", "major", [
        _shape("G (Open)", 1, (3, 2, 0, 0, 3, 3), (2, 1, 0, 0, 3, 4)),
        _shape("G (Barre)", 4, (3, 3, 5, 5, 5, 3), (1, 1, 2, 3, 4, 1)),
    ], ("Gmaj7",)),
    "A": _entry("A", "major", [
        _shape("A (Open)", 1, (x, 0, 2, 2, 2, 0), (x, 0, 1, 2, 3, 0)),
        _shape("A (Barre)", 4, (5, 5, 7, 7, 7, 5), (1, 1, 2, 3, 4, 1)),
    ], ("Amaj7",)),
    "B": _entry("B", "major", [
        _shape("B (Barre)", 4, (7, 7, 9, 9, 9, 7), (1, 1, 2, 3, 4, 1)),
        _shape("B (Easy - 3 strings)", 2, (x, x, 9, 9, 7, 7), (x, x, 2, 3, 1, 1)),
    ], ("Bmaj7",)),

    # Minor chords
    "Am": _entry("A", "minor", [
        _shape("Am (Open)", 1, (x, 0, 2, 2, 1, 0), (x, 0, 2, 3, 1, 0)),
        _shape("Am (Barre)", 4, (5, 5, 7, 7, 6, 5), (1, 1, 3, 4, 2, 1)),
    ], ("Am7",)),
    "Bm": _entry("B", "minor", [
        _shape("Bm (Barre)", 4, (7, 7, 9, 9, 8, 7), (1, 1, 3, 4, 2, 1)),
        _shape("Bm (Easy - 3 strings)", 2, (x, x, 9, 9, 8, 7), (x, x, 2, 3, 1, 1)),
    ], ("Bm7",)),
    "Cm": _entry("C", "minor", [
        _shape("Cm (Barre)", 4, (3, 3, 5, 5, 4, 3), (1, 1, 3, 4, 2, 1)),
        _shape("Cm (Easy)", 2, (x, x, 5, 5, 4, 3), (x, x, 2, 3, 1, 1)),
    ], ("Cm7",)),
    "Dm": _entry("D", "minor", [
        _shape("Dm (Open)", 1, (x, x, 0, 2, 3, 1), (x, x, 0, 2, 3, 1)),
        _shape("Dm (Barre)", 4, (5, 5, 7, 7, 6, 5), (1, 1, 3, 4, 2, 1)),
    ], ("Dm7",)),
    "Em": _entry("E", "minor", [
        _shape("Em (Open)", 1, (0, 2, 2, 0, 0, 0), (0, 2, 3, 0, 0, 0)),
        _shape("Em (Barre)", 4, (12, 12, 14, 14, 13, 12), (1, 1, 3, 4, 2, 1)),
    ], ("Em7",)),
    "Fm": _entry("F", "minor", [
        _shape("Fm (Barre)", 4, (1, 3, 3, 1, 1, 1), (1, 3, 4, 1, 1, 1)),
        _shape("Fm (Easy)", 2, (x, x, 3, 1, 1, 1), (x, x, 2, 1, 1, 1)),
    ], ("Fm7",)),
    "Gm": _entry("G", "minor", [
        _shape("Gm (Barre)", 4, (3, 3, 5, 5, 4, 3), (1, 1, 3, 4, 2, 1)),
        _shape("Gm (Easy)", 2, (x, x, 5, 5, 4, 3), (x, x, 2, 3, 1, 1)),
    ], ("Gm7",)),

    # Sharps
    "C#": _entry("C#", "major", [
        _shape("C# (Barre)", 4, (4, 4, 6, 6, 6, 4), (1, 1, 2, 3, 4, 1)),
    ], ("C#maj7",)),
    "F#": _entry("F#", "major", [
        _shape("F# (Barre)", 4, (2, 4, 4, 3, 2, 2), (1, 3, 4, 2, 1, 1)),
        _shape("F# (Easy)", 2, (x, x, 4, 4, 2, 2), (x, x, 2, 3, 1, 1)),
    ], ("F#maj7",)),

    # Major sevenths
    "Cmaj7": _entry("C", "major", [
        _shape("Cmaj7 (Open)", 1, (x, 3, 2, 0, 0, 0), (x, 3, 2, 0, 0, 0)),
    ]),
    "Dmaj7": _entry("D", "major", [
        _shape("Dmaj7 (Open)", 1, (x, x, 0, 2, 2, 2), (x, x, 0, 1, 2, 3)),
    ]),
    "Emaj7": _entry("E", "major", [
        _shape("Emaj7 (Open)", 1, (0, 2, 1, 1, 0, 0), (0, 3, 1, 2, 0, 0)),
    ]),
    "Fmaj7": _entry("F", "major", [
        _shape("Fmaj7 (Open)", 2, (x, x, 3, 2, 1, 0), (x, x, 3, 2, 1, 0)),
    ]),
    "Gmaj7": _entry("G", "major", [
        _shape("Gmaj7 (Open)", 1, (3, 2, 0, 0, 0, 2), (3, 2, 0, 0, 0, 1)),
    ]),
    "Amaj7": _entry("A", "major", [
        _shape("Amaj7 (Open)", 1, (x, 0, 2, 1, 2, 0), (x, 0, 2, 1, 3, 0)),
    ]),

    # Minor sevenths
    "Am7": _entry("A", "minor", [
        _shape("Am7 (Open)", 1, (x, 0, 2, 0, 1, 0), (x, 0, 2, 0, 1, 0)),
    ]),
    "Bm7": _entry("B", "minor", [
        _shape("Bm7 (Open)", 2, (x, 2, 0, 2, 0, 2), (x, 2, 0, 3, 0, 4)),
    ]),
    "Dm7": _entry("D", "minor", [
        _shape("Dm7 (Open)", 2, (x, x, 0, 2, 1, 1), (x, x, 0, 2, 1, 1)),
    ]),
    "Em7": _entry("E", "minor", [
        _shape("Em7 (Open)", 1, (0, 2, 0, 0, 0, 0), (0, 2, 0, 0, 0, 0)),
    ]),

    # Dominant sevenths
    "C7": _entry("C", "major", [
        _shape("C7 (Open)", 2, (x, 3, 2, 3, 1, 0), (x, 3, 2, 4, 1, 0)),
    ]),
    "D7": _entry("D", "major", [
        _shape("D7 (Open)", 1, (x, x, 0, 2, 1, 2), (x, x, 0, 2, 1, 3)),
    ]),
    "E7": _entry("E", "major", [
        _shape("E7 (Open)", 1, (0, 2, 0, 1, 0, 0), (0, 2, 0, 1, 0, 0)),
    ]),
    "G7": _entry("G", "major", [
        _shape("G7 (Open)", 1, (3, 2, 0, 0, 0, 1), (3, 2, 0, 0, 0, 1)),
    ]),
    "A7": _entry("A", "major", [
        _shape("A7 (Open)", 1, (x, 0, 2, 0, 2, 0), (x, 0, 2, 0, 3, 0)),
    ]),

    # Suspended
    "Dsus2": _entry("D", "suspended", [
        _shape("Dsus2 (Open)", 1, (x, x, 0, 2, 3, 0), (x, x, 0, 1, 3, 0)),
    ], ("D",)),
    "Dsus4": _entry("D", "suspended", [
        _shape("Dsus4 (Open)", 1, (x, x, 0, 2, 3, 3), (x, x, 0, 1, 3, 4)),
    ], ("D",)),
    "Asus2": _entry("A", "suspended", [
        _shape("Asus2 (Open)", 1, (x, 0, 2, 2, 0, 0), (x, 0, 1, 2, 0, 0)),
    ], ("A",)),
    "Asus4": _entry("A", "suspended", [
        _shape("Asus4 (Open)", 1, (x, 0, 2, 2, 3, 0), (x, 0, 1, 2, 3, 0)),
    ], ("A",)),
    "Esus4": _entry("E", "suspended", [
        _shape("Esus4 (Open)", 1, (0, 2, 2, 2, 0, 0), (0, 2, 3, 4, 0, 0)),
    ], ("E",)),
}
# fmt: on

CHORDS: Mapping[str, ChordEntry] = MappingProxyType(_CHORDS)


def normalize_chord_name(name: str | None) -> str:
    """Normalize a chord name to its lookup key.

    Trims whitespace and replaces a leading flat spelling with its sharp.

    Examples
    --------
    >>> normalize_chord_name(" Bbm ")
    'A#m'
    >>> normalize_chord_name("Am")
    'Am'
    """
    if not name:
        return ""
    return replace_flat_prefix(name.strip())


@dataclass(frozen=True)
class ChordDatabase:
    """Read-only view over a table of chord entries.

    Parameters
    ----------
    chords : Mapping[str, ChordEntry]
        Entries keyed by canonical chord name, in display order.

    Examples
    --------
    >>> db = ChordDatabase.default()
    >>> db.get_chord("Am").root
    'A'
    >>> db.get_chord("H") is None
    True
    """

    chords: Mapping[str, ChordEntry]

    @classmethod
    def default(cls) -> ChordDatabase:
        """Return the shared database built from the bundled table."""
        return _default_database()

    def get_chord(self, name: str | None) -> ChordEntry | None:
        """Look up a chord by name, or None when it is not in the table."""
        key = normalize_chord_name(name)
        entry = self.chords.get(key)
        if entry is None:
            logger.debug("No chord entry for %r (key %r)", name, key)
        return entry

    def get_all_chord_names(self) -> list[str]:
        return list(self.chords)

    def search_chords(self, query: str | None) -> list[str]:
        """Find chord names containing the query, case-insensitively.

        Parameters
        ----------
        query : str | None
            Partial chord name; flats are also matched as sharps.

        Returns
        -------
        list[str]
            At most ten matching names, in table order.

        Examples
        --------
        >>> ChordDatabase.default().search_chords("Db")
        ['C#']
        """
        if not query:
            return []

        lower_query = query.lower()
        normalized_query = normalize_chord_name(query).lower()

        matches = [
            name
            for name in self.chords
            if lower_query in name.lower() or normalized_query in name.lower()
        ]
        return matches[:MAX_SEARCH_RESULTS]

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and normalize_chord_name(name) in self.chords

    def __len__(self) -> int:
        return len(self.chords)


@lru_cache(maxsize=1)
def _default_database() -> ChordDatabase:
    return ChordDatabase(CHORDS)
