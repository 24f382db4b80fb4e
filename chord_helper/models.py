"""Data models for chord-helper.

This module defines the immutable records shared by the parser, the chord
database, and the fingering finders. Muted strings are represented as
``None`` inside the fret and finger tuples.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal

Quality = Literal["major", "minor", "diminished", "augmented", "suspended"]
Extension = int | str | None
Source = Literal["direct", "alternative", "simplified", "open-version", "power-chord"]

STRING_COUNT = 6
STANDARD_STRINGS: tuple[int, ...] = (6, 5, 4, 3, 2, 1)
DEFAULT_DIFFICULTY = 5


@dataclass(frozen=True)
class ChordDescriptor:
    """Structured form of a chord name.

    Parameters
    ----------
    root : str
        Root note in sharp spelling (e.g., "C#").
    quality : Quality
        One of "major", "minor", "diminished", "augmented", "suspended".
    extension : int | str | None
        Numeric extension (7, 9), a tag ("sus2", "sus4", "add9"), or None.
    bass : str | None
        Slash-chord bass note in sharp spelling.
    original : str
        The trimmed input text.

    Examples
    --------
    >>> chord = ChordDescriptor(root="A", quality="minor", extension=7)
    >>> chord.basic_name
    'Am'
    """

    root: str
    quality: Quality
    extension: Extension = None
    bass: str | None = None
    original: str = ""

    @property
    def basic_name(self) -> str:
        """Name of the plain triad on the same root."""
        return self.root + ("m" if self.quality == "minor" else "")

    @property
    def is_simple_triad(self) -> bool:
        return self.extension is None and self.quality in ("major", "minor")


@dataclass(frozen=True)
class Fingering:
    """One hand position on a six-string guitar.

    Parameters
    ----------
    name : str
        Display name (e.g., "C (Open)").
    difficulty : int | None
        Playing difficulty from 1 (easiest) to 5.
    frets : tuple[int | None, ...]
        Fret per string, 0 for open, None for muted.
    fingers : tuple[int | None, ...]
        Finger per string, 0 for open or unfingered, None for muted.
    strings : tuple[int, ...]
        Physical string numbers the tuples refer to (6 = low E).

    Raises
    ------
    ValueError
        If the three sequences are not all six long.
    """

    name: str
    difficulty: int | None
    frets: tuple[int | None, ...]
    fingers: tuple[int | None, ...]
    strings: tuple[int, ...] = field(default=STANDARD_STRINGS)

    def __post_init__(self) -> None:
        # Accept lists from callers, store tuples.
        object.__setattr__(self, "frets", tuple(self.frets))
        object.__setattr__(self, "fingers", tuple(self.fingers))
        object.__setattr__(self, "strings", tuple(self.strings))
        for label in ("frets", "fingers", "strings"):
            length = len(getattr(self, label))
            if length != STRING_COUNT:
                msg = f"Fingering {self.name!r} has {length} {label}, expected {STRING_COUNT}"
                raise ValueError(msg)

    @property
    def pressed_frets(self) -> list[int]:
        """Frets that are held down (neither muted nor open)."""
        return [fret for fret in self.frets if fret]

    @property
    def open_count(self) -> int:
        return sum(1 for fret in self.frets if fret == 0)

    @property
    def muted_count(self) -> int:
        return sum(1 for fret in self.frets if fret is None)


@dataclass(frozen=True)
class ChordEntry:
    """Database record for one chord name.

    Parameters
    ----------
    root : str
        Root note in sharp spelling.
    quality : Quality
        Chord quality.
    fingerings : tuple[Fingering, ...]
        Known fingerings, in display order.
    alternatives : tuple[str, ...]
        Names of other entries worth suggesting in place of this one.
    """

    root: str
    quality: Quality
    fingerings: tuple[Fingering, ...]
    alternatives: tuple[str, ...] = ()


@dataclass(frozen=True)
class AlternativeResult:
    """A fingering tagged with where it came from.

    Parameters
    ----------
    fingering : Fingering
        The underlying database or generated fingering.
    source : Source
        Provenance, used for grouping in the output.
    name : str
        Display name, possibly suffixed (e.g., "Cm (Easy) (easier)").
    """

    fingering: Fingering
    source: Source
    name: str = ""

    def __post_init__(self) -> None:
        if not self.name:
            object.__setattr__(self, "name", self.fingering.name)

    @property
    def difficulty(self) -> int | None:
        return self.fingering.difficulty

    @property
    def frets(self) -> tuple[int | None, ...]:
        return self.fingering.frets

    @property
    def fingers(self) -> tuple[int | None, ...]:
        return self.fingering.fingers

    @property
    def strings(self) -> tuple[int, ...]:
        return self.fingering.strings

    @property
    def sort_difficulty(self) -> int:
        """Difficulty used for ranking, with unknown difficulty ranked last."""
        return self.difficulty or DEFAULT_DIFFICULTY
