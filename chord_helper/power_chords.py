"""Power chord shapes derived from the low E and A strings.

A power chord is the root plus a perfect fifth, optionally doubled at the
octave. Shapes are found by locating the root on the sixth and fifth
strings within the first twelve frets.
"""

from __future__ import annotations

from chord_helper.models import ChordDescriptor, Fingering
from chord_helper.notes import is_note, transpose

FRET_COUNT = 13  # frets 0-12

x = None


def _fret_table(open_note: str) -> tuple[str, ...]:
    return tuple(transpose(open_note, fret) for fret in range(FRET_COUNT))


SIXTH_STRING: tuple[str, ...] = _fret_table("E")
FIFTH_STRING: tuple[str, ...] = _fret_table("A")

# Classic open-position power chords, listed before anything else
OPEN_POWER_CHORDS: dict[str, Fingering] = {
    "E": Fingering("E5 (Open)", 1, (0, 2, 2, x, x, x), (0, 1, 2, x, x, x)),
    "A": Fingering("A5 (Open)", 1, (x, 0, 2, 2, x, x), (x, 0, 1, 2, x, x)),
    "D": Fingering("D5 (Open)", 1, (x, x, 0, 2, x, x), (x, x, 0, 1, x, x)),
}


def find_fret(table: tuple[str, ...], note: str) -> int | None:
    """Return the lowest fret that sounds ``note`` on a string, if any.

    Examples
    --------
    >>> find_fret(SIXTH_STRING, "G")
    3
    >>> find_fret(SIXTH_STRING, "E")
    0
    """
    return table.index(note) if note in table else None


def _sixth_string_shapes(root: str, fret: int) -> list[Fingering]:
    if fret == 0:
        return [Fingering(f"{root}5 (6th string)", 1, (0, 0, x, x, x, x), (0, 0, x, x, x, x))]
    return [
        Fingering(
            f"{root}5 (6th string)", 1, (fret, fret + 2, x, x, x, x), (1, 3, x, x, x, x)
        ),
        Fingering(
            f"{root}5 (6th string - 3 strings)",
            1,
            (fret, fret + 2, fret + 2, x, x, x),
            (1, 3, 4, x, x, x),
        ),
    ]


def _fifth_string_shapes(root: str, fret: int) -> list[Fingering]:
    if fret == 0:
        return [Fingering(f"{root}5 (5th string)", 1, (x, 0, 0, x, x, x), (x, 0, 0, x, x, x))]
    return [
        Fingering(
            f"{root}5 (5th string)", 1, (x, fret, fret + 2, x, x, x), (x, 1, 3, x, x, x)
        ),
        Fingering(
            f"{root}5 (5th string - 3 strings)",
            1,
            (x, fret, fret + 2, fret + 2, x, x),
            (x, 1, 3, 4, x, x),
        ),
    ]


def convert_to_power_chord(root: str) -> list[Fingering]:
    """Build power chord fingerings for a root note.

    Parameters
    ----------
    root : str
        Root note in sharp spelling.

    Returns
    -------
    list[Fingering]
        Open-position shape first (for E, A and D), then the sixth-string
        and fifth-string shapes. Empty for an unknown note.

    Examples
    --------
    >>> [f.name for f in convert_to_power_chord("G")]
    ['G5 (6th string)', 'G5 (6th string - 3 strings)', 'G5 (5th string)', 'G5 (5th string - 3 strings)']
    >>> convert_to_power_chord("H")
    []
    """
    if not is_note(root):
        return []

    positions: list[Fingering] = []

    sixth = find_fret(SIXTH_STRING, root)
    if sixth is not None:
        positions.extend(_sixth_string_shapes(root, sixth))

    fifth = find_fret(FIFTH_STRING, root)
    if fifth is not None:
        positions.extend(_fifth_string_shapes(root, fifth))

    if root in OPEN_POWER_CHORDS:
        positions.insert(0, OPEN_POWER_CHORDS[root])

    return positions


def get_power_chord_for_chord(descriptor: ChordDescriptor | None) -> list[Fingering]:
    """Power chord fingerings for a parsed chord; quality is ignored."""
    if descriptor is None or not descriptor.root:
        return []
    return convert_to_power_chord(descriptor.root)
