"""Pitch class table for chord lookup.

All lookups in chord-helper use sharp spellings. Flat spellings are
mapped to their enharmonic sharp before anything else touches them.
"""

from __future__ import annotations

NOTES: tuple[str, ...] = (
    "C",
    "C#",
    "D",
    "D#",
    "E",
    "F",
    "F#",
    "G",
    "G#",
    "A",
    "A#",
    "B",
)

# Flat spelling to sharp spelling. Order matters for prefix matching.
ENHARMONIC_EQUIVALENTS: dict[str, str] = {
    "Db": "C#",
    "Eb": "D#",
    "Gb": "F#",
    "Ab": "G#",
    "Bb": "A#",
}

ACCIDENTALS = "#b"


def normalize_note(note: str) -> str:
    """Return the sharp spelling of a note.

    Examples
    --------
    >>> normalize_note("Bb")
    'A#'
    >>> normalize_note("E")
    'E'
    """
    return ENHARMONIC_EQUIVALENTS.get(note, note)


def replace_flat_prefix(text: str) -> str:
    """Replace a leading flat spelling with its sharp, first match only.

    Examples
    --------
    >>> replace_flat_prefix("Ebm7")
    'D#m7'
    >>> replace_flat_prefix("Am")
    'Am'
    """
    for flat, sharp in ENHARMONIC_EQUIVALENTS.items():
        if text.startswith(flat):
            return sharp + text[len(flat) :]
    return text


def split_note(text: str) -> tuple[str, str]:
    """Split a leading note token (one letter plus optional accidental).

    Examples
    --------
    >>> split_note("F#m7")
    ('F#', 'm7')
    >>> split_note("Am")
    ('A', 'm')
    """
    if len(text) > 1 and text[1] in ACCIDENTALS:
        return text[:2], text[2:]
    return text[:1], text[1:]


def is_note(note: str) -> bool:
    """Check whether ``note`` is one of the 12 canonical sharp notes."""
    return note in NOTES


def note_index(note: str) -> int:
    """Convert a note name to its pitch class (0-11, C=0).

    Parameters
    ----------
    note : str
        Note name, sharp or flat spelling (e.g., "C", "F#", "Bb").

    Returns
    -------
    int
        Pitch class index.

    Raises
    ------
    ValueError
        If the note name is not recognized.

    Examples
    --------
    >>> note_index("C")
    0
    >>> note_index("Bb")
    10
    """
    normalized = normalize_note(note)
    if normalized in NOTES:
        return NOTES.index(normalized)
    msg = f"Unknown note: {note}"
    raise ValueError(msg)


def transpose(note: str, semitones: int) -> str:
    """Transpose a note by a number of semitones, returning a sharp spelling.

    Examples
    --------
    >>> transpose("E", 1)
    'F'
    >>> transpose("A", -1)
    'G#'
    """
    return NOTES[(note_index(note) + semitones) % 12]
