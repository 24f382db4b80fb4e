"""Chord name parser.

This module turns free-text chord names such as "C#m7", "Dbmaj7" or "G/B"
into :class:`~chord_helper.models.ChordDescriptor` objects. Only the root
is mandatory; quality, extension and bass fall back to defaults when they
cannot be read.
"""

from __future__ import annotations

import re

from chord_helper.models import ChordDescriptor, Extension, Quality
from chord_helper.notes import is_note, normalize_note, replace_flat_prefix, split_note

# Semitone intervals above the root for each quality
QUALITY_INTERVALS: dict[str, list[int]] = {
    "major": [0, 4, 7],
    "minor": [0, 3, 7],
    "diminished": [0, 3, 6],
    "augmented": [0, 4, 8],
    "suspended": [0, 5, 7],
}

MINOR_SEVENTH = 10
MAJOR_SEVENTH = 11
NINTH = 14

QUALITY_TOKEN_RE = re.compile(r"^(?:maj|min|m|dim|aug)")
NUMBER_RE = re.compile(r"(\d+)")
ADD_RE = re.compile(r"add(\d+)")


class ParseError(ValueError):
    """Raised when a chord name has no recognizable root."""


def parse_quality(suffix: str) -> Quality:
    """Read the chord quality from the text following the root.

    Parameters
    ----------
    suffix : str
        Everything after the root note (e.g., "m7", "maj9", "sus4").

    Returns
    -------
    Quality
        The chord quality, "major" when nothing matches.

    Examples
    --------
    >>> parse_quality("m7")
    'minor'
    >>> parse_quality("maj7")
    'major'
    >>> parse_quality("M7")
    'major'
    >>> parse_quality("")
    'major'
    """
    lower = suffix.lower()

    if lower.startswith("maj"):
        return "major"
    if lower.startswith("min"):
        return "minor"
    if suffix.startswith("M"):
        return "major"
    if lower.startswith("m"):
        return "minor"
    if lower.startswith("dim"):
        return "diminished"
    if lower.startswith("aug"):
        return "augmented"
    if lower.startswith("sus"):
        return "suspended"
    return "major"


def parse_extension(suffix: str) -> Extension:
    """Read the chord extension from the text following the root.

    The first embedded number wins, so "sus2" and "add9" come back as
    the numbers 2 and 9. The string tags are only produced when no digit
    is present (a bare "sus" reads as "sus4").

    Examples
    --------
    >>> parse_extension("m7")
    7
    >>> parse_extension("maj9")
    9
    >>> parse_extension("sus")
    'sus4'
    >>> parse_extension("m") is None
    True
    """
    cleaned = QUALITY_TOKEN_RE.sub("", suffix.lower(), count=1)

    match = NUMBER_RE.search(cleaned)
    if match:
        return int(match.group(1))

    if "sus2" in cleaned:
        return "sus2"
    if "sus4" in cleaned or "sus" in cleaned:
        return "sus4"

    add_match = ADD_RE.search(cleaned)
    if add_match:
        return f"add{add_match.group(1)}"

    return None


def parse_bass(suffix: str) -> str | None:
    """Read the bass note of a slash chord.

    An unreadable bass note yields None rather than an error.

    Examples
    --------
    >>> parse_bass("/E")
    'E'
    >>> parse_bass("m7/Bb")
    'A#'
    >>> parse_bass("/H") is None
    True
    """
    if "/" not in suffix:
        return None

    bass_text = replace_flat_prefix(suffix.rsplit("/", 1)[-1].strip())
    token, _ = split_note(bass_text)
    bass = normalize_note(token)
    return bass if is_note(bass) else None


def parse_chord(text: str) -> ChordDescriptor:
    """Parse a chord name into a ChordDescriptor.

    Parameters
    ----------
    text : str
        Chord name (e.g., "C#m7", "Fmaj7", "Dm", "C/E").

    Returns
    -------
    ChordDescriptor
        Root, quality, extension and bass of the chord.

    Raises
    ------
    ParseError
        If the input is empty or the root is not a recognized note.

    Examples
    --------
    >>> chord = parse_chord("C#m7")
    >>> chord.root, chord.quality, chord.extension
    ('C#', 'minor', 7)
    >>> parse_chord("Dbmaj7").root
    'C#'
    """
    if not isinstance(text, str):
        msg = f"Chord name must be a string, got {type(text).__name__}"
        raise ParseError(msg)

    trimmed = text.strip()
    if not trimmed:
        msg = "Chord name is empty"
        raise ParseError(msg)

    normalized = replace_flat_prefix(trimmed)
    root, suffix = split_note(normalized)
    root = normalize_note(root)

    if not is_note(root):
        msg = f"Unknown root note in chord name: {trimmed!r}"
        raise ParseError(msg)

    return ChordDescriptor(
        root=root,
        quality=parse_quality(suffix),
        extension=parse_extension(suffix),
        bass=parse_bass(suffix),
        original=trimmed,
    )


def is_valid(text: str) -> bool:
    """Check whether a chord name can be parsed.

    Examples
    --------
    >>> is_valid("Am")
    True
    >>> is_valid("H7")
    False
    """
    try:
        parse_chord(text)
    except ParseError:
        return False
    return True


def get_intervals(root: str, quality: str, extension: Extension = None) -> list[int]:
    """Return the semitone intervals of a chord relative to its root.

    ``root`` does not change the result; it is accepted so that the
    fields of a descriptor can be passed straight through.

    Parameters
    ----------
    root : str
        Root note of the chord.
    quality : str
        Chord quality; unknown qualities are treated as major.
    extension : int | str | None
        Only the numbers 7 and 9 add intervals.

    Returns
    -------
    list[int]
        Intervals in semitones, starting with 0.

    Examples
    --------
    >>> get_intervals("C", "major", 7)
    [0, 4, 7, 11]
    >>> get_intervals("A", "minor", 7)
    [0, 3, 7, 10]
    >>> get_intervals("G", "major", 9)
    [0, 4, 7, 10, 14]
    """
    intervals = list(QUALITY_INTERVALS.get(quality, QUALITY_INTERVALS["major"]))

    if extension == 7:
        intervals.append(MAJOR_SEVENTH if quality == "major" else MINOR_SEVENTH)
    elif extension == 9:
        intervals.extend([MINOR_SEVENTH, NINTH])

    return intervals
