"""Top-level chord lookup functions backed by the bundled chord table."""

from __future__ import annotations

from dataclasses import dataclass

from chord_helper.alternatives import AlternativeFinder
from chord_helper.database import ChordDatabase
from chord_helper.models import AlternativeResult, ChordDescriptor, ChordEntry, Fingering
from chord_helper.parser import parse_chord
from chord_helper.power_chords import get_power_chord_for_chord


@dataclass(frozen=True)
class Suggestion:
    """Fingerings offered for one chord name.

    Parameters
    ----------
    descriptor : ChordDescriptor
        The parsed chord.
    results : tuple[AlternativeResult, ...]
        Fingerings in display order.
    power_chord_mode : bool
        Whether only power chords were requested.
    """

    descriptor: ChordDescriptor
    results: tuple[AlternativeResult, ...]
    power_chord_mode: bool = False

    @property
    def is_empty(self) -> bool:
        return not self.results

    @property
    def title(self) -> str:
        kind = "Power Chords" if self.power_chord_mode else "Easy Alternatives"
        return f'{kind} for "{self.descriptor.original}"'


def lookup_chord(name: str) -> ChordEntry | None:
    """Return the database entry for a chord name, if there is one."""
    return ChordDatabase.default().get_chord(name)


def search_chord_names(query: str) -> list[str]:
    """Return up to ten chord names matching a partial query."""
    return ChordDatabase.default().search_chords(query)


def find_alternatives(name: str) -> list[AlternativeResult]:
    """Return ranked alternative fingerings for a chord name."""
    return AlternativeFinder().find_alternatives(name)


def get_power_chords(descriptor: ChordDescriptor | None) -> list[Fingering]:
    """Return power chord fingerings for a parsed chord."""
    return get_power_chord_for_chord(descriptor)


def suggest(name: str, *, power_chord_mode: bool = False) -> Suggestion:
    """Collect the fingerings to show for a chord name.

    In power chord mode only power chords are returned. Otherwise the ranked
    alternatives come first, followed by the power chords for the same root.

    Parameters
    ----------
    name : str
        Chord name as typed by the user.
    power_chord_mode : bool
        Return power chords only.

    Returns
    -------
    Suggestion
        The parsed chord and its fingerings; check ``is_empty`` for the
        "no fingerings" case.

    Raises
    ------
    ParseError
        If the name has no recognizable root.

    Examples
    --------
    >>> suggestion = suggest("Bb", power_chord_mode=True)
    >>> suggestion.results[0].name
    'A#5 (6th string)'
    """
    descriptor = parse_chord(name)
    power_chords = [
        AlternativeResult(fingering=f, source="power-chord")
        for f in get_power_chord_for_chord(descriptor)
    ]

    if power_chord_mode:
        results = power_chords
    else:
        results = find_alternatives(name) + power_chords

    return Suggestion(
        descriptor=descriptor,
        results=tuple(results),
        power_chord_mode=power_chord_mode,
    )
