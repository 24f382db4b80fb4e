"""Find easier fingerings for a chord.

Candidates come from the chord's own entry, the entries it lists as
alternatives, the plain triad for extended or unusual qualities, and the
easiest shape of a chord whose usual form is a barre. Results are ranked by
difficulty and shapes with identical frets are reported once.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from chord_helper.database import ChordDatabase, normalize_chord_name
from chord_helper.models import AlternativeResult, ChordDescriptor, ChordEntry, Fingering, Source
from chord_helper.parser import ParseError, parse_chord

logger = logging.getLogger(__name__)

BARRE_DIFFICULTY = 4
EASY_DIFFICULTY = 2


def _tagged(
    fingerings: Iterable[Fingering],
    source: Source,
    suffix: str = "",
) -> list[AlternativeResult]:
    return [
        AlternativeResult(fingering=f, source=source, name=f"{f.name}{suffix}")
        for f in fingerings
    ]


def sort_by_difficulty(results: Iterable[AlternativeResult]) -> list[AlternativeResult]:
    """Sort results from easiest to hardest, keeping ties in input order."""
    return sorted(results, key=lambda r: r.sort_difficulty)


def remove_duplicates(results: Iterable[AlternativeResult]) -> list[AlternativeResult]:
    """Drop results whose frets repeat an earlier result."""
    seen: set[tuple[int | None, ...]] = set()
    unique: list[AlternativeResult] = []
    for result in results:
        if result.frets in seen:
            continue
        seen.add(result.frets)
        unique.append(result)
    return unique


class AlternativeFinder:
    """Rank alternative fingerings for chord names.

    Parameters
    ----------
    database : ChordDatabase | None
        Chord table to search; the bundled table when omitted.

    Examples
    --------
    >>> finder = AlternativeFinder()
    >>> [r.source for r in finder.find_alternatives("Am")]
    ['direct', 'alternative', 'direct']
    """

    def __init__(self, database: ChordDatabase | None = None) -> None:
        self.database = database if database is not None else ChordDatabase.default()

    def find_alternatives(self, chord_name: str) -> list[AlternativeResult]:
        """Collect, rank and deduplicate fingerings for a chord name.

        Parameters
        ----------
        chord_name : str
            Chord to find fingerings for (e.g., "F", "Bbm", "Cmaj7").

        Returns
        -------
        list[AlternativeResult]
            Fingerings sorted by ascending difficulty, empty for an
            unparseable name or an unknown chord with no simpler form.
        """
        try:
            descriptor = parse_chord(chord_name)
        except ParseError:
            logger.debug("Cannot find alternatives for unparseable name %r", chord_name)
            return []

        entry = self.database.get_chord(normalize_chord_name(chord_name))

        candidates: list[AlternativeResult] = []
        if entry is not None:
            candidates.extend(_tagged(entry.fingerings, "direct"))
            for alternative_name in entry.alternatives:
                alternative = self.database.get_chord(alternative_name)
                if alternative is not None:
                    candidates.extend(
                        _tagged(alternative.fingerings, "alternative", " (alternative)")
                    )

        candidates.extend(self.generate_simplified_versions(descriptor, entry))

        ranked = remove_duplicates(sort_by_difficulty(candidates))
        logger.debug(
            "Found %d alternatives for %r (%d before deduplication)",
            len(ranked),
            chord_name,
            len(candidates),
        )
        return ranked

    def generate_simplified_versions(
        self,
        descriptor: ChordDescriptor,
        entry: ChordEntry | None,
    ) -> list[AlternativeResult]:
        """Suggest simpler stand-ins for a chord.

        Parameters
        ----------
        descriptor : ChordDescriptor
            The parsed chord.
        entry : ChordEntry | None
            Its database entry, if any.

        Returns
        -------
        list[AlternativeResult]
            The basic triad when the chord has an extension or a quality
            other than major/minor, followed by the first easy shape of a
            chord that is usually barred.
        """
        simplified: list[AlternativeResult] = []

        if not descriptor.is_simple_triad:
            basic = self.database.get_chord(descriptor.basic_name)
            if basic is not None:
                simplified.extend(_tagged(basic.fingerings, "simplified", " (simplified)"))

        if entry is not None:
            difficulties = [f.difficulty for f in entry.fingerings if f.difficulty is not None]
            has_barre_shape = any(d >= BARRE_DIFFICULTY for d in difficulties)
            easy = next(
                (
                    f
                    for f in entry.fingerings
                    if f.difficulty is not None and f.difficulty <= EASY_DIFFICULTY
                ),
                None,
            )
            if has_barre_shape and easy is not None:
                simplified.extend(_tagged([easy], "open-version", " (easier)"))

        return simplified
