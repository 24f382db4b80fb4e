"""Playing difficulty heuristics for fingerings."""

from __future__ import annotations

import math

from chord_helper.models import Fingering

MIN_DIFFICULTY = 1
MAX_DIFFICULTY = 5

PRESSED_WEIGHT = 0.5
BARRE_PENALTY = 2.0
STRETCH_WEIGHT = 0.5
COMFORTABLE_SPAN = 3
OPEN_STRING_BONUS = 0.3


def has_barre(fingering: Fingering) -> bool:
    """Check whether one finger holds down several strings at the same fret.

    Examples
    --------
    >>> c_barre = Fingering("C", 4, (3, 3, 5, 5, 5, 3), (1, 1, 2, 3, 4, 1))
    >>> has_barre(c_barre)
    True
    >>> e_open = Fingering("E", 1, (0, 2, 2, 1, 0, 0), (0, 2, 3, 1, 0, 0))
    >>> has_barre(e_open)
    False
    """
    seen: set[tuple[int, int]] = set()
    for fret, finger in zip(fingering.frets, fingering.fingers):
        if not fret or finger is None:
            continue
        position = (finger, fret)
        if position in seen:
            return True
        seen.add(position)
    return False


def fret_span(fingering: Fingering) -> int:
    """Distance between the highest and lowest pressed fret."""
    pressed = fingering.pressed_frets
    if not pressed:
        return 0
    return max(pressed) - min(pressed)


def calculate_difficulty(fingering: Fingering) -> int:
    """Estimate how hard a fingering is to play, from 1 (easy) to 5.

    Each pressed string costs half a point, a barre costs two, every fret of
    stretch beyond three costs half a point, and each open string gives back
    0.3. The score is rounded half-up and clamped to [1, 5].

    Parameters
    ----------
    fingering : Fingering
        The shape to score.

    Returns
    -------
    int
        Difficulty between 1 and 5.

    Examples
    --------
    >>> f_barre = Fingering("F", None, (1, 3, 3, 2, 1, 1), (1, 3, 4, 2, 1, 1))
    >>> calculate_difficulty(f_barre)
    5
    >>> c_open = Fingering("C", None, (None, 3, 2, 0, 1, 0), (None, 2, 1, 0, 3, 0))
    >>> calculate_difficulty(c_open)
    1
    """
    score = PRESSED_WEIGHT * len(fingering.pressed_frets)

    if has_barre(fingering):
        score += BARRE_PENALTY

    score += STRETCH_WEIGHT * max(0, fret_span(fingering) - COMFORTABLE_SPAN)
    score -= OPEN_STRING_BONUS * fingering.open_count

    rounded = math.floor(score + 0.5)
    return max(MIN_DIFFICULTY, min(MAX_DIFFICULTY, rounded))
