"""What a fingering sounds like.

Maps fret positions in standard tuning to note names and frequencies,
names the chord a shape actually voices (via pychord), and synthesizes a
simple strum so a fingering can be auditioned.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

import numpy as np

from chord_helper.notes import note_index, transpose

if TYPE_CHECKING:
    from numpy.typing import NDArray

    from chord_helper.models import Fingering

logger = logging.getLogger(__name__)

# Standard tuning, keyed by string number (6 = low E)
STANDARD_TUNING: dict[int, str] = {6: "E", 5: "A", 4: "D", 3: "G", 2: "B", 1: "E"}
OPEN_FREQUENCIES: dict[int, float] = {
    6: 82.41,  # E2
    5: 110.00,  # A2
    4: 146.83,  # D3
    3: 196.00,  # G3
    2: 246.94,  # B3
    1: 329.63,  # E4
}

STRUM_DELAY = 0.03  # seconds between strings
NOTE_DURATION = 0.8  # seconds each string rings
ATTACK = 0.01
PEAK_GAIN = 0.3
FLOOR_GAIN = 0.01
SAMPLE_RATE = 44100


@dataclass(frozen=True)
class StrumNote:
    """One string of a strum.

    Parameters
    ----------
    string : int
        Physical string number.
    frequency : float
        Pitch in Hz.
    onset : float
        Start time in seconds from the first string.
    """

    string: int
    frequency: float
    onset: float


def note_frequency(string: int, fret: int | None) -> float | None:
    """Frequency of a fretted string in standard tuning, None when muted.

    Examples
    --------
    >>> note_frequency(5, 0)
    110.0
    >>> round(note_frequency(5, 12), 2)
    220.0
    >>> note_frequency(6, None) is None
    True
    """
    if fret is None or string not in OPEN_FREQUENCIES:
        return None
    return OPEN_FREQUENCIES[string] * 2 ** (fret / 12)


def sounded_notes(fingering: Fingering) -> list[str]:
    """Note names sounded by a fingering, from the lowest string up.

    Examples
    --------
    >>> from chord_helper.models import Fingering
    >>> em = Fingering("Em", 1, (0, 2, 2, 0, 0, 0), (0, 2, 3, 0, 0, 0))
    >>> sounded_notes(em)
    ['E', 'B', 'E', 'G', 'B', 'E']
    """
    notes = []
    for string, fret in zip(fingering.strings, fingering.frets):
        if fret is None or string not in STANDARD_TUNING:
            continue
        notes.append(transpose(STANDARD_TUNING[string], fret))
    return notes


def identify_chords(fingering: Fingering) -> list[str]:
    """Name the chords a fingering voices.

    The bass note comes first, so inversions are reported as slash chords.

    Parameters
    ----------
    fingering : Fingering
        The shape to analyse.

    Returns
    -------
    list[str]
        Chord names recognised by pychord, empty when nothing matches.
    """
    from pychord import find_chords_from_notes

    notes = sounded_notes(fingering)
    if not notes:
        return []

    bass = note_index(notes[0])
    # pychord matches interval stacks exactly, so spell the notes as a
    # close-position stack above the bass.
    pitch_classes = sorted(set(notes), key=lambda note: (note_index(note) - bass) % 12)
    return [chord.chord for chord in find_chords_from_notes(pitch_classes)]


def strum_plan(
    fingering: Fingering,
    delay: float = STRUM_DELAY,
) -> list[StrumNote]:
    """Order the sounding strings of a fingering into a downstroke.

    Examples
    --------
    >>> from chord_helper.models import Fingering
    >>> d = Fingering("D", 1, (None, None, 0, 2, 3, 2), (None, None, 0, 1, 3, 2))
    >>> [(n.string, n.onset) for n in strum_plan(d)]
    [(4, 0.0), (3, 0.03), (2, 0.06), (1, 0.09)]
    """
    plan = []
    for string, fret in zip(fingering.strings, fingering.frets):
        frequency = note_frequency(string, fret)
        if frequency is None:
            continue
        onset = round(len(plan) * delay, 6)
        plan.append(StrumNote(string=string, frequency=frequency, onset=onset))
    return plan


def _envelope(times: NDArray[np.float64], duration: float) -> NDArray[np.float64]:
    attack = times < ATTACK
    decay_position = (times - ATTACK) / max(duration - ATTACK, 1e-9)
    return np.where(
        attack,
        PEAK_GAIN * times / ATTACK,
        PEAK_GAIN * (FLOOR_GAIN / PEAK_GAIN) ** decay_position,
    )


def render_strum(
    fingering: Fingering,
    sample_rate: int = SAMPLE_RATE,
    delay: float = STRUM_DELAY,
    duration: float = NOTE_DURATION,
) -> NDArray[np.float32]:
    """Synthesize a strum of the fingering as a mono sine-wave buffer.

    Parameters
    ----------
    fingering : Fingering
        The shape to play.
    sample_rate : int
        Samples per second.
    delay : float
        Seconds between successive strings.
    duration : float
        Seconds each string rings.

    Returns
    -------
    NDArray[np.float32]
        Samples in [-1, 1]; empty when every string is muted.
    """
    plan = strum_plan(fingering, delay)
    if not plan:
        return np.zeros(0, dtype=np.float32)

    total = plan[-1].onset + duration
    buffer = np.zeros(math.ceil(total * sample_rate), dtype=np.float64)
    times = np.arange(int(duration * sample_rate)) / sample_rate
    envelope = _envelope(times, duration)

    for note in plan:
        start = int(round(note.onset * sample_rate))
        tone = envelope * np.sin(2 * np.pi * note.frequency * times)
        stop = min(start + len(tone), len(buffer))
        buffer[start:stop] += tone[: stop - start]

    peak = float(np.max(np.abs(buffer)))
    if peak > 1.0:
        buffer /= peak
    return buffer.astype(np.float32)


def write_strum(
    path: Path | str,
    fingering: Fingering,
    sample_rate: int = SAMPLE_RATE,
) -> Path:
    """Write the strum of a fingering to an audio file (format from suffix)."""
    import soundfile as sf

    path = Path(path)
    samples = render_strum(fingering, sample_rate=sample_rate)
    sf.write(str(path), samples, sample_rate)
    logger.debug("Wrote %d samples for %r to %s", len(samples), fingering.name, path)
    return path
