"""Plain-text rendering of fingerings.

Produces tab notation and a small ASCII chord diagram for terminal output.
"""

from __future__ import annotations

from dataclasses import dataclass

from chord_helper.models import Fingering

# Label per physical string number (6 = low E)
STRING_LABELS: dict[int, str] = {6: "E", 5: "A", 4: "D", 3: "G", 2: "B", 1: "e"}

CELL_WIDTH = 3


@dataclass(frozen=True)
class RenderOptions:
    """Display options for chord diagrams.

    Parameters
    ----------
    show_fret_numbers : bool
        Print fret numbers above the diagram.
    max_frets : int
        Maximum number of frets shown.
    show_tab_notation : bool
        Append tab notation below the diagram.
    """

    show_fret_numbers: bool = True
    max_frets: int = 5
    show_tab_notation: bool = False


def tab_notation(fingering: Fingering) -> str:
    """Render a fingering as tab notation, one line per string.

    Examples
    --------
    >>> am = Fingering("Am", 1, (None, 0, 2, 2, 1, 0), (None, 0, 2, 3, 1, 0))
    >>> print(tab_notation(am))
    E|---
    A|---0
    D|---2
    G|---2
    B|---1
    e|---0
    """
    lines = []
    for string, fret in zip(fingering.strings, fingering.frets):
        label = STRING_LABELS.get(string, str(string))
        lines.append(f"{label}|---" if fret is None else f"{label}|---{fret}")
    return "\n".join(lines)


def fret_window(fingering: Fingering, max_frets: int = 5) -> tuple[int, int]:
    """Return the first and last fret shown in a diagram.

    The window starts one fret below the lowest sounding fret (or at the
    nut) and ends two frets past the highest, capped at ``max_frets``.

    Examples
    --------
    >>> c_barre = Fingering("C", 4, (3, 3, 5, 5, 5, 3), (1, 1, 2, 3, 4, 1))
    >>> fret_window(c_barre)
    (2, 7)
    """
    sounding = [fret for fret in fingering.frets if fret is not None]
    lowest = min(sounding) if sounding else 0
    highest = max(sounding, default=0)
    start = lowest - 1 if lowest > 0 else 0
    end = min(start + max_frets, highest + 2)
    return start, end


def render_diagram(fingering: Fingering, options: RenderOptions | None = None) -> str:
    """Render a fingering as an ASCII chord diagram.

    Strings run from high e (top) to low E (bottom). The marker before the
    first bar is ``x`` for a muted string and ``o`` for an open one; pressed
    frets show the finger number, or ``*`` when no finger is given.

    Parameters
    ----------
    fingering : Fingering
        The shape to draw.
    options : RenderOptions | None
        Display options, defaults when omitted.

    Returns
    -------
    str
        Multi-line diagram text.
    """
    options = options or RenderOptions()
    start, end = fret_window(fingering, options.max_frets)
    columns = list(range(max(start, 1), end + 1))

    lines: list[str] = []
    if options.show_fret_numbers:
        header = "".join(str(fret).center(CELL_WIDTH + 1) for fret in columns)
        lines.append(" " * 4 + header.rstrip())

    rows = sorted(
        zip(fingering.strings, fingering.frets, fingering.fingers),
        key=lambda row: row[0],
    )
    for string, fret, finger in rows:
        if fret is None:
            marker = "x"
        elif fret == 0:
            marker = "o"
        else:
            marker = " "
        cells = []
        for column in columns:
            if fret == column:
                symbol = str(finger) if finger else "*"
                cells.append(symbol.center(CELL_WIDTH, "-"))
            else:
                cells.append("-" * CELL_WIDTH)
        label = STRING_LABELS.get(string, str(string))
        lines.append(f"{label} {marker}|" + "|".join(cells) + "|")

    if options.show_tab_notation:
        lines.append("")
        lines.append(tab_notation(fingering))

    return "\n".join(lines)
