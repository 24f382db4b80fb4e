"""Tests for text rendering of fingerings."""

from chord_helper.models import Fingering
from chord_helper.render import RenderOptions, fret_window, render_diagram, tab_notation

x = None

AM = Fingering("Am (Open)", 1, (x, 0, 2, 2, 1, 0), (x, 0, 2, 3, 1, 0))
C_BARRE = Fingering("C (Barre)", 4, (3, 3, 5, 5, 5, 3), (1, 1, 2, 3, 4, 1))


class TestTabNotation:
    def test_open_shape(self) -> None:
        assert tab_notation(AM) == "E|---\nA|---0\nD|---2\nG|---2\nB|---1\ne|---0"

    def test_high_frets(self) -> None:
        assert tab_notation(C_BARRE).splitlines()[2] == "D|---5"


class TestFretWindow:
    def test_open_shape_starts_at_nut(self) -> None:
        assert fret_window(AM) == (0, 4)

    def test_barre_shape(self) -> None:
        assert fret_window(C_BARRE) == (2, 7)

    def test_max_frets_caps_window(self) -> None:
        wide = Fingering("wide", None, (1, x, x, x, x, 9), (1, x, x, x, x, 4))
        assert fret_window(wide, max_frets=5) == (0, 5)

    def test_all_muted(self) -> None:
        assert fret_window(Fingering("none", None, (x,) * 6, (x,) * 6)) == (0, 2)


class TestRenderDiagram:
    def test_rows(self) -> None:
        lines = render_diagram(AM, RenderOptions(show_fret_numbers=False)).splitlines()
        assert lines == [
            "e o|---|---|---|---|",
            "B  |-1-|---|---|---|",
            "G  |---|-3-|---|---|",
            "D  |---|-2-|---|---|",
            "A o|---|---|---|---|",
            "E x|---|---|---|---|",
        ]

    def test_fret_numbers_header(self) -> None:
        lines = render_diagram(C_BARRE).splitlines()
        assert lines[0].split() == ["2", "3", "4", "5", "6", "7"]
        assert len(lines) == 7

    def test_tab_notation_appended(self) -> None:
        text = render_diagram(AM, RenderOptions(show_tab_notation=True))
        assert text.endswith(tab_notation(AM))

    def test_missing_finger_uses_star(self) -> None:
        shape = Fingering("dots", None, (x, x, 2, x, x, x), (x, x, 0, x, x, x))
        assert "-*-" in render_diagram(shape)
