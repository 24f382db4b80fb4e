"""Tests for the difficulty heuristics."""

import pytest

from chord_helper.difficulty import calculate_difficulty, fret_span, has_barre
from chord_helper.models import Fingering

x = None


def shape(frets: tuple, fingers: tuple) -> Fingering:
    return Fingering(name="test", difficulty=None, frets=frets, fingers=fingers)


class TestHasBarre:
    def test_barre_shape(self) -> None:
        assert has_barre(shape((3, 3, 5, 5, 5, 3), (1, 1, 2, 3, 4, 1))) is True

    def test_open_shape(self) -> None:
        assert has_barre(shape((0, 2, 2, 1, 0, 0), (0, 2, 3, 1, 0, 0))) is False

    def test_same_finger_different_frets(self) -> None:
        assert has_barre(shape((x, 1, 2, x, x, x), (x, 1, 1, x, x, x))) is False

    def test_open_strings_are_not_a_barre(self) -> None:
        assert has_barre(shape((0, 0, 0, 0, 0, 0), (0, 0, 0, 0, 0, 0))) is False

    def test_missing_finger_ignored(self) -> None:
        assert has_barre(shape((x, x, 2, 2, x, x), (x, x, x, x, x, x))) is False

    def test_partial_barre(self) -> None:
        assert has_barre(shape((x, x, 3, 1, 1, 1), (x, x, 2, 1, 1, 1))) is True


class TestFretSpan:
    def test_ignores_open_and_muted(self) -> None:
        assert fret_span(shape((x, 3, 2, 0, 1, 0), (x, 2, 1, 0, 3, 0))) == 2

    def test_nothing_pressed(self) -> None:
        assert fret_span(shape((0, x, x, x, x, x), (0, x, x, x, x, x))) == 0


class TestCalculateDifficulty:
    def test_single_open_string_clamps_to_one(self) -> None:
        assert calculate_difficulty(shape((x, x, x, x, x, 0), (x, x, x, x, x, 0))) == 1

    def test_all_muted_is_one(self) -> None:
        assert calculate_difficulty(shape((x,) * 6, (x,) * 6)) == 1

    def test_open_c(self) -> None:
        # 3 pressed (1.5) - 2 open (0.6) = 0.9
        assert calculate_difficulty(shape((x, 3, 2, 0, 1, 0), (x, 2, 1, 0, 3, 0))) == 1

    def test_full_barre_clamps_to_five(self) -> None:
        # 6 pressed (3.0) + barre (2.0)
        assert calculate_difficulty(shape((1, 3, 3, 2, 1, 1), (1, 3, 4, 2, 1, 1))) == 5

    def test_rounds_half_up(self) -> None:
        # 5 pressed = 2.5, no barre, no stretch
        assert calculate_difficulty(shape((x, 3, 2, 3, 1, 2), (x, 3, 2, 4, 1, 3))) == 3

    def test_stretch_penalty(self) -> None:
        # 2 pressed (1.0) + span 9 -> (9 - 3) * 0.5 = 3.0
        assert calculate_difficulty(shape((1, x, x, x, x, 10), (1, x, x, x, x, 4))) == 4

    @pytest.mark.parametrize(
        ("frets", "fingers"),
        [
            ((1, 24, 1, 24, 1, 24), (1, 4, 1, 4, 1, 4)),
            ((0, 0, 0, 0, 0, 0), (0, 0, 0, 0, 0, 0)),
            ((x, x, x, x, x, 12), (x, x, x, x, x, 1)),
        ],
    )
    def test_always_in_range(self, frets: tuple, fingers: tuple) -> None:
        assert 1 <= calculate_difficulty(shape(frets, fingers)) <= 5
