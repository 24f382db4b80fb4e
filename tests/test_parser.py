"""Tests for chord name parsing."""

import pytest

from chord_helper.models import ChordDescriptor
from chord_helper.parser import (
    ParseError,
    get_intervals,
    is_valid,
    parse_bass,
    parse_chord,
    parse_extension,
    parse_quality,
)


class TestParseChord:
    def test_minor_seventh_sharp_root(self) -> None:
        chord = parse_chord("C#m7")
        assert chord.root == "C#"
        assert chord.quality == "minor"
        assert chord.extension == 7
        assert chord.bass is None

    def test_flat_root_normalized(self) -> None:
        chord = parse_chord("Dbmaj7")
        assert chord.root == "C#"
        assert chord.quality == "major"
        assert chord.extension == 7

    def test_capitalized_min_is_minor(self) -> None:
        chord = parse_chord("CMin7")
        assert chord.quality == "minor"
        assert chord.extension == 7

    def test_plain_major(self) -> None:
        chord = parse_chord("G")
        assert chord == ChordDescriptor(root="G", quality="major", original="G")

    def test_original_is_trimmed(self) -> None:
        assert parse_chord("  Am  ").original == "Am"

    def test_slash_chord(self) -> None:
        chord = parse_chord("C/E")
        assert chord.root == "C"
        assert chord.quality == "major"
        assert chord.bass == "E"

    def test_slash_chord_flat_bass(self) -> None:
        assert parse_chord("Gm7/Bb").bass == "A#"

    def test_invalid_bass_is_dropped(self) -> None:
        chord = parse_chord("C/H")
        assert chord.root == "C"
        assert chord.bass is None

    @pytest.mark.parametrize("text", ["", "   ", "H", "h7", "Cb", "7"])
    def test_invalid_raises(self, text: str) -> None:
        with pytest.raises(ParseError):
            parse_chord(text)

    def test_non_string_raises(self) -> None:
        with pytest.raises(ParseError, match="must be a string"):
            parse_chord(None)  # type: ignore[arg-type]

    def test_parse_error_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            parse_chord("X")

    def test_descriptor_is_immutable(self) -> None:
        chord = parse_chord("C")
        with pytest.raises(AttributeError):
            chord.root = "D"  # type: ignore[misc]


class TestParseQuality:
    @pytest.mark.parametrize(
        ("suffix", "quality"),
        [
            ("", "major"),
            ("maj7", "major"),
            ("Maj7", "major"),
            ("M7", "major"),
            ("m", "minor"),
            ("m7", "minor"),
            ("min", "minor"),
            ("Min7", "minor"),
            ("MIN", "minor"),
            ("mM7", "minor"),
            ("dim", "diminished"),
            ("dim7", "diminished"),
            ("aug", "augmented"),
            ("sus4", "suspended"),
            ("sus", "suspended"),
            ("7", "major"),
            ("/E", "major"),
        ],
    )
    def test_quality(self, suffix: str, quality: str) -> None:
        assert parse_quality(suffix) == quality


class TestParseExtension:
    @pytest.mark.parametrize(
        ("suffix", "extension"),
        [
            ("7", 7),
            ("m7", 7),
            ("maj9", 9),
            ("min9", 9),
            ("sus", "sus4"),
            ("", None),
            ("m", None),
            ("dim", None),
            ("/E", None),
        ],
    )
    def test_extension(self, suffix: str, extension: object) -> None:
        assert parse_extension(suffix) == extension

    def test_number_wins_over_tags(self) -> None:
        assert parse_extension("sus2") == 2
        assert parse_extension("add9") == 9


class TestParseBass:
    def test_no_slash(self) -> None:
        assert parse_bass("m7") is None

    def test_last_slash_wins(self) -> None:
        assert parse_bass("/G/B") == "B"

    def test_sharp_bass(self) -> None:
        assert parse_bass("/F#") == "F#"

    def test_empty_bass(self) -> None:
        assert parse_bass("/") is None


class TestIsValid:
    def test_valid(self) -> None:
        assert is_valid("F#m") is True

    def test_invalid(self) -> None:
        assert is_valid("") is False
        assert is_valid("H") is False


class TestGetIntervals:
    @pytest.mark.parametrize(
        ("quality", "intervals"),
        [
            ("major", [0, 4, 7]),
            ("minor", [0, 3, 7]),
            ("diminished", [0, 3, 6]),
            ("augmented", [0, 4, 8]),
            ("suspended", [0, 5, 7]),
        ],
    )
    def test_triads(self, quality: str, intervals: list[int]) -> None:
        assert get_intervals("C", quality, None) == intervals

    def test_major_seventh(self) -> None:
        assert get_intervals("C", "major", 7) == [0, 4, 7, 11]

    def test_minor_seventh(self) -> None:
        assert get_intervals("A", "minor", 7) == [0, 3, 7, 10]

    def test_ninth_ignores_quality(self) -> None:
        assert get_intervals("D", "minor", 9) == [0, 3, 7, 10, 14]

    def test_unknown_quality_is_major(self) -> None:
        assert get_intervals("C", "weird") == [0, 4, 7]

    def test_tag_extension_adds_nothing(self) -> None:
        assert get_intervals("D", "suspended", "sus4") == [0, 5, 7]

    def test_does_not_mutate_table(self) -> None:
        get_intervals("C", "major", 9)
        assert get_intervals("C", "major") == [0, 4, 7]
