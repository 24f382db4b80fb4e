"""Tests for the top-level lookup functions."""

import pytest

import chord_helper
from chord_helper import (
    ParseError,
    find_alternatives,
    get_power_chords,
    lookup_chord,
    parse_chord,
    search_chord_names,
    suggest,
)


class TestLookup:
    def test_lookup_flat(self) -> None:
        entry = lookup_chord("Db")
        assert entry is not None
        assert entry.root == "C#"

    def test_lookup_missing(self) -> None:
        assert lookup_chord("Bb") is None

    def test_search(self) -> None:
        assert search_chord_names("m7") == ["Am7", "Bm7", "Dm7", "Em7"]

    def test_search_limit(self) -> None:
        assert len(search_chord_names("m")) == 10


class TestFacade:
    def test_find_alternatives(self) -> None:
        assert find_alternatives("Am")[0].name == "Am (Open)"

    def test_get_power_chords(self) -> None:
        assert get_power_chords(parse_chord("E"))[0].name == "E5 (Open)"

    def test_exports(self) -> None:
        for name in chord_helper.__all__:
            assert hasattr(chord_helper, name)


class TestSuggest:
    def test_power_chord_mode(self) -> None:
        suggestion = suggest("E", power_chord_mode=True)
        assert suggestion.results[0].name == "E5 (Open)"
        assert {r.source for r in suggestion.results} == {"power-chord"}
        assert suggestion.title == 'Power Chords for "E"'

    def test_alternatives_then_power_chords(self) -> None:
        suggestion = suggest("Am")
        sources = [r.source for r in suggestion.results]
        assert sources[0] == "direct"
        assert sources[-1] == "power-chord"
        first_power = sources.index("power-chord")
        assert all(s == "power-chord" for s in sources[first_power:])
        assert suggestion.title == 'Easy Alternatives for "Am"'

    def test_unknown_chord_still_gets_power_chords(self) -> None:
        suggestion = suggest("G#m")
        assert not suggestion.is_empty
        assert suggestion.results[0].name == "G#5 (6th string)"

    def test_invalid_name(self) -> None:
        with pytest.raises(ParseError):
            suggest("H")

    def test_descriptor(self) -> None:
        assert suggest("Bbm7").descriptor.root == "A#"
