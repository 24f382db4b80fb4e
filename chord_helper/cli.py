"""Command-line interface for chord-helper."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any

from chord_helper.api import Suggestion, search_chord_names, suggest
from chord_helper.database import ChordDatabase
from chord_helper.models import AlternativeResult, Fingering
from chord_helper.parser import ParseError
from chord_helper.render import RenderOptions, render_diagram, tab_notation
from chord_helper.settings import Settings, load_settings, save_settings
from chord_helper.voicing import identify_chords, write_strum

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def format_frets(frets: tuple[int | None, ...]) -> str:
    """Format frets low string first, ``x`` for muted (e.g., "x32010")."""
    parts = ["x" if fret is None else str(fret) for fret in frets]
    separator = "-" if any(len(part) > 1 for part in parts) else ""
    return separator.join(parts)


def parse_frets(text: str) -> tuple[int | None, ...]:
    """Parse six comma-separated frets, ``x`` meaning muted.

    Raises
    ------
    ValueError
        If there are not six values or a value is not a fret number.
    """
    values = [part.strip().lower() for part in text.split(",")]
    if len(values) != 6:
        msg = f"Expected 6 comma-separated frets, got {len(values)}"
        raise ValueError(msg)
    frets: list[int | None] = []
    for value in values:
        if value == "x":
            frets.append(None)
        elif value.isdigit():
            frets.append(int(value))
        else:
            msg = f"Invalid fret value: {value!r}"
            raise ValueError(msg)
    return tuple(frets)


def result_to_dict(result: AlternativeResult) -> dict[str, Any]:
    return {
        "name": result.name,
        "source": result.source,
        "difficulty": result.difficulty,
        "frets": list(result.frets),
        "fingers": list(result.fingers),
        "strings": list(result.strings),
    }


def suggestion_to_dict(suggestion: Suggestion) -> dict[str, Any]:
    descriptor = suggestion.descriptor
    return {
        "chord": {
            "root": descriptor.root,
            "quality": descriptor.quality,
            "extension": descriptor.extension,
            "bass": descriptor.bass,
            "original": descriptor.original,
        },
        "powerChordMode": suggestion.power_chord_mode,
        "fingerings": [result_to_dict(r) for r in suggestion.results],
    }


def _print_suggestion(suggestion: Suggestion, settings: Settings, diagram: bool) -> None:
    print(suggestion.title)
    options = RenderOptions(show_tab_notation=settings.show_tab_notation)
    for result in suggestion.results:
        print()
        print(
            f"{result.name}  [{result.source}, difficulty {result.difficulty}]  "
            f"{format_frets(result.frets)}"
        )
        if diagram:
            print(render_diagram(result.fingering, options))
        elif settings.show_tab_notation:
            print(tab_notation(result.fingering))


def _resolve_settings(args: argparse.Namespace) -> Settings:
    stored = load_settings(args.settings)
    power = stored.power_chord_mode if args.power is None else args.power
    tab = stored.show_tab_notation if args.tab is None else args.tab
    return Settings(power_chord_mode=power, show_tab_notation=tab)


def cmd_find(args: argparse.Namespace) -> int:
    try:
        settings = _resolve_settings(args)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if args.save:
        path = save_settings(settings, args.settings)
        logger.info("Saved settings to %s", path)

    name = args.name.strip()
    if not name:
        print("Error: Please enter a chord name", file=sys.stderr)
        return 1

    try:
        suggestion = suggest(name, power_chord_mode=settings.power_chord_mode)
    except ParseError:
        print(f'Error: Invalid chord name: "{name}"', file=sys.stderr)
        return 1

    if suggestion.is_empty:
        print(f'Error: No fingerings found for "{name}"', file=sys.stderr)
        return 1

    if args.json:
        indent = 2 if args.pretty else None
        print(json.dumps(suggestion_to_dict(suggestion), indent=indent, ensure_ascii=False))
    else:
        _print_suggestion(suggestion, settings, args.diagram)

    if args.wav:
        first = suggestion.results[0]
        try:
            write_strum(args.wav, first.fingering)
        except (TypeError, RuntimeError, OSError) as e:
            print(f"Error: Cannot write {args.wav}: {e}", file=sys.stderr)
            return 1
        print(f"Wrote {first.name} to {args.wav}", file=sys.stderr)

    return 0


def cmd_search(args: argparse.Namespace) -> int:
    for name in search_chord_names(args.query):
        print(name)
    return 0


def cmd_list(args: argparse.Namespace) -> int:
    for name in ChordDatabase.default().get_all_chord_names():
        print(name)
    return 0


def cmd_identify(args: argparse.Namespace) -> int:
    try:
        frets = parse_frets(args.frets)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    # Finger numbers do not affect the notes sounded.
    fingers = tuple(None if fret is None else 0 for fret in frets)
    fingering = Fingering(name=args.frets, difficulty=None, frets=frets, fingers=fingers)

    names = identify_chords(fingering)
    if not names:
        print(f"No chord recognised for {format_frets(frets)}", file=sys.stderr)
        return 1
    for name in names:
        print(name)
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="chord-helper",
        description="Find easier guitar fingerings for a chord",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s find F
  %(prog)s find Bbm7 --diagram
  %(prog)s find E --power --json --pretty
  %(prog)s search c
  %(prog)s identify x,3,2,0,1,0
        """,
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    find = subparsers.add_parser("find", help="Show ranked fingerings for a chord")
    find.add_argument("name", help="Chord name, e.g. F, C#m7, Bb/D")
    find.add_argument(
        "--power",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Show power chords only (default: from settings)",
    )
    find.add_argument(
        "--tab",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Show tab notation (default: from settings)",
    )
    find.add_argument("--diagram", action="store_true", help="Draw chord diagrams")
    find.add_argument("--json", action="store_true", help="Output JSON")
    find.add_argument("--pretty", action="store_true", help="Pretty-print JSON output")
    find.add_argument(
        "--wav",
        type=Path,
        default=None,
        help="Write a strum of the first fingering to this audio file",
    )
    find.add_argument(
        "--settings",
        type=Path,
        default=None,
        help="Settings file (default: $CHORD_HELPER_SETTINGS or ~/.chord_helper.json)",
    )
    find.add_argument(
        "--save",
        action="store_true",
        help="Store the effective --power/--tab choices in the settings file",
    )
    find.set_defaults(func=cmd_find)

    search = subparsers.add_parser("search", help="List chord names matching a query")
    search.add_argument("query")
    search.set_defaults(func=cmd_search)

    list_cmd = subparsers.add_parser("list", help="List all known chord names")
    list_cmd.set_defaults(func=cmd_list)

    identify = subparsers.add_parser("identify", help="Name the chord a shape voices")
    identify.add_argument("frets", help="Six comma-separated frets, low E first, x = muted")
    identify.set_defaults(func=cmd_identify)

    return parser


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format=LOG_FORMAT,
    )

    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
