"""User settings blob.

Settings are stored as a small JSON object so they stay compatible with the
keys the browser version used (``powerChordMode``, ``showTabNotation``).
"""

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger(__name__)

SETTINGS_ENV_VAR = "CHORD_HELPER_SETTINGS"
DEFAULT_SETTINGS_FILE = ".chord_helper.json"


@dataclass(frozen=True)
class Settings:
    """Preferences for how results are produced and shown.

    Parameters
    ----------
    power_chord_mode : bool
        Show only power chords instead of alternatives.
    show_tab_notation : bool
        Print tab notation with each fingering.
    """

    power_chord_mode: bool = False
    show_tab_notation: bool = True

    def to_dict(self) -> dict[str, bool]:
        return {
            "powerChordMode": self.power_chord_mode,
            "showTabNotation": self.show_tab_notation,
        }

    @classmethod
    def from_dict(cls, data: dict[str, object]) -> Settings:
        """Build settings from a stored blob.

        Unknown keys are ignored, and values that are not JSON booleans fall
        back to the defaults.
        """
        defaults = cls()
        return cls(
            power_chord_mode=_flag(data, "powerChordMode", defaults.power_chord_mode),
            show_tab_notation=_flag(data, "showTabNotation", defaults.show_tab_notation),
        )


def _flag(data: dict[str, object], key: str, default: bool) -> bool:
    value = data.get(key, default)
    if not isinstance(value, bool):
        logger.warning("Ignoring non-boolean %s=%r in settings", key, value)
        return default
    return value


def default_settings_path() -> Path:
    """Settings location from the environment, else in the home directory."""
    override = os.environ.get(SETTINGS_ENV_VAR)
    if override:
        return Path(override).expanduser()
    return Path.home() / DEFAULT_SETTINGS_FILE


def load_settings(path: Path | str | None = None) -> Settings:
    """Load settings, falling back to defaults when no file exists.

    Raises
    ------
    ValueError
        If the file is not a JSON object.
    """
    path = Path(path) if path is not None else default_settings_path()
    if not path.exists():
        logger.debug("No settings file at %s, using defaults", path)
        return Settings()

    try:
        data = json.loads(path.read_text())
    except json.JSONDecodeError as e:
        msg = f"Invalid settings file {path}: {e}"
        raise ValueError(msg) from e

    if not isinstance(data, dict):
        msg = f"Invalid settings file {path}: expected a JSON object"
        raise ValueError(msg)

    logger.debug("Loaded settings from %s", path)
    return Settings.from_dict(data)


def save_settings(settings: Settings, path: Path | str | None = None) -> Path:
    """Write settings as JSON and return the path written."""
    path = Path(path) if path is not None else default_settings_path()
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(settings.to_dict(), indent=2))
    logger.debug("Saved settings to %s", path)
    return path
