"""Persistent JSON config helpers.

Reads picker preferences and key bindings from the user config directory.
Malformed or missing config falls back to defaults
and reports a human-readable message instead of raising.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path

from platformdirs import user_config_dir

from .keybindings import KeybindingError, Keybindings

logger = logging.getLogger(__name__)

APP_NAME = "lazyplaybooks"
CONFIG_FILENAME = "config.json"
CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME

CONFIGURATION_IGNORE_COMMENTS = "ignore_comments"
CONFIGURATION_SORT_FILES = "sort_files"
CONFIGURATION_THEME = "theme"
CONFIGURATION_STYLE = "style"

DEFAULT_STYLE = "monokai"


@dataclass(frozen=True)
class PlaybookSettings:
    """Resolved picker preferences."""

    ignore_comments: bool = True
    sort_files: bool = True
    theme: str | None = None
    style: str = DEFAULT_STYLE
    keybindings: Keybindings = field(default_factory=Keybindings)


def load_config() -> dict[str, object]:
    """Load the persisted JSON config object.

    Returns an empty dict when the file is missing, unreadable, malformed, or
    does not decode to a top-level JSON object.
    """
    try:
        data = json.loads(CONFIG_PATH.read_text(encoding="utf-8"))
    except FileNotFoundError:
        return {}
    except (OSError, ValueError) as exc:
        logger.warning("ignoring unreadable config %s: %s", CONFIG_PATH, exc)
        return {}
    return data if isinstance(data, dict) else {}


def save_config(data: dict[str, object]) -> None:
    """Persist config data as pretty-printed JSON.

    Filesystem/serialization errors are logged and otherwise ignored.
    """
    try:
        CONFIG_PATH.parent.mkdir(parents=True, exist_ok=True)
        CONFIG_PATH.write_text(json.dumps(data, indent=2) + "\n", encoding="utf-8")
    except (OSError, TypeError, ValueError) as exc:
        logger.warning("could not write config %s: %s", CONFIG_PATH, exc)


def save_theme_name(theme_name: str) -> None:
    """Persist selected UI theme name."""
    stripped = str(theme_name).strip()
    if not stripped:
        return
    config = load_config()
    config[CONFIGURATION_THEME] = stripped
    save_config(config)


def _parse_bool(value: object) -> bool | None:
    """Accept JSON booleans or ``"true"``/``"false"`` strings."""
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        normalized = value.strip()
        if normalized == "true":
            return True
        if normalized == "false":
            return False
    return None


def _load_bool(data: dict[str, object], key: str, default: bool, messages: list[str]) -> bool:
    if key not in data:
        return default
    value = data[key]
    parsed = _parse_bool(value)
    if parsed is None:
        messages.append(
            f"'{key}' config value must be 'true' or 'false', but it's '{value}'. "
            f"The default '{str(default).lower()}' is used."
        )
        return default
    return parsed


def _load_optional_str(data: dict[str, object], key: str) -> str | None:
    value = data.get(key)
    if not isinstance(value, str):
        return None
    stripped = value.strip()
    return stripped if stripped else None


def load_settings(data: dict[str, object] | None = None) -> tuple[PlaybookSettings, list[str]]:
    """Resolve settings from config data, collecting messages for bad values.

    ``data`` defaults to the persisted config file.
    """
    if data is None:
        data = load_config()
    messages: list[str] = []

    ignore_comments = _load_bool(data, CONFIGURATION_IGNORE_COMMENTS, True, messages)
    sort_files = _load_bool(data, CONFIGURATION_SORT_FILES, True, messages)

    try:
        keybindings = Keybindings.from_config(data)
    except KeybindingError as exc:
        messages.append(f"Failed to parse keybindings, check your config: {exc}. Default is used.")
        keybindings = Keybindings()

    settings = PlaybookSettings(
        ignore_comments=ignore_comments,
        sort_files=sort_files,
        theme=_load_optional_str(data, CONFIGURATION_THEME),
        style=_load_optional_str(data, CONFIGURATION_STYLE) or DEFAULT_STYLE,
        keybindings=keybindings,
    )
    for message in messages:
        logger.warning(message)
    return settings, messages


__all__ = [
    "APP_NAME",
    "CONFIG_PATH",
    "DEFAULT_STYLE",
    "PlaybookSettings",
    "load_config",
    "load_settings",
    "save_config",
    "save_theme_name",
]
