"""UI theme definitions and selection helpers.

Themes are UI-only ANSI palettes (ribbon/list/counters). Syntax highlighting
style for playbook lines remains a separate setting.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class UITheme:
    """Semantic ANSI palette used by renderers."""

    name: str
    reset: str
    reverse: str
    key_hint: str
    mode_active: str
    mode_inactive: str
    search_label: str
    counter: str
    row_id: str
    row_selected: str
    error: str
    table_heading: str
    table_key: str


DEFAULT_THEME = UITheme(
    name="default",
    reset="\033[0m",
    reverse="\033[7m",
    key_hint="\033[38;5;229m",
    mode_active="\033[1;7;38;5;81m",
    mode_inactive="\033[2;38;5;250m",
    search_label="\033[38;5;42m",
    counter="\033[38;5;42m",
    row_id="\033[38;5;109m",
    row_selected="\033[1;7;38;5;81m",
    error="\033[1;38;5;203m",
    table_heading="\033[1;38;5;81m",
    table_key="\033[38;5;229m",
)

OCEAN_THEME = UITheme(
    name="ocean",
    reset="\033[0m",
    reverse="\033[7m",
    key_hint="\033[38;5;153m",
    mode_active="\033[1;7;38;5;45m",
    mode_inactive="\033[2;38;5;110m",
    search_label="\033[38;5;117m",
    counter="\033[38;5;73m",
    row_id="\033[38;5;73m",
    row_selected="\033[1;7;38;5;45m",
    error="\033[1;38;5;209m",
    table_heading="\033[1;38;5;45m",
    table_key="\033[38;5;153m",
)

PLAIN_THEME = UITheme(
    name="plain",
    reset="",
    reverse="",
    key_hint="",
    mode_active="",
    mode_inactive="",
    search_label="",
    counter="",
    row_id="",
    row_selected="",
    error="",
    table_heading="",
    table_key="",
)

_THEMES: dict[str, UITheme] = {
    DEFAULT_THEME.name: DEFAULT_THEME,
    OCEAN_THEME.name: OCEAN_THEME,
}


def available_theme_names() -> tuple[str, ...]:
    """Return selectable non-plain theme names."""
    return tuple(sorted(_THEMES.keys()))


def normalize_theme_name(name: str | None) -> str:
    """Return a valid theme name, falling back to default."""
    if not name:
        return DEFAULT_THEME.name
    candidate = str(name).strip().lower()
    if candidate in _THEMES:
        return candidate
    return DEFAULT_THEME.name


def resolve_theme(name: str | None, *, no_color: bool = False) -> UITheme:
    """Return concrete theme for requested name and color mode."""
    if no_color:
        return PLAIN_THEME
    return _THEMES[normalize_theme_name(name)]


__all__ = [
    "UITheme",
    "DEFAULT_THEME",
    "OCEAN_THEME",
    "PLAIN_THEME",
    "available_theme_names",
    "normalize_theme_name",
    "resolve_theme",
]
