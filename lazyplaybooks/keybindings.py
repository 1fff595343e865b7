"""Configurable key bindings and their parsing from config strings.

Bindings are matched against the normalized tokens produced by
``lazyplaybooks.input.read_key`` (for example ``CTRL_E`` or ``ALT_x``).
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum

BIND_EDIT = "bind_edit"
BIND_RELOAD = "bind_reload"
BIND_SWITCH_FILTER_ID = "bind_switch_filter_id"

# Ctrl letters the terminal delivers as other keys.
RESERVED_CTRL_KEYS = {
    "c": "quit",
    "h": "Backspace",
    "i": "Tab",
    "j": "Enter",
    "m": "Enter",
}


class KeybindingError(ValueError):
    """Raised when a key binding config string cannot be parsed."""


class KeyModifier(Enum):
    CTRL = "Ctrl"
    ALT = "Alt"

    @classmethod
    def parse(cls, raw: str) -> KeyModifier:
        candidate = raw.strip().lower()
        for modifier in cls:
            if modifier.value.lower() == candidate:
                return modifier
        raise KeybindingError(f"Unsupported key modifier: {raw!r}")


@dataclass(frozen=True)
class Keybinding:
    """A single modifier + character combination."""

    modifier: KeyModifier
    key: str

    @property
    def token(self) -> str:
        if self.modifier is KeyModifier.CTRL:
            return f"CTRL_{self.key.upper()}"
        return f"ALT_{self.key}"

    def matches(self, token: str) -> bool:
        return token == self.token

    def __str__(self) -> str:
        return f"{self.modifier.value}+{self.key}"


def parse_keybinding(binding: str) -> Keybinding:
    """Parse ``"<Modifier> <char>"`` such as ``"Ctrl e"`` into a binding."""
    parts = binding.split()
    if len(parts) != 2:
        raise KeybindingError(f"Invalid keybinding format: {binding}")
    modifier = KeyModifier.parse(parts[0])
    key = parts[1][0]
    # Alt digits are taken by mode switching.
    if not key.isascii() or not key.isalpha():
        raise KeybindingError(f"{modifier.value} bindings need a letter key: {binding}")
    if modifier is KeyModifier.CTRL:
        key = key.lower()
        if key in RESERVED_CTRL_KEYS:
            raise KeybindingError(f"Ctrl+{key} is reserved ({RESERVED_CTRL_KEYS[key]}): {binding}")
    return Keybinding(modifier, key)


@dataclass(frozen=True)
class Keybindings:
    """User-configurable actions; everything else is hardwired."""

    edit: Keybinding = field(default_factory=lambda: Keybinding(KeyModifier.CTRL, "e"))
    reload: Keybinding = field(default_factory=lambda: Keybinding(KeyModifier.CTRL, "r"))
    # Ctrl+i arrives as Tab in a terminal, so id filtering defaults to Ctrl+n.
    switch_filter_id: Keybinding = field(default_factory=lambda: Keybinding(KeyModifier.CTRL, "n"))

    @classmethod
    def from_config(cls, conf: Mapping[str, object]) -> Keybindings:
        """Build bindings from ``bind_*`` config keys, raising on any bad value."""
        defaults = cls()
        overrides: dict[str, Keybinding] = {}
        for conf_key, attr in (
            (BIND_EDIT, "edit"),
            (BIND_RELOAD, "reload"),
            (BIND_SWITCH_FILTER_ID, "switch_filter_id"),
        ):
            if conf_key not in conf:
                continue
            value = conf[conf_key]
            if not isinstance(value, str):
                raise KeybindingError(f"'{conf_key}' must be a string like 'Ctrl e'")
            overrides[attr] = parse_keybinding(value)
        if not overrides:
            return defaults
        return cls(
            edit=overrides.get("edit", defaults.edit),
            reload=overrides.get("reload", defaults.reload),
            switch_filter_id=overrides.get("switch_filter_id", defaults.switch_filter_id),
        )


__all__ = [
    "BIND_EDIT",
    "BIND_RELOAD",
    "BIND_SWITCH_FILTER_ID",
    "KeyModifier",
    "Keybinding",
    "KeybindingError",
    "Keybindings",
    "parse_keybinding",
]
