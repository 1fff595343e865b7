"""Top-level picker modes and their left/right cycling order."""

from __future__ import annotations

from collections.abc import Iterator
from enum import IntEnum


class ViewMode(IntEnum):
    """Picker screens, ordered as shown in the mode ribbon."""

    FILE_PICKER = 1
    PLAYBOOK = 2
    USAGE = 3

    @classmethod
    def default(cls) -> ViewMode:
        return cls.FILE_PICKER

    @classmethod
    def ordered(cls) -> Iterator[ViewMode]:
        return iter(sorted(cls))

    @classmethod
    def from_digit(cls, digit: int) -> ViewMode | None:
        """Return the mode whose ordinal is ``digit``, if any."""
        try:
            return cls(digit)
        except ValueError:
            return None

    def next(self) -> ViewMode:
        """Advance one mode, wrapping from the last to the first."""
        mode = ViewMode.from_digit(self.value + 1)
        return mode if mode is not None else ViewMode.FILE_PICKER

    def prev(self) -> ViewMode:
        """Step back one mode, wrapping from the first to the last."""
        mode = ViewMode.from_digit(self.value - 1)
        return mode if mode is not None else ViewMode.USAGE

    @property
    def has_list(self) -> bool:
        return self is not ViewMode.USAGE

    @property
    def label(self) -> str:
        return _LABELS[self]


_LABELS: dict[ViewMode, str] = {
    ViewMode.FILE_PICKER: "FilePicker",
    ViewMode.PLAYBOOK: "Playbook",
    ViewMode.USAGE: "Usage",
}


__all__ = ["ViewMode"]
