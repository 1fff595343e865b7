"""Selection state over a filterable, ordered list of records.

The manager keeps the originally loaded records untouched and derives the
visible working list from them on every filter application.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from typing import Generic, TypeVar

T = TypeVar("T")


class SelectionManager(Generic[T]):
    """Own ``origin``/``working`` record lists plus a wraparound cursor."""

    def __init__(self, items: Iterable[T] = ()) -> None:
        """Snapshot ``items`` into independent origin and working lists."""
        self._origin: tuple[T, ...] = tuple(items)
        self._working: list[T] = list(self._origin)
        self._selected = 0

    def select_down(self) -> None:
        """Move selection one row down, wrapping from the last row to the first."""
        if not self._working:
            return
        if self._selected == len(self._working) - 1:
            self._selected = 0
            return
        self._selected += 1

    def select_up(self) -> None:
        """Move selection one row up, wrapping from the first row to the last."""
        if not self._working:
            return
        if self._selected == 0:
            self._selected = len(self._working) - 1
            return
        self._selected -= 1

    def reset_selection(self) -> None:
        self._selected = 0

    def current(self) -> T | None:
        """Return the selected record, or ``None`` when nothing is visible."""
        if not self._working:
            return None
        return self._working[self._selected]

    def position(self) -> int:
        return self._selected

    def count(self) -> int:
        return len(self._working)

    def apply_filter(self, predicate: Callable[[T], bool]) -> None:
        """Rebuild the working list from origin and reset the selection.

        Filtering always starts from the full origin list, so only the latest
        predicate is ever in effect.
        """
        self._working = [item for item in self._origin if predicate(item)]
        self.reset_selection()

    def enumerate(self) -> Iterator[tuple[int, T]]:
        """Yield ``(index, record)`` pairs over the working list."""
        return enumerate(self._working)

    def __len__(self) -> int:
        return len(self._working)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(count={len(self._working)}, "
            f"origin={len(self._origin)}, selected={self._selected})"
        )
