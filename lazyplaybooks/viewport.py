"""Scroll window math for bounded-height list rendering.

All helpers are pure: they take the selection, item count, and available rows
and return index bounds or counters for the renderer.
"""

from __future__ import annotations

from dataclasses import dataclass

# Mode ribbon, blank, search block, above-counter, spacer, and bottom counter row.
RESERVED_ROWS = 6


def list_height(rows: int) -> int:
    """Return rows left for list items after fixed chrome rows."""
    return max(0, rows - RESERVED_ROWS)


def window(selected: int, height: int) -> tuple[int, int]:
    """Return inclusive ``(begin, end)`` row indexes that keep ``selected`` visible.

    Once the selection reaches ``height`` the window scrolls so it ends at the
    selection. Otherwise it is anchored at the top and ``end`` is only an upper
    bound: it can point past the last item of a short list.
    """
    if selected >= height:
        return selected + 1 - height, selected
    return 0, height - 1


def more_below(end: int, count: int) -> int:
    """Count items hidden below ``end``, clamped at zero for short lists."""
    return max(0, count - 1 - end)


@dataclass(frozen=True)
class ViewportWindow:
    """Resolved window plus the counters drawn around it."""

    begin: int
    end: int
    count: int

    @property
    def more_above(self) -> int:
        return self.begin

    @property
    def more_below(self) -> int:
        return more_below(self.end, self.count)

    def contains(self, index: int) -> bool:
        return self.begin <= index <= self.end and index < self.count

    def visible_indexes(self) -> range:
        """Indexes that exist and fall inside the window."""
        return range(self.begin, min(self.end, self.count - 1) + 1)


def viewport_window(selected: int, count: int, height: int) -> ViewportWindow:
    begin, end = window(selected, height)
    return ViewportWindow(begin=begin, end=end, count=count)


__all__ = [
    "RESERVED_ROWS",
    "ViewportWindow",
    "list_height",
    "more_below",
    "viewport_window",
    "window",
]
