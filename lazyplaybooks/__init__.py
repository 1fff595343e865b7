"""Public package surface for lazyplaybooks.

Exports ``main`` for programmatic CLI invocation and the list-navigation
core: selection manager, record filters, viewport window, and view modes.
"""

from __future__ import annotations

from .filters import FilterMode, IdFilter, NameFilter, build_filter
from .modes import ViewMode
from .selection import SelectionManager
from .viewport import ViewportWindow, viewport_window, window


def main(*args, **kwargs):
    """Lazily import CLI entrypoint to keep package imports lightweight."""
    from .cli import main as _main

    return _main(*args, **kwargs)


__all__ = [
    "FilterMode",
    "IdFilter",
    "NameFilter",
    "SelectionManager",
    "ViewMode",
    "ViewportWindow",
    "build_filter",
    "main",
    "viewport_window",
    "window",
]
