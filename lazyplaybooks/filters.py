"""Record filters for the picker lists.

Filters are rebuilt from ``(mode, text)`` whenever the query changes and are
handed to ``SelectionManager.apply_filter`` as plain callables.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Protocol


class FilterableRecord(Protocol):
    """Fields a record must expose to be filtered."""

    @property
    def id(self) -> int: ...

    @property
    def name(self) -> str: ...


class FilterMode(Enum):
    """Which record field the query is matched against."""

    NAME = "Name"
    ID = "ID"

    @classmethod
    def default(cls) -> FilterMode:
        return cls.NAME

    def switch_to(self, requested: FilterMode) -> FilterMode:
        """Adopt ``requested``, or fall back to the default when already there."""
        if self is requested:
            return FilterMode.default()
        return requested

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class NameFilter:
    """Keep records whose name contains ``text`` (case-sensitive)."""

    text: str = ""

    def keep(self, record: FilterableRecord) -> bool:
        if not self.text:
            return True
        return self.text in record.name

    def __call__(self, record: FilterableRecord) -> bool:
        return self.keep(record)


@dataclass(frozen=True)
class IdFilter:
    """Keep records whose decimal id starts with ``text``."""

    text: str = ""

    def keep(self, record: FilterableRecord) -> bool:
        return str(record.id).startswith(self.text)

    def __call__(self, record: FilterableRecord) -> bool:
        return self.keep(record)


RecordFilter = NameFilter | IdFilter


def build_filter(mode: FilterMode, text: str) -> RecordFilter:
    """Return the filter strategy for the current query mode and text."""
    if mode is FilterMode.ID:
        return IdFilter(text)
    return NameFilter(text)


__all__ = [
    "FilterableRecord",
    "FilterMode",
    "NameFilter",
    "IdFilter",
    "RecordFilter",
    "build_filter",
]
