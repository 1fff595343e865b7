"""Record types and loaders for picker directories and playbook files."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FileItem:
    """One playbook candidate file listed in FilePicker mode."""

    id: int
    name: str


@dataclass(frozen=True)
class PlaybookLine:
    """One kept line of a playbook file."""

    id: int
    content: str

    @property
    def name(self) -> str:
        return self.content


def read_text(path: Path) -> str:
    """Read text using tolerant encoding fallback order.

    Attempts UTF-8, UTF-8 with BOM, then latin-1; as a final fallback decodes
    raw bytes with UTF-8 replacement semantics.
    """
    for encoding in ("utf-8", "utf-8-sig", "latin-1"):
        try:
            return path.read_text(encoding=encoding)
        except UnicodeDecodeError:
            continue
    return path.read_bytes().decode("utf-8", errors="replace")


def list_playbook_files(directory: Path, sort: bool = True) -> list[FileItem]:
    """List visible regular files of ``directory`` as 1-based ``FileItem`` rows.

    Hidden names and directories are skipped. Ids follow the final order, so
    they are assigned after optional sorting. Scan failures raise ``OSError``.
    """
    names: list[str] = []
    with os.scandir(directory) as entries:
        for entry in entries:
            if entry.name.startswith("."):
                continue
            try:
                is_file = entry.is_file()
            except OSError:
                continue
            if is_file:
                names.append(entry.name)

    if sort:
        names.sort()

    items = [FileItem(id=idx, name=name) for idx, name in enumerate(names, start=1)]
    logger.debug("listed %d playbook files in %s", len(items), directory)
    return items


def split_playbook_lines(text: str, ignore_comments: bool = True) -> list[PlaybookLine]:
    """Keep non-blank lines, optionally dropping ``#`` comments, numbered from 1."""
    lines: list[PlaybookLine] = []
    for raw in text.splitlines():
        stripped = raw.strip()
        if not stripped:
            continue
        if ignore_comments and stripped.startswith("#"):
            continue
        lines.append(PlaybookLine(id=len(lines) + 1, content=raw))
    return lines


def read_playbook_lines(path: Path, ignore_comments: bool = True) -> list[PlaybookLine]:
    """Load ``path`` as playbook lines. Read failures raise ``OSError``."""
    lines = split_playbook_lines(read_text(path), ignore_comments=ignore_comments)
    logger.debug("loaded %d playbook lines from %s", len(lines), path)
    return lines


__all__ = [
    "FileItem",
    "PlaybookLine",
    "list_playbook_files",
    "read_playbook_lines",
    "read_text",
    "split_playbook_lines",
]
