"""Playbook line sanitization and Pygments syntax highlighting.

Lines are colorized one at a time after truncation so the visible width is
decided on plain text. Lexers are chosen from the playbook file name and fall
back to a shell lexer, since playbooks are mostly command lines.
"""

from __future__ import annotations

import re
from functools import lru_cache

from pygments import highlight as pygments_highlight
from pygments.formatters import Terminal256Formatter
from pygments.lexer import Lexer
from pygments.lexers import BashLexer, get_lexer_for_filename
from pygments.styles import get_style_by_name
from pygments.util import ClassNotFound

from .config import DEFAULT_STYLE

_CONTROL_RE = re.compile(r"[\x00-\x08\x0b\x0c\x0e-\x1f\x7f-\x9f]")


def sanitize_terminal_text(source: str) -> str:
    """Escape terminal control bytes to avoid side effects (bell, cursor moves, etc.)."""
    if _CONTROL_RE.search(source) is None:
        return source
    return _CONTROL_RE.sub(lambda match: f"\\x{ord(match.group(0)):02x}", source)


@lru_cache(maxsize=None)
def normalize_style(style: str) -> str:
    """Return ``style`` when Pygments knows it, otherwise the default style."""
    try:
        get_style_by_name(style)
    except ClassNotFound:
        return DEFAULT_STYLE
    return style


@lru_cache(maxsize=None)
def _formatter_for_style(style: str) -> Terminal256Formatter:
    return Terminal256Formatter(style=normalize_style(style))


@lru_cache(maxsize=64)
def lexer_for_playbook(file_name: str | None) -> Lexer:
    """Pick a lexer from the playbook file name, defaulting to Bash."""
    if file_name:
        try:
            return get_lexer_for_filename(file_name)
        except ClassNotFound:
            pass
    return BashLexer()


def highlight_line(line: str, file_name: str | None = None, style: str = DEFAULT_STYLE) -> str:
    """Colorize one playbook line, returning it without a trailing newline."""
    if not line.strip():
        return line
    rendered = pygments_highlight(line, lexer_for_playbook(file_name), _formatter_for_style(style))
    return rendered.rstrip("\n")


__all__ = [
    "highlight_line",
    "lexer_for_playbook",
    "normalize_style",
    "sanitize_terminal_text",
]
