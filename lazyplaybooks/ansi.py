"""Display-width helpers for fitting row text into terminal columns."""

from __future__ import annotations

import re
import unicodedata

ANSI_ESCAPE_RE = re.compile(r"\x1b\[[0-9;?]*[ -/]*[@-~]")
ELLIPSIS = "..."


def char_display_width(ch: str) -> int:
    """Return terminal column width for one character.

    Combining marks consume no columns and East Asian wide/fullwidth
    characters consume two.
    """
    if unicodedata.combining(ch):
        return 0
    if unicodedata.east_asian_width(ch) in {"W", "F"}:
        return 2
    return 1


def display_width(text: str) -> int:
    """Visible column count of ``text`` with ANSI sequences ignored."""
    plain = ANSI_ESCAPE_RE.sub("", text)
    return sum(char_display_width(ch) for ch in plain)


def clip_text(text: str, max_cols: int) -> str:
    """Cut plain ``text`` to at most ``max_cols`` display columns."""
    if max_cols <= 0:
        return ""
    out: list[str] = []
    col = 0
    for ch in text:
        w = char_display_width(ch)
        if col + w > max_cols:
            break
        out.append(ch)
        col += w
    return "".join(out)


def truncate_with_ellipsis(text: str, max_cols: int) -> str:
    """Fit plain ``text`` into ``max_cols``, marking cut text with ``...``."""
    text = text.expandtabs(4)
    if display_width(text) <= max_cols:
        return text
    return clip_text(text, max(0, max_cols - len(ELLIPSIS))) + ELLIPSIS[: max(0, max_cols)]


def strip_ansi(text: str) -> str:
    return ANSI_ESCAPE_RE.sub("", text)
