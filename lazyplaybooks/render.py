"""Frame construction and terminal output for the picker.

Screen content is assembled as plain ``list[str]`` rows by pure helpers so it
can be asserted in tests; ``render_frame`` is the only function that writes.
"""

from __future__ import annotations

import os
import sys
from collections.abc import Callable, Iterable
from functools import partial

from .ansi import display_width, truncate_with_ellipsis
from .highlight import highlight_line, sanitize_terminal_text
from .keybindings import Keybindings
from .modes import ViewMode
from .state import PlaybookState
from .ui_theme import UITheme
from .viewport import ViewportWindow, list_height, viewport_window

MODE_KEY_HINT = "←→"
LIST_TOP_ROW = 4


def _paint(theme_code: str, text: str, theme: UITheme) -> str:
    if not theme_code:
        return text
    return f"{theme_code}{text}{theme.reset}"


def build_mode_ribbon(mode: ViewMode, theme: UITheme) -> str:
    """Render ``←→ FilePicker  Playbook  Usage`` with the active mode marked."""
    parts = [_paint(theme.key_hint, MODE_KEY_HINT, theme)]
    for candidate in ViewMode.ordered():
        label = f" {candidate.label} "
        if candidate is mode:
            if theme.mode_active:
                parts.append(_paint(theme.mode_active, label, theme))
            else:
                parts.append(f"[{candidate.label}]")
        else:
            parts.append(_paint(theme.mode_inactive, label, theme))
    return " ".join(parts)


def build_search_line(filter_text: str, filter_by: str, theme: UITheme) -> str:
    return "  " + _paint(theme.search_label, "Search", theme) + f" (by {filter_by}): {filter_text}_"


def build_right_counter(count: int, width: int, theme: UITheme, left: str = "") -> str:
    """Place ``+ N more`` at the right edge of a row that starts with ``left``."""
    if count <= 0:
        return left
    label = f"+ {count} more  "
    gap = max(1, width - display_width(left) - len(label))
    return left + " " * gap + _paint(theme.counter, label, theme)


def build_row_text(
    row_id: int,
    value: str,
    width: int,
    selected: bool,
    theme: UITheme,
    highlighter: Callable[[str], str] | None = None,
) -> str:
    """Format one ``<id>. <value>`` list row fitted to ``width`` columns."""
    prefix = f"{row_id}. "
    body = truncate_with_ellipsis(sanitize_terminal_text(value), max(0, width - len(prefix)))
    if selected:
        text = prefix + body
        if theme.row_selected:
            return _paint(theme.row_selected, text, theme)
        return text
    if highlighter is not None:
        body = highlighter(body)
    return _paint(theme.row_id, prefix, theme) + body


def build_main_menu_lines(
    rows: int,
    cols: int,
    *,
    mode: ViewMode,
    selected: int,
    count: int,
    items: Iterable[tuple[int, int, str]],
    filter_text: str,
    filter_by: str,
    theme: UITheme,
    highlighter: Callable[[str], str] | None = None,
) -> list[str]:
    """Build the list screen for FilePicker/Playbook modes.

    ``items`` yields ``(index, id, text)`` over the filtered list.
    """
    lines = [""] * max(0, rows)
    if rows <= 0:
        return lines
    view: ViewportWindow = viewport_window(selected, count, list_height(rows))

    def put(row: int, text: str) -> None:
        if 0 <= row < rows:
            lines[row] = text

    put(0, build_mode_ribbon(mode, theme))
    put(2, build_search_line(filter_text, filter_by, theme))
    put(3, build_right_counter(view.more_above, cols, theme))

    row = LIST_TOP_ROW
    for index, row_id, value in items:
        if index < view.begin:
            continue
        if index > view.end:
            break
        put(row, build_row_text(row_id, value, cols, index == selected, theme, highlighter))
        row += 1

    all_counter = "  " + _paint(theme.counter, f"All: {count}", theme)
    put(rows - 1, build_right_counter(view.more_below, cols, theme, left=all_counter))
    return lines


def usage_rows(keybindings: Keybindings) -> list[tuple[str, str, str, str]]:
    lists = f"{ViewMode.FILE_PICKER.label}|{ViewMode.PLAYBOOK.label}"
    return [
        ("KeyBinding", "Action", "Mode", "Configurable"),
        ("Esc|Ctrl+c", "Exit the picker.", "*", "False"),
        ("Tab|Down Up", "Navigate through the list of files or lines.", lists, "False"),
        ("Left Right", "Switch between modes.", "*", "False"),
        ("Backspace", "Remove the last character from the filter.", lists, "False"),
        ("Enter", "Select file or print the selected line and exit.", lists, "False"),
        (f"Alt+{ViewMode.FILE_PICKER.value}", "Switch to File Picker mode.", "*", "False"),
        (f"Alt+{ViewMode.PLAYBOOK.value}", "Switch to Playbook mode.", "*", "False"),
        (f"Alt+{ViewMode.USAGE.value}", "Switch to Usage mode to view instructions.", "*", "False"),
        (str(keybindings.edit), "Open the selected file in $EDITOR.", lists, "True"),
        (str(keybindings.reload), "Reload files from the current directory.", "*", "True"),
        (str(keybindings.switch_filter_id), "Switch to id filtering mode.", lists, "True"),
    ]


def build_usage_lines(rows: int, cols: int, keybindings: Keybindings, theme: UITheme) -> list[str]:
    """Build the Usage screen: mode ribbon plus a key table."""
    table = usage_rows(keybindings)
    widths = [max(len(row[col]) for row in table) for col in range(4)]
    lines = [build_mode_ribbon(ViewMode.USAGE, theme), ""]
    for row_idx, row in enumerate(table):
        cells = [cell.ljust(widths[col]) for col, cell in enumerate(row)]
        if row_idx == 0:
            lines.append("  " + _paint(theme.table_heading, "  ".join(cells).rstrip(), theme))
            continue
        cells[0] = _paint(theme.table_key, cells[0], theme)
        lines.append("  " + "  ".join(cells).rstrip())
    if rows < len(lines):
        return lines[: max(0, rows)]
    return lines + [""] * (rows - len(lines))


def build_error_lines(message: str, rows: int, theme: UITheme) -> list[str]:
    lines = [""] * max(0, rows)
    if rows > 1:
        lines[1] = " ERROR: " + _paint(theme.error, sanitize_terminal_text(message), theme)
    return lines


def build_frame(
    state: PlaybookState,
    rows: int,
    cols: int,
    theme: UITheme,
    *,
    style: str,
    no_color: bool = False,
) -> list[str]:
    """Build the full screen for the current picker state."""
    error = state.take_error()
    if error is not None:
        return build_error_lines(error, rows, theme)

    if state.mode is ViewMode.USAGE:
        return build_usage_lines(rows, cols, state.keybindings, theme)

    filter_by = str(state.filter_mode)
    if state.mode is ViewMode.FILE_PICKER:
        manager = state.files_mgr
        return build_main_menu_lines(
            rows,
            cols,
            mode=state.mode,
            selected=manager.position(),
            count=manager.count(),
            items=((i, item.id, item.name) for i, item in manager.enumerate()),
            filter_text=state.filter,
            filter_by=filter_by,
            theme=theme,
        )

    highlighter = None
    if not no_color:
        highlighter = partial(highlight_line, file_name=state.current_file, style=style)

    manager = state.playbook_mgr
    return build_main_menu_lines(
        rows,
        cols,
        mode=state.mode,
        selected=manager.position(),
        count=manager.count(),
        items=((i, line.id, line.content) for i, line in manager.enumerate()),
        filter_text=state.filter,
        filter_by=filter_by,
        theme=theme,
        highlighter=highlighter,
    )


def render_frame(lines: list[str]) -> None:
    """Write ``lines`` as a full-screen frame in one ``os.write`` call."""
    out: list[str] = ["\033[H\033[J"]
    for row, line in enumerate(lines):
        out.append(f"\033[{row + 1};1H\033[2K{line}")
    os.write(sys.stdout.fileno(), "".join(out).encode("utf-8", errors="replace"))
