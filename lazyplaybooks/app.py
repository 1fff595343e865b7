"""Interactive picker runtime and the non-interactive listing mode.

``run_picker`` wires terminal, input decoding, picker state, and rendering
into one event loop. ``print_playbook`` shares the same selection and filter
code paths to print a playbook without a terminal session.
"""

from __future__ import annotations

import logging
import os
import shutil
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import TextIO

from .config import PlaybookSettings
from .editor import launch_editor
from .filters import FilterMode, build_filter
from .input import read_key
from .records import read_playbook_lines
from .render import build_frame, render_frame
from .selection import SelectionManager
from .state import PickerActions, PlaybookState
from .terminal import TerminalController
from .ui_theme import resolve_theme

logger = logging.getLogger(__name__)

KEY_POLL_TIMEOUT_MS = 200


@dataclass(frozen=True)
class PickerOptions:
    """Display options that do not belong in persisted settings."""

    no_color: bool = False
    theme: str | None = None


def print_playbook(
    path: Path,
    settings: PlaybookSettings,
    filter_text: str = "",
    filter_mode: FilterMode = FilterMode.NAME,
    out: TextIO | None = None,
) -> int:
    """Print ``<id>. <line>`` rows of a playbook matching the filter.

    Returns the number of printed rows.
    """
    out = out if out is not None else sys.stdout
    manager = SelectionManager(read_playbook_lines(path, ignore_comments=settings.ignore_comments))
    manager.apply_filter(build_filter(filter_mode, filter_text))
    for _, line in manager.enumerate():
        out.write(f"{line.id}. {line.content}\n")
    return manager.count()


def run_picker(
    directory: Path,
    settings: PlaybookSettings,
    options: PickerOptions | None = None,
    messages: list[str] | None = None,
) -> list[str]:
    """Run the interactive picker on ``directory`` and return emitted lines."""
    options = options if options is not None else PickerOptions()
    stdin_fd = sys.stdin.fileno()
    stdout_fd = sys.stdout.fileno()
    terminal = TerminalController(stdin_fd, stdout_fd)
    theme = resolve_theme(options.theme or settings.theme, no_color=options.no_color)
    emitted: list[str] = []

    def edit(target: Path) -> str | None:
        return launch_editor(target, terminal.suspended)

    state = PlaybookState(
        directory,
        PickerActions(emit=emitted.append, edit=edit),
        settings=settings,
    )
    state.load_files()
    state.set_filter()
    if messages:
        state.handle_error(" ".join(messages))

    logger.info("picker started in %s", directory)
    with terminal.raw_mode():
        dirty = True
        last_size: tuple[int, int] | None = None
        while state.running:
            term = shutil.get_terminal_size((80, 24))
            size = (term.columns, term.lines)
            if size != last_size:
                last_size = size
                dirty = True
            if dirty:
                render_frame(
                    build_frame(
                        state,
                        term.lines,
                        term.columns,
                        theme,
                        style=settings.style,
                        no_color=options.no_color,
                    )
                )
                dirty = False
            key = read_key(stdin_fd, timeout_ms=KEY_POLL_TIMEOUT_MS)
            if not key:
                continue
            if state.handle_key(key):
                dirty = True
            if state.error_message is not None:
                dirty = True

    logger.info("picker closed with %d emitted line(s)", len(emitted))
    return emitted


def stdin_is_interactive() -> bool:
    return os.isatty(sys.stdin.fileno())
