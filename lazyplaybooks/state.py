"""Picker state and key dispatch.

``PlaybookState`` owns one selection manager per list mode, the current
filter query, and the active view mode. Side effects that leave the picker
(emitting a line, opening an editor) go through injected ``PickerActions``
so key handling stays testable without a terminal.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path

from .config import PlaybookSettings
from .filters import FilterMode, build_filter
from .keybindings import Keybindings
from .modes import ViewMode
from .records import FileItem, PlaybookLine, list_playbook_files, read_playbook_lines
from .selection import SelectionManager

logger = logging.getLogger(__name__)

QUIT_KEYS = frozenset({"ESC", "CTRL_C"})
DOWN_KEYS = frozenset({"DOWN", "TAB"})
UP_KEYS = frozenset({"UP", "SHIFT_TAB"})


@dataclass(frozen=True)
class PickerActions:
    """Operations that reach outside the picker state.

    ``edit`` returns an error message, or ``None`` when the editor ran.
    """

    emit: Callable[[str], None]
    edit: Callable[[Path], str | None]


class PlaybookState:
    """Mutable picker session driven one key token at a time."""

    def __init__(
        self,
        directory: Path,
        actions: PickerActions,
        settings: PlaybookSettings | None = None,
    ) -> None:
        self.directory = directory
        self.actions = actions
        self.settings = settings if settings is not None else PlaybookSettings()
        self.mode = ViewMode.default()
        self.filter_mode = FilterMode.default()
        self.filter = ""
        self.files_mgr: SelectionManager[FileItem] = SelectionManager()
        self.playbook_mgr: SelectionManager[PlaybookLine] = SelectionManager()
        self.current_file: str | None = None
        self.error_message: str | None = None
        self.critical_error: str | None = None
        self.running = True

    @property
    def keybindings(self) -> Keybindings:
        return self.settings.keybindings

    # Loading

    def load_files(self) -> None:
        """(Re)scan the picker directory into a fresh files manager."""
        try:
            items = list_playbook_files(self.directory, sort=self.settings.sort_files)
        except OSError as exc:
            self.files_mgr = SelectionManager()
            self.critical_error = f"Failed to load files: {exc}"
            logger.error(self.critical_error)
            return
        self.critical_error = None
        self.files_mgr = SelectionManager(items)

    def load_file(self, file_name: str) -> None:
        """Load ``file_name`` from the picker directory as the current playbook.

        Raises ``OSError`` when the file cannot be read.
        """
        lines = read_playbook_lines(
            self.directory / file_name,
            ignore_comments=self.settings.ignore_comments,
        )
        self.playbook_mgr = SelectionManager(lines)
        self.current_file = file_name

    def reload(self) -> None:
        self.load_files()
        if self.current_file is not None:
            try:
                self.load_file(self.current_file)
            except OSError as exc:
                self.handle_error(f"Failed to reload file: {exc}")
        self.set_filter()

    def handle_error(self, message: str) -> None:
        self.error_message = message
        logger.error(message)

    def take_error(self) -> str | None:
        """Return the message to display now; one-shot errors are consumed."""
        if self.critical_error is not None:
            return self.critical_error
        message = self.error_message
        self.error_message = None
        return message

    # Filtering and modes

    def active_manager(self) -> SelectionManager[FileItem] | SelectionManager[PlaybookLine] | None:
        if self.mode is ViewMode.FILE_PICKER:
            return self.files_mgr
        if self.mode is ViewMode.PLAYBOOK:
            return self.playbook_mgr
        return None

    def set_filter(self) -> None:
        """Re-apply the current query to the active list, if the mode has one."""
        manager = self.active_manager()
        if manager is None:
            return
        manager.apply_filter(build_filter(self.filter_mode, self.filter))

    def switch_mode(self, mode: ViewMode) -> None:
        """Enter ``mode`` with a cleared query in the default filter mode."""
        self.mode = mode
        self.filter = ""
        self.filter_mode = FilterMode.default()
        self.set_filter()

    def push_filter_char(self, ch: str) -> bool:
        """Append a typed character to the query, returning whether it was accepted."""
        if not self.filter:
            self.filter_mode = FilterMode.ID if ch.isascii() and ch.isdigit() else FilterMode.NAME
        if self.filter_mode is FilterMode.ID:
            if not (ch.isascii() and ch.isdigit()):
                return False
            if not self.filter and ch == "0":
                return False
        self.filter += ch
        self.set_filter()
        return True

    def pop_filter_char(self) -> None:
        self.filter = self.filter[:-1]
        self.set_filter()

    # Key dispatch

    def handle_key(self, key: str) -> bool:
        """Apply one key token and return whether the screen must be redrawn."""
        if key in QUIT_KEYS:
            self.running = False
            return False

        manager = self.active_manager()
        if key in DOWN_KEYS:
            if manager is None:
                return False
            manager.select_down()
            return True
        if key in UP_KEYS:
            if manager is None:
                return False
            manager.select_up()
            return True
        if key == "RIGHT":
            self.switch_mode(self.mode.next())
            return True
        if key == "LEFT":
            self.switch_mode(self.mode.prev())
            return True
        if key.startswith("ALT_") and key[4:].isdigit():
            target = ViewMode.from_digit(int(key[4:]))
            if target is None or target is self.mode:
                return False
            self.switch_mode(target)
            return True
        if key == "BACKSPACE":
            if manager is None:
                return False
            self.pop_filter_char()
            return True
        if key == "ENTER":
            return self._activate_selection()
        if len(key) == 1 and key.isprintable():
            if manager is None:
                return False
            return self.push_filter_char(key)
        return self._handle_configurable_key(key)

    def _activate_selection(self) -> bool:
        if self.mode is ViewMode.FILE_PICKER:
            selected_file = self.files_mgr.current()
            if selected_file is None:
                return False
            try:
                self.load_file(selected_file.name)
            except OSError as exc:
                self.handle_error(f"Failed to load file '{selected_file.name}': {exc}")
            else:
                self.switch_mode(ViewMode.PLAYBOOK)
            return True
        if self.mode is ViewMode.PLAYBOOK:
            line = self.playbook_mgr.current()
            if line is not None:
                self.actions.emit(line.content)
                self.running = False
        return False

    def _handle_configurable_key(self, key: str) -> bool:
        bindings = self.keybindings
        if bindings.edit.matches(key):
            return self._edit_selection()
        if bindings.reload.matches(key):
            self.reload()
            return True
        if bindings.switch_filter_id.matches(key):
            if self.active_manager() is None:
                return False
            self.filter_mode = self.filter_mode.switch_to(FilterMode.ID)
            self.set_filter()
            return True
        return False

    def _edit_selection(self) -> bool:
        target: Path | None = None
        if self.mode is ViewMode.FILE_PICKER:
            selected_file = self.files_mgr.current()
            if selected_file is not None:
                target = self.directory / selected_file.name
        elif self.mode is ViewMode.PLAYBOOK and self.current_file is not None:
            target = self.directory / self.current_file
        if target is None:
            return False

        error = self.actions.edit(target)
        if error is not None:
            self.handle_error(error)
            return True
        if self.mode is ViewMode.PLAYBOOK:
            self.reload()
        return True


__all__ = ["PickerActions", "PlaybookState"]
