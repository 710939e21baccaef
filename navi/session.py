"""Browser session operations.

``Session`` owns the mutable ``SessionState`` and implements every command
the key bindings trigger: navigation, clipboard, modal prompts, two-press
delete, preview toggle. Filesystem failures are turned into status text
here and never propagate to the loop.
"""

from __future__ import annotations

import logging
import os
import time
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path

from . import fsops
from .state import Clipboard, CreateFile, CreateFolder, PendingAction, RenameFrom, SessionState

logger = logging.getLogger(__name__)

NEW_FILE_PROMPT = "Enter new file name: "
NEW_FOLDER_PROMPT = "Enter new folder name: "
RENAME_PROMPT = "Enter new name: "
SYNTHETIC_ENTRIES = frozenset({fsops.PARENT_MARKER, fsops.LIST_ERROR_MARKER})


@dataclass(frozen=True)
class SessionTiming:
    """Display and confirmation windows, in seconds."""

    status_seconds: float = 3.0
    delete_confirm_seconds: float = 3.0


def _no_opener(_path: Path) -> str | None:
    return "No default application opener configured"


class Session:
    """Interactive browser state machine bound to one ``SessionState``."""

    def __init__(
        self,
        state: SessionState,
        *,
        timing: SessionTiming | None = None,
        clock: Callable[[], float] = time.monotonic,
        open_path: Callable[[Path], str | None] = _no_opener,
    ) -> None:
        self.state = state
        self.timing = timing if timing is not None else SessionTiming()
        self.clock = clock
        self.open_path = open_path

    @classmethod
    def start(
        cls,
        path: Path,
        *,
        preview_enabled: bool = False,
        preview_supported: bool = True,
        **kwargs,
    ) -> Session:
        """Build a session browsing ``path`` with a fresh listing."""
        state = SessionState(
            current_path=path,
            preview_enabled=preview_enabled,
            preview_supported=preview_supported,
        )
        session = cls(state, **kwargs)
        session.reload()
        return session

    # -- helpers -----------------------------------------------------------

    def set_status(self, message: str) -> None:
        self.state.status_message = message
        self.state.status_time = self.clock()

    def status_visible(self) -> bool:
        """Whether the status line is still inside its display window."""
        state = self.state
        if not state.status_message:
            return False
        return self.clock() - state.status_time < self.timing.status_seconds

    def reload(self) -> None:
        """Re-read the current directory and re-clamp the cursor."""
        self.state.entries = fsops.list_entries(self.state.current_path)
        self.state.clamp_cursor()

    def selected_path(self) -> Path | None:
        name = self.state.selected_name
        if name is None:
            return None
        return self._join(name)

    def _join(self, name: str) -> Path:
        return Path(os.path.normpath(os.path.join(self.state.current_path, name)))

    def _refuse_synthetic(self, name: str, verb: str) -> bool:
        if name in SYNTHETIC_ENTRIES:
            self.set_status(f"Cannot {verb} {name!r}")
            return True
        return False

    # -- navigation --------------------------------------------------------

    def move_cursor(self, delta: int) -> None:
        self.state.cursor += delta
        self.state.clamp_cursor()

    def enter_selected(self) -> bool:
        """Descend into the selected directory; files are left alone."""
        target = self.selected_path()
        if target is None:
            return False
        info = fsops.stat_entry(target)
        if info is None or not info.is_dir:
            return False
        self._change_directory(target)
        return True

    def _change_directory(self, target: Path) -> None:
        logger.debug("browse %s", target)
        self.state.current_path = target
        self.state.cursor = 0
        self.reload()

    def open_selected(self) -> None:
        """Descend into directories, hand files to the default application."""
        target = self.selected_path()
        if target is None:
            self.set_status("No files to open")
            return
        info = fsops.stat_entry(target)
        if info is None:
            self.set_status(f"Error: cannot access {target}")
            return
        if info.is_dir:
            self._change_directory(target)
            return
        logger.debug("open %s with default application", target)
        error = self.open_path(target)
        if error is not None:
            self.set_status(error)
            return
        self.set_status(f"Opened: {target.name}")

    def set_working_directory(self) -> None:
        try:
            os.chdir(self.state.current_path)
        except OSError as exc:
            self.set_status(f"Error changing working directory: {exc.strerror or exc}")
            return
        self.set_status(f"Working directory changed to: {self.state.current_path}")

    # -- clipboard ---------------------------------------------------------

    def copy_selected(self) -> None:
        self._fill_clipboard(move=False)

    def cut_selected(self) -> None:
        self._fill_clipboard(move=True)

    def _fill_clipboard(self, move: bool) -> None:
        name = self.state.selected_name
        if name is None:
            return
        if self._refuse_synthetic(name, "cut" if move else "copy"):
            return
        self.state.clipboard = Clipboard(path=self._join(name), move=move)
        self.set_status("File cut to buffer" if move else "File copied to buffer")

    def paste(self) -> None:
        clipboard = self.state.clipboard
        if clipboard is None:
            self.set_status("No file in buffer to paste")
            return
        src = clipboard.path
        if not os.path.lexists(src):
            self.set_status("Source file no longer exists")
            return

        dst = self.state.current_path / src.name
        if clipboard.move:
            error = fsops.move_path(src, dst)
            if error is None:
                self.state.clipboard = None
                self.set_status("File moved successfully")
            else:
                self.set_status(f"Error moving file: {error}")
        else:
            if os.path.abspath(dst) == os.path.abspath(src):
                dst = _duplicate_name(dst)
            error = fsops.copy_file(src, dst)
            if error is None:
                self.set_status("File copied successfully")
            else:
                self.set_status(f"Error copying file: {error}")
        self.reload()

    # -- modal input -------------------------------------------------------

    def begin_input(self, prompt: str, action: PendingAction) -> None:
        state = self.state
        state.input_active = True
        state.input_prompt = prompt
        state.input_buffer = ""
        state.pending_action = action

    def begin_new_file(self) -> None:
        self.begin_input(NEW_FILE_PROMPT, CreateFile())

    def begin_new_folder(self) -> None:
        self.begin_input(NEW_FOLDER_PROMPT, CreateFolder())

    def begin_rename(self) -> None:
        name = self.state.selected_name
        if name is None:
            return
        if self._refuse_synthetic(name, "rename"):
            return
        self.begin_input(RENAME_PROMPT, RenameFrom(old_name=name))

    def type_character(self, ch: str) -> None:
        if len(ch) == 1 and 32 <= ord(ch) <= 126:
            self.state.input_buffer += ch

    def erase_character(self) -> None:
        self.state.input_buffer = self.state.input_buffer[:-1]

    def cancel_input(self) -> None:
        state = self.state
        state.input_active = False
        state.input_prompt = ""
        state.input_buffer = ""
        state.pending_action = None

    def submit_input(self) -> None:
        """Run the pending action on the typed text; empty text cancels."""
        text = self.state.input_buffer
        action = self.state.pending_action
        self.cancel_input()
        if not text:
            self.set_status("Operation cancelled")
            return
        if action is not None:
            self._run_action(action, text)

    def _typed_target(self, text: str) -> Path | None:
        """Join a typed name under the current directory.

        A leading ``/`` does not make the name absolute. Names that still
        resolve outside the current directory (through ``..``) are refused.
        """
        base = os.path.normpath(self.state.current_path)
        target = os.path.normpath(os.path.join(base, text.lstrip(os.sep)))
        if target == base or os.path.commonpath([base, target]) != base:
            return None
        return Path(target)

    def _run_action(self, action: PendingAction, text: str) -> None:
        target = self._typed_target(text)
        if target is None:
            self.set_status(f"Name must stay inside the current directory: {text}")
            return
        if isinstance(action, CreateFile):
            error = fsops.create_file(target)
            self.set_status(f"File created: {text}" if error is None else f"Error creating file: {error}")
        elif isinstance(action, CreateFolder):
            error = fsops.create_directory(target)
            self.set_status(f"Folder created: {text}" if error is None else f"Error creating folder: {error}")
        elif isinstance(action, RenameFrom):
            error = fsops.rename_path(self._join(action.old_name), target)
            if error is None:
                self.set_status(f"Renamed {action.old_name} to {text}")
            else:
                self.set_status(f"Error renaming: {error}")
        self.reload()

    # -- delete ------------------------------------------------------------

    def disarm_delete(self) -> None:
        self.state.delete_pending = False

    def delete_selected(self) -> None:
        """Two-press delete: arm, then delete within the confirmation window."""
        state = self.state
        name = state.selected_name
        if name is None:
            return
        if self._refuse_synthetic(name, "delete"):
            state.delete_pending = False
            return

        if not state.delete_pending:
            state.delete_pending = True
            state.delete_armed_at = self.clock()
            self.set_status(f"Press delete again to confirm deletion of: {name}")
            return

        if self.clock() - state.delete_armed_at > self.timing.delete_confirm_seconds:
            state.delete_pending = False
            self.set_status("Delete timeout - press delete again to start over")
            return

        state.delete_pending = False
        error = fsops.delete_path(self._join(name))
        if error is None:
            self.set_status(f"Deleted: {name}")
        else:
            self.set_status(f"Error deleting: {error}")
        self.reload()

    # -- preview / quit ----------------------------------------------------

    def toggle_preview(self) -> None:
        state = self.state
        if not state.preview_supported:
            return
        state.preview_enabled = not state.preview_enabled
        self.set_status("Preview enabled" if state.preview_enabled else "Preview disabled")

    def request_quit(self) -> None:
        self.state.quit_requested = True


def _duplicate_name(path: Path) -> Path:
    """Return ``<stem>_copy<suffix>`` next to ``path``, numbered if taken."""
    candidate = path.with_name(f"{path.stem}_copy{path.suffix}")
    counter = 2
    while os.path.lexists(candidate):
        candidate = path.with_name(f"{path.stem}_copy{counter}{path.suffix}")
        counter += 1
    return candidate
