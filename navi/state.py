from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Union


@dataclass(frozen=True)
class CreateFile:
    pass


@dataclass(frozen=True)
class CreateFolder:
    pass


@dataclass(frozen=True)
class RenameFrom:
    old_name: str


PendingAction = Union[CreateFile, CreateFolder, RenameFrom]


@dataclass(frozen=True)
class Clipboard:
    path: Path
    move: bool = False


@dataclass
class SessionState:
    current_path: Path
    entries: list[str] = field(default_factory=list)
    cursor: int = 0
    status_message: str = ""
    status_time: float = 0.0
    input_active: bool = False
    input_prompt: str = ""
    input_buffer: str = ""
    pending_action: PendingAction | None = None
    clipboard: Clipboard | None = None
    delete_pending: bool = False
    delete_armed_at: float = 0.0
    preview_enabled: bool = False
    preview_supported: bool = True
    quit_requested: bool = False

    @property
    def selected_name(self) -> str | None:
        if not self.entries:
            return None
        return self.entries[self.cursor]

    def clamp_cursor(self) -> None:
        if not self.entries:
            self.cursor = 0
            return
        self.cursor = max(0, min(self.cursor, len(self.entries) - 1))
