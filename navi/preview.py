"""Preview pane content for the selected entry.

Directories list their first few children; files show the head of their
text unless they are too large or look binary. Results are plain text;
``highlight`` adds color at render time.
"""

from __future__ import annotations

import os
import re
from pathlib import Path

from .fsops import stat_entry
from .theme import FILE_ICON, FOLDER_ICON

MAX_PREVIEW_FILE_BYTES = 1024 * 1024
PREVIEW_READ_BYTES = 1000
PREVIEW_MAX_LINES = 10
DIR_PREVIEW_MAX_ENTRIES = 5
TRUNCATION_MARKER = "..."
BINARY_FILE = "Binary file"
FILE_TOO_LARGE = "File too large to preview"

_CONTROL_RE = re.compile(r"[\x00-\x08\x0b\x0c\x0e-\x1f\x7f-\x9f]")
_LABEL_CONTROL_RE = re.compile(r"[\x00-\x1f\x7f-\x9f]")


def sanitize_terminal_text(source: str) -> str:
    """Escape control bytes so previews cannot move the cursor or ring bells."""
    if _CONTROL_RE.search(source) is None:
        return source
    return _CONTROL_RE.sub(lambda m: f"\\x{ord(m.group(0)):02x}", source)


def sanitize_label(source: str) -> str:
    """Like ``sanitize_terminal_text`` but for one-row labels, so newlines and tabs are escaped too."""
    if _LABEL_CONTROL_RE.search(source) is None:
        return source
    return _LABEL_CONTROL_RE.sub(lambda m: f"\\x{ord(m.group(0)):02x}", source)


def build_directory_preview(path: Path) -> str:
    try:
        with os.scandir(path) as it:
            children = list(it)
    except OSError:
        return "Error reading directory"

    lines = [f"Directory: {len(children)} items"]
    for idx, child in enumerate(children):
        if idx >= DIR_PREVIEW_MAX_ENTRIES:
            lines.append(TRUNCATION_MARKER)
            break
        try:
            is_dir = child.is_dir()
        except OSError:
            is_dir = False
        icon = FOLDER_ICON if is_dir else FILE_ICON
        lines.append(f"{icon} {sanitize_label(child.name)}")
    return "\n".join(lines)


def build_file_preview(path: Path) -> str:
    try:
        size = path.stat().st_size
    except OSError:
        return "Error accessing file"
    if size > MAX_PREVIEW_FILE_BYTES:
        return FILE_TOO_LARGE

    try:
        with open(path, "rb") as handle:
            head = handle.read(PREVIEW_READ_BYTES)
    except OSError:
        return "Error opening file"

    if b"\x00" in head:
        return BINARY_FILE

    text = sanitize_terminal_text(head.decode("utf-8", errors="replace"))
    lines = text.split("\n")
    if text.endswith("\n"):
        # a final newline ends the last line, it does not start another
        lines.pop()
    if len(lines) > PREVIEW_MAX_LINES:
        return "\n".join(lines[:PREVIEW_MAX_LINES]) + "\n" + TRUNCATION_MARKER
    return text


def build_preview(path: Path) -> str:
    """Return preview text for a file or directory."""
    info = stat_entry(path)
    if info is None:
        return "Error accessing file"
    if info.is_dir:
        return build_directory_preview(path)
    return build_file_preview(path)


def is_text_preview(preview: str) -> bool:
    """Whether ``preview`` carries file text rather than a status note."""
    return preview not in {BINARY_FILE, FILE_TOO_LARGE, "Error accessing file", "Error opening file"}
