"""Filesystem operations behind the browser's commands.

Every helper is total: failures come back as a one-line message
(``None`` meaning success) so the session can show them as status text
without unwinding the interactive loop.
"""

from __future__ import annotations

import errno
import logging
import os
import shutil
import stat
from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger(__name__)

PARENT_MARKER = "../"
LIST_ERROR_MARKER = "error reading path"


@dataclass(frozen=True)
class EntryInfo:
    """Metadata shown for one listing row."""

    is_dir: bool
    size: int
    mtime: float


def _describe(exc: OSError) -> str:
    """Return a short message for ``exc`` without the Python class name."""
    if exc.strerror and exc.filename:
        return f"{exc.strerror}: {exc.filename}"
    return exc.strerror or str(exc)


def list_entries(path: Path) -> list[str]:
    """Return ``["../", *children]`` in filesystem enumeration order.

    On failure a single placeholder entry is returned instead of raising;
    callers must not take a one-element listing as authoritative.
    """
    try:
        with os.scandir(path) as it:
            names = [entry.name for entry in it]
    except OSError as exc:
        logger.warning("cannot list %s: %s", path, exc)
        return [LIST_ERROR_MARKER]
    return [PARENT_MARKER, *names]


def stat_entry(path: Path) -> EntryInfo | None:
    """Stat ``path`` following symlinks, ``None`` when that fails."""
    try:
        st = path.stat()
    except OSError:
        return None
    return EntryInfo(is_dir=stat.S_ISDIR(st.st_mode), size=int(st.st_size), mtime=float(st.st_mtime))


def copy_file(src: Path, dst: Path) -> str | None:
    """Copy a regular file's bytes onto ``dst``, replacing it if present."""
    if os.path.abspath(src) == os.path.abspath(dst):
        return "source and destination are the same"
    try:
        st = src.stat()
    except OSError as exc:
        return _describe(exc)
    if not stat.S_ISREG(st.st_mode):
        return f"{src} is not a regular file"
    try:
        shutil.copyfile(src, dst)
    except OSError as exc:
        logger.warning("copy %s -> %s failed: %s", src, dst, exc)
        return _describe(exc)
    return None


def move_path(src: Path, dst: Path) -> str | None:
    """Rename ``src`` to ``dst``; never falls back to copy plus delete."""
    try:
        os.rename(src, dst)
    except OSError as exc:
        logger.warning("move %s -> %s failed: %s", src, dst, exc)
        if exc.errno == errno.EXDEV:
            return "cannot move across filesystems"
        return _describe(exc)
    return None


def create_file(path: Path) -> str | None:
    """Create an empty regular file, truncating an existing one."""
    try:
        with open(path, "wb"):
            pass
    except OSError as exc:
        logger.warning("create file %s failed: %s", path, exc)
        return _describe(exc)
    return None


def create_directory(path: Path) -> str | None:
    """Create ``path`` and any missing parents, like ``mkdir -p``."""
    try:
        os.makedirs(path, mode=0o755, exist_ok=True)
    except OSError as exc:
        logger.warning("create directory %s failed: %s", path, exc)
        return _describe(exc)
    return None


def rename_path(old: Path, new: Path) -> str | None:
    """Rename with ``os.rename`` semantics.

    On POSIX an existing file at ``new`` is replaced silently, while an
    existing non-empty directory makes the call fail.
    """
    try:
        os.rename(old, new)
    except OSError as exc:
        logger.warning("rename %s -> %s failed: %s", old, new, exc)
        return _describe(exc)
    return None


def delete_path(path: Path) -> str | None:
    """Remove a file, symlink, or whole directory tree."""
    try:
        if path.is_dir() and not path.is_symlink():
            shutil.rmtree(path)
        else:
            path.unlink()
    except OSError as exc:
        logger.warning("delete %s failed: %s", path, exc)
        return _describe(exc)
    return None
