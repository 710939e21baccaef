"""Hand a file to the operating system's default application.

The opener runs while the TUI is suspended and reports failures as a
message string instead of raising, for UI-friendly handling.
"""

from __future__ import annotations

import logging
import shutil
import subprocess
import sys
from collections.abc import Callable
from contextlib import AbstractContextManager
from pathlib import Path

logger = logging.getLogger(__name__)


def default_opener_name(platform: str | None = None) -> str:
    """Return the launcher command for ``platform`` (``sys.platform`` by default)."""
    platform = sys.platform if platform is None else platform
    if platform == "darwin":
        return "open"
    return "xdg-open"


def launch_default_opener(
    target: Path,
    suspend_terminal: Callable[[], AbstractContextManager],
    opener: str | None = None,
) -> str | None:
    opener = opener or default_opener_name()
    binary = shutil.which(opener)
    if binary is None:
        return f"{opener} not found"

    logger.debug("launching %s %s", binary, target)
    with suspend_terminal():
        try:
            completed = subprocess.run([binary, str(target)], check=False)
        except OSError as exc:
            return f"Error opening file: {exc}"
    if completed.returncode != 0:
        return f"Error opening file: {opener} exited with status {completed.returncode}"
    return None
