"""Human-readable size and timestamp labels for listing rows."""

from __future__ import annotations

import time

SIZE_UNIT = 1024
SIZE_PREFIXES = "KMGTPE"
DATE_FORMAT = "%b %d %Y %H:%M"


def format_size(size: int) -> str:
    """Format byte counts as ``512 B``, ``1.5 KB``, ``3.0 MB`` and so on."""
    if size < SIZE_UNIT:
        return f"{size} B"
    div = SIZE_UNIT
    exp = 0
    n = size // SIZE_UNIT
    while n >= SIZE_UNIT:
        div *= SIZE_UNIT
        exp += 1
        n //= SIZE_UNIT
    return f"{size / div:.1f} {SIZE_PREFIXES[exp]}B"


def format_date(timestamp: float) -> str:
    """Format a POSIX timestamp in local time, e.g. ``Jan 02 2006 15:04``."""
    return time.strftime(DATE_FORMAT, time.localtime(timestamp))
