"""ANSI-aware width measurement and clipping for screen rows.

Rows carry color escapes and Nerd Font icons; clipping must skip escapes
and count wide characters as two columns so rows never wrap the terminal.
"""

from __future__ import annotations

import re
import unicodedata

ANSI_ESCAPE_RE = re.compile(r"\x1b\[[0-9;?]*[ -/]*[@-~]")
RESET = "\033[0m"


def strip_ansi(text: str) -> str:
    """Return ``text`` without escape sequences."""
    return ANSI_ESCAPE_RE.sub("", text)


def char_display_width(ch: str) -> int:
    """Return terminal column width for one character.

    Combining marks consume no columns, East Asian wide/fullwidth characters
    consume two.
    """
    if unicodedata.combining(ch):
        return 0
    if unicodedata.east_asian_width(ch) in {"W", "F"}:
        return 2
    return 1


def display_width(text: str) -> int:
    """Return visible width of a styled line."""
    return sum(char_display_width(ch) for ch in strip_ansi(text))


def clip_ansi_line(text: str, max_cols: int) -> str:
    """Trim a styled line to at most ``max_cols`` display columns.

    Escape sequences are kept verbatim and do not count toward width. When
    anything was cut, a reset is appended so a dangling style cannot leak
    into the next row.
    """
    if max_cols <= 0 or not text:
        return ""

    out: list[str] = []
    col = 0
    i = 0
    n = len(text)
    clipped = False
    while i < n:
        if text[i] == "\x1b":
            match = ANSI_ESCAPE_RE.match(text, i)
            if match:
                out.append(match.group(0))
                i = match.end()
                continue
        ch = text[i]
        if ch == "\t":
            ch = " "
        w = char_display_width(ch)
        if col + w > max_cols:
            clipped = True
            break
        out.append(ch)
        col += w
        i += 1

    if clipped:
        out.append(RESET)
    return "".join(out)
