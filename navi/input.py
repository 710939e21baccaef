"""Raw keyboard input.

``read_key`` is the terminal contract: block for exactly one byte and do
not interpret it. ``KeyReader`` sits on top and assembles the multi-read
arrow sequences into the tokens the key handlers dispatch on.
"""

from __future__ import annotations

import os
from collections.abc import Callable

ESC = "\x1b"


def read_key(fd: int) -> str:
    """Read one byte from ``fd``; ``""`` means end of input."""
    ch = os.read(fd, 1)
    if not ch:
        return ""
    return ch.decode("latin-1")


class KeyReader:
    """Turn single-byte reads into ``UP``/``DOWN``/``ENTER``/... tokens."""

    def __init__(self, read: Callable[[], str]) -> None:
        self._read = read

    def next_key(self, modal: bool = False) -> str:
        """Return the next key token, or ``""`` at end of input.

        Outside modal input, ESC is taken as the start of an ``ESC [ X``
        arrow sequence and the two following bytes are consumed. In modal
        input a lone ESC cancels immediately, so no follow-up read happens.
        """
        ch = self._read()
        if not ch:
            return ""
        if ch in {"\n", "\r"}:
            return "ENTER"
        if ch in {"\x7f", "\x08"}:
            return "BACKSPACE"
        if ch != ESC:
            return ch
        if modal:
            return "ESC"

        seq = self._read()
        if seq != "[":
            return "ESC" if seq else ""
        arrow = self._read()
        if arrow == "A":
            return "UP"
        if arrow == "B":
            return "DOWN"
        return "ESC" if arrow else ""
