"""Terminal mode control for the browser session.

Owns the raw-mode lifecycle (no line buffering, no echo), alternate-screen
switching, and temporary suspension while an external program runs.
"""

from __future__ import annotations

import contextlib
import os
import termios
import tty

ENTER_SCREEN = b"\x1b[?1049h\x1b[?25l"
LEAVE_SCREEN = b"\x1b[?25h\x1b[?1049l"
CLEAR_SCREEN = "\033[H\033[J"


class TerminalController:
    """Switch the controlling terminal in and out of raw mode."""

    def __init__(self, stdin_fd: int, stdout_fd: int) -> None:
        """Capture tty state and bind stdin/stdout file descriptors."""
        self.stdin_fd = stdin_fd
        self.stdout_fd = stdout_fd
        self._saved_tty_state = termios.tcgetattr(stdin_fd)

    def enable_raw_mode(self) -> None:
        """Deliver keystrokes unbuffered and unechoed on the alternate screen."""
        # cbreak keeps ISIG and output post-processing, so Ctrl-C still
        # unwinds through ``raw_mode`` and "\n" still returns the carriage.
        tty.setcbreak(self.stdin_fd, termios.TCSAFLUSH)
        os.write(self.stdout_fd, ENTER_SCREEN)

    def disable_raw_mode(self) -> None:
        """Restore the tty attributes captured at construction."""
        os.write(self.stdout_fd, LEAVE_SCREEN)
        termios.tcsetattr(self.stdin_fd, termios.TCSAFLUSH, self._saved_tty_state)

    def write(self, text: str) -> None:
        os.write(self.stdout_fd, text.encode("utf-8", errors="replace"))

    @contextlib.contextmanager
    def raw_mode(self):
        """Context manager that restores the terminal on every exit path."""
        try:
            self.enable_raw_mode()
            yield self
        finally:
            self.disable_raw_mode()

    @contextlib.contextmanager
    def suspended(self):
        """Hand the terminal back for the duration of an external program."""
        self.disable_raw_mode()
        try:
            yield
        finally:
            self.enable_raw_mode()
