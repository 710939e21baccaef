"""Interactive loop and session bootstrap.

One thread, strictly render -> read one key -> handle, until quit or until
the key read fails. Raw mode wraps the whole loop so the shell is restored
however the loop ends.
"""

from __future__ import annotations

import logging
import os
import shutil
import sys
import time
from collections.abc import Callable
from pathlib import Path

from . import __version__
from .config import Settings
from .help import splash_text
from .input import KeyReader, read_key
from .keys import KeyHandler
from .opener import launch_default_opener
from .render import RenderContext, render_screen
from .session import Session, SessionTiming
from .terminal import CLEAR_SCREEN, TerminalController
from .theme import resolve_theme

logger = logging.getLogger(__name__)

SPLASH_SECONDS = 1.0


def run_main_loop(
    session: Session,
    terminal: TerminalController,
    keys: KeyReader,
    settings: Settings,
    columns: Callable[[], int] | None = None,
) -> None:
    """Run the browser until quit or end of input.

    A failed read (``OSError`` or end of file on stdin) and Ctrl-C end the
    session the same way ``q`` does.
    """
    if columns is None:
        columns = lambda: shutil.get_terminal_size((80, 24)).columns
    handler = KeyHandler(session)
    theme = resolve_theme(settings.no_color)

    while True:
        context = RenderContext(
            status_visible=session.status_visible(),
            columns=columns(),
            theme=theme,
            style=settings.style,
            color=not settings.no_color,
        )
        terminal.write(render_screen(session.state, context))

        try:
            key = keys.next_key(modal=session.state.input_active)
        except OSError as exc:
            logger.warning("key read failed: %s", exc)
            break
        except KeyboardInterrupt:
            logger.debug("interrupted")
            break
        if not key:
            logger.debug("end of input")
            break
        if handler.handle(key):
            break

    terminal.write(CLEAR_SCREEN)


def run_browser(settings: Settings, start_path: Path | None = None) -> None:
    """Start a session in ``start_path`` (default: working directory)."""
    stdin_fd = sys.stdin.fileno()
    stdout_fd = sys.stdout.fileno()
    terminal = TerminalController(stdin_fd=stdin_fd, stdout_fd=stdout_fd)

    session = Session.start(
        Path(os.getcwd()) if start_path is None else start_path,
        preview_enabled=settings.preview_enabled,
        preview_supported=settings.preview_supported,
        timing=SessionTiming(
            status_seconds=settings.status_seconds,
            delete_confirm_seconds=settings.delete_confirm_seconds,
        ),
        open_path=lambda target: launch_default_opener(target, terminal.suspended),
    )
    keys = KeyReader(lambda: read_key(stdin_fd))

    with terminal.raw_mode():
        if settings.show_splash:
            terminal.write(CLEAR_SCREEN + splash_text(resolve_theme(settings.no_color), __version__))
            try:
                time.sleep(SPLASH_SECONDS)
            except KeyboardInterrupt:
                terminal.write(CLEAR_SCREEN)
                return
        run_main_loop(session, terminal, keys, settings)
