"""Key dispatch for browsing and modal-input modes."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from .session import Session


@dataclass(frozen=True)
class KeyComboBinding:
    """Mapping from one or more key tokens to a single session command."""

    combos: tuple[str, ...]
    handler: Callable[[], None]


class KeyComboRegistry:
    """Exact-match key-dispatch table."""

    def __init__(self) -> None:
        self._handlers: dict[str, Callable[[], None]] = {}

    def register_bindings(self, *bindings: KeyComboBinding) -> KeyComboRegistry:
        """Register bindings, later ones overriding earlier combos."""
        for binding in bindings:
            for combo in binding.combos:
                self._handlers[combo] = binding.handler
        return self

    def dispatch(self, key: str) -> bool:
        """Invoke the handler bound to ``key``; ``False`` when unbound."""
        handler = self._handlers.get(key)
        if handler is None:
            return False
        handler()
        return True


def browse_registry(session: Session) -> KeyComboRegistry:
    """Build the browsing-mode bindings for ``session``."""
    bindings = [
        KeyComboBinding(("UP",), lambda: session.move_cursor(-1)),
        KeyComboBinding(("DOWN",), lambda: session.move_cursor(1)),
        KeyComboBinding(("ENTER",), session.enter_selected),
        KeyComboBinding(("o",), session.open_selected),
        KeyComboBinding(("n",), session.begin_new_file),
        KeyComboBinding(("N",), session.begin_new_folder),
        KeyComboBinding(("r",), session.begin_rename),
        KeyComboBinding(("c",), session.copy_selected),
        KeyComboBinding(("x",), session.cut_selected),
        KeyComboBinding(("v",), session.paste),
        KeyComboBinding(("w",), session.set_working_directory),
        KeyComboBinding(("d",), session.delete_selected),
        KeyComboBinding(("q",), session.request_quit),
    ]
    if session.state.preview_supported:
        bindings.append(KeyComboBinding(("p",), session.toggle_preview))
    return KeyComboRegistry().register_bindings(*bindings)


class KeyHandler:
    """Route key tokens to the session according to its current mode."""

    def __init__(self, session: Session) -> None:
        self.session = session
        self.registry = browse_registry(session)

    def handle(self, key: str) -> bool:
        """Handle one key token and return ``True`` when the app should quit."""
        if self.session.state.input_active:
            handle_input_key(self.session, key)
            return False
        return handle_browse_key(self.session, self.registry, key)


def handle_input_key(session: Session, key: str) -> None:
    """Capture text for the modal prompt; non-printables are ignored."""
    if key == "ENTER":
        session.submit_input()
    elif key == "ESC":
        session.cancel_input()
    elif key == "BACKSPACE":
        session.erase_character()
    else:
        session.type_character(key)


def handle_browse_key(session: Session, registry: KeyComboRegistry, key: str) -> bool:
    """Dispatch one browsing key and return ``True`` on quit."""
    # Any key other than a second delete consumes a pending confirmation.
    if key != "d":
        session.disarm_delete()
    registry.dispatch(key)
    return session.state.quit_requested
