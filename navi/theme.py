"""ANSI palette and Nerd Font icons used by the renderer.

``PLAIN_THEME`` keeps the same layout with every escape blanked, for
``NO_COLOR`` terminals and tests that compare plain text.
"""

from __future__ import annotations

from dataclasses import dataclass, fields, replace

FILE_ICON = "\uf15b"
FOLDER_ICON = "\uf07b"
PATH_ICON = "\uf07c"
CLOCK_ICON = "\uf017"
SIZE_ICON = "\uf0c7"
NAV_ICON = "\uf0dc"
QUIT_ICON = "\uf011"
COPY_ICON = "\uf0c5"
CUT_ICON = "\uf0c4"
PASTE_ICON = "\uf0ea"
RENAME_ICON = "\uf044"
DELETE_ICON = "\uf1f8"
PREVIEW_ICON = "\uf06e"


@dataclass(frozen=True)
class UITheme:
    """Semantic ANSI palette used by renderers."""

    name: str
    dark_bg: str
    header_bg: str
    footer_bg: str
    reset: str
    blue: str
    green: str
    yellow: str
    white: str
    red: str
    bold: str


DEFAULT_THEME = UITheme(
    name="default",
    dark_bg="\033[48;5;236m",
    header_bg="\033[48;5;24m",
    footer_bg="\033[48;5;237m",
    reset="\033[0m",
    blue="\033[38;5;39m",
    green="\033[38;5;114m",
    yellow="\033[38;5;221m",
    white="\033[38;5;252m",
    red="\033[38;5;196m",
    bold="\033[1m",
)

PLAIN_THEME = replace(
    DEFAULT_THEME,
    name="plain",
    **{f.name: "" for f in fields(UITheme) if f.name != "name"},
)


def resolve_theme(no_color: bool) -> UITheme:
    """Return the palette for the requested color mode."""
    return PLAIN_THEME if no_color else DEFAULT_THEME
