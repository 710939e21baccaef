"""Help footer rows and the startup splash banner.

Presentation-only helpers; the renderer decides where they go.
"""

from __future__ import annotations

from .theme import (
    COPY_ICON,
    CUT_ICON,
    DELETE_ICON,
    FILE_ICON,
    FOLDER_ICON,
    NAV_ICON,
    PASTE_ICON,
    PATH_ICON,
    PREVIEW_ICON,
    QUIT_ICON,
    RENAME_ICON,
    UITheme,
)

SPLASH_BANNER = """
    ╔══════════════════════════════════════╗
    ║                                      ║
    ║    ███╗   ██╗ █████╗ ██╗   ██╗██╗    ║
    ║    ████╗  ██║██╔══██╗██║   ██║██║    ║
    ║    ██╔██╗ ██║███████║██║   ██║██║    ║
    ║    ██║╚██╗██║██╔══██║╚██╗ ██╔╝██║    ║
    ║    ██║ ╚████║██║  ██║ ╚████╔╝ ██║    ║
    ║    ╚═╝  ╚═══╝╚═╝  ╚═╝  ╚═══╝  ╚═╝    ║
    ║                                      ║
    ║      Terminal File Manager v{version:<9}║
    ║                                      ║
    ╚══════════════════════════════════════╝
"""


def splash_text(theme: UITheme, version: str) -> str:
    return f"{theme.blue}{theme.bold}{SPLASH_BANNER.format(version=version)}{theme.reset}\n"


def help_footer_lines(theme: UITheme, preview_supported: bool) -> list[str]:
    """Return the key-binding rows shown under the listing.

    Without preview support the third row (``w``/``o``/``p``/``q``) is
    folded into the end of the second row.
    """
    lead = f"{theme.footer_bg}{theme.white}{theme.bold}"
    end = theme.reset
    first = (
        f"{lead} {NAV_ICON} ↑/↓: Navigate  {FOLDER_ICON} Enter: Open  "
        f"{FILE_ICON} n: New File  {FOLDER_ICON} N: New Folder{end}"
    )
    second = (
        f"{lead} {theme.blue}{RENAME_ICON} r: Rename  {theme.blue}{COPY_ICON} c: Copy  "
        f"{theme.yellow}{CUT_ICON} x: Cut  {theme.green}{PASTE_ICON} v: Paste  "
        f"{theme.red}{DELETE_ICON} d: Delete"
    )
    if not preview_supported:
        return [first, f"{second}  {theme.white}{PATH_ICON} w: Set PWD  {FILE_ICON} o: Open  {QUIT_ICON} q: Quit{end}"]
    third = (
        f"{lead} {PATH_ICON} w: Set PWD  {FILE_ICON} o: Open (default)  "
        f"{theme.blue}{PREVIEW_ICON} p: Toggle Preview  {theme.white}{QUIT_ICON} q: Quit{end}"
    )
    return [first, f"{second}{end}", third]
