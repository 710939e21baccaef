"""Full-screen frame rendering.

``render_screen`` is a pure read of ``SessionState``: it returns the whole
frame (clear sequence included) as one string and the loop writes it in a
single call. Every listed entry is stat'ed again on each frame, so the cost
is one stat per entry per keypress.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from . import fsops
from .ansi import clip_ansi_line
from .formatting import format_date, format_size
from .help import help_footer_lines
from .highlight import DEFAULT_STYLE, colorize_preview
from .preview import TRUNCATION_MARKER, build_preview, is_text_preview, sanitize_label
from .state import SessionState
from .terminal import CLEAR_SCREEN
from .theme import CLOCK_ICON, FILE_ICON, FOLDER_ICON, PATH_ICON, PREVIEW_ICON, SIZE_ICON, DEFAULT_THEME, UITheme

NAME_COLUMN_WIDTH = 30
PROMPT_BORDER = "╍" + "┄" * 72


@dataclass(frozen=True)
class RenderContext:
    """Everything besides session state that shapes one frame."""

    status_visible: bool
    columns: int = 80
    theme: UITheme = DEFAULT_THEME
    style: str = DEFAULT_STYLE
    color: bool = True


def _entry_row(state: SessionState, idx: int, name: str, theme: UITheme) -> str:
    info = fsops.stat_entry(Path(os.path.join(state.current_path, name)))
    if info is None:
        return f"   {sanitize_label(name)}  error"

    padded = f"{sanitize_label(name):<{NAME_COLUMN_WIDTH}}"
    icon = f"{theme.yellow}{FOLDER_ICON}" if info.is_dir else f"{theme.blue}{FILE_ICON}"
    columns = (
        f"{icon} {theme.white}{padded}    "
        f"{theme.green}{SIZE_ICON} {format_size(info.size)}    "
        f"{theme.yellow}{CLOCK_ICON} {format_date(info.mtime)}{theme.reset}"
    )
    if idx == state.cursor:
        return f"{theme.dark_bg}{theme.blue}-> {columns}"
    return f"   {columns}"


def _input_prompt_lines(state: SessionState, theme: UITheme) -> list[str]:
    border = f"{theme.dark_bg}{theme.blue}{theme.bold}{PROMPT_BORDER}{theme.reset}"
    prompt = f"{theme.dark_bg}{theme.white}{theme.bold} {state.input_prompt}{sanitize_label(state.input_buffer)}{theme.reset}"
    return ["", border, prompt, border]


def _colorize(preview: str, path: Path, context: RenderContext) -> str:
    if not context.color or not is_text_preview(preview):
        return preview
    marker = "\n" + TRUNCATION_MARKER
    if preview.endswith(marker):
        return colorize_preview(preview[: -len(marker)], path, context.style) + marker
    return colorize_preview(preview, path, context.style)


def _preview_lines(state: SessionState, context: RenderContext) -> list[str]:
    theme = context.theme
    name = state.selected_name
    if name is None:
        return []
    path = Path(os.path.normpath(os.path.join(state.current_path, name)))
    preview = build_preview(path)
    info = fsops.stat_entry(path)
    if info is not None and not info.is_dir:
        preview = _colorize(preview, path, context)
    lines = ["", f"{theme.dark_bg}{theme.blue}{theme.bold} {PREVIEW_ICON} Preview {theme.reset}"]
    lines.extend(f"{theme.white}{line}{theme.reset}" for line in preview.split("\n"))
    return lines


def _selected_info_lines(state: SessionState, theme: UITheme) -> list[str]:
    name = state.selected_name
    if name is None:
        return []
    info = fsops.stat_entry(Path(os.path.join(state.current_path, name)))
    if info is None:
        return []
    return [
        "",
        (
            f"{theme.footer_bg}{theme.white}{theme.bold}File: {sanitize_label(name)}    "
            f"{theme.green}{SIZE_ICON}{theme.white} Size: {format_size(info.size)}    "
            f"{theme.yellow}{CLOCK_ICON}{theme.white} Modified: {format_date(info.mtime)}{theme.reset}"
        ),
    ]


def render_lines(state: SessionState, context: RenderContext) -> list[str]:
    """Return the frame as a list of styled rows, not yet clipped."""
    theme = context.theme
    lines = [
        f"{theme.header_bg}{theme.white}{theme.bold} {PATH_ICON}  Path: {sanitize_label(str(state.current_path))} {theme.reset}",
        "",
    ]
    if context.status_visible and state.status_message:
        lines.append(f"{theme.dark_bg}{theme.yellow}{theme.bold} {sanitize_label(state.status_message)}{theme.reset}")
        lines.append("")

    for idx, name in enumerate(state.entries):
        lines.append(_entry_row(state, idx, name, theme))

    if state.input_active:
        lines.extend(_input_prompt_lines(state, theme))
        return lines

    if state.preview_supported and state.preview_enabled:
        lines.extend(_preview_lines(state, context))
    lines.append("")
    lines.extend(help_footer_lines(theme, state.preview_supported))
    lines.extend(_selected_info_lines(state, theme))
    return lines


def render_screen(state: SessionState, context: RenderContext) -> str:
    """Return a clear-and-repaint frame clipped to the terminal width."""
    rows = [clip_ansi_line(line, context.columns) for line in render_lines(state, context)]
    return CLEAR_SCREEN + "\n".join(rows) + "\n"
