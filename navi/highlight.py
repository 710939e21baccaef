"""Pygments coloring for text previews."""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pygments import highlight
from pygments.formatters import Terminal256Formatter
from pygments.lexers import TextLexer, get_lexer_for_filename
from pygments.styles import get_style_by_name
from pygments.util import ClassNotFound

DEFAULT_STYLE = "monokai"


@lru_cache(maxsize=None)
def _formatter_for_style(style: str) -> Terminal256Formatter:
    try:
        get_style_by_name(style)
    except ClassNotFound:
        style = DEFAULT_STYLE
    return Terminal256Formatter(style=style)


def colorize_preview(text: str, path: Path, style: str = DEFAULT_STYLE) -> str:
    """Return ``text`` highlighted for ``path``'s language.

    Unknown file types and lexer failures leave the text unchanged.
    """
    try:
        lexer = get_lexer_for_filename(path.name, text, stripnl=False)
    except ClassNotFound:
        return text
    if isinstance(lexer, TextLexer):
        return text
    rendered = highlight(text, lexer, _formatter_for_style(style))
    if text.endswith("\n") or not rendered.endswith("\n"):
        return rendered
    return rendered[:-1]
