"""JSON dump colouring with Pygments."""

from __future__ import annotations

from functools import lru_cache

from pygments import highlight
from pygments.formatters import Terminal256Formatter
from pygments.lexers import JsonLexer
from pygments.styles import get_style_by_name
from pygments.util import ClassNotFound

DEFAULT_STYLE = "monokai"


@lru_cache(maxsize=32)
def normalize_style(style: str) -> str:
    """Return ``style`` when Pygments knows it, otherwise the default."""
    try:
        get_style_by_name(style)
    except ClassNotFound:
        return DEFAULT_STYLE
    return style


@lru_cache(maxsize=8)
def _formatter_for_style(style: str) -> Terminal256Formatter:
    """Return cached Pygments terminal formatter for style name."""
    return Terminal256Formatter(style=style)


def colorize_json(text: str, style: str = DEFAULT_STYLE, no_color: bool = False) -> str:
    """Return ``text`` highlighted as JSON for terminal output."""
    if no_color:
        return text
    return highlight(text, JsonLexer(), _formatter_for_style(normalize_style(style)))
