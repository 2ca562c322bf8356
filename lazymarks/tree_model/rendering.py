"""Formatting helpers for bookmark tree rows."""

from __future__ import annotations

from urllib.parse import urlsplit

from ..ui_theme import DEFAULT_THEME, UITheme
from .types import FlatEntry

INDENT = "  "


def highlight_substring(text: str, query: str, theme: UITheme | None = None) -> str:
    """Highlight first case-insensitive substring match in ``text``."""
    if not query:
        return text
    active_theme = theme or DEFAULT_THEME
    idx = text.casefold().find(query.casefold())
    if idx < 0:
        return text
    end = idx + len(query)
    return text[:idx] + active_theme.search_match + text[idx:end] + active_theme.search_match_end + text[end:]


def url_host(url: str | None) -> str:
    """Return the host part of ``url`` for compact row labels."""
    if not url:
        return ""
    try:
        return urlsplit(url).hostname or ""
    except ValueError:
        return ""


def format_entry(
    entry: FlatEntry,
    *,
    selected: bool = False,
    search_query: str = "",
    theme: UITheme | None = None,
) -> str:
    """Render one bookmark row as ANSI-styled display text."""
    active_theme = theme or DEFAULT_THEME
    reset = active_theme.reset
    indent = INDENT * entry.depth
    title = highlight_substring(entry.title, search_query, active_theme)
    cursor = active_theme.reverse if selected else ""

    if entry.is_folder:
        marker = "▸ " if entry.collapsed else "▾ "
        count = f" {active_theme.tree_count}({entry.child_count}){reset}"
        return (
            f"{indent}{active_theme.tree_marker}{marker}{reset}"
            f"{cursor}{active_theme.tree_folder}{title}{reset}{count}"
        )

    host = url_host(entry.url)
    host_label = f" {active_theme.tree_url}{host}{reset}" if host else ""
    return f"{indent}  {cursor}{active_theme.tree_bookmark}{title}{reset}{host_label}"


def format_drop_indicator(depth: int, width: int = 24, theme: UITheme | None = None) -> str:
    """Render the insertion line drawn at the projected drop depth."""
    active_theme = theme or DEFAULT_THEME
    indent = INDENT * max(0, depth)
    return f"{indent}{active_theme.drop_indicator}{'─' * max(1, width)}{active_theme.reset}"
