"""ANSI row palettes for the bookmark tree and theme lookup.

Themes are ANSI palettes for bookmark rows. JSON dump colouring uses a
separate Pygments style setting.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class UITheme:
    """Semantic ANSI palette used by row renderers."""

    name: str
    reverse: str
    reset: str
    tree_marker: str
    tree_folder: str
    tree_bookmark: str
    tree_url: str
    tree_count: str
    search_match: str
    search_match_end: str
    drop_indicator: str


DEFAULT_THEME = UITheme(
    name="default",
    reverse="\033[7m",
    reset="\033[0m",
    tree_marker="\033[38;5;44m",
    tree_folder="\033[1;34m",
    tree_bookmark="\033[38;5;252m",
    tree_url="\033[2;38;5;250m",
    tree_count="\033[38;5;109m",
    search_match="\033[7;1m",
    search_match_end="\033[27;22m",
    drop_indicator="\033[38;5;214m",
)

OCEAN_THEME = UITheme(
    name="ocean",
    reverse="\033[7m",
    reset="\033[0m",
    tree_marker="\033[38;5;39m",
    tree_folder="\033[1;38;5;45m",
    tree_bookmark="\033[38;5;153m",
    tree_url="\033[2;38;5;110m",
    tree_count="\033[38;5;73m",
    search_match="\033[7;1m",
    search_match_end="\033[27;22m",
    drop_indicator="\033[38;5;215m",
)

PLAIN_THEME = UITheme(
    name="plain",
    reverse="",
    reset="",
    tree_marker="",
    tree_folder="",
    tree_bookmark="",
    tree_url="",
    tree_count="",
    search_match="",
    search_match_end="",
    drop_indicator="",
)

_THEMES = {theme.name: theme for theme in (DEFAULT_THEME, OCEAN_THEME)}


def available_theme_names() -> tuple[str, ...]:
    """Names accepted by ``--theme`` and the ``theme`` config key."""
    return tuple(sorted(_THEMES))


def normalize_theme_name(name: str | None) -> str:
    """Case-insensitive lookup key; unknown or empty names map to ``default``."""
    key = (name or "").strip().lower()
    return key if key in _THEMES else DEFAULT_THEME.name


def resolve_theme(name: str | None, *, no_color: bool = False) -> UITheme:
    """Palette for row rendering; ``no_color`` always yields the plain palette."""
    return PLAIN_THEME if no_color else _THEMES[normalize_theme_name(name)]
