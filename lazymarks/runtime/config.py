"""User settings stored as one JSON object under the platform config dir.

Keys: ``indent_width``, ``hover_expand_seconds``, ``sort_type``, ``theme``.
Readers sanitize every value and fall back to defaults; a missing, corrupt
or unwritable file never interrupts a session.
"""

from __future__ import annotations

import json
from pathlib import Path

from platformdirs import user_config_dir

from ..drag.hover import DEFAULT_HOVER_EXPAND_SECONDS
from ..drag.session import DEFAULT_INDENT_WIDTH
from ..tree_model.filtering import SORT_NONE, normalize_sort_type

APP_NAME = "lazymarks"
CONFIG_FILENAME = "config.json"
CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME

MAX_HOVER_EXPAND_SECONDS = 10.0


def load_config() -> dict[str, object]:
    """Return the stored settings object, or ``{}`` if it cannot be used."""
    try:
        data = json.loads(CONFIG_PATH.read_text(encoding="utf-8"))
    except (OSError, ValueError):
        return {}
    return data if isinstance(data, dict) else {}


def save_config(data: dict[str, object]) -> None:
    """Write ``data`` back; filesystem errors are dropped."""
    try:
        CONFIG_PATH.parent.mkdir(parents=True, exist_ok=True)
        CONFIG_PATH.write_text(json.dumps(data, indent=2) + "\n", encoding="utf-8")
    except OSError:
        pass


def _store_value(key: str, value: object) -> None:
    data = load_config()
    data[key] = value
    save_config(data)


def load_indent_width() -> int:
    """Pixels per depth level used by drag projection (positive int)."""
    value = load_config().get("indent_width")
    if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
        return DEFAULT_INDENT_WIDTH
    return value


def save_indent_width(width: int) -> None:
    if width > 0:
        _store_value("indent_width", int(width))


def load_hover_expand_seconds() -> float:
    """Hover delay before a collapsed folder opens during a drag.

    Values outside ``[0, 10]`` seconds fall back to the default.
    """
    value = load_config().get("hover_expand_seconds")
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return DEFAULT_HOVER_EXPAND_SECONDS
    if not 0 <= value <= MAX_HOVER_EXPAND_SECONDS:
        return DEFAULT_HOVER_EXPAND_SECONDS
    return float(value)


def load_sort_type() -> str:
    return normalize_sort_type(load_config().get("sort_type", SORT_NONE))


def save_sort_type(sort_type: str) -> None:
    _store_value("sort_type", normalize_sort_type(sort_type))


def load_theme_name() -> str | None:
    """Stored theme name, or ``None`` when absent or blank."""
    value = load_config().get("theme")
    if isinstance(value, str) and value.strip():
        return value.strip()
    return None


def save_theme_name(theme_name: str) -> None:
    name = str(theme_name).strip()
    if name:
        _store_value("theme", name)
