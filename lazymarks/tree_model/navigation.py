"""Keyboard traversal and selection recovery over flattened entries.

Every helper is a pure function of the entry list and the selected id. The
host owns the expanded set and the selection and applies the returned
``NavigationIntent``.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass

from .types import FlatEntry


@dataclass(frozen=True)
class NavigationIntent:
    """What the host should do after one navigation step."""

    select: str | None = None
    toggle: str | None = None
    open_url: str | None = None

    @property
    def is_empty(self) -> bool:
        return self.select is None and self.toggle is None and self.open_url is None


NO_INTENT = NavigationIntent()


def entry_index_map(entries: Sequence[FlatEntry]) -> dict[str, int]:
    """Return ``{id: position}`` for O(1) neighbor lookup."""
    return {entry.id: idx for idx, entry in enumerate(entries)}


def find_entry(entries: Sequence[FlatEntry], node_id: str | None) -> FlatEntry | None:
    """Return the entry with ``node_id`` or ``None``."""
    if node_id is None:
        return None
    for entry in entries:
        if entry.id == node_id:
            return entry
    return None


def step_selection(
    entries: Sequence[FlatEntry],
    selected_id: str | None,
    direction: int,
    index_map: Mapping[str, int] | None = None,
) -> NavigationIntent:
    """Move selection to the previous/next visible entry, clamped at the ends."""
    if not entries or direction == 0:
        return NO_INTENT
    positions = index_map if index_map is not None else entry_index_map(entries)
    current = positions.get(selected_id) if selected_id is not None else None
    if current is None:
        return NavigationIntent(select=entries[0].id)
    step = 1 if direction > 0 else -1
    target = max(0, min(len(entries) - 1, current + step))
    if target == current:
        return NO_INTENT
    return NavigationIntent(select=entries[target].id)


def enter_folder(
    entries: Sequence[FlatEntry],
    selected_id: str | None,
    index_map: Mapping[str, int] | None = None,
) -> NavigationIntent:
    """Expand a closed folder, or step into the first child of an open one."""
    positions = index_map if index_map is not None else entry_index_map(entries)
    current = positions.get(selected_id) if selected_id is not None else None
    if current is None:
        return NO_INTENT
    entry = entries[current]
    if not entry.is_folder:
        return NO_INTENT
    if entry.collapsed:
        return NavigationIntent(toggle=entry.id)
    next_idx = current + 1
    if next_idx < len(entries) and entries[next_idx].depth == entry.depth + 1:
        return NavigationIntent(select=entries[next_idx].id)
    return NO_INTENT


def exit_folder(
    entries: Sequence[FlatEntry],
    selected_id: str | None,
    index_map: Mapping[str, int] | None = None,
) -> NavigationIntent:
    """Collapse an open folder, otherwise jump to the parent entry."""
    positions = index_map if index_map is not None else entry_index_map(entries)
    current = positions.get(selected_id) if selected_id is not None else None
    if current is None:
        return NO_INTENT
    entry = entries[current]
    if entry.is_folder and not entry.collapsed:
        return NavigationIntent(toggle=entry.id)
    if entry.parent_id is not None and entry.parent_id in positions:
        return NavigationIntent(select=entry.parent_id)
    return NO_INTENT


def activate(entries: Sequence[FlatEntry], selected_id: str | None) -> NavigationIntent:
    """Folders toggle; bookmarks ask the host to open their URL."""
    entry = find_entry(entries, selected_id)
    if entry is None:
        return NO_INTENT
    if entry.is_folder:
        return NavigationIntent(toggle=entry.id)
    if entry.url:
        return NavigationIntent(open_url=entry.url)
    return NO_INTENT


def recover_selection(
    entries: Sequence[FlatEntry],
    selected_id: str | None,
    parent_map: Mapping[str, str | None],
) -> str | None:
    """Return a visible id to keep selected after the visible set changed.

    A hidden selection climbs the structural parent chain to the nearest
    visible ancestor, then falls back to the first entry.
    """
    if not entries:
        return None
    positions = entry_index_map(entries)
    if selected_id is None:
        return None
    if selected_id in positions:
        return selected_id

    seen: set[str] = set()
    current = parent_map.get(selected_id)
    while current is not None and current not in seen:
        if current in positions:
            return current
        seen.add(current)
        current = parent_map.get(current)
    return entries[0].id


def reveal_expanded_ids(node_id: str, parent_map: Mapping[str, str | None]) -> set[str]:
    """Expanded set that shows ``node_id`` with all its ancestors open."""
    expanded: set[str] = set()
    current: str | None = node_id
    while current is not None and current not in expanded:
        expanded.add(current)
        current = parent_map.get(current)
    return expanded
