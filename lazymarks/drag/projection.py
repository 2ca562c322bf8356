"""Drop-depth projection for an in-progress drag gesture.

The projection answers "if the pointer were released now, at what depth and
under which folder would the dragged entry land". It runs on every pointer
move, so it stays linear in the number of entries and never mutates input.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Sequence
from dataclasses import dataclass

from ..tree_model.types import FlatEntry

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Projection:
    """Clamped drop depth, its valid bounds, and the resolved parent folder."""

    depth: int
    min_depth: int
    max_depth: int
    parent_id: str | None


def drag_depth(offset_x: float, indent_width: float) -> int:
    """Indent levels covered by ``offset_x``; halves round toward +inf."""
    return math.floor(offset_x / indent_width + 0.5)


def _index_of(entries: Sequence[FlatEntry], node_id: str) -> int:
    for idx, entry in enumerate(entries):
        if entry.id == node_id:
            return idx
    raise KeyError(node_id)


def _array_move(entries: Sequence[FlatEntry], from_idx: int, to_idx: int) -> list[FlatEntry]:
    moved = list(entries)
    moved.insert(to_idx, moved.pop(from_idx))
    return moved


def max_depth_after(previous: FlatEntry | None) -> int:
    """Deepest level allowed below ``previous``: one inside an open folder."""
    if previous is None:
        return 0
    if previous.is_folder and not previous.collapsed:
        return previous.depth + 1
    return previous.depth


def min_depth_before(following: FlatEntry | None) -> int:
    """Shallowest level allowed above ``following``."""
    if following is None:
        return 0
    return following.depth


def parent_id_at_depth(depth: int, entries: Sequence[FlatEntry], position: int) -> str | None:
    """Nearest folder at ``depth - 1`` scanning backward from ``position``."""
    if depth == 0:
        return None
    for idx in range(position - 1, -1, -1):
        entry = entries[idx]
        if entry.depth == depth - 1 and entry.is_folder:
            return entry.id
    return None


def project_drop(
    entries: Sequence[FlatEntry],
    active_id: str,
    over_id: str,
    offset_x: float,
    indent_width: float,
) -> Projection:
    """Project the drop depth/parent for ``active_id`` hovering ``over_id``.

    Both ids must be present in ``entries``; a missing id raises ``KeyError``.
    When the neighbors leave no valid range (a folder dragged over its own
    first child), the upper bound wins and ``min_depth`` is reported clamped
    to it.
    """
    over_idx = _index_of(entries, over_id)
    active_idx = _index_of(entries, active_id)
    active = entries[active_idx]
    moved = _array_move(entries, active_idx, over_idx)

    projected = active.depth + drag_depth(offset_x, indent_width)
    previous = moved[over_idx - 1] if over_idx > 0 else None
    following = moved[over_idx + 1] if over_idx + 1 < len(moved) else None
    max_depth = max_depth_after(previous)
    min_depth = min(min_depth_before(following), max_depth)

    depth = max(min_depth, min(projected, max_depth))
    parent_id = parent_id_at_depth(depth, moved, over_idx)
    logger.debug(
        "projected %s over %s: depth=%d bounds=[%d, %d] parent=%s",
        active_id,
        over_id,
        depth,
        min_depth,
        max_depth,
        parent_id,
    )
    return Projection(depth=depth, min_depth=min_depth, max_depth=max_depth, parent_id=parent_id)
