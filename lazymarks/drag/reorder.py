"""Block reordering of flattened entries and the resulting move instruction."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass, replace

from ..tree_model.types import FlatEntry

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MoveInstruction:
    """Single move to apply against the authoritative store.

    ``new_index`` counts positions in the destination's child list before the
    node is removed from its old slot. ``new_parent_id is None`` means the
    forest root.
    """

    node_id: str
    new_parent_id: str | None
    new_index: int


def subtree_end(entries: Sequence[FlatEntry], index: int) -> int:
    """Return the first index after the block rooted at ``index``."""
    depth = entries[index].depth
    end = index + 1
    while end < len(entries) and entries[end].depth > depth:
        end += 1
    return end


def _position(entries: Sequence[FlatEntry], node_id: str) -> int:
    for idx, entry in enumerate(entries):
        if entry.id == node_id:
            return idx
    return -1


def reorder_entries(
    entries: Sequence[FlatEntry],
    active_id: str,
    over_id: str,
    new_depth: int,
    new_parent_id: str | None,
) -> list[FlatEntry]:
    """Move ``active_id`` and its visible descendants next to ``over_id``.

    Descendant depths shift by the same delta as the moved entry. Unknown ids
    or a target inside the moving block leave the list unchanged.
    """
    active_idx = _position(entries, active_id)
    over_idx = _position(entries, over_id)
    if active_idx < 0 or over_idx < 0:
        logger.debug("reorder ignored: %s or %s not in snapshot", active_id, over_id)
        return list(entries)

    end = subtree_end(entries, active_idx)
    if active_idx < over_idx < end:
        logger.debug("reorder ignored: %s is inside the block of %s", over_id, active_id)
        return list(entries)

    active = entries[active_idx]
    delta = new_depth - active.depth
    block = [replace(active, depth=new_depth, parent_id=new_parent_id)]
    block.extend(replace(entry, depth=entry.depth + delta) for entry in entries[active_idx + 1:end])

    result = list(entries)
    if active_id == over_id:
        result[active_idx:end] = block
        return result

    del result[active_idx:end]
    insert_at = _position(result, over_id)
    if active_idx < over_idx:
        insert_at += 1
    result[insert_at:insert_at] = block
    return result


def move_instruction_for_drop(
    before: Sequence[FlatEntry],
    after: Sequence[FlatEntry],
    active_id: str,
    new_parent_id: str | None,
) -> MoveInstruction | None:
    """Translate a reordered list into one store move.

    Returns ``None`` when the entry keeps its parent and sibling index, or
    when ``active_id`` is missing from either list.
    """
    original_idx = _position(before, active_id)
    moved_idx = _position(after, active_id)
    if original_idx < 0 or moved_idx < 0:
        return None
    original = before[original_idx]

    new_index = sum(1 for entry in after[:moved_idx] if entry.parent_id == new_parent_id)
    same_parent = original.parent_id == new_parent_id
    if same_parent and original.index == new_index:
        return None
    if same_parent and new_index > original.index:
        new_index += 1
    return MoveInstruction(node_id=active_id, new_parent_id=new_parent_id, new_index=new_index)
