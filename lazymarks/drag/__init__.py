"""Drag-and-drop reprojection: depth projection, block reorder, hover expand."""

from __future__ import annotations

from .hover import HoverCancelled, HoverExpandTimer, HoverExpired, HoverIdle, HoverPending
from .projection import Projection, drag_depth, project_drop
from .reorder import MoveInstruction, move_instruction_for_drop, reorder_entries, subtree_end
from .session import DEFAULT_INDENT_WIDTH, DragSession, DropIndicator, DropResult

__all__ = [
    "Projection",
    "drag_depth",
    "project_drop",
    "MoveInstruction",
    "reorder_entries",
    "move_instruction_for_drop",
    "subtree_end",
    "HoverExpandTimer",
    "HoverIdle",
    "HoverPending",
    "HoverExpired",
    "HoverCancelled",
    "DragSession",
    "DropResult",
    "DropIndicator",
    "DEFAULT_INDENT_WIDTH",
]
