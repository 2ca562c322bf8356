"""Drag gesture controller tying projection, hover-expand and reorder together.

One ``DragSession`` lives for one gesture. It owns the entry snapshot taken
at drag start; the host cancels the session when the underlying forest
changes instead of reconciling mid-drag. Expansion changes made by the
hover timer are fed back through ``refresh``.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Callable, Sequence
from dataclasses import dataclass

from ..tree_model.types import FlatEntry
from .hover import DEFAULT_HOVER_EXPAND_SECONDS, HoverExpandTimer
from .projection import Projection, project_drop
from .reorder import MoveInstruction, move_instruction_for_drop, reorder_entries

logger = logging.getLogger(__name__)

DEFAULT_INDENT_WIDTH = 20


@dataclass(frozen=True)
class DropResult:
    """Reordered snapshot plus the store move it implies (if any)."""

    entries: list[FlatEntry]
    instruction: MoveInstruction | None


@dataclass(frozen=True)
class DropIndicator:
    """Insertion line shown next to the hovered row."""

    over_id: str
    side: str
    depth: int


class DragSession:
    """State for one drag: active/over ids, horizontal offset, hover timer."""

    def __init__(
        self,
        entries: Sequence[FlatEntry],
        *,
        indent_width: float = DEFAULT_INDENT_WIDTH,
        hover_delay: float = DEFAULT_HOVER_EXPAND_SECONDS,
        expand_folder: Callable[[str], None] | None = None,
        reorder_enabled: bool = True,
        monotonic: Callable[[], float] = time.monotonic,
    ) -> None:
        """Create an idle session over an entry snapshot.

        Args:
            entries: Flattened entries captured when the drag starts.
            indent_width: Pixels per depth level for projection.
            hover_delay: Seconds a collapsed folder must stay hovered before
                ``expand_folder`` is called.
            expand_folder: Host hook that opens a folder by id.
            reorder_enabled: ``False`` while a sorted view is shown; drops
                are then ignored.
            monotonic: Clock used by the hover timer.
        """
        if indent_width <= 0:
            raise ValueError("indent_width must be positive")
        self.entries: list[FlatEntry] = list(entries)
        self.indent_width = indent_width
        self.reorder_enabled = reorder_enabled
        self._expand_folder = expand_folder
        self._hover = HoverExpandTimer(hover_delay, monotonic=monotonic)
        self.active_id: str | None = None
        self.over_id: str | None = None
        self.offset_x: float = 0.0

    @property
    def is_active(self) -> bool:
        return self.active_id is not None

    def _contains(self, node_id: str | None) -> bool:
        return node_id is not None and any(entry.id == node_id for entry in self.entries)

    def start(self, active_id: str) -> bool:
        """Begin dragging ``active_id``; it starts hovering itself."""
        if not self._contains(active_id):
            return False
        self.active_id = active_id
        self.over_id = active_id
        self.offset_x = 0.0
        self._hover.reset()
        self._hover.hover(active_id, active_id)
        logger.debug("drag started on %s", active_id)
        return True

    def move(self, offset_x: float) -> None:
        """Record horizontal pointer displacement since drag start."""
        if self.is_active:
            self.offset_x = float(offset_x)

    def over(self, over_id: str | None) -> None:
        """Record the entry under the pointer, or ``None`` when over nothing."""
        if not self.is_active:
            return
        self.over_id = over_id if self._contains(over_id) else None
        self._hover.hover(self.over_id, self.active_id)

    def tick(self) -> str | None:
        """Fire the hover timer; returns the id of a folder that was expanded."""
        node_id = self._hover.poll()
        if node_id is None or node_id == self.active_id:
            return None
        entry = next((item for item in self.entries if item.id == node_id), None)
        if entry is None or not entry.is_folder or not entry.collapsed:
            return None
        if self._expand_folder is not None:
            self._expand_folder(node_id)
        return node_id

    def refresh(self, entries: Sequence[FlatEntry]) -> bool:
        """Adopt a re-flattened snapshot; cancels when the dragged entry vanished."""
        self.entries = list(entries)
        if not self.is_active:
            return True
        if not self._contains(self.active_id):
            self.cancel()
            return False
        if not self._contains(self.over_id):
            self.over_id = None
            self._hover.hover(None)
        return True

    @property
    def projection(self) -> Projection | None:
        """Current projected drop, or ``None`` without a live target."""
        if self.active_id is None or self.over_id is None:
            return None
        return project_drop(self.entries, self.active_id, self.over_id, self.offset_x, self.indent_width)

    def drop_indicator(self) -> DropIndicator | None:
        """Side of the hovered row where the block would land, at projected depth."""
        projection = self.projection
        over_id = self.over_id
        if projection is None or over_id is None or not self.reorder_enabled:
            return None
        ids = [entry.id for entry in self.entries]
        side = "bottom" if ids.index(self.active_id) < ids.index(over_id) else "top"
        return DropIndicator(over_id=over_id, side=side, depth=projection.depth)

    def cancel(self) -> None:
        """Abort the gesture and clear all transient state."""
        if self.active_id is not None:
            logger.debug("drag cancelled on %s", self.active_id)
        self.active_id = None
        self.over_id = None
        self.offset_x = 0.0
        self._hover.reset()

    def drop(self) -> DropResult | None:
        """Finish the gesture, returning the reordered snapshot and move."""
        projection = self.projection
        active_id = self.active_id
        over_id = self.over_id
        self.cancel()
        if projection is None or active_id is None or over_id is None or not self.reorder_enabled:
            return None

        reordered = reorder_entries(self.entries, active_id, over_id, projection.depth, projection.parent_id)
        instruction = move_instruction_for_drop(self.entries, reordered, active_id, projection.parent_id)
        if reordered == self.entries:
            instruction = None
        logger.debug("drop %s over %s -> %s", active_id, over_id, instruction)
        return DropResult(entries=reordered, instruction=instruction)
