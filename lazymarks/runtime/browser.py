"""Bookmark browser controller: expansion, selection, search and drops.

``BookmarkBrowser`` is the consumer of the flattening core. It owns the
expanded-id set and the selected id, re-flattens after every change, and
applies completed drops to the store as a single move.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Callable
from dataclasses import dataclass

from ..drag.hover import DEFAULT_HOVER_EXPAND_SECONDS
from ..drag.session import DEFAULT_INDENT_WIDTH, DragSession, DropResult
from ..input.key_tree import TreeKeyHandler
from ..store import BookmarkStore
from ..tree_model.build import build_node_map, build_parent_map, collect_urls, flatten_tree, iter_nodes
from ..tree_model.filtering import SORT_NONE, normalize_sort_type, search_nodes, sort_forest
from ..tree_model.navigation import NavigationIntent, recover_selection, reveal_expanded_ids
from ..tree_model.types import BookmarkFolder, FlatEntry, TreeNode
from .state import BrowserState

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BrowserSettings:
    """Tunables read from config at startup."""

    indent_width: int = DEFAULT_INDENT_WIDTH
    hover_expand_seconds: float = DEFAULT_HOVER_EXPAND_SECONDS


class BookmarkBrowser:
    """Drive one bookmark tree view over a ``BookmarkStore``."""

    def __init__(
        self,
        store: BookmarkStore,
        *,
        settings: BrowserSettings | None = None,
        sort_type: str = SORT_NONE,
        open_url: Callable[[str], None] | None = None,
        monotonic: Callable[[], float] = time.monotonic,
    ) -> None:
        self.store = store
        self.settings = settings or BrowserSettings()
        self.state = BrowserState(sort_type=normalize_sort_type(sort_type))
        self._open_url = open_url
        self._monotonic = monotonic
        self._forest: list[TreeNode] = []
        self._parent_map: dict[str, str | None] = {}
        self.drag: DragSession | None = None
        self.keys = TreeKeyHandler(lambda: self.state.entries, lambda: self.state.selected_id)
        self.reload()

    @property
    def entries(self) -> list[FlatEntry]:
        return self.state.entries

    @property
    def forest(self) -> list[TreeNode]:
        """Forest in display order (sorted when a sort type is active)."""
        return self._forest

    @property
    def reorder_enabled(self) -> bool:
        return self.state.sort_type == SORT_NONE

    def reload(self) -> None:
        """Re-read the store; any in-flight drag is cancelled."""
        if self.drag is not None and self.drag.is_active:
            logger.debug("store changed during drag; cancelling gesture")
            self.drag.cancel()
        self.drag = None
        self._forest = sort_forest(self.store.forest(), self.state.sort_type)
        self._parent_map = build_parent_map(self._forest)
        known = set(self._parent_map)
        self.state.expanded &= known
        self._reflatten()

    def _reflatten(self) -> None:
        self.state.entries = flatten_tree(self._forest, self.state.expanded)
        self.state.selected_id = recover_selection(self.state.entries, self.state.selected_id, self._parent_map)
        if self.drag is not None and self.drag.is_active:
            self.drag.refresh(self.state.entries)

    def set_sort_type(self, sort_type: str) -> None:
        self.state.sort_type = normalize_sort_type(sort_type)
        self.reload()

    def select(self, node_id: str | None) -> None:
        if node_id is None or any(entry.id == node_id for entry in self.state.entries):
            self.state.selected_id = node_id

    def focus(self) -> None:
        """Select the first row when nothing is selected yet."""
        if self.state.selected_id is None and self.state.entries:
            self.state.selected_id = self.state.entries[0].id

    def toggle_folder(self, node_id: str) -> None:
        if node_id in self.state.expanded:
            self.state.expanded.discard(node_id)
        else:
            self.state.expanded.add(node_id)
        self._reflatten()

    def expand_all(self) -> None:
        self.state.expanded = {node.id for node in iter_nodes(self._forest) if isinstance(node, BookmarkFolder)}
        self._reflatten()

    def reveal(self, node_id: str) -> None:
        """Open the tree down to ``node_id`` (replacing expansion) and select it."""
        if node_id not in self._parent_map:
            return
        self.state.search_query = ""
        self.state.expanded = reveal_expanded_ids(node_id, self._parent_map)
        self.state.selected_id = node_id
        self._reflatten()

    def _open(self, url: str) -> None:
        self.state.opened_urls.append(url)
        if self._open_url is not None:
            self._open_url(url)

    def apply_intent(self, intent: NavigationIntent) -> None:
        if intent.toggle is not None:
            self.toggle_folder(intent.toggle)
        if intent.select is not None:
            self.state.selected_id = intent.select
        if intent.open_url is not None:
            self._open(intent.open_url)

    def open_all(self, folder_id: str) -> list[str]:
        """Open every bookmark under ``folder_id`` in pre-order.

        Unknown ids and bookmarks give an empty list; nothing is opened.
        """
        node = self.node(folder_id)
        if not isinstance(node, BookmarkFolder):
            return []
        urls = collect_urls(node)
        for url in urls:
            self._open(url)
        logger.debug("opened %d url(s) from %s", len(urls), folder_id)
        return urls

    def handle_key(self, key: str) -> bool:
        """Dispatch one navigation key; returns whether it was handled."""
        intent = self.keys.handle_key(key)
        if intent is None:
            return False
        self.apply_intent(intent)
        return True

    def search(self, query: str) -> list[TreeNode]:
        """Set the search query and return the flat result list."""
        self.state.search_query = query
        return search_nodes(self._forest, query, self.state.sort_type)

    def node(self, node_id: str) -> TreeNode | None:
        return build_node_map(self._forest).get(node_id)

    def begin_drag(self, active_id: str) -> DragSession | None:
        """Start a gesture on ``active_id`` over the current snapshot."""
        session = DragSession(
            self.state.entries,
            indent_width=self.settings.indent_width,
            hover_delay=self.settings.hover_expand_seconds,
            expand_folder=self._expand_during_drag,
            reorder_enabled=self.reorder_enabled,
            monotonic=self._monotonic,
        )
        if not session.start(active_id):
            return None
        self.drag = session
        return session

    def _expand_during_drag(self, node_id: str) -> None:
        self.state.expanded.add(node_id)
        self._reflatten()

    def complete_drop(self) -> DropResult | None:
        """Finish the gesture and hand its move to the store.

        Store errors propagate after the gesture state is cleared; the tree
        is re-flattened from the store either way.
        """
        session = self.drag
        self.drag = None
        if session is None:
            return None
        result = session.drop()
        if result is None or result.instruction is None:
            return result
        try:
            self.store.apply_move(result.instruction)
        finally:
            self.reload()
        return result
