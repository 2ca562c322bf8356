"""In-memory authoritative bookmark store.

Holds the canonical nested forest, applies move instructions, and reads or
writes the plain JSON forest shape understood by ``node_from_dict``. The
flattening and drag modules never touch it; the browser hands it one
``MoveInstruction`` per completed drop and re-flattens afterwards.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from pathlib import Path

from .drag.reorder import MoveInstruction
from .tree_model.types import BookmarkFolder, BookmarkLeaf, TreeNode, node_from_dict, node_to_dict

logger = logging.getLogger(__name__)


class BookmarkStoreError(ValueError):
    """Raised when a store operation names unknown ids or breaks the tree."""


@dataclass(eq=False)
class _StoredNode:
    id: str
    title: str
    url: str | None = None
    date_added: int | None = None
    children: list[_StoredNode] = field(default_factory=list)

    @property
    def is_folder(self) -> bool:
        """Stored nodes without a URL are folders."""
        return self.url is None


def _stored_from_node(node: TreeNode) -> _StoredNode:
    """Deep-copy an immutable node into the mutable stored form."""
    if isinstance(node, BookmarkLeaf):
        return _StoredNode(node.id, node.title, url=node.url, date_added=node.date_added)
    return _StoredNode(
        node.id,
        node.title,
        date_added=node.date_added,
        children=[_stored_from_node(child) for child in node.children],
    )


def _node_from_stored(stored: _StoredNode) -> TreeNode:
    """Freeze a stored node and its subtree back into ``TreeNode`` values."""
    if stored.url is not None:
        return BookmarkLeaf(stored.id, stored.title, stored.url, date_added=stored.date_added)
    return BookmarkFolder(
        stored.id,
        stored.title,
        tuple(_node_from_stored(child) for child in stored.children),
        date_added=stored.date_added,
    )


class BookmarkStore:
    """Mutable nested forest with id lookup and move support."""

    def __init__(self, forest: Sequence[TreeNode] = ()) -> None:
        self._roots: list[_StoredNode] = [_stored_from_node(node) for node in forest]
        self._by_id: dict[str, _StoredNode] = {}
        self._parent: dict[str, str | None] = {}
        self._reindex()

    def _reindex(self) -> None:
        """Rebuild id and parent lookups; duplicate ids are rejected."""
        self._by_id.clear()
        self._parent.clear()

        def walk(nodes: list[_StoredNode], parent_id: str | None) -> None:
            """Record each node under ``parent_id`` and recurse into children."""
            for node in nodes:
                if node.id in self._by_id:
                    raise BookmarkStoreError(f"duplicate bookmark id: {node.id!r}")
                self._by_id[node.id] = node
                self._parent[node.id] = parent_id
                walk(node.children, node.id)

        walk(self._roots, None)

    @classmethod
    def from_data(cls, data: object) -> BookmarkStore:
        """Build a store from a JSON-decoded list of nodes or ``{"roots": [...]}``."""
        if isinstance(data, Mapping):
            data = data.get("roots")
        if not isinstance(data, list):
            raise BookmarkStoreError("bookmark data must be a list of nodes or an object with 'roots'")
        try:
            forest = [node_from_dict(item) for item in data]
        except (KeyError, TypeError, AttributeError, ValueError, OverflowError) as exc:
            raise BookmarkStoreError(f"malformed bookmark node: {exc}") from exc
        return cls(forest)

    @classmethod
    def from_json(cls, text: str) -> BookmarkStore:
        """Parse ``text`` as JSON and build a store from it."""
        try:
            data = json.loads(text)
        except json.JSONDecodeError as exc:
            raise BookmarkStoreError(f"invalid bookmark JSON: {exc}") from exc
        return cls.from_data(data)

    @classmethod
    def load(cls, path: Path) -> BookmarkStore:
        """Read a store from ``path``; I/O errors propagate."""
        return cls.from_json(path.read_text(encoding="utf-8"))

    def to_data(self) -> list[dict[str, object]]:
        """JSON-ready list of root nodes in stored order."""
        return [node_to_dict(node) for node in self.forest()]

    def save(self, path: Path) -> None:
        """Write the forest to ``path`` as indented JSON; I/O errors propagate."""
        path.write_text(json.dumps(self.to_data(), indent=2) + "\n", encoding="utf-8")

    def forest(self) -> list[TreeNode]:
        """Immutable snapshot of the current forest."""
        return [_node_from_stored(node) for node in self._roots]

    def __contains__(self, node_id: object) -> bool:
        """Whether ``node_id`` names any folder or bookmark in the store."""
        return node_id in self._by_id

    def __len__(self) -> int:
        """Total number of folders and bookmarks."""
        return len(self._by_id)

    def parent_of(self, node_id: str) -> str | None:
        """Parent folder id of ``node_id``; ``None`` for roots."""
        if node_id not in self._parent:
            raise BookmarkStoreError(f"unknown bookmark id: {node_id!r}")
        return self._parent[node_id]

    def _siblings(self, parent_id: str | None) -> list[_StoredNode]:
        """Mutable child list of ``parent_id`` (the root list for ``None``)."""
        if parent_id is None:
            return self._roots
        parent = self._by_id.get(parent_id)
        if parent is None:
            raise BookmarkStoreError(f"unknown parent id: {parent_id!r}")
        if not parent.is_folder:
            raise BookmarkStoreError(f"cannot move into bookmark {parent_id!r}: not a folder")
        return parent.children

    def apply_move(self, instruction: MoveInstruction) -> None:
        """Move a node under ``new_parent_id`` at ``new_index``.

        ``new_index`` is read against the destination child list before the
        node leaves its old slot, so moving down within one parent passes an
        index one past the final position.
        """
        node = self._by_id.get(instruction.node_id)
        if node is None:
            raise BookmarkStoreError(f"unknown bookmark id: {instruction.node_id!r}")

        ancestor = instruction.new_parent_id
        while ancestor is not None:
            if ancestor == node.id:
                raise BookmarkStoreError(f"cannot move {node.id!r} into its own subtree")
            ancestor = self._parent.get(ancestor)

        destination = self._siblings(instruction.new_parent_id)
        source = self._siblings(self._parent[node.id])
        old_index = source.index(node)
        index = max(0, min(instruction.new_index, len(destination)))
        if source is destination and index > old_index:
            index -= 1
        source.pop(old_index)
        destination.insert(index, node)
        self._parent[node.id] = instruction.new_parent_id
        logger.info(
            "moved %s under %s at %d",
            node.id,
            instruction.new_parent_id if instruction.new_parent_id is not None else "<root>",
            index,
        )
