"""Search and sort projections over the bookmark forest."""

from __future__ import annotations

from collections.abc import Callable, Sequence

from .build import iter_nodes
from .types import BookmarkFolder, BookmarkLeaf, TreeNode

SORT_NONE = "none"
SORT_TYPES = (SORT_NONE, "newest", "oldest", "a-z", "z-a")


def normalize_sort_type(value: object) -> str:
    """Return ``value`` when it names a known sort order, otherwise ``"none"``."""
    if isinstance(value, str) and value.strip().lower() in SORT_TYPES:
        return value.strip().lower()
    return SORT_NONE


def newest_date(node: TreeNode) -> int:
    """Latest ``date_added`` in the subtree; missing dates count as 0."""
    latest = node.date_added or 0
    if isinstance(node, BookmarkFolder):
        for child in node.children:
            latest = max(latest, newest_date(child))
    return latest


def oldest_date(node: TreeNode) -> int:
    """Earliest ``date_added`` in the subtree; missing dates count as 0."""
    earliest = node.date_added or 0
    if isinstance(node, BookmarkFolder):
        for child in node.children:
            earliest = min(earliest, oldest_date(child))
    return earliest


def _sort_key_for(sort_type: str) -> tuple[Callable[[TreeNode], object], bool]:
    if sort_type == "a-z":
        return (lambda node: node.title.casefold()), False
    if sort_type == "z-a":
        return (lambda node: node.title.casefold()), True
    if sort_type == "newest":
        return newest_date, True
    return oldest_date, False


def sort_nodes(nodes: Sequence[TreeNode], sort_type: str) -> list[TreeNode]:
    """Stable sort of one sibling list; ``"none"`` keeps the stored order."""
    if sort_type == SORT_NONE:
        return list(nodes)
    key, reverse = _sort_key_for(sort_type)
    return sorted(nodes, key=key, reverse=reverse)


def sort_forest(forest: Sequence[TreeNode], sort_type: str) -> list[TreeNode]:
    """Recursively sort every sibling list in ``forest``."""
    if sort_type == SORT_NONE:
        return list(forest)

    def sort_level(nodes: Sequence[TreeNode]) -> list[TreeNode]:
        out: list[TreeNode] = []
        for node in sort_nodes(nodes, sort_type):
            if isinstance(node, BookmarkFolder):
                node = BookmarkFolder(
                    node.id,
                    node.title,
                    tuple(sort_level(node.children)),
                    date_added=node.date_added,
                )
            out.append(node)
        return out

    return sort_level(forest)


def node_matches(node: TreeNode, query: str) -> bool:
    """Case-insensitive substring match against title or URL."""
    folded = query.casefold()
    if folded in node.title.casefold():
        return True
    return isinstance(node, BookmarkLeaf) and folded in node.url.casefold()


def search_nodes(forest: Sequence[TreeNode], query: str, sort_type: str = SORT_NONE) -> list[TreeNode]:
    """Return every matching node as a flat result list.

    Results keep pre-order unless ``sort_type`` asks for another order.
    """
    if not query:
        return []
    matches = [node for node in iter_nodes(forest) if node_matches(node, query)]
    return sort_nodes(matches, sort_type)
