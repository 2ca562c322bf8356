"""Flattened-entry construction and whole-forest walking helpers."""

from __future__ import annotations

from collections.abc import Collection, Iterator, Sequence

from .types import BookmarkFolder, BookmarkLeaf, FlatEntry, TreeNode


def flatten_tree(forest: Sequence[TreeNode], expanded_ids: Collection[str]) -> list[FlatEntry]:
    """Build the visible pre-order entry list honoring expansion state.

    Root nodes get ``depth == 0`` and no parent. Children of a folder appear
    only while the folder id is in ``expanded_ids``.
    """
    entries: list[FlatEntry] = []

    def walk(nodes: Sequence[TreeNode], depth: int, parent_id: str | None) -> None:
        """Depth-first traversal adding each node and the children of open folders."""
        for index, node in enumerate(nodes):
            if isinstance(node, BookmarkFolder):
                is_open = node.id in expanded_ids
                entries.append(
                    FlatEntry(
                        id=node.id,
                        parent_id=parent_id,
                        depth=depth,
                        index=index,
                        is_folder=True,
                        collapsed=not is_open,
                        title=node.title,
                        child_count=len(node.children),
                        date_added=node.date_added,
                    )
                )
                if is_open:
                    walk(node.children, depth + 1, node.id)
                continue
            entries.append(
                FlatEntry(
                    id=node.id,
                    parent_id=parent_id,
                    depth=depth,
                    index=index,
                    is_folder=False,
                    title=node.title,
                    url=node.url,
                    date_added=node.date_added,
                )
            )

    walk(forest, 0, None)
    return entries


def iter_nodes(forest: Sequence[TreeNode]) -> Iterator[TreeNode]:
    """Yield every node of ``forest`` in pre-order, ignoring expansion."""
    for node in forest:
        yield node
        if isinstance(node, BookmarkFolder):
            yield from iter_nodes(node.children)


def build_node_map(forest: Sequence[TreeNode]) -> dict[str, TreeNode]:
    """Return ``{id: node}`` for the whole forest."""
    return {node.id: node for node in iter_nodes(forest)}


def build_parent_map(forest: Sequence[TreeNode]) -> dict[str, str | None]:
    """Return ``{id: structural parent id}``; roots map to ``None``."""
    parents: dict[str, str | None] = {}

    def walk(nodes: Sequence[TreeNode], parent_id: str | None) -> None:
        for node in nodes:
            parents[node.id] = parent_id
            if isinstance(node, BookmarkFolder):
                walk(node.children, node.id)

    walk(forest, None)
    return parents


def count_nodes(forest: Sequence[TreeNode]) -> int:
    """Count folders and bookmarks in the whole forest."""
    return sum(1 for _node in iter_nodes(forest))


def count_bookmarks(node: TreeNode) -> int:
    """Count leaf bookmarks in the subtree rooted at ``node``."""
    if isinstance(node, BookmarkLeaf):
        return 1
    return sum(count_bookmarks(child) for child in node.children)


def collect_urls(node: TreeNode) -> list[str]:
    """Return all bookmark URLs under ``node`` in pre-order."""
    return [item.url for item in iter_nodes([node]) if isinstance(item, BookmarkLeaf)]
