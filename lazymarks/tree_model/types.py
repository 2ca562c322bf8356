"""Bookmark node and flattened-entry datatypes used across tree modules."""

from __future__ import annotations

import math
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class BookmarkLeaf:
    """A bookmark with a URL; never has children."""

    id: str
    title: str
    url: str
    date_added: int | None = None


@dataclass(frozen=True)
class BookmarkFolder:
    """A folder; may be empty and never carries a URL."""

    id: str
    title: str
    children: tuple[TreeNode, ...] = ()
    date_added: int | None = None


TreeNode = Union[BookmarkFolder, BookmarkLeaf]


@dataclass(frozen=True)
class FlatEntry:
    """One visible node projected into the linear, depth-annotated list."""

    id: str
    parent_id: str | None
    depth: int
    index: int
    is_folder: bool
    collapsed: bool = False
    title: str = ""
    url: str | None = None
    child_count: int = 0
    date_added: int | None = None


def _optional_int(value: object) -> int | None:
    """Timestamp as int; booleans, non-numbers and NaN/infinity become ``None``."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    if not math.isfinite(value):
        return None
    return int(value)


def node_from_dict(data: Mapping[str, object]) -> TreeNode:
    """Build a node from a plain mapping.

    A mapping with a missing or empty ``url`` is a folder, including ones
    without ``children``. Children listed on a mapping that has a URL are
    ignored.
    """
    node_id = str(data["id"])
    title = str(data.get("title") or "")
    date_added = _optional_int(data.get("dateAdded", data.get("date_added")))
    url = data.get("url")
    if url:
        return BookmarkLeaf(node_id, title, str(url), date_added=date_added)

    raw_children = data.get("children")
    children: tuple[TreeNode, ...] = ()
    if isinstance(raw_children, (list, tuple)):
        children = tuple(node_from_dict(child) for child in raw_children)
    return BookmarkFolder(node_id, title, children, date_added=date_added)


def node_to_dict(node: TreeNode) -> dict[str, object]:
    """Serialize ``node`` back into the mapping shape read by ``node_from_dict``."""
    data: dict[str, object] = {"id": node.id, "title": node.title}
    if node.date_added is not None:
        data["dateAdded"] = node.date_added
    if isinstance(node, BookmarkLeaf):
        data["url"] = node.url
    else:
        data["children"] = [node_to_dict(child) for child in node.children]
    return data


def entry_to_dict(entry: FlatEntry) -> dict[str, object]:
    """Serialize a flattened entry for JSON output."""
    return {
        "id": entry.id,
        "parentId": entry.parent_id,
        "depth": entry.depth,
        "index": entry.index,
        "isFolder": entry.is_folder,
        "collapsed": entry.collapsed,
        "title": entry.title,
        "url": entry.url,
        "childCount": entry.child_count,
    }
