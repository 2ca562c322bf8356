"""Bookmark tree model: node types, flattening, search/sort, navigation, rows.

Defines ``FlatEntry`` and the pure projections from a nested forest to the
linear list used for rendering and keyboard traversal.
"""

from __future__ import annotations

from .build import (
    build_node_map,
    build_parent_map,
    collect_urls,
    count_bookmarks,
    count_nodes,
    flatten_tree,
    iter_nodes,
)
from .filtering import SORT_NONE, SORT_TYPES, normalize_sort_type, search_nodes, sort_forest
from .navigation import (
    NavigationIntent,
    activate,
    enter_folder,
    entry_index_map,
    exit_folder,
    find_entry,
    recover_selection,
    reveal_expanded_ids,
    step_selection,
)
from .rendering import format_drop_indicator, format_entry
from .types import BookmarkFolder, BookmarkLeaf, FlatEntry, TreeNode, entry_to_dict, node_from_dict, node_to_dict

__all__ = [
    "BookmarkFolder",
    "BookmarkLeaf",
    "FlatEntry",
    "TreeNode",
    "node_from_dict",
    "node_to_dict",
    "entry_to_dict",
    "flatten_tree",
    "iter_nodes",
    "build_node_map",
    "build_parent_map",
    "count_nodes",
    "count_bookmarks",
    "collect_urls",
    "SORT_NONE",
    "SORT_TYPES",
    "normalize_sort_type",
    "sort_forest",
    "search_nodes",
    "NavigationIntent",
    "entry_index_map",
    "find_entry",
    "step_selection",
    "enter_folder",
    "exit_folder",
    "activate",
    "recover_selection",
    "reveal_expanded_ids",
    "format_entry",
    "format_drop_indicator",
]
