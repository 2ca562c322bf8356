"""Tests for drop-depth projection during a drag.

Uses a 20px indentation unit and pins exact depth/parent results for the
reference forest ``A[B, C[D]], E``.
"""

from __future__ import annotations

import unittest

from lazymarks.drag import Projection, drag_depth, project_drop
from lazymarks.tree_model import BookmarkFolder, BookmarkLeaf, flatten_tree

INDENT = 20


def sample_forest() -> list:
    return [
        BookmarkFolder(
            "A",
            "Alpha",
            (
                BookmarkLeaf("B", "Bravo", "https://bravo.example/b"),
                BookmarkFolder("C", "Charlie", (BookmarkLeaf("D", "Delta", "https://delta.example/d"),)),
            ),
        ),
        BookmarkLeaf("E", "Echo", "https://echo.example/e"),
    ]


class DragDepthTests(unittest.TestCase):
    def test_rounds_half_toward_positive_infinity(self) -> None:
        self.assertEqual(drag_depth(0, INDENT), 0)
        self.assertEqual(drag_depth(25, INDENT), 1)
        self.assertEqual(drag_depth(-25, INDENT), -1)
        self.assertEqual(drag_depth(10, INDENT), 1)
        self.assertEqual(drag_depth(-10, INDENT), 0)
        self.assertEqual(drag_depth(30, INDENT), 2)
        self.assertEqual(drag_depth(-30, INDENT), -1)


class ProjectDropTests(unittest.TestCase):
    def test_bookmark_dragged_below_last_root_entry_lands_at_root(self) -> None:
        entries = flatten_tree(sample_forest(), {"A"})

        for offset in (0, 25, -25):
            with self.subTest(offset=offset):
                self.assertEqual(
                    project_drop(entries, "B", "E", offset, INDENT),
                    Projection(depth=0, min_depth=0, max_depth=0, parent_id=None),
                )

    def test_root_bookmark_dragged_above_collapsed_folder_is_pulled_into_parent(self) -> None:
        entries = flatten_tree(sample_forest(), {"A"})

        for offset in (0, 25, -25):
            with self.subTest(offset=offset):
                self.assertEqual(
                    project_drop(entries, "E", "C", offset, INDENT),
                    Projection(depth=1, min_depth=1, max_depth=1, parent_id="A"),
                )

    def test_horizontal_drag_in_place_picks_depth_and_parent(self) -> None:
        entries = flatten_tree(sample_forest(), {"A", "C"})

        self.assertEqual(
            project_drop(entries, "E", "E", 0, INDENT),
            Projection(depth=0, min_depth=0, max_depth=2, parent_id=None),
        )
        self.assertEqual(project_drop(entries, "E", "E", 25, INDENT).parent_id, "A")
        self.assertEqual(project_drop(entries, "E", "E", 25, INDENT).depth, 1)
        self.assertEqual(
            project_drop(entries, "E", "E", 45, INDENT),
            Projection(depth=2, min_depth=0, max_depth=2, parent_id="C"),
        )
        self.assertEqual(project_drop(entries, "E", "E", 500, INDENT).depth, 2)
        self.assertEqual(project_drop(entries, "E", "E", -500, INDENT).depth, 0)

    def test_next_entry_sets_the_minimum_depth(self) -> None:
        entries = flatten_tree(sample_forest(), {"A", "C"})

        projection = project_drop(entries, "C", "B", -40, INDENT)
        self.assertEqual(projection, Projection(depth=1, min_depth=1, max_depth=1, parent_id="A"))

    def test_folder_over_itself_with_open_children_stays_within_bounds(self) -> None:
        entries = flatten_tree(sample_forest(), {"A"})

        projection = project_drop(entries, "A", "A", 40, INDENT)
        self.assertEqual(projection, Projection(depth=0, min_depth=0, max_depth=0, parent_id=None))

    def test_bounds_hold_for_every_pair(self) -> None:
        entries = flatten_tree(sample_forest(), {"A", "C"})
        ids = [entry.id for entry in entries]

        for active_id in ids:
            for over_id in ids:
                for offset in (-60, -25, 0, 10, 25, 60):
                    projection = project_drop(entries, active_id, over_id, offset, INDENT)
                    with self.subTest(active=active_id, over=over_id, offset=offset):
                        self.assertGreaterEqual(projection.max_depth, 0)
                        self.assertLessEqual(projection.min_depth, projection.depth)
                        self.assertLessEqual(projection.depth, projection.max_depth)

    def test_missing_over_id_is_a_precondition_violation(self) -> None:
        entries = flatten_tree(sample_forest(), {"A"})
        with self.assertRaises(KeyError):
            project_drop(entries, "B", "missing", 0, INDENT)


if __name__ == "__main__":
    unittest.main()
