"""Tests for the drag gesture controller."""

from __future__ import annotations

import unittest

from lazymarks.drag import DragSession, DropIndicator, MoveInstruction, Projection
from lazymarks.tree_model import BookmarkFolder, BookmarkLeaf, flatten_tree


class FakeClock:
    def __init__(self) -> None:
        self.now = 0.0

    def __call__(self) -> float:
        return self.now


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


class DragSessionTests(unittest.TestCase):
    def setUp(self) -> None:
        self.clock = FakeClock()
        self.expanded: list[str] = []
        self.entries = flatten_tree(sample_forest(), {"A"})
        self.session = DragSession(
            self.entries,
            indent_width=20,
            hover_delay=1.0,
            expand_folder=self.expanded.append,
            monotonic=self.clock,
        )

    def test_start_requires_known_entry(self) -> None:
        self.assertFalse(self.session.start("missing"))
        self.assertFalse(self.session.is_active)
        self.assertTrue(self.session.start("B"))
        self.assertEqual(self.session.over_id, "B")

    def test_projection_follows_pointer(self) -> None:
        self.session.start("B")
        self.session.over("E")
        self.session.move(25)
        self.assertEqual(self.session.projection, Projection(depth=0, min_depth=0, max_depth=0, parent_id=None))

    def test_drop_returns_reordered_snapshot_and_move(self) -> None:
        self.session.start("B")
        self.session.over("E")
        result = self.session.drop()

        self.assertIsNotNone(result)
        self.assertEqual([entry.id for entry in result.entries], ["A", "C", "E", "B"])
        self.assertEqual(result.instruction, MoveInstruction("B", None, 2))
        self.assertFalse(self.session.is_active)

    def test_drop_in_place_yields_no_move(self) -> None:
        self.session.start("B")
        result = self.session.drop()

        self.assertEqual(result.entries, self.entries)
        self.assertIsNone(result.instruction)

    def test_drop_over_nothing_is_ignored(self) -> None:
        self.session.start("B")
        self.session.over("missing")
        self.assertIsNone(self.session.over_id)
        self.assertIsNone(self.session.projection)
        self.assertIsNone(self.session.drop())

    def test_drop_indicator_side_follows_direction(self) -> None:
        self.session.start("B")
        self.session.over("E")
        self.assertEqual(self.session.drop_indicator(), DropIndicator("E", "bottom", 0))

        self.session.over("A")
        self.assertEqual(self.session.drop_indicator(), DropIndicator("A", "top", 0))

    def test_sorted_view_disables_drop(self) -> None:
        session = DragSession(self.entries, reorder_enabled=False, monotonic=self.clock)
        session.start("B")
        session.over("E")
        self.assertIsNone(session.drop_indicator())
        self.assertIsNone(session.drop())

    def test_hovering_collapsed_folder_expands_it_after_delay(self) -> None:
        self.session.start("B")
        self.session.over("C")

        self.clock.now = 0.5
        self.assertIsNone(self.session.tick())
        self.clock.now = 1.0
        self.assertEqual(self.session.tick(), "C")
        self.assertEqual(self.expanded, ["C"])

    def test_hovering_bookmark_or_open_folder_does_not_expand(self) -> None:
        self.session.start("B")
        self.session.over("E")
        self.clock.now = 2.0
        self.assertIsNone(self.session.tick())

        self.session.over("A")
        self.clock.now = 4.0
        self.assertIsNone(self.session.tick())
        self.assertEqual(self.expanded, [])

    def test_leaving_folder_before_delay_cancels_expand(self) -> None:
        self.session.start("B")
        self.session.over("C")
        self.clock.now = 0.5
        self.session.over("E")
        self.clock.now = 3.0
        self.assertIsNone(self.session.tick())
        self.assertEqual(self.expanded, [])

    def test_dragging_folder_never_expands_itself(self) -> None:
        session = DragSession(self.entries, expand_folder=self.expanded.append, monotonic=self.clock)
        session.start("C")
        self.clock.now = 5.0
        self.assertIsNone(session.tick())
        self.assertEqual(self.expanded, [])

    def test_refresh_adopts_new_snapshot(self) -> None:
        self.session.start("B")
        self.session.over("C")
        self.assertTrue(self.session.refresh(flatten_tree(sample_forest(), {"A", "C"})))
        self.session.over("D")
        self.assertEqual(self.session.over_id, "D")

    def test_refresh_without_dragged_entry_cancels(self) -> None:
        self.session.start("B")
        self.assertFalse(self.session.refresh(flatten_tree(sample_forest(), set())))
        self.assertFalse(self.session.is_active)

    def test_non_positive_indent_is_rejected(self) -> None:
        with self.assertRaises(ValueError):
            DragSession(self.entries, indent_width=0)


if __name__ == "__main__":
    unittest.main()
