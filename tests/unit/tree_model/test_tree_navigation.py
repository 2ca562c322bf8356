"""Tests for keyboard traversal intents and selection recovery."""

from __future__ import annotations

import unittest

from lazymarks.tree_model import (
    BookmarkFolder,
    BookmarkLeaf,
    NavigationIntent,
    activate,
    build_parent_map,
    enter_folder,
    exit_folder,
    flatten_tree,
    recover_selection,
    reveal_expanded_ids,
    step_selection,
)


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
        BookmarkFolder("F", "Foxtrot"),
    ]


class StepSelectionTests(unittest.TestCase):
    def test_step_moves_to_linear_neighbors_and_clamps(self) -> None:
        entries = flatten_tree(sample_forest(), {"A"})

        self.assertEqual(step_selection(entries, "B", 1), NavigationIntent(select="C"))
        self.assertEqual(step_selection(entries, "B", -1), NavigationIntent(select="A"))
        self.assertTrue(step_selection(entries, "A", -1).is_empty)
        self.assertTrue(step_selection(entries, "F", 1).is_empty)

    def test_step_without_selection_focuses_first_entry(self) -> None:
        entries = flatten_tree(sample_forest(), set())
        self.assertEqual(step_selection(entries, None, 1), NavigationIntent(select="A"))
        self.assertTrue(step_selection([], None, 1).is_empty)


class FolderNavigationTests(unittest.TestCase):
    def test_enter_expands_closed_folder(self) -> None:
        entries = flatten_tree(sample_forest(), {"A"})
        self.assertEqual(enter_folder(entries, "C"), NavigationIntent(toggle="C"))

    def test_enter_open_folder_selects_first_child(self) -> None:
        entries = flatten_tree(sample_forest(), {"A"})
        self.assertEqual(enter_folder(entries, "A"), NavigationIntent(select="B"))

    def test_enter_open_empty_folder_does_nothing(self) -> None:
        entries = flatten_tree(sample_forest(), {"F"})
        self.assertTrue(enter_folder(entries, "F").is_empty)

    def test_enter_on_bookmark_does_nothing(self) -> None:
        entries = flatten_tree(sample_forest(), {"A"})
        self.assertTrue(enter_folder(entries, "B").is_empty)

    def test_exit_collapses_open_folder(self) -> None:
        entries = flatten_tree(sample_forest(), {"A", "C"})
        self.assertEqual(exit_folder(entries, "C"), NavigationIntent(toggle="C"))

    def test_exit_jumps_to_parent(self) -> None:
        entries = flatten_tree(sample_forest(), {"A", "C"})
        self.assertEqual(exit_folder(entries, "D"), NavigationIntent(select="C"))
        self.assertEqual(exit_folder(entries, "B"), NavigationIntent(select="A"))
        self.assertTrue(exit_folder(entries, "E").is_empty)

    def test_activate_toggles_folders_and_opens_bookmarks(self) -> None:
        entries = flatten_tree(sample_forest(), {"A"})
        self.assertEqual(activate(entries, "A"), NavigationIntent(toggle="A"))
        self.assertEqual(activate(entries, "E"), NavigationIntent(open_url="https://echo.example/e"))
        self.assertTrue(activate(entries, "missing").is_empty)


class SelectionRecoveryTests(unittest.TestCase):
    def test_visible_selection_is_kept(self) -> None:
        forest = sample_forest()
        entries = flatten_tree(forest, {"A"})
        self.assertEqual(recover_selection(entries, "B", build_parent_map(forest)), "B")

    def test_hidden_selection_climbs_to_nearest_visible_ancestor(self) -> None:
        forest = sample_forest()
        parents = build_parent_map(forest)

        self.assertEqual(recover_selection(flatten_tree(forest, {"A"}), "D", parents), "C")
        self.assertEqual(recover_selection(flatten_tree(forest, set()), "D", parents), "A")

    def test_unknown_selection_falls_back_to_first_entry(self) -> None:
        forest = sample_forest()
        entries = flatten_tree(forest, set())
        self.assertEqual(recover_selection(entries, "gone", build_parent_map(forest)), "A")
        self.assertIsNone(recover_selection([], "gone", {}))
        self.assertIsNone(recover_selection(entries, None, {}))

    def test_reveal_opens_every_ancestor(self) -> None:
        forest = sample_forest()
        expanded = reveal_expanded_ids("D", build_parent_map(forest))
        self.assertEqual(expanded, {"D", "C", "A"})
        self.assertIn("D", [entry.id for entry in flatten_tree(forest, expanded)])


if __name__ == "__main__":
    unittest.main()
