from __future__ import annotations

import unittest

from lazymarks.tree_model import BookmarkFolder, BookmarkLeaf, normalize_sort_type, search_nodes, sort_forest


def dated_forest() -> list:
    return [
        BookmarkFolder(
            "f",
            "zeta folder",
            (
                BookmarkLeaf("f1", "old", "https://old.example", date_added=10),
                BookmarkLeaf("f2", "new", "https://new.example", date_added=90),
            ),
            date_added=50,
        ),
        BookmarkLeaf("a", "Apple", "https://apple.example/store", date_added=40),
        BookmarkLeaf("b", "banana", "https://fruit.example/banana", date_added=20),
    ]


class SortForestTests(unittest.TestCase):
    def test_none_keeps_stored_order(self) -> None:
        forest = dated_forest()
        self.assertEqual(sort_forest(forest, "none"), forest)

    def test_alphabetical_orders_are_case_insensitive_and_recursive(self) -> None:
        ascending = sort_forest(dated_forest(), "a-z")
        descending = sort_forest(dated_forest(), "z-a")

        self.assertEqual([node.id for node in ascending], ["a", "b", "f"])
        self.assertEqual([child.id for child in ascending[2].children], ["f2", "f1"])
        self.assertEqual([node.id for node in descending], ["f", "b", "a"])

    def test_newest_uses_latest_date_in_subtree(self) -> None:
        newest = sort_forest(dated_forest(), "newest")
        self.assertEqual([node.id for node in newest], ["f", "a", "b"])
        self.assertEqual([child.id for child in newest[0].children], ["f2", "f1"])

    def test_oldest_uses_earliest_date_in_subtree(self) -> None:
        oldest = sort_forest(dated_forest(), "oldest")
        self.assertEqual([node.id for node in oldest], ["f", "b", "a"])
        self.assertEqual([child.id for child in oldest[0].children], ["f1", "f2"])

    def test_normalize_sort_type(self) -> None:
        self.assertEqual(normalize_sort_type(" A-Z "), "a-z")
        self.assertEqual(normalize_sort_type("sideways"), "none")
        self.assertEqual(normalize_sort_type(None), "none")


class SearchTests(unittest.TestCase):
    def test_search_matches_title_or_url_case_insensitively(self) -> None:
        results = search_nodes(dated_forest(), "BANANA")
        self.assertEqual([node.id for node in results], ["b"])

        results = search_nodes(dated_forest(), "example/store")
        self.assertEqual([node.id for node in results], ["a"])

    def test_search_includes_folders_in_pre_order(self) -> None:
        results = search_nodes(dated_forest(), "e")
        self.assertEqual([node.id for node in results], ["f", "f1", "f2", "a", "b"])

    def test_empty_query_returns_nothing(self) -> None:
        self.assertEqual(search_nodes(dated_forest(), ""), [])

    def test_search_results_follow_sort_type(self) -> None:
        results = search_nodes(dated_forest(), "example", sort_type="a-z")
        self.assertEqual([node.id for node in results], ["a", "b", "f2", "f1"])


if __name__ == "__main__":
    unittest.main()
