"""Tests for base-relative path translation and the case-insensitive path index."""

from __future__ import annotations

import unittest
from pathlib import Path

from favtree.favorites_model import FavoriteEntry
from favtree.path_index import FavoritePathIndex
from favtree.paths import to_absolute, to_relative

BASE = Path("/work/project")


class PathTranslationTests(unittest.TestCase):
    def test_inside_base_becomes_posix_relative(self) -> None:
        self.assertEqual(to_relative(BASE, "/work/project/src/app.py"), "src/app.py")
        self.assertEqual(to_relative(BASE, "/work/project/./src/../lib/x.py"), "lib/x.py")

    def test_unconvertible_paths_are_returned_unchanged(self) -> None:
        self.assertEqual(to_relative(BASE, "/elsewhere/app.py"), "/elsewhere/app.py")
        self.assertEqual(to_relative(BASE, "/work/project"), "/work/project")
        self.assertEqual(to_relative(BASE, "already/relative.py"), "already/relative.py")
        self.assertEqual(to_relative(None, "/work/project/a.py"), "/work/project/a.py")
        self.assertEqual(to_relative(BASE, ""), "")

    def test_to_absolute_joins_and_passes_rooted_paths_through(self) -> None:
        self.assertEqual(to_absolute(BASE, "src/app.py"), "/work/project/src/app.py")
        self.assertEqual(to_absolute(BASE, "/abs/x.py"), "/abs/x.py")
        self.assertEqual(to_absolute(None, "src/app.py"), "src/app.py")
        self.assertEqual(to_absolute(BASE, ""), "")


class PathIndexTests(unittest.TestCase):
    def test_lookups_ignore_case_and_separator_style(self) -> None:
        index = FavoritePathIndex()
        index.add("Src/App.py")
        self.assertIn("src/app.py", index)
        self.assertIn("SRC\\APP.PY", index)
        self.assertNotIn("src/other.py", index)
        self.assertNotIn(None, index)

    def test_entry_helpers_cover_nested_files(self) -> None:
        folder = FavoriteEntry(
            name="F",
            children=[FavoriteEntry.file("a.txt"), FavoriteEntry(name="G", children=[FavoriteEntry.file("b/c.txt")])],
        )
        index = FavoritePathIndex()
        index.rebuild([folder, FavoriteEntry.file("d.txt")])
        self.assertEqual(index.snapshot(), {"a.txt", "b/c.txt", "d.txt"})

        index.discard_entry(folder)
        self.assertEqual(index.snapshot(), {"d.txt"})


if __name__ == "__main__":
    unittest.main()
