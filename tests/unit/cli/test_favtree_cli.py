"""CLI dispatch tests.

Runs ``favtree.cli.main`` against a temporary workspace and checks both the
printed output and the resulting ``favorites.json``.
"""

from __future__ import annotations

import io
import json
import os
import tempfile
import unittest
from pathlib import Path
from unittest import mock

from favtree import cli


class CliTestCase(unittest.TestCase):
    def setUp(self) -> None:
        tmp = tempfile.TemporaryDirectory()
        self.addCleanup(tmp.cleanup)
        self.root = Path(tmp.name).resolve()
        self.marker = self.root / "project.sln"
        self.marker.write_text("", encoding="utf-8")
        config_patch = mock.patch("favtree.config.CONFIG_PATH", self.root / "user" / "config.json")
        config_patch.start()
        self.addCleanup(config_patch.stop)

    def run_cli(self, *argv: str) -> str:
        stdout = io.StringIO()
        with mock.patch("sys.stdout", stdout):
            cli.main(["--workspace", str(self.marker), "--no-color", *argv])
        return stdout.getvalue()

    def saved_items(self) -> list[dict]:
        return json.loads((self.root / "favorites.json").read_text(encoding="utf-8"))["items"]


class CliCommandTests(CliTestCase):
    def test_empty_workspace_lists_placeholder(self) -> None:
        self.assertEqual(self.run_cli(), "(no favorites)\n")

    def test_add_mkdir_mv_and_list(self) -> None:
        (self.root / "readme.txt").write_text("hi\n", encoding="utf-8")
        self.run_cli("mkdir", "Utils")
        output = self.run_cli("add", str(self.root / "readme.txt"), str(self.root / "main.cs"), "--folder", "utils")
        self.assertEqual(output, "added: readme.txt\nadded: main.cs\n")

        self.run_cli("mv", "Utils/main.cs")

        self.assertEqual(self.run_cli("list"), "▾ Utils/\n    readme.txt\n  main.cs\n")
        self.assertEqual(
            self.saved_items(),
            [
                {"name": "Utils", "children": [{"name": "readme.txt", "path": "readme.txt"}]},
                {"name": "main.cs", "path": "main.cs"},
            ],
        )

    def test_duplicate_and_directory_adds_are_reported(self) -> None:
        (self.root / "sub").mkdir()
        self.run_cli("add", str(self.root / "a.txt"))
        output = self.run_cli("add", str(self.root / "A.TXT"), str(self.root / "sub"))
        self.assertEqual(output, f"already a favorite: {self.root / 'A.TXT'}\nskipped directory: {self.root / 'sub'}\n")

    def test_add_resolves_relative_arguments_against_cwd(self) -> None:
        previous_cwd = Path.cwd()
        try:
            os.chdir(self.root)
            output = self.run_cli("add", "notes.md")
        finally:
            os.chdir(previous_cwd)
        self.assertEqual(output, "added: notes.md\n")

    def test_rename_rm_and_status(self) -> None:
        self.run_cli("mkdir", "Old")
        self.run_cli("mkdir", "Inner", "--parent", "Old")
        self.run_cli("add", str(self.root / "x.py"), "--folder", "Old/Inner")
        self.run_cli("rename", "Old", "New")
        self.assertEqual(self.saved_items()[0]["name"], "New")

        self.assertEqual(self.run_cli("status", str(self.root / "x.py")), f"{self.root / 'x.py'}: favorited\n")
        self.run_cli("rm", "new/inner")
        self.assertEqual(self.run_cli("status", str(self.root / "x.py")), f"{self.root / 'x.py'}: not favorited\n")
        self.assertEqual(self.saved_items(), [{"name": "New", "children": []}])

    def test_entry_paths_tolerate_spaces_around_separators(self) -> None:
        self.run_cli("mkdir", "Docs")
        self.run_cli("add", str(self.root / "readme.md"), "--folder", " Docs ")
        self.run_cli("add", str(self.root / "notes.md"), "--folder", "Docs")

        self.run_cli("rm", "Docs / readme.md")
        self.run_cli("mv", " docs \\ notes.md ")

        self.assertEqual(
            self.saved_items(),
            [{"name": "Docs", "children": []}, {"name": "notes.md", "path": "notes.md"}],
        )

    def test_absolute_listing_shows_openable_paths(self) -> None:
        self.run_cli("add", str(self.root / "pkg" / "mod.py"))
        self.assertEqual(self.run_cli("list", "--absolute"), f"  mod.py  {self.root / 'pkg' / 'mod.py'}\n")

    def test_hide_and_show_persist_visibility(self) -> None:
        self.run_cli("add", str(self.root / "a.txt"))
        self.run_cli("hide")
        self.assertIn("favorites hidden", self.run_cli())
        self.run_cli("show")
        self.assertEqual(self.run_cli(), "  a.txt\n")

    def test_package_main_forwards_to_cli(self) -> None:
        import favtree

        with mock.patch("favtree.cli.main") as cli_main:
            favtree.main(["list"])
        cli_main.assert_called_once_with(["list"])


class CliErrorTests(CliTestCase):
    def test_unknown_entry_exits_with_message(self) -> None:
        with self.assertRaises(SystemExit) as raised:
            self.run_cli("rm", "Nope")
        self.assertEqual(str(raised.exception), "No favorite named: Nope")

    def test_file_is_not_a_folder_target(self) -> None:
        self.run_cli("add", str(self.root / "a.txt"))
        with self.assertRaises(SystemExit) as raised:
            self.run_cli("mkdir", "X", "--parent", "a.txt")
        self.assertEqual(str(raised.exception), "Not a favorites folder: a.txt")

    def test_cyclic_move_is_refused(self) -> None:
        self.run_cli("mkdir", "Top")
        self.run_cli("mkdir", "Child", "--parent", "Top")
        with self.assertRaises(SystemExit) as raised:
            self.run_cli("mv", "Top", "--to", "Top/Child")
        self.assertIn("Cannot move a folder", str(raised.exception))

    def test_missing_workspace_marker_exits(self) -> None:
        with self.assertRaises(SystemExit) as raised:
            cli.main(["--workspace", str(self.root / "missing.sln"), "list"])
        self.assertIn("Workspace marker not found", str(raised.exception))

    def test_blank_folder_name_is_rejected_by_parser(self) -> None:
        with mock.patch("sys.stderr", io.StringIO()), self.assertRaises(SystemExit) as raised:
            self.run_cli("mkdir", "   ")
        self.assertEqual(raised.exception.code, 2)


if __name__ == "__main__":
    unittest.main()
