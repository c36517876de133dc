"""Tests for file and directory removal."""

from __future__ import annotations

import os
import tempfile
import unittest
from pathlib import Path

from filearchitect.core.paths import path_exists
from filearchitect.core.removal import remove_file, remove_path
from filearchitect.utils import ErrorKind, FileArchitectError, PathNotFoundError


class TestRemoveFile(unittest.TestCase):
    def setUp(self) -> None:
        self.temp_dir = tempfile.TemporaryDirectory()
        self.base = Path(self.temp_dir.name)

    def tearDown(self) -> None:
        self.temp_dir.cleanup()

    def test_removes_file(self) -> None:
        target = self.base / "a.txt"
        target.write_text("x", encoding="utf-8")
        remove_file(str(target))
        self.assertFalse(target.exists())

    def test_missing_file_fails(self) -> None:
        with self.assertRaises(PathNotFoundError):
            remove_file(str(self.base / "missing.txt"))

    def test_directory_is_rejected(self) -> None:
        folder = self.base / "folder"
        folder.mkdir()
        with self.assertRaises(FileArchitectError):
            remove_file(str(folder))
        self.assertTrue(folder.exists())


class TestRemovePath(unittest.TestCase):
    def setUp(self) -> None:
        self.temp_dir = tempfile.TemporaryDirectory()
        self.base = Path(self.temp_dir.name)

    def tearDown(self) -> None:
        self.temp_dir.cleanup()

    def test_missing_path_is_success(self) -> None:
        remove_path(str(self.base / "gone"), False)
        remove_path(str(self.base / "gone" / "deeper"), True)

    def test_recursive_removes_subtree(self) -> None:
        root = self.base / "project"
        (root / "src" / "components").mkdir(parents=True)
        (root / "src" / "components" / "Button.jsx").write_text("x", encoding="utf-8")
        (root / "README.md").write_text("x", encoding="utf-8")
        remove_path(str(root), True)
        self.assertFalse(path_exists(str(root)))

    def test_non_recursive_removes_empty_directory(self) -> None:
        folder = self.base / "empty"
        folder.mkdir()
        remove_path(str(folder), False)
        self.assertFalse(folder.exists())

    def test_non_recursive_fails_on_non_empty_directory(self) -> None:
        folder = self.base / "full"
        folder.mkdir()
        (folder / "keep.txt").write_text("x", encoding="utf-8")
        with self.assertRaises(FileArchitectError) as ctx:
            remove_path(str(folder), False)
        self.assertEqual(ctx.exception.kind, ErrorKind.IO_ERROR)
        self.assertTrue((folder / "keep.txt").exists())

    def test_file_removed_regardless_of_flag(self) -> None:
        for recursive in (False, True):
            target = self.base / f"file_{recursive}.txt"
            target.write_text("x", encoding="utf-8")
            remove_path(str(target), recursive)
            self.assertFalse(target.exists())

    @unittest.skipUnless(hasattr(os, "symlink") and os.name != "nt", "symlinks required")
    def test_symlink_to_directory_removes_only_link(self) -> None:
        folder = self.base / "real"
        folder.mkdir()
        (folder / "data.txt").write_text("x", encoding="utf-8")
        link = self.base / "link"
        os.symlink(folder, link)
        remove_path(str(link), True)
        self.assertFalse(os.path.lexists(link))
        self.assertTrue((folder / "data.txt").exists())


if __name__ == "__main__":
    unittest.main()
