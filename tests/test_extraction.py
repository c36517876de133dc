"""Tests for zip extraction."""

from __future__ import annotations

import asyncio
import tempfile
import unittest
import warnings
import zipfile
from pathlib import Path
from typing import List, Tuple

from filearchitect.core.extraction import (
    extract_archive,
    extract_archive_async,
    resolve_entry_path,
)
from filearchitect.utils import (
    ArchiveEntryError,
    ArchiveOpenError,
    ArchiveParseError,
    ErrorKind,
)


def _build_zip(path: Path, entries: List[Tuple[str, str]]) -> Path:
    with warnings.catch_warnings():
        warnings.simplefilter("ignore")
        with zipfile.ZipFile(path, "w", compression=zipfile.ZIP_DEFLATED) as archive:
            for name, content in entries:
                archive.writestr(name, content)
    return path


class TestExtractArchive(unittest.TestCase):
    def setUp(self) -> None:
        self.temp_dir = tempfile.TemporaryDirectory()
        self.base = Path(self.temp_dir.name)
        self.dest = self.base / "out"

    def tearDown(self) -> None:
        self.temp_dir.cleanup()

    def test_directory_marker_and_file(self) -> None:
        archive = _build_zip(self.base / "a.zip", [("a/", ""), ("a/b.txt", "hello")])
        summary = extract_archive(archive, self.dest)
        self.assertTrue((self.dest / "a").is_dir())
        self.assertEqual((self.dest / "a" / "b.txt").read_bytes(), b"hello")
        self.assertEqual((summary.directories, summary.files), (1, 1))

    def test_backslash_directory_marker(self) -> None:
        archive = _build_zip(self.base / "win.zip", [("a\\", ""), ("a\\b.txt", "hello")])
        summary = extract_archive(archive, self.dest)
        self.assertTrue((self.dest / "a").is_dir())
        self.assertEqual((self.dest / "a" / "b.txt").read_bytes(), b"hello")
        self.assertEqual((summary.directories, summary.files), (1, 1))

    def test_creates_missing_parents_and_destination(self) -> None:
        archive = _build_zip(self.base / "n.zip", [("x/y/z.txt", "deep")])
        dest = self.base / "not" / "yet" / "there"
        extract_archive(str(archive), str(dest))
        self.assertEqual((dest / "x" / "y" / "z.txt").read_text(encoding="utf-8"), "deep")

    def test_entries_written_in_index_order(self) -> None:
        archive = _build_zip(
            self.base / "dup.zip", [("same.txt", "first"), ("same.txt", "second")]
        )
        extract_archive(archive, self.dest)
        self.assertEqual((self.dest / "same.txt").read_text(encoding="utf-8"), "second")

    def test_existing_directories_are_reused(self) -> None:
        (self.dest / "a").mkdir(parents=True)
        archive = _build_zip(self.base / "a.zip", [("a/", ""), ("a/b.txt", "hello")])
        extract_archive(archive, self.dest)
        extract_archive(archive, self.dest)
        self.assertEqual((self.dest / "a" / "b.txt").read_text(encoding="utf-8"), "hello")

    def test_binary_content_is_copied_exactly(self) -> None:
        payload = bytes(range(256)) * 64
        archive = self.base / "bin.zip"
        with zipfile.ZipFile(archive, "w", compression=zipfile.ZIP_DEFLATED) as zf:
            zf.writestr("data.bin", payload)
        extract_archive(archive, self.dest)
        self.assertEqual((self.dest / "data.bin").read_bytes(), payload)

    def test_parent_traversal_is_rejected_before_writing(self) -> None:
        archive = _build_zip(self.base / "evil.zip", [("ok.txt", "ok"), ("../evil.txt", "x")])
        with self.assertRaises(ArchiveEntryError) as ctx:
            extract_archive(archive, self.dest)
        self.assertEqual(ctx.exception.index, 1)
        self.assertEqual(ctx.exception.kind, ErrorKind.ARCHIVE_ENTRY_ERROR)
        self.assertFalse((self.base / "evil.txt").exists())
        self.assertFalse((self.dest / "ok.txt").exists())

    def test_absolute_entry_is_rejected(self) -> None:
        archive = _build_zip(self.base / "abs.zip", [("/tmp/owned.txt", "x")])
        with self.assertRaises(ArchiveEntryError) as ctx:
            extract_archive(archive, self.dest)
        self.assertEqual(ctx.exception.index, 0)

    def test_backslash_traversal_is_rejected(self) -> None:
        archive = _build_zip(self.base / "bs.zip", [("a\\..\\..\\evil.txt", "x")])
        with self.assertRaises(ArchiveEntryError):
            extract_archive(archive, self.dest)

    def test_missing_archive_is_open_error(self) -> None:
        with self.assertRaises(ArchiveOpenError):
            extract_archive(self.base / "missing.zip", self.dest)

    def test_malformed_archive_is_parse_error(self) -> None:
        bogus = self.base / "bogus.zip"
        bogus.write_bytes(b"this is not a zip file at all")
        with self.assertRaises(ArchiveParseError):
            extract_archive(bogus, self.dest)

    def test_entry_failure_keeps_earlier_entries(self) -> None:
        self.dest.mkdir()
        (self.dest / "blocker").write_text("file in the way", encoding="utf-8")
        archive = _build_zip(
            self.base / "partial.zip",
            [("first.txt", "1"), ("blocker/inner.txt", "2"), ("last.txt", "3")],
        )
        with self.assertRaises(ArchiveEntryError) as ctx:
            extract_archive(archive, self.dest)
        self.assertEqual(ctx.exception.index, 1)
        self.assertIn("Entry 1", str(ctx.exception))
        self.assertTrue((self.dest / "first.txt").exists())
        self.assertFalse((self.dest / "last.txt").exists())

    def test_progress_reports_completion(self) -> None:
        archive = _build_zip(self.base / "p.zip", [("a/", ""), ("a/1.txt", "1"), ("2.txt", "2")])
        calls = []
        extract_archive(archive, self.dest, lambda cur, total, name: calls.append((cur, total, name)))
        self.assertEqual(calls[-1], (3, 3, "2.txt"))


class TestExtractArchiveAsync(unittest.TestCase):
    def test_async_matches_sync_result(self) -> None:
        with tempfile.TemporaryDirectory() as temp_dir:
            base = Path(temp_dir)
            archive = _build_zip(base / "a.zip", [("a/", ""), ("a/b.txt", "hello")])
            summary = asyncio.run(extract_archive_async(archive, base / "out"))
            self.assertTrue((base / "out" / "a").is_dir())
            self.assertEqual((base / "out" / "a" / "b.txt").read_text(encoding="utf-8"), "hello")
            self.assertEqual((summary.directories, summary.files), (1, 1))

    def test_async_backslash_directory_marker_and_progress(self) -> None:
        with tempfile.TemporaryDirectory() as temp_dir:
            base = Path(temp_dir)
            archive = _build_zip(base / "win.zip", [("a\\", ""), ("a\\b.txt", "hello")])
            calls = []
            summary = asyncio.run(
                extract_archive_async(
                    archive, base / "out", lambda cur, total, name: calls.append((cur, total, name))
                )
            )
            self.assertEqual((base / "out" / "a" / "b.txt").read_text(encoding="utf-8"), "hello")
            self.assertEqual((summary.directories, summary.files), (1, 1))
            self.assertEqual(calls[-1], (2, 2, "a\\b.txt"))

    def test_async_rejects_traversal(self) -> None:
        with tempfile.TemporaryDirectory() as temp_dir:
            base = Path(temp_dir)
            archive = _build_zip(base / "evil.zip", [("../../evil.txt", "x")])
            with self.assertRaises(ArchiveEntryError):
                asyncio.run(extract_archive_async(archive, base / "out"))


class TestResolveEntryPath(unittest.TestCase):
    def setUp(self) -> None:
        self.temp_dir = tempfile.TemporaryDirectory()
        self.root = Path(self.temp_dir.name)

    def tearDown(self) -> None:
        self.temp_dir.cleanup()

    def test_nested_name(self) -> None:
        self.assertEqual(
            resolve_entry_path(self.root, "a/b/c.txt", 0), self.root / "a" / "b" / "c.txt"
        )

    def test_trailing_backslash_is_a_directory_name(self) -> None:
        self.assertEqual(resolve_entry_path(self.root, "a\\", 0), self.root / "a")

    def test_dot_segments_are_dropped(self) -> None:
        self.assertEqual(resolve_entry_path(self.root, "./a/./b.txt", 0), self.root / "a" / "b.txt")

    def test_rejected_names(self) -> None:
        for index, name in enumerate(["", "../x", "a/../../x", "/abs", "\\abs", "C:/x", "C:x", "."]):
            with self.subTest(name=name):
                with self.assertRaises(ArchiveEntryError) as ctx:
                    resolve_entry_path(self.root, name, index)
                self.assertEqual(ctx.exception.index, index)


if __name__ == "__main__":
    unittest.main()
