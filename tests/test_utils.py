"""Tests for utility helpers."""

from __future__ import annotations

import errno
import os
import tempfile
import unittest
from pathlib import Path
from unittest import mock

from filearchitect.utils import (
    DEFAULT_IO_BUFFER_SIZE,
    ErrorKind,
    atomic_write,
    error_from_os,
    get_io_buffer_size,
)


class TestErrorFromOs(unittest.TestCase):
    def test_kind_mapping(self) -> None:
        cases = [
            (FileNotFoundError(errno.ENOENT, "No such file"), ErrorKind.NOT_FOUND),
            (NotADirectoryError(errno.ENOTDIR, "Not a directory"), ErrorKind.NOT_A_DIRECTORY),
            (PermissionError(errno.EACCES, "Permission denied"), ErrorKind.PERMISSION_DENIED),
            (OSError(errno.ENOTEMPTY, "Directory not empty"), ErrorKind.IO_ERROR),
        ]
        for exc, kind in cases:
            with self.subTest(kind=kind):
                error = error_from_os(exc, "/some/path", "remove path")
                self.assertEqual(error.kind, kind)
                self.assertEqual(error.path, "/some/path")
                self.assertIn("Failed to remove path /some/path", error.describe())


class TestIoBufferSize(unittest.TestCase):
    def test_values(self) -> None:
        for raw, expected in (("", DEFAULT_IO_BUFFER_SIZE), ("4096", 4096),
                              ("abc", DEFAULT_IO_BUFFER_SIZE), ("-1", DEFAULT_IO_BUFFER_SIZE)):
            with self.subTest(raw=raw):
                with mock.patch.dict(os.environ, {"IO_BUFFER_SIZE": raw}):
                    self.assertEqual(get_io_buffer_size(), expected)


class TestAtomicWrite(unittest.TestCase):
    def test_writes_and_leaves_no_temp_file(self) -> None:
        with tempfile.TemporaryDirectory() as temp_dir:
            target = Path(temp_dir) / "sub" / "t.txt"
            atomic_write(target, "a\r\nb")
            atomic_write(target, "c\nd")
            self.assertEqual(target.read_bytes(), b"c\nd")
            self.assertEqual(os.listdir(target.parent), ["t.txt"])


if __name__ == "__main__":
    unittest.main()
