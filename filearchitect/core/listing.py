"""Directory listing with hidden-entry filtering and canonical ordering."""

import os
from typing import List, Tuple

from ..common.constants import HIDDEN_PREFIX
from ..common.types import DirectoryEntry, FileInfo
from ..utils import PathNotDirectoryError, PathNotFoundError, error_from_os


def _sort_key(item: Tuple[str, bool]) -> Tuple[bool, str]:
    # Directories first, then plain code-point order of the name.
    name, is_directory = item
    return (not is_directory, name)


def _read_visible_entries(path: str) -> List[Tuple[str, bool]]:
    """Read (name, is_directory) pairs of non-hidden children in canonical order."""
    if not os.path.exists(path):
        raise PathNotFoundError(f"Path does not exist: {path}", path)
    if not os.path.isdir(path):
        raise PathNotDirectoryError(f"Path is not a directory: {path}", path)

    items: List[Tuple[str, bool]] = []
    try:
        with os.scandir(path) as entries:
            for entry in entries:
                if entry.name.startswith(HIDDEN_PREFIX):
                    continue
                items.append((entry.name, entry.is_dir(follow_symlinks=False)))
    except OSError as exc:
        raise error_from_os(exc, path, "read directory") from exc

    items.sort(key=_sort_key)
    return items


def list_directory_entries(path: str) -> List[DirectoryEntry]:
    """
    List immediate children of a directory.

    Args:
        path: Directory to list.

    Returns:
        Entries with directories first, each group sorted by name.

    Raises:
        PathNotFoundError: If the path does not exist.
        PathNotDirectoryError: If the path is not a directory.
    """
    return [
        DirectoryEntry(name=name, is_directory=is_directory)
        for name, is_directory in _read_visible_entries(path)
    ]


def list_directory_files(path: str) -> List[FileInfo]:
    """
    List immediate children of a directory as FileInfo rows.

    Same filtering and ordering as list_directory_entries. Rows read from disk
    always exist and carry no indent; nesting is up to the caller.
    """
    return [
        FileInfo(name=name, indent=0, exists=True, is_directory=is_directory)
        for name, is_directory in _read_visible_entries(path)
    ]
