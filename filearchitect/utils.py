"""Shared utilities and the error model for File Architect."""

from __future__ import annotations

import errno
import os
from enum import Enum
from pathlib import Path
from typing import Optional, Union


class ErrorKind(str, Enum):
    """Closed set of failure kinds surfaced to callers."""

    NOT_FOUND = "NotFound"
    NOT_A_DIRECTORY = "NotADirectory"
    PERMISSION_DENIED = "PermissionDenied"
    IO_ERROR = "IOError"
    ARCHIVE_OPEN_ERROR = "ArchiveOpenError"
    ARCHIVE_PARSE_ERROR = "ArchiveParseError"
    ARCHIVE_ENTRY_ERROR = "ArchiveEntryError"
    INVALID_NAME = "InvalidName"
    CONFIG_ERROR = "ConfigError"


class FileArchitectError(Exception):
    """Base exception for File Architect errors."""

    kind: ErrorKind = ErrorKind.IO_ERROR

    def __init__(self, message: str, path: Optional[Union[str, Path]] = None) -> None:
        self.message = message
        self.path = str(path) if path is not None else None
        super().__init__(message)

    def describe(self) -> str:
        """Human readable text used at the command boundary."""
        return self.message


class PathNotFoundError(FileArchitectError):
    """Raised when a path does not exist."""

    kind = ErrorKind.NOT_FOUND


class PathNotDirectoryError(FileArchitectError):
    """Raised when a directory was expected."""

    kind = ErrorKind.NOT_A_DIRECTORY


class AccessDeniedError(FileArchitectError):
    """Raised when the OS refuses access to a path."""

    kind = ErrorKind.PERMISSION_DENIED


class FileIOError(FileArchitectError):
    """Raised for generic read/write/create failures."""

    kind = ErrorKind.IO_ERROR


class ArchiveOpenError(FileArchitectError):
    """Raised when an archive file cannot be opened."""

    kind = ErrorKind.ARCHIVE_OPEN_ERROR


class ArchiveParseError(FileArchitectError):
    """Raised when an archive container is malformed."""

    kind = ErrorKind.ARCHIVE_PARSE_ERROR


class ArchiveEntryError(FileArchitectError):
    """Raised when a single archive entry cannot be materialized."""

    kind = ErrorKind.ARCHIVE_ENTRY_ERROR

    def __init__(
        self,
        index: int,
        entry_name: str,
        message: str,
        path: Optional[Union[str, Path]] = None,
    ) -> None:
        self.index = index
        self.entry_name = entry_name
        super().__init__(f"Entry {index} ({entry_name}): {message}", path)


class InvalidNameError(FileArchitectError):
    """Raised when a template name cannot be mapped to a file."""

    kind = ErrorKind.INVALID_NAME


class ConfigError(FileArchitectError):
    """Raised when configuration is invalid or missing."""

    kind = ErrorKind.CONFIG_ERROR


DEFAULT_IO_BUFFER_SIZE = 8 * 1024 * 1024


def error_from_os(
    exc: OSError, path: Union[str, Path], action: str
) -> FileArchitectError:
    """
    Translate an OSError into the matching FileArchitectError.

    Args:
        exc: Original OS error.
        path: Path the operation targeted.
        action: Short verb phrase, e.g. "remove file".

    Returns:
        Error instance ready to be raised.
    """
    reason = exc.strerror or str(exc)
    message = f"Failed to {action} {path}: {reason}"
    if isinstance(exc, FileNotFoundError):
        return PathNotFoundError(message, path)
    if isinstance(exc, NotADirectoryError):
        return PathNotDirectoryError(message, path)
    if isinstance(exc, PermissionError) or exc.errno in (errno.EACCES, errno.EPERM):
        return AccessDeniedError(message, path)
    return FileIOError(message, path)


def get_io_buffer_size() -> int:
    """
    Read the IO buffer size from the environment.

    Returns:
        Buffer size in bytes.
    """
    value = os.getenv("IO_BUFFER_SIZE", "").strip()
    if not value:
        return DEFAULT_IO_BUFFER_SIZE
    try:
        parsed = int(value)
    except ValueError:
        return DEFAULT_IO_BUFFER_SIZE
    if parsed <= 0:
        return DEFAULT_IO_BUFFER_SIZE
    return parsed


def atomic_write(path: Path, data: str, newline: Optional[str] = "") -> None:
    """
    Write text atomically to a file.

    Args:
        path: Destination path.
        data: Text to write.
        newline: Newline translation passed to open(); "" keeps data verbatim.
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    temp_path = path.with_name(f".{path.name}.{os.getpid()}.tmp")
    try:
        with open(temp_path, "w", encoding="utf-8", newline=newline) as file_handle:
            file_handle.write(data)
            file_handle.flush()
            os.fsync(file_handle.fileno())
        temp_path.replace(path)
    except OSError:
        temp_path.unlink(missing_ok=True)
        raise
