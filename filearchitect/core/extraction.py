"""Zip archive extraction into a destination tree."""

from __future__ import annotations

import contextlib
import logging
import re
import shutil
import time
import zipfile
import zlib
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Iterator, List, Optional, Union

import aiofiles

from ..common.types import ExtractionSummary
from ..utils import (
    ArchiveEntryError,
    ArchiveOpenError,
    ArchiveParseError,
    error_from_os,
    get_io_buffer_size,
)

logger = logging.getLogger(__name__)

ProgressCallback = Callable[[int, int, Optional[str]], None]
PathLike = Union[str, Path]

_DRIVE_PATTERN = re.compile(r"^[A-Za-z]:")
_SEGMENT_SPLIT = re.compile(r"[/\\]")
_SEPARATORS = ("/", "\\")
_ENTRY_READ_ERRORS = (OSError, EOFError, RuntimeError, NotImplementedError,
                      zipfile.BadZipFile, zlib.error)


@dataclass(frozen=True)
class _PlannedEntry:
    index: int
    info: zipfile.ZipInfo
    target: Path
    is_directory: bool


def _report_progress(
    callback: Optional[ProgressCallback],
    current: int,
    total: int,
    name: Optional[str],
    last_report: float,
) -> float:
    if not callback:
        return last_report
    now = time.monotonic()
    if now - last_report >= 1 or current >= total:
        callback(current, total, name)
        return now
    return last_report


def _is_within_directory(base: Path, target: Path) -> bool:
    try:
        target.relative_to(base)
        return True
    except ValueError:
        return False


def resolve_entry_path(destination_root: Path, name: str, index: int) -> Path:
    """
    Map an archive entry name onto a path below the destination root.

    Args:
        destination_root: Extraction root.
        name: Entry name as stored in the archive.
        index: Entry index, used for error reporting.

    Returns:
        Destination path of the entry.

    Raises:
        ArchiveEntryError: If the name is absolute, traverses upwards, or
            would otherwise land outside the destination root.
    """
    if not name or "\x00" in name:
        raise ArchiveEntryError(index, name, "Invalid entry name")
    if name.startswith(_SEPARATORS) or _DRIVE_PATTERN.match(name):
        raise ArchiveEntryError(index, name, "Blocked absolute path in archive")

    segments = _SEGMENT_SPLIT.split(name)
    if ".." in segments:
        raise ArchiveEntryError(index, name, "Blocked path traversal in archive")

    parts = [segment for segment in segments if segment not in ("", ".")]
    is_directory = name.endswith(_SEPARATORS)
    if not parts and not is_directory:
        raise ArchiveEntryError(index, name, "Entry name has no file component")

    target = destination_root.joinpath(*parts)
    if not _is_within_directory(destination_root.resolve(), target.resolve()):
        raise ArchiveEntryError(
            index, name, "Blocked entry resolving outside destination", target
        )
    return target


@contextlib.contextmanager
def _open_archive(archive_path: PathLike) -> Iterator[zipfile.ZipFile]:
    try:
        handle = open(archive_path, "rb")
    except OSError as exc:
        raise ArchiveOpenError(
            f"Failed to open zip file {archive_path}: {exc.strerror or exc}",
            archive_path,
        ) from exc

    with handle:
        try:
            archive = zipfile.ZipFile(handle)
        except (zipfile.BadZipFile, zipfile.LargeZipFile, EOFError, ValueError) as exc:
            raise ArchiveParseError(
                f"Failed to parse zip {archive_path}: {exc}", archive_path
            ) from exc
        except OSError as exc:
            raise ArchiveOpenError(
                f"Failed to read zip file {archive_path}: {exc.strerror or exc}",
                archive_path,
            ) from exc
        with archive:
            yield archive


def _plan_entries(archive: zipfile.ZipFile, root: Path) -> List[_PlannedEntry]:
    # Every name is validated before anything touches the disk.
    return [
        _PlannedEntry(
            index=index,
            info=info,
            target=resolve_entry_path(root, info.filename, index),
            is_directory=info.filename.endswith(_SEPARATORS),
        )
        for index, info in enumerate(archive.infolist())
    ]


def _prepare_destination(destination_root: PathLike) -> Path:
    root = Path(destination_root)
    try:
        root.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise error_from_os(exc, root, "create destination directory") from exc
    return root


def _make_directory(entry: _PlannedEntry, directory: Path) -> None:
    try:
        directory.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise ArchiveEntryError(
            entry.index,
            entry.info.filename,
            f"Failed to create directory {directory}: {exc.strerror or exc}",
            directory,
        ) from exc


def _write_failure(entry: _PlannedEntry, exc: BaseException) -> ArchiveEntryError:
    reason = exc.strerror if isinstance(exc, OSError) and exc.strerror else exc
    return ArchiveEntryError(
        entry.index,
        entry.info.filename,
        f"Failed to write to file {entry.target}: {reason}",
        entry.target,
    )


def _walk_entries(
    plan: List[_PlannedEntry], progress_callback: Optional[ProgressCallback]
) -> Iterator[_PlannedEntry]:
    """Create directories in index order, yielding each file entry for writing."""
    last_report = 0.0
    for entry in plan:
        if entry.is_directory:
            _make_directory(entry, entry.target)
        else:
            _make_directory(entry, entry.target.parent)
            yield entry
        last_report = _report_progress(
            progress_callback, entry.index + 1, len(plan), entry.info.filename, last_report
        )


def _summarize(plan: List[_PlannedEntry]) -> ExtractionSummary:
    directories = sum(1 for entry in plan if entry.is_directory)
    summary = ExtractionSummary(directories=directories, files=len(plan) - directories)
    logger.info(
        "Extraction complete: %s directories, %s files", summary.directories, summary.files
    )
    return summary


def extract_archive(
    archive_path: PathLike,
    destination_root: PathLike,
    progress_callback: Optional[ProgressCallback] = None,
) -> ExtractionSummary:
    """
    Extract every entry of a zip archive below a destination root.

    Entries are processed in stored index order. Names ending in a path
    separator only create directories. Extraction is not atomic: entries
    written before a failure stay on disk.

    Args:
        archive_path: Path to the zip archive.
        destination_root: Directory to extract into, created if missing.
        progress_callback: Optional callback(current, total, entry_name).

    Returns:
        Counts of created directories and written files.

    Raises:
        ArchiveOpenError: If the archive cannot be opened.
        ArchiveParseError: If the archive is not a valid zip file.
        ArchiveEntryError: If an entry is unsafe or cannot be written.
    """
    logger.info("Extracting %s to %s", archive_path, destination_root)
    buffer_size = get_io_buffer_size()

    with _open_archive(archive_path) as archive:
        plan = _plan_entries(archive, _prepare_destination(destination_root))
        for entry in _walk_entries(plan, progress_callback):
            try:
                with archive.open(entry.info) as source, open(entry.target, "wb") as sink:
                    shutil.copyfileobj(source, sink, buffer_size)
            except _ENTRY_READ_ERRORS as exc:
                raise _write_failure(entry, exc) from exc

    return _summarize(plan)


async def extract_archive_async(
    archive_path: PathLike,
    destination_root: PathLike,
    progress_callback: Optional[ProgressCallback] = None,
) -> ExtractionSummary:
    """
    Async variant of extract_archive writing entry content with aiofiles.

    Same ordering, validation and failure semantics; there is no cancellation
    point between entries.
    """
    logger.info("Extracting %s to %s", archive_path, destination_root)
    buffer_size = get_io_buffer_size()

    with _open_archive(archive_path) as archive:
        plan = _plan_entries(archive, _prepare_destination(destination_root))
        for entry in _walk_entries(plan, progress_callback):
            try:
                with archive.open(entry.info) as source:
                    async with aiofiles.open(entry.target, "wb") as sink:
                        while True:
                            data = source.read(buffer_size)
                            if not data:
                                break
                            await sink.write(data)
            except _ENTRY_READ_ERRORS as exc:
                raise _write_failure(entry, exc) from exc

    return _summarize(plan)
