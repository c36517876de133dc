"""File and directory removal."""

import logging
import os
import shutil

from ..utils import error_from_os

logger = logging.getLogger(__name__)


def remove_file(path: str) -> None:
    """
    Remove exactly one file.

    Args:
        path: File to delete.

    Raises:
        FileArchitectError: If the file is missing or cannot be removed.
    """
    try:
        os.remove(path)
    except OSError as exc:
        raise error_from_os(exc, path, "remove file") from exc
    logger.debug("Removed file %s", path)


def remove_path(path: str, recursive: bool = False) -> None:
    """
    Remove a file or directory, treating a missing target as success.

    Args:
        path: Target path.
        recursive: Remove directory contents as well.

    Raises:
        FileArchitectError: If removal fails for any reason other than the
            target already being gone.
    """
    if not os.path.lexists(path):
        logger.debug("Nothing to remove at %s", path)
        return

    is_directory = os.path.isdir(path) and not os.path.islink(path)
    try:
        if is_directory and recursive:
            shutil.rmtree(path)
        elif is_directory:
            os.rmdir(path)
        else:
            os.remove(path)
    except FileNotFoundError:
        logger.debug("%s disappeared before removal", path)
        return
    except OSError as exc:
        raise error_from_os(exc, path, "remove path") from exc
    logger.info("Removed %s%s", path, " (recursive)" if is_directory and recursive else "")
