"""Home-directory shorthand expansion and existence checks."""

import os
from pathlib import Path
from typing import Optional

from ..common.constants import HOME_SHORTHAND

_SEPARATORS = ("/", "\\")


def _home_directory() -> Optional[str]:
    home = os.path.expanduser(HOME_SHORTHAND)
    if not home or home == HOME_SHORTHAND:
        return None
    return home


def expand_path(path: str) -> str:
    """
    Expand a leading home shorthand into the home directory.

    "~" becomes the home directory and "~/rest" becomes the home directory
    joined with "rest". Anything else, including "~user", is returned as is,
    and so is every input when the home directory is unknown.

    Args:
        path: User supplied path.

    Returns:
        Best-effort expanded path.
    """
    if not path.startswith(HOME_SHORTHAND):
        return path
    home = _home_directory()
    if home is None:
        return path
    if path == HOME_SHORTHAND:
        return home
    if path[1] not in _SEPARATORS:
        return path
    remainder = path[2:].lstrip("/\\")
    if not remainder:
        return home
    return os.path.join(home, remainder)


def path_exists(path: str) -> bool:
    """Return True when the expanded path exists."""
    return Path(expand_path(path)).exists()
