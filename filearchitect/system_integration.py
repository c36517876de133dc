"""Platform-specific system integrations."""

from __future__ import annotations

import logging
import os
import subprocess
import sys
from abc import ABC, abstractmethod
from typing import List, Optional

from .utils import FileIOError, PathNotDirectoryError, PathNotFoundError

logger = logging.getLogger(__name__)


class PlatformIntegration(ABC):
    """Opens folders and reveals files in the system file browser."""

    name = "generic"

    def open_folder(self, path: str) -> None:
        """
        Open a folder in the system file browser.

        Raises:
            PathNotFoundError: If the path does not exist.
            PathNotDirectoryError: If the path is not a directory.
            FileIOError: If the file browser cannot be launched.
        """
        if not os.path.exists(path):
            raise PathNotFoundError(f"Path does not exist: {path}", path)
        if not os.path.isdir(path):
            raise PathNotDirectoryError(f"Path is not a directory: {path}", path)
        self._spawn(self.open_folder_command(path), path)

    def reveal_file(self, path: str) -> None:
        """
        Show a file selected in the system file browser.

        Raises:
            PathNotFoundError: If the path does not exist.
            FileIOError: If the file browser cannot be launched.
        """
        if not os.path.exists(path):
            raise PathNotFoundError(f"Path does not exist: {path}", path)
        self._spawn(self.reveal_file_command(path), path)

    @abstractmethod
    def open_folder_command(self, path: str) -> List[str]:
        """Command line that opens path in the file browser."""

    @abstractmethod
    def reveal_file_command(self, path: str) -> List[str]:
        """Command line that reveals path."""

    def _spawn(self, command: List[str], path: str) -> None:
        logger.info("Running %s", " ".join(command))
        try:
            subprocess.Popen(
                command,
                stdout=subprocess.DEVNULL,
                stderr=subprocess.DEVNULL,
            )
        except OSError as exc:
            raise FileIOError(
                f"Failed to launch {command[0]} for {path}: {exc.strerror or exc}", path
            ) from exc


class MacOSIntegration(PlatformIntegration):
    name = "darwin"

    def open_folder_command(self, path: str) -> List[str]:
        return ["open", path]

    def reveal_file_command(self, path: str) -> List[str]:
        return ["open", "-R", path]


class WindowsIntegration(PlatformIntegration):
    name = "windows"

    def open_folder_command(self, path: str) -> List[str]:
        return ["explorer", path]

    def reveal_file_command(self, path: str) -> List[str]:
        return ["explorer", "/select,", path]


class LinuxIntegration(PlatformIntegration):
    name = "linux"

    def open_folder_command(self, path: str) -> List[str]:
        return ["xdg-open", path]

    def reveal_file_command(self, path: str) -> List[str]:
        # xdg-open cannot select a file, so open its parent instead
        parent = os.path.dirname(os.path.abspath(path))
        return ["xdg-open", parent]


def get_platform_integration(platform: Optional[str] = None) -> PlatformIntegration:
    """
    Pick the integration for a platform string (defaults to sys.platform).
    """
    platform = platform or sys.platform
    if platform == "darwin":
        return MacOSIntegration()
    if platform.startswith("win"):
        return WindowsIntegration()
    return LinuxIntegration()
