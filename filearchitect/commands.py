"""Command surface invoked by the desktop shell.

Every command returns a CommandResult instead of raising, so the caller always
receives plain data: a value on success, or an error kind plus a descriptive
message on failure.
"""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional

from .common.types import ExtractionSummary
from .core import extraction, listing, paths, removal
from .core.extraction import ProgressCallback
from .services.template_store import TemplateStore
from .system_integration import PlatformIntegration, get_platform_integration
from .utils import ErrorKind, FileArchitectError

logger = logging.getLogger(__name__)


@dataclass
class CommandResult:
    """Outcome of a single command."""
    ok: bool
    value: Any = None
    error: Optional[str] = None
    kind: Optional[ErrorKind] = None

    @classmethod
    def success(cls, value: Any = None) -> "CommandResult":
        return cls(ok=True, value=value)

    @classmethod
    def failure(cls, exc: FileArchitectError) -> "CommandResult":
        return cls(ok=False, error=exc.describe(), kind=exc.kind)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary, serialising model values."""
        if not self.ok:
            return {"ok": False, "error": self.error, "kind": self.kind.value}
        return {"ok": True, "value": _serialise(self.value)}


def _serialise(value: Any) -> Any:
    if isinstance(value, list):
        return [_serialise(item) for item in value]
    if hasattr(value, "to_dict"):
        return value.to_dict()
    return value


def _run(action: str, func: Callable[[], Any]) -> CommandResult:
    try:
        return CommandResult.success(func())
    except FileArchitectError as exc:
        logger.warning("%s failed [%s]: %s", action, exc.kind.value, exc.describe())
        return CommandResult.failure(exc)


class CommandSurface:
    """Entry points exposed to the desktop shell."""

    def __init__(
        self,
        store: Optional[TemplateStore] = None,
        integration: Optional[PlatformIntegration] = None,
    ) -> None:
        self.store = store or TemplateStore()
        self.integration = integration or get_platform_integration()

    # Paths

    def expand_path(self, path: str) -> CommandResult:
        return CommandResult.success(paths.expand_path(path))

    def path_exists(self, path: str) -> CommandResult:
        return CommandResult.success(paths.path_exists(path))

    def list_directory_entries(self, path: str) -> CommandResult:
        return _run("list_directory_entries", lambda: listing.list_directory_entries(path))

    def list_directory_files(self, path: str) -> CommandResult:
        return _run("list_directory_files", lambda: listing.list_directory_files(path))

    def remove_file(self, path: str) -> CommandResult:
        return _run("remove_file", lambda: removal.remove_file(path))

    def remove_path(self, path: str, recursive: bool = False) -> CommandResult:
        return _run("remove_path", lambda: removal.remove_path(path, recursive))

    # Archives

    def extract_archive(
        self,
        archive_path: str,
        destination_path: str,
        progress_callback: Optional[ProgressCallback] = None,
    ) -> CommandResult:
        return _run(
            "extract_archive",
            lambda: extraction.extract_archive(archive_path, destination_path, progress_callback),
        )

    # Templates

    def list_templates(self) -> CommandResult:
        return _run("list_templates", self.store.list_templates)

    def save_template(self, name: str, content: str) -> CommandResult:
        def _save() -> None:
            self.store.save_template(name, content)

        return _run("save_template", _save)

    def initialize_app(self) -> CommandResult:
        """Startup hook: seed default templates once."""
        def _seed() -> None:
            self.store.ensure_defaults_seeded()

        return _run("initialize_app", _seed)

    # OS shell

    def open_folder(self, path: str) -> CommandResult:
        return _run("open_folder", lambda: self.integration.open_folder(path))

    def reveal_file(self, path: str) -> CommandResult:
        return _run("reveal_file", lambda: self.integration.reveal_file(path))

    # Async wrappers keep the caller's event loop responsive; no cancellation.

    async def extract_archive_async(
        self,
        archive_path: str,
        destination_path: str,
        progress_callback: Optional[ProgressCallback] = None,
    ) -> CommandResult:
        try:
            summary: ExtractionSummary = await extraction.extract_archive_async(
                archive_path, destination_path, progress_callback
            )
        except FileArchitectError as exc:
            logger.warning("extract_archive failed [%s]: %s", exc.kind.value, exc.describe())
            return CommandResult.failure(exc)
        return CommandResult.success(summary)

    async def remove_path_async(self, path: str, recursive: bool = False) -> CommandResult:
        return await asyncio.to_thread(self.remove_path, path, recursive)

    async def initialize_app_async(self) -> CommandResult:
        return await asyncio.to_thread(self.initialize_app)
