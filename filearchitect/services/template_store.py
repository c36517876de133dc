"""On-disk store of named templates with one-time default seeding."""

from __future__ import annotations

import logging
import math
import os
from pathlib import Path
from typing import List, Optional, Sequence, Set, Tuple

from ..common.constants import (
    DEFAULT_TEMPLATES,
    DEFAULTS_SENTINEL_FILE,
    TEMPLATE_EXTENSION,
)
from ..common.types import Template
from ..config import Config
from ..core.frontmatter import parse_template
from ..core.seeding import SeedPlan, plan_seeding
from ..utils import InvalidNameError, atomic_write, error_from_os

logger = logging.getLogger(__name__)

_FORBIDDEN_NAME_CHARS = set('/\\\x00')


def validate_template_name(name: str) -> None:
    """
    Check that a template name maps to a single file inside the store.

    Raises:
        InvalidNameError: If the name is empty, is "." or "..", or contains a
            path separator or NUL character.
    """
    if not name or not name.strip():
        raise InvalidNameError("Template name cannot be empty")
    if name in (".", ".."):
        raise InvalidNameError(f"Invalid template name: {name!r}")
    found = set(name) & _FORBIDDEN_NAME_CHARS
    if found:
        raise InvalidNameError(
            f"Template name contains forbidden characters: {sorted(found)!r}"
        )


class TemplateStore:
    """Store of text templates kept as <name>.txt files in one directory."""

    def __init__(
        self,
        directory: Optional[Path] = None,
        defaults: Sequence[Tuple[str, str]] = DEFAULT_TEMPLATES,
    ) -> None:
        """
        Args:
            directory: Store directory; defaults to the configured templates dir.
            defaults: Built-in (name, content) pairs seeded on first use.
        """
        self._directory = Path(directory) if directory is not None else None
        self.defaults = tuple(defaults)

    @property
    def directory(self) -> Path:
        if self._directory is None:
            return Config.get_instance().templates_dir
        return self._directory

    @property
    def sentinel_path(self) -> Path:
        return self.directory / DEFAULTS_SENTINEL_FILE

    def ensure_directory(self) -> Path:
        """Create the store directory if needed and return it."""
        directory = self.directory
        try:
            directory.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise error_from_os(exc, directory, "create templates directory") from exc
        return directory

    def template_path(self, name: str) -> Path:
        validate_template_name(name)
        return self.directory / f"{name}{TEMPLATE_EXTENSION}"

    def _template_files(self) -> List[Path]:
        directory = self.ensure_directory()
        try:
            with os.scandir(directory) as entries:
                return [
                    Path(entry.path)
                    for entry in entries
                    if entry.name.endswith(TEMPLATE_EXTENSION) and entry.is_file()
                ]
        except OSError as exc:
            raise error_from_os(exc, directory, "read templates directory") from exc

    def existing_names(self) -> Set[str]:
        """Base names of template files currently in the store."""
        return {path.stem for path in self._template_files()}

    # =========================================================================
    # Seeding
    # =========================================================================

    def ensure_defaults_seeded(self) -> SeedPlan:
        """
        Seed the built-in templates exactly once per store directory.

        Safe to call on every start. Once the sentinel exists nothing is
        written again, even if the user deletes default templates later.

        Returns:
            The plan that was applied.
        """
        self.ensure_directory()
        sentinel_present = self.sentinel_path.exists()
        plan = plan_seeding(
            sentinel_present,
            set() if sentinel_present else self.existing_names(),
            self.defaults,
        )
        if plan.is_noop:
            return plan

        for name, content in plan.to_write:
            self._write(self.template_path(name), content)
            logger.info("Seeded default template '%s'", name)
        if plan.write_sentinel:
            try:
                self.sentinel_path.touch()
            except OSError as exc:
                raise error_from_os(exc, self.sentinel_path, "create sentinel") from exc
            logger.info("Template store seeded at %s", self.directory)
        return plan

    # =========================================================================
    # Read / write
    # =========================================================================

    def list_templates(self) -> List[Template]:
        """
        Read every template in the store.

        Files that cannot be read or decoded as UTF-8 are skipped. Templates
        are ordered by their front matter order (unordered ones last), then
        by name.
        """
        ranked = []
        for path in self._template_files():
            try:
                with open(path, "r", encoding="utf-8", newline="") as handle:
                    content = handle.read()
            except (OSError, UnicodeDecodeError) as exc:
                logger.debug("Skipping unreadable template %s: %s", path.name, exc)
                continue
            order = parse_template(content).order
            rank = order if order is not None else math.inf
            ranked.append((rank, path.stem, Template(name=path.stem, content=content)))

        ranked.sort(key=lambda item: (item[0], item[1]))
        return [template for _, _, template in ranked]

    def get_template(self, name: str) -> Optional[Template]:
        """Return one template by name, or None if it is missing or unreadable."""
        for template in self.list_templates():
            if template.name == name:
                return template
        return None

    def save_template(self, name: str, content: str) -> Path:
        """
        Create or overwrite the template called name with exactly content.

        Returns:
            Path of the written file.
        """
        self.ensure_directory()
        path = self.template_path(name)
        self._write(path, content)
        logger.info("Saved template '%s'", name)
        return path

    def _write(self, path: Path, content: str) -> None:
        try:
            atomic_write(path, content)
        except OSError as exc:
            raise error_from_os(exc, path, "write template") from exc
