"""Configuration management for File Architect."""

from __future__ import annotations

import logging
import os
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import ClassVar, Optional

from dotenv import load_dotenv

from .common.constants import DEFAULT_PRODUCT_NAME, TEMPLATES_SUBDIR
from .utils import ConfigError

ENV_DOCUMENTS_DIR = "FILEARCHITECT_DOCUMENTS_DIR"
ENV_PRODUCT_NAME = "FILEARCHITECT_PRODUCT_NAME"
ENV_LOG_LEVEL = "FILEARCHITECT_LOG_LEVEL"
ENV_XDG_DOCUMENTS = "XDG_DOCUMENTS_DIR"


def _base_dir() -> Path:
    return Path(__file__).resolve().parents[1]


def _env_path() -> Path:
    return _base_dir() / ".env"


def default_documents_dir() -> Path:
    """
    Locate the platform documents directory.

    Returns:
        Path of the user's documents folder.

    Raises:
        ConfigError: If the home directory cannot be determined.
    """
    if sys.platform.startswith("linux"):
        xdg_documents = os.getenv(ENV_XDG_DOCUMENTS, "").strip()
        if xdg_documents:
            documents = Path(os.path.expanduser(os.path.expandvars(xdg_documents)))
            if documents.is_absolute():
                return documents
    try:
        home = Path.home()
    except RuntimeError as exc:
        raise ConfigError("Could not find documents directory") from exc
    return home / "Documents"


def _parse_log_level(value: str) -> int:
    level = logging.getLevelName(value.strip().upper())
    if not isinstance(level, int):
        raise ConfigError(f"Invalid log level for {ENV_LOG_LEVEL}: {value}")
    return level


def _parse_product_name(value: str) -> str:
    name = value.strip()
    if not name or any(sep in name for sep in ("/", "\\")) or name in (".", ".."):
        raise ConfigError(f"Invalid product name for {ENV_PRODUCT_NAME}: {value!r}")
    return name


@dataclass(frozen=True)
class Config:
    """Singleton configuration object."""

    documents_dir: Path
    product_name: str
    log_level: int

    _instance: ClassVar[Optional["Config"]] = None

    @property
    def templates_dir(self) -> Path:
        """Directory holding template files and the seeding sentinel."""
        return self.documents_dir / self.product_name / TEMPLATES_SUBDIR

    @classmethod
    def get_instance(cls) -> "Config":
        """
        Retrieve a singleton instance of Config.

        Returns:
            Config singleton instance.
        """
        if cls._instance is None:
            cls._instance = load_config()
        return cls._instance

    @classmethod
    def reset_instance(cls) -> None:
        """Drop the cached instance so the next access reloads settings."""
        cls._instance = None


def load_config() -> Config:
    """
    Load and validate configuration from the environment and .env file.

    Returns:
        Config instance.
    """
    env_file = _env_path()
    if env_file.exists():
        load_dotenv(env_file)

    documents_override = os.getenv(ENV_DOCUMENTS_DIR, "").strip()
    product_name = os.getenv(ENV_PRODUCT_NAME, DEFAULT_PRODUCT_NAME)
    log_level = os.getenv(ENV_LOG_LEVEL, "INFO")

    if documents_override:
        documents_dir = Path(os.path.expanduser(documents_override))
    else:
        documents_dir = default_documents_dir()

    return Config(
        documents_dir=documents_dir,
        product_name=_parse_product_name(product_name),
        log_level=_parse_log_level(log_level),
    )
