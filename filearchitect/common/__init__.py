"""Common constants, data models and logging."""

from .constants import DEFAULT_TEMPLATES, DEFAULTS_SENTINEL_FILE, TEMPLATE_EXTENSION
from .types import DirectoryEntry, ExtractionSummary, FileInfo, Template, TemplateDocument
from .logging import setup_logging

__all__ = [
    "DEFAULT_TEMPLATES",
    "DEFAULTS_SENTINEL_FILE",
    "TEMPLATE_EXTENSION",
    "DirectoryEntry",
    "ExtractionSummary",
    "FileInfo",
    "Template",
    "TemplateDocument",
    "setup_logging",
]
