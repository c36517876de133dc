"""File Architect: local file, archive and template management."""

__version__ = "0.1.0"
