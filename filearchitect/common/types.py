"""Type definitions and data models."""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


@dataclass(frozen=True)
class DirectoryEntry:
    """A single row of a directory listing."""
    name: str
    is_directory: bool

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {"name": self.name, "isDirectory": self.is_directory}


@dataclass(frozen=True)
class FileInfo:
    """Listing row carrying a display indent hint."""
    name: str
    indent: int
    exists: bool
    is_directory: bool

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "name": self.name,
            "indent": self.indent,
            "exists": self.exists,
            "isDirectory": self.is_directory,
        }


@dataclass
class Template:
    """A named folder/file blueprint."""
    name: str
    content: str

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {"name": self.name, "content": self.content}


@dataclass
class Replacement:
    """Search/replace rule stored in template front matter."""
    search: str
    replace: str
    in_files: bool = True
    in_folders: bool = True


@dataclass
class TemplateDocument:
    """A template split into front matter fields and body."""
    body: str
    order: Optional[int] = None
    destination_path: Optional[str] = None
    replacements: List[Replacement] = field(default_factory=list)

    @property
    def has_metadata(self) -> bool:
        return (
            self.order is not None
            or bool(self.destination_path)
            or bool(self.replacements)
        )


@dataclass(frozen=True)
class ExtractionSummary:
    """Counts of what an extraction materialized."""
    directories: int
    files: int

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {"directories": self.directories, "files": self.files}
