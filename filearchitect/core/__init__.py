"""Core file, archive and template logic (no I/O policy, no UI)."""

from .paths import expand_path, path_exists
from .listing import list_directory_entries, list_directory_files
from .removal import remove_file, remove_path
from .extraction import extract_archive, extract_archive_async, resolve_entry_path
from .seeding import SeedPlan, SeedState, plan_seeding
from .frontmatter import compose_template, parse_template

__all__ = [
    "expand_path",
    "path_exists",
    "list_directory_entries",
    "list_directory_files",
    "remove_file",
    "remove_path",
    "extract_archive",
    "extract_archive_async",
    "resolve_entry_path",
    "SeedPlan",
    "SeedState",
    "plan_seeding",
    "compose_template",
    "parse_template",
]
