"""Command-line interface for File Architect."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import List, Optional, Tuple

from colorama import Fore, Style, init as colorama_init
from tqdm import tqdm

from .commands import CommandResult, CommandSurface
from .common.logging import setup_logging
from .config import Config
from .common.types import Replacement
from .core.frontmatter import compose_template, parse_template
from .utils import ConfigError


def _cli_header() -> str:
    return (
        f"\n{Fore.CYAN}File Architect{Style.RESET_ALL}\n"
        f"{Fore.WHITE}Folder structures, templates and archives from the terminal.{Style.RESET_ALL}\n"
    )


def _command_showcase() -> List[Tuple[str, str]]:
    return [
        ("ls <path> [--extended]", "List a directory (folders first)"),
        ("rm <path> [--recursive]", "Remove a file or folder"),
        ("rm-file <path>", "Remove a single file"),
        ("extract <archive> <dest>", "Extract a zip archive"),
        ("templates list", "List stored templates"),
        ("templates show <name>", "Print one template"),
        ("templates save <name> <file> [--order N]", "Save a template from a text file"),
        ("init", "Seed default templates (first run only)"),
        ("expand <path>", "Expand a ~ path"),
        ("exists <path>", "Check whether a path exists"),
        ("open <path>", "Open a folder in the file browser"),
        ("reveal <path>", "Reveal a file in the file browser"),
    ]


def _print_command_help(title: str) -> None:
    print(_cli_header())
    print(title)
    print("Usage: filearchitect <command> [options]")
    print("\nAvailable commands:\n")
    for command, label in _command_showcase():
        print(f"  {command:<30} - {label}")
    print("\nExamples:")
    print("  filearchitect ls ~/Projects")
    print("  filearchitect extract starter.zip ~/Projects/site")
    print("  filearchitect templates save \"Web Project\" web.txt")
    print("")


class _FriendlyArgumentParser(argparse.ArgumentParser):
    def error(self, message: str) -> None:
        _print_command_help(f"{Fore.RED}Error:{Style.RESET_ALL} {message}")
        print(f"{Fore.YELLOW}Tip:{Style.RESET_ALL} Run `filearchitect help` for examples.")
        raise SystemExit(2)


def parse_arguments(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """
    Parse command-line arguments.

    Returns:
        Parsed arguments namespace.
    """
    parser = _FriendlyArgumentParser(description="File Architect CLI")
    subparsers = parser.add_subparsers(dest="command")

    ls_parser = subparsers.add_parser("ls", help="List a directory")
    ls_parser.add_argument("path", help="Directory path")
    ls_parser.add_argument("--extended", action="store_true", help="Show existence and indent columns")

    rm_parser = subparsers.add_parser("rm", help="Remove a path")
    rm_parser.add_argument("path", help="File or folder")
    rm_parser.add_argument("--recursive", "-r", action="store_true", help="Remove folder contents too")

    rm_file_parser = subparsers.add_parser("rm-file", help="Remove a single file")
    rm_file_parser.add_argument("path", help="File path")

    extract_parser = subparsers.add_parser("extract", help="Extract a zip archive")
    extract_parser.add_argument("archive", help="Zip archive path")
    extract_parser.add_argument("destination", help="Destination folder")

    templates_parser = subparsers.add_parser("templates", help="Manage templates")
    templates_sub = templates_parser.add_subparsers(dest="templates_command")
    templates_sub.add_parser("list", help="List templates")
    show_parser = templates_sub.add_parser("show", help="Print a template")
    show_parser.add_argument("name", help="Template name")
    save_parser = templates_sub.add_parser("save", help="Save a template")
    save_parser.add_argument("name", help="Template name")
    save_parser.add_argument("file", help="UTF-8 text file with the template content")
    save_parser.add_argument("--order", type=int, help="Position in the template list")
    save_parser.add_argument("--destination", help="Default destination folder")
    save_parser.add_argument(
        "--replace",
        action="append",
        default=[],
        metavar="SEARCH=REPLACE",
        help="Replacement applied to file and folder names (repeatable)",
    )

    subparsers.add_parser("init", help="Seed default templates")

    expand_parser = subparsers.add_parser("expand", help="Expand a ~ path")
    expand_parser.add_argument("path", help="Path to expand")

    exists_parser = subparsers.add_parser("exists", help="Check a path")
    exists_parser.add_argument("path", help="Path to check")

    open_parser = subparsers.add_parser("open", help="Open a folder in the file browser")
    open_parser.add_argument("path", help="Folder path")

    reveal_parser = subparsers.add_parser("reveal", help="Reveal a file in the file browser")
    reveal_parser.add_argument("path", help="File path")

    subparsers.add_parser("help", help="Show help and usage examples")

    return parser.parse_args(argv)


def _report(result: CommandResult) -> bool:
    if not result.ok:
        print(f"{Fore.RED}Error [{result.kind.value}]: {result.error}{Style.RESET_ALL}")
    return result.ok


def command_ls(surface: CommandSurface, args: argparse.Namespace) -> bool:
    """
    Handle ls command.
    """
    path = surface.expand_path(args.path).value
    if args.extended:
        result = surface.list_directory_files(path)
    else:
        result = surface.list_directory_entries(path)
    if not _report(result):
        return False
    if not result.value:
        print("(empty)")
        return True
    for row in result.value:
        if row.is_directory:
            label = f"{Fore.BLUE}{row.name}/{Style.RESET_ALL}"
        else:
            label = row.name
        if args.extended:
            print(f"{'  ' * row.indent}{label}  exists={row.exists}")
        else:
            print(label)
    return True


def command_rm(surface: CommandSurface, args: argparse.Namespace) -> bool:
    """
    Handle rm command.
    """
    path = surface.expand_path(args.path).value
    if not _report(surface.remove_path(path, args.recursive)):
        return False
    print(f"{Fore.YELLOW}Removed {path}{Style.RESET_ALL}")
    return True


def command_rm_file(surface: CommandSurface, args: argparse.Namespace) -> bool:
    """
    Handle rm-file command.
    """
    path = surface.expand_path(args.path).value
    if not _report(surface.remove_file(path)):
        return False
    print(f"{Fore.YELLOW}Removed {path}{Style.RESET_ALL}")
    return True


def command_extract(surface: CommandSurface, args: argparse.Namespace) -> bool:
    """
    Handle extract command.
    """
    archive = surface.expand_path(args.archive).value
    destination = surface.expand_path(args.destination).value
    progress = tqdm(desc="Extracting", unit="entry")

    def _progress(current: int, total: int, _name: Optional[str]) -> None:
        progress.total = total
        progress.n = current
        progress.refresh()

    try:
        result = surface.extract_archive(archive, destination, _progress)
    finally:
        progress.close()
    if not _report(result):
        return False
    summary = result.value
    print(
        f"{Fore.GREEN}✅ Extracted {summary.files} files and "
        f"{summary.directories} folders to {destination}{Style.RESET_ALL}"
    )
    return True


def _apply_template_options(content: str, args: argparse.Namespace) -> str:
    """Merge --order/--destination/--replace into the template front matter."""
    if args.order is None and args.destination is None and not args.replace:
        return content
    document = parse_template(content)
    if args.order is not None:
        document.order = args.order
    if args.destination is not None:
        document.destination_path = args.destination
    for pair in args.replace:
        search, separator, replace = pair.partition("=")
        if not separator:
            raise ValueError(f"Replacement must look like SEARCH=REPLACE: {pair}")
        document.replacements.append(Replacement(search, replace))
    return compose_template(document)


def command_templates(surface: CommandSurface, args: argparse.Namespace) -> bool:
    """
    Handle templates subcommands.
    """
    if args.templates_command == "save":
        try:
            content = Path(args.file).read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            print(f"{Fore.RED}Error: cannot read {args.file}: {exc}{Style.RESET_ALL}")
            return False
        try:
            content = _apply_template_options(content, args)
        except ValueError as exc:
            print(f"{Fore.RED}Error: {exc}{Style.RESET_ALL}")
            return False
        if not _report(surface.save_template(args.name, content)):
            return False
        print(f"{Fore.GREEN}✅ Saved template '{args.name}'{Style.RESET_ALL}")
        return True

    result = surface.list_templates()
    if not _report(result):
        return False

    if args.templates_command == "show":
        for template in result.value:
            if template.name == args.name:
                document = parse_template(template.content)
                if document.has_metadata:
                    if document.order is not None:
                        print(f"{Fore.CYAN}Order:{Style.RESET_ALL} {document.order}")
                    if document.destination_path:
                        print(f"{Fore.CYAN}Destination:{Style.RESET_ALL} {document.destination_path}")
                    for rule in document.replacements:
                        print(f"{Fore.CYAN}Replace:{Style.RESET_ALL} {rule.search} -> {rule.replace}")
                    print("")
                print(document.body)
                return True
        print(f"{Fore.RED}Template not found: {args.name}{Style.RESET_ALL}")
        return False

    if not result.value:
        print("No templates found. Run `filearchitect init` to add the defaults.")
        return True
    print(f"{Fore.CYAN}Templates:{Style.RESET_ALL}")
    for template in result.value:
        order = parse_template(template.content).order
        suffix = f" (order {order})" if order is not None else ""
        print(f"  {template.name}{suffix}")
    return True


def command_init(surface: CommandSurface, _: argparse.Namespace) -> bool:
    """
    Handle init command.
    """
    if not _report(surface.initialize_app()):
        return False
    print(f"{Fore.GREEN}✅ Templates ready in {surface.store.directory}{Style.RESET_ALL}")
    return True


def command_expand(surface: CommandSurface, args: argparse.Namespace) -> bool:
    print(surface.expand_path(args.path).value)
    return True


def command_exists(surface: CommandSurface, args: argparse.Namespace) -> bool:
    exists = surface.path_exists(args.path).value
    print("yes" if exists else "no")
    return exists


def command_open(surface: CommandSurface, args: argparse.Namespace) -> bool:
    return _report(surface.open_folder(surface.expand_path(args.path).value))


def command_reveal(surface: CommandSurface, args: argparse.Namespace) -> bool:
    return _report(surface.reveal_file(surface.expand_path(args.path).value))


_HANDLERS = {
    "ls": command_ls,
    "rm": command_rm,
    "rm-file": command_rm_file,
    "extract": command_extract,
    "templates": command_templates,
    "init": command_init,
    "expand": command_expand,
    "exists": command_exists,
    "open": command_open,
    "reveal": command_reveal,
}


def main(argv: Optional[List[str]] = None) -> None:
    """
    CLI entry point.
    """
    colorama_init()
    args = parse_arguments(argv)

    if not args.command:
        _print_command_help("Choose a command to continue.")
        return
    if args.command == "help":
        _print_command_help("File Architect CLI Help")
        return

    try:
        config = Config.get_instance()
    except ConfigError as exc:
        print(f"{Fore.RED}Error: {exc}{Style.RESET_ALL}")
        sys.exit(1)
    setup_logging(config.log_level)

    surface = CommandSurface()
    if not _HANDLERS[args.command](surface, args):
        sys.exit(1)


if __name__ == "__main__":
    main()
