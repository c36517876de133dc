"""YAML front matter of template files."""

import logging
from typing import Any, Dict, List

import yaml

from ..common.constants import FRONT_MATTER_CLOSE, FRONT_MATTER_OPEN
from ..common.types import Replacement, TemplateDocument

logger = logging.getLogger(__name__)


def _read_replacements(raw: Any, in_files: bool, in_folders: bool) -> List[Replacement]:
    if not isinstance(raw, list):
        return []
    rules = []
    for item in raw:
        if not isinstance(item, dict):
            continue
        search = item.get("search")
        replace = item.get("replace")
        if not isinstance(search, str) or not isinstance(replace, str):
            continue
        rules.append(Replacement(search, replace, in_files=in_files, in_folders=in_folders))
    return rules


def parse_template(raw: str) -> TemplateDocument:
    """
    Split raw template text into front matter fields and body.

    Text without a complete front matter block, or whose block is not valid
    YAML, is returned entirely as the body.

    Args:
        raw: Template file content.

    Returns:
        Parsed TemplateDocument.
    """
    if not raw.startswith(FRONT_MATTER_OPEN):
        return TemplateDocument(body=raw)
    end = raw.find(FRONT_MATTER_CLOSE, len(FRONT_MATTER_OPEN) - 1)
    if end == -1:
        return TemplateDocument(body=raw)

    try:
        data = yaml.safe_load(raw[len(FRONT_MATTER_OPEN):end])
    except yaml.YAMLError as exc:
        logger.debug("Ignoring malformed front matter: %s", exc)
        return TemplateDocument(body=raw)
    if data is None:
        data = {}
    if not isinstance(data, dict):
        return TemplateDocument(body=raw)

    order = data.get("order")
    if isinstance(order, bool) or not isinstance(order, int):
        order = None
    destination = data.get("destinationPath")
    if not isinstance(destination, str):
        destination = None

    replacements = (
        _read_replacements(data.get("allReplacements"), True, True)
        + _read_replacements(data.get("fileReplacements"), True, False)
        + _read_replacements(data.get("folderReplacements"), False, True)
    )
    return TemplateDocument(
        body=raw[end + len(FRONT_MATTER_CLOSE):],
        order=order,
        destination_path=destination,
        replacements=replacements,
    )


def compose_template(document: TemplateDocument) -> str:
    """
    Render a TemplateDocument back into file content.

    Replacements with a blank search or replace value are dropped, as are
    rules that apply to neither files nor folders.
    """
    front: Dict[str, Any] = {}
    groups: Dict[str, List[Dict[str, str]]] = {
        "allReplacements": [],
        "fileReplacements": [],
        "folderReplacements": [],
    }
    for rule in document.replacements:
        search, replace = rule.search.strip(), rule.replace.strip()
        if not search or not replace:
            continue
        if rule.in_files and rule.in_folders:
            key = "allReplacements"
        elif rule.in_files:
            key = "fileReplacements"
        elif rule.in_folders:
            key = "folderReplacements"
        else:
            continue
        groups[key].append({"search": search, "replace": replace})
    for key, rules in groups.items():
        if rules:
            front[key] = rules
    if document.destination_path and document.destination_path.strip():
        front["destinationPath"] = document.destination_path.strip()
    if document.order is not None:
        front["order"] = document.order

    if not front:
        return document.body
    dumped = yaml.safe_dump(front, allow_unicode=True, sort_keys=False, default_flow_style=False)
    return f"{FRONT_MATTER_OPEN}{dumped}---\n{document.body}"
