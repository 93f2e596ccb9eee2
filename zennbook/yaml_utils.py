"""YAML helpers for book configs and chapter front matter."""

from __future__ import annotations

import re
from typing import Any

import yaml  # type: ignore[import-untyped]

JSONDict = dict[str, Any]

# Front matter block at the very top of a markdown file.
_FRONT_MATTER = re.compile(
    r"\A---[ \t]*\r?\n(.*?)^---[ \t]*(?:\r?\n|\Z)", re.S | re.M
)


def parse_yaml(text: str) -> JSONDict:
    """Parse YAML text into a mapping without enforcing a schema.

    Args:
        text: Raw YAML document.

    Returns:
        The parsed mapping. Empty documents and documents whose top level
        is not a mapping yield an empty dictionary.

    Raises:
        yaml.YAMLError: If ``text`` is not valid YAML.
    """

    data = yaml.safe_load(text)
    if not isinstance(data, dict):
        return {}
    return {str(key): value for key, value in data.items()}


def split_front_matter(text: str) -> tuple[str | None, str]:
    """Separate a ``---`` delimited front matter block from markdown.

    Args:
        text: Full markdown file contents.

    Returns:
        Tuple of the raw front matter (``None`` when absent) and the
        remaining markdown body.
    """

    match = _FRONT_MATTER.match(text)
    if match is None:
        return None, text
    return match.group(1), text[match.end() :]
