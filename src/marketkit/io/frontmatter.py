"""Frontmatter parsing for skill documents."""

import re
from typing import Any

import yaml

FRONTMATTER_PATTERN = re.compile(r"\A---[ \t]*\n(.*?)\n---[ \t]*(?:\n|\Z)", re.DOTALL)


def split_frontmatter(content: str) -> tuple[dict[str, Any] | None, str]:
    """Split markdown into (frontmatter, body).

    Returns (None, content) when there is no frontmatter block.

    Raises:
        ValueError: If the block is present but is not a YAML mapping
    """
    match = FRONTMATTER_PATTERN.match(content)
    if not match:
        return None, content

    try:
        data = yaml.safe_load(match.group(1))
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML frontmatter: {e}") from e

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ValueError(f"Frontmatter must be a mapping, got {type(data).__name__}")

    body = content[match.end() :]
    return data, body


def parse_frontmatter(content: str) -> dict[str, Any] | None:
    """Extract frontmatter from markdown content."""
    frontmatter, _ = split_frontmatter(content)
    return frontmatter
