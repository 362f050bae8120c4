"""Relative markdown link extraction.

Used to check that a skill's links into its references/ directory resolve.
"""

import re
from dataclasses import dataclass

LINK_PATTERN = re.compile(r"(?<!!)\[[^\]]*\]\(([^)\s]+)(?:\s+\"[^\"]*\")?\)")
FENCE_PATTERN = re.compile(r"^\s*(```|~~~)")


@dataclass(frozen=True)
class MarkdownLink:
    """A relative link target found in markdown.

    Attributes:
        target: Path part of the link, fragment stripped
        line_number: 1-based line in the source document
        raw_text: The link target exactly as written
    """

    target: str
    line_number: int
    raw_text: str


def _is_external(target: str) -> bool:
    if target.startswith("#"):
        return True
    if target.startswith("/") or target.startswith("~"):
        return True
    return re.match(r"^[a-zA-Z][a-zA-Z0-9+.-]*:", target) is not None


def extract_markdown_links(content: str, line_offset: int = 0) -> list[MarkdownLink]:
    """Find relative file links, skipping URLs, anchors and fenced code blocks."""
    links: list[MarkdownLink] = []
    in_fence = False

    for index, line in enumerate(content.splitlines(), start=1):
        if FENCE_PATTERN.match(line):
            in_fence = not in_fence
            continue
        if in_fence:
            continue

        for match in LINK_PATTERN.finditer(line):
            raw = match.group(1)
            if _is_external(raw):
                continue
            target = raw.split("#", 1)[0]
            if not target:
                continue
            links.append(
                MarkdownLink(target=target, line_number=index + line_offset, raw_text=raw)
            )

    return links
