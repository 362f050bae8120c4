"""Tests for frontmatter parsing."""

import pytest

from marketkit.io.frontmatter import parse_frontmatter, split_frontmatter


def test_split_frontmatter_returns_mapping_and_body() -> None:
    content = "---\nname: demo\ndescription: Demo skill\n---\n\n# Body\n"

    frontmatter, body = split_frontmatter(content)

    assert frontmatter == {"name": "demo", "description": "Demo skill"}
    assert body == "\n# Body\n"


def test_no_frontmatter_returns_none_and_original_content() -> None:
    content = "# Just a heading\n"

    frontmatter, body = split_frontmatter(content)

    assert frontmatter is None
    assert body == content


def test_frontmatter_must_start_the_document() -> None:
    assert parse_frontmatter("intro\n---\nname: x\n---\n") is None


def test_empty_frontmatter_is_empty_mapping() -> None:
    assert parse_frontmatter("---\n\n---\nbody") == {}


def test_non_mapping_frontmatter_raises() -> None:
    with pytest.raises(ValueError, match="must be a mapping"):
        split_frontmatter("---\n- a\n- b\n---\n")


def test_invalid_yaml_raises() -> None:
    with pytest.raises(ValueError, match="Invalid YAML"):
        split_frontmatter("---\nname: [unclosed\n---\n")
