"""Skill discovery and loading."""

from pathlib import Path

from pydantic import ValidationError

from marketkit.errors import BundleLoadError
from marketkit.io.frontmatter import split_frontmatter
from marketkit.io.marketplace import format_validation_error
from marketkit.models.skill import SkillDocument, SkillFrontmatter

SKILLS_DIR = "skills"
SKILL_FILE = "SKILL.md"
REFERENCES_DIR = "references"


def find_skill_files(plugin_dir: Path) -> list[Path]:
    """Every skills/<dir>/SKILL.md under a plugin, sorted by directory name."""
    skills_dir = plugin_dir / SKILLS_DIR
    if not skills_dir.is_dir():
        return []
    return sorted(
        skill_dir / SKILL_FILE
        for skill_dir in skills_dir.iterdir()
        if skill_dir.is_dir() and (skill_dir / SKILL_FILE).is_file()
    )


def load_skill(skill_md: Path, plugin_name: str) -> SkillDocument:
    """Load one SKILL.md.

    Raises:
        BundleLoadError: If the file is not UTF-8, or frontmatter is missing or lacks
            name/description
    """
    try:
        content = skill_md.read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        raise BundleLoadError(skill_md, "not valid UTF-8") from e

    try:
        frontmatter, body = split_frontmatter(content)
    except ValueError as e:
        raise BundleLoadError(skill_md, str(e)) from e

    if frontmatter is None:
        raise BundleLoadError(skill_md, "no frontmatter found")

    try:
        parsed = SkillFrontmatter.model_validate(frontmatter)
    except ValidationError as e:
        raise BundleLoadError(skill_md, format_validation_error(e)) from e

    references_dir = skill_md.parent / REFERENCES_DIR
    return SkillDocument(
        name=parsed.name,
        description=parsed.description,
        path=skill_md,
        body=body,
        plugin_name=plugin_name,
        body_line_offset=content[: len(content) - len(body)].count("\n"),
        references_dir=references_dir if references_dir.is_dir() else None,
    )


def discover_skills(plugin_dir: Path, plugin_name: str) -> list[SkillDocument]:
    """Load every skill in a plugin directory."""
    return [load_skill(skill_md, plugin_name) for skill_md in find_skill_files(plugin_dir)]
