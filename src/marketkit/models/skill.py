"""Skill models."""

from dataclasses import dataclass
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field


class SkillFrontmatter(BaseModel):
    """YAML frontmatter at the top of SKILL.md."""

    model_config = ConfigDict(frozen=True, extra="allow", populate_by_name=True)

    name: str = Field(..., min_length=1)
    description: str = Field(..., min_length=1)
    allowed_tools: str | list[str] | None = Field(default=None, alias="allowed-tools")


@dataclass(frozen=True)
class SkillDocument:
    """A loaded skill: its guidance document and reference material."""

    name: str
    description: str
    path: Path  # SKILL.md
    body: str
    plugin_name: str
    references_dir: Path | None = None
    body_line_offset: int = 0  # lines of SKILL.md before the body

    @property
    def directory(self) -> Path:
        return self.path.parent

    @property
    def trigger(self) -> str:
        """Fully qualified slash trigger, e.g. /bash-style-guide:bash-style-guide."""
        return f"/{self.plugin_name}:{self.name}"

    def reference_files(self) -> list[Path]:
        if self.references_dir is None:
            return []
        return sorted(p for p in self.references_dir.rglob("*") if p.is_file())
