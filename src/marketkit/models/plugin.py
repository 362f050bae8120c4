"""Pydantic model for a plugin's .claude-plugin/plugin.json."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from marketkit.models.marketplace import Author, coerce_author


class PluginManifest(BaseModel):
    """Descriptive metadata for one plugin."""

    model_config = ConfigDict(frozen=True, extra="allow")

    name: str = Field(..., min_length=1)
    version: str | None = None
    description: str | None = None
    author: Author | None = None
    license: str | None = None
    keywords: list[str] = Field(default_factory=list)
    homepage: str | None = None
    repository: str | None = None

    @field_validator("author", mode="before")
    @classmethod
    def validate_author(cls, v: Any) -> Any:
        return coerce_author(v)
