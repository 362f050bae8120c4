"""Pydantic models for .claude-plugin/marketplace.json."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Author(BaseModel):
    """Plugin or marketplace author."""

    model_config = ConfigDict(frozen=True, extra="allow")

    name: str = Field(..., min_length=1)
    email: str | None = None
    url: str | None = None


def coerce_author(value: Any) -> Any:
    """Accept a bare string where an author object is expected."""
    if isinstance(value, str):
        return {"name": value}
    return value


class MarketplaceOwner(BaseModel):
    """Maintainer of the marketplace."""

    model_config = ConfigDict(frozen=True, extra="allow")

    name: str = Field(..., min_length=1)
    email: str | None = None
    url: str | None = None


class MarketplaceMetadata(BaseModel):
    """Optional metadata block of the registry."""

    model_config = ConfigDict(frozen=True, extra="allow", populate_by_name=True)

    description: str | None = None
    version: str | None = None
    plugin_root: str | None = Field(default=None, alias="pluginRoot")


class PluginEntry(BaseModel):
    """One installable plugin listed in the registry.

    `source` is normally a relative path string. Remote sources (GitHub or git
    URL objects) are kept as dicts and never resolved on disk.
    """

    model_config = ConfigDict(frozen=True, extra="allow")

    name: str = Field(..., min_length=1)
    source: str | dict[str, Any]
    version: str | None = None
    description: str | None = None
    keywords: list[str] = Field(default_factory=list)
    category: str | None = None
    license: str | None = None
    author: Author | None = None
    homepage: str | None = None
    repository: str | None = None
    tags: list[str] = Field(default_factory=list)
    strict: bool = True

    @field_validator("author", mode="before")
    @classmethod
    def validate_author(cls, v: Any) -> Any:
        return coerce_author(v)

    @field_validator("source")
    @classmethod
    def validate_source(cls, v: str | dict[str, Any]) -> str | dict[str, Any]:
        """Validate a path source is non-empty."""
        if isinstance(v, str) and not v.strip():
            raise ValueError("source must be a non-empty path")
        return v

    @property
    def is_local(self) -> bool:
        """Whether the source is a path inside the bundle."""
        if not isinstance(self.source, str):
            return False
        return "://" not in self.source


class MarketplaceRegistry(BaseModel):
    """Top-level marketplace.json structure."""

    model_config = ConfigDict(frozen=True, extra="allow")

    name: str = Field(..., min_length=1)
    owner: MarketplaceOwner
    metadata: MarketplaceMetadata | None = None
    plugins: list[PluginEntry] = Field(default_factory=list)

    def plugin_names(self) -> list[str]:
        """Names in registry order, duplicates included."""
        return [plugin.name for plugin in self.plugins]

    def get_plugin(self, name: str) -> PluginEntry | None:
        """Return the first entry with this name, or None."""
        for plugin in self.plugins:
            if plugin.name == name:
                return plugin
        return None

    @property
    def plugin_root(self) -> str | None:
        if self.metadata is None:
            return None
        return self.metadata.plugin_root
