"""Pydantic models for a plugin's hooks/hooks.json."""

from pydantic import BaseModel, ConfigDict, Field, field_validator

HOOK_EVENTS = frozenset(
    {
        "PreToolUse",
        "PostToolUse",
        "Notification",
        "UserPromptSubmit",
        "Stop",
        "SubagentStop",
        "PreCompact",
        "SessionStart",
        "SessionEnd",
    }
)


class HookCommand(BaseModel):
    """A single command the host runs when the hook fires."""

    model_config = ConfigDict(frozen=True, extra="allow")

    type: str
    command: str = Field(..., min_length=1)
    timeout: int | None = Field(default=None, gt=0)

    @field_validator("type")
    @classmethod
    def validate_type(cls, v: str) -> str:
        """Validate hook type field."""
        if v != "command":
            msg = f"Invalid hook type: {v}"
            raise ValueError(msg)
        return v


class HookMatcherGroup(BaseModel):
    """Groups hook commands under a tool matcher pattern."""

    model_config = ConfigDict(frozen=True, extra="allow")

    matcher: str = ""
    hooks: list[HookCommand]


class HooksConfig(BaseModel):
    """Top-level hooks.json structure."""

    model_config = ConfigDict(frozen=True, extra="allow")

    description: str | None = None
    hooks: dict[str, list[HookMatcherGroup]] = Field(default_factory=dict)

    @field_validator("hooks")
    @classmethod
    def validate_events(
        cls, v: dict[str, list[HookMatcherGroup]]
    ) -> dict[str, list[HookMatcherGroup]]:
        unknown = sorted(set(v) - HOOK_EVENTS)
        if unknown:
            raise ValueError(f"Unknown hook event(s): {', '.join(unknown)}")
        return v

    def iter_commands(self) -> list[tuple[str, str, HookCommand]]:
        """Flatten to (event, matcher, command) triples in file order."""
        flattened: list[tuple[str, str, HookCommand]] = []
        for event, groups in self.hooks.items():
            for group in groups:
                for command in group.hooks:
                    flattened.append((event, group.matcher, command))
        return flattened
