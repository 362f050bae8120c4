"""Domain errors.

All of them subclass ValueError so the CLI error boundary renders them as
clean one-line messages.
"""

from pathlib import Path


class BundleLoadError(ValueError):
    """A bundle file is missing, malformed, or fails schema validation."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"{path}: {reason}")


class SkillNotFoundError(ValueError):
    """No skill matches a trigger."""

    def __init__(self, trigger: str, available: list[str]) -> None:
        self.trigger = trigger
        self.available = available
        if available:
            msg = f"No skill matches '{trigger}'. Available: {', '.join(available)}"
        else:
            msg = f"No skill matches '{trigger}'. The bundle has no skills."
        super().__init__(msg)


class AmbiguousSkillError(ValueError):
    """A bare skill name matches skills in more than one plugin."""

    def __init__(self, trigger: str, candidates: list[str]) -> None:
        self.trigger = trigger
        self.candidates = candidates
        super().__init__(
            f"Skill '{trigger}' is ambiguous. Qualify it with a plugin name: "
            f"{', '.join(candidates)}"
        )


class ConfigError(ValueError):
    """marketkit.toml contains an invalid value."""
