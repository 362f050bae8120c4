"""Validation result models."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Literal

Severity = Literal["error", "warning"]


@dataclass(frozen=True)
class ValidationIssue:
    """A single problem found in the bundle.

    location is relative to the bundle root, e.g. "plugins/notify/.claude-plugin/plugin.json".
    """

    severity: Severity
    location: str
    message: str


@dataclass
class ValidationReport:
    """Accumulated outcome of checking one bundle."""

    bundle_root: Path
    issues: list[ValidationIssue] = field(default_factory=list)
    plugins_checked: int = 0
    skills_checked: int = 0

    def error(self, location: str, message: str) -> None:
        self.issues.append(ValidationIssue("error", location, message))

    def warning(self, location: str, message: str) -> None:
        self.issues.append(ValidationIssue("warning", location, message))

    @property
    def errors(self) -> list[ValidationIssue]:
        return [issue for issue in self.issues if issue.severity == "error"]

    @property
    def warnings(self) -> list[ValidationIssue]:
        return [issue for issue in self.issues if issue.severity == "warning"]

    def is_valid(self, strict: bool = False) -> bool:
        """Errors always fail; warnings fail only in strict mode."""
        if self.errors:
            return False
        if strict and self.warnings:
            return False
        return True
