"""Shared fixtures for marketkit tests."""

from pathlib import Path

import pytest

from tests.test_utils.bundle_builder import (
    NOTIFICATION_HOOKS,
    PluginSpec,
    skill_markdown,
    write_bundle,
)


@pytest.fixture
def valid_bundle(tmp_path: Path) -> Path:
    """A bundle with a skill plugin and a hook plugin that passes strict checks."""
    bundle_root = tmp_path / "bundle"
    return write_bundle(
        bundle_root,
        [
            PluginSpec(
                name="style",
                keywords=["bash", "style"],
                skills={"bash-style": skill_markdown("bash-style", "Bash conventions")},
            ),
            PluginSpec(
                name="notify",
                category="productivity",
                keywords=["notifications"],
                hooks=NOTIFICATION_HOOKS,
            ),
        ],
    )
