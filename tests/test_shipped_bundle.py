"""The marketplace bundle shipped at the repository root must pass strict checks."""

import shlex
from pathlib import Path

from marketkit.config import load_config
from marketkit.io.hooks import load_hooks_config
from marketkit.io.manifest import load_plugin_manifest
from marketkit.io.marketplace import load_marketplace, resolve_plugin_source
from marketkit.operations.skills import resolve_skill
from marketkit.operations.validation import validate_bundle

REPO_ROOT = Path(__file__).parent.parent


def test_shipped_bundle_passes_strict_validation() -> None:
    report = validate_bundle(REPO_ROOT)

    assert report.issues == [], report.issues
    assert report.plugins_checked == 2


def test_every_registry_source_exists_with_matching_manifest() -> None:
    registry = load_marketplace(REPO_ROOT)

    for entry in registry.plugins:
        plugin_dir = resolve_plugin_source(REPO_ROOT, registry, entry)
        assert plugin_dir is not None and plugin_dir.is_dir(), entry.name
        manifest = load_plugin_manifest(plugin_dir)
        assert manifest.name == entry.name
        assert manifest.version == entry.version


def test_style_guide_skill_resolves_with_references() -> None:
    skill = resolve_skill(REPO_ROOT, "/bash-style-guide")

    names = [path.name for path in skill.reference_files()]
    assert names == ["checklist.md", "style-guide.md"]


def test_notify_hook_reads_config_shipped_with_the_plugin() -> None:
    plugin_dir = REPO_ROOT / "plugins" / "notify"
    config = load_hooks_config(plugin_dir)
    assert config is not None

    commands = [command.command for _, _, command in config.iter_commands()]
    assert len(commands) == 1
    argv = shlex.split(commands[0].replace("${CLAUDE_PLUGIN_ROOT}", str(plugin_dir)))
    config_path = Path(argv[argv.index("--config") + 1])

    assert config_path.is_file()
    assert load_config(config_path).notify.title == "Claude Code"
