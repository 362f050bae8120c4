"""Helpers for building marketplace bundles on disk in tests."""

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any


@dataclass
class PluginSpec:
    """Description of one plugin to write into a test bundle."""

    name: str
    version: str = "1.0.0"
    description: str = "A test plugin"
    category: str = "development"
    keywords: list[str] = field(default_factory=lambda: ["testing"])
    manifest_overrides: dict[str, Any] = field(default_factory=dict)
    skills: dict[str, str] = field(default_factory=dict)  # dir name -> SKILL.md content
    hooks: dict[str, Any] | None = None


def skill_markdown(name: str, description: str = "Test skill", body: str = "# Skill\n") -> str:
    return f"---\nname: {name}\ndescription: {description}\n---\n\n{body}"


def registry_entry(plugin: PluginSpec) -> dict[str, Any]:
    return {
        "name": plugin.name,
        "source": f"./plugins/{plugin.name}",
        "version": plugin.version,
        "description": plugin.description,
        "keywords": plugin.keywords,
        "category": plugin.category,
    }


def write_json(path: Path, data: dict[str, Any]) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(data, indent=2) + "\n", encoding="utf-8")


def write_plugin(bundle_root: Path, plugin: PluginSpec) -> Path:
    plugin_dir = bundle_root / "plugins" / plugin.name
    manifest = {
        "name": plugin.name,
        "version": plugin.version,
        "description": plugin.description,
        "keywords": plugin.keywords,
    }
    manifest.update(plugin.manifest_overrides)
    write_json(plugin_dir / ".claude-plugin" / "plugin.json", manifest)

    for dir_name, content in plugin.skills.items():
        skill_md = plugin_dir / "skills" / dir_name / "SKILL.md"
        skill_md.parent.mkdir(parents=True, exist_ok=True)
        skill_md.write_text(content, encoding="utf-8")

    if plugin.hooks is not None:
        write_json(plugin_dir / "hooks" / "hooks.json", plugin.hooks)

    return plugin_dir


def write_bundle(
    bundle_root: Path,
    plugins: list[PluginSpec],
    registry_overrides: dict[str, Any] | None = None,
) -> Path:
    """Write marketplace.json plus every plugin. Returns the bundle root."""
    registry: dict[str, Any] = {
        "name": "test-marketplace",
        "owner": {"name": "Test Owner"},
        "plugins": [registry_entry(plugin) for plugin in plugins],
    }
    if registry_overrides:
        registry.update(registry_overrides)

    write_json(bundle_root / ".claude-plugin" / "marketplace.json", registry)
    for plugin in plugins:
        write_plugin(bundle_root, plugin)
    return bundle_root


NOTIFICATION_HOOKS: dict[str, Any] = {
    "hooks": {
        "Notification": [
            {
                "matcher": "",
                "hooks": [{"type": "command", "command": "marketkit hook notify"}],
            }
        ]
    }
}
