"""Tests for bundle validation."""

import json
from pathlib import Path

from marketkit.models.validation import ValidationReport
from marketkit.operations.validation import find_duplicates, validate_bundle
from tests.test_utils.bundle_builder import (
    PluginSpec,
    registry_entry,
    skill_markdown,
    write_bundle,
    write_json,
    write_plugin,
)


def _messages(report: ValidationReport, severity: str) -> list[str]:
    return [issue.message for issue in report.issues if issue.severity == severity]


def test_valid_bundle_has_no_issues(valid_bundle: Path) -> None:
    report = validate_bundle(valid_bundle)

    assert report.issues == []
    assert report.plugins_checked == 2
    assert report.skills_checked == 1
    assert report.is_valid(strict=True)


def test_missing_registry_is_an_error(tmp_path: Path) -> None:
    report = validate_bundle(tmp_path)

    assert len(report.errors) == 1
    assert report.errors[0].location == ".claude-plugin/marketplace.json"
    assert report.errors[0].message == "file not found"


def test_missing_source_path_is_an_error(tmp_path: Path) -> None:
    write_json(
        tmp_path / ".claude-plugin" / "marketplace.json",
        {
            "name": "m",
            "owner": {"name": "o"},
            "plugins": [registry_entry(PluginSpec(name="ghost"))],
        },
    )

    report = validate_bundle(tmp_path)

    assert "Source path does not exist: ./plugins/ghost" in _messages(report, "error")
    assert report.errors[0].location == ".claude-plugin/marketplace.json [ghost]"


def test_duplicate_plugin_names_are_errors(tmp_path: Path) -> None:
    plugin = PluginSpec(name="dup")
    write_bundle(tmp_path, [plugin, plugin])

    report = validate_bundle(tmp_path)

    assert "Duplicate plugin name in registry: 'dup'" in _messages(report, "error")


def test_manifest_name_must_match_registry_entry(tmp_path: Path) -> None:
    write_bundle(tmp_path, [PluginSpec(name="alpha", manifest_overrides={"name": "beta"})])

    report = validate_bundle(tmp_path)

    assert (
        "Manifest name 'beta' does not match registry entry 'alpha'" in _messages(report, "error")
    )
    assert report.errors[0].location == "plugins/alpha/.claude-plugin/plugin.json"


def test_missing_manifest_is_an_error(tmp_path: Path) -> None:
    write_bundle(tmp_path, [PluginSpec(name="alpha")])
    (tmp_path / "plugins" / "alpha" / ".claude-plugin" / "plugin.json").unlink()

    report = validate_bundle(tmp_path)

    assert "file not found" in _messages(report, "error")


def test_duplicate_keywords_in_registry_and_manifest(tmp_path: Path) -> None:
    write_bundle(tmp_path, [PluginSpec(name="alpha", keywords=["bash", "Bash", "shell"])])

    report = validate_bundle(tmp_path)

    errors = [(issue.location, issue.message) for issue in report.errors]
    assert (".claude-plugin/marketplace.json [alpha]", "Duplicate keyword: 'bash'") in errors
    assert ("plugins/alpha/.claude-plugin/plugin.json", "Duplicate keyword: 'bash'") in errors


def test_version_mismatch_is_a_warning(tmp_path: Path) -> None:
    write_bundle(tmp_path, [PluginSpec(name="alpha", manifest_overrides={"version": "1.1.0"})])

    report = validate_bundle(tmp_path)

    assert report.errors == []
    assert (
        "Manifest version 1.1.0 differs from registry version 1.0.0"
        in _messages(report, "warning")
    )
    assert not report.is_valid(strict=True)


def test_non_semver_and_non_kebab_names_are_warnings(tmp_path: Path) -> None:
    write_bundle(tmp_path, [PluginSpec(name="My_Plugin", version="v1")])

    report = validate_bundle(tmp_path)

    warnings = _messages(report, "warning")
    assert "Plugin name 'My_Plugin' is not kebab-case" in warnings
    assert "Version 'v1' is not semver (X.Y.Z)" in warnings


def test_missing_description_and_category_are_warnings(tmp_path: Path) -> None:
    write_bundle(tmp_path, [PluginSpec(name="alpha", description="", category="")])

    warnings = _messages(validate_bundle(tmp_path), "warning")

    assert "Missing description" in warnings
    assert "Missing category" in warnings


def test_skill_without_frontmatter_is_an_error(tmp_path: Path) -> None:
    write_bundle(tmp_path, [PluginSpec(name="alpha", skills={"guide": "# Guide\n"})])

    report = validate_bundle(tmp_path)

    assert report.errors[0].location == "plugins/alpha/skills/guide/SKILL.md"
    assert report.errors[0].message == "no frontmatter found"
    assert report.skills_checked == 0


def test_skill_name_differs_from_directory_is_a_warning(tmp_path: Path) -> None:
    write_bundle(tmp_path, [PluginSpec(name="alpha", skills={"guide": skill_markdown("other")})])

    warnings = _messages(validate_bundle(tmp_path), "warning")

    assert "Skill name 'other' differs from its directory 'guide'" in warnings


def test_broken_skill_link_reports_file_line(tmp_path: Path) -> None:
    content = skill_markdown(
        "guide", body="# Guide\n\nSee [full](references/full.md) and [ok](SKILL.md).\n"
    )
    write_bundle(tmp_path, [PluginSpec(name="alpha", skills={"guide": content})])

    report = validate_bundle(tmp_path)

    assert len(report.errors) == 1
    assert report.errors[0].location == "plugins/alpha/skills/guide/SKILL.md:8"
    assert report.errors[0].message == "Broken link: references/full.md"


def test_invalid_hooks_json_is_an_error(tmp_path: Path) -> None:
    hooks = {"hooks": {"OnSave": [{"hooks": [{"type": "command", "command": "x"}]}]}}
    write_bundle(tmp_path, [PluginSpec(name="alpha", hooks=hooks)])

    report = validate_bundle(tmp_path)

    assert report.errors[0].location == "plugins/alpha/hooks/hooks.json"
    assert "Unknown hook event(s): OnSave" in report.errors[0].message


def test_empty_hooks_json_is_a_warning(tmp_path: Path) -> None:
    write_bundle(tmp_path, [PluginSpec(name="alpha", hooks={"hooks": {}})])

    assert "hooks.json declares no hooks" in _messages(validate_bundle(tmp_path), "warning")


def test_unlisted_plugin_directory_is_a_warning(valid_bundle: Path) -> None:
    write_plugin(valid_bundle, PluginSpec(name="stray"))

    report = validate_bundle(valid_bundle)

    assert [(issue.location, issue.message) for issue in report.warnings] == [
        ("plugins/stray", "Plugin directory is not listed in the marketplace registry")
    ]


def test_remote_sources_are_skipped(tmp_path: Path) -> None:
    registry = {
        "name": "m",
        "owner": {"name": "o"},
        "plugins": [
            {
                "name": "remote",
                "source": {"source": "github", "repo": "o/remote"},
                "description": "Remote plugin",
                "category": "development",
            }
        ],
    }
    path = tmp_path / ".claude-plugin" / "marketplace.json"
    path.parent.mkdir(parents=True)
    path.write_text(json.dumps(registry), encoding="utf-8")

    report = validate_bundle(tmp_path)

    assert report.issues == []
    assert report.plugins_checked == 0


def test_find_duplicates_first_seen_order() -> None:
    assert find_duplicates(["a", "b", "a", "c", "b"]) == ["a", "b"]
    assert find_duplicates(["X", "x"], case_sensitive=False) == ["X"]
    assert find_duplicates(["X", "x"]) == []


def test_malformed_registry_json_is_a_located_error(tmp_path: Path) -> None:
    registry_path = tmp_path / ".claude-plugin" / "marketplace.json"
    registry_path.parent.mkdir(parents=True)
    registry_path.write_text('{"name": "broken",\n  "plugins": [\n', encoding="utf-8")

    report = validate_bundle(tmp_path)

    assert len(report.errors) == 1
    assert report.errors[0].location == ".claude-plugin/marketplace.json"
    assert report.errors[0].message.startswith("invalid JSON at line")
    assert report.plugins_checked == 0


def test_malformed_manifest_json_is_a_located_error(tmp_path: Path) -> None:
    write_bundle(tmp_path, [PluginSpec(name="alpha")])
    manifest_path = tmp_path / "plugins" / "alpha" / ".claude-plugin" / "plugin.json"
    manifest_path.write_text('{"name": "alpha",', encoding="utf-8")

    report = validate_bundle(tmp_path)

    assert len(report.errors) == 1
    assert report.errors[0].location == "plugins/alpha/.claude-plugin/plugin.json"
    assert report.errors[0].message.startswith("invalid JSON at line")


def test_malformed_hooks_json_is_a_located_error(tmp_path: Path) -> None:
    write_bundle(tmp_path, [PluginSpec(name="alpha", hooks={"hooks": {}})])
    hooks_path = tmp_path / "plugins" / "alpha" / "hooks" / "hooks.json"
    hooks_path.write_text('{"hooks": {"Notification": [}', encoding="utf-8")

    report = validate_bundle(tmp_path)

    assert len(report.errors) == 1
    assert report.errors[0].location == "plugins/alpha/hooks/hooks.json"
    assert report.errors[0].message.startswith("invalid JSON at line")


def test_manifest_with_invalid_utf8_is_a_located_error(tmp_path: Path) -> None:
    write_bundle(tmp_path, [PluginSpec(name="alpha")])
    manifest_path = tmp_path / "plugins" / "alpha" / ".claude-plugin" / "plugin.json"
    manifest_path.write_bytes(b'{"name": "al\xffpha"}')

    report = validate_bundle(tmp_path)

    assert len(report.errors) == 1
    assert report.errors[0].location == "plugins/alpha/.claude-plugin/plugin.json"
    assert report.errors[0].message == "not valid UTF-8"


def test_skill_with_invalid_utf8_is_a_located_error(tmp_path: Path) -> None:
    write_bundle(tmp_path, [PluginSpec(name="alpha", skills={"guide": skill_markdown("guide")})])
    skill_md = tmp_path / "plugins" / "alpha" / "skills" / "guide" / "SKILL.md"
    skill_md.write_bytes(b"---\nname: guide\ndescription: caf\xe9\n---\n\n# Guide\n")

    report = validate_bundle(tmp_path)

    assert len(report.errors) == 1
    assert report.errors[0].location == "plugins/alpha/skills/guide/SKILL.md"
    assert report.errors[0].message == "not valid UTF-8"
    assert report.skills_checked == 0
