"""Static validation of a marketplace bundle.

validate_bundle never raises for content problems. Every problem becomes a
ValidationIssue in the returned report, located relative to the bundle root.
"""

import logging
import re
from collections import Counter
from pathlib import Path

from marketkit.errors import BundleLoadError
from marketkit.io.hooks import get_hooks_path, load_hooks_config
from marketkit.io.links import extract_markdown_links
from marketkit.io.manifest import get_plugin_manifest_path, load_plugin_manifest
from marketkit.io.marketplace import get_marketplace_path, load_marketplace, resolve_plugin_source
from marketkit.io.skills import find_skill_files, load_skill
from marketkit.models.marketplace import MarketplaceRegistry, PluginEntry
from marketkit.models.plugin import PluginManifest
from marketkit.models.validation import ValidationReport

logger = logging.getLogger(__name__)

KEBAB_CASE = re.compile(r"^[a-z0-9]+(-[a-z0-9]+)*$")
SEMVER = re.compile(r"^\d+\.\d+\.\d+(?:[-+][0-9A-Za-z.-]+)?$")


def _rel(bundle_root: Path, path: Path) -> str:
    try:
        return path.relative_to(bundle_root).as_posix()
    except ValueError:
        return str(path)


def find_duplicates(values: list[str], case_sensitive: bool = True) -> list[str]:
    """Values occurring more than once, in first-seen order."""
    keys = values if case_sensitive else [value.lower() for value in values]
    counts = Counter(keys)
    seen: set[str] = set()
    duplicates: list[str] = []
    for value, key in zip(values, keys, strict=True):
        if counts[key] > 1 and key not in seen:
            seen.add(key)
            duplicates.append(value)
    return duplicates


def check_keywords(report: ValidationReport, location: str, keywords: list[str]) -> None:
    """Keyword lists must not repeat a keyword, ignoring case."""
    for keyword in find_duplicates(keywords, case_sensitive=False):
        report.error(location, f"Duplicate keyword: '{keyword}'")
    for keyword in keywords:
        if not keyword.strip():
            report.error(location, "Empty keyword")


def check_version(report: ValidationReport, location: str, version: str | None) -> None:
    if version is not None and not SEMVER.match(version):
        report.warning(location, f"Version '{version}' is not semver (X.Y.Z)")


def check_registry_entries(report: ValidationReport, registry: MarketplaceRegistry) -> None:
    """Registry-level checks that need no filesystem access."""
    location = _rel(report.bundle_root, get_marketplace_path(report.bundle_root))

    for name in find_duplicates(registry.plugin_names()):
        report.error(location, f"Duplicate plugin name in registry: '{name}'")

    for entry in registry.plugins:
        entry_location = f"{location} [{entry.name}]"
        if not KEBAB_CASE.match(entry.name):
            report.warning(entry_location, f"Plugin name '{entry.name}' is not kebab-case")
        if not entry.description:
            report.warning(entry_location, "Missing description")
        if not entry.category:
            report.warning(entry_location, "Missing category")
        check_version(report, entry_location, entry.version)
        check_keywords(report, entry_location, entry.keywords)


def check_manifest_against_entry(
    report: ValidationReport, location: str, entry: PluginEntry, manifest: PluginManifest
) -> None:
    """The manifest must describe the same plugin the registry lists."""
    if manifest.name != entry.name:
        report.error(
            location,
            f"Manifest name '{manifest.name}' does not match registry entry '{entry.name}'",
        )

    if entry.version is not None and manifest.version is not None:
        if entry.version != manifest.version:
            report.warning(
                location,
                f"Manifest version {manifest.version} differs from registry version "
                f"{entry.version}",
            )

    check_version(report, location, manifest.version)
    check_keywords(report, location, manifest.keywords)


def check_skill(report: ValidationReport, skill_md: Path, plugin_name: str) -> None:
    location = _rel(report.bundle_root, skill_md)
    try:
        skill = load_skill(skill_md, plugin_name)
    except BundleLoadError as e:
        report.error(location, e.reason)
        return

    report.skills_checked += 1

    if not KEBAB_CASE.match(skill.name):
        report.warning(location, f"Skill name '{skill.name}' is not kebab-case")
    if skill.name != skill_md.parent.name:
        report.warning(
            location,
            f"Skill name '{skill.name}' differs from its directory '{skill_md.parent.name}'",
        )

    # Links are counted from the first line of the file, not the body
    for link in extract_markdown_links(skill.body, line_offset=skill.body_line_offset):
        target = (skill_md.parent / link.target).resolve()
        if not target.exists():
            report.error(
                f"{location}:{link.line_number}",
                f"Broken link: {link.raw_text}",
            )


def check_hooks(report: ValidationReport, plugin_dir: Path) -> None:
    location = _rel(report.bundle_root, get_hooks_path(plugin_dir))
    try:
        config = load_hooks_config(plugin_dir)
    except BundleLoadError as e:
        report.error(location, e.reason)
        return

    if config is None:
        return

    if not config.hooks:
        report.warning(location, "hooks.json declares no hooks")


def check_plugin(
    report: ValidationReport, registry: MarketplaceRegistry, entry: PluginEntry
) -> Path | None:
    """Filesystem checks for one registry entry. Returns the plugin dir if it exists."""
    registry_location = _rel(report.bundle_root, get_marketplace_path(report.bundle_root))
    plugin_dir = resolve_plugin_source(report.bundle_root, registry, entry)

    if plugin_dir is None:
        logger.debug("Skipping remote source for %s", entry.name)
        return None

    if not plugin_dir.is_dir():
        report.error(
            f"{registry_location} [{entry.name}]",
            f"Source path does not exist: {entry.source}",
        )
        return None

    report.plugins_checked += 1
    manifest_location = _rel(report.bundle_root, get_plugin_manifest_path(plugin_dir))
    try:
        manifest = load_plugin_manifest(plugin_dir)
    except BundleLoadError as e:
        report.error(manifest_location, e.reason)
    else:
        check_manifest_against_entry(report, manifest_location, entry, manifest)

    for skill_md in find_skill_files(plugin_dir):
        check_skill(report, skill_md, entry.name)

    check_hooks(report, plugin_dir)
    return plugin_dir


def check_unlisted_plugins(
    report: ValidationReport, registry: MarketplaceRegistry, listed_dirs: set[Path]
) -> None:
    """Plugin directories under the plugin root that the registry never mentions."""
    plugin_root = report.bundle_root / (registry.plugin_root or "plugins")
    if not plugin_root.is_dir():
        return

    for candidate in sorted(plugin_root.iterdir()):
        if not candidate.is_dir():
            continue
        if not get_plugin_manifest_path(candidate).exists():
            continue
        if candidate.resolve() not in listed_dirs:
            report.warning(
                _rel(report.bundle_root, candidate),
                "Plugin directory is not listed in the marketplace registry",
            )


def validate_bundle(bundle_root: Path) -> ValidationReport:
    """Check a marketplace bundle: registry, manifests, skills and hooks."""
    bundle_root = bundle_root.resolve()
    report = ValidationReport(bundle_root=bundle_root)
    logger.debug("Validating bundle at %s", bundle_root)

    try:
        registry = load_marketplace(bundle_root)
    except BundleLoadError as e:
        report.error(_rel(bundle_root, e.path), e.reason)
        return report

    check_registry_entries(report, registry)

    listed_dirs: set[Path] = set()
    for entry in registry.plugins:
        plugin_dir = check_plugin(report, registry, entry)
        if plugin_dir is not None:
            listed_dirs.add(plugin_dir.resolve())

    check_unlisted_plugins(report, registry, listed_dirs)

    logger.debug(
        "Validation finished: %d error(s), %d warning(s)",
        len(report.errors),
        len(report.warnings),
    )
    return report
