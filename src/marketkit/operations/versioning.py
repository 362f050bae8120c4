"""Plugin version bumping that keeps manifest and registry in sync."""

import logging
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Literal

from marketkit.io.json_document import load_json_document, save_json_document
from marketkit.io.manifest import get_plugin_manifest_path
from marketkit.io.marketplace import get_marketplace_path, load_marketplace, resolve_plugin_source

logger = logging.getLogger(__name__)

VersionPart = Literal["major", "minor", "patch"]

_VERSION_PATTERN = re.compile(r"^(\d+)\.(\d+)\.(\d+)$")


def bump_version(version: str, part: VersionPart) -> str:
    """Bump one component of an X.Y.Z version, zeroing the lower ones.

    Raises:
        ValueError: If version is not X.Y.Z
    """
    match = _VERSION_PATTERN.match(version)
    if match is None:
        raise ValueError(f"Cannot bump version '{version}': expected X.Y.Z")

    major, minor, patch = (int(group) for group in match.groups())
    if part == "major":
        return f"{major + 1}.0.0"
    if part == "minor":
        return f"{major}.{minor + 1}.0"
    return f"{major}.{minor}.{patch + 1}"


@dataclass(frozen=True)
class VersionBump:
    plugin_name: str
    old_version: str
    new_version: str
    changed_files: list[Path]


def bump_plugin_version(
    bundle_root: Path, plugin_name: str, part: VersionPart, dry_run: bool = False
) -> VersionBump:
    """Bump a plugin's version in its manifest and its registry entry.

    The manifest version wins when both are set; a missing one is filled in.

    Raises:
        ValueError: If the plugin is unknown or remote, or its version is missing or
            not a string
        BundleLoadError: If the registry or manifest cannot be read
    """
    registry = load_marketplace(bundle_root)
    entry = registry.get_plugin(plugin_name)
    if entry is None:
        raise ValueError(f"Plugin '{plugin_name}' is not in the marketplace registry")

    plugin_dir = resolve_plugin_source(bundle_root, registry, entry)
    if plugin_dir is None:
        raise ValueError(f"Plugin '{plugin_name}' has a remote source and cannot be bumped")

    manifest_path = get_plugin_manifest_path(plugin_dir)
    marketplace_path = get_marketplace_path(bundle_root)
    manifest_data = load_json_document(manifest_path)
    marketplace_data = load_json_document(marketplace_path)

    old_version = manifest_data.get("version") or entry.version
    if not old_version:
        raise ValueError(f"Plugin '{plugin_name}' has no version to bump")
    if not isinstance(old_version, str):
        raise ValueError(
            f"Plugin '{plugin_name}' has a non-string version in {manifest_path.name}: "
            f"{old_version!r}"
        )

    new_version = bump_version(old_version, part)
    logger.debug("Bumping %s: %s -> %s", plugin_name, old_version, new_version)

    manifest_data["version"] = new_version
    for plugin_data in marketplace_data.get("plugins", []):
        if plugin_data.get("name") == plugin_name:
            plugin_data["version"] = new_version
            break

    if not dry_run:
        save_json_document(manifest_path, manifest_data)
        save_json_document(marketplace_path, marketplace_data)

    return VersionBump(
        plugin_name=plugin_name,
        old_version=old_version,
        new_version=new_version,
        changed_files=[manifest_path, marketplace_path],
    )
