"""Marketplace registry I/O."""

import logging
from pathlib import Path

from pydantic import ValidationError

from marketkit.errors import BundleLoadError
from marketkit.io.json_document import load_json_document
from marketkit.models.marketplace import MarketplaceRegistry, PluginEntry

logger = logging.getLogger(__name__)

MARKETPLACE_DIR = ".claude-plugin"
MARKETPLACE_FILE = "marketplace.json"


def get_marketplace_path(bundle_root: Path) -> Path:
    return bundle_root / MARKETPLACE_DIR / MARKETPLACE_FILE


def find_bundle_root(start: Path) -> Path | None:
    """Walk up from start to the first directory holding .claude-plugin/marketplace.json."""
    current = start.resolve()
    for candidate in (current, *current.parents):
        if get_marketplace_path(candidate).is_file():
            logger.debug("Found bundle root at %s", candidate)
            return candidate
    return None


def format_validation_error(error: ValidationError) -> str:
    """Flatten pydantic errors to 'field.path: message; ...'."""
    parts = []
    for item in error.errors():
        loc = ".".join(str(part) for part in item["loc"]) or "<root>"
        parts.append(f"{loc}: {item['msg']}")
    return "; ".join(parts)


def load_marketplace(bundle_root: Path) -> MarketplaceRegistry:
    """Load and validate .claude-plugin/marketplace.json.

    Raises:
        BundleLoadError: If the registry is missing, malformed, or fails schema validation
    """
    path = get_marketplace_path(bundle_root)
    data = load_json_document(path)

    try:
        return MarketplaceRegistry.model_validate(data)
    except ValidationError as e:
        raise BundleLoadError(path, format_validation_error(e)) from e


def resolve_plugin_source(
    bundle_root: Path, registry: MarketplaceRegistry, entry: PluginEntry
) -> Path | None:
    """Resolve a registry entry's source to a directory path.

    Returns None for remote sources. The returned path may not exist; callers
    check that themselves.

    Resolution:
    - "./plugins/x" and "plugins/x" are relative to the bundle root
    - a bare name ("x") is joined onto metadata.pluginRoot when one is set
    """
    source = entry.source
    if not isinstance(source, str) or not entry.is_local:
        return None

    plugin_root = registry.plugin_root
    is_bare_name = "/" not in source and not source.startswith(".")
    if is_bare_name and plugin_root is not None:
        return (bundle_root / plugin_root / source).resolve()

    return (bundle_root / source).resolve()
