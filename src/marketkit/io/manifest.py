"""Plugin manifest I/O."""

from pathlib import Path

from pydantic import ValidationError

from marketkit.errors import BundleLoadError
from marketkit.io.json_document import load_json_document
from marketkit.io.marketplace import format_validation_error
from marketkit.models.plugin import PluginManifest

PLUGIN_MANIFEST_DIR = ".claude-plugin"
PLUGIN_MANIFEST_FILE = "plugin.json"


def get_plugin_manifest_path(plugin_dir: Path) -> Path:
    return plugin_dir / PLUGIN_MANIFEST_DIR / PLUGIN_MANIFEST_FILE


def load_plugin_manifest(plugin_dir: Path) -> PluginManifest:
    """Load .claude-plugin/plugin.json from a plugin directory."""
    path = get_plugin_manifest_path(plugin_dir)
    data = load_json_document(path)

    try:
        return PluginManifest.model_validate(data)
    except ValidationError as e:
        raise BundleLoadError(path, format_validation_error(e)) from e
