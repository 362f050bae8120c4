"""Hook configuration I/O."""

from pathlib import Path

from pydantic import ValidationError

from marketkit.errors import BundleLoadError
from marketkit.io.json_document import load_json_document
from marketkit.io.marketplace import format_validation_error
from marketkit.models.hooks import HooksConfig

HOOKS_DIR = "hooks"
HOOKS_FILE = "hooks.json"


def get_hooks_path(plugin_dir: Path) -> Path:
    return plugin_dir / HOOKS_DIR / HOOKS_FILE


def load_hooks_config(plugin_dir: Path) -> HooksConfig | None:
    """Load hooks/hooks.json, or None if the plugin declares no hooks."""
    path = get_hooks_path(plugin_dir)
    if not path.exists():
        return None

    data = load_json_document(path)
    try:
        return HooksConfig.model_validate(data)
    except ValidationError as e:
        raise BundleLoadError(path, format_validation_error(e)) from e
