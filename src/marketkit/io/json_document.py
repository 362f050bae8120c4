"""JSON document read/write with atomic writes."""

import json
from pathlib import Path
from typing import Any

from marketkit.errors import BundleLoadError


def load_json_document(path: Path) -> dict[str, Any]:
    """Read a JSON object from disk.

    Raises:
        BundleLoadError: If the file is missing, is not valid JSON, or is not an object
    """
    if not path.exists():
        raise BundleLoadError(path, "file not found")

    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except UnicodeDecodeError as e:
        raise BundleLoadError(path, "not valid UTF-8") from e
    except json.JSONDecodeError as e:
        raise BundleLoadError(path, f"invalid JSON at line {e.lineno}: {e.msg}") from e

    if not isinstance(data, dict):
        raise BundleLoadError(path, f"expected a JSON object, got {type(data).__name__}")

    return data


def save_json_document(path: Path, data: dict[str, Any]) -> None:
    """Save a JSON object atomically.

    Writes to a temporary file first, then renames to avoid corruption.
    Key order is preserved so diffs against hand-edited files stay small.
    """
    path.parent.mkdir(parents=True, exist_ok=True)

    temp_path = path.with_suffix(path.suffix + ".tmp")
    with temp_path.open("w", encoding="utf-8") as f:
        json.dump(data, f, indent=2, ensure_ascii=False)
        f.write("\n")

    temp_path.replace(path)
