"""package.json patching."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from create_app.errors import ManifestError
from create_app.template import MANIFEST_NAME
from create_app.utils import load_json, save_json


def patch_manifest(root: Path, name: str) -> dict[str, Any]:
    """Set the ``name`` field of ``<root>/package.json`` to *name*.

    Key order is preserved; the file is rewritten with two-space indentation.

    Returns:
        The patched manifest data.

    Raises:
        ManifestError: The file is missing, unparsable, or not a JSON object.
    """
    path = root / MANIFEST_NAME
    try:
        data = load_json(path)
    except FileNotFoundError:
        raise ManifestError(path, "file not found") from None
    except json.JSONDecodeError as exc:
        raise ManifestError(path, f"invalid JSON ({exc})") from exc

    if not isinstance(data, dict):
        raise ManifestError(path, "top-level value is not an object")

    data["name"] = name
    save_json(data, path)
    return data
