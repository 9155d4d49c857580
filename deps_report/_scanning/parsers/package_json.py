"""Parser for npm package.json files."""

import json
from pathlib import Path
from typing import Any, Dict

import jsonschema

from deps_report.exceptions import ManifestParseError

PACKAGE_JSON_FILE = "package.json"

_DEPENDENCY_MAP = {
    "type": ["object", "null"],
    "additionalProperties": {"type": "string"},
    "propertyNames": {"minLength": 1},
}

# Only the two dependency blocks are read; everything else is ignored.
PACKAGE_JSON_SCHEMA: Dict[str, Any] = {
    "type": "object",
    "properties": {
        "dependencies": _DEPENDENCY_MAP,
        "peerDependencies": _DEPENDENCY_MAP,
    },
}


def load_package_json(path: Path) -> Dict[str, Any]:
    """
    Read and validate a package.json.

    Args:
        path: Path to the manifest

    Returns:
        The decoded JSON document

    Raises:
        ManifestParseError: If the file cannot be opened, is not JSON, or
            its dependency blocks are not string-to-string objects
    """
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except OSError as e:
        raise ManifestParseError(str(path), f"Failed to open file: {e}") from e
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise ManifestParseError(str(path), f"Failed to parse JSON: {e}") from e

    try:
        jsonschema.validate(instance=data, schema=PACKAGE_JSON_SCHEMA)
    except jsonschema.ValidationError as e:
        raise ManifestParseError(str(path), f"Unexpected manifest structure: {e.message}") from e

    return data
