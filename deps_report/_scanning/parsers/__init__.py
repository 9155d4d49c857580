"""Manifest parsers for go.mod and package.json."""

from .go_mod import GO_MOD_FILE, parse_go_mod
from .package_json import PACKAGE_JSON_FILE, PACKAGE_JSON_SCHEMA, load_package_json

__all__ = [
    "GO_MOD_FILE",
    "PACKAGE_JSON_FILE",
    "PACKAGE_JSON_SCHEMA",
    "load_package_json",
    "parse_go_mod",
]
