"""Manifest discovery and parsing."""

from .models import GOLANG, NPM, DependencySpec, ManifestDependencies
from .patterns import compile_patterns, matches_any
from .scanners import GoModScanner, ManifestScanner, PackageJSONScanner
from .walker import resolve_root, walk_manifests

__all__ = [
    "GOLANG",
    "NPM",
    "DependencySpec",
    "ManifestDependencies",
    "ManifestScanner",
    "GoModScanner",
    "PackageJSONScanner",
    "compile_patterns",
    "matches_any",
    "resolve_root",
    "walk_manifests",
]
