"""Plugin-based dependency enrichment architecture."""

from .enricher import Enricher, create_default_registry
from .metadata import PackageMetadata
from .protocol import DataSource
from .registry import SourceRegistry
from .repository import (
    LICENSE_FILES,
    REPO_URL_PATTERN,
    extract_repository_url,
    find_license_url,
    resolve_repository_url,
)

__all__ = [
    "Enricher",
    "create_default_registry",
    "PackageMetadata",
    "DataSource",
    "SourceRegistry",
    "LICENSE_FILES",
    "REPO_URL_PATTERN",
    "extract_repository_url",
    "find_license_url",
    "resolve_repository_url",
]
