"""Data source implementations for dependency enrichment."""

from .golang import GoPkgSource
from .npm import NpmRegistrySource

__all__ = [
    "GoPkgSource",
    "NpmRegistrySource",
]
