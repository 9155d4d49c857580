"""DataSource protocol for dependency enrichment plugins."""

from typing import Optional, Protocol

import requests
from packageurl import PackageURL

from deps_report._report.row import ReportRow
from deps_report._scanning.models import DependencySpec


class DataSource(Protocol):
    """
    Protocol defining the interface for data source plugins.

    Each data source turns a dependency of one ecosystem into a report
    row. Returning None means the dependency is skipped (no row).

    Example:
        class NpmRegistrySource:
            name = "registry.npmjs.org"
            priority = 10

            def supports(self, purl: PackageURL) -> bool:
                return purl.type == "npm"

            def enrich(self, dependency, session) -> Optional[ReportRow]:
                ...
    """

    @property
    def name(self) -> str:
        """Human-readable name of this data source, used for logging."""
        ...

    @property
    def priority(self) -> int:
        """Priority of this data source (lower = tried first)."""
        ...

    def supports(self, purl: PackageURL) -> bool:
        """
        Check if this source can handle the given PURL type.

        Args:
            purl: Parsed PackageURL object

        Returns:
            True if this source can enrich dependencies of this type
        """
        ...

    def enrich(self, dependency: DependencySpec, session: requests.Session) -> Optional[ReportRow]:
        """
        Build the report row for a dependency.

        Implementations should:
        1. Log and return None for soft failures (lookup miss, bad response)
        2. Raise EnrichmentError for transport failures, attaching any
           partial row already built
        3. Let fatal errors (InvalidRepoUrlError) propagate

        Args:
            dependency: Dependency discovered in a manifest
            session: requests.Session with configured headers

        Returns:
            ReportRow, or None to skip the dependency
        """
        ...
