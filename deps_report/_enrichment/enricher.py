"""Main Enricher class turning dependencies into report rows."""

from typing import Optional

import requests

from deps_report._report.row import ReportRow
from deps_report._scanning.models import DependencySpec
from deps_report.http_client import DEFAULT_TIMEOUT, create_session
from deps_report.logging_config import logger

from .registry import SourceRegistry
from .sources import GoPkgSource, NpmRegistrySource


def create_default_registry(timeout: float = DEFAULT_TIMEOUT) -> SourceRegistry:
    """
    Create a SourceRegistry with the default data sources.

    - NpmRegistrySource (10) - registry.npmjs.org for npm packages
    - GoPkgSource (10) - pkg.go.dev for Go modules

    Args:
        timeout: Per-request timeout in seconds used by every source

    Returns:
        Configured SourceRegistry
    """
    registry = SourceRegistry()
    registry.register(NpmRegistrySource(timeout=timeout))
    registry.register(GoPkgSource(timeout=timeout))
    return registry


class Enricher:
    """
    Enriches dependencies one at a time using the registered sources.

    Example:
        with Enricher() as enricher:
            row = enricher.enrich(dependency)
    """

    def __init__(self, registry: Optional[SourceRegistry] = None, timeout: float = DEFAULT_TIMEOUT) -> None:
        """
        Initialize the Enricher.

        Args:
            registry: Optional SourceRegistry. If not provided, creates
                      a default registry with all standard sources.
            timeout: Request timeout for the default registry
        """
        self._registry = registry or create_default_registry(timeout)
        self._session: Optional[requests.Session] = None

    @property
    def registry(self) -> SourceRegistry:
        """Get the source registry."""
        return self._registry

    def _get_session(self) -> requests.Session:
        """Get or create a requests session."""
        if self._session is None:
            self._session = create_session()
        return self._session

    def close(self) -> None:
        """Close the requests session."""
        if self._session:
            self._session.close()
            self._session = None

    def __enter__(self) -> "Enricher":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    def enrich(self, dependency: DependencySpec) -> Optional[ReportRow]:
        """
        Build the report row of a dependency.

        Args:
            dependency: Dependency discovered in a manifest

        Returns:
            ReportRow, or None if the dependency is skipped

        Raises:
            EnrichmentError: If the source hit a transport error
            InvalidRepoUrlError: If an npm package has a malformed repository URL
        """
        try:
            purl = dependency.purl
        except ValueError as e:
            logger.warning(f"Skipping {dependency}: cannot build a package URL ({e})")
            return None

        source = self._registry.get_source_for(purl)
        if source is None:
            logger.warning(f"No data source for {purl.type} dependency {dependency.name}")
            return None

        logger.debug(f"Enriching {dependency} from {source.name}")
        return source.enrich(dependency, self._get_session())
