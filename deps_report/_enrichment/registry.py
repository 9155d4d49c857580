"""Source registry for managing data source plugins."""

from typing import Any, Dict, List, Optional

from packageurl import PackageURL

from deps_report.logging_config import logger

from .protocol import DataSource


class SourceRegistry:
    """
    Registry for managing and querying data source plugins.

    Example:
        registry = SourceRegistry()
        registry.register(NpmRegistrySource())
        registry.register(GoPkgSource())

        source = registry.get_source_for(dependency.purl)
    """

    def __init__(self) -> None:
        """Initialize an empty registry."""
        self._sources: List[DataSource] = []

    def register(self, source: DataSource) -> None:
        """
        Register a data source.

        Args:
            source: DataSource implementation to register
        """
        self._sources.append(source)
        logger.debug(f"Registered data source: {source.name} (priority={source.priority})")

    def get_sources_for(self, purl: PackageURL) -> List[DataSource]:
        """
        Get all applicable sources for a PURL, sorted by priority.

        Args:
            purl: Parsed PackageURL object

        Returns:
            Sources supporting this PURL type, highest priority first
        """
        applicable = [s for s in self._sources if s.supports(purl)]
        return sorted(applicable, key=lambda s: s.priority)

    def get_source_for(self, purl: PackageURL) -> Optional[DataSource]:
        """Return the highest priority source supporting a PURL, if any."""
        sources = self.get_sources_for(purl)
        return sources[0] if sources else None

    def list_sources(self) -> List[Dict[str, Any]]:
        """
        List all registered sources with their priorities.

        Returns:
            List of dicts with 'name' and 'priority' keys
        """
        return [{"name": s.name, "priority": s.priority} for s in sorted(self._sources, key=lambda s: s.priority)]
