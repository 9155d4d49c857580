"""npm registry data source for JavaScript package metadata."""

from typing import Optional

import requests
from packageurl import PackageURL

from deps_report._report.row import ReportRow
from deps_report._scanning.models import NPM, DependencySpec
from deps_report.exceptions import EnrichmentError
from deps_report.http_client import DEFAULT_TIMEOUT
from deps_report.logging_config import logger

from ..metadata import PackageMetadata
from ..repository import extract_repository_url, find_license_url, resolve_repository_url

NPM_REGISTRY_BASE = "https://registry.npmjs.org"


class NpmRegistrySource:
    """
    Data source for npm packages.

    Looks up ``{name}/{version}`` on the npm registry, resolves the
    package's source repository and probes it for a license file.

    Priority: 10 (native source)
    Supports: pkg:npm/* packages
    """

    def __init__(self, timeout: float = DEFAULT_TIMEOUT, registry_base: str = NPM_REGISTRY_BASE) -> None:
        self.timeout = timeout
        self.registry_base = registry_base.rstrip("/")

    @property
    def name(self) -> str:
        return "registry.npmjs.org"

    @property
    def priority(self) -> int:
        return 10

    def supports(self, purl: PackageURL) -> bool:
        """Check if this source supports the given PURL."""
        return purl.type == NPM

    def fetch_metadata(self, dependency: DependencySpec, session: requests.Session) -> Optional[PackageMetadata]:
        """
        Fetch the registry document of one package version.

        Args:
            dependency: npm dependency
            session: requests.Session with configured headers

        Returns:
            PackageMetadata, or None if the lookup failed or the response
            did not have the expected shape
        """
        url = f"{self.registry_base}/{dependency.name}/{dependency.version}"
        logger.info(f"Fetch {url}")

        try:
            response = session.get(url, timeout=self.timeout)
        except requests.exceptions.RequestException as e:
            logger.warning(f"Can't fetch package {dependency}. Skip this package. Error: {e}")
            return None

        if response.status_code != 200:
            logger.warning(f"Can't fetch package {dependency}. Skip this package. HTTP {response.status_code}")
            return None

        try:
            data = response.json()
        except ValueError as e:
            logger.warning(f"Can't parse response for {dependency}. Skip this package. Error: {e}")
            return None

        metadata = PackageMetadata.from_registry(data)
        if metadata is None:
            logger.warning(f"Can't parse response for {dependency}. Skip this package. Error: unexpected metadata shape")
        return metadata

    def enrich(self, dependency: DependencySpec, session: requests.Session) -> Optional[ReportRow]:
        """
        Build the Web sheet row for an npm dependency.

        Args:
            dependency: npm dependency
            session: requests.Session with configured headers

        Returns:
            ReportRow, or None when the registry lookup failed

        Raises:
            InvalidRepoUrlError: If the registry repository URL has an unexpected shape
            EnrichmentError: On transport errors while resolving the repository
        """
        metadata = self.fetch_metadata(dependency, session)
        if metadata is None:
            return None

        candidate = extract_repository_url(metadata.repository_url, dependency.name)
        try:
            repo_url = resolve_repository_url(candidate, session, self.timeout)
        except requests.exceptions.RequestException as e:
            raise EnrichmentError(dependency.name, e) from e

        row = ReportRow(
            name=metadata.name,
            version=metadata.version,
            link=metadata.homepage,
            license=metadata.license,
        )

        try:
            row.license_link = find_license_url(repo_url, session, self.timeout)
        except requests.exceptions.RequestException as e:
            raise EnrichmentError(dependency.name, e, row=row) from e

        return row
