"""pkg.go.dev data source for Go module license information."""

import html
import re
from typing import Optional

import requests
from packageurl import PackageURL

from deps_report._report.row import ReportRow
from deps_report._scanning.models import GOLANG, DependencySpec
from deps_report.exceptions import EnrichmentError
from deps_report.http_client import DEFAULT_TIMEOUT
from deps_report.logging_config import logger

GO_PKG_BASE = "https://pkg.go.dev"

# pkg.go.dev renders the first detected license as <div id="#lic-0">MIT</div>
LICENSE_PATTERN = re.compile(r'<div id="#?lic-0">(.*?)</div>')


class GoPkgSource:
    """
    Data source for Go modules.

    The documentation link is derived from the module path; the license
    name is scraped from the module's licenses tab.

    Priority: 10 (native source)
    Supports: pkg:golang/* modules
    """

    def __init__(self, timeout: float = DEFAULT_TIMEOUT, base_url: str = GO_PKG_BASE) -> None:
        self.timeout = timeout
        self.base_url = base_url.rstrip("/")

    @property
    def name(self) -> str:
        return "pkg.go.dev"

    @property
    def priority(self) -> int:
        return 10

    def supports(self, purl: PackageURL) -> bool:
        """Check if this source supports the given PURL."""
        return purl.type == GOLANG

    def doc_url(self, module: str) -> str:
        return f"{self.base_url}/{module}"

    def license_page_url(self, module: str) -> str:
        return f"{self.doc_url(module)}?tab=licenses"

    def enrich(self, dependency: DependencySpec, session: requests.Session) -> Optional[ReportRow]:
        """
        Build the Backend sheet row for a Go module.

        Args:
            dependency: Go module dependency
            session: requests.Session with configured headers

        Returns:
            ReportRow; license cells stay empty when the page or the
            license marker is missing

        Raises:
            EnrichmentError: On transport errors, carrying the name,
                version and doc link already known
        """
        row = ReportRow(
            name=dependency.name,
            version=dependency.version,
            link=self.doc_url(dependency.name),
        )

        license_url = self.license_page_url(dependency.name)
        logger.info(f"Fetch license for {dependency.name}")

        try:
            response = session.get(license_url, timeout=self.timeout)
        except requests.exceptions.RequestException as e:
            raise EnrichmentError(dependency.name, e, row=row) from e

        if response.status_code != 200:
            logger.info(f"License page for {dependency.name} returned HTTP {response.status_code}")
            return row

        match = LICENSE_PATTERN.search(response.text)
        if not match:
            logger.info(f"Can't find license for {dependency.name}")
            return row

        row.license = html.unescape(match.group(1)).strip()
        row.license_link = license_url
        return row
