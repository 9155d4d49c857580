"""Source repository URL extraction and license file discovery."""

import re
from typing import Optional

import requests

from deps_report.exceptions import InvalidRepoUrlError
from deps_report.http_client import DEFAULT_TIMEOUT
from deps_report.logging_config import logger

# Captures the path between the last colon and a trailing ".git"-like suffix:
#   git+ssh://git@github.com:user/repo.git   -> user/repo
#   git+https://github.com/user/repo.git     -> //github.com/user/repo
REPO_URL_PATTERN = re.compile(r"^.*:(.*)\.[a-z#.]*$")

# Probed in order; the first one that exists wins
LICENSE_FILES = (
    "LICENSE",
    "LICENSE.md",
    "LICENSE.txt",
    "LICENSE-MIT",
    "LICENCE",
    "LICENCE.md",
    "license",
    "license.md",
    "COPYING",
)


def extract_repository_url(raw_url: str, dependency: Optional[str] = None) -> str:
    """
    Turn a registry ``repository.url`` into an https URL candidate.

    Args:
        raw_url: Raw repository URL from the registry document
        dependency: Dependency name, attached to errors for context

    Returns:
        Candidate URL of the form ``https://<path>``

    Raises:
        InvalidRepoUrlError: If the URL does not match REPO_URL_PATTERN
    """
    match = REPO_URL_PATTERN.match(raw_url)
    if not match:
        raise InvalidRepoUrlError(raw_url, dependency)
    return "https://" + match.group(1).lstrip("/")


def resolve_repository_url(
    candidate: str, session: requests.Session, timeout: float = DEFAULT_TIMEOUT
) -> str:
    """
    Follow redirects from a candidate repository URL.

    Args:
        candidate: URL produced by extract_repository_url
        session: requests.Session with configured headers
        timeout: Request timeout in seconds

    Returns:
        The final URL on HTTP 200, otherwise the candidate unchanged

    Raises:
        requests.exceptions.RequestException: On transport errors
    """
    response = session.get(candidate, timeout=timeout, allow_redirects=True)
    if response.status_code == 200:
        return response.url
    logger.debug(f"Repository {candidate} returned HTTP {response.status_code}, keeping candidate URL")
    return candidate


def find_license_url(
    repo_url: str, session: requests.Session, timeout: float = DEFAULT_TIMEOUT
) -> Optional[str]:
    """
    Probe well-known license file names in a repository.

    Args:
        repo_url: Resolved repository URL
        session: requests.Session with configured headers
        timeout: Request timeout in seconds

    Returns:
        URL of the first license file answering HTTP 200, or None

    Raises:
        requests.exceptions.RequestException: On transport errors
    """
    base = repo_url.rstrip("/")
    for license_file in LICENSE_FILES:
        license_url = f"{base}/blob/master/{license_file}"
        response = session.get(license_url, timeout=timeout)
        if response.status_code == 200:
            return license_url

    logger.debug(f"No license file found in {repo_url}")
    return None
