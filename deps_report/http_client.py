"""HTTP client utilities with consistent user agent."""

import requests

from deps_report import __version__

USER_AGENT = f"deps-report/{__version__}"
DEFAULT_TIMEOUT = 10  # seconds


def get_default_headers() -> dict:
    """Get default HTTP headers with user agent."""
    return {"User-Agent": USER_AGENT}


def create_session() -> requests.Session:
    """Create a requests.Session carrying the default headers."""
    session = requests.Session()
    session.headers.update(get_default_headers())
    return session
