"""Tests for http_client module."""

import sys
import unittest
from importlib.metadata import PackageNotFoundError
from unittest.mock import patch

import requests

from deps_report import _get_version
from deps_report.http_client import USER_AGENT, create_session, get_default_headers


class TestUserAgent(unittest.TestCase):
    """Tests for USER_AGENT constant."""

    def test_user_agent_format(self):
        self.assertTrue(USER_AGENT.startswith("deps-report/"))
        self.assertTrue(len(USER_AGENT.split("/")[1]) > 0)


class TestGetVersion(unittest.TestCase):
    """Tests for package version resolution."""

    @unittest.skipIf(sys.version_info < (3, 11), "tomllib requires Python 3.11")
    def test_falls_back_to_pyproject_when_not_installed(self):
        with patch("importlib.metadata.version", side_effect=PackageNotFoundError("deps-report")):
            self.assertEqual(_get_version(), "0.1.0")

    def test_unexpected_metadata_error_propagates(self):
        with patch("importlib.metadata.version", side_effect=RuntimeError("broken metadata")):
            with self.assertRaises(RuntimeError):
                _get_version()


class TestGetDefaultHeaders(unittest.TestCase):
    """Tests for get_default_headers function."""

    def test_default_headers_minimal(self):
        headers = get_default_headers()
        self.assertEqual(headers, {"User-Agent": USER_AGENT})


class TestCreateSession(unittest.TestCase):
    """Tests for create_session."""

    def test_session_has_user_agent(self):
        session = create_session()
        try:
            self.assertIsInstance(session, requests.Session)
            self.assertEqual(session.headers["User-Agent"], USER_AGENT)
        finally:
            session.close()


if __name__ == "__main__":
    unittest.main()
