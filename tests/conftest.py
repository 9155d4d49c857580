"""Pytest configuration and shared fixtures for all tests."""

from unittest.mock import Mock

import pytest
import requests


@pytest.fixture
def mock_session():
    """Create a mock requests session."""
    return Mock(spec=requests.Session)


@pytest.fixture
def make_response():
    """Factory for mock HTTP responses."""

    def _make(status_code=200, json_data=None, text="", url=None):
        response = Mock()
        response.status_code = status_code
        response.text = text
        response.url = url
        if isinstance(json_data, Exception):
            response.json.side_effect = json_data
        else:
            response.json.return_value = json_data
        return response

    return _make


@pytest.fixture
def write_file():
    """Write a file below a directory, creating parents."""

    def _write(base, relative, content):
        path = base / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
        return path

    return _write
