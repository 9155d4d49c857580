"""Tests for repository URL extraction, resolution and license discovery."""

import pytest
import requests

from deps_report._enrichment.repository import (
    LICENSE_FILES,
    extract_repository_url,
    find_license_url,
    resolve_repository_url,
)
from deps_report.exceptions import InvalidRepoUrlError


class TestExtractRepositoryUrl:
    """Test extract_repository_url."""

    @pytest.mark.parametrize(
        "raw,expected",
        [
            ("git+ssh://git@github.com:user/repo.git", "https://user/repo"),
            ("git+https://github.com/facebook/react.git", "https://github.com/facebook/react"),
            ("git://github.com/lodash/lodash.git", "https://github.com/lodash/lodash"),
            ("https://github.com/axios/axios.git", "https://github.com/axios/axios"),
            ("git+https://github.com/user/repo.git#main", "https://github.com/user/repo"),
        ],
    )
    def test_valid_urls(self, raw, expected):
        assert extract_repository_url(raw) == expected

    @pytest.mark.parametrize(
        "raw",
        [
            "github:user/repo",
            "https://github.com/user/repo",
            "not a url",
            "",
        ],
    )
    def test_invalid_urls_raise(self, raw):
        with pytest.raises(InvalidRepoUrlError) as exc_info:
            extract_repository_url(raw, "some-package")
        assert exc_info.value.url == raw
        assert exc_info.value.dependency == "some-package"


class TestResolveRepositoryUrl:
    """Test resolve_repository_url."""

    def test_success_returns_final_url(self, mock_session, make_response):
        mock_session.get.return_value = make_response(200, url="https://github.com/lodash/lodash")

        result = resolve_repository_url("https://github.com/lodash/lodash.js", mock_session, timeout=5)

        assert result == "https://github.com/lodash/lodash"
        mock_session.get.assert_called_once_with(
            "https://github.com/lodash/lodash.js", timeout=5, allow_redirects=True
        )

    def test_non_success_keeps_candidate(self, mock_session, make_response):
        mock_session.get.return_value = make_response(404, url="https://github.com/404")

        assert resolve_repository_url("https://user/repo", mock_session) == "https://user/repo"

    def test_transport_error_propagates(self, mock_session):
        mock_session.get.side_effect = requests.exceptions.ConnectionError("boom")

        with pytest.raises(requests.exceptions.ConnectionError):
            resolve_repository_url("https://user/repo", mock_session)


class TestFindLicenseUrl:
    """Test find_license_url."""

    def test_first_hit_wins_and_stops(self, mock_session, make_response):
        mock_session.get.side_effect = [make_response(404), make_response(200), make_response(200)]

        result = find_license_url("https://github.com/user/repo", mock_session)

        assert result == f"https://github.com/user/repo/blob/master/{LICENSE_FILES[1]}"
        assert mock_session.get.call_count == 2

    def test_probes_in_order(self, mock_session, make_response):
        mock_session.get.return_value = make_response(404)

        find_license_url("https://github.com/user/repo/", mock_session)

        called = [call.args[0] for call in mock_session.get.call_args_list]
        assert called == [f"https://github.com/user/repo/blob/master/{name}" for name in LICENSE_FILES]

    def test_no_license_file_returns_none(self, mock_session, make_response):
        mock_session.get.return_value = make_response(404)

        assert find_license_url("https://github.com/user/repo", mock_session) is None

    def test_transport_error_propagates(self, mock_session):
        mock_session.get.side_effect = requests.exceptions.Timeout()

        with pytest.raises(requests.exceptions.Timeout):
            find_license_url("https://github.com/user/repo", mock_session)
