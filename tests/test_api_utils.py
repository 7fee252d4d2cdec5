"""Tests for the journal API client."""
from unittest.mock import MagicMock

import pytest
import requests
from requests.exceptions import ConnectionError, HTTPError

from journal_citations.api import JournalAPI, handle_api_response
from journal_citations.utils.error_handling import APIError


def make_response(payload=None, status_code=200, json_error=False):
    response = MagicMock()
    response.status_code = status_code
    response.text = "body"
    if status_code >= 400:
        error_response = MagicMock()
        error_response.status_code = status_code
        response.raise_for_status.side_effect = HTTPError(
            f"{status_code} Error", response=error_response
        )
    if json_error:
        response.json.side_effect = requests.exceptions.JSONDecodeError("Expecting value", "body", 0)
    else:
        response.json.return_value = payload
    return response


class TestHandleAPIResponse:
    """Tests for the handle_api_response function."""

    def test_handle_valid_response(self):
        """Test handling a valid JSON response."""
        assert handle_api_response(make_response({"key": "value"})) == {"key": "value"}

    def test_unwraps_data_envelope(self):
        """Test that a {"data": ...} envelope is unwrapped."""
        response = make_response({"success": True, "data": {"title": "T"}})
        assert handle_api_response(response) == {"title": "T"}

    def test_handle_invalid_json(self):
        """Test handling invalid JSON response."""
        with pytest.raises(APIError) as exc_info:
            handle_api_response(make_response(json_error=True), "Test API")
        assert "invalid JSON" in str(exc_info.value)

    def test_handle_http_error(self):
        """Test that HTTP errors keep their status code."""
        with pytest.raises(APIError) as exc_info:
            handle_api_response(make_response(status_code=404), "Test API")
        assert exc_info.value.status_code == 404
        assert "(Status: 404)" in str(exc_info.value)


class TestJournalAPI:
    """Tests for JournalAPI requests and conversions."""

    def test_get_article(self, mock_requests_get, sample_api_article):
        """Test fetching and converting a single article."""
        mock_requests_get.return_value = make_response(sample_api_article)
        api = JournalAPI(base_url="http://journal.test/api/v1/", timeout=5)

        record = api.get_article("665f1c2e9b1e8a0012345678")

        mock_requests_get.assert_called_once_with(
            "http://journal.test/api/v1/articles/665f1c2e9b1e8a0012345678",
            params=None,
            timeout=5,
        )
        assert record.title == "Malaria Prevalence in Rural Clinics"
        assert record.article_number == "7"

    def test_get_article_by_number(self, mock_requests_get, sample_api_article):
        """Test the volume/article-number endpoint path."""
        mock_requests_get.return_value = make_response(sample_api_article)
        api = JournalAPI(base_url="http://journal.test/api/v1")

        api.get_article_by_number(2, "007")

        url = mock_requests_get.call_args[0][0]
        assert url == "http://journal.test/api/v1/articles/volume/2/article/007"

    def test_get_volume_articles(self, mock_requests_get, sample_api_article):
        """Test fetching every article in a volume."""
        mock_requests_get.return_value = make_response([sample_api_article, sample_api_article])
        records = JournalAPI(base_url="http://journal.test/api/v1").get_volume_articles(2)
        assert len(records) == 2

    def test_unexpected_payload(self, mock_requests_get):
        """Test that a list where an article is expected raises."""
        mock_requests_get.return_value = make_response(["not", "an", "article"])
        with pytest.raises(APIError):
            JournalAPI(base_url="http://journal.test/api/v1").get_article("x")

    def test_default_base_url_from_config(self):
        """Test the base URL defaults to the configured API."""
        api = JournalAPI()
        assert api.base_url == "http://journal.test/api/v1"

    def test_connection_error(self, mock_requests_get):
        """Test that network failures surface as APIError."""
        mock_requests_get.side_effect = ConnectionError("refused")
        with pytest.raises(APIError) as exc_info:
            JournalAPI(base_url="http://journal.test/api/v1").get_article("x")
        assert exc_info.value.status_code is None
