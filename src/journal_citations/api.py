"""Client for the journal's article REST API."""
import logging
from typing import Any, Dict, List, Optional

import requests
from requests import Response
from requests.exceptions import RequestException

from .config import Config
from .models import ArticleRecord, records_from_api
from .utils.error_handling import APIError

logger = logging.getLogger(__name__)


def handle_api_response(response: Response, api_name: str = "Journal API") -> Any:
    """
    Handle API response and raise appropriate exceptions.

    Args:
        response: The response object from requests
        api_name: Name of the API for error messages

    Returns:
        Parsed JSON payload, unwrapped from a ``{"data": ...}`` envelope

    Raises:
        APIError: If the response indicates an error
    """
    try:
        response.raise_for_status()
        payload = response.json()
    except requests.exceptions.HTTPError as e:
        status_code = e.response.status_code if e.response is not None else response.status_code
        error_msg = f"{api_name} request failed"
        logger.error(f"{error_msg} (Status: {status_code}): {str(e)}")
        raise APIError(error_msg, status_code, str(e)) from e
    except ValueError as e:
        error_msg = f"{api_name} returned invalid JSON"
        logger.error(f"{error_msg}: {response.text[:200]}...")
        raise APIError(error_msg, response.status_code, response.text) from e

    if isinstance(payload, dict) and "data" in payload and "title" not in payload:
        return payload["data"]
    return payload


class JournalAPI:
    """Read-only client for journal articles."""

    def __init__(self, base_url: Optional[str] = None, timeout: Optional[float] = None):
        self.base_url = (base_url or Config.api_base_url()).rstrip("/")
        self.timeout = timeout if timeout is not None else Config.API_TIMEOUT

    def _get(self, endpoint: str, params: Optional[Dict[str, Any]] = None) -> Any:
        """Make a GET request against the API and return the parsed payload."""
        url = f"{self.base_url}/{endpoint.lstrip('/')}"
        logger.info(f"Calling Journal API: GET {url}")
        try:
            response = requests.get(url, params=params, timeout=self.timeout)
        except RequestException as e:
            logger.error(f"Journal API request failed: {e}")
            raise APIError(f"Journal API request failed: {e}") from e
        return handle_api_response(response)

    def get_article(self, article_id: str) -> ArticleRecord:
        """Fetch a single article by its id."""
        payload = self._get(f"articles/{article_id}")
        if not isinstance(payload, dict):
            raise APIError("Journal API returned an unexpected article payload")
        return ArticleRecord.from_api_article(payload)

    def get_article_by_number(self, volume_number: int, article_number: str) -> ArticleRecord:
        """Fetch an article by volume number and three-digit article number."""
        payload = self._get(f"articles/volume/{volume_number}/article/{article_number}")
        if not isinstance(payload, dict):
            raise APIError("Journal API returned an unexpected article payload")
        return ArticleRecord.from_api_article(payload)

    def get_volume_articles(self, volume_number: int) -> List[ArticleRecord]:
        """Fetch every article published in a volume."""
        payload = self._get(f"articles/volume/{volume_number}")
        if not isinstance(payload, list):
            raise APIError("Journal API returned an unexpected article list")
        return list(records_from_api(payload))
