"""Pytest configuration and fixtures."""
import sys
from pathlib import Path
from typing import Any, Dict, Generator

import pytest
from unittest.mock import MagicMock, patch

# Add the src directory to the Python path
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT / "src"))

from journal_citations.config import Config  # noqa: E402
from journal_citations.models import ArticleRecord, Author, VolumeInfo  # noqa: E402


@pytest.fixture
def sample_article() -> ArticleRecord:
    """Single-author article with every optional field set."""
    return ArticleRecord(
        title="X",
        authors=(Author(first_name="Jane", last_name="Doe"),),
        published_date="2023-05-01",
        volume=VolumeInfo(volume="4"),
        issue="2",
        pages="10-20",
        doi="10.1/x",
    )


@pytest.fixture
def minimal_article() -> ArticleRecord:
    """Article with only a title."""
    return ArticleRecord(title="Untitled Findings")


@pytest.fixture
def sample_api_article() -> Dict[str, Any]:
    """Return an article as served by the journal API."""
    return {
        "_id": "665f1c2e9b1e8a0012345678",
        "title": "Malaria Prevalence in Rural Clinics",
        "abstract": "A cross-sectional study.",
        "authors": [
            {"_id": "a1", "firstName": "Amina", "lastName": "Bello",
             "email": "amina@example.com", "affiliation": "University of Ibadan"},
            {"_id": "a2", "firstName": "Kofi", "lastName": "Mensah",
             "email": "kofi@example.com", "affiliation": "KNUST"},
        ],
        "keywords": ["malaria"],
        "doi": "10.5555/amhsj.2024.007",
        "pages": {"start": 45, "end": 52},
        "publishedDate": "2024-03-15T00:00:00.000Z",
        "status": "published",
        "volume": {"_id": "v2", "volume": 2, "year": 2024},
        "issue": 1,
        "articleNumber": "7",
    }


@pytest.fixture
def mock_requests_get() -> Generator[MagicMock, None, None]:
    """Mock for requests.get."""
    with patch('requests.get') as mock_get:
        yield mock_get


@pytest.fixture(autouse=True)
def mock_config(monkeypatch) -> None:
    """Point Config at a test API and quiet logging.

    Config reads the environment once at import, so the class attributes are
    patched directly and restored after each test.
    """
    monkeypatch.setattr(Config, "JOURNAL_API_URL", "http://journal.test")
    monkeypatch.setattr(Config, "LOG_LEVEL", "WARNING")
    monkeypatch.setattr(Config, "DEFAULT_FORMAT", "custom")
