"""Configuration loader with environment variable support."""
import os

from dotenv import load_dotenv

# Load environment variables from .env file if it exists
load_dotenv()


def _float_env(name: str, default: float) -> float:
    try:
        return float(os.getenv(name, default))
    except ValueError:
        return default


class Config:
    """Application configuration."""

    # Journal API
    JOURNAL_API_URL: str = os.getenv("JOURNAL_API_URL", "http://localhost:3001")
    API_VERSION_PATH: str = "/api/v1"
    API_TIMEOUT: float = _float_env("API_TIMEOUT", 10.0)

    # Citation output
    DEFAULT_FORMAT: str = os.getenv("DEFAULT_FORMAT", "custom")

    # Logging
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")
    LOG_DIR: str = os.getenv("LOG_DIR", "logs")

    @classmethod
    def api_base_url(cls) -> str:
        """Base URL for versioned journal API endpoints."""
        return cls.JOURNAL_API_URL.rstrip("/") + cls.API_VERSION_PATH
