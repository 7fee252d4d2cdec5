"""Error handling utilities."""
import logging
from functools import wraps
from typing import Any, Callable, Optional

logger = logging.getLogger(__name__)


class UnsupportedFormatError(ValueError):
    """Raised when a citation format key is not registered."""
    def __init__(self, kind: str):
        self.kind = kind
        super().__init__(f"Unsupported citation format: {kind!r}")


class APIError(Exception):
    """Base exception for journal API errors."""
    def __init__(self, message: str, status_code: Optional[int] = None, response_text: Optional[str] = None):
        self.message = message
        self.status_code = status_code
        self.response_text = response_text
        super().__init__(self.message)

    def __str__(self) -> str:
        if self.status_code:
            return f"{self.message} (Status: {self.status_code})"
        return self.message


def formatting_error_handler(fallback: Any = "") -> Callable[[Callable], Callable]:
    """
    Decorator for citation generators.

    A malformed record must never surface as an exception to the caller, so
    failures are logged and ``fallback`` is returned instead.
    """
    def decorator(func: Callable) -> Callable:
        @wraps(func)
        def wrapper(*args, **kwargs) -> Any:
            try:
                return func(*args, **kwargs)
            except Exception as e:
                logger.error(f"Formatting error in {func.__name__}: {str(e)}")
                return fallback
        return wrapper
    return decorator


def file_operation_handler(func: Callable) -> Callable:
    """Decorator for handling file operation errors."""
    @wraps(func)
    def wrapper(*args, **kwargs) -> Any:
        try:
            return func(*args, **kwargs)
        except (OSError, ValueError) as e:
            logger.error(f"File operation error in {func.__name__}: {str(e)}")
            return None
    return wrapper
