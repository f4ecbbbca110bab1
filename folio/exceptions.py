"""Exception classes for folio.

This module defines custom exception classes used throughout the application
for proper error handling and user feedback.
"""

from pathlib import Path
from typing import Optional, Dict, Any, Union


class FolioError(Exception):
    """Base exception class for all folio errors."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None) -> None:
        """Initialize the exception.

        Args:
            message: Human-readable error message
            details: Optional additional error details
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}


class ConfigError(FolioError):
    """Exception raised for configuration-related errors."""
    pass


class ValidationError(FolioError):
    """Exception raised for data validation errors."""
    pass


class FrontMatterError(ValidationError):
    """Exception raised when a post's front-matter header is missing or invalid."""

    def __init__(
        self,
        message: str,
        file_path: Optional[Union[str, Path]] = None,
        field: Optional[str] = None,
        **kwargs: Any
    ) -> None:
        """Initialize the exception.

        Args:
            message: Human-readable error message
            file_path: Document that failed to parse
            field: Front-matter field that failed validation
            **kwargs: Additional arguments passed to parent class
        """
        super().__init__(message, **kwargs)
        self.file_path = str(file_path) if file_path is not None else None
        self.field = field


class ThemeError(ValidationError):
    """Exception raised for unknown theme modes or color tokens."""
    pass


class ContentNotFoundError(FolioError):
    """Exception raised when a requested post does not exist."""

    def __init__(self, message: str, slug: Optional[str] = None, **kwargs: Any) -> None:
        super().__init__(message, **kwargs)
        self.slug = slug


class RenderError(FolioError):
    """Exception raised when a template fails to render."""

    def __init__(self, message: str, template: Optional[str] = None, **kwargs: Any) -> None:
        super().__init__(message, **kwargs)
        self.template = template


class MaxRetriesExceededError(FolioError):
    """Exception raised when maximum retry attempts are exceeded."""

    def __init__(
        self,
        message: str,
        attempts: int,
        last_exception: Optional[Exception] = None
    ) -> None:
        """Initialize the exception.

        Args:
            message: Human-readable error message
            attempts: Number of attempts made
            last_exception: The last exception that caused the failure
        """
        super().__init__(message)
        self.attempts = attempts
        self.last_exception = last_exception


class APIError(FolioError):
    """Base exception for giscus API errors."""

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        response_data: Optional[Dict[str, Any]] = None
    ) -> None:
        """Initialize the exception.

        Args:
            message: Human-readable error message
            status_code: HTTP status code
            response_data: Raw response data from API
        """
        super().__init__(message)
        self.status_code = status_code
        self.response_data = response_data or {}


class BadRequestError(APIError):
    """Exception raised for 400 Bad Request errors."""
    pass


class NotFoundError(APIError):
    """Exception raised for 404 Not Found errors."""
    pass


class ServerError(APIError):
    """Exception raised for 5xx server errors."""
    pass


class RateLimitError(APIError):
    """Exception raised for 429 Rate Limit errors."""

    def __init__(
        self,
        message: str,
        retry_after: Optional[int] = None,
        **kwargs: Any
    ) -> None:
        """Initialize the exception.

        Args:
            message: Human-readable error message
            retry_after: Seconds to wait before retrying
            **kwargs: Additional arguments passed to parent class
        """
        super().__init__(message, **kwargs)
        self.retry_after = retry_after
