"""Utility exception classes for folio.

This module provides aggregate exceptions and the user-facing error
formatting used by the CLI.
"""

from typing import Any, List, Optional, Tuple

from ..exceptions import (
    FolioError,
    APIError,
    ConfigError,
    ContentNotFoundError,
    FrontMatterError,
    MaxRetriesExceededError,
    RateLimitError,
    RenderError,
)


class BulkValidationError(FolioError):
    """Exception raised when one or more content documents fail validation."""

    def __init__(
        self,
        message: str,
        valid_documents: int = 0,
        failures: Optional[List[Tuple[str, str]]] = None,
        **kwargs: Any
    ) -> None:
        """Initialize the exception.

        Args:
            message: Human-readable error message
            valid_documents: Number of documents that passed validation
            failures: (file path, error message) for each failing document
            **kwargs: Additional arguments
        """
        super().__init__(message, **kwargs)
        self.valid_documents = valid_documents
        self.failures = failures or []

    def get_summary(self) -> str:
        total = self.valid_documents + len(self.failures)
        return f"{len(self.failures)} of {total} documents failed validation"


def format_error_for_user(error: Exception, debug: bool = False) -> str:
    """Format an error message for user display.

    Args:
        error: The exception to format
        debug: Whether to include debug information

    Returns:
        Formatted error message
    """
    if isinstance(error, BulkValidationError):
        message = f"{error.message}\n{error.get_summary()}"
        limit = None if debug else 5
        for path, reason in error.failures[:limit]:
            message += f"\n  - {path}: {reason}"
        if limit is not None and len(error.failures) > limit:
            message += f"\n  ... and {len(error.failures) - limit} more"
        return message

    if isinstance(error, FrontMatterError):
        message = f"Front-matter error: {error.message}"
        if error.file_path:
            message += f"\nFile: {error.file_path}"
        if error.field:
            message += f"\nField: {error.field}"
        if debug and error.details.get("errors"):
            message += f"\nDetails: {', '.join(error.details['errors'])}"
        return message

    if isinstance(error, ContentNotFoundError):
        return f"Not found: {error.message}"

    if isinstance(error, ConfigError):
        return f"Configuration error: {error.message}"

    if isinstance(error, RenderError):
        message = f"Render error: {error.message}"
        if debug and error.template:
            message += f"\nTemplate: {error.template}"
        return message

    if isinstance(error, RateLimitError):
        message = f"Rate limit exceeded: {error.message}"
        if error.retry_after:
            message += f"\nRetry after: {error.retry_after} seconds"
        return message

    if isinstance(error, APIError):
        message = f"API error: {error.message}"
        if error.status_code:
            message += f"\nStatus code: {error.status_code}"
        if error.response_data and debug:
            message += f"\nResponse: {error.response_data}"
        return message

    if isinstance(error, MaxRetriesExceededError):
        message = f"Request failed after {error.attempts} attempts"
        if debug and error.last_exception:
            message += f"\nLast error: {error.last_exception}"
        return message

    if debug:
        return f"Error: {str(error)}\nType: {type(error).__name__}"
    return f"Error: {str(error)}"
