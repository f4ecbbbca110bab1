"""Utility modules for folio.

This package contains retry logic and error formatting helpers.
"""

from .retry import RetryManager
from .exceptions import BulkValidationError, format_error_for_user
from .context import get_config, get_site_context

__all__ = [
    "RetryManager",
    "BulkValidationError",
    "format_error_for_user",
    "get_config",
    "get_site_context",
]
