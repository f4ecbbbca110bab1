"""Retry logic with exponential backoff.

This module provides the retry mechanism used for giscus API calls,
with exponential backoff and jitter for transient network failures.
"""

import time
import random
from typing import Callable, TypeVar, Optional, List

from requests.exceptions import ConnectionError, Timeout, HTTPError

from ..exceptions import MaxRetriesExceededError, ServerError

T = TypeVar("T")


class RetryManager:
    """Manages retry logic with exponential backoff and jitter."""

    def __init__(
        self,
        max_retries: int = 3,
        base_delay: float = 1.0,
        max_delay: float = 30.0,
        backoff_factor: float = 2.0,
        jitter: bool = True,
    ) -> None:
        """Initialize retry manager.

        Args:
            max_retries: Maximum number of retry attempts
            base_delay: Base delay in seconds
            max_delay: Maximum delay in seconds
            backoff_factor: Multiplier for exponential backoff
            jitter: Whether to add random jitter to delays
        """
        self.max_retries = max_retries
        self.base_delay = base_delay
        self.max_delay = max_delay
        self.backoff_factor = backoff_factor
        self.jitter = jitter

        self._retry_conditions: List[Callable[[Exception], bool]] = []
        self._default_retry_conditions()

    def _default_retry_conditions(self) -> None:
        """Set up default retry conditions."""
        # Network errors
        self.add_retry_condition(lambda exc: isinstance(exc, (ConnectionError, Timeout)))

        # 5xx responses, raw or already mapped
        self.add_retry_condition(lambda exc: isinstance(exc, ServerError))
        self.add_retry_condition(
            lambda exc: isinstance(exc, HTTPError) and exc.response is not None and exc.response.status_code >= 500
        )

    def add_retry_condition(self, condition: Callable[[Exception], bool]) -> None:
        """Add a condition for when to retry.

        Args:
            condition: Function that takes an exception and returns True if should retry
        """
        self._retry_conditions.append(condition)

    def should_retry(self, exception: Exception) -> bool:
        return any(condition(exception) for condition in self._retry_conditions)

    def calculate_delay(self, attempt: int) -> float:
        """Calculate delay for a retry attempt.

        Args:
            attempt: Attempt number (0-based)

        Returns:
            Delay in seconds
        """
        delay = min(self.base_delay * (self.backoff_factor ** attempt), self.max_delay)

        if self.jitter:
            # Between 0% and 100% extra
            delay += delay * random.random()

        return delay

    def execute_with_retry(self, operation: Callable[[], T]) -> T:
        """Execute an operation with retry logic.

        Non-retryable exceptions propagate unchanged on the first failure.

        Raises:
            MaxRetriesExceededError: If every attempt failed with a retryable error
        """
        last_exception: Optional[Exception] = None

        for attempt in range(self.max_retries + 1):
            try:
                return operation()
            except Exception as e:
                if not self.should_retry(e):
                    raise
                last_exception = e

                if attempt == self.max_retries:
                    break

                time.sleep(self.calculate_delay(attempt))

        raise MaxRetriesExceededError(
            f"Maximum retries ({self.max_retries}) exceeded: {last_exception}",
            attempts=self.max_retries + 1,
            last_exception=last_exception,
        )
