"""giscus API client.

This module checks that the configured comment widget identifiers exist on
the giscus service, with retry logic and error mapping for HTTP failures.
"""

from typing import Any, Dict, List, Optional

import requests
from pydantic import BaseModel

from .models.comment import GiscusConfig
from .utils.retry import RetryManager
from .exceptions import (
    APIError,
    BadRequestError,
    NotFoundError,
    RateLimitError,
    ServerError,
)


GISCUS_API_URL = "https://giscus.app/api"


class VerificationResult(BaseModel):
    """Outcome of comparing a widget configuration with the live repository."""

    repo: str
    repo_id_matches: bool
    category_found: bool
    category_id_matches: bool
    remote_repo_id: Optional[str] = None
    remote_category_id: Optional[str] = None
    available_categories: List[str] = []

    @property
    def ok(self) -> bool:
        return self.repo_id_matches and self.category_found and self.category_id_matches


class GiscusClient:
    """Client for the public giscus discussions API."""

    def __init__(
        self,
        base_url: str = GISCUS_API_URL,
        timeout: int = 30,
        retry_attempts: int = 3,
        debug: bool = False,
        session: Optional[requests.Session] = None,
    ) -> None:
        """Initialize giscus API client.

        Args:
            base_url: giscus API base URL
            timeout: Request timeout in seconds
            retry_attempts: Number of retry attempts
            debug: Print request details
            session: Optional requests session to reuse
        """
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.debug = debug
        self.session = session or requests.Session()
        self.retry_manager = RetryManager(
            max_retries=retry_attempts,
            base_delay=1.0,
            max_delay=30.0,
            backoff_factor=2.0,
            jitter=True,
        )

    def _handle_response(self, response: requests.Response) -> Dict[str, Any]:
        """Convert HTTP errors to API exceptions and return the parsed JSON body."""
        error_data: Dict[str, Any] = {}
        try:
            error_data = response.json()
        except ValueError:
            pass

        if response.status_code == 400:
            raise BadRequestError(
                "Bad request",
                status_code=response.status_code,
                response_data=error_data,
            )
        elif response.status_code == 404:
            raise NotFoundError(
                "Repository not found or giscus is not installed on it",
                status_code=response.status_code,
                response_data=error_data,
            )
        elif response.status_code == 429:
            retry_after = response.headers.get("Retry-After")
            raise RateLimitError(
                "Rate limit exceeded",
                status_code=response.status_code,
                response_data=error_data,
                retry_after=int(retry_after) if retry_after and retry_after.isdigit() else None,
            )
        elif response.status_code >= 500:
            raise ServerError(
                f"Server error: {response.status_code}",
                status_code=response.status_code,
                response_data=error_data,
            )
        elif response.status_code >= 400:
            raise APIError(
                f"Request failed: {response.status_code}",
                status_code=response.status_code,
                response_data=error_data,
            )

        if not isinstance(error_data, dict):
            raise APIError("Unexpected response body", status_code=response.status_code)
        return error_data

    def _make_request(self, endpoint: str, params: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        def make_request() -> Dict[str, Any]:
            url = f"{self.base_url}{endpoint}"
            if self.debug:
                print(f"[DEBUG] GET {url} params={params}")

            response = self.session.get(url, params=params, timeout=self.timeout)

            if self.debug:
                print(f"[DEBUG] Response status: {response.status_code}")

            return self._handle_response(response)

        return self.retry_manager.execute_with_retry(make_request)

    def get_categories(self, repo: str) -> Dict[str, Any]:
        """Get the repository id and discussion categories for a repository.

        Args:
            repo: Repository in owner/name form

        Returns:
            Response with ``repositoryId`` and ``categories``
        """
        return self._make_request("/discussions/categories", params={"repo": repo})

    def verify(self, config: GiscusConfig) -> VerificationResult:
        """Compare a widget configuration with the repository's live identifiers.

        Raises:
            APIError: If the response is missing the expected fields
        """
        data = self.get_categories(config.repo)

        try:
            remote_repo_id = data["repositoryId"]
            categories = data["categories"]
        except KeyError as e:
            raise APIError(f"Unexpected response from giscus: missing {e}", response_data=data)

        match = next((c for c in categories if c.get("name") == config.category), None)
        remote_category_id = match.get("id") if match else None

        return VerificationResult(
            repo=config.repo,
            repo_id_matches=remote_repo_id == config.repo_id,
            category_found=match is not None,
            category_id_matches=remote_category_id == config.category_id,
            remote_repo_id=remote_repo_id,
            remote_category_id=remote_category_id,
            available_categories=[c.get("name", "") for c in categories],
        )
