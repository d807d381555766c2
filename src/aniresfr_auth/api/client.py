"""
Base API client for the Aniresfr backend.

Handles HTTP requests, session management, and error handling.
"""

import logging
from typing import Dict, Any, Optional

import requests  # type: ignore
from requests.adapters import HTTPAdapter  # type: ignore
from urllib3.util.retry import Retry  # type: ignore

from ..core import constants


class APIClient:
    """Base client for interacting with the Aniresfr backend API."""

    def __init__(
        self,
        base_url: str = constants.DEFAULT_API_BASE_URL,
        timeout: int = constants.DEFAULT_API_TIMEOUT,
        max_retries: int = constants.DEFAULT_API_MAX_RETRIES,
        verify_ssl: bool = True,
        logger: Optional[logging.Logger] = None
    ):
        """
        Initialize API client.

        Args:
            base_url: Base URL for the API
            timeout: Request timeout in seconds
            max_retries: Maximum number of retry attempts (0 disables retries)
            verify_ssl: Whether to verify SSL certificates
            logger: Logger instance
        """
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.logger = logger or logging.getLogger(__name__)
        self.verify_ssl = verify_ssl

        if not verify_ssl:
            import urllib3
            urllib3.disable_warnings(urllib3.exceptions.InsecureRequestWarning)

        # Exhausted status retries hand back the last response instead of
        # raising, so error bodies still reach the caller.
        self.session = requests.Session()
        retry_strategy = Retry(
            total=max_retries,
            backoff_factor=1,
            status_forcelist=[429, 500, 502, 503, 504],
            allowed_methods=["GET", "POST"],
            raise_on_status=False
        )
        adapter = HTTPAdapter(max_retries=retry_strategy)
        self.session.mount("http://", adapter)
        self.session.mount("https://", adapter)

        self.session.headers.update({
            "Content-Type": "application/json",
            "Accept": "application/json"
        })

    def _make_request(
        self,
        method: str,
        endpoint: str,
        **kwargs
    ) -> requests.Response:
        """
        Make HTTP request to API.

        Args:
            method: HTTP method (GET, POST, etc.)
            endpoint: API endpoint (without base URL)
            **kwargs: Additional arguments for requests

        Returns:
            Response object

        Raises:
            requests.exceptions.RequestException: On request failure or non-2xx status
        """
        url = f"{self.base_url}/{endpoint.lstrip('/')}"
        kwargs.setdefault("verify", self.verify_ssl)

        self.logger.debug(f"{method} {url}")

        try:
            response = self.session.request(
                method=method,
                url=url,
                timeout=self.timeout,
                **kwargs
            )
            response.raise_for_status()
            return response

        except requests.exceptions.RequestException as e:
            self.logger.error(f"API request failed: {method} {url} - {e}")
            raise

    def post(self, endpoint: str, data: Dict[str, Any]) -> Dict[str, Any]:
        """
        Make POST request.

        Args:
            endpoint: API endpoint
            data: Request body data

        Returns:
            JSON response as dictionary

        Raises:
            requests.exceptions.RequestException: On request failure
            ValueError: If the response body is not a JSON object
        """
        response = self._make_request("POST", endpoint, json=data)
        try:
            body = response.json()
        except ValueError as e:
            raise ValueError(f"Response from {endpoint} is not valid JSON") from e

        if not isinstance(body, dict):
            raise ValueError(f"Response from {endpoint} is not a JSON object")
        return body

    def close(self) -> None:
        """Close the session."""
        self.session.close()

    def __enter__(self):
        """Context manager entry."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit."""
        self.close()
