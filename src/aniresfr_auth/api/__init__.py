"""
API layer for the Aniresfr backend.

Provides the low-level HTTP client and the authentication operations.
"""

import logging
from typing import Optional

from ..core import constants
from .client import APIClient
from .auth import AuthAPI


class AniresfrAPI(AuthAPI):
    """
    Unified API client for the Aniresfr backend.

    Currently only exposes the authentication operations.
    """

    def __init__(
        self,
        base_url: str = constants.DEFAULT_API_BASE_URL,
        timeout: int = constants.DEFAULT_API_TIMEOUT,
        max_retries: int = constants.DEFAULT_API_MAX_RETRIES,
        verify_ssl: bool = True,
        logger: Optional[logging.Logger] = None
    ):
        super().__init__(
            base_url=base_url,
            timeout=timeout,
            max_retries=max_retries,
            verify_ssl=verify_ssl,
            logger=logger
        )

    @classmethod
    def from_config(cls, config, logger: Optional[logging.Logger] = None) -> "AniresfrAPI":
        """Build a client from a ``Config``."""
        return cls(
            base_url=config.api_base_url,
            timeout=config.api_timeout,
            max_retries=config.api_max_retries,
            verify_ssl=config.api_verify_ssl,
            logger=logger
        )


__all__ = [
    "APIClient",
    "AuthAPI",
    "AniresfrAPI",
]
