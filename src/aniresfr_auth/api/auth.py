"""
Authentication operations for the Aniresfr backend API.

Handles NGO login and registration.
"""

import logging
from typing import Dict, Any

from ..core import constants
from ..models import Credentials, RegistrationProfile
from .client import APIClient


class AuthAPI(APIClient):
    """API client with authentication capabilities."""

    logger: logging.Logger

    def _extract_token(self, body: Dict[str, Any], operation: str) -> str:
        """
        Pull the session token out of a successful response body.

        Raises:
            ValueError: If the body carries no usable token
        """
        token = body.get("token")
        if not isinstance(token, str) or not token:
            self.logger.error(f"No token received in {operation} response")
            raise ValueError(f"No token received in {operation} response")
        return token

    def login(self, credentials: Credentials) -> str:
        """
        Login to the portal with credentials.

        Args:
            credentials: Email and password

        Returns:
            Session token issued by the backend

        Raises:
            requests.exceptions.RequestException: On login failure
            ValueError: If the response is malformed
        """
        self.logger.info(f"Logging in as {credentials.email}")

        body = self.post(constants.LOGIN_ENDPOINT, credentials.to_payload())
        token = self._extract_token(body, "login")

        self.logger.info(f"Successfully logged in as {credentials.email}")
        return token

    def register_ngo(self, profile: RegistrationProfile) -> str:
        """
        Register a new NGO account.

        Args:
            profile: Registration form data

        Returns:
            Session token issued by the backend

        Raises:
            requests.exceptions.RequestException: On registration failure
            ValueError: If the response is malformed
        """
        self.logger.info(f"Registering NGO {profile.org_name!r} ({profile.email})")

        body = self.post(constants.REGISTER_NGO_ENDPOINT, profile.to_payload())
        token = self._extract_token(body, "registration")

        self.logger.info(f"Successfully registered {profile.org_name!r}")
        return token
