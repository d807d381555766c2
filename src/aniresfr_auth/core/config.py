"""
Configuration module for the NGO portal authentication client.

Loads configuration from an optional JSON file and environment variables.
"""

import json
import os
from typing import Dict, Any, Optional
from pathlib import Path

from . import constants


class Config:
    """Configuration manager for the application."""

    def __init__(self, config_file: Optional[str] = None):
        """
        Initialize configuration.

        Args:
            config_file: Path to configuration JSON file. If None, uses CONFIG_FILE env var
                        or defaults to 'config.json'. An explicitly given file must exist;
                        the default one is optional since every key has a default.
        """
        self._explicit_file = config_file is not None or bool(os.getenv("CONFIG_FILE"))
        self.config_file = config_file or os.getenv("CONFIG_FILE", "config.json")
        self.config: Dict[str, Any] = {}
        self._load_config()
        self._override_from_env()
        self._validate_config()

    def _load_config(self) -> None:
        """Load configuration from JSON file."""
        config_path = Path(self.config_file)
        if not config_path.exists():
            if self._explicit_file:
                raise FileNotFoundError(f"Configuration file not found: {self.config_file}")
            return

        with open(config_path, "r", encoding="utf-8") as f:
            try:
                loaded = json.load(f)
            except json.JSONDecodeError as e:
                raise ValueError(f"Invalid JSON in configuration file {self.config_file}: {e}") from e

        if not isinstance(loaded, dict):
            raise ValueError(f"Configuration file {self.config_file} must contain a JSON object")
        self.config = loaded

    def _override_from_env(self) -> None:
        """Override configuration with environment variables."""
        if os.getenv("API_BASE_URL"):
            self.config.setdefault("api", {})["base_url"] = os.getenv("API_BASE_URL")

        if os.getenv("SESSION_STORE_FILE"):
            self.config.setdefault("session", {})["store_file"] = os.getenv("SESSION_STORE_FILE")

        if os.getenv("PORTAL_URL"):
            self.config.setdefault("portal", {})["url"] = os.getenv("PORTAL_URL")

        if os.getenv("ENVIRONMENT"):
            self.config["environment"] = os.getenv("ENVIRONMENT")

    def _validate_config(self) -> None:
        """Validate value ranges of the settings that are present."""
        errors = []

        for section in ("api", "session", "portal"):
            if section in self.config and not isinstance(self.config[section], dict):
                errors.append(f"'{section}' must be an object")

        if errors:
            raise ValueError(f"Invalid configuration: {', '.join(errors)}")

        timeout = self.api_timeout
        if not self._is_number(timeout):
            errors.append(f"api.timeout must be a number, got {timeout!r}")
        elif timeout <= 0:
            errors.append(f"api.timeout must be positive, got {timeout}")

        max_retries = self.api_max_retries
        if not isinstance(max_retries, int) or isinstance(max_retries, bool):
            errors.append(f"api.max_retries must be an integer, got {max_retries!r}")
        elif max_retries < 0:
            errors.append(f"api.max_retries cannot be negative, got {max_retries}")

        if not isinstance(self.api_verify_ssl, bool):
            errors.append(f"api.verify_ssl must be true or false, got {self.api_verify_ssl!r}")

        for key in ("api.base_url", "session.store_file", "session.token_key", "portal.url"):
            value = self.get(key)
            if value is not None and not isinstance(value, str):
                errors.append(f"{key} must be a string, got {value!r}")

        if not self.session_token_key:
            errors.append("session.token_key cannot be empty")

        if errors:
            raise ValueError(f"Invalid configuration: {', '.join(errors)}")

    @staticmethod
    def _is_number(value: Any) -> bool:
        return isinstance(value, (int, float)) and not isinstance(value, bool)

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get configuration value by key (supports dot notation).

        Args:
            key: Configuration key (e.g., 'api.base_url')
            default: Default value if key not found

        Returns:
            Configuration value
        """
        keys = key.split(".")
        value = self.config

        for k in keys:
            if isinstance(value, dict):
                value = value.get(k)
                if value is None:
                    return default
            else:
                return default

        return value

    @property
    def api_base_url(self) -> str:
        """Get API base URL."""
        return self.get("api.base_url", constants.DEFAULT_API_BASE_URL)

    @property
    def api_timeout(self) -> int:
        """Get API timeout in seconds."""
        return self.get("api.timeout", constants.DEFAULT_API_TIMEOUT)

    @property
    def api_max_retries(self) -> int:
        """Get maximum API retry attempts."""
        return self.get("api.max_retries", constants.DEFAULT_API_MAX_RETRIES)

    @property
    def api_verify_ssl(self) -> bool:
        """Get API SSL verification setting."""
        return self.get("api.verify_ssl", True)

    @property
    def session_store_file(self) -> str:
        """Get path of the file holding the persisted session."""
        return self.get("session.store_file", constants.DEFAULT_SESSION_STORE_FILE)

    @property
    def session_token_key(self) -> str:
        """Get the storage key the session token is written under."""
        return self.get("session.token_key", constants.DEFAULT_TOKEN_KEY)

    @property
    def portal_url(self) -> Optional[str]:
        """Get the portal URL navigation paths are resolved against."""
        return self.get("portal.url")

    def __repr__(self) -> str:
        """String representation of config."""
        return f"Config(file={self.config_file}, env={self.get('environment')})"
