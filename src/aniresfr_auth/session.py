"""
Client-side session capabilities.

``SessionStore`` persists the issued token and ``Navigator`` moves the
client to another page. Both are injected into the orchestrator.
"""

import json
import logging
import os
import webbrowser
from pathlib import Path
from typing import Dict, List, Optional

from .core import constants


class SessionStore:
    """Key-value storage that outlives the current process."""

    def set(self, key: str, value: str) -> None:
        raise NotImplementedError

    def get(self, key: str) -> Optional[str]:
        raise NotImplementedError

    def clear(self) -> None:
        raise NotImplementedError


class Navigator:
    """Moves the client to a path of the portal."""

    def go_to(self, path: str) -> None:
        raise NotImplementedError


class InMemorySessionStore(SessionStore):
    """Session store kept in a dictionary. Lost when the process exits."""

    def __init__(self):
        self.values: Dict[str, str] = {}

    def set(self, key: str, value: str) -> None:
        self.values[key] = value

    def get(self, key: str) -> Optional[str]:
        return self.values.get(key)

    def clear(self) -> None:
        self.values.clear()


class JsonFileSessionStore(SessionStore):
    """Session store backed by a JSON file on disk."""

    def __init__(
        self,
        path: str = constants.DEFAULT_SESSION_STORE_FILE,
        logger: Optional[logging.Logger] = None
    ):
        """
        Initialize the store.

        Args:
            path: File holding the stored values. ``~`` is expanded.
            logger: Logger instance
        """
        self.path = Path(path).expanduser()
        self.logger = logger or logging.getLogger(__name__)

    def _read(self) -> Dict[str, str]:
        if not self.path.exists():
            return {}

        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (json.JSONDecodeError, UnicodeDecodeError):
            self.logger.warning(f"Session file {self.path} is corrupt, starting empty")
            return {}

        if not isinstance(data, dict):
            self.logger.warning(f"Session file {self.path} is not a JSON object, starting empty")
            return {}
        return data

    def _write(self, data: Dict[str, str]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)

        # Write then rename so a crash never leaves a half-written file
        tmp_path = self.path.with_suffix(self.path.suffix + ".tmp")
        with open(tmp_path, "w", encoding="utf-8") as f:
            json.dump(data, f)
        os.replace(tmp_path, self.path)

    def set(self, key: str, value: str) -> None:
        data = self._read()
        data[key] = value
        self._write(data)
        self.logger.debug(f"Stored session key {key!r} in {self.path}")

    def get(self, key: str) -> Optional[str]:
        return self._read().get(key)

    def clear(self) -> None:
        if self.path.exists():
            self.path.unlink()
            self.logger.debug(f"Removed session file {self.path}")


class RecordingNavigator(Navigator):
    """Navigator for headless use. Remembers every path it was sent to."""

    def __init__(self, logger: Optional[logging.Logger] = None):
        self.history: List[str] = []
        self.logger = logger or logging.getLogger(__name__)

    @property
    def current_path(self) -> Optional[str]:
        return self.history[-1] if self.history else None

    def go_to(self, path: str) -> None:
        self.logger.info(f"Navigating to {path}")
        self.history.append(path)


class BrowserNavigator(Navigator):
    """Opens portal pages in the user's web browser."""

    def __init__(self, portal_url: str, logger: Optional[logging.Logger] = None):
        """
        Initialize the navigator.

        Args:
            portal_url: Root URL of the portal front end
            logger: Logger instance
        """
        self.portal_url = portal_url.rstrip("/")
        self.logger = logger or logging.getLogger(__name__)

    def url_for(self, path: str) -> str:
        return f"{self.portal_url}/{path.lstrip('/')}"

    def go_to(self, path: str) -> None:
        url = self.url_for(path)
        self.logger.info(f"Opening {url}")
        if not webbrowser.open(url):
            self.logger.warning(f"No browser available to open {url}")
