"""
Pytest configuration and shared fixtures for all tests.
"""

import json
import sys
from pathlib import Path

import pytest
import requests  # type: ignore

# Add the src directory to sys.path so the package imports without installing
src_dir = Path(__file__).parent.parent / "src"
if str(src_dir) not in sys.path:
    sys.path.insert(0, str(src_dir))


def make_response(status_code, body=None, text=None, url="https://backend.test/"):
    """Build a real requests.Response with the given status and body."""
    response = requests.Response()
    response.status_code = status_code
    response.url = url
    if body is not None:
        response._content = json.dumps(body).encode("utf-8")
        response.headers["Content-Type"] = "application/json"
    else:
        response._content = (text or "").encode("utf-8")
    return response


@pytest.fixture
def response_factory():
    """Factory for fake HTTP responses."""
    return make_response


class SinkRecorder:
    """Collects everything the orchestrator reports to the UI."""

    def __init__(self):
        self.errors = []
        self.states = []
        self.events = []

    def report_error(self, message):
        self.errors.append(message)
        self.events.append(("error", message))

    def report_button_state(self, state):
        self.states.append(state)
        self.events.append(("state", state))


@pytest.fixture
def sinks():
    """Recording error and button state sinks."""
    return SinkRecorder()


def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line(
        "markers", "integration: mark test as integration test requiring API access"
    )
    config.addinivalue_line(
        "markers", "unit: mark test as unit test (no external dependencies)"
    )
