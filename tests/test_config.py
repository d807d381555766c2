"""
Tests for configuration loading.
"""

import json

import pytest

from aniresfr_auth.core import Config, constants


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Remove environment overrides that would leak into tests."""
    for name in ("CONFIG_FILE", "API_BASE_URL", "SESSION_STORE_FILE", "PORTAL_URL", "ENVIRONMENT", "LOG_FILE"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def write_config(tmp_path):
    def _write(data):
        path = tmp_path / "config.json"
        path.write_text(json.dumps(data), encoding="utf-8")
        return str(path)
    return _write


class TestConfig:

    def test_defaults_without_config_file(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        config = Config()

        assert config.api_base_url == constants.DEFAULT_API_BASE_URL
        assert config.api_timeout == 30
        assert config.api_max_retries == 0
        assert config.api_verify_ssl is True
        assert config.session_token_key == "csrftoken"
        assert config.session_store_file == constants.DEFAULT_SESSION_STORE_FILE
        assert config.portal_url is None

    def test_explicit_missing_file_raises(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            Config(str(tmp_path / "missing.json"))

    def test_loads_values_from_file(self, write_config):
        config = Config(write_config({
            "api": {"base_url": "http://localhost:8000/", "timeout": 5, "max_retries": 2},
            "session": {"store_file": "/tmp/s.json", "token_key": "token"},
            "portal": {"url": "http://localhost:3000"},
        }))

        assert config.api_base_url == "http://localhost:8000/"
        assert config.api_timeout == 5
        assert config.api_max_retries == 2
        assert config.session_store_file == "/tmp/s.json"
        assert config.session_token_key == "token"
        assert config.portal_url == "http://localhost:3000"
        assert config.get("api.missing", "fallback") == "fallback"

    def test_environment_overrides_file(self, write_config, monkeypatch):
        path = write_config({"api": {"base_url": "http://file"}})
        monkeypatch.setenv("API_BASE_URL", "http://env")
        monkeypatch.setenv("PORTAL_URL", "http://portal")
        monkeypatch.setenv("SESSION_STORE_FILE", "/tmp/env.json")

        config = Config(path)

        assert config.api_base_url == "http://env"
        assert config.portal_url == "http://portal"
        assert config.session_store_file == "/tmp/env.json"

    def test_invalid_json_raises(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text("{not json", encoding="utf-8")
        with pytest.raises(ValueError, match="Invalid JSON"):
            Config(str(path))

    @pytest.mark.parametrize("data", [
        {"api": {"timeout": 0}},
        {"api": {"max_retries": -1}},
        {"session": {"token_key": ""}},
        {"api": "not-an-object"},
        {"api": {"timeout": "30"}},
        {"api": {"timeout": True}},
        {"api": {"max_retries": "2"}},
        {"api": {"max_retries": 1.5}},
        {"api": {"verify_ssl": "yes"}},
        {"api": {"base_url": 8000}},
        {"session": {"token_key": 5}},
    ])
    def test_invalid_values_raise(self, write_config, data):
        with pytest.raises(ValueError, match="Invalid configuration"):
            Config(write_config(data))
