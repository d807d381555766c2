"""
Tests for the backend API client.

HTTP is mocked by patching ``requests.Session.request``.
"""

from unittest.mock import patch

import pytest
import requests  # type: ignore

from aniresfr_auth.api import AniresfrAPI
from aniresfr_auth.core import Config
from aniresfr_auth.models import Credentials, RegistrationProfile


@pytest.fixture
def api_client():
    client = AniresfrAPI(base_url="https://backend.test/", timeout=7)
    yield client
    client.close()


@pytest.fixture
def profile():
    return RegistrationProfile(
        org_name="Paws Rescue",
        phone_number="9876543210",
        email="contact@paws.org",
        password="s3cret",
        emergency_contact="9123456780",
        location="Pune",
        website_link="https://paws.org",
        latitude=18.52,
        longitude=73.85,
    )


class TestAuthAPI:
    """Test cases for login and registration requests."""

    def test_login_posts_credentials(self, api_client, response_factory):
        with patch.object(api_client.session, "request") as mock_request:
            mock_request.return_value = response_factory(200, {"token": "abc123"})

            token = api_client.login(Credentials(email="a@b.org", password="pw"))

        assert token == "abc123"
        mock_request.assert_called_once()
        kwargs = mock_request.call_args.kwargs
        assert kwargs["method"] == "POST"
        assert kwargs["url"] == "https://backend.test/login/"
        assert kwargs["json"] == {"email": "a@b.org", "password": "pw"}
        assert kwargs["timeout"] == 7
        assert kwargs["verify"] is True

    def test_register_posts_profile(self, api_client, profile, response_factory):
        with patch.object(api_client.session, "request") as mock_request:
            mock_request.return_value = response_factory(201, {"token": "reg-token"})

            token = api_client.register_ngo(profile)

        assert token == "reg-token"
        kwargs = mock_request.call_args.kwargs
        assert kwargs["url"] == "https://backend.test/register/ngo"
        assert kwargs["json"] == profile.to_payload()

    def test_error_status_raises_http_error_with_response(self, api_client, response_factory):
        with patch.object(api_client.session, "request") as mock_request:
            mock_request.return_value = response_factory(400, {"error": "Invalid credentials"})

            with pytest.raises(requests.exceptions.HTTPError) as exc_info:
                api_client.login(Credentials(email="a@b.org", password="pw"))

        assert exc_info.value.response.status_code == 400
        assert exc_info.value.response.json() == {"error": "Invalid credentials"}

    def test_connection_error_propagates(self, api_client):
        with patch.object(api_client.session, "request") as mock_request:
            mock_request.side_effect = requests.exceptions.ConnectionError("unreachable")

            with pytest.raises(requests.exceptions.ConnectionError):
                api_client.login(Credentials(email="a@b.org", password="pw"))

    @pytest.mark.parametrize("body", [{}, {"token": ""}, {"token": None}, {"token": 42}])
    def test_missing_token_raises_value_error(self, api_client, response_factory, body):
        with patch.object(api_client.session, "request") as mock_request:
            mock_request.return_value = response_factory(200, body)

            with pytest.raises(ValueError, match="No token"):
                api_client.login(Credentials(email="a@b.org", password="pw"))

    def test_non_json_response_raises_value_error(self, api_client, response_factory):
        with patch.object(api_client.session, "request") as mock_request:
            mock_request.return_value = response_factory(200, text="<html>ok</html>")

            with pytest.raises(ValueError, match="not valid JSON"):
                api_client.login(Credentials(email="a@b.org", password="pw"))

    def test_non_object_response_raises_value_error(self, api_client, response_factory):
        with patch.object(api_client.session, "request") as mock_request:
            mock_request.return_value = response_factory(200, ["abc123"])

            with pytest.raises(ValueError, match="not a JSON object"):
                api_client.login(Credentials(email="a@b.org", password="pw"))


class TestClientSetup:

    def test_from_config(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text(
            '{"api": {"base_url": "http://localhost:8000/", "timeout": 3, "verify_ssl": false}}',
            encoding="utf-8"
        )
        client = AniresfrAPI.from_config(Config(str(path)))

        assert client.base_url == "http://localhost:8000"
        assert client.timeout == 3
        assert client.verify_ssl is False
        client.close()

    def test_no_retries_by_default(self, api_client):
        adapter = api_client.session.get_adapter("https://backend.test/")
        assert adapter.max_retries.total == 0
        assert adapter.max_retries.raise_on_status is False

    def test_json_headers(self, api_client):
        assert api_client.session.headers["Content-Type"] == "application/json"
        assert api_client.session.headers["Accept"] == "application/json"

    def test_context_manager_closes_session(self):
        client = AniresfrAPI(base_url="https://backend.test")
        with patch.object(client.session, "close") as mock_close:
            with client:
                pass
        mock_close.assert_called_once()
