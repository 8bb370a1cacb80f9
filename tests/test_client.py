"""Tests for client construction and the request wrapper."""

from __future__ import annotations

import dataclasses
from unittest.mock import MagicMock

import pytest
import requests
from helpers import API, called_params, called_url, make_response

from yandex_disk import (
    AuthenticationError,
    NetworkError,
    ResponseFormatError,
    TimeoutError,
    YandexDiskClient,
    YandexDiskError,
    make_client,
)


class TestMakeClient:
    """Tests for make_client."""

    def test_builds_oauth_headers_without_requests(self, session: MagicMock) -> None:
        """Test that construction sets the OAuth header and makes no call."""
        client = make_client("abc123", session=session)

        assert isinstance(client, YandexDiskClient)
        assert client.headers["Authorization"] == "OAuth abc123"
        assert client.headers["Accept"] == "application/json"
        assert client.endpoint == API
        session.request.assert_not_called()

    def test_token_from_environment(self, monkeypatch: pytest.MonkeyPatch, session: MagicMock) -> None:
        """Test that YANDEX_DISK_TOKEN is used when no token is passed."""
        monkeypatch.setenv("YANDEX_DISK_TOKEN", "env_token")

        client = make_client(session=session)

        assert client.headers["Authorization"] == "OAuth env_token"

    def test_missing_token_raises(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test that a client is never built without a token."""
        monkeypatch.delenv("YANDEX_DISK_TOKEN", raising=False)

        with pytest.raises(AuthenticationError, match="OAuth token is required"):
            make_client()

    def test_token_shape_is_not_validated(self, session: MagicMock) -> None:
        """Test that any non-empty token is accepted."""
        client = make_client("not a real token", session=session)

        assert client.headers["Authorization"] == "OAuth not a real token"

    def test_client_is_immutable(self, client: YandexDiskClient) -> None:
        """Test that the client cannot be mutated after construction."""
        with pytest.raises(dataclasses.FrozenInstanceError):
            client.endpoint = "https://example.com"  # type: ignore[misc]

        with pytest.raises(TypeError):
            client.headers["Authorization"] = "OAuth other"  # type: ignore[index]

    def test_endpoint_trailing_slash_is_stripped(self, session: MagicMock) -> None:
        """Test that a custom endpoint is normalised."""
        client = make_client("t", endpoint="http://localhost:8080/v1/", session=session)

        assert client.endpoint == "http://localhost:8080/v1"

    def test_context_manager_closes_session(self, client: YandexDiskClient, session: MagicMock) -> None:
        """Test that leaving the context closes the session."""
        with client:
            pass

        session.close.assert_called_once()


class TestRequest:
    """Tests for YandexDiskClient.request."""

    def test_sends_auth_headers_and_normalised_query(self, client: YandexDiskClient, session: MagicMock) -> None:
        """Test URL joining, header sending and query normalisation."""
        session.request.return_value = make_response(200, {"ok": True})

        client.request("GET", "/disk/resources", params={"path": "disk:/a", "overwrite": True, "fields": None})

        call = session.request.call_args
        assert call.args == ("GET", f"{API}/disk/resources")
        assert call.kwargs["headers"]["Authorization"] == "OAuth test_token"
        assert called_params(session) == {"path": "disk:/a", "overwrite": "true"}

    def test_decodes_json_body(self, client: YandexDiskClient, session: MagicMock) -> None:
        """Test that JSON bodies are decoded."""
        session.request.return_value = make_response(200, {"total_space": 10})

        response = client.request("GET", "/disk")

        assert response.status_code == 200
        assert response.body == {"total_space": 10}

    def test_empty_body_decodes_to_none(self, client: YandexDiskClient, session: MagicMock) -> None:
        """Test that an empty 204 body is not a decode failure."""
        session.request.return_value = make_response(204)

        response = client.request("DELETE", "/disk/resources", params={"path": "disk:/a"})

        assert response.status_code == 204
        assert response.body is None

    def test_non_json_body_is_text(self, client: YandexDiskClient, session: MagicMock) -> None:
        """Test that non-JSON bodies are returned as text."""
        session.request.return_value = make_response(
            502, content=b"Bad Gateway", headers={"Content-Type": "text/plain"}
        )

        assert client.request("GET", "/disk").body == "Bad Gateway"

    def test_malformed_json_raises_format_error(self, client: YandexDiskClient, session: MagicMock) -> None:
        """Test that a body labelled JSON that does not parse stays inside the SDK errors."""
        session.request.return_value = make_response(
            200, content=b"<html>maintenance</html>", headers={"Content-Type": "application/json"}
        )

        with pytest.raises(ResponseFormatError) as exc_info:
            client.request("GET", "/disk")

        assert exc_info.value.status_code == 200
        assert isinstance(exc_info.value, YandexDiskError)

    def test_path_without_leading_slash(self, client: YandexDiskClient, session: MagicMock) -> None:
        """Test that relative paths are joined to the endpoint."""
        session.request.return_value = make_response(200, {})

        client.request("GET", "disk/resources/download")

        assert called_url(session) == f"{API}/disk/resources/download"

    def test_timeout_raises_timeout_error(self, client: YandexDiskClient, session: MagicMock) -> None:
        """Test that transport timeouts surface as a distinct error."""
        session.request.side_effect = requests.exceptions.ReadTimeout("read timed out")

        with pytest.raises(TimeoutError, match="Request timeout"):
            client.request("GET", "/disk")

    def test_connection_error_raises_network_error(self, client: YandexDiskClient, session: MagicMock) -> None:
        """Test that unreachable hosts surface as NetworkError."""
        session.request.side_effect = requests.exceptions.ConnectionError("refused")

        with pytest.raises(NetworkError, match="Connection error"):
            client.request("GET", "/disk")

    def test_other_request_errors_raise_base_error(self, client: YandexDiskClient, session: MagicMock) -> None:
        """Test that other transport errors are wrapped."""
        session.request.side_effect = requests.exceptions.InvalidURL("bad url")

        with pytest.raises(YandexDiskError, match="Request failed"):
            client.request("GET", "/disk")

    def test_transfer_sends_no_auth_header(self, client: YandexDiskClient, session: MagicMock) -> None:
        """Test that pre-signed transfer URLs are called without the token."""
        session.request.return_value = make_response(201)

        client.transfer("PUT", "https://uploader.example/put", data=b"x")

        call = session.request.call_args
        assert call.args == ("PUT", "https://uploader.example/put")
        assert "headers" not in call.kwargs
        assert call.kwargs["timeout"] is None
