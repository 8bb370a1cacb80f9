"""
Yandex Disk client handle.

The client is an immutable bundle of endpoint, OAuth headers and transport.
It carries no per-call state, so a single instance can be shared between
threads and threaded explicitly through every operation.
"""

import logging
import os
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional

import requests

from .exceptions import AuthenticationError, NetworkError, ResponseFormatError, TimeoutError, YandexDiskError
from .models import ApiResponse
from .utils import build_query

logger = logging.getLogger(__name__)

DEFAULT_ENDPOINT = "https://cloud-api.yandex.net/v1"
DEFAULT_CHUNK_SIZE = 8 * 1024 * 1024  # 8MB chunks
TOKEN_ENV_VAR = "YANDEX_DISK_TOKEN"


@dataclass(frozen=True)
class YandexDiskClient:
    """
    Authenticated handle to the Yandex Disk REST API.

    Use ``make_client`` to build one. Operations live in the resource
    modules (``disk``, ``files``, ``folders``, ``public_files``, ``trash``)
    and take the client as their first argument.
    """

    endpoint: str
    headers: Mapping[str, str]
    timeout: Optional[float] = None
    chunk_size: int = DEFAULT_CHUNK_SIZE
    session: requests.Session = field(default_factory=requests.Session, repr=False, compare=False)

    def request(
        self,
        method: str,
        path: str,
        params: Optional[Dict[str, Any]] = None,
        json: Any = None,
    ) -> ApiResponse:
        """
        Make an authenticated request to the API.

        Args:
            method: HTTP method
            path: API path relative to the endpoint (e.g. ``/disk/resources``)
            params: Query parameters, normalised with ``build_query``
            json: Optional JSON request body

        Returns:
            ApiResponse with the status code and decoded body

        Raises:
            TimeoutError: If the transport times out
            NetworkError: If the API host cannot be reached
            ResponseFormatError: If a body labelled JSON does not parse
        """
        url = f"{self.endpoint}/{path.lstrip('/')}"
        query = build_query(params)
        logger.debug("%s %s params=%s", method, url, query)

        try:
            response = self.session.request(
                method,
                url,
                params=query,
                json=json,
                headers=dict(self.headers),
                timeout=self.timeout,
            )
        except requests.exceptions.Timeout as e:
            raise TimeoutError(f"Request timeout: {e}", timeout_seconds=self.timeout) from e
        except requests.exceptions.ConnectionError as e:
            raise NetworkError(f"Connection error: {e}") from e
        except requests.exceptions.RequestException as e:
            raise YandexDiskError(f"Request failed: {e}") from e

        logger.debug("%s %s -> %s", method, url, response.status_code)
        return ApiResponse(
            status_code=response.status_code,
            body=_decode_body(response),
            headers=response.headers,
        )

    def transfer(self, method: str, url: str, **kwargs) -> requests.Response:
        """
        Call a provider-issued transfer URL.

        Transfer URLs are pre-signed, so no OAuth header is sent. Transport
        exceptions propagate to the caller, which maps them to results.
        """
        logger.debug("%s %s (transfer)", method, url)
        kwargs.setdefault("timeout", self.timeout)
        return self.session.request(method, url, **kwargs)

    def close(self) -> None:
        """Close the underlying HTTP session."""
        self.session.close()

    def __enter__(self):
        """Context manager entry."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit."""
        self.close()


def make_client(
    token: Optional[str] = None,
    *,
    endpoint: str = DEFAULT_ENDPOINT,
    timeout: Optional[float] = None,
    chunk_size: int = DEFAULT_CHUNK_SIZE,
    session: Optional[requests.Session] = None,
) -> YandexDiskClient:
    """
    Build a client for the given OAuth token.

    No request is made and the token's shape is not checked; an invalid
    token surfaces as a provider ``UnauthorizedError`` on the first call.

    Args:
        token: OAuth token (can also use YANDEX_DISK_TOKEN env var)
        endpoint: Yandex Disk API endpoint URL
        timeout: Transport timeout in seconds (None keeps the transport default)
        chunk_size: Chunk size for streamed uploads and downloads
        session: Optional pre-configured requests session

    Returns:
        A ready-to-use YandexDiskClient

    Raises:
        AuthenticationError: If no token is given and the env var is unset
    """
    token = token or os.getenv(TOKEN_ENV_VAR)
    if not token:
        raise AuthenticationError(f"OAuth token is required. Provide it as parameter or {TOKEN_ENV_VAR} env var.")

    headers = MappingProxyType({
        "Authorization": f"OAuth {token}",
        "Accept": "application/json",
    })

    return YandexDiskClient(
        endpoint=endpoint.rstrip("/"),
        headers=headers,
        timeout=timeout,
        chunk_size=chunk_size,
        session=session if session is not None else requests.Session(),
    )


def _decode_body(response: requests.Response) -> Any:
    """Decode a response body: JSON when declared, None when empty, text otherwise."""
    if not response.content:
        return None

    content_type = response.headers.get("Content-Type", "")
    if "json" in content_type:
        try:
            return response.json()
        except ValueError as e:
            raise ResponseFormatError(
                f"Response labelled {content_type} is not valid JSON: {e}",
                status_code=response.status_code,
            ) from e
    return response.text
