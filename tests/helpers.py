"""Shared test helpers for yandex_disk tests."""

from __future__ import annotations

import io
import json
from typing import Any

import requests

API = "https://cloud-api.yandex.net/v1"


def make_response(
    status_code: int = 200,
    body: Any = None,
    content: bytes | None = None,
    headers: dict[str, str] | None = None,
) -> requests.Response:
    """Build a real requests.Response without touching the network.

    A ``body`` is JSON-encoded and labelled as JSON; raw ``content`` is
    served as-is (and can be streamed with ``iter_content``).
    """
    response = requests.Response()
    response.status_code = status_code
    if body is not None:
        content = json.dumps(body).encode("utf-8")
        response.headers["Content-Type"] = "application/json; charset=utf-8"
    response.headers.update(headers or {})
    response.raw = io.BytesIO(content or b"")
    return response


def error_body(code: str, description: str = "error description") -> dict[str, str]:
    """Provider error body as returned by the API."""
    return {"error": code, "description": description, "message": description}


def called_params(session: Any, index: int = -1) -> dict[str, Any]:
    """Query params of a recorded session.request call."""
    return session.request.call_args_list[index].kwargs["params"]


def called_url(session: Any, index: int = -1) -> str:
    """URL of a recorded session.request call."""
    return session.request.call_args_list[index].args[1]
