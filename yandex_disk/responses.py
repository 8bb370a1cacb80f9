"""Mapping of decoded API answers to ``Ok``/``Error`` results."""

from typing import Any, Callable, Dict, Optional

from .exceptions import ResponseFormatError
from .models import ApiResponse, Error, Ok, Result, Status

NOT_FOUND = "no_resource"


def provider_error(body: Any) -> Optional[Error]:
    """Return the provider error carried by ``body``, if any."""
    if isinstance(body, dict) and "error" in body:
        return Error(body["error"], body.get("description", ""))
    return None


def to_result(response: ApiResponse, payload: Callable[[Any], Any] = lambda body: body) -> Result:
    """Map a body to ``Error`` when it carries an error, else to ``Ok(payload(body))``."""
    error = provider_error(response.body)
    if error is not None:
        return error
    return Ok(payload(response.body))


def require(body: Any, key: str) -> Any:
    """Return ``body[key]`` or raise ResponseFormatError."""
    if not isinstance(body, dict) or key not in body:
        raise ResponseFormatError(f"Response has no '{key}' field: {body!r}")
    return body[key]


def href_or_done(body: Any) -> Any:
    """Payload of delete-like calls: the operation link, or Status.OK for an empty body."""
    if not body:
        return Status.OK
    return require(body, "href")


def by_status(response: ApiResponse, outcomes: Dict[int, Status]) -> Result:
    """
    Map a status-driven answer.

    The status code is checked before the body; 404 is a no_resource error
    whatever the body says. Other statuses fall back to the body's error.
    """
    if response.status_code in outcomes:
        return Ok(outcomes[response.status_code])
    if response.status_code == 404:
        return Error(NOT_FOUND, "Resource not found")

    error = provider_error(response.body)
    if error is not None:
        return error
    return Error("unexpected_status", f"Unexpected status code {response.status_code}")
