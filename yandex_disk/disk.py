"""Disk-wide information: quota, resource metadata and async operation status."""

from typing import Optional

from .client import YandexDiskClient
from .models import Result
from .responses import to_result


def about(client: YandexDiskClient, **params) -> Result:
    """Get disk information (total and used space, system folders, user)."""
    return to_result(client.request("GET", "/disk", params=params))


def metadata(client: YandexDiskClient, path: str, fields: Optional[str] = None, **params) -> Result:
    """
    Get metadata of a file or folder.

    Args:
        client: Client handle
        path: Resource path, e.g. ``disk:/foo/photo.png``
        fields: Optional comma-separated list of fields to return
        **params: Extra query parameters (limit, offset, sort, preview_size...)

    Returns:
        Ok(metadata dict) or Error(code, description)
    """
    query = dict(params, path=path, fields=fields)
    return to_result(client.request("GET", "/disk/resources", params=query))


def operation_status(client: YandexDiskClient, operation_id: str) -> Result:
    """Get the status of an asynchronous operation, e.g. ``{"status": "success"}``."""
    return to_result(client.request("GET", f"/disk/operations/{operation_id}"))
