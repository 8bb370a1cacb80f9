"""
File operations.

Listing, upload and download of files, and the resource calls shared with
folders (update, copy, move, delete). Upload and download stream the file
contents; see ``yandex_disk.transfer``.
"""

from typing import Any, Dict, Optional

from .client import YandexDiskClient
from .disk import metadata
from .models import FileListing, Result
from .responses import href_or_done, require, to_result
from .transfer import download as get
from .transfer import upload as create

__all__ = [
    "metadata",
    "index",
    "recent",
    "create",
    "get",
    "update",
    "copy",
    "move",
    "destroy",
]

DEFAULT_LIMIT = 20


def index(client: YandexDiskClient, limit: int = DEFAULT_LIMIT, **params) -> Result:
    """
    List all files on the disk as a flat list, ordered by name.

    Args:
        client: Client handle
        limit: Page size
        **params: Extra query parameters (offset, media_type, fields, sort...)

    Returns:
        Ok(FileListing) with the provider's items and offset, or an Error
    """
    query = dict(params, limit=limit)
    response = client.request("GET", "/disk/resources/files", params=query)
    return to_result(
        response,
        lambda body: FileListing(items=require(body, "items"), offset=body.get("offset", 0)),
    )


def recent(client: YandexDiskClient, limit: int = DEFAULT_LIMIT, **params) -> Result:
    """List recently uploaded files, newest first; Ok(list of items)."""
    query = dict(params, limit=limit)
    response = client.request("GET", "/disk/resources/last-uploaded", params=query)
    return to_result(response, lambda body: require(body, "items"))


def update(
    client: YandexDiskClient,
    path: str,
    custom_properties: Optional[Dict[str, Any]] = None,
    **params,
) -> Result:
    """
    Set custom properties of a resource.

    A property set to ``None`` is removed by the provider.

    Returns:
        Ok(metadata dict) or an Error
    """
    query = dict(params, path=path)
    response = client.request(
        "PATCH",
        "/disk/resources",
        params=query,
        json={"custom_properties": custom_properties or {}},
    )
    return to_result(response)


def copy(client: YandexDiskClient, from_path: str, to_path: str, overwrite: Optional[bool] = None, **params) -> Result:
    """
    Copy a resource.

    Returns:
        Ok(link dict) - the new resource link (201) or, for an asynchronous
        copy (202), the operation status link - or an Error
    """
    query = dict(params, path=to_path, overwrite=overwrite)
    query["from"] = from_path
    return to_result(client.request("POST", "/disk/resources/copy", params=query))


def move(client: YandexDiskClient, from_path: str, to_path: str, overwrite: Optional[bool] = None, **params) -> Result:
    """Move or rename a resource; same answers as ``copy``."""
    query = dict(params, path=to_path, overwrite=overwrite)
    query["from"] = from_path
    return to_result(client.request("POST", "/disk/resources/move", params=query))


def destroy(client: YandexDiskClient, path: str, permanently: Optional[bool] = None, **params) -> Result:
    """
    Delete a resource (into the trash unless ``permanently``).

    Returns:
        Ok(operation href) for an asynchronous delete, Ok(Status.OK) for an
        immediate one, or an Error
    """
    query = dict(params, path=path, permanently=permanently)
    response = client.request("DELETE", "/disk/resources", params=query)
    return to_result(response, href_or_done)
