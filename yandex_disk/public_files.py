"""
Public resources.

Publishing a resource makes the provider issue an externally reachable
link; published resources are then addressed by their ``public_key`` (or
public URL).
"""

from pathlib import Path
from typing import Optional, Union

from .client import YandexDiskClient
from .models import FileListing, Result, TransferDescriptor
from .responses import require, to_result
from .transfer import ProgressCallback, stream_to_file

DEFAULT_TYPE = "file"


def index(client: YandexDiskClient, offset: int = 0, type: Optional[str] = DEFAULT_TYPE, **params) -> Result:
    """
    List published resources.

    Args:
        client: Client handle
        offset: Number of resources to skip
        type: ``file``, ``dir`` or None for both
        **params: Extra query parameters (limit, fields, preview_size...)

    Returns:
        Ok(FileListing) or an Error
    """
    query = dict(params, offset=offset, type=type)
    response = client.request("GET", "/disk/resources/public", params=query)
    return to_result(
        response,
        lambda body: FileListing(items=require(body, "items"), offset=body.get("offset", offset)),
    )


def create(client: YandexDiskClient, path: str, **params) -> Result:
    """Publish a resource; Ok(href of the resource metadata) or an Error."""
    query = dict(params, path=path)
    response = client.request("PUT", "/disk/resources/publish", params=query)
    return to_result(response, lambda body: require(body, "href"))


def destroy(client: YandexDiskClient, path: str, **params) -> Result:
    """Unpublish a resource; Ok(href) or an Error."""
    query = dict(params, path=path)
    response = client.request("PUT", "/disk/resources/unpublish", params=query)
    return to_result(response, lambda body: require(body, "href"))


def metadata(client: YandexDiskClient, public_key: str, path: Optional[str] = None, **params) -> Result:
    """
    Get metadata of a public resource.

    ``path`` selects a resource inside a published folder.
    """
    query = dict(params, public_key=public_key, path=path)
    return to_result(client.request("GET", "/disk/public/resources", params=query))


def download_url(client: YandexDiskClient, public_key: str, path: Optional[str] = None, **params) -> Result:
    """Get a download link for a public resource; Ok(TransferDescriptor) or an Error."""
    query = dict(params, public_key=public_key, path=path)
    response = client.request("GET", "/disk/public/resources/download", params=query)
    return to_result(response, TransferDescriptor.from_dict)


def download(
    client: YandexDiskClient,
    public_key: str,
    local_file: Union[str, Path],
    path: Optional[str] = None,
    progress_callback: Optional[ProgressCallback] = None,
    **params,
) -> Result:
    """Download a public resource into ``local_file``; Ok(local path) or an Error."""
    link = download_url(client, public_key, path=path, **params)
    if not link.is_ok:
        return link
    return stream_to_file(client, link.value, local_file, progress_callback)


def save_to_downloads(client: YandexDiskClient, path: str, **params) -> Result:
    """Save a public resource into the user's Downloads folder; Ok(link dict) or an Error."""
    query = dict(params, path=path)
    return to_result(client.request("POST", "/disk/resources/download", params=query, json={}))
