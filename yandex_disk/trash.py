"""
Trash operations.

Both calls report their outcome through the HTTP status code only:
a finished operation, an asynchronous one still running, or 404.
"""

from typing import Optional

from .client import YandexDiskClient
from .models import Result, Status
from .responses import by_status


def clear(client: YandexDiskClient, path: Optional[str] = None, **params) -> Result:
    """
    Empty the trash, or remove a single resource from it.

    Returns:
        Ok(Status.REMOVED) on 204, Ok(Status.REMOVING) on 202,
        Error("no_resource", ...) on 404
    """
    query = dict(params, path=path)
    response = client.request("DELETE", "/disk/trash/resources", params=query)
    return by_status(response, {204: Status.REMOVED, 202: Status.REMOVING})


def restore(client: YandexDiskClient, path: str, **params) -> Result:
    """
    Restore a resource from the trash.

    Returns:
        Ok(Status.RESTORED) on 201, Ok(Status.RESTORING) on 202,
        Error("no_resource", ...) on 404
    """
    query = dict(params, path=path)
    response = client.request("PUT", "/disk/trash/resources/restore", params=query)
    return by_status(response, {201: Status.RESTORED, 202: Status.RESTORING})
