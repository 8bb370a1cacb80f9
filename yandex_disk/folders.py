"""Folder operations."""

import logging

from .client import YandexDiskClient
from .files import copy, destroy, move, update
from .models import Ok, Result
from .responses import require, to_result

logger = logging.getLogger(__name__)

__all__ = ["create", "update", "copy", "move", "destroy"]

ROOT = "disk:"
ROOT_PATHS = ("disk:", "disk:/")

PARENT_MISSING = "DiskPathDoesntExistsError"
ALREADY_EXISTS = "DiskPathPointsToExistentDirectoryError"


def _put_folder(client: YandexDiskClient, path: str, params: dict) -> Result:
    query = dict(params, path=path)
    response = client.request("PUT", "/disk/resources", params=query)
    return to_result(response, lambda body: require(body, "href"))


def create(client: YandexDiskClient, path: str, force: bool = False, **params) -> Result:
    """
    Create a folder.

    With ``force`` a missing parent is not an error: every ancestor of
    ``path`` is created in order, shortest first, ending with ``path``.
    Ancestors that already exist are skipped; any other error stops the walk
    and is returned.

    Args:
        client: Client handle
        path: Folder path, e.g. ``disk:/a/b/c``
        force: Create missing ancestors
        **params: Extra query parameters

    Returns:
        Ok(href) for a plain create, Ok(path) for a forced one, Ok("disk:/")
        for the root (no request is made), or an Error
    """
    if path in ROOT_PATHS:
        return Ok("disk:/")

    result = _put_folder(client, path, params)
    if result.is_ok or result.code != PARENT_MISSING or not force:
        return result

    if path.startswith(ROOT):
        prefix, rest = ROOT, path[len(ROOT):]
    else:
        prefix, rest = "", path
    segments = [segment for segment in rest.split("/") if segment]

    logger.info("Creating missing ancestors of %s", path)
    current = prefix
    for segment in segments:
        current = f"{current}/{segment}"
        step = _put_folder(client, current, params)
        if not step.is_ok and step.code != ALREADY_EXISTS:
            return step

    return Ok(path)
