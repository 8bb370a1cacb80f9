"""
Two-step upload and download flow.

Both directions first ask the API for a pre-signed transfer URL and then
stream the bytes to or from that URL. Failures of the byte phase are
mapped to ``TransferFailure`` results; nothing is retried.
"""

import logging
from pathlib import Path
from typing import Callable, Optional, Union

import requests
from urllib3.exceptions import ReadTimeoutError

from .client import YandexDiskClient
from .exceptions import NetworkError, YandexDiskError
from .models import Error, Ok, Result, TransferDescriptor, TransferFailure, TransferProgress
from .responses import to_result
from .utils import chunk_file

logger = logging.getLogger(__name__)

ProgressCallback = Callable[[TransferProgress], None]

UPLOAD_SUCCESS = (201, 202)

FAILURE_STATUSES = {
    412: (TransferFailure.PRECONDITION_FAILED, "Precondition Failed"),
    413: (TransferFailure.PAYLOAD_TOO_LARGE, "Payload Too Large"),
    500: (TransferFailure.INTERNAL_SERVER_ERROR, "Internal Server Error"),
    503: (TransferFailure.SERVICE_UNAVAILABLE, "Service Unavailable"),
    507: (TransferFailure.INSUFFICIENT_STORAGE, "Insufficient Storage"),
}


def failure_for_status(status_code: int) -> Error:
    """Map a failed transfer status code to an Error result."""
    kind, reason = FAILURE_STATUSES.get(
        status_code, (TransferFailure.UNEXPECTED_STATUS, f"Unexpected status code {status_code}")
    )
    return Error(kind, reason)


def _is_timeout(exc: requests.exceptions.RequestException) -> bool:
    # iter_content re-raises urllib3's read timeout as a ConnectionError
    if isinstance(exc, requests.exceptions.Timeout):
        return True
    cause = exc.args[0] if exc.args else None
    return isinstance(cause, ReadTimeoutError) or isinstance(exc.__context__, ReadTimeoutError)


def transport_failure(exc: requests.exceptions.RequestException, action: str) -> Error:
    """
    Map a transport exception raised during the byte phase.

    Args:
        exc: Exception raised by requests
        action: ``"Upload"`` or ``"Download"``, used in messages

    Returns:
        Error(TransferFailure.TIMEOUT) for any kind of timeout

    Raises:
        NetworkError: If the transfer host cannot be reached
        YandexDiskError: For any other transport failure
    """
    if _is_timeout(exc):
        return Error(TransferFailure.TIMEOUT, f"{action} timed out")
    if isinstance(exc, requests.exceptions.ConnectionError):
        raise NetworkError(f"Connection error during {action.lower()}: {exc}") from exc
    raise YandexDiskError(f"{action} failed: {exc}") from exc


def obtain_upload_target(client: YandexDiskClient, path: str, overwrite: Optional[bool] = None, **params) -> Result:
    """Ask for an upload URL for ``path``; Ok(TransferDescriptor) or the provider error."""
    query = dict(params, path=path, overwrite=overwrite)
    response = client.request("GET", "/disk/resources/upload", params=query)
    return to_result(response, TransferDescriptor.from_dict)


def obtain_download_link(client: YandexDiskClient, path: str, **params) -> Result:
    """Ask for a download URL for ``path``; Ok(TransferDescriptor) or the provider error."""
    query = dict(params, path=path)
    response = client.request("GET", "/disk/resources/download", params=query)
    return to_result(response, TransferDescriptor.from_dict)


def upload(
    client: YandexDiskClient,
    path: str,
    local_file: Optional[Union[str, Path]],
    overwrite: Optional[bool] = None,
    progress_callback: Optional[ProgressCallback] = None,
    **params,
) -> Result:
    """
    Upload a local file to Yandex Disk.

    The upload target is requested before the local file is touched, so a
    conflict reported by the provider comes back without any byte transfer.

    Args:
        client: Client handle
        path: Destination path on the disk
        local_file: Path of the local file to send
        overwrite: Replace an existing resource at ``path``
        progress_callback: Called with TransferProgress after every chunk
        **params: Extra query parameters for the upload target request

    Returns:
        Ok(TransferDescriptor) on 201/202, otherwise an Error
    """
    target = obtain_upload_target(client, path, overwrite=overwrite, **params)
    if not target.is_ok:
        return target

    descriptor = target.value
    if local_file is None:
        return Error(TransferFailure.FILE_REQUIRED, "A local file is required to upload")
    if not descriptor.href:
        return Error(TransferFailure.FILE_EXISTS, "File exists. Use overwrite param to force overwrite")

    local_file = Path(local_file)
    if not local_file.is_file():
        return Error(TransferFailure.LOCAL_FILE_NOT_FOUND, f"Local file not found: {local_file}")

    progress = TransferProgress(filename=local_file.name, total_bytes=local_file.stat().st_size)

    def on_chunk(size: int) -> None:
        progress.transferred_bytes += size
        if progress_callback:
            progress_callback(progress)

    method = descriptor.method if descriptor.method in ("PUT", "POST") else "PUT"
    with open(local_file, "rb") as f:
        try:
            response = client.transfer(method, descriptor.href, data=chunk_file(f, client.chunk_size, on_chunk))
        except requests.exceptions.RequestException as e:
            logger.warning("Upload of %s to %s failed: %s", local_file, path, e)
            return transport_failure(e, "Upload")

    if response.status_code in UPLOAD_SUCCESS:
        logger.info("Uploaded %s to %s", local_file, path)
        return Ok(descriptor)

    logger.warning("Upload of %s to %s failed with status %s", local_file, path, response.status_code)
    return failure_for_status(response.status_code)


def download(
    client: YandexDiskClient,
    path: str,
    local_file: Union[str, Path],
    progress_callback: Optional[ProgressCallback] = None,
    **params,
) -> Result:
    """
    Download a file from Yandex Disk into ``local_file``.

    Returns:
        Ok(local path as str) or an Error
    """
    link = obtain_download_link(client, path, **params)
    if not link.is_ok:
        return link
    return stream_to_file(client, link.value, local_file, progress_callback)


def stream_to_file(
    client: YandexDiskClient,
    descriptor: TransferDescriptor,
    local_file: Union[str, Path],
    progress_callback: Optional[ProgressCallback] = None,
) -> Result:
    """
    Follow the download link's redirect and stream the target into a file.

    The link is requested with redirects disabled and exactly one hop is
    followed, through the ``Location`` header. The local file is closed on
    every exit path and removed when the body cannot be read to the end.
    """
    if not descriptor.href:
        return Error(TransferFailure.REDIRECT_MISSING, "Download link has no href")

    try:
        redirect = client.transfer("GET", descriptor.href, allow_redirects=False)
        location = redirect.headers.get("Location")
        if not location:
            return Error(
                TransferFailure.REDIRECT_MISSING,
                f"Download link answered {redirect.status_code} without a Location header",
            )

        response = client.transfer("GET", location, stream=True)
        try:
            if response.status_code != 200:
                logger.warning("Download from %s failed with status %s", location, response.status_code)
                return failure_for_status(response.status_code)

            content_length = response.headers.get("Content-Length")
            progress = TransferProgress(
                filename=Path(local_file).name,
                total_bytes=int(content_length) if content_length else None,
            )
            _write_body(response, local_file, client.chunk_size, progress, progress_callback)
        finally:
            response.close()
    except requests.exceptions.RequestException as e:
        logger.warning("Download to %s failed: %s", local_file, e)
        return transport_failure(e, "Download")

    logger.info("Downloaded %s (%s bytes)", local_file, progress.transferred_bytes)
    return Ok(str(local_file))


def _write_body(
    response: requests.Response,
    local_file: Union[str, Path],
    chunk_size: int,
    progress: TransferProgress,
    progress_callback: Optional[ProgressCallback],
) -> None:
    """Write a streamed body into ``local_file``; a partly written file is removed on failure."""
    try:
        with open(local_file, "wb") as f:
            for chunk in response.iter_content(chunk_size=chunk_size):
                if chunk:
                    f.write(chunk)
                    progress.transferred_bytes += len(chunk)
                    if progress_callback:
                        progress_callback(progress)
    except requests.exceptions.RequestException:
        Path(local_file).unlink(missing_ok=True)
        raise
