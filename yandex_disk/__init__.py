"""
Yandex Disk SDK - Python client for the Yandex Disk REST API.

This package provides:
- An immutable client handle built from an OAuth token
- Disk, file, folder, public resource and trash operations
- Streamed file upload/download through provider-issued transfer URLs
- Forced folder creation with missing ancestors
- A command-line tool (``yandex-disk``)

Every operation returns ``Ok(value)`` or ``Error(code, description)``:

    from yandex_disk import make_client, folders

    client = make_client("AQAAAA...")
    result = folders.create(client, "disk:/photos/2024", force=True)
    if not result.is_ok:
        print(result.code, result.description)
"""

__version__ = "0.1.0"

from . import auth, disk, files, folders, public_files, trash
from .client import YandexDiskClient, make_client
from .models import (
    Ok,
    Error,
    Result,
    Status,
    TransferFailure,
    TransferDescriptor,
    FileListing,
    TransferProgress,
)
from .exceptions import (
    YandexDiskError,
    AuthenticationError,
    ConfigurationError,
    NetworkError,
    TimeoutError,
    ResponseFormatError,
)

__all__ = [
    # Client
    "YandexDiskClient",
    "make_client",

    # Operations
    "auth",
    "disk",
    "files",
    "folders",
    "public_files",
    "trash",

    # Data models
    "Ok",
    "Error",
    "Result",
    "Status",
    "TransferFailure",
    "TransferDescriptor",
    "FileListing",
    "TransferProgress",

    # Exceptions
    "YandexDiskError",
    "AuthenticationError",
    "ConfigurationError",
    "NetworkError",
    "TimeoutError",
    "ResponseFormatError",
]
