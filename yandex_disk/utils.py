"""
Utility functions for the Yandex Disk SDK.

This module provides helpers for chunked file reading, query parameter
normalisation and human-readable sizes.
"""

from typing import Any, BinaryIO, Callable, Dict, Iterator, Optional

SIZE_UNITS = ("B", "KB", "MB", "GB", "TB", "PB")


def chunk_file(
    file_obj: BinaryIO,
    chunk_size: int = 8 * 1024 * 1024,
    on_chunk: Optional[Callable[[int], None]] = None,
) -> Iterator[bytes]:
    """
    Read file in chunks.

    Args:
        file_obj: File object to read from
        chunk_size: Size of each chunk in bytes
        on_chunk: Called with the length of every chunk after it is read

    Yields:
        File chunks as bytes
    """
    while True:
        chunk = file_obj.read(chunk_size)
        if not chunk:
            break
        if on_chunk:
            on_chunk(len(chunk))
        yield chunk


def build_query(params: Optional[Dict[str, Any]]) -> Dict[str, Any]:
    """
    Normalise query parameters for the API.

    ``None`` values are dropped, booleans become ``"true"``/``"false"`` and
    lists are joined with commas (the API's format for ``fields``).

    Args:
        params: Raw parameters

    Returns:
        Parameters ready to be URL-encoded
    """
    query = {}

    for key, value in (params or {}).items():
        if value is None:
            continue
        if isinstance(value, bool):
            value = str(value).lower()
        elif isinstance(value, (list, tuple)):
            value = ",".join(str(v) for v in value)
        query[key] = value

    return query


def format_file_size(size_bytes: int) -> str:
    """Render a byte count from the API (``size``, ``total_space``...) with binary units."""
    if size_bytes < 1024:
        return f"{size_bytes} B"

    size = float(size_bytes)
    for unit in SIZE_UNITS[1:]:
        size /= 1024
        if size < 1024 or unit == SIZE_UNITS[-1]:
            break
    return f"{round(size, 2)} {unit}"
