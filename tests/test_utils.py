"""Tests for utility helpers."""

from __future__ import annotations

import io

import pytest

from yandex_disk.utils import build_query, chunk_file, format_file_size


class TestFormatFileSize:
    """Tests for format_file_size."""

    @pytest.mark.parametrize(
        "size, expected",
        [
            (0, "0 B"),
            (1023, "1023 B"),
            (1024, "1.0 KB"),
            (1536, "1.5 KB"),
            (10 * 1024 ** 3, "10.0 GB"),
            (2048 * 1024 ** 5, "2048.0 PB"),
        ],
    )
    def test_sizes(self, size: int, expected: str) -> None:
        """Test binary units and the largest unit cap."""
        assert format_file_size(size) == expected


class TestChunkFile:
    """Tests for chunk_file."""

    def test_chunks_and_callback(self) -> None:
        """Test that chunks cover the file and each length is reported."""
        seen = []

        chunks = list(chunk_file(io.BytesIO(b"x" * 10), chunk_size=4, on_chunk=seen.append))

        assert chunks == [b"xxxx", b"xxxx", b"xx"]
        assert seen == [4, 4, 2]


class TestBuildQuery:
    """Tests for build_query."""

    def test_normalisation(self) -> None:
        """Test dropped Nones, lowercase booleans and comma-joined lists."""
        query = build_query({"path": "disk:/a", "limit": None, "overwrite": True, "fields": ["name", "size"]})

        assert query == {"path": "disk:/a", "overwrite": "true", "fields": "name,size"}
