"""Pytest fixtures for yandex_disk tests."""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest
import requests

from yandex_disk import YandexDiskClient, make_client


@pytest.fixture
def session() -> MagicMock:
    """Create a mock requests session; set ``session.request`` answers per test."""
    return MagicMock(spec=requests.Session)


@pytest.fixture
def client(session: MagicMock) -> YandexDiskClient:
    """Create a client bound to the mock session."""
    return make_client("test_token", session=session)


@pytest.fixture
def local_file(tmp_path):
    """Create a small local file to upload."""
    path = tmp_path / "report.txt"
    path.write_bytes(b"quarterly numbers\n" * 10)
    return path
