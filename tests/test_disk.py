"""Tests for disk operations and provider error passthrough."""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest
from helpers import API, called_params, called_url, error_body, make_response

from yandex_disk import Error, Ok, YandexDiskClient, disk, files, folders, public_files, transfer


class TestAbout:
    """Tests for disk.about."""

    def test_about_returns_disk_info(self, client: YandexDiskClient, session: MagicMock) -> None:
        """Test that the whole body is the payload."""
        info = {"total_space": 1000, "used_space": 10, "user": {"login": "me"}}
        session.request.return_value = make_response(200, info)

        result = disk.about(client)

        assert result == Ok(info)
        assert called_url(session) == f"{API}/disk"


class TestMetadata:
    """Tests for disk.metadata."""

    def test_metadata_sends_path_and_extra_params(self, client: YandexDiskClient, session: MagicMock) -> None:
        """Test that unknown options are forwarded verbatim."""
        session.request.return_value = make_response(200, {"name": "a.txt", "type": "file"})

        result = disk.metadata(client, "disk:/a.txt", fields="name,type", preview_size="S")

        assert result.is_ok
        assert result.value["name"] == "a.txt"
        assert called_params(session) == {"path": "disk:/a.txt", "fields": "name,type", "preview_size": "S"}

    def test_files_metadata_is_disk_metadata(self) -> None:
        """Test that files expose the same metadata call."""
        assert files.metadata is disk.metadata


class TestOperationStatus:
    """Tests for disk.operation_status."""

    def test_operation_status(self, client: YandexDiskClient, session: MagicMock) -> None:
        """Test that the operation id is part of the path."""
        session.request.return_value = make_response(200, {"status": "in-progress"})

        result = disk.operation_status(client, "op-42")

        assert result == Ok({"status": "in-progress"})
        assert called_url(session) == f"{API}/disk/operations/op-42"


OPERATIONS = [
    pytest.param(lambda c: disk.about(c), id="about"),
    pytest.param(lambda c: disk.metadata(c, "disk:/a"), id="metadata"),
    pytest.param(lambda c: disk.operation_status(c, "op"), id="operation_status"),
    pytest.param(lambda c: files.index(c), id="files.index"),
    pytest.param(lambda c: files.recent(c), id="files.recent"),
    pytest.param(lambda c: files.update(c, "disk:/a", {"k": "v"}), id="files.update"),
    pytest.param(lambda c: files.copy(c, "disk:/a", "disk:/b"), id="files.copy"),
    pytest.param(lambda c: files.move(c, "disk:/a", "disk:/b"), id="files.move"),
    pytest.param(lambda c: files.destroy(c, "disk:/a"), id="files.destroy"),
    pytest.param(lambda c: folders.create(c, "disk:/a"), id="folders.create"),
    pytest.param(lambda c: public_files.index(c), id="public.index"),
    pytest.param(lambda c: public_files.create(c, "disk:/a"), id="public.create"),
    pytest.param(lambda c: public_files.destroy(c, "disk:/a"), id="public.destroy"),
    pytest.param(lambda c: public_files.metadata(c, "key"), id="public.metadata"),
    pytest.param(lambda c: public_files.download_url(c, "key"), id="public.download_url"),
    pytest.param(lambda c: public_files.save_to_downloads(c, "disk:/a"), id="public.save_to_downloads"),
    pytest.param(lambda c: transfer.obtain_upload_target(c, "disk:/a"), id="upload_target"),
    pytest.param(lambda c: transfer.obtain_download_link(c, "disk:/a"), id="download_link"),
]


@pytest.mark.parametrize("operation", OPERATIONS)
def test_provider_error_is_passed_through(operation, client: YandexDiskClient, session: MagicMock) -> None:
    """Test that every operation returns the provider error unmodified."""
    session.request.return_value = make_response(
        401, error_body("UnauthorizedError", "Не авторизован.")
    )

    result = operation(client)

    assert result == Error("UnauthorizedError", "Не авторизован.")
    assert not result.is_ok
