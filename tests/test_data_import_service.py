"""
tests/test_data_import_service.py

Pytest unit tests for DataImportService.

The blob sink is an in-memory double so the all-or-nothing commit contract
can be asserted by counting upload calls.
"""

from __future__ import annotations

from datetime import datetime, timezone
from itertools import count

import pytest

from app.domain.data_source import RecordKind, UploadedFile
from app.domain.errors import StorageError
from app.services.data_import_service import DataImportService
from app.storage.blob_storage import StoredBlob


class RecordingBlobStorage:
    def __init__(self) -> None:
        self.calls: list[tuple[bytes, str, bool]] = []

    def upload(self, content: bytes, path: str, *, overwrite: bool = False) -> StoredBlob:
        self.calls.append((content, path, overwrite))
        return StoredBlob(
            public_url=f"memory://{path}",
            path=path,
            size_bytes=len(content),
            checksum="test",
            stored_at=datetime.now(timezone.utc),
        )


class FailingBlobStorage:
    def __init__(self) -> None:
        self.calls = 0

    def upload(self, content: bytes, path: str, *, overwrite: bool = False) -> StoredBlob:
        self.calls += 1
        raise StorageError("Failed to write file to storage.")


@pytest.fixture()
def storage() -> RecordingBlobStorage:
    return RecordingBlobStorage()


@pytest.fixture()
def service(storage: RecordingBlobStorage) -> DataImportService:
    tokens = count(1)
    return DataImportService(
        storage=storage,
        path_prefix="data-sources",
        storage_token_factory=lambda: f"token{next(tokens)}",
    )


def _csv(name: str, text: str) -> UploadedFile:
    return UploadedFile(file_name=name, content=text.encode("utf-8"), content_type="text/csv")


# ---------------------------------------------------------------------------
# Successful imports
# ---------------------------------------------------------------------------


class TestSuccessfulImport:
    def test_valid_file_is_stored_and_reported(
        self, service: DataImportService, storage: RecordingBlobStorage
    ) -> None:
        upload = _csv("sales.csv", "sku,date,unitsSold,revenue\nA1,2024-01-15,5,49.95")

        outcome = service.import_file(upload, RecordKind.SALES)

        assert outcome.success is True
        assert outcome.records_processed == 1
        assert outcome.records_total == 1
        assert outcome.errors == ()
        assert outcome.source_id.startswith("ds_")
        assert storage.calls == [(upload.content, "data-sources/token1-sales.csv", True)]

    def test_warnings_are_carried_as_errors(self, service: DataImportService) -> None:
        upload = _csv("products.csv", "sku,name\nA1,Widget")

        outcome = service.import_file(upload, RecordKind.PRODUCT)

        assert outcome.success is True
        assert "Row 1: Missing recommended field 'category'" in outcome.errors
        assert len(outcome.errors) == 3

    def test_repeated_imports_get_distinct_ids_and_paths(
        self, service: DataImportService, storage: RecordingBlobStorage
    ) -> None:
        upload = _csv("inventory.csv", "sku,qty\nA1,3")

        first = service.import_file(upload, RecordKind.GENERIC)
        second = service.import_file(upload, RecordKind.GENERIC)

        assert first.source_id != second.source_id
        assert storage.calls[0][1] != storage.calls[1][1]

    def test_json_file_is_imported(self, service: DataImportService) -> None:
        upload = UploadedFile(
            file_name="catalog.json",
            content=b'[{"sku": "A1", "name": "Widget", "category": "x", "price": 1, "cost": 0.5}]',
        )

        outcome = service.import_file(upload, RecordKind.PRODUCT)

        assert outcome.success is True
        assert outcome.records_processed == 1


# ---------------------------------------------------------------------------
# Rejected imports
# ---------------------------------------------------------------------------


class TestRejectedImport:
    def test_invalid_file_never_reaches_storage(
        self, service: DataImportService, storage: RecordingBlobStorage
    ) -> None:
        upload = _csv("products.csv", "sku,name,price\nA1,Widget,9.99\nA2,,5.00")

        outcome = service.import_file(upload, RecordKind.PRODUCT)

        assert outcome.success is False
        assert outcome.records_processed == 0
        assert outcome.records_total == 2
        assert outcome.errors == ("Row 2: Missing required field 'name'",)
        assert outcome.source_id == ""
        assert storage.calls == []

    def test_unsupported_suffix(self, service: DataImportService, storage: RecordingBlobStorage) -> None:
        outcome = service.import_file(UploadedFile(file_name="notes.txt", content=b"hello"), RecordKind.PRODUCT)

        assert outcome.success is False
        assert outcome.records_total == 0
        assert outcome.records_processed == 0
        assert outcome.errors == ("Unsupported file format",)
        assert outcome.source_id == ""
        assert storage.calls == []

    def test_malformed_json(self, service: DataImportService, storage: RecordingBlobStorage) -> None:
        outcome = service.import_file(UploadedFile(file_name="data.json", content=b"{oops"), RecordKind.GENERIC)

        assert outcome.success is False
        assert outcome.errors == ("Invalid JSON format",)
        assert storage.calls == []

    def test_deeply_nested_json(self, service: DataImportService, storage: RecordingBlobStorage) -> None:
        upload = UploadedFile(file_name="deep.json", content=b"[" * 100_000 + b"]" * 100_000)

        outcome = service.import_file(upload, RecordKind.GENERIC)

        assert outcome.success is False
        assert outcome.records_total == 0
        assert outcome.errors == ("Invalid JSON format",)
        assert storage.calls == []

    def test_kind_label_is_normalized_before_validation(
        self, service: DataImportService, storage: RecordingBlobStorage
    ) -> None:
        outcome = service.import_file(_csv("p.csv", "sku,name\n,Widget"), "Product")

        assert outcome.success is False
        assert outcome.errors == ("Row 1: Missing required field 'sku'",)
        assert storage.calls == []

    def test_empty_generic_file(self, service: DataImportService, storage: RecordingBlobStorage) -> None:
        outcome = service.import_file(_csv("stock.csv", ""), RecordKind.GENERIC)

        assert outcome.success is False
        assert outcome.errors == ("No data found in file",)
        assert storage.calls == []

    def test_storage_failure_becomes_failed_outcome(self) -> None:
        failing = FailingBlobStorage()
        service = DataImportService(storage=failing)

        outcome = service.import_file(_csv("inventory.csv", "sku,qty\nA1,3\nA2,4"), RecordKind.GENERIC)

        assert failing.calls == 1
        assert outcome.success is False
        assert outcome.records_processed == 0
        assert outcome.records_total == 2
        assert outcome.errors == ("Failed to write file to storage.",)
        assert outcome.source_id == ""


# ---------------------------------------------------------------------------
# Preview
# ---------------------------------------------------------------------------


class TestPreview:
    def test_preview_does_not_store(self, service: DataImportService, storage: RecordingBlobStorage) -> None:
        report = service.preview_file(_csv("products.csv", "sku,name\nA1,Widget"), RecordKind.PRODUCT)

        assert report.is_valid is True
        assert report.preview == ({"sku": "A1", "name": "Widget"},)
        assert storage.calls == []
