"""
app/services/data_import_service.py

Service layer for the data source import workflow.

An import runs four steps, each depending on the previous one:

    1. parse the file with the parser selected by its name suffix
    2. validate the parsed records against the record-kind schema
    3. store the original bytes in the blob sink
    4. allocate a source id for the new data source

Validation failure rejects the whole file and the blob sink is never called.
Format and storage failures are converted into a failed ImportOutcome here so
callers handle a single result shape.
"""

from __future__ import annotations

import logging
import time
import uuid
from functools import lru_cache
from typing import Callable

from app.config import get_blob_storage_settings
from app.domain.data_source import ImportOutcome, UploadedFile, ValidationOutcome, resolve_record_kind
from app.domain.errors import FormatError, StorageError
from app.parsers.registry import parse_file
from app.services.validation_report import build_validation_report
from app.storage.blob_storage import BlobStorage, LocalBlobStorage, sanitize_file_name
from app.validators.record_validator import RecordValidator

logger = logging.getLogger(__name__)


def _default_storage_token() -> str:
    return f"{time.time_ns() // 1_000_000}-{uuid.uuid4().hex[:8]}"


def _default_source_id() -> str:
    return f"ds_{uuid.uuid4().hex}"


class DataImportService:
    """
    Coordinates parsing, validation, and blob persistence of uploaded files.
    """

    def __init__(
        self,
        *,
        storage: BlobStorage,
        path_prefix: str = "data-sources",
        validator: RecordValidator | None = None,
        storage_token_factory: Callable[[], str] | None = None,
        source_id_factory: Callable[[], str] | None = None,
    ) -> None:
        self._storage = storage
        self._path_prefix = path_prefix.strip("/")
        self._validator = validator or RecordValidator()
        self._storage_token_factory = storage_token_factory or _default_storage_token
        self._source_id_factory = source_id_factory or _default_source_id

    def preview_file(self, uploaded_file: UploadedFile, kind: str) -> ValidationOutcome:
        """
        Parse and validate a file without committing it.

        Raises FormatError when the file cannot be decoded.
        """

        kind = resolve_record_kind(kind)
        records = parse_file(uploaded_file.file_name, uploaded_file.content)
        return build_validation_report(records, kind, validator=self._validator)

    def import_file(self, uploaded_file: UploadedFile, kind: str) -> ImportOutcome:
        """
        Parse, validate, and persist one file as a new data source.
        """

        kind = resolve_record_kind(kind)
        try:
            validation = self.preview_file(uploaded_file, kind)
        except FormatError as exc:
            logger.warning(
                "Data import rejected file=%s kind=%s reason=format error=%s",
                uploaded_file.file_name,
                kind,
                exc,
            )
            return ImportOutcome.failed(errors=[str(exc)])

        if not validation.is_valid:
            logger.warning(
                "Data import rejected file=%s kind=%s records=%d errors=%d",
                uploaded_file.file_name,
                kind,
                validation.record_count,
                len(validation.errors),
            )
            return ImportOutcome.failed(
                errors=validation.errors,
                records_total=validation.record_count,
            )

        try:
            storage_path = self._build_storage_path(uploaded_file.file_name)
            stored = self._storage.upload(uploaded_file.content, storage_path, overwrite=True)
        except StorageError as exc:
            logger.error(
                "Data import storage failed file=%s kind=%s error=%s",
                uploaded_file.file_name,
                kind,
                exc,
            )
            return ImportOutcome.failed(
                errors=[str(exc)],
                records_total=validation.record_count,
            )

        source_id = self._source_id_factory()
        logger.info(
            "Data import completed file=%s kind=%s source_id=%s records=%d/%d url=%s",
            uploaded_file.file_name,
            kind,
            source_id,
            validation.valid_records,
            validation.record_count,
            stored.public_url,
        )
        return ImportOutcome(
            success=True,
            records_processed=validation.valid_records,
            records_total=validation.record_count,
            errors=validation.warnings,
            source_id=source_id,
        )

    def _build_storage_path(self, file_name: str) -> str:
        safe_name = sanitize_file_name(file_name)
        blob_name = f"{self._storage_token_factory()}-{safe_name}"
        if not self._path_prefix:
            return blob_name
        return f"{self._path_prefix}/{blob_name}"


@lru_cache(maxsize=1)
def get_data_import_service() -> DataImportService:
    """
    Build and cache the import service with env-driven settings.
    """
    settings = get_blob_storage_settings()
    return DataImportService(
        storage=LocalBlobStorage(settings.root_dir, public_base_url=settings.public_base_url),
        path_prefix=settings.path_prefix,
    )
