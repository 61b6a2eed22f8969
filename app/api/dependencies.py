"""
app/api/dependencies.py

Shared FastAPI dependencies for request validation.
"""

from __future__ import annotations

from fastapi import Depends, File, HTTPException, UploadFile, status

from app.config import DataImportSettings, get_data_import_settings
from app.domain.data_source import UploadedFile
from app.domain.errors import FormatError, UploadRejectedError
from app.parsers.registry import format_for_filename, supported_suffixes


def read_upload(
    *,
    file_name: str,
    content: bytes,
    content_type: str | None,
    max_upload_bytes: int,
) -> UploadedFile:
    """
    Apply the upload policy and wrap the raw content.
    """

    name = file_name.strip()
    if not name:
        raise UploadRejectedError("Uploaded file must have a name.")
    if len(content) > max_upload_bytes:
        limit_mb = max(1, round(max_upload_bytes / 1024 / 1024))
        raise UploadRejectedError(f"File size must be less than {limit_mb}MB")
    return UploadedFile(file_name=name, content=content, content_type=content_type)


def get_data_file_upload(
    file: UploadFile = File(...),
    settings: DataImportSettings = Depends(get_data_import_settings),
) -> UploadedFile:
    """
    Validate the uploaded data file by suffix and size.
    """

    file_name = (file.filename or "").strip()
    try:
        format_for_filename(file_name)
    except FormatError as exc:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Unsupported file format. Allowed suffixes: {', '.join(supported_suffixes())}.",
        ) from exc

    try:
        content = file.file.read()
    finally:
        file.file.close()

    try:
        return read_upload(
            file_name=file_name,
            content=content,
            content_type=file.content_type,
            max_upload_bytes=settings.max_upload_bytes,
        )
    except UploadRejectedError as exc:
        status_code = (
            status.HTTP_413_REQUEST_ENTITY_TOO_LARGE
            if len(content) > settings.max_upload_bytes
            else status.HTTP_400_BAD_REQUEST
        )
        raise HTTPException(status_code=status_code, detail=str(exc)) from exc
