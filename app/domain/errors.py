"""
app/domain/errors.py

Exceptions raised by the data source ingestion flow.
"""

from __future__ import annotations


class DataSourceError(Exception):
    """Base exception for data source ingestion failures."""


class FormatError(DataSourceError, ValueError):
    """Raised when input cannot be decoded under the declared or selected format."""


class StorageError(DataSourceError, RuntimeError):
    """Raised when persisting an uploaded file to blob storage fails."""


class UnsupportedTemplateError(DataSourceError, ValueError):
    """Raised when no template exists for a record kind."""


class UploadRejectedError(DataSourceError, ValueError):
    """Raised when an upload violates the upload policy (name, size)."""
