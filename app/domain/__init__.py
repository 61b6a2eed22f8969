"""
app/domain package marker.
"""

from app.domain.data_source import (
    DataSourceDescriptor,
    FieldMap,
    ImportOutcome,
    ProbeResult,
    RecordKind,
    UploadedFile,
    ValidationOutcome,
    infer_record_kind,
    resolve_record_kind,
)
from app.domain.errors import (
    DataSourceError,
    FormatError,
    StorageError,
    UnsupportedTemplateError,
    UploadRejectedError,
)

__all__ = [
    "DataSourceDescriptor",
    "DataSourceError",
    "FieldMap",
    "FormatError",
    "ImportOutcome",
    "ProbeResult",
    "RecordKind",
    "StorageError",
    "UnsupportedTemplateError",
    "UploadRejectedError",
    "UploadedFile",
    "ValidationOutcome",
    "infer_record_kind",
    "resolve_record_kind",
]
