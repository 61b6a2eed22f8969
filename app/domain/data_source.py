"""
app/domain/data_source.py

Domain models used by the data source ingestion flow.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

Scalar = int | float | str
FieldMap = dict[str, Any]

PREVIEW_SIZE = 5


class RecordKind:
    PRODUCT = "product"
    SALES = "sales"
    GENERIC = "generic"


class DataSourceType:
    FILE = "file"
    API = "api"
    DATABASE = "database"


class DataSourceStatus:
    ACTIVE = "active"
    INACTIVE = "inactive"
    ERROR = "error"
    SYNCING = "syncing"


def resolve_record_kind(label: str | None) -> str:
    """
    Normalize a record-kind label.

    ``inventory`` and any label without a dedicated schema resolve to generic.
    """

    normalized = (label or "").strip().lower()
    if normalized in (RecordKind.PRODUCT, RecordKind.SALES):
        return normalized
    return RecordKind.GENERIC


def infer_record_kind(file_name: str) -> str:
    """
    Guess the record kind from a file name.

    Names mentioning sales or revenue are sales files, inventory or stock
    files have no dedicated schema, anything else is treated as products.
    """

    lowered = file_name.lower()
    if "sales" in lowered or "revenue" in lowered:
        return RecordKind.SALES
    if "inventory" in lowered or "stock" in lowered:
        return RecordKind.GENERIC
    return RecordKind.PRODUCT


@dataclass(frozen=True)
class UploadedFile:
    """
    Raw uploaded file handed to the ingestion core.
    """

    file_name: str
    content: bytes
    content_type: str | None = None

    @property
    def size_bytes(self) -> int:
        return len(self.content)


@dataclass(frozen=True)
class ValidationOutcome:
    """
    Validation report for one parsed file.
    """

    is_valid: bool
    errors: tuple[str, ...]
    warnings: tuple[str, ...]
    record_count: int
    valid_records: int
    preview: tuple[FieldMap, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class ImportOutcome:
    """
    Result of one import call.

    On success ``errors`` carries the non-blocking validation warnings.
    """

    success: bool
    records_processed: int
    records_total: int
    errors: tuple[str, ...]
    source_id: str = ""

    @classmethod
    def failed(cls, *, errors: tuple[str, ...] | list[str], records_total: int = 0) -> "ImportOutcome":
        return cls(
            success=False,
            records_processed=0,
            records_total=records_total,
            errors=tuple(errors),
            source_id="",
        )


@dataclass(frozen=True)
class DataSourceDescriptor:
    """
    Registered data source as shown to users.
    """

    id: str
    name: str
    type: str
    source_type: str
    status: str
    last_sync: datetime
    record_count: int
    file_size: int | None = None


@dataclass(frozen=True)
class ProbeResult:
    """
    Outcome of a connectivity check against an external API.
    """

    reachable: bool
    message: str
    sample: Any = None
