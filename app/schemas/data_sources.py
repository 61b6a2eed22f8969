"""
app/schemas/data_sources.py

Request and response schemas for data source endpoints.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import BaseModel, Field


class ValidationReportResponse(BaseModel):
    """
    API response model for a file validation report.
    """

    file_name: str
    kind: str
    is_valid: bool
    errors: list[str] = Field(default_factory=list)
    warnings: list[str] = Field(default_factory=list)
    record_count: int = Field(..., ge=0)
    valid_records: int = Field(..., ge=0)
    preview: list[dict[str, Any]] = Field(default_factory=list)


class DataSourceResponse(BaseModel):
    """
    API response model for one registered data source.
    """

    id: str
    name: str
    type: str
    source_type: str
    status: str
    last_sync: datetime
    record_count: int = Field(..., ge=0)
    file_size: int | None = Field(default=None, ge=0)


class ImportResultResponse(BaseModel):
    """
    API response model for a file import.
    """

    success: bool
    records_processed: int = Field(..., ge=0)
    records_total: int = Field(..., ge=0)
    errors: list[str] = Field(default_factory=list)
    source_id: str = ""
    data_source: DataSourceResponse | None = None


class ConnectorProbeRequest(BaseModel):
    """
    API request model for testing an API connector.
    """

    url: str = Field(..., min_length=1)
    api_key: str | None = None
    headers: dict[str, str] = Field(default_factory=dict)


class ConnectorProbeResponse(BaseModel):
    """
    API response model for a connector connectivity check.
    """

    reachable: bool
    message: str
    sample: Any = None
