"""
app/schemas package marker.
"""

from app.schemas.data_sources import (
    ConnectorProbeRequest,
    ConnectorProbeResponse,
    DataSourceResponse,
    ImportResultResponse,
    ValidationReportResponse,
)

__all__ = [
    "ConnectorProbeRequest",
    "ConnectorProbeResponse",
    "DataSourceResponse",
    "ImportResultResponse",
    "ValidationReportResponse",
]
