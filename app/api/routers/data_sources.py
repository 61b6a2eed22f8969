"""
app/api/routers/data_sources.py

Data source upload, import, template, and connector endpoints.
"""

from __future__ import annotations

from dataclasses import asdict
from datetime import datetime, timezone

from fastapi import APIRouter, Depends, HTTPException, Query, Response, status

from app.api.dependencies import get_data_file_upload
from app.connectors.probe import ConnectorProbe, get_connector_probe
from app.domain.data_source import (
    DataSourceDescriptor,
    DataSourceStatus,
    DataSourceType,
    ImportOutcome,
    UploadedFile,
    infer_record_kind,
    resolve_record_kind,
)
from app.domain.errors import FormatError, UnsupportedTemplateError
from app.parsers.registry import DataFormat, format_for_filename
from app.schemas.data_sources import (
    ConnectorProbeRequest,
    ConnectorProbeResponse,
    DataSourceResponse,
    ImportResultResponse,
    ValidationReportResponse,
)
from app.services.data_import_service import DataImportService, get_data_import_service
from app.services.template_service import generate_template, template_file_name

router = APIRouter(prefix="/data-sources", tags=["data-sources"])

_SOURCE_TYPE_BY_FORMAT = {
    DataFormat.CSV: "csv",
    DataFormat.SPREADSHEET: "excel",
    DataFormat.JSON: "json",
}


def _resolve_kind(kind: str | None, file_name: str) -> str:
    if kind is None or not kind.strip():
        return infer_record_kind(file_name)
    return resolve_record_kind(kind)


def build_file_data_source(uploaded_file: UploadedFile, outcome: ImportOutcome) -> DataSourceDescriptor:
    """
    Describe a successfully imported file as a new active data source.
    """

    return DataSourceDescriptor(
        id=outcome.source_id,
        name=uploaded_file.file_name,
        type=DataSourceType.FILE,
        source_type=_SOURCE_TYPE_BY_FORMAT.get(format_for_filename(uploaded_file.file_name), "file"),
        status=DataSourceStatus.ACTIVE,
        last_sync=datetime.now(timezone.utc),
        record_count=outcome.records_processed,
        file_size=uploaded_file.size_bytes,
    )


@router.post("/preview", response_model=ValidationReportResponse)
def preview_data_file(
    uploaded_file: UploadedFile = Depends(get_data_file_upload),
    kind: str | None = Query(default=None, description="product, sales, or generic; inferred from the file name when omitted"),
    import_service: DataImportService = Depends(get_data_import_service),
) -> ValidationReportResponse:
    """
    Validate one file and return its report without committing it.
    """

    record_kind = _resolve_kind(kind, uploaded_file.file_name)
    try:
        report = import_service.preview_file(uploaded_file, record_kind)
    except FormatError as exc:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(exc),
        ) from exc

    return ValidationReportResponse(
        file_name=uploaded_file.file_name,
        kind=record_kind,
        is_valid=report.is_valid,
        errors=list(report.errors),
        warnings=list(report.warnings),
        record_count=report.record_count,
        valid_records=report.valid_records,
        preview=[dict(record) for record in report.preview],
    )


@router.post("/import", response_model=ImportResultResponse)
def import_data_file(
    uploaded_file: UploadedFile = Depends(get_data_file_upload),
    kind: str | None = Query(default=None, description="product, sales, or generic; inferred from the file name when omitted"),
    import_service: DataImportService = Depends(get_data_import_service),
) -> ImportResultResponse:
    """
    Validate and commit one file as a new data source.
    """

    record_kind = _resolve_kind(kind, uploaded_file.file_name)
    outcome = import_service.import_file(uploaded_file, record_kind)

    data_source: DataSourceResponse | None = None
    if outcome.success:
        data_source = DataSourceResponse(**asdict(build_file_data_source(uploaded_file, outcome)))

    return ImportResultResponse(
        success=outcome.success,
        records_processed=outcome.records_processed,
        records_total=outcome.records_total,
        errors=list(outcome.errors),
        source_id=outcome.source_id,
        data_source=data_source,
    )


@router.get("/templates/{kind}")
def download_template(kind: str) -> Response:
    """
    Download the example CSV template for a record kind.
    """

    try:
        content = generate_template(kind)
        file_name = template_file_name(kind)
    except UnsupportedTemplateError as exc:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(exc),
        ) from exc

    return Response(
        content=content,
        media_type="text/csv",
        headers={"Content-Disposition": f'attachment; filename="{file_name}"'},
    )


@router.post("/probe", response_model=ConnectorProbeResponse)
def probe_connector(
    payload: ConnectorProbeRequest,
    probe: ConnectorProbe = Depends(get_connector_probe),
) -> ConnectorProbeResponse:
    """
    Check that an API connector endpoint is reachable with the given credentials.
    """

    result = probe.probe(payload.url, credential=payload.api_key, extra_headers=payload.headers)
    return ConnectorProbeResponse(
        reachable=result.reachable,
        message=result.message,
        sample=result.sample,
    )
