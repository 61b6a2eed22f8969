"""
app/parsers/spreadsheet.py

Spreadsheet (.xlsx / .xls) parser backed by pandas.

The first sheet is read; its first row is the header row.
"""

from __future__ import annotations

import io
import logging
from datetime import date, datetime
from typing import Any

import pandas as pd

from app.domain.data_source import FieldMap, Scalar
from app.domain.errors import FormatError
from app.parsers.values import coerce_cell

logger = logging.getLogger(__name__)


def _convert_cell(value: Any) -> Scalar:
    if value is None:
        return ""
    if isinstance(value, str):
        return coerce_cell(value)
    if isinstance(value, (datetime, date)):
        if pd.isna(value):
            return ""
        if isinstance(value, datetime):
            if value.time() == datetime.min.time():
                return value.date().isoformat()
            return value.isoformat(sep=" ")
        return value.isoformat()
    if isinstance(value, bool):
        return str(value).upper()
    if pd.isna(value):
        return ""
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if value.is_integer() else value
    return coerce_cell(str(value))


def parse_spreadsheet(raw: bytes | str) -> list[FieldMap]:
    """
    Decode the first sheet of a workbook into field-maps.
    """

    if isinstance(raw, str):
        raise FormatError("Spreadsheet content must be binary.")

    try:
        frame = pd.read_excel(io.BytesIO(raw), sheet_name=0, dtype=object)
    except ImportError as exc:
        logger.error("Spreadsheet engine unavailable error=%s", exc)
        raise FormatError("Spreadsheet support is not installed on this server") from exc
    except Exception as exc:  # noqa: BLE001
        logger.warning("Spreadsheet decode failed error=%s", exc)
        raise FormatError("Invalid spreadsheet format") from exc

    headers = [str(column).strip() for column in frame.columns]
    records: list[FieldMap] = []
    for row in frame.itertuples(index=False, name=None):
        records.append({header: _convert_cell(value) for header, value in zip(headers, row)})
    return records
