"""
app/parsers/structured.py

JSON object-list parser.
"""

from __future__ import annotations

import json

from app.domain.data_source import FieldMap
from app.domain.errors import FormatError
from app.parsers.values import decode_text


def parse_structured(raw: bytes | str) -> list[FieldMap]:
    """
    Decode a JSON document into field-maps.

    A list yields one record per element; a single object is one record.
    """

    try:
        data = json.loads(decode_text(raw))
    except (json.JSONDecodeError, RecursionError) as exc:
        raise FormatError("Invalid JSON format") from exc

    items = data if isinstance(data, list) else [data]
    records: list[FieldMap] = []
    for position, item in enumerate(items, start=1):
        if not isinstance(item, dict):
            raise FormatError(f"Invalid JSON format: item {position} is not an object")
        records.append({str(key): value for key, value in item.items()})
    return records
