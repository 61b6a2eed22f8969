"""
app/parsers/delimited.py

Comma-delimited text parser.

Quoting is handled by removing every quote character from header and value
cells. Delimiters inside quoted values are not supported.
"""

from __future__ import annotations

from app.domain.data_source import FieldMap
from app.parsers.values import coerce_cell, decode_text

DELIMITER = ","
QUOTE = '"'


def _split_line(line: str) -> list[str]:
    return [cell.strip().replace(QUOTE, "") for cell in line.split(DELIMITER)]


def parse_delimited(raw: bytes | str) -> list[FieldMap]:
    """
    Parse delimited text into field-maps, one per line after the header row.

    Missing trailing cells become empty strings; cells beyond the header
    count are ignored.
    """

    lines = decode_text(raw).strip().split("\n")
    if len(lines) < 2:
        return []

    headers = _split_line(lines[0])
    records: list[FieldMap] = []
    for line in lines[1:]:
        values = _split_line(line)
        record: FieldMap = {}
        for index, header in enumerate(headers):
            raw_value = values[index] if index < len(values) else ""
            record[header] = coerce_cell(raw_value)
        records.append(record)

    return records
