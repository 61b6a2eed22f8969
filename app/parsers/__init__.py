"""
app/parsers package marker.
"""

from app.parsers.delimited import parse_delimited
from app.parsers.registry import (
    DataFormat,
    format_for_filename,
    parse_file,
    parse_records,
    register_parser,
    supported_suffixes,
)
from app.parsers.spreadsheet import parse_spreadsheet
from app.parsers.structured import parse_structured

__all__ = [
    "DataFormat",
    "format_for_filename",
    "parse_delimited",
    "parse_file",
    "parse_records",
    "parse_spreadsheet",
    "parse_structured",
    "register_parser",
    "supported_suffixes",
]
