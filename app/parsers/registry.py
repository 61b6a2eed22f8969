"""
app/parsers/registry.py

Format registry mapping declared formats and file suffixes to parsers.

New formats are added with ``register_parser`` instead of extending a
branching chain.
"""

from __future__ import annotations

import logging
from pathlib import PurePosixPath
from typing import Callable, Iterable

from app.domain.data_source import FieldMap
from app.domain.errors import FormatError
from app.parsers.delimited import parse_delimited
from app.parsers.spreadsheet import parse_spreadsheet
from app.parsers.structured import parse_structured

logger = logging.getLogger(__name__)

Parser = Callable[[bytes | str], list[FieldMap]]


class DataFormat:
    CSV = "csv"
    JSON = "json"
    SPREADSHEET = "spreadsheet"


_PARSERS: dict[str, Parser] = {}
_SUFFIX_FORMATS: dict[str, str] = {}


def _normalize_suffix(suffix: str) -> str:
    normalized = suffix.strip().lower()
    if not normalized.startswith("."):
        normalized = f".{normalized}"
    return normalized


def register_parser(data_format: str, suffixes: Iterable[str], parser: Parser) -> None:
    """
    Register a parser for a declared format and the file suffixes that select it.
    """

    _PARSERS[data_format] = parser
    for suffix in suffixes:
        _SUFFIX_FORMATS[_normalize_suffix(suffix)] = data_format


def supported_suffixes() -> tuple[str, ...]:
    return tuple(sorted(_SUFFIX_FORMATS))


def format_for_filename(file_name: str) -> str:
    """
    Select the declared format from the file name suffix.
    """

    suffix = PurePosixPath(file_name.strip().replace("\\", "/")).suffix.lower()
    data_format = _SUFFIX_FORMATS.get(suffix)
    if data_format is None:
        raise FormatError("Unsupported file format")
    return data_format


def parse_records(raw: bytes | str, declared_format: str) -> list[FieldMap]:
    """
    Parse raw content of a declared format into field-maps.
    """

    parser = _PARSERS.get(declared_format)
    if parser is None:
        raise FormatError(f"Unsupported file format: {declared_format}")
    records = parser(raw)
    logger.debug("Parsed records format=%s count=%d", declared_format, len(records))
    return records


def parse_file(file_name: str, content: bytes) -> list[FieldMap]:
    """
    Parse file content using the parser selected by its name suffix.
    """

    return parse_records(content, format_for_filename(file_name))


register_parser(DataFormat.CSV, (".csv",), parse_delimited)
register_parser(DataFormat.JSON, (".json",), parse_structured)
register_parser(DataFormat.SPREADSHEET, (".xlsx", ".xls"), parse_spreadsheet)
