"""
app/parsers/values.py

Scalar coercion shared by the format parsers and the record validator.
"""

from __future__ import annotations

import math
from decimal import Decimal, InvalidOperation
from typing import Any

from app.domain.data_source import Scalar
from app.domain.errors import FormatError


def parse_number(value: str) -> int | float | None:
    """
    Parse text that is fully numeric into an int or a finite float.

    Returns None for blank or non-numeric text.
    """

    text = value.strip()
    if not text or "_" in text:
        return None

    try:
        return int(text)
    except ValueError:
        pass

    try:
        parsed = float(Decimal(text))
    except (InvalidOperation, ValueError):
        return None
    if not math.isfinite(parsed):
        return None
    return parsed


def coerce_cell(raw: str) -> Scalar:
    """
    Coerce one text cell to a number when it parses fully, else trimmed text.
    """

    text = raw.strip()
    if not text:
        return ""
    number = parse_number(text)
    return text if number is None else number


def as_number(value: Any) -> int | float | None:
    """
    Return the numeric reading of a field value, or None when it has none.
    """

    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return value if math.isfinite(value) else None
    if isinstance(value, str):
        return parse_number(value)
    return None


def decode_text(raw: bytes | str) -> str:
    """
    Decode uploaded bytes as UTF-8, tolerating a leading BOM.
    """

    if isinstance(raw, str):
        return raw
    try:
        return raw.decode("utf-8-sig")
    except UnicodeDecodeError as exc:
        raise FormatError("File must be UTF-8 encoded.") from exc
