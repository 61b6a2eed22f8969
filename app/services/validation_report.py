"""
app/services/validation_report.py

Builds the validation report shown before a file is committed.
"""

from __future__ import annotations

from typing import Any, Mapping, Sequence

from app.domain.data_source import PREVIEW_SIZE, ValidationOutcome
from app.validators.record_validator import RecordValidator

_DEFAULT_VALIDATOR = RecordValidator()


def build_validation_report(
    records: Sequence[Mapping[str, Any]],
    kind: str,
    *,
    validator: RecordValidator | None = None,
) -> ValidationOutcome:
    """
    Validate parsed records and summarize the result with a bounded preview.
    """

    validation = (validator or _DEFAULT_VALIDATOR).validate(records, kind)
    return ValidationOutcome(
        is_valid=not validation.errors,
        errors=validation.errors,
        warnings=validation.warnings,
        record_count=len(records),
        valid_records=validation.valid_records,
        preview=tuple(records[:PREVIEW_SIZE]),
    )
