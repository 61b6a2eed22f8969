"""
app/validators/record_validator.py

Schema validation for parsed product, sales, and generic records.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Mapping, Sequence

from app.domain.data_source import RecordKind
from app.parsers.values import as_number

DATE_FORMATS: tuple[str, ...] = (
    "%Y-%m-%d",
    "%Y/%m/%d",
    "%m/%d/%Y",
    "%Y-%m-%d %H:%M:%S",
    "%Y/%m/%d %H:%M:%S",
    "%m/%d/%Y %H:%M:%S",
)

NO_DATA_MESSAGE = "No data found in file"


@dataclass(frozen=True)
class RecordSchema:
    """
    Field rules applied to every record of one kind.
    """

    required_fields: tuple[str, ...] = ()
    recommended_fields: tuple[str, ...] = ()
    numeric_fields: tuple[str, ...] = ()
    date_fields: tuple[str, ...] = ()


PRODUCT_SCHEMA = RecordSchema(
    required_fields=("sku", "name"),
    recommended_fields=("category", "price", "cost"),
    numeric_fields=("price", "cost"),
)

SALES_SCHEMA = RecordSchema(
    required_fields=("sku", "date", "unitsSold", "revenue"),
    numeric_fields=("unitsSold", "revenue"),
    date_fields=("date",),
)

SCHEMAS_BY_KIND: dict[str, RecordSchema] = {
    RecordKind.PRODUCT: PRODUCT_SCHEMA,
    RecordKind.SALES: SALES_SCHEMA,
}


@dataclass(frozen=True)
class RowValidationError:
    """
    One row-level validation finding.
    """

    row_number: int
    message: str
    column: str | None = None
    value: str | None = None

    def render(self) -> str:
        return f"Row {self.row_number}: {self.message}"


@dataclass(frozen=True)
class RecordValidation:
    """
    Accumulated validator output for one record sequence.
    """

    errors: tuple[str, ...] = ()
    warnings: tuple[str, ...] = ()
    valid_records: int = 0
    issues: tuple[RowValidationError, ...] = field(default_factory=tuple)


class RecordValidator:
    """
    Validates field-maps against the schema of a record kind.

    Missing required fields and type mismatches are blocking errors; missing
    recommended fields are warnings.
    """

    def __init__(self, schemas: Mapping[str, RecordSchema] | None = None) -> None:
        self._schemas = dict(SCHEMAS_BY_KIND if schemas is None else schemas)

    def validate(self, records: Sequence[Mapping[str, Any]], kind: str) -> RecordValidation:
        schema = self._schemas.get(kind.strip().lower())
        if schema is None:
            return self._validate_generic(records)

        errors: list[RowValidationError] = []
        warnings: list[RowValidationError] = []
        valid_records = 0

        for row_number, record in enumerate(records, start=1):
            row_errors = self.validate_record(
                record=record,
                row_number=row_number,
                schema=schema,
                warnings=warnings,
            )
            if row_errors:
                errors.extend(row_errors)
            else:
                valid_records += 1

        return RecordValidation(
            errors=tuple(error.render() for error in errors),
            warnings=tuple(warning.render() for warning in warnings),
            valid_records=valid_records,
            issues=tuple(errors),
        )

    def validate_record(
        self,
        *,
        record: Mapping[str, Any],
        row_number: int,
        schema: RecordSchema,
        warnings: list[RowValidationError],
    ) -> list[RowValidationError]:
        """
        Validate one record and return its blocking errors.

        Warnings are appended to ``warnings``.
        """

        errors: list[RowValidationError] = []

        for column in schema.required_fields:
            if self._is_blank(record.get(column)):
                errors.append(
                    RowValidationError(
                        row_number=row_number,
                        column=column,
                        message=f"Missing required field '{column}'",
                    )
                )

        for column in schema.recommended_fields:
            if self._is_blank(record.get(column)):
                warnings.append(
                    RowValidationError(
                        row_number=row_number,
                        column=column,
                        message=f"Missing recommended field '{column}'",
                    )
                )

        for column in schema.numeric_fields:
            value = record.get(column)
            if self._is_blank(value):
                continue
            if as_number(value) is None:
                errors.append(
                    RowValidationError(
                        row_number=row_number,
                        column=column,
                        message=f"Field '{column}' must be a number",
                        value=self._stringify_value(value),
                    )
                )

        for column in schema.date_fields:
            value = record.get(column)
            if self._is_blank(value):
                continue
            if self._parse_date(value) is None:
                errors.append(
                    RowValidationError(
                        row_number=row_number,
                        column=column,
                        message=f"Field '{column}' has an invalid date format",
                        value=self._stringify_value(value),
                    )
                )

        return errors

    def _validate_generic(self, records: Sequence[Mapping[str, Any]]) -> RecordValidation:
        if not records:
            return RecordValidation(errors=(NO_DATA_MESSAGE,), valid_records=0)
        return RecordValidation(valid_records=len(records))

    @staticmethod
    def _parse_date(value: Any) -> datetime | None:
        if not isinstance(value, str):
            return None

        raw = value.strip()
        normalized = raw[:-1] + "+00:00" if raw.endswith("Z") else raw
        try:
            return datetime.fromisoformat(normalized)
        except ValueError:
            pass

        for fmt in DATE_FORMATS:
            try:
                return datetime.strptime(raw, fmt)
            except ValueError:
                continue
        return None

    @staticmethod
    def _is_blank(value: Any) -> bool:
        if value is None:
            return True
        if isinstance(value, str):
            return value.strip() == ""
        return False

    @staticmethod
    def _stringify_value(value: Any) -> str | None:
        if value is None:
            return None
        return str(value)
