"""
app/validators package marker.
"""

from app.validators.record_validator import (
    PRODUCT_SCHEMA,
    SALES_SCHEMA,
    RecordSchema,
    RecordValidation,
    RecordValidator,
    RowValidationError,
)

__all__ = [
    "PRODUCT_SCHEMA",
    "SALES_SCHEMA",
    "RecordSchema",
    "RecordValidation",
    "RecordValidator",
    "RowValidationError",
]
