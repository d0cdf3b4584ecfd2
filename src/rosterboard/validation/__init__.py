"""Validation module for checking availability input records."""

from rosterboard.validation.validator import (
    RecordValidator,
    ValidationError,
    ValidationErrorType,
    ValidationResult,
)

__all__ = [
    "RecordValidator",
    "ValidationError",
    "ValidationErrorType",
    "ValidationResult",
]
