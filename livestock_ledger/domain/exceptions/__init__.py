"""Domain exceptions."""
from __future__ import annotations

from typing import Optional, Sequence


class DomainException(Exception):
    """Base exception for domain layer errors."""
    pass


class RepositoryError(DomainException):
    """Exception raised when repository operations fail."""

    def __init__(self, message: str, cause: Exception = None):
        super().__init__(message)
        self.cause = cause


class DomainValidationError(DomainException):
    """Exception raised when validation fails at the domain boundary."""

    def __init__(self, message: str):
        super().__init__(message)


class NumericParseError(DomainException):
    """A count could not be read as a number, even after aggressive cleaning."""

    def __init__(self, field_name: str, raw_value: str = ""):
        super().__init__(f"Value for '{field_name}' must be a valid number.")
        self.field_name = field_name
        self.raw_value = raw_value


class ReconciliationError(DomainException):
    """Base class for errors that block a row from becoming a payload.

    ``code`` is the stable identifier surfaced to API clients.
    """

    code = "RECONCILIATION_ERROR"

    def __init__(self, message: str, *, column: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.column = column

    def to_dict(self) -> dict:
        return {"error": self.code, "message": self.message, "column": self.column}


class InvalidDateError(ReconciliationError):
    code = "INVALID_DATE"

    def __init__(self, message: str = "Date must be a numeric value (e.g., 14030101)."):
        super().__init__(message)


class InvalidNumericFieldError(ReconciliationError):
    code = "INVALID_NUMERIC_FIELD"

    def __init__(self, column: str, message: Optional[str] = None):
        super().__init__(message or f"Value for '{column}' must be a valid number.", column=column)


class NoActiveMappingError(ReconciliationError):
    code = "NO_ACTIVE_MAPPING"

    def __init__(self, message: str = "Please map at least one column before sending."):
        super().__init__(message)


class DuplicateFieldMappingError(ReconciliationError):
    code = "DUPLICATE_FIELD_MAPPING"

    def __init__(self, field_type: str, columns: Sequence[str]):
        joined = ", ".join(f"'{column}'" for column in columns)
        super().__init__(
            f"Columns {joined} are all mapped to '{field_type}'; map each field type at most once.",
            column=columns[-1] if columns else None,
        )
        self.field_type = field_type
        self.columns = tuple(columns)


class MalformedTabularTextError(DomainException):
    """Tabular text could not be turned into columns and rows."""


class ExtractionError(DomainException):
    """The image-to-table extraction service failed or returned unusable data."""


class TransportError(DomainException):
    """The ledger service rejected the payload or could not be reached."""

    def __init__(self, message: str, *, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
