"""Exceptions raised to callers.

Validation findings are never raised; these cover programming errors and
explicit caller choices (``save_strict``) plus store-level failures.
"""

from typing import Any, Optional


class DogRatingsError(Exception):
    """Base class for all errors raised by this package."""

    error_code: str = "DOG_RATINGS_ERROR"

    def __init__(self, message: str, context: Optional[dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.context = context or {}

    def __str__(self) -> str:
        if self.context:
            context_str = ", ".join(f"{k}={v}" for k, v in self.context.items())
            return f"{self.message} ({context_str})"
        return self.message


class UnknownAttributeError(DogRatingsError, ValueError):
    """Raised when a record is given an attribute its schema does not declare."""

    error_code = "UNKNOWN_ATTRIBUTE"

    def __init__(self, record_type: str, attribute: str):
        self.record_type = record_type
        self.attribute = attribute
        super().__init__(
            f"unknown attribute '{attribute}' for {record_type}",
            {"record_type": record_type, "attribute": attribute},
        )


class RecordInvalidError(DogRatingsError):
    """Raised by ``save_strict`` when validation fails."""

    error_code = "RECORD_INVALID"

    def __init__(self, record_type: str, report):
        self.record_type = record_type
        self.report = report
        super().__init__(
            "Validation failed: " + ", ".join(report.full_messages),
            {"record_type": record_type, "count": report.count},
        )


class RecordNotUniqueError(DogRatingsError):
    """Raised by the store when an insert violates a unique index."""

    error_code = "RECORD_NOT_UNIQUE"

    def __init__(self, record_type: str, attribute: str, value: Any):
        self.record_type = record_type
        self.attribute = attribute
        self.value = value
        super().__init__(
            f"{record_type}.{attribute} must be unique",
            {"record_type": record_type, "attribute": attribute, "value": value},
        )


class RecordNotFoundError(DogRatingsError):
    """Raised when a record cannot be found by id."""

    error_code = "RECORD_NOT_FOUND"

    def __init__(self, record_type: str, record_id: Any):
        self.record_type = record_type
        self.record_id = record_id
        super().__init__(
            f"{record_type} not found: {record_id}",
            {"record_type": record_type, "record_id": record_id},
        )
