"""API response models."""

from pydantic import BaseModel
from typing import Any, Literal, Optional


class ErrorDetail(BaseModel):
    """A single validation finding as returned by the API."""

    attribute: str
    message: str
    code: str


class ValidationReportResponse(BaseModel):
    """Result of validating a record."""

    valid: bool
    count: int
    messages: dict[str, list[str]]
    full_messages: list[str]
    errors: list[ErrorDetail] = []

    @classmethod
    def from_report(cls, report) -> "ValidationReportResponse":
        return cls(
            valid=report.valid,
            count=report.count,
            messages=report.messages,
            full_messages=report.full_messages,
            errors=[ErrorDetail(**d) for d in report.details],
        )


class RecordResponse(BaseModel):
    """A saved record."""

    type: str
    id: int
    attributes: dict[str, Any]


class RecordRejectedResponse(BaseModel):
    """Returned with 422 when a save fails validation."""

    error: Literal["validation_failed"] = "validation_failed"
    type: str
    report: ValidationReportResponse


class HealthResponse(BaseModel):
    """System health check response."""

    status: Literal["healthy", "unhealthy", "degraded"]
    version: str = "1.0.0"
    uptime_seconds: float
    records: dict[str, int] = {}
    message: Optional[str] = None
