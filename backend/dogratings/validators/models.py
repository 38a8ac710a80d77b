"""Validation models — error codes, the per-run error collector, and the report.

Findings are plain data: rules append them to an ``Errors`` collector and the
engine freezes the collector into a ``ValidationReport`` once every rule ran.
"""

from contextlib import contextmanager
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

# Attribute used for findings that are not tied to a single attribute
BASE_ATTRIBUTE = "base"


class ErrorCode(str, Enum):
    """Kind of rule that produced a finding."""

    PRESENCE = "PRESENCE"
    UNIQUENESS = "UNIQUENESS"
    FORMAT = "FORMAT"
    NUMERICALITY = "NUMERICALITY"
    CUSTOM = "CUSTOM"


class ValidationError(BaseModel):
    """A single validation finding."""

    attribute: str
    message: str
    code: ErrorCode = ErrorCode.CUSTOM
    validator: Optional[str] = None  # Name of the rule that added it

    model_config = ConfigDict(frozen=True, use_enum_values=True)


def humanize(attribute: str) -> str:
    """Turn an attribute name into a label: ``owner_id`` -> ``Owner``."""
    text = attribute
    if text.endswith("_id"):
        text = text[:-3]
    text = text.replace("_", " ").replace("-", " ").strip()
    if not text:
        return attribute
    return text[0].upper() + text[1:].lower()


def full_message(attribute: str, message: str) -> str:
    if attribute == BASE_ATTRIBUTE:
        return message
    return f"{humanize(attribute)} {message}"


class Errors:
    """Mutable collector for one validation run.

    Ordered multimap from attribute name to messages. Attributes keep the
    order in which their first message arrived.
    """

    def __init__(self):
        self._errors: list[ValidationError] = []
        self._current_validator: Optional[str] = None

    def add(
        self,
        attribute: str,
        message: str,
        code: ErrorCode = ErrorCode.CUSTOM,
        validator: Optional[str] = None,
    ) -> ValidationError:
        error = ValidationError(
            attribute=attribute,
            message=message,
            code=code,
            validator=validator or self._current_validator,
        )
        self._errors.append(error)
        return error

    @contextmanager
    def attributed_to(self, validator: str):
        """Name ``validator`` on findings added without an explicit one."""
        previous = self._current_validator
        self._current_validator = validator
        try:
            yield self
        finally:
            self._current_validator = previous

    def clear(self) -> None:
        self._errors.clear()

    def __getitem__(self, attribute: str) -> list[str]:
        return [e.message for e in self._errors if e.attribute == attribute]

    def __iter__(self):
        return iter(self._errors)

    def __len__(self) -> int:
        return len(self._errors)

    @property
    def count(self) -> int:
        return len(self._errors)

    def empty(self) -> bool:
        return not self._errors

    @property
    def messages(self) -> dict[str, list[str]]:
        grouped: dict[str, list[str]] = {}
        for error in self._errors:
            grouped.setdefault(error.attribute, []).append(error.message)
        return grouped

    @property
    def full_messages(self) -> list[str]:
        return [full_message(e.attribute, e.message) for e in self._errors]

    def to_report(self) -> "ValidationReport":
        return ValidationReport.build(self._errors)


class ValidationReport(BaseModel):
    """Immutable snapshot of an error collector after a validation run."""

    valid: bool = Field(description="True if no rule added a finding")
    count: int = Field(default=0, description="Total messages across all attributes")
    messages: dict[str, list[str]] = Field(default_factory=dict)
    full_messages: list[str] = Field(default_factory=list)
    errors: list[ValidationError] = Field(default_factory=list)

    model_config = ConfigDict(frozen=True)

    @classmethod
    def build(cls, errors: list[ValidationError]) -> "ValidationReport":
        """Build a report from findings in execution order."""
        messages: dict[str, list[str]] = {}
        for err in errors:
            messages.setdefault(err.attribute, []).append(err.message)

        return cls(
            valid=not errors,
            count=len(errors),
            messages=messages,
            full_messages=[full_message(e.attribute, e.message) for e in errors],
            errors=list(errors),
        )

    @classmethod
    def empty(cls) -> "ValidationReport":
        return cls.build([])

    def __getitem__(self, attribute: str) -> list[str]:
        return list(self.messages.get(attribute, []))

    @property
    def details(self) -> list[dict]:
        return [
            {"attribute": e.attribute, "message": e.message, "code": e.code}
            for e in self.errors
        ]
