"""Base validator — abstract class implementing the Strategy Pattern.

Each validator is a standalone, independently testable unit bound to a record
type when the type is defined. New validators are added without modifying the
engine.
"""

from abc import ABC, abstractmethod
from typing import Any

from dogratings.validators.context import ValidationContext
from dogratings.validators.models import Errors, ErrorCode


class BaseValidator(ABC):
    """Abstract base for all record validators.

    Contract:
        - validate() reads the record, never writes to it
        - validate() appends findings to ``errors``; it returns nothing
        - Lookups go through ``context`` only
    """

    code: ErrorCode = ErrorCode.CUSTOM

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable name for logging."""
        ...

    @abstractmethod
    def validate(self, record, errors: Errors, context: ValidationContext) -> None:
        """Run this rule against the record.

        Args:
            record: Record instance being validated
            errors: Collector for the current run
            context: Store and geography lookups
        """
        ...

    # ── Helper Methods ──

    def _add(self, errors: Errors, attribute: str, message: str) -> None:
        errors.add(attribute, message, code=self.code, validator=self.name)

    @staticmethod
    def _is_blank(value: Any) -> bool:
        """None, empty and whitespace-only strings and empty collections are blank."""
        if value is None:
            return True
        if isinstance(value, str):
            return not value.strip()
        if isinstance(value, (list, tuple, dict, set)):
            return not value
        return False

    def __repr__(self) -> str:
        return f"<{self.name}>"


class AttributeValidator(BaseValidator):
    """Validator applying the same check to each of several attributes."""

    def __init__(self, *attributes: str):
        if not attributes:
            raise ValueError(f"{type(self).__name__} needs at least one attribute")
        self.attributes = tuple(attributes)

    @property
    def name(self) -> str:
        return f"{type(self).__name__}({', '.join(self.attributes)})"

    def validate(self, record, errors: Errors, context: ValidationContext) -> None:
        for attribute in self.attributes:
            self.validate_each(record, attribute, record.read_attribute(attribute), errors, context)

    @abstractmethod
    def validate_each(
        self, record, attribute: str, value: Any, errors: Errors, context: ValidationContext
    ) -> None:
        ...
