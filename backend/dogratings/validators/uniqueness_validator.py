"""Uniqueness Validator — no other persisted record of the type may share the value.

The check is a read against the store and is best-effort: two unsaved records
can both pass before either is inserted. The store's unique index is the
backstop for that race.
"""

from typing import Any

from dogratings.validators.base import AttributeValidator
from dogratings.validators.context import ValidationContext
from dogratings.validators.models import Errors, ErrorCode

TAKEN_MESSAGE = "has already been taken"


class UniquenessValidator(AttributeValidator):
    """Flags values already used by another record of the same type."""

    code = ErrorCode.UNIQUENESS

    def validate_each(
        self, record, attribute: str, value: Any, errors: Errors, context: ValidationContext
    ) -> None:
        if context.store.exists_with_value(
            record.record_type, attribute, value, exclude_id=record.id
        ):
            self._add(errors, attribute, TAKEN_MESSAGE)
