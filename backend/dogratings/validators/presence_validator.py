"""Presence Validator — required attributes and required associations."""

from typing import Any

from dogratings.validators.base import AttributeValidator
from dogratings.validators.context import ValidationContext
from dogratings.validators.models import Errors, ErrorCode

BLANK_MESSAGE = "can't be blank"


class PresenceValidator(AttributeValidator):
    """Fails when an attribute is blank or a referenced record is absent.

    For a ``belongs_to`` association name (e.g. ``owner``) the foreign key must
    be set and the store must hold the referenced record.
    """

    code = ErrorCode.PRESENCE

    def validate(self, record, errors: Errors, context: ValidationContext) -> None:
        for attribute in self.attributes:
            association = record.association(attribute)
            if association is not None:
                self._validate_association(record, association, errors, context)
            else:
                self.validate_each(
                    record, attribute, record.read_attribute(attribute), errors, context
                )

    def validate_each(
        self, record, attribute: str, value: Any, errors: Errors, context: ValidationContext
    ) -> None:
        if self._is_blank(value):
            self._add(errors, attribute, BLANK_MESSAGE)

    def _validate_association(self, record, association, errors: Errors, context: ValidationContext) -> None:
        key = record.read_attribute(association.foreign_key)
        if self._is_blank(key) or context.store.find(association.target, key) is None:
            self._add(errors, association.name, BLANK_MESSAGE)
