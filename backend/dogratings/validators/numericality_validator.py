"""Numericality Validator — numbers and numeric strings, with optional bounds."""

import operator
import re
from typing import Any, Optional, Union

from dogratings.validators.base import AttributeValidator
from dogratings.validators.context import ValidationContext
from dogratings.validators.models import Errors, ErrorCode

Number = Union[int, float]

NOT_A_NUMBER_MESSAGE = "is not a number"
NOT_AN_INTEGER_MESSAGE = "must be an integer"

# option name -> (comparison that must hold, message prefix)
COMPARATORS = {
    "greater_than": (operator.gt, "must be greater than"),
    "greater_than_or_equal_to": (operator.ge, "must be greater than or equal to"),
    "equal_to": (operator.eq, "must be equal to"),
    "less_than": (operator.lt, "must be less than"),
    "less_than_or_equal_to": (operator.le, "must be less than or equal to"),
}

_INTEGER_RE = re.compile(r"^[+-]?\d+$")


class NumericalityValidator(AttributeValidator):
    """Fails when a value is not numeric or breaks one of the configured bounds.

    Args:
        attributes: Attribute names to check
        allow_blank: Skip ``None`` and empty strings entirely
        only_integer: Reject fractional values
        greater_than, greater_than_or_equal_to, equal_to, less_than,
        less_than_or_equal_to: Optional bounds
    """

    code = ErrorCode.NUMERICALITY

    def __init__(
        self,
        *attributes: str,
        allow_blank: bool = False,
        only_integer: bool = False,
        greater_than: Optional[Number] = None,
        greater_than_or_equal_to: Optional[Number] = None,
        equal_to: Optional[Number] = None,
        less_than: Optional[Number] = None,
        less_than_or_equal_to: Optional[Number] = None,
    ):
        super().__init__(*attributes)
        self.allow_blank = allow_blank
        self.only_integer = only_integer
        bounds = {
            "greater_than": greater_than,
            "greater_than_or_equal_to": greater_than_or_equal_to,
            "equal_to": equal_to,
            "less_than": less_than,
            "less_than_or_equal_to": less_than_or_equal_to,
        }
        self.bounds = {k: v for k, v in bounds.items() if v is not None}

    def validate_each(
        self, record, attribute: str, value: Any, errors: Errors, context: ValidationContext
    ) -> None:
        if self.allow_blank and self._is_blank(value):
            return

        number = self._parse_number(value)
        if number is None:
            self._add(errors, attribute, NOT_A_NUMBER_MESSAGE)
            return

        if self.only_integer and not self._is_integer(value, number):
            self._add(errors, attribute, NOT_AN_INTEGER_MESSAGE)
            return

        for option, bound in self.bounds.items():
            compare, prefix = COMPARATORS[option]
            if not compare(number, bound):
                self._add(errors, attribute, f"{prefix} {bound}")

    @staticmethod
    def _parse_number(value: Any) -> Optional[Number]:
        """Parse ints, floats and numeric strings. Booleans are not numbers."""
        if isinstance(value, bool):
            return None
        if isinstance(value, (int, float)):
            return value
        if not isinstance(value, str):
            return None

        text = value.strip()
        if _INTEGER_RE.match(text):
            return int(text)
        try:
            number = float(text)
        except ValueError:
            return None
        # float() accepts "nan" and "inf"; neither is a number here
        if number != number or number in (float("inf"), float("-inf")):
            return None
        return number

    @staticmethod
    def _is_integer(value: Any, number: Number) -> bool:
        if isinstance(value, str):
            return bool(_INTEGER_RE.match(value.strip()))
        return isinstance(number, int)
