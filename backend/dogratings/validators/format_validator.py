"""Format Validator — the string form of a value must match a pattern."""

import re
from typing import Any, Pattern, Union

from dogratings.validators.base import AttributeValidator
from dogratings.validators.context import ValidationContext
from dogratings.validators.models import Errors, ErrorCode

INVALID_MESSAGE = "is invalid"


class FormatValidator(AttributeValidator):
    """Fails when ``str(value)`` does not match ``with_``.

    ``None`` is checked as the empty string, so a missing value is reported by
    both this rule and any presence rule on the same attribute.
    """

    code = ErrorCode.FORMAT

    def __init__(self, *attributes: str, with_: Union[str, Pattern[str]], message: str = INVALID_MESSAGE):
        super().__init__(*attributes)
        self.pattern = re.compile(with_) if isinstance(with_, str) else with_
        self.message = message

    def validate_each(
        self, record, attribute: str, value: Any, errors: Errors, context: ValidationContext
    ) -> None:
        text = "" if value is None else str(value)
        if self.pattern.search(text) is None:
            self._add(errors, attribute, self.message)
