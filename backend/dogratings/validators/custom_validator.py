"""Custom Validator — wraps a plain function that writes to the collector itself."""

from typing import Callable, Optional

from dogratings.validators.base import BaseValidator
from dogratings.validators.context import ValidationContext
from dogratings.validators.models import Errors, ErrorCode

ValidationMethod = Callable[..., None]


class CustomValidator(BaseValidator):
    """Runs ``func(record, errors, context)``.

    The function may add any number of messages for any attribute and may
    return early. Messages added through ``errors.add`` default to
    ``ErrorCode.CUSTOM`` and are attributed to this validator's name.
    """

    code = ErrorCode.CUSTOM

    def __init__(self, func: ValidationMethod, name: Optional[str] = None):
        self.func = func
        self._name = name or getattr(func, "__name__", type(self).__name__)

    @property
    def name(self) -> str:
        return self._name

    def validate(self, record, errors: Errors, context: ValidationContext) -> None:
        with errors.attributed_to(self.name):
            self.func(record, errors, context)
