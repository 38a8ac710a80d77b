"""Record validators — declarative rules, error collector and runner.

Usage:
    from dogratings.validators import ValidationEngine, PresenceValidator

    engine = ValidationEngine([PresenceValidator("name")])
    report = engine.validate(record, context)
    if not report.valid:
        # report.full_messages, report.messages, report.count
"""

from dogratings.validators.context import ValidationContext
from dogratings.validators.custom_validator import CustomValidator
from dogratings.validators.engine import ValidationEngine
from dogratings.validators.format_validator import FormatValidator
from dogratings.validators.models import ErrorCode, Errors, ValidationError, ValidationReport
from dogratings.validators.numericality_validator import NumericalityValidator
from dogratings.validators.presence_validator import PresenceValidator
from dogratings.validators.reference_data import UsGeography
from dogratings.validators.uniqueness_validator import UniquenessValidator

__all__ = [
    "ValidationEngine",
    "ValidationContext",
    "ValidationReport",
    "ValidationError",
    "Errors",
    "ErrorCode",
    "PresenceValidator",
    "UniquenessValidator",
    "FormatValidator",
    "NumericalityValidator",
    "CustomValidator",
    "UsGeography",
]
