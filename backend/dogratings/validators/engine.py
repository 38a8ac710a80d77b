"""Validation Engine — runs a record type's validators and produces a report.

Each record type owns one engine, built from its validator list when the type
is defined.

Usage:
    engine = ValidationEngine([PresenceValidator("name")])
    report = engine.validate(record, context)
    if not report.valid:
        # report.full_messages -> ["Name can't be blank"]
"""

import time
from typing import Optional

import structlog

from dogratings.validators.base import BaseValidator
from dogratings.validators.context import ValidationContext
from dogratings.validators.models import BASE_ATTRIBUTE, Errors, ErrorCode, ValidationReport

logger = structlog.get_logger()


class ValidationEngine:
    """Runs an ordered validator chain and produces a ValidationReport.

    Design principles:
        - Every validator runs, whatever earlier validators found
        - A crashing validator becomes a finding, never an exception
        - Each run gets a fresh collector, so runs are idempotent
    """

    def __init__(self, validators: Optional[list[BaseValidator]] = None):
        """Initialize with a validator list in execution order."""
        self.validators = list(validators or [])

    def validate(self, record, context: Optional[ValidationContext] = None) -> ValidationReport:
        """Run all validators against the record and produce a report.

        Args:
            record: Record instance to check
            context: Store and geography lookups (defaults to empty store and US geography)

        Returns:
            Frozen ValidationReport; ``report.valid`` is True iff no findings
        """
        start_time = time.perf_counter()
        context = context or ValidationContext()

        errors = Errors()
        validator_timings: dict[str, float] = {}

        for validator in self.validators:
            v_start = time.perf_counter()
            try:
                validator.validate(record, errors, context)
            except Exception as e:
                logger.error(
                    "validator_failed",
                    record_type=record.record_type,
                    validator=validator.name,
                    error=str(e),
                    error_type=type(e).__name__,
                )
                errors.add(
                    BASE_ATTRIBUTE,
                    f"validator '{validator.name}' crashed: {type(e).__name__}: {e}",
                    code=ErrorCode.CUSTOM,
                    validator=validator.name,
                )
            finally:
                v_duration = (time.perf_counter() - v_start) * 1000
                validator_timings[validator.name] = round(v_duration, 3)

        report = errors.to_report()

        total_duration = (time.perf_counter() - start_time) * 1000

        logger.debug(
            "validation_complete",
            record_type=record.record_type,
            record_id=record.id,
            valid=report.valid,
            total_errors=report.count,
            duration_ms=round(total_duration, 3),
            validator_timings=validator_timings,
        )

        return report

    def add_validator(self, validator: BaseValidator) -> None:
        """Append a validator to the chain."""
        self.validators.append(validator)

    def remove_validator(self, validator_name: str) -> None:
        """Remove a validator by name."""
        self.validators = [v for v in self.validators if v.name != validator_name]

    def __len__(self) -> int:
        return len(self.validators)
