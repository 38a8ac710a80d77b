"""Tests for the error collector, the report snapshot and humanized messages."""

from __future__ import annotations

import pydantic
import pytest

from dogratings.validators.models import (
    ErrorCode,
    Errors,
    ValidationReport,
    full_message,
    humanize,
)


@pytest.mark.unit
class TestHumanize:
    def test_capitalizes_first_letter(self) -> None:
        assert humanize("name") == "Name"

    def test_replaces_separators(self) -> None:
        assert humanize("first_name") == "First name"
        assert humanize("first-name") == "First name"

    def test_strips_foreign_key_suffix(self) -> None:
        assert humanize("owner_id") == "Owner"

    def test_full_message(self) -> None:
        assert full_message("name", "can't be blank") == "Name can't be blank"

    def test_base_errors_have_no_prefix(self) -> None:
        assert full_message("base", "something broke") == "something broke"


@pytest.mark.unit
class TestErrors:
    def test_starts_empty(self) -> None:
        errors = Errors()
        assert errors.empty()
        assert errors.count == 0
        assert errors.messages == {}
        assert errors.full_messages == []

    def test_multiple_messages_per_attribute(self) -> None:
        errors = Errors()
        errors.add("license", "can't be blank", code=ErrorCode.PRESENCE)
        errors.add("name", "can't be blank", code=ErrorCode.PRESENCE)
        errors.add("license", "is invalid", code=ErrorCode.FORMAT)

        assert errors.count == 3
        assert len(errors) == 3
        assert errors.messages == {
            "license": ["can't be blank", "is invalid"],
            "name": ["can't be blank"],
        }
        assert errors["license"] == ["can't be blank", "is invalid"]
        assert errors["owner"] == []

    def test_full_messages_keep_insertion_order(self) -> None:
        errors = Errors()
        errors.add("name", "can't be blank")
        errors.add("license", "is invalid")
        assert errors.full_messages == ["Name can't be blank", "License is invalid"]

    def test_default_code_is_custom(self) -> None:
        errors = Errors()
        error = errors.add("license", "must be a string")
        assert error.code == ErrorCode.CUSTOM

    def test_clear(self) -> None:
        errors = Errors()
        errors.add("name", "can't be blank")
        errors.clear()
        assert errors.empty()


@pytest.mark.unit
class TestValidationReport:
    def test_empty_report_is_valid(self) -> None:
        report = ValidationReport.empty()
        assert report.valid
        assert report.count == 0

    def test_count_is_total_messages_not_attributes(self) -> None:
        errors = Errors()
        errors.add("license", "can't be blank")
        errors.add("license", "is invalid")
        report = errors.to_report()

        assert not report.valid
        assert report.count == 2
        assert list(report.messages) == ["license"]
        assert report["license"] == ["can't be blank", "is invalid"]

    def test_report_is_a_snapshot(self) -> None:
        errors = Errors()
        errors.add("name", "can't be blank")
        report = errors.to_report()
        errors.add("name", "is invalid")

        assert report.count == 1

    def test_report_is_frozen(self) -> None:
        report = ValidationReport.empty()
        with pytest.raises(pydantic.ValidationError):
            report.valid = False

    def test_details(self) -> None:
        errors = Errors()
        errors.add("name", "can't be blank", code=ErrorCode.PRESENCE)
        assert errors.to_report().details == [
            {"attribute": "name", "message": "can't be blank", "code": "PRESENCE"},
        ]

    def test_attributed_to_names_findings_inside_block(self) -> None:
        errors = Errors()
        with errors.attributed_to("my_rule"):
            errors.add("name", "is odd")
            errors.add("name", "is loud", validator="explicit")
        errors.add("name", "is late")

        assert [e.validator for e in errors] == ["my_rule", "explicit", None]
