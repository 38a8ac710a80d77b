"""Tests for the individual rule types."""

from __future__ import annotations

import pytest

from dogratings.records import Association, Attribute, Person, Record
from dogratings.validators import (
    CustomValidator,
    ErrorCode,
    Errors,
    FormatValidator,
    NumericalityValidator,
    PresenceValidator,
    UniquenessValidator,
)


class Sample(Record):
    attributes = (
        Attribute("title", str),
        Attribute("score", int),
        Attribute("person_id", int),
    )
    belongs_to = (Association("person", target="Person", foreign_key="person_id"),)


def run(validator, record, context) -> Errors:
    errors = Errors()
    validator.validate(record, errors, context)
    return errors


@pytest.mark.unit
class TestPresenceValidator:
    @pytest.mark.parametrize("value", [None, "", "   "])
    def test_blank_values_fail(self, value, context) -> None:
        errors = run(PresenceValidator("title"), Sample(title=value), context)
        assert errors.messages == {"title": ["can't be blank"]}
        assert next(iter(errors)).code == ErrorCode.PRESENCE

    def test_present_value_passes(self, context) -> None:
        assert run(PresenceValidator("title"), Sample(title="x"), context).empty()

    def test_zero_is_present(self, context) -> None:
        assert run(PresenceValidator("score"), Sample(score=0), context).empty()

    def test_each_attribute_checked(self, context) -> None:
        errors = run(PresenceValidator("title", "score"), Sample(), context)
        assert errors.count == 2

    def test_association_missing_key(self, context) -> None:
        errors = run(PresenceValidator("person"), Sample(), context)
        assert errors.messages == {"person": ["can't be blank"]}

    def test_association_points_at_absent_record(self, context) -> None:
        errors = run(PresenceValidator("person"), Sample(person_id=42), context)
        assert errors.messages == {"person": ["can't be blank"]}

    def test_association_present(self, context, owner) -> None:
        assert run(PresenceValidator("person"), Sample(person_id=owner.id), context).empty()

    def test_requires_an_attribute(self) -> None:
        with pytest.raises(ValueError):
            PresenceValidator()


@pytest.mark.unit
class TestUniquenessValidator:
    def test_value_taken_by_saved_record(self, context, owner) -> None:
        errors = run(UniquenessValidator("name"), Person(name="Ned"), context)
        assert errors.messages == {"name": ["has already been taken"]}
        assert next(iter(errors)).code == ErrorCode.UNIQUENESS

    def test_unused_value_passes(self, context, owner) -> None:
        assert run(UniquenessValidator("name"), Person(name="Arya"), context).empty()

    def test_record_does_not_conflict_with_itself(self, context, owner) -> None:
        assert run(UniquenessValidator("name"), owner, context).empty()


@pytest.mark.unit
class TestFormatValidator:
    def test_non_matching_value_fails_once(self, context) -> None:
        errors = run(FormatValidator("title", with_=r"\A[a-z]+\Z"), Sample(title="ABC"), context)
        assert errors.messages == {"title": ["is invalid"]}
        assert next(iter(errors)).code == ErrorCode.FORMAT

    def test_matching_value_passes(self, context) -> None:
        assert run(FormatValidator("title", with_=r"\A[a-z]+\Z"), Sample(title="abc"), context).empty()

    def test_none_is_checked_as_empty_string(self, context) -> None:
        errors = run(FormatValidator("title", with_=r"\A[a-z]+\Z"), Sample(), context)
        assert errors.count == 1

    def test_non_string_checked_by_string_form(self, context) -> None:
        assert run(FormatValidator("score", with_=r"\A\d+\Z"), Sample(score=12), context).empty()

    def test_custom_message(self, context) -> None:
        validator = FormatValidator("title", with_=r"x", message="needs an x")
        assert run(validator, Sample(title="abc"), context)["title"] == ["needs an x"]


@pytest.mark.unit
class TestNumericalityValidator:
    @pytest.mark.parametrize("value", [None, ""])
    def test_allow_blank_skips_blank(self, value, context) -> None:
        validator = NumericalityValidator("score", allow_blank=True, greater_than_or_equal_to=0)
        assert run(validator, Sample(score=value), context).empty()

    def test_blank_without_allow_blank_is_not_a_number(self, context) -> None:
        validator = NumericalityValidator("score", greater_than_or_equal_to=0)
        errors = run(validator, Sample(), context)
        assert errors.messages == {"score": ["is not a number"]}

    def test_negative_value_fails_once(self, context) -> None:
        validator = NumericalityValidator("score", allow_blank=True, greater_than_or_equal_to=0)
        errors = run(validator, Sample(score=-1), context)
        assert errors.messages == {"score": ["must be greater than or equal to 0"]}
        assert next(iter(errors)).code == ErrorCode.NUMERICALITY

    @pytest.mark.parametrize("value", [0, 7, 2.5, "3", "4.5"])
    def test_non_negative_values_pass(self, value, context) -> None:
        validator = NumericalityValidator("score", allow_blank=True, greater_than_or_equal_to=0)
        assert run(validator, Sample(score=value), context).empty()

    @pytest.mark.parametrize("value", ["abc", True, "nan", [1]])
    def test_non_numbers_fail(self, value, context) -> None:
        validator = NumericalityValidator("score", allow_blank=True)
        assert run(validator, Sample(score=value), context)["score"] == ["is not a number"]

    def test_only_integer(self, context) -> None:
        validator = NumericalityValidator("score", only_integer=True)
        assert run(validator, Sample(score="2.5"), context)["score"] == ["must be an integer"]
        assert run(validator, Sample(score=2.5), context)["score"] == ["must be an integer"]
        assert run(validator, Sample(score="2"), context).empty()

    def test_several_bounds_report_each_failure(self, context) -> None:
        validator = NumericalityValidator("score", greater_than=10, equal_to=20)
        errors = run(validator, Sample(score=5), context)
        assert errors["score"] == ["must be greater than 10", "must be equal to 20"]

    def test_upper_bounds(self, context) -> None:
        validator = NumericalityValidator("score", less_than=10, less_than_or_equal_to=9)
        assert run(validator, Sample(score=9), context).empty()
        assert run(validator, Sample(score=10), context).count == 2


@pytest.mark.unit
class TestCustomValidator:
    def test_function_writes_to_collector(self, context) -> None:
        def no_shouting(record, errors, context):
            if record.title and record.title.isupper():
                errors.add("title", "must not shout")
                errors.add("base", "record is too loud")

        errors = run(CustomValidator(no_shouting), Sample(title="HEY"), context)
        assert errors.messages == {"title": ["must not shout"], "base": ["record is too loud"]}

    def test_name_defaults_to_function_name(self) -> None:
        def my_rule(record, errors, context):
            pass

        assert CustomValidator(my_rule).name == "my_rule"
        assert CustomValidator(my_rule, name="other").name == "other"
