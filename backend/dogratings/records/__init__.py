"""Validated records: Person, Dog and Rating."""

from dogratings.records.base import Association, Attribute, Record
from dogratings.records.dog import Dog, license_from_valid_state
from dogratings.records.person import Person
from dogratings.records.rating import Rating

RECORD_TYPES: dict[str, type[Record]] = {
    "Person": Person,
    "Dog": Dog,
    "Rating": Rating,
}

__all__ = [
    "Association",
    "Attribute",
    "Record",
    "Person",
    "Dog",
    "Rating",
    "RECORD_TYPES",
    "license_from_valid_state",
]
