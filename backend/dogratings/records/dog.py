"""Dog — licensed, owned by a person, rated by judges."""

from dogratings.config import get_settings
from dogratings.records.base import Association, Attribute, Record
from dogratings.validators import (
    CustomValidator,
    FormatValidator,
    PresenceValidator,
    UniquenessValidator,
    ValidationEngine,
)


def license_from_valid_state(dog, errors, context) -> None:
    """The first two characters of the license must be a state abbreviation.

    A license that is not a string gets one error and the state check is
    skipped.
    """
    number = dog.license
    if not type(dog).schema("license").accepts(number):
        errors.add("license", "must be a string")
        return

    state = number[:2]
    if not context.geography.valid_state_abbreviation(state):
        errors.add("license", "must be from a valid state")


class Dog(Record):
    attributes = (
        Attribute("name", str),
        Attribute("license", str),
        Attribute("owner_id", int),
    )
    belongs_to = (Association("owner", target="Person", foreign_key="owner_id"),)

    validations = ValidationEngine([
        PresenceValidator("name", "license", "owner"),
        UniquenessValidator("license"),
        FormatValidator("license", with_=get_settings().LICENSE_PATTERN),
        CustomValidator(license_from_valid_state),
    ])

    def owner(self, store):
        if self.owner_id is None:
            return None
        return store.find("Person", self.owner_id)

    def ratings(self, store) -> list:
        if self.id is None:
            return []
        return store.where("Rating", dog_id=self.id)
