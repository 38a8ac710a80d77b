"""Person — owns dogs and judges ratings."""

from dogratings.records.base import Attribute, Record
from dogratings.validators import PresenceValidator, ValidationEngine


class Person(Record):
    attributes = (Attribute("name", str),)

    validations = ValidationEngine([
        PresenceValidator("name"),
    ])

    def dogs(self, store) -> list:
        """Dogs whose ``owner_id`` points at this person."""
        if self.id is None:
            return []
        return store.where("Dog", owner_id=self.id)

    def ratings(self, store) -> list:
        """Ratings this person gave as judge."""
        if self.id is None:
            return []
        return store.where("Rating", judge_id=self.id)
