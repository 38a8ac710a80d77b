"""Rating — one judge's cuteness and coolness scores for one dog."""

from dogratings.config import get_settings
from dogratings.records.base import Association, Attribute, Record
from dogratings.validators import NumericalityValidator, PresenceValidator, ValidationEngine


class Rating(Record):
    attributes = (
        Attribute("cuteness", int),
        Attribute("coolness", int),
        Attribute("dog_id", int),
        Attribute("judge_id", int),
    )
    belongs_to = (
        Association("dog", target="Dog", foreign_key="dog_id"),
        Association("judge", target="Person", foreign_key="judge_id"),
    )

    validations = ValidationEngine([
        PresenceValidator("dog", "judge"),
        NumericalityValidator(
            "cuteness", "coolness",
            allow_blank=True,
            greater_than_or_equal_to=get_settings().MIN_RATING,
        ),
    ])

    def dog(self, store):
        if self.dog_id is None:
            return None
        return store.find("Dog", self.dog_id)

    def judge(self, store):
        if self.judge_id is None:
            return None
        return store.find("Person", self.judge_id)
