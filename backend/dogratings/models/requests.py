"""API request models.

Fields are loosely typed on purpose: the record validators, not the request
parser, decide what is wrong with a value.
"""

from pydantic import BaseModel, ConfigDict, Field
from typing import Optional, Union

Scalar = Union[int, float, str]


class PersonPayload(BaseModel):
    """Attributes for a person."""

    model_config = ConfigDict(extra="forbid")

    name: Optional[Scalar] = None


class DogPayload(BaseModel):
    """Attributes for a dog."""

    model_config = ConfigDict(extra="forbid")

    name: Optional[Scalar] = None
    license: Optional[Scalar] = Field(default=None, examples=["OR-1234567"])
    owner_id: Optional[int] = None


class RatingPayload(BaseModel):
    """Attributes for a rating."""

    model_config = ConfigDict(extra="forbid")

    cuteness: Optional[Scalar] = None
    coolness: Optional[Scalar] = None
    dog_id: Optional[int] = None
    judge_id: Optional[int] = None
