"""Data models for the kinship engine."""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from nata.kinship.relation_types import RelationType


class Gender(str, Enum):
    """Gender classification of a person."""
    MALE = "male"
    FEMALE = "female"
    UNSPECIFIED = "unspecified"

    @classmethod
    def parse(cls, value) -> "Gender":
        """Accept the loose spellings found in member records (M, f, Female, other)."""
        if isinstance(value, Gender):
            return value
        g = str(value or "").strip().lower()
        if g in {"male", "m", "man", "boy"}:
            return cls.MALE
        if g in {"female", "f", "woman", "girl"}:
            return cls.FEMALE
        return cls.UNSPECIFIED


class Person(BaseModel):
    """Family member as supplied by the relation store."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str
    name: str
    gender: Gender = Gender.UNSPECIFIED
    address: Optional[str] = None
    mobile: Optional[str] = None
    photo: Optional[str] = None

    @field_validator("gender", mode="before")
    @classmethod
    def _parse_gender(cls, value):
        return Gender.parse(value)

    @property
    def is_female(self) -> bool:
        return self.gender == Gender.FEMALE


class Relation(BaseModel):
    """Stored relation: `from_id` is the `type` of `to_id`.

    A ``BUWA`` relation from A to B reads "A is B's father".
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str
    from_id: str = Field(alias="fromId")
    to_id: str = Field(alias="toId")
    type: RelationType
