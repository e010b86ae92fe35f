from __future__ import annotations

from decimal import Decimal
from enum import Enum

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator

DEFAULT_WEIGHT = 1


class CriterionType(str, Enum):
    """Known matching strategies."""

    ANY = "ANY"
    ENUMERATION = "ENUMERATION"
    RANGE = "RANGE"

    @classmethod
    def parse(cls, value: str | None) -> "CriterionType | None":
        if value is None or not value.strip():
            return None
        try:
            return cls(value.strip().upper())
        except ValueError:
            return None


class CriterionDetails(BaseModel):
    """Typed payload of a criterion.

    ``type`` stays a raw string so that a vacancy configured with an
    unsupported type still reaches the scoring engine, which rejects it.
    """

    type: str | None = None
    min_value: Decimal | None = Field(
        default=None,
        validation_alias=AliasChoices("min_value", "minValue"),
    )
    max_value: Decimal | None = Field(
        default=None,
        validation_alias=AliasChoices("max_value", "maxValue"),
    )
    options: frozenset[str] | None = None

    model_config = ConfigDict(extra="forbid", frozen=True, populate_by_name=True)

    @property
    def criterion_type(self) -> CriterionType | None:
        return CriterionType.parse(self.type)


class Criterion(BaseModel):
    """A named, weighted selection rule attached to a vacancy."""

    name: str
    weight: int = DEFAULT_WEIGHT
    details: CriterionDetails | None = None

    model_config = ConfigDict(extra="forbid", frozen=True)


class Vacancy(BaseModel):
    """Vacancy with a set of criteria, unique by value equality."""

    id: str
    name: str
    criteria: list[Criterion] = Field(default_factory=list)

    model_config = ConfigDict(extra="forbid", frozen=True)

    @field_validator("criteria", mode="after")
    @classmethod
    def _deduplicate(cls, value: list[Criterion]) -> list[Criterion]:
        return list(dict.fromkeys(value))
