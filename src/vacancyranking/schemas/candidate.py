from __future__ import annotations

from datetime import date
from decimal import Decimal
from enum import Enum
from typing import Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator


class Gender(str, Enum):
    """Enumerated gender values accepted on candidate records."""

    MALE = "MALE"
    FEMALE = "FEMALE"

    @classmethod
    def from_string(cls, value: str | None) -> "Gender | None":
        if value is None:
            return None
        normalized = value.strip().upper()
        for gender in cls:
            if gender.value == normalized:
                return gender
        return None


class Candidate(BaseModel):
    """Candidate snapshot evaluated by the ranking core.

    Age is not stored; it is derived from ``birthdate`` at evaluation time.
    """

    id: str
    name: str
    email: str
    birthdate: date | None = None
    gender: Gender | None = None
    current_salary: Decimal | None = Field(
        default=None,
        validation_alias=AliasChoices("current_salary", "currentSalary"),
    )

    model_config = ConfigDict(extra="forbid", frozen=True, populate_by_name=True)

    @field_validator("gender", mode="before")
    @classmethod
    def _parse_gender(cls, value: Any) -> Any:
        if isinstance(value, str):
            parsed = Gender.from_string(value)
            if parsed is None:
                raise ValueError(
                    f"gender must be one of: {', '.join(g.value for g in Gender)}"
                )
            return parsed
        return value
