"""Resolution of criterion names to candidate values."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import Any, Callable

import pendulum
import structlog

from ..schemas import Candidate, Gender

NowProvider = Callable[[], pendulum.DateTime]


@dataclass(frozen=True, slots=True)
class FieldSpec:
    """Accessor entry for a field that criteria may target by name."""

    name: str
    accessor: Callable[..., Any]
    enum_type: type[Enum] | None = None
    numeric: bool = False
    derived: bool = False

    @property
    def choices(self) -> tuple[str, ...] | None:
        if self.enum_type is None:
            return None
        return tuple(str(member.value) for member in self.enum_type)


@dataclass(frozen=True, slots=True)
class ResolvedValue:
    """A present value for a candidate field."""

    field: str
    value: Any
    choices: tuple[str, ...] | None = None


def normalize_field_name(name: str) -> str:
    return name.strip().lower().replace("_", "")


def derive_age(birthdate: date, as_of: pendulum.DateTime | date) -> int | None:
    """Return whole years between ``birthdate`` and ``as_of``, floored."""
    born = pendulum.date(birthdate.year, birthdate.month, birthdate.day)
    reference = pendulum.date(as_of.year, as_of.month, as_of.day)
    if born > reference:
        return None
    return reference.diff(born).in_years()


STORED_FIELDS: dict[str, FieldSpec] = {
    normalize_field_name(spec.name): spec
    for spec in (
        FieldSpec("id", lambda c: c.id),
        FieldSpec("name", lambda c: c.name),
        FieldSpec("email", lambda c: c.email),
        FieldSpec("birthdate", lambda c: c.birthdate),
        FieldSpec("gender", lambda c: c.gender, enum_type=Gender),
        FieldSpec("current_salary", lambda c: c.current_salary, numeric=True),
    )
}


def _age(candidate: Candidate, as_of: pendulum.DateTime) -> int | None:
    if candidate.birthdate is None:
        return None
    return derive_age(candidate.birthdate, as_of)


# Checked before STORED_FIELDS; the only extension point for computed criteria.
DERIVED_FIELDS: dict[str, FieldSpec] = {
    "age": FieldSpec("age", _age, numeric=True, derived=True),
}


class FieldResolver:
    """Resolve a criterion name against a candidate.

    Names are matched case-insensitively with underscores ignored. Derived
    fields are computed from ``as_of`` when the caller pins it, otherwise from
    ``now_provider``; everything else comes from ``STORED_FIELDS``. Unknown
    names, null values and failing accessors resolve to ``None``.
    """

    def __init__(self, *, now_provider: NowProvider | None = None) -> None:
        self._now_provider = now_provider or pendulum.now
        self._logger = structlog.get_logger(__name__)

    def known_fields(self) -> set[str]:
        return set(STORED_FIELDS) | set(DERIVED_FIELDS)

    def field_spec(self, name: str) -> FieldSpec | None:
        key = normalize_field_name(name)
        if key in DERIVED_FIELDS:
            return DERIVED_FIELDS[key]
        return STORED_FIELDS.get(key)

    def now(self) -> pendulum.DateTime:
        return self._now_provider()

    def resolve(
        self,
        candidate: Candidate,
        name: str | None,
        *,
        as_of: pendulum.DateTime | None = None,
    ) -> ResolvedValue | None:
        if not name or not name.strip():
            return None
        spec = self.field_spec(name)
        if spec is None:
            return None
        try:
            if spec.derived:
                value = spec.accessor(candidate, as_of or self._now_provider())
            else:
                value = spec.accessor(candidate)
        except Exception as exc:  # noqa: BLE001
            self._logger.warning(
                "fields.resolution_failed",
                candidate_id=getattr(candidate, "id", None),
                field=spec.name,
                error=str(exc),
            )
            return None
        if value is None:
            return None
        return ResolvedValue(field=spec.name, value=value, choices=spec.choices)

