"""Numeric interval criterion matcher."""

from __future__ import annotations

from decimal import Decimal
from typing import Any

import pendulum

from ...schemas import Candidate, Criterion, CriterionType
from ..fields import FieldResolver


class RangeMatcher:
    """Match when a numeric value lies within inclusive, optional bounds."""

    supported_type = CriterionType.RANGE.value

    def __init__(self, *, resolver: FieldResolver | None = None) -> None:
        self._resolver = resolver or FieldResolver()

    def matches(
        self,
        candidate: Candidate,
        criterion: Criterion,
        *,
        as_of: pendulum.DateTime | None = None,
    ) -> bool:
        if criterion is None or criterion.details is None:
            return False

        resolved = self._resolver.resolve(candidate, criterion.name, as_of=as_of)
        if resolved is None:
            return False

        value = self._to_decimal(resolved.value)
        if value is None:
            return False

        return self.in_range(value, criterion.details.min_value, criterion.details.max_value)

    @staticmethod
    def in_range(value: Decimal, minimum: Decimal | None, maximum: Decimal | None) -> bool:
        if minimum is not None and value < minimum:
            return False
        if maximum is not None and value > maximum:
            return False
        return True

    @staticmethod
    def _to_decimal(value: Any) -> Decimal | None:
        # Dates, strings and booleans are not comparable.
        if isinstance(value, bool):
            return None
        if isinstance(value, Decimal):
            return value if value.is_finite() else None
        if isinstance(value, int):
            return Decimal(value)
        if isinstance(value, float):
            converted = Decimal(str(value))
            return converted if converted.is_finite() else None
        return None
