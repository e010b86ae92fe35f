"""Option-set criterion matcher."""

from __future__ import annotations

from enum import Enum
from typing import Any

import pendulum

from ...schemas import Candidate, Criterion, CriterionType
from ..fields import FieldResolver


class EnumerationMatcher:
    """Match when the resolved value is one of the criterion's options.

    Options and values are compared lowercase. On enumerated fields, options
    that are not legal values of the field are dropped before comparing.
    """

    supported_type = CriterionType.ENUMERATION.value

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
        options = criterion.details.options
        if not options:
            return False

        lowered = {option.lower() for option in options}
        resolved = self._resolver.resolve(candidate, criterion.name, as_of=as_of)
        if resolved is None:
            return False

        if resolved.choices is not None:
            allowed = {choice.lower() for choice in resolved.choices} & lowered
        else:
            allowed = lowered
        if not allowed:
            return False

        return self._stringify(resolved.value).lower() in allowed

    @staticmethod
    def _stringify(value: Any) -> str:
        if isinstance(value, Enum):
            return str(value.value)
        return str(value)
