"""Unconditional criterion matcher."""

from __future__ import annotations

import pendulum

from ...schemas import Candidate, Criterion, CriterionType


class AnyMatcher:
    """Match every candidate so the criterion contributes its full weight."""

    supported_type = CriterionType.ANY.value

    def matches(
        self,
        candidate: Candidate,
        criterion: Criterion,
        *,
        as_of: pendulum.DateTime | None = None,
    ) -> bool:
        return True
