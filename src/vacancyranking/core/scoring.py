"""Weighted criteria scoring for a single candidate."""

from __future__ import annotations

import pendulum
import structlog

from ..errors import UnsupportedCriterionTypeError
from ..schemas import Candidate, Criterion, Vacancy
from .fields import FieldResolver
from .registry import MatcherRegistry


class ScoringEngine:
    """Sum the weights of the vacancy criteria a candidate satisfies."""

    def __init__(
        self,
        registry: MatcherRegistry,
        *,
        resolver: FieldResolver | None = None,
    ) -> None:
        self._registry = registry
        self._resolver = resolver
        self._logger = structlog.get_logger(__name__)

    def evaluation_instant(self) -> pendulum.DateTime | None:
        """Return the instant derived fields are computed against.

        Without a resolver, ``None`` leaves each matcher on its own clock.
        """
        if self._resolver is None:
            return None
        return self._resolver.now()

    def score(
        self,
        candidate: Candidate,
        vacancy: Vacancy,
        *,
        as_of: pendulum.DateTime | None = None,
    ) -> int:
        total = 0
        for criterion in vacancy.criteria:
            total += self.score_criterion(candidate, criterion, as_of=as_of)
        return total

    def score_criterion(
        self,
        candidate: Candidate,
        criterion: Criterion,
        *,
        as_of: pendulum.DateTime | None = None,
    ) -> int:
        details = criterion.details
        if details is None or details.type is None:
            self._logger.debug(
                "scoring.criterion_skipped",
                criterion=criterion.name,
                reason="missing_details" if details is None else "missing_type",
            )
            return 0

        matcher = self._registry.get_matcher_by_type(details.type)
        if matcher is None:
            self._logger.error(
                "scoring.unsupported_type",
                criterion=criterion.name,
                criterion_type=details.type,
            )
            raise UnsupportedCriterionTypeError(details.type, criterion.name)

        if not matcher.matches(candidate, criterion, as_of=as_of):
            return 0
        # Non-positive weights never lower a score.
        return max(criterion.weight, 0)
