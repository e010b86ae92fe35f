"""Core matching and ranking engine components."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

import pendulum

from ..schemas import Candidate, Criterion

# NOTE: keep imports explicit for export clarity.
from .fields import FieldResolver, ResolvedValue, derive_age
from .matchers import AnyMatcher, EnumerationMatcher, RangeMatcher
from .ranking import CandidateScore, RankedCandidate, RankingEngine, rank_scores
from .registry import MatcherRegistry, default_registry
from .scoring import ScoringEngine


@runtime_checkable
class CriterionMatcher(Protocol):
    """Matcher contract for evaluating one criterion against one candidate."""

    supported_type: str

    def matches(
        self,
        candidate: Candidate,
        criterion: Criterion,
        *,
        as_of: pendulum.DateTime | None = None,
    ) -> bool:
        """Return True when the candidate satisfies the criterion at ``as_of``."""


__all__ = [
    "CriterionMatcher",
    "FieldResolver",
    "ResolvedValue",
    "derive_age",
    "AnyMatcher",
    "EnumerationMatcher",
    "RangeMatcher",
    "MatcherRegistry",
    "default_registry",
    "ScoringEngine",
    "RankingEngine",
    "CandidateScore",
    "RankedCandidate",
    "rank_scores",
]
