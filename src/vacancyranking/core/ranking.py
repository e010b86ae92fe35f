"""Candidate ranking for a vacancy."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

import structlog

from ..errors import VacancyNotFoundError
from ..schemas import Candidate, Vacancy
from .scoring import ScoringEngine

if TYPE_CHECKING:
    from ..repositories import CandidateSource, VacancySource


@dataclass(frozen=True, slots=True)
class CandidateScore:
    """Score of one candidate before ranks are assigned."""

    candidate_id: str
    name: str
    email: str
    score: int


@dataclass(frozen=True, slots=True)
class RankedCandidate:
    """Ranking entry returned to callers."""

    rank: int
    candidate_id: str
    name: str
    email: str
    score: int


def rank_scores(scores: list[CandidateScore]) -> list[RankedCandidate]:
    """Order scores descending and assign distinct 1-based ranks.

    Equal scores keep their relative input order.
    """
    ordered = sorted(scores, key=lambda item: item.score, reverse=True)
    return [
        RankedCandidate(
            rank=position,
            candidate_id=item.candidate_id,
            name=item.name,
            email=item.email,
            score=item.score,
        )
        for position, item in enumerate(ordered, start=1)
    ]


class RankingEngine:
    """Score a candidate pool against a vacancy and rank the results."""

    def __init__(
        self,
        *,
        scoring: ScoringEngine,
        candidates: "CandidateSource",
        vacancies: "VacancySource",
    ) -> None:
        self._scoring = scoring
        self._candidates = candidates
        self._vacancies = vacancies
        self._logger = structlog.get_logger(__name__)

    def rank_candidates_for_vacancy(self, vacancy_id: str) -> list[RankedCandidate]:
        vacancy = self._vacancies.get_vacancy_by_id(vacancy_id)
        if vacancy is None:
            self._logger.warning("ranking.vacancy_not_found", vacancy_id=vacancy_id)
            raise VacancyNotFoundError(vacancy_id)

        candidates = list(self._candidates.get_all_candidates())
        ranked = self.rank(vacancy, candidates)
        self._logger.info(
            "ranking.completed",
            vacancy_id=vacancy.id,
            criteria_count=len(vacancy.criteria),
            candidate_count=len(ranked),
            top_score=ranked[0].score if ranked else None,
        )
        return ranked

    def rank(self, vacancy: Vacancy, candidates: list[Candidate]) -> list[RankedCandidate]:
        # One instant per request so equal birthdates always yield equal ages.
        as_of = self._scoring.evaluation_instant()
        scores = [
            CandidateScore(
                candidate_id=candidate.id,
                name=candidate.name,
                email=candidate.email,
                score=self._scoring.score(candidate, vacancy, as_of=as_of),
            )
            for candidate in candidates
        ]
        return rank_scores(scores)
