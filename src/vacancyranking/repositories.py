"""Collaborator contracts consumed by the ranking engine."""

from __future__ import annotations

from typing import Iterable, Protocol, Sequence, runtime_checkable

from .schemas import Candidate, Vacancy


@runtime_checkable
class CandidateSource(Protocol):
    """Supplies the full candidate pool."""

    def get_all_candidates(self) -> Sequence[Candidate]:
        """Return every candidate, in a stable iteration order."""


@runtime_checkable
class VacancySource(Protocol):
    """Looks up vacancies by id."""

    def get_vacancy_by_id(self, vacancy_id: str) -> Vacancy | None:
        """Return the vacancy or ``None`` when no record matches."""


class DuplicateCandidateError(ValueError):
    """Raised when a candidate id or email is already registered."""


class InMemoryCandidateRepository:
    """Insertion-ordered candidate store with unique ids and emails."""

    def __init__(self, candidates: Iterable[Candidate] = ()):
        self._candidates: dict[str, Candidate] = {}
        for candidate in candidates:
            self.add(candidate)

    def add(self, candidate: Candidate) -> Candidate:
        if candidate.id in self._candidates:
            raise DuplicateCandidateError(f"Candidate id already registered: {candidate.id}")
        email = candidate.email.lower()
        for existing in self._candidates.values():
            if existing.email.lower() == email:
                raise DuplicateCandidateError(f"Email already registered: {candidate.email}")
        self._candidates[candidate.id] = candidate
        return candidate

    def clear(self) -> None:
        self._candidates.clear()

    def get_all_candidates(self) -> list[Candidate]:
        return list(self._candidates.values())


class InMemoryVacancyRepository:
    """Vacancy store keyed by id."""

    def __init__(self, vacancies: Iterable[Vacancy] = ()):
        self._vacancies: dict[str, Vacancy] = {}
        for vacancy in vacancies:
            self.add(vacancy)

    def add(self, vacancy: Vacancy) -> Vacancy:
        self._vacancies[vacancy.id] = vacancy
        return vacancy

    def clear(self) -> None:
        self._vacancies.clear()

    def get_vacancy_by_id(self, vacancy_id: str) -> Vacancy | None:
        return self._vacancies.get(vacancy_id)
