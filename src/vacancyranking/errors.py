"""Typed failures raised by the ranking core and its loaders."""

from __future__ import annotations

from dataclasses import dataclass


class RankingError(Exception):
    """Base class for failures that abort a whole ranking request."""

    title = "Ranking Error"
    status_code = 500


class VacancyNotFoundError(RankingError):
    """Raised when the requested vacancy id has no matching record."""

    title = "Vacancy Not Found"
    status_code = 404

    def __init__(self, vacancy_id: str):
        super().__init__(f"Vacancy with id {vacancy_id} not found")
        self.vacancy_id = vacancy_id


class UnsupportedCriterionTypeError(RankingError):
    """Raised when a criterion declares a type with no registered matcher."""

    title = "Invalid Criterion"
    status_code = 400

    def __init__(self, criterion_type: str, criterion_name: str | None = None):
        super().__init__(f"No matcher found for criterion type: {criterion_type}")
        self.criterion_type = criterion_type
        self.criterion_name = criterion_name


@dataclass(frozen=True, slots=True)
class FieldError:
    field: str
    message: str

    def __str__(self) -> str:
        return f"{self.field}: {self.message}"


class CriterionValidationError(ValueError):
    """Raised when vacancy criteria fail upstream validation."""

    def __init__(self, errors: list[FieldError]):
        super().__init__("One or more validation errors occurred")
        self.errors = errors

    def __str__(self) -> str:  # pragma: no cover - trivial
        return f"One or more validation errors occurred: {[str(e) for e in self.errors]}"
