"""Pydantic schema definitions for candidates, vacancies and settings."""

from __future__ import annotations

from .candidate import Candidate, Gender
from .vacancy import DEFAULT_WEIGHT, Criterion, CriterionDetails, CriterionType, Vacancy

__all__ = [
    "Candidate",
    "Gender",
    "Criterion",
    "CriterionDetails",
    "CriterionType",
    "DEFAULT_WEIGHT",
    "Vacancy",
]
