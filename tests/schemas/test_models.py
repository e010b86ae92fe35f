from __future__ import annotations

from datetime import date
from decimal import Decimal

import pytest
from pydantic import ValidationError

from vacancyranking.schemas import (
    DEFAULT_WEIGHT,
    Candidate,
    Criterion,
    CriterionDetails,
    CriterionType,
    Gender,
    Vacancy,
)


def test_candidate_parses_aliases_and_gender_case():
    candidate = Candidate.model_validate(
        {
            "id": "1",
            "name": "Siti Rahayu",
            "email": "siti.r@example.com",
            "birthdate": "1996-05-15",
            "gender": "female",
            "currentSalary": 5500000,
        }
    )

    assert candidate.gender is Gender.FEMALE
    assert candidate.birthdate == date(1996, 5, 15)
    assert candidate.current_salary == Decimal("5500000")


def test_candidate_rejects_unknown_gender():
    with pytest.raises(ValidationError):
        Candidate(id="1", name="X", email="x@example.com", gender="other")


def test_candidate_is_immutable():
    candidate = Candidate(id="1", name="X", email="x@example.com")

    with pytest.raises(ValidationError):
        candidate.name = "Y"


def test_gender_from_string():
    assert Gender.from_string(" Male ") is Gender.MALE
    assert Gender.from_string("unknown") is None
    assert Gender.from_string(None) is None


def test_criterion_defaults():
    criterion = Criterion(name="gender")

    assert criterion.weight == DEFAULT_WEIGHT == 1
    assert criterion.details is None


def test_criterion_details_type_parsing():
    assert CriterionDetails(type="range").criterion_type is CriterionType.RANGE
    assert CriterionDetails(type="INVALID").criterion_type is None
    assert CriterionDetails().criterion_type is None
    details = CriterionDetails.model_validate({"type": "RANGE", "minValue": "1.5", "max_value": 3})
    assert details.min_value == Decimal("1.5")
    assert details.max_value == Decimal("3")


def test_vacancy_criteria_are_unique_by_value():
    same = {"name": "age", "weight": 2, "details": {"type": "RANGE", "minValue": 20}}
    vacancy = Vacancy.model_validate(
        {
            "id": "V-1",
            "name": "Role",
            "criteria": [
                same,
                same,
                {"name": "age", "weight": 3, "details": {"type": "RANGE", "minValue": 20}},
                {"name": "gender", "details": {"type": "ENUMERATION", "options": ["MALE", "FEMALE"]}},
                {"name": "gender", "details": {"type": "ENUMERATION", "options": ["FEMALE", "MALE"]}},
            ],
        }
    )

    assert [(c.name, c.weight) for c in vacancy.criteria] == [("age", 2), ("age", 3), ("gender", 1)]


def test_vacancy_defaults_to_no_criteria():
    assert Vacancy(id="V-2", name="Open").criteria == []
