from __future__ import annotations

import json
from pathlib import Path

import pytest

from vacancyranking.errors import CriterionValidationError
from vacancyranking.pipeline import CandidateLoadError, CandidateLoader, VacancyLoadError, VacancyLoader
from vacancyranking.repositories import (
    CandidateSource,
    DuplicateCandidateError,
    InMemoryCandidateRepository,
    InMemoryVacancyRepository,
    VacancySource,
)
from vacancyranking.schemas import Candidate, Vacancy


def candidate_record(candidate_id: str, email: str) -> dict:
    return {
        "id": candidate_id,
        "name": f"Candidate {candidate_id}",
        "email": email,
        "birthdate": "1996-05-15",
        "gender": "female",
        "currentSalary": "5500000",
    }


def test_candidate_loader_reads_jsonl(tmp_path: Path):
    path = tmp_path / "candidates.jsonl"
    path.write_text(
        json.dumps(candidate_record("1", "a@example.com")) + "\n\n" + json.dumps(candidate_record("2", "b@example.com")),
        encoding="utf-8",
    )

    candidates = CandidateLoader().load(path)

    assert [candidate.id for candidate in candidates] == ["1", "2"]
    assert str(candidates[0].current_salary) == "5500000"


def test_candidate_loader_raises_on_invalid_json(tmp_path: Path):
    path = tmp_path / "candidates.jsonl"
    path.write_text(json.dumps(candidate_record("1", "a@example.com")) + "\n{invalid", encoding="utf-8")

    with pytest.raises(CandidateLoadError) as exc:
        CandidateLoader().load(path)

    assert "invalid JSON" in exc.value.errors[0]
    assert len(exc.value.partial) == 1


def test_candidate_loader_reports_duplicates_and_invalid_records(tmp_path: Path):
    path = tmp_path / "candidates.jsonl"
    lines = [
        candidate_record("1", "a@example.com"),
        candidate_record("2", "A@example.com"),
        {"id": "3", "name": "No Email"},
    ]
    path.write_text("\n".join(json.dumps(line) for line in lines), encoding="utf-8")

    with pytest.raises(CandidateLoadError) as exc:
        CandidateLoader().load(path)

    assert "duplicate email" in exc.value.errors[0]
    assert exc.value.errors[1].startswith("line 3:")
    assert [candidate.id for candidate in exc.value.partial] == ["1"]


def test_vacancy_loader_reads_list_and_single_object(tmp_path: Path):
    vacancy = {
        "id": "V-1",
        "name": "Junior Software Engineer",
        "criteria": [
            {"name": "age", "weight": 3, "details": {"type": "RANGE", "minValue": 22, "maxValue": 30}},
            {"name": "gender", "details": {"type": "ANY"}},
        ],
    }
    many = tmp_path / "vacancies.json"
    many.write_text(json.dumps([vacancy]), encoding="utf-8")
    single = tmp_path / "vacancy.json"
    single.write_text(json.dumps(vacancy), encoding="utf-8")

    loaded = VacancyLoader().load(many)

    assert loaded == VacancyLoader().load(single)
    assert loaded[0].criteria[1].weight == 1


def test_vacancy_loader_validates_criteria(tmp_path: Path):
    path = tmp_path / "vacancies.json"
    path.write_text(
        json.dumps({"id": "V-1", "name": "Bad", "criteria": [{"name": "age", "details": {"type": "RANGE"}}]}),
        encoding="utf-8",
    )

    with pytest.raises(VacancyLoadError) as exc:
        VacancyLoader().load(path)

    assert exc.value.partial == []
    assert isinstance(exc.value.invalid["V-1"], CriterionValidationError)

    assert VacancyLoader(validate=False).load(path)[0].id == "V-1"


def test_vacancy_loader_invalid_json(tmp_path: Path):
    path = tmp_path / "vacancies.json"
    path.write_text("{invalid", encoding="utf-8")

    with pytest.raises(ValueError):
        VacancyLoader().load(path)


def test_in_memory_repositories_satisfy_contracts():
    candidates = InMemoryCandidateRepository(
        [Candidate(id="1", name="A", email="a@example.com"), Candidate(id="2", name="B", email="b@example.com")]
    )
    vacancies = InMemoryVacancyRepository([Vacancy(id="V-1", name="Role")])

    assert isinstance(candidates, CandidateSource)
    assert isinstance(vacancies, VacancySource)
    assert [candidate.id for candidate in candidates.get_all_candidates()] == ["1", "2"]
    assert vacancies.get_vacancy_by_id("V-1").name == "Role"
    assert vacancies.get_vacancy_by_id("missing") is None

    with pytest.raises(DuplicateCandidateError):
        candidates.add(Candidate(id="3", name="C", email="A@example.com"))
    with pytest.raises(DuplicateCandidateError):
        candidates.add(Candidate(id="1", name="A2", email="other@example.com"))
    assert [candidate.name for candidate in candidates.get_all_candidates()] == ["A", "B"]


def test_candidate_loader_rejects_duplicate_ids(tmp_path: Path):
    path = tmp_path / "candidates.jsonl"
    path.write_text(
        json.dumps(candidate_record("1", "a@example.com")) + "\n" + json.dumps(candidate_record("1", "b@example.com")),
        encoding="utf-8",
    )

    with pytest.raises(CandidateLoadError) as exc:
        CandidateLoader().load(path)

    assert exc.value.errors == ["line 2: duplicate id '1'"]
    assert [candidate.email for candidate in exc.value.partial] == ["a@example.com"]


def test_vacancy_loader_keeps_valid_vacancies_next_to_invalid_ones(tmp_path: Path):
    path = tmp_path / "vacancies.json"
    path.write_text(
        json.dumps(
            [
                {"id": "good", "name": "Good", "criteria": [{"name": "gender", "details": {"type": "ANY"}}]},
                {"id": "bad", "name": "Bad", "criteria": [{"name": "gender", "weight": 0, "details": {"type": "ANY"}}]},
                {"id": "typo", "name": "Typo", "criterion": []},
                "not-an-object",
            ]
        ),
        encoding="utf-8",
    )

    with pytest.raises(VacancyLoadError) as exc:
        VacancyLoader().load(path)

    assert [vacancy.id for vacancy in exc.value.partial] == ["good"]
    assert set(exc.value.invalid) == {"bad", "typo"}
    assert exc.value.errors[0] == "vacancy 'bad': criteria[0].weight: must be positive"
    assert exc.value.errors[-1].startswith("record 3:")
