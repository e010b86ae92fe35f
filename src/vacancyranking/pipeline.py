"""File-based ranking pipeline assembly and execution."""

from __future__ import annotations

import json
from dataclasses import asdict
from pathlib import Path

import pendulum
import structlog
from pydantic import ValidationError

from . import __version__
from .core import FieldResolver, RankingEngine
from .errors import CriterionValidationError
from .repositories import (
    DuplicateCandidateError,
    InMemoryCandidateRepository,
    InMemoryVacancyRepository,
)
from .schemas import Candidate, Vacancy
from .validation import validate_vacancy


class CandidateLoadError(ValueError):
    """Raised when candidate loading encounters invalid records."""

    def __init__(self, errors: list[str], partial: list[Candidate]):
        super().__init__("Candidate loading failed")
        self.errors = errors
        self.partial = partial

    def __str__(self) -> str:  # pragma: no cover - trivial
        return f"Candidate loading failed: {self.errors}"


class VacancyLoadError(ValueError):
    """Raised when some vacancy records are malformed or fail validation.

    ``invalid`` maps the id of each rejected vacancy, where one could be read,
    to the error that rejected it.
    """

    def __init__(
        self,
        errors: list[str],
        partial: list[Vacancy],
        invalid: dict[str, ValueError],
    ):
        super().__init__("Vacancy loading failed")
        self.errors = errors
        self.partial = partial
        self.invalid = invalid

    def __str__(self) -> str:  # pragma: no cover - trivial
        return f"Vacancy loading failed: {self.errors}"


class CandidateLoader:
    """Load candidates from a JSONL file."""

    def load(self, path: Path) -> list[Candidate]:
        candidates: list[Candidate] = []
        errors: list[str] = []
        seen_ids: set[str] = set()
        seen_emails: set[str] = set()
        with path.open("r", encoding="utf-8") as handle:
            for idx, line in enumerate(handle, start=1):
                raw = line.strip()
                if not raw:
                    continue
                try:
                    record = json.loads(raw)
                except json.JSONDecodeError as exc:
                    errors.append(f"line {idx}: invalid JSON ({exc})")
                    continue
                try:
                    candidate = Candidate.model_validate(record)
                except ValidationError as exc:
                    errors.append(f"line {idx}: {exc}")
                    continue
                if candidate.id in seen_ids:
                    errors.append(f"line {idx}: duplicate id '{candidate.id}'")
                    continue
                email = candidate.email.lower()
                if email in seen_emails:
                    errors.append(f"line {idx}: duplicate email '{candidate.email}'")
                    continue
                seen_ids.add(candidate.id)
                seen_emails.add(email)
                candidates.append(candidate)
        if errors:
            raise CandidateLoadError(errors, candidates)
        return candidates


class VacancyLoader:
    """Load vacancy documents from a JSON file."""

    def __init__(
        self,
        *,
        validate: bool = True,
        resolver: FieldResolver | None = None,
    ) -> None:
        self._validate = validate
        self._resolver = resolver or FieldResolver()

    def load(self, path: Path) -> list[Vacancy]:
        with path.open("r", encoding="utf-8") as handle:
            try:
                data = json.load(handle)
            except json.JSONDecodeError as exc:
                raise ValueError(f"Invalid vacancy JSON: {exc}") from exc
        records = data if isinstance(data, list) else [data]

        vacancies: list[Vacancy] = []
        errors: list[str] = []
        invalid: dict[str, ValueError] = {}
        for idx, record in enumerate(records):
            record_id = record.get("id") if isinstance(record, dict) else None
            label = f"vacancy {record_id!r}" if record_id is not None else f"record {idx}"
            try:
                vacancy = Vacancy.model_validate(record)
                if self._validate:
                    validate_vacancy(vacancy, resolver=self._resolver)
            except CriterionValidationError as exc:
                errors.extend(f"{label}: {error}" for error in exc.errors)
                invalid[str(record_id)] = exc
                continue
            except ValidationError as exc:
                errors.append(f"{label}: {exc}")
                if record_id is not None:
                    invalid[str(record_id)] = exc
                continue
            vacancies.append(vacancy)
        if errors:
            raise VacancyLoadError(errors, vacancies, invalid)
        return vacancies


class OutputWriter:
    """Persist ranking results."""

    def write(self, path: Path, payload: dict | list[dict]) -> None:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(
            json.dumps(payload, ensure_ascii=False, indent=2),
            encoding="utf-8",
        )


class RankingPipeline:
    """Load candidates and vacancies from files, rank, and write results."""

    def __init__(
        self,
        *,
        engine: RankingEngine,
        candidates: InMemoryCandidateRepository,
        vacancies: InMemoryVacancyRepository,
        candidate_loader: CandidateLoader | None = None,
        vacancy_loader: VacancyLoader | None = None,
        writer: OutputWriter | None = None,
    ) -> None:
        self._engine = engine
        self._candidates = candidates
        self._vacancies = vacancies
        self._candidate_loader = candidate_loader or CandidateLoader()
        self._vacancy_loader = vacancy_loader or VacancyLoader()
        self._writer = writer or OutputWriter()
        self._logger = structlog.get_logger(__name__)

    def run(
        self,
        *,
        candidates_path: Path,
        vacancies_path: Path,
        vacancy_id: str,
        output_path: Path,
    ) -> list[dict]:
        load_errors: list[str] = []
        try:
            vacancies = self._vacancy_loader.load(vacancies_path)
        except VacancyLoadError as exc:
            if vacancy_id in exc.invalid:
                self._logger.error("vacancies.invalid", vacancy_id=vacancy_id, errors=exc.errors)
                raise exc.invalid[vacancy_id] from exc
            vacancies = exc.partial
            load_errors.extend(exc.errors)
            self._logger.warning("vacancies.partial_load", errors=exc.errors)

        try:
            candidates = self._candidate_loader.load(candidates_path)
        except CandidateLoadError as exc:
            candidates = exc.partial
            load_errors.extend(exc.errors)
            self._logger.warning("candidates.partial_load", errors=exc.errors)

        self._vacancies.clear()
        for vacancy in vacancies:
            self._vacancies.add(vacancy)

        self._candidates.clear()
        for candidate in candidates:
            try:
                self._candidates.add(candidate)
            except DuplicateCandidateError as exc:
                load_errors.append(str(exc))
                self._logger.warning("candidates.duplicate", candidate_id=candidate.id)

        ranked = self._engine.rank_candidates_for_vacancy(vacancy_id)
        results = [asdict(entry) for entry in ranked]
        vacancy = self._vacancies.get_vacancy_by_id(vacancy_id)

        metadata = {
            "vacancy_id": vacancy_id,
            "vacancy_name": vacancy.name if vacancy else None,
            "candidate_count": len(results),
            "errors": load_errors,
            "timestamp": pendulum.now().to_iso8601_string(),
            "app_version": __version__,
        }
        self._writer.write(output_path, {"metadata": metadata, "results": results})
        return results
