"""Dependency injection container for the ranking system."""

from __future__ import annotations

import pendulum
from dependency_injector import containers, providers

from .core import (
    AnyMatcher,
    EnumerationMatcher,
    FieldResolver,
    MatcherRegistry,
    RangeMatcher,
    RankingEngine,
    ScoringEngine,
)
from .pipeline import CandidateLoader, OutputWriter, RankingPipeline, VacancyLoader
from .repositories import InMemoryCandidateRepository, InMemoryVacancyRepository


class RankingContainer(containers.DeclarativeContainer):
    """Dependency-injector container definition."""

    config = providers.Configuration()

    field_resolver = providers.Singleton(FieldResolver)

    any_matcher = providers.Singleton(AnyMatcher)
    enumeration_matcher = providers.Singleton(EnumerationMatcher, resolver=field_resolver)
    range_matcher = providers.Singleton(RangeMatcher, resolver=field_resolver)

    matchers = providers.List(
        any_matcher,
        enumeration_matcher,
        range_matcher,
    )

    matcher_registry = providers.Singleton(MatcherRegistry, matchers=matchers)

    scoring_engine = providers.Singleton(
        ScoringEngine,
        registry=matcher_registry,
        resolver=field_resolver,
    )

    candidate_repository = providers.Singleton(InMemoryCandidateRepository)
    vacancy_repository = providers.Singleton(InMemoryVacancyRepository)

    ranking_engine = providers.Singleton(
        RankingEngine,
        scoring=scoring_engine,
        candidates=candidate_repository,
        vacancies=vacancy_repository,
    )

    candidate_loader = providers.Singleton(CandidateLoader)
    vacancy_loader = providers.Singleton(
        VacancyLoader,
        validate=config.validation.enabled.as_(bool),
        resolver=field_resolver,
    )

    pipeline = providers.Factory(
        RankingPipeline,
        engine=ranking_engine,
        candidates=candidate_repository,
        vacancies=vacancy_repository,
        candidate_loader=candidate_loader,
        vacancy_loader=vacancy_loader,
        writer=providers.Singleton(OutputWriter),
    )


def parse_as_of(value: str) -> pendulum.DateTime:
    """Parse a YYYY-MM-DD or ISO 8601 evaluation instant."""
    parsed = pendulum.parse(value)
    if not isinstance(parsed, pendulum.DateTime):
        if isinstance(parsed, pendulum.Date):
            return pendulum.datetime(parsed.year, parsed.month, parsed.day)
        raise ValueError(f"Unsupported as_of value: {value!r}")
    return parsed


def create_container(*, settings: dict | None = None) -> RankingContainer:
    """Instantiate container with optional overrides."""

    container = RankingContainer()
    settings = settings if isinstance(settings, dict) else {}

    validation = {"enabled": True}
    validation.update(settings.get("validation") or {})
    container.config.from_dict({"validation": validation})

    as_of = (settings.get("ranking") or {}).get("as_of")
    if as_of:
        fixed = parse_as_of(str(as_of))
        container.field_resolver.override(
            providers.Singleton(FieldResolver, now_provider=providers.Object(lambda: fixed))
        )

    return container
