"""Lookup of matchers by criterion type."""

from __future__ import annotations

from types import MappingProxyType
from typing import TYPE_CHECKING, Iterable

from .fields import FieldResolver
from .matchers import AnyMatcher, EnumerationMatcher, RangeMatcher

if TYPE_CHECKING:
    from . import CriterionMatcher


class MatcherRegistry:
    """Immutable mapping from criterion type identifiers to matchers.

    New criterion types are supported by constructing the registry with an
    additional matcher; the scoring engine is unaffected.
    """

    def __init__(self, matchers: Iterable["CriterionMatcher"]):
        mapping: dict[str, CriterionMatcher] = {}
        for matcher in matchers:
            key = matcher.supported_type.upper()
            if key in mapping:
                raise ValueError(f"Duplicate matcher for criterion type: {key!r}")
            mapping[key] = matcher
        self._matchers = MappingProxyType(mapping)

    def get_matcher_by_type(self, criterion_type: str | None) -> "CriterionMatcher | None":
        if criterion_type is None or not criterion_type.strip():
            return None
        return self._matchers.get(criterion_type.strip().upper())

    def supported_types(self) -> list[str]:
        return list(self._matchers.keys())


def default_registry(*, resolver: FieldResolver | None = None) -> MatcherRegistry:
    """Return a registry with the ANY, ENUMERATION and RANGE matchers."""
    resolver = resolver or FieldResolver()
    return MatcherRegistry(
        [
            AnyMatcher(),
            EnumerationMatcher(resolver=resolver),
            RangeMatcher(resolver=resolver),
        ]
    )
