"""Criterion matcher implementations for the ranking core."""

from .any import AnyMatcher
from .enumeration import EnumerationMatcher
from .range import RangeMatcher

__all__ = [
    "AnyMatcher",
    "EnumerationMatcher",
    "RangeMatcher",
]
