"""Criteria matching and candidate ranking for vacancies."""

__version__ = "0.1.0"
