"""Catalog request rules — pure functions.

Builds on the rules engine pattern with the checks the catalog applies to
request parameters before touching the store.
"""

from core.models.base import INT_COLUMN_MAX
from patterns.rules_engine import (
    RuleResult,
    RuleSetResult,
    check_absent,
    check_not_numeric,
    check_numeric,
    evaluate_rules,
)


def check_author(author: str) -> RuleResult:
    """Author names must not be purely numeric."""
    return check_not_numeric(author, "author")


def check_genre(genre: str) -> RuleResult:
    """Genre names must not be purely numeric."""
    return check_not_numeric(genre, "genre")


def check_year_threshold(year: str) -> RuleResult:
    """Year thresholds must be digits that fit the year column."""
    return check_numeric(year, "year", max_value=INT_COLUMN_MAX)


def check_new_record_id(record_id: int | None) -> RuleResult:
    """Creation requests must not carry an identifier."""
    return check_absent(record_id, "id")


__all__ = [
    "RuleResult",
    "RuleSetResult",
    "check_author",
    "check_genre",
    "check_year_threshold",
    "check_new_record_id",
    "evaluate_rules",
]
