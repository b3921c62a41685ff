"""Pure-function rules engine pattern.

Rules are stateless functions: (value, context) -> RuleResult.
No database, no side effects. This makes them:
- Trivially testable (pure input/output)
- Composable (chain multiple rules)
- Auditable (deterministic, explainable)

The catalog uses them to reject malformed request parameters before any
store call is made.
"""

import re
from dataclasses import dataclass, field
from typing import Any

_DIGITS = re.compile(r"[0-9]+")


# ---------------------------------------------------------------------------
# Result types
# ---------------------------------------------------------------------------

@dataclass
class RuleResult:
    """Outcome of a single rule evaluation."""

    passed: bool
    rule_name: str
    message: str
    details: dict[str, Any] = field(default_factory=dict)


@dataclass
class RuleSetResult:
    """Aggregate outcome of multiple rules."""

    all_passed: bool
    results: list[RuleResult]
    failed: list[RuleResult] = field(default_factory=list)

    def __post_init__(self):
        self.failed = [r for r in self.results if not r.passed]
        self.all_passed = len(self.failed) == 0

    @property
    def first_failure(self) -> RuleResult | None:
        return self.failed[0] if self.failed else None


# ---------------------------------------------------------------------------
# Generic rules
# ---------------------------------------------------------------------------

def is_all_digits(value: str) -> bool:
    """True when ``value`` is a non-empty run of ASCII digits."""
    return _DIGITS.fullmatch(value) is not None


def check_not_numeric(value: str, field_name: str) -> RuleResult:
    """Reject a name made only of digits (e.g. author "123")."""
    passed = not is_all_digits(value)
    return RuleResult(
        passed=passed,
        rule_name=f"{field_name}_not_numeric",
        message=(
            f"Valid {field_name}"
            if passed
            else f"The {field_name} parameter cannot consist of digits only."
        ),
        details={"field": field_name, "value": value},
    )


def check_numeric(value: str, field_name: str, max_value: int | None = None) -> RuleResult:
    """Require a value made only of digits (e.g. a year threshold).

    With ``max_value`` the number must also fit at or below it; the length
    is compared first so oversized input is never converted.
    """
    passed = is_all_digits(value)
    if passed and max_value is not None:
        digits = value.lstrip("0") or "0"
        passed = len(digits) <= len(str(max_value)) and int(digits) <= max_value
    return RuleResult(
        passed=passed,
        rule_name=f"{field_name}_numeric",
        message=(
            f"Valid {field_name}"
            if passed
            else f"The {field_name} must be a valid number."
        ),
        details={"field": field_name, "value": value},
    )


def check_absent(value: Any, field_name: str) -> RuleResult:
    """Require a field to be left out of a request."""
    passed = value is None
    return RuleResult(
        passed=passed,
        rule_name=f"{field_name}_absent",
        message=(
            f"No {field_name} supplied"
            if passed
            else f"Do not include the {field_name} field, the database assigns it."
        ),
        details={"field": field_name, "value": value},
    )


# ---------------------------------------------------------------------------
# Rule composition
# ---------------------------------------------------------------------------

def evaluate_rules(*rules: RuleResult) -> RuleSetResult:
    """Compose multiple rule results into a single aggregate.

    Example::

        result = evaluate_rules(
            check_not_numeric(author, "author"),
            check_numeric(year, "year"),
        )
        if not result.all_passed:
            return Outcome.bad_input(result.first_failure.message)
    """
    return RuleSetResult(
        all_passed=all(r.passed for r in rules),
        results=list(rules),
    )
