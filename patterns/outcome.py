"""Tagged operation outcomes.

Every catalog operation returns an ``Outcome`` instead of raising for
expected conditions. Callers branch on ``kind``; absence and bad input are
data, not exceptions::

    outcome = await catalog.get_by_id(42)
    if outcome.kind is OutcomeKind.NOT_FOUND:
        ...
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Generic, TypeVar

T = TypeVar("T")

INTERNAL_ERROR_MESSAGE = "Unexpected error while handling the request, please try again later."


class OutcomeKind(str, Enum):
    SUCCESS = "success"
    BAD_INPUT = "bad_input"
    NOT_FOUND = "not_found"
    INTERNAL_ERROR = "internal_error"


@dataclass(frozen=True)
class Outcome(Generic[T]):
    """Result of a catalog operation."""

    kind: OutcomeKind
    data: T | None = None
    message: str = ""

    @property
    def ok(self) -> bool:
        return self.kind is OutcomeKind.SUCCESS

    @classmethod
    def success(cls, data: Any) -> "Outcome":
        return cls(kind=OutcomeKind.SUCCESS, data=data)

    @classmethod
    def bad_input(cls, message: str) -> "Outcome":
        return cls(kind=OutcomeKind.BAD_INPUT, message=message)

    @classmethod
    def not_found(cls, message: str, data: Any = None) -> "Outcome":
        return cls(kind=OutcomeKind.NOT_FOUND, data=data, message=message)

    @classmethod
    def internal_error(cls) -> "Outcome":
        return cls(kind=OutcomeKind.INTERNAL_ERROR, message=INTERNAL_ERROR_MESSAGE)
