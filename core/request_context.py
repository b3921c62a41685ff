"""Per-request context held in a ContextVar.

The request middleware sets the id; logging and any downstream code read it
with ``get_request_id()`` without explicit parameter passing.
"""

from contextvars import ContextVar, Token

_current_request_id: ContextVar[str | None] = ContextVar("current_request_id", default=None)


def get_request_id() -> str | None:
    """Return the id of the request being handled, if any."""
    return _current_request_id.get()


def set_request_id(request_id: str) -> Token:
    return _current_request_id.set(request_id)


def reset_request_id(token: Token) -> None:
    _current_request_id.reset(token)
