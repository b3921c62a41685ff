"""Pydantic schemas for API request/response validation."""

from typing import Optional

from pydantic import BaseModel, Field


# ---------------------------------------------------------------------------
# Record shape (request and response)
# ---------------------------------------------------------------------------

class BookRecord(BaseModel):
    """External representation of a book.

    ``id`` is left out of creation requests and present everywhere else.
    """

    id: Optional[int] = None
    title: str
    author: str
    year: int = Field(..., description="Publication year")
    genre: str


# ---------------------------------------------------------------------------
# Response models
# ---------------------------------------------------------------------------

class MessageResponse(BaseModel):
    message: str


class ErrorResponse(BaseModel):
    detail: str
