"""Catalog repository — async database access for books.

Extends BaseRepository with the catalog lookups: exact author/genre match,
case-insensitive title search, year threshold, author counts, year ordering
and the combined title-or-author query.
"""

from typing import Sequence

from fastapi import Depends
from sqlalchemy import func, or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from core.database import get_session
from patterns.repository import BaseRepository
from verticals.catalog.models.db_models import Book

LIKE_ESCAPE = "\\"


def contains_pattern(fragment: str) -> str:
    """LIKE pattern matching ``fragment`` literally anywhere in a value."""
    escaped = (
        fragment.replace(LIKE_ESCAPE, LIKE_ESCAPE * 2)
        .replace("%", f"{LIKE_ESCAPE}%")
        .replace("_", f"{LIKE_ESCAPE}_")
    )
    return f"%{escaped}%"


# ---------------------------------------------------------------------------
# Book repository
# ---------------------------------------------------------------------------

class BookRepository(BaseRepository[Book]):
    """Repository for book CRUD and lookup queries.

    List results are ordered by id unless the query says otherwise.

    Title search uses ILIKE. PostgreSQL folds case for any letter; SQLite
    renders it as lower() LIKE lower(), which folds ASCII only, so "dune"
    does not match "DÜNE" there.
    """

    model = Book

    def _title_matches(self, fragment: str):
        return Book.title.ilike(contains_pattern(fragment), escape=LIKE_ESCAPE)

    async def find_by_author(self, author: str) -> Sequence[Book]:
        stmt = select(Book).where(Book.author == author).order_by(Book.id)
        return await self._scalars(stmt)

    async def find_by_genre(self, genre: str) -> Sequence[Book]:
        stmt = select(Book).where(Book.genre == genre).order_by(Book.id)
        return await self._scalars(stmt)

    async def find_by_title_containing_ignore_case(self, fragment: str) -> Sequence[Book]:
        stmt = select(Book).where(self._title_matches(fragment)).order_by(Book.id)
        return await self._scalars(stmt)

    async def find_by_year_less_than(self, year: int) -> Sequence[Book]:
        stmt = select(Book).where(Book.year < year).order_by(Book.id)
        return await self._scalars(stmt)

    async def count_by_author(self, author: str) -> int:
        stmt = select(func.count()).select_from(Book).where(Book.author == author)
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def find_all_order_by_year_desc(self) -> Sequence[Book]:
        """All books, newest first; equal years keep id order."""
        stmt = select(Book).order_by(Book.year.desc(), Book.id)
        return await self._scalars(stmt)

    async def find_by_title_or_author(self, fragment: str, author: str) -> Sequence[Book]:
        """Books whose title contains ``fragment`` or whose author is ``author``."""
        stmt = (
            select(Book)
            .where(or_(self._title_matches(fragment), Book.author == author))
            .order_by(Book.id)
        )
        return await self._scalars(stmt)


# ---------------------------------------------------------------------------
# FastAPI dependency factory
# ---------------------------------------------------------------------------

def get_book_repository(
    session: AsyncSession = Depends(get_session),
) -> BookRepository:
    """FastAPI dependency for BookRepository."""
    return BookRepository(session)
