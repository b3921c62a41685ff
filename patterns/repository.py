"""Async repository pattern for database access.

Provides a generic base repository with the CRUD primitives every store
needs, plus FastAPI dependency injection. Domains subclass this to add
their own queries.

Absence is reported as ``None`` / ``False``, never as an exception.
"""

from typing import Any, Generic, Sequence, TypeVar

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from core.models.base import Base

# ---------------------------------------------------------------------------
# Type variable for model classes
# ---------------------------------------------------------------------------

ModelT = TypeVar("ModelT", bound=Base)


# ---------------------------------------------------------------------------
# Base repository
# ---------------------------------------------------------------------------

class BaseRepository(Generic[ModelT]):
    """Generic async repository with CRUD primitives.

    Subclass and set `model` to your SQLAlchemy model::

        class BookRepository(BaseRepository[Book]):
            model = Book

            async def find_by_genre(self, genre: str) -> Sequence[Book]:
                stmt = select(self.model).where(self.model.genre == genre)
                return await self._scalars(stmt)
    """

    model: type[ModelT]

    def __init__(self, session: AsyncSession):
        self.session = session

    async def _scalars(self, stmt) -> Sequence[ModelT]:
        result = await self.session.execute(stmt)
        return result.scalars().all()

    # -- Read --

    async def find_all(self) -> Sequence[ModelT]:
        """All rows in native (primary key) order."""
        return await self._scalars(select(self.model).order_by(self.model.id))

    async def find_by_id(self, item_id: Any) -> ModelT | None:
        """Get a single row by primary key, or None."""
        return await self.session.get(self.model, item_id)

    # -- Write --

    async def save(self, item: ModelT) -> ModelT:
        """Insert a new row or flush changes to an existing one.

        New rows get their identifier from the database during the flush.
        """
        self.session.add(item)
        await self.session.flush()
        await self.session.refresh(item)
        return item

    async def delete_by_id(self, item_id: Any) -> None:
        """Delete a row by primary key. No-op if absent."""
        item = await self.find_by_id(item_id)
        if item is None:
            return
        await self.session.delete(item)
        await self.session.flush()

    async def rollback(self) -> None:
        """Discard the current transaction after a failed operation."""
        await self.session.rollback()
