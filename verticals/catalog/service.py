"""BookCatalog — validation and result classification over the book store.

The catalog is stateless: it holds only a reference to its store and every
call works on the arguments it is given. Each operation returns an
``Outcome``:

- BAD_INPUT when a request parameter breaks a rule (checked before any
  store call)
- NOT_FOUND when an id is unknown or a lookup matches nothing
- INTERNAL_ERROR when the store raises; the error is logged and the
  transaction discarded
- SUCCESS otherwise, carrying BookRecord data
"""

import logging
from typing import Awaitable, Callable, Sequence

from fastapi import Depends

from core.models.base import INT_COLUMN_MAX
from patterns.outcome import Outcome
from verticals.catalog.models.db_models import Book
from verticals.catalog.models.schemas import BookRecord
from verticals.catalog.repository import BookRepository, get_book_repository
from verticals.catalog.rules import (
    RuleResult,
    check_author,
    check_genre,
    check_new_record_id,
    check_year_threshold,
    evaluate_rules,
)

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Record mapping
# ---------------------------------------------------------------------------

def to_record(book: Book) -> BookRecord:
    return BookRecord(**book.to_dict())


def to_entity(record: BookRecord) -> Book:
    """New Book row from a record; the id is left for the store to assign."""
    return Book(
        title=record.title,
        author=record.author,
        year=record.year,
        genre=record.genre,
    )


# ---------------------------------------------------------------------------
# Catalog
# ---------------------------------------------------------------------------

class BookCatalog:
    """Stateless façade over a BookRepository."""

    def __init__(self, store: BookRepository):
        self.store = store

    # -- helpers --

    def _rejected(self, operation: str, *rules: RuleResult) -> Outcome | None:
        """BAD_INPUT outcome for the first failing rule, or None."""
        result = evaluate_rules(*rules)
        if result.all_passed:
            return None
        failure = result.first_failure
        logger.info("Rejected %s: %s", operation, failure.rule_name)
        return Outcome.bad_input(failure.message)

    async def _guarded(
        self, operation: str, call: Callable[[], Awaitable[Outcome]]
    ) -> Outcome:
        try:
            return await call()
        except Exception:
            logger.exception("Store failure during %s", operation)
            try:
                await self.store.rollback()
            except Exception:
                logger.exception("Rollback failed after %s", operation)
            return Outcome.internal_error()

    async def _find(self, book_id: int) -> Book | None:
        """Look a book up; ids outside the key column range cannot exist."""
        if not 0 < book_id <= INT_COLUMN_MAX:
            return None
        return await self.store.find_by_id(book_id)

    @staticmethod
    def _records(books: Sequence[Book], empty_message: str) -> Outcome:
        if not books:
            return Outcome.not_found(empty_message)
        return Outcome.success([to_record(b) for b in books])

    # -- CRUD --

    async def list_all(self) -> Outcome:
        async def run() -> Outcome:
            return self._records(await self.store.find_all(), "No books in the catalog.")

        return await self._guarded("list_all", run)

    async def get_by_id(self, book_id: int) -> Outcome:
        async def run() -> Outcome:
            book = await self._find(book_id)
            if book is None:
                return Outcome.not_found(f"Book with id {book_id} not found.")
            return Outcome.success(to_record(book))

        return await self._guarded("get_by_id", run)

    async def create(self, record: BookRecord) -> Outcome:
        """Persist a new book. Clients must not choose the identifier."""
        rejected = self._rejected("create", check_new_record_id(record.id))
        if rejected:
            return rejected

        async def run() -> Outcome:
            book = await self.store.save(to_entity(record))
            logger.info("Created book %s", book.id)
            return Outcome.success(to_record(book))

        return await self._guarded("create", run)

    async def update(self, book_id: int, record: BookRecord) -> Outcome:
        """Overwrite title, author, year and genre. ``record.id`` is ignored."""

        async def run() -> Outcome:
            book = await self._find(book_id)
            if book is None:
                return Outcome.not_found(f"Book with id {book_id} not found.")
            book.title = record.title
            book.author = record.author
            book.year = record.year
            book.genre = record.genre
            book = await self.store.save(book)
            logger.info("Updated book %s", book.id)
            return Outcome.success(to_record(book))

        return await self._guarded("update", run)

    async def delete(self, book_id: int) -> Outcome:
        """SUCCESS carrying True if the book existed and was removed, else False."""

        async def run() -> Outcome:
            if await self._find(book_id) is None:
                return Outcome.success(False)
            await self.store.delete_by_id(book_id)
            logger.info("Deleted book %s", book_id)
            return Outcome.success(True)

        return await self._guarded("delete", run)

    # -- lookups --

    async def find_by_author(self, author: str) -> Outcome:
        rejected = self._rejected("find_by_author", check_author(author))
        if rejected:
            return rejected

        async def run() -> Outcome:
            return self._records(
                await self.store.find_by_author(author),
                f"No books found for author: {author}",
            )

        return await self._guarded("find_by_author", run)

    async def find_by_genre(self, genre: str) -> Outcome:
        rejected = self._rejected("find_by_genre", check_genre(genre))
        if rejected:
            return rejected

        async def run() -> Outcome:
            return self._records(
                await self.store.find_by_genre(genre),
                f"No books found in genre: {genre}",
            )

        return await self._guarded("find_by_genre", run)

    async def search_by_title(self, title: str) -> Outcome:
        async def run() -> Outcome:
            return self._records(
                await self.store.find_by_title_containing_ignore_case(title),
                f"No books found with title containing: {title}",
            )

        return await self._guarded("search_by_title", run)

    async def find_by_year_before(self, year: str) -> Outcome:
        """Books published strictly before ``year``, given as digit text."""
        rejected = self._rejected("find_by_year_before", check_year_threshold(year))
        if rejected:
            return rejected

        async def run() -> Outcome:
            threshold = int(year.lstrip("0") or "0")
            return self._records(
                await self.store.find_by_year_less_than(threshold),
                f"No books published before year: {year}",
            )

        return await self._guarded("find_by_year_before", run)

    async def count_by_author(self, author: str) -> Outcome:
        """Number of books by ``author``.

        A count of zero comes back as NOT_FOUND with ``data == 0``.
        """
        rejected = self._rejected("count_by_author", check_author(author))
        if rejected:
            return rejected

        async def run() -> Outcome:
            count = await self.store.count_by_author(author)
            if count == 0:
                return Outcome.not_found(f"No books found for author: {author}", data=0)
            return Outcome.success(count)

        return await self._guarded("count_by_author", run)

    async def list_sorted_by_year_desc(self) -> Outcome:
        async def run() -> Outcome:
            return self._records(
                await self.store.find_all_order_by_year_desc(),
                "No books available to sort.",
            )

        return await self._guarded("list_sorted_by_year_desc", run)

    async def find_by_title_or_author(self, title: str, author: str) -> Outcome:
        rejected = self._rejected("find_by_title_or_author", check_author(author))
        if rejected:
            return rejected

        async def run() -> Outcome:
            return self._records(
                await self.store.find_by_title_or_author(title, author),
                f"No books found with title '{title}' or author '{author}'.",
            )

        return await self._guarded("find_by_title_or_author", run)


# ---------------------------------------------------------------------------
# FastAPI dependency factory
# ---------------------------------------------------------------------------

def get_book_catalog(
    store: BookRepository = Depends(get_book_repository),
) -> BookCatalog:
    """FastAPI dependency for BookCatalog."""
    return BookCatalog(store)
