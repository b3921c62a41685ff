"""Catalog API router — CRUD + lookups under /api/books.

Every endpoint dispatches through the catalog operation table and turns the
resulting Outcome into a response:
- SUCCESS → 200 (201 for create) with the data
- NOT_FOUND → 404, BAD_INPUT → 400, INTERNAL_ERROR → 500, each with a
  ``detail`` message

Static paths are declared before ``/{book_id}`` so they are matched first.
"""

from fastapi import APIRouter, Depends
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse

from patterns.outcome import Outcome, OutcomeKind
from verticals.catalog.models.schemas import BookRecord, ErrorResponse, MessageResponse
from verticals.catalog.operations import catalog_operations
from verticals.catalog.service import BookCatalog, get_book_catalog

router = APIRouter()

_STATUS = {
    OutcomeKind.SUCCESS: 200,
    OutcomeKind.BAD_INPUT: 400,
    OutcomeKind.NOT_FOUND: 404,
    OutcomeKind.INTERNAL_ERROR: 500,
}

_ERRORS = {
    400: {"model": ErrorResponse},
    404: {"model": ErrorResponse},
    500: {"model": ErrorResponse},
}


def to_response(outcome: Outcome, success_status: int = 200) -> JSONResponse:
    """Map an Outcome to the HTTP response for it."""
    if outcome.ok:
        return JSONResponse(status_code=success_status, content=jsonable_encoder(outcome.data))
    return JSONResponse(
        status_code=_STATUS[outcome.kind],
        content={"detail": outcome.message},
    )


async def dispatch(name: str, catalog: BookCatalog, **kwargs) -> Outcome:
    return await catalog_operations.invoke(name, catalog, **kwargs)


# ============================================================================
# Listing
# ============================================================================

@router.get("", response_model=list[BookRecord], responses=_ERRORS)
async def list_books(catalog: BookCatalog = Depends(get_book_catalog)):
    """List every book in the catalog."""
    return to_response(await dispatch("list_all", catalog))


@router.get("/sorted", response_model=list[BookRecord], responses=_ERRORS)
async def list_books_sorted(catalog: BookCatalog = Depends(get_book_catalog)):
    """List every book, newest publication year first."""
    return to_response(await dispatch("list_sorted_by_year_desc", catalog))


# ============================================================================
# Lookups
# ============================================================================

@router.get("/by-author/{author}", response_model=list[BookRecord], responses=_ERRORS)
async def get_books_by_author(author: str, catalog: BookCatalog = Depends(get_book_catalog)):
    """Books by an exact author name."""
    return to_response(await dispatch("find_by_author", catalog, author=author))


@router.get("/by-genre/{genre}", response_model=list[BookRecord], responses=_ERRORS)
async def get_books_by_genre(genre: str, catalog: BookCatalog = Depends(get_book_catalog)):
    """Books in an exact genre."""
    return to_response(await dispatch("find_by_genre", catalog, genre=genre))


@router.get("/search/title", response_model=list[BookRecord], responses=_ERRORS)
async def search_books_by_title(title: str, catalog: BookCatalog = Depends(get_book_catalog)):
    """Books whose title contains ``title``, ignoring case."""
    return to_response(await dispatch("search_by_title", catalog, title=title))


@router.get("/search/title-or-author", response_model=list[BookRecord], responses=_ERRORS)
async def search_books_by_title_or_author(
    title: str,
    author: str,
    catalog: BookCatalog = Depends(get_book_catalog),
):
    """Books whose title contains ``title`` or whose author is ``author``."""
    return to_response(
        await dispatch("find_by_title_or_author", catalog, title=title, author=author)
    )


@router.get("/before/{year}", response_model=list[BookRecord], responses=_ERRORS)
async def get_books_before_year(year: str, catalog: BookCatalog = Depends(get_book_catalog)):
    """Books published before ``year``. The year must be all digits."""
    return to_response(await dispatch("find_by_year_before", catalog, year=year))


@router.get("/count/author/{author}", response_model=int, responses=_ERRORS)
async def count_books_by_author(author: str, catalog: BookCatalog = Depends(get_book_catalog)):
    """Number of books by an exact author name."""
    return to_response(await dispatch("count_by_author", catalog, author=author))


# ============================================================================
# Single book
# ============================================================================

@router.get("/{book_id}", response_model=BookRecord, responses=_ERRORS)
async def get_book(book_id: int, catalog: BookCatalog = Depends(get_book_catalog)):
    """Get a single book."""
    return to_response(await dispatch("get_by_id", catalog, book_id=book_id))


@router.post("", status_code=201, response_model=BookRecord, responses=_ERRORS)
async def create_book(record: BookRecord, catalog: BookCatalog = Depends(get_book_catalog)):
    """Add a new book. The id is assigned by the database."""
    return to_response(await dispatch("create", catalog, record=record), success_status=201)


@router.put("/{book_id}", response_model=BookRecord, responses=_ERRORS)
async def update_book(
    book_id: int,
    record: BookRecord,
    catalog: BookCatalog = Depends(get_book_catalog),
):
    """Overwrite a book's title, author, year and genre."""
    return to_response(await dispatch("update", catalog, book_id=book_id, record=record))


@router.delete("/{book_id}", response_model=MessageResponse, responses=_ERRORS)
async def delete_book(book_id: int, catalog: BookCatalog = Depends(get_book_catalog)):
    """Remove a book from the catalog."""
    outcome = await dispatch("delete", catalog, book_id=book_id)
    if not outcome.ok:
        return to_response(outcome)
    if not outcome.data:
        return to_response(Outcome.not_found(f"Book with id {book_id} not found."))
    return MessageResponse(message=f"Book with id {book_id} deleted.")
