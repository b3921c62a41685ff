"""Catalog operation table.

Maps each public operation name to its BookCatalog handler. The HTTP router
dispatches through this table; anything else that needs to drive the
catalog by name (scripts, other transports) can reuse it.
"""

from patterns.operation_registry import OperationRegistry
from verticals.catalog.service import BookCatalog

catalog_operations = OperationRegistry()

_OPERATIONS = [
    ("list_all", "List every book", BookCatalog.list_all, []),
    ("get_by_id", "Get one book by id", BookCatalog.get_by_id, ["book_id"]),
    ("create", "Create a book", BookCatalog.create, ["record"]),
    ("update", "Overwrite a book's fields", BookCatalog.update, ["book_id", "record"]),
    ("delete", "Delete a book by id", BookCatalog.delete, ["book_id"]),
    ("find_by_author", "Books by exact author", BookCatalog.find_by_author, ["author"]),
    ("find_by_genre", "Books by exact genre", BookCatalog.find_by_genre, ["genre"]),
    ("search_by_title", "Books whose title contains a fragment",
     BookCatalog.search_by_title, ["title"]),
    ("find_by_year_before", "Books published before a year",
     BookCatalog.find_by_year_before, ["year"]),
    ("count_by_author", "Count books by exact author", BookCatalog.count_by_author, ["author"]),
    ("list_sorted_by_year_desc", "Every book, newest first",
     BookCatalog.list_sorted_by_year_desc, []),
    ("find_by_title_or_author", "Books matching a title fragment or an author",
     BookCatalog.find_by_title_or_author, ["title", "author"]),
]

for _name, _description, _handler, _parameters in _OPERATIONS:
    catalog_operations.register(
        name=_name,
        description=_description,
        handler=_handler,
        parameters=_parameters,
    )
