# ABOUTME: Public API for the Lendery catalog store layer.
# ABOUTME: Exports the in-memory catalog, the durable store, and data types.

from lendery.db.catalog import (
    BookNotFoundError,
    CatalogError,
    DuplicateBookError,
    LibraryCatalog,
)
from lendery.db.connection import DEFAULT_DB_PATH
from lendery.db.mapping import BookRecord
from lendery.db.store import SEED_BOOKS, CatalogStore, SaveResult

__all__ = [
    "DEFAULT_DB_PATH",
    "SEED_BOOKS",
    "BookNotFoundError",
    "BookRecord",
    "CatalogError",
    "CatalogStore",
    "DuplicateBookError",
    "LibraryCatalog",
    "SaveResult",
]
