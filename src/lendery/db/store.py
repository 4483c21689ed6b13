# ABOUTME: Durable catalog store: loads, seeds, and saves the whole Lendery catalog.
# ABOUTME: Persistence failures are logged and reported, never raised to callers.

import logging
import sqlite3
from dataclasses import dataclass
from pathlib import Path

from lendery.db.catalog import DuplicateBookError, LibraryCatalog
from lendery.db.connection import DEFAULT_DB_PATH, create_store, open_store_readonly
from lendery.db.mapping import BookRecord, record_to_row, row_to_record
from lendery.db.schema import INSERT_BOOK, SELECT_BOOKS

logger = logging.getLogger(__name__)

SEED_BOOKS: tuple[tuple[str, str], ...] = (
    ("Introduction to Algorithms", "Cormen"),
    ("Effective Java", "Joshua Bloch"),
    ("Clean Code", "Robert C. Martin"),
)

# Anything that can go wrong while reading a store file that exists
_LOAD_ERRORS = (
    sqlite3.Error,
    OSError,
    ValueError,
    TypeError,
    KeyError,
    IndexError,
    DuplicateBookError,
)


@dataclass
class SaveResult:
    """Outcome of writing the catalog to disk."""

    success: bool
    error: str | None = None


def seed_catalog() -> LibraryCatalog:
    """Build the default catalog used on first run."""
    return LibraryCatalog(
        BookRecord(id=book_id, title=title, author=author)
        for book_id, (title, author) in enumerate(SEED_BOOKS, start=1)
    )


class CatalogStore:
    """Owns the in-memory catalog and the file it is persisted to.

    The catalog is read once with ``load()`` and written back in full with
    ``save()``. Neither method raises: a failed load yields an empty catalog
    and a failed save leaves the in-memory catalog as the source of truth.
    """

    def __init__(self, path: Path | None = None) -> None:
        self.path = path or DEFAULT_DB_PATH
        self.catalog = LibraryCatalog()
        self.load_error: str | None = None

    def load(self) -> LibraryCatalog:
        """Read the catalog from disk, seeding it on first run.

        Returns:
            The loaded catalog. It is empty if the file was unreadable.
        """
        self.load_error = None

        try:
            first_run = not self.path.exists()
            if not first_run:
                self.catalog = self._read()
        except _LOAD_ERRORS as exc:
            logger.warning("Failed to load data. Starting fresh. (%s)", exc)
            self.load_error = str(exc)
            self.catalog = LibraryCatalog()
            return self.catalog

        if first_run:
            logger.info("No catalog at %s, seeding %d default books", self.path, len(SEED_BOOKS))
            self.catalog = seed_catalog()
            self.save()
            return self.catalog

        logger.debug("Loaded %d book(s) from %s", len(self.catalog), self.path)
        return self.catalog

    def save(self) -> SaveResult:
        """Overwrite the store file with the current catalog."""
        rows = [record_to_row(book, position) for position, book in enumerate(self.catalog)]
        try:
            conn = create_store(self.path)
            try:
                conn.executemany(INSERT_BOOK, rows)
                conn.commit()
            finally:
                conn.close()
        except (OSError, sqlite3.Error) as exc:
            logger.error("Failed to save data: %s", exc)
            return SaveResult(success=False, error=str(exc))

        logger.debug("Saved %d book(s) to %s", len(rows), self.path)
        return SaveResult(success=True)

    def next_id(self) -> int:
        """Return the id the next added book will receive."""
        return self.catalog.next_id()

    def _read(self) -> LibraryCatalog:
        conn = open_store_readonly(self.path)
        try:
            rows = conn.execute(SELECT_BOOKS).fetchall()
        finally:
            conn.close()
        return LibraryCatalog(row_to_record(row) for row in rows)
