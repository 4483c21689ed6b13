# ABOUTME: Loan operations for the Lendery catalog: add, list, search, issue, return, delete.
# ABOUTME: Every mutating operation persists the whole catalog through its store.

import logging
import re
from dataclasses import dataclass
from datetime import date
from enum import Enum

from lendery.core.policy import DEFAULT_POLICY, LoanPolicy
from lendery.db.catalog import BookNotFoundError, CatalogError, LibraryCatalog
from lendery.db.mapping import BookRecord
from lendery.db.store import CatalogStore

logger = logging.getLogger(__name__)

_BOOK_ID_PATTERN = re.compile(r"[+-]?[0-9]+")


class InvalidInputError(CatalogError):
    """Raised for an unparsable book id or a malformed query."""


class AlreadyOnLoanError(CatalogError):
    """Raised when issuing a book that is already on loan."""

    def __init__(self, record: BookRecord) -> None:
        super().__init__(f"Book {record.id} is already issued to {record.borrower}")
        self.book_id = record.id


class NotOnLoanError(CatalogError):
    """Raised when returning a book that is not on loan."""

    def __init__(self, record: BookRecord) -> None:
        super().__init__(f"Book {record.id} is not issued")
        self.book_id = record.id


class SearchMode(Enum):
    """Which field a search query is matched against."""

    ID = "id"
    TITLE = "title"
    AUTHOR = "author"


@dataclass
class ReturnReceipt:
    """Outcome of returning a book."""

    book_id: int
    late_days: int
    fine: int

    @property
    def on_time(self) -> bool:
        return self.late_days == 0


def parse_book_id(text: str) -> int:
    """Parse a book id typed by a user.

    Accepts an optional sign followed by ASCII digits, ignoring surrounding
    whitespace.

    Raises:
        InvalidInputError: If the text is not an integer.
    """
    cleaned = text.strip()
    if not _BOOK_ID_PATTERN.fullmatch(cleaned):
        raise InvalidInputError(f"Invalid ID: {text!r}")
    return int(cleaned)


def find_book(store: CatalogStore, book_id: int) -> BookRecord:
    """Look up a book by id.

    Raises:
        BookNotFoundError: If no book has that id.
    """
    record = store.catalog.get_by_id(book_id)
    if record is None:
        raise BookNotFoundError(book_id)
    return record


def add_book(store: CatalogStore, title: str, author: str) -> int:
    """Add an available book to the catalog and persist it.

    Returns:
        The id assigned to the new book.
    """
    book_id = store.next_id()
    store.catalog.add(BookRecord(id=book_id, title=title, author=author))
    store.save()
    logger.debug("Added book %d: %s by %s", book_id, title, author)
    return book_id


def list_books(store: CatalogStore) -> LibraryCatalog | None:
    """Return the catalog for iteration, or None if it holds no books."""
    if not len(store.catalog):
        return None
    return store.catalog


def search_books(store: CatalogStore, mode: SearchMode | str, query: str) -> list[BookRecord]:
    """Search the catalog by id, title, or author.

    Title and author searches are case-insensitive substring matches over all
    books, in catalog order. An id search returns at most one book.

    Args:
        store: The catalog store to search.
        mode: A SearchMode or its string value ("id", "title", "author").
        query: The search text; surrounding whitespace is ignored.

    Returns:
        Matching books; an empty list when nothing matches.

    Raises:
        InvalidInputError: If the mode is unknown or an id query is not an integer.
    """
    try:
        mode = SearchMode(mode)
    except ValueError as exc:
        raise InvalidInputError(f"Unknown search mode: {mode!r}") from exc

    if mode is SearchMode.ID:
        record = store.catalog.get_by_id(parse_book_id(query))
        return [record] if record is not None else []

    needle = query.strip().lower()
    if mode is SearchMode.TITLE:
        return [book for book in store.catalog if needle in book.title.lower()]
    return [book for book in store.catalog if needle in book.author.lower()]


def issue_book(
    store: CatalogStore,
    book_id: int,
    borrower: str,
    *,
    policy: LoanPolicy = DEFAULT_POLICY,
    today: date | None = None,
) -> date:
    """Lend a book to a borrower and persist the catalog.

    Returns:
        The loan's due date.

    Raises:
        InvalidInputError: If the borrower name is blank.
        BookNotFoundError: If no book has that id.
        AlreadyOnLoanError: If the book is already on loan.
    """
    record = find_book(store, book_id)
    if not record.available:
        raise AlreadyOnLoanError(record)

    name = borrower.strip()
    if not name:
        raise InvalidInputError("Borrower name must not be empty")

    due = policy.due_date(today or date.today())
    record.available = False
    record.borrower = name
    record.due_date = due
    store.save()
    logger.debug("Issued book %d to %s, due %s", book_id, name, due.isoformat())
    return due


def return_book(
    store: CatalogStore,
    book_id: int,
    *,
    policy: LoanPolicy = DEFAULT_POLICY,
    today: date | None = None,
) -> ReturnReceipt:
    """Take a book back from loan, compute any fine, and persist the catalog.

    Raises:
        BookNotFoundError: If no book has that id.
        NotOnLoanError: If the book is not on loan.
    """
    record = find_book(store, book_id)
    if record.available:
        raise NotOnLoanError(record)

    assert record.due_date is not None
    late_days = policy.late_days(record.due_date, today or date.today())

    record.available = True
    record.borrower = ""
    record.due_date = None
    store.save()

    receipt = ReturnReceipt(book_id=book_id, late_days=late_days, fine=policy.fine(late_days))
    logger.debug("Returned book %d, %d day(s) late, fine %d", book_id, late_days, receipt.fine)
    return receipt


def delete_book(store: CatalogStore, book_id: int) -> BookRecord:
    """Remove a book permanently and persist the catalog.

    Nothing is saved when the id is unknown.

    Raises:
        BookNotFoundError: If no book has that id.
    """
    record = store.catalog.remove(book_id)
    store.save()
    logger.debug("Deleted book %d", book_id)
    return record
