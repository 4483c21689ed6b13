# ABOUTME: Converts between the BookRecord dataclass and SQLite row dictionaries.
# ABOUTME: Handles ISO-8601 due dates and rejects rows that break the loan invariant.

from dataclasses import dataclass
from datetime import date
from typing import Any


@dataclass
class BookRecord:
    """A cataloged book and its current loan state.

    A book on the shelf has ``available=True``, an empty borrower and no due
    date. A book on loan has all three the other way round.
    """

    id: int
    title: str
    author: str
    available: bool = True
    borrower: str = ""
    due_date: date | None = None

    @property
    def on_loan(self) -> bool:
        """Convenience inverse of ``available``."""
        return not self.available


def record_to_row(record: BookRecord, position: int) -> dict[str, Any]:
    """Convert a BookRecord to a dict suitable for INSERT.

    ``position`` is the record's index in the catalog, stored so that a reload
    reproduces the catalog order.
    """
    return {
        "id": record.id,
        "position": position,
        "title": record.title,
        "author": record.author,
        "available": 1 if record.available else 0,
        "borrower": record.borrower,
        "due_date": record.due_date.isoformat() if record.due_date else None,
    }


def row_to_record(row: Any) -> BookRecord:
    """Convert a database row (dict-like) back to a BookRecord.

    Raises:
        ValueError: If a column holds a value of the wrong kind, or the loan
            fields contradict each other.
    """
    book_id = row["id"]
    if not isinstance(book_id, int) or book_id < 1:
        raise ValueError(f"Invalid book id: {book_id!r}")

    title = row["title"]
    author = row["author"]
    borrower = row["borrower"]
    for name, value in (("title", title), ("author", author), ("borrower", borrower)):
        if not isinstance(value, str):
            raise ValueError(f"Book {book_id}: {name} is not text")

    if row["available"] not in (0, 1):
        raise ValueError(f"Book {book_id}: invalid availability {row['available']!r}")
    available = bool(row["available"])

    raw_due = row["due_date"]
    due_date = date.fromisoformat(raw_due) if raw_due else None

    if available and (borrower or due_date is not None):
        raise ValueError(f"Book {book_id} is available but has loan details")
    if not available and (not borrower or due_date is None):
        raise ValueError(f"Book {book_id} is on loan without a borrower or due date")

    return BookRecord(
        id=book_id,
        title=title,
        author=author,
        available=available,
        borrower=borrower,
        due_date=due_date,
    )
