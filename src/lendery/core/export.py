# ABOUTME: Plain-text rendering and export of the Lendery catalog.
# ABOUTME: One line per book, the same rendering used when listing books.

import logging
from pathlib import Path
from typing import TextIO

from lendery.db.catalog import CatalogError
from lendery.db.mapping import BookRecord
from lendery.db.store import CatalogStore

logger = logging.getLogger(__name__)

DEFAULT_EXPORT_PATH = Path("books_export.txt")


class ExportError(CatalogError):
    """Raised when the export destination cannot be written."""


def format_record(record: BookRecord) -> str:
    """Render a book as a single human-readable line."""
    line = (
        f"ID: {record.id} | Title: {record.title} | Author: {record.author} "
        f"| Available: {'Yes' if record.available else 'No'}"
    )
    if not record.available and record.due_date is not None:
        line += f" | Borrower: {record.borrower} | Due: {record.due_date.isoformat()}"
    return line


def write_records(store: CatalogStore, stream: TextIO) -> int:
    """Write every book in catalog order to an open text stream."""
    count = 0
    for record in store.catalog:
        stream.write(format_record(record) + "\n")
        count += 1
    return count


def export_books(store: CatalogStore, destination: Path | TextIO = DEFAULT_EXPORT_PATH) -> int:
    """Export the catalog as plain text, one line per book.

    Args:
        store: The catalog store to export. It is never modified.
        destination: A file path (overwritten) or an open text stream.

    Returns:
        The number of lines written.

    Raises:
        ExportError: If the destination cannot be written.
    """
    try:
        if isinstance(destination, Path):
            with destination.open("w", encoding="utf-8") as handle:
                count = write_records(store, handle)
        else:
            count = write_records(store, destination)
    except (OSError, ValueError) as exc:
        raise ExportError(f"Failed to export: {exc}") from exc

    logger.debug("Exported %d book(s) to %s", count, destination)
    return count
