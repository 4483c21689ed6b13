# ABOUTME: Console rendering helpers shared by Lendery commands and the menu.
# ABOUTME: Prints catalog lines verbatim and formats loan outcome messages.

from collections.abc import Iterable

from rich.console import Console

from lendery.core.export import format_record
from lendery.core.loans import ReturnReceipt
from lendery.db.mapping import BookRecord


def print_records(console: Console, records: Iterable[BookRecord]) -> int:
    """Print one line per book and return how many were printed.

    Lines are printed without markup or wrapping so they match the export
    format exactly.
    """
    count = 0
    for record in records:
        console.print(format_record(record), markup=False, highlight=False, soft_wrap=True)
        count += 1
    return count


def return_message(receipt: ReturnReceipt) -> str:
    """Human-readable summary of a return."""
    if receipt.on_time:
        return "Book returned on time. Thank you!"
    return f"Book returned. Late by {receipt.late_days} day(s). Fine: {receipt.fine}"
