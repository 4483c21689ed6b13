# ABOUTME: Public API for Lendery loan operations.
# ABOUTME: Exports the operations, loan policy, and the errors they raise.

from lendery.core.export import DEFAULT_EXPORT_PATH, ExportError, export_books, format_record
from lendery.core.loans import (
    AlreadyOnLoanError,
    InvalidInputError,
    NotOnLoanError,
    ReturnReceipt,
    SearchMode,
    add_book,
    delete_book,
    find_book,
    issue_book,
    list_books,
    parse_book_id,
    return_book,
    search_books,
)
from lendery.core.policy import DEFAULT_POLICY, LoanPolicy

__all__ = [
    "DEFAULT_EXPORT_PATH",
    "DEFAULT_POLICY",
    "AlreadyOnLoanError",
    "ExportError",
    "InvalidInputError",
    "LoanPolicy",
    "NotOnLoanError",
    "ReturnReceipt",
    "SearchMode",
    "add_book",
    "delete_book",
    "export_books",
    "find_book",
    "format_record",
    "issue_book",
    "list_books",
    "parse_book_id",
    "return_book",
    "search_books",
]
