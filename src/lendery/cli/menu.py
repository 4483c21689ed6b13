# ABOUTME: Interactive numbered menu for the Lendery catalog.
# ABOUTME: Prompts for each operation, reports errors, and saves the catalog on exit.

import logging
from collections.abc import Callable
from pathlib import Path

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from lendery.cli.output import print_records, return_message
from lendery.core.export import DEFAULT_EXPORT_PATH, export_books
from lendery.core.loans import (
    AlreadyOnLoanError,
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
from lendery.db.catalog import CatalogError
from lendery.db.store import CatalogStore

logger = logging.getLogger(__name__)

MENU_TITLE = "Library Management System"
MENU_ITEMS = (
    ("1", "Add Book"),
    ("2", "List Books"),
    ("3", "Search Book"),
    ("4", "Issue Book"),
    ("5", "Return Book"),
    ("6", "Delete Book"),
    ("7", "Export Book List"),
    ("8", "Exit"),
)
EXIT_CHOICE = "8"

_SEARCH_CHOICES = {
    "1": (SearchMode.ID, "Enter book ID"),
    "2": (SearchMode.TITLE, "Enter title (partial allowed)"),
    "3": (SearchMode.AUTHOR, "Enter author (partial allowed)"),
}


class MenuSession:
    """Line-based interactive session over a loaded catalog store.

    Each menu choice runs one loan operation. Domain errors and bad input are
    printed and the menu is shown again; only Exit (or end of input) leaves
    the loop, after saving the catalog.
    """

    def __init__(
        self,
        store: CatalogStore,
        *,
        console: Console | None = None,
        policy: LoanPolicy = DEFAULT_POLICY,
        export_path: Path = DEFAULT_EXPORT_PATH,
    ) -> None:
        self._store = store
        self._console = console or Console()
        self._policy = policy
        self._export_path = export_path
        self._actions: dict[str, Callable[[], None]] = {
            "1": self._add,
            "2": self._list,
            "3": self._search,
            "4": self._issue,
            "5": self._return,
            "6": self._delete,
            "7": self._export,
        }

    def run(self) -> None:
        """Show the menu until the user exits, then persist the catalog."""
        while True:
            self._show_menu()
            try:
                choice = click.prompt("Choose an option", type=str).strip()
                if choice == EXIT_CHOICE:
                    break
                action = self._actions.get(choice)
                if action is None:
                    self._console.print("[yellow]Invalid option. Try again.[/yellow]")
                    continue
                action()
            except CatalogError as exc:
                self._console.print(f"[red]{escape(str(exc))}[/red]")
            except click.Abort:
                logger.debug("Input closed, leaving menu")
                break

        self._console.print("Exiting...")
        self._store.save()

    def _show_menu(self) -> None:
        table = Table(show_header=False, box=None)
        table.add_column("Choice", style="bold", justify="right")
        table.add_column("Action")
        for key, label in MENU_ITEMS:
            table.add_row(f"{key}.", label)
        self._console.print()
        self._console.print(f"[bold]--- {MENU_TITLE} ---[/bold]", soft_wrap=True)
        self._console.print(table)

    def _prompt_book_id(self, text: str) -> int:
        return parse_book_id(click.prompt(text, type=str))

    def _add(self) -> None:
        title = click.prompt("Enter book title", type=str).strip()
        author = click.prompt("Enter author name", type=str).strip()
        book_id = add_book(self._store, title, author)
        self._console.print(f"[green]Book added with ID {book_id}[/green]")

    def _list(self) -> None:
        records = list_books(self._store)
        if records is None:
            self._console.print("[yellow]No books in library.[/yellow]")
            return
        print_records(self._console, records)

    def _search(self) -> None:
        choice = click.prompt("Search by (1) ID, (2) Title, (3) Author?", type=str).strip()
        if choice not in _SEARCH_CHOICES:
            self._console.print("[yellow]Invalid choice.[/yellow]")
            return

        mode, query_prompt = _SEARCH_CHOICES[choice]
        query = click.prompt(query_prompt, type=str)
        results = search_books(self._store, mode, query)
        if not results:
            missing = "Book not found." if mode is SearchMode.ID else "No matching books."
            self._console.print(f"[yellow]{missing}[/yellow]")
            return
        print_records(self._console, results)

    def _issue(self) -> None:
        book_id = self._prompt_book_id("Enter book ID to issue")
        # Reject unknown or issued books before asking for the borrower
        record = find_book(self._store, book_id)
        if not record.available:
            raise AlreadyOnLoanError(record)

        borrower = click.prompt("Enter borrower's name", type=str)
        due = issue_book(self._store, book_id, borrower, policy=self._policy)
        self._console.print(
            f"[green]Book issued to {escape(record.borrower)}. "
            f"Due date: {due.isoformat()}[/green]"
        )

    def _return(self) -> None:
        book_id = self._prompt_book_id("Enter book ID to return")
        receipt = return_book(self._store, book_id, policy=self._policy)
        style = "green" if receipt.on_time else "yellow"
        self._console.print(f"[{style}]{return_message(receipt)}[/{style}]")

    def _delete(self) -> None:
        book_id = self._prompt_book_id("Enter book ID to delete")
        delete_book(self._store, book_id)
        self._console.print("[green]Book deleted.[/green]")

    def _export(self) -> None:
        self._console.print(f"Exporting book list to {escape(str(self._export_path))} ...")
        export_books(self._store, self._export_path)
        self._console.print("[green]Export completed.[/green]")
