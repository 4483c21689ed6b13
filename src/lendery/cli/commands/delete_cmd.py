# ABOUTME: The `lendery delete` command for removing a book permanently.
# ABOUTME: Unknown ids are reported and leave the catalog untouched.

from pathlib import Path

import click
from rich.console import Console
from rich.markup import escape

from lendery.cli.options import BOOK_ID, db_option, load_store
from lendery.core.loans import delete_book
from lendery.db.catalog import BookNotFoundError

console = Console()


@click.command("delete")
@click.argument("book_id", type=BOOK_ID)
@db_option
def delete(book_id: int, db_path: Path | None) -> None:
    """Delete a book from the library catalog."""
    store = load_store(db_path)

    try:
        record = delete_book(store, book_id)
    except BookNotFoundError as exc:
        console.print(f"[red]Book {book_id} not found.[/red]")
        raise SystemExit(1) from exc

    console.print(f"Deleted [bold]{escape(record.title)}[/bold].")
