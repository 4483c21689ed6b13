# ABOUTME: The `lendery add` command for cataloging a new book.
# ABOUTME: Assigns the next free id and saves the catalog.

from pathlib import Path

import click
from rich.console import Console

from lendery.cli.options import db_option, load_store
from lendery.core.loans import add_book

console = Console()


@click.command("add")
@click.argument("title")
@click.argument("author")
@db_option
def add(title: str, author: str, db_path: Path | None) -> None:
    """Add a book to the library catalog."""
    store = load_store(db_path)
    book_id = add_book(store, title.strip(), author.strip())
    console.print(f"[green]Book added with ID {book_id}[/green]")
