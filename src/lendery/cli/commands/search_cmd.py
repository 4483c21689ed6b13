# ABOUTME: The `lendery search` command for finding books by id, title, or author.
# ABOUTME: Title and author searches are case-insensitive substring matches.

from pathlib import Path

import click
from rich.console import Console
from rich.markup import escape

from lendery.cli.options import db_option, load_store
from lendery.cli.output import print_records
from lendery.core.loans import InvalidInputError, SearchMode, search_books

console = Console()


@click.command("search")
@click.argument("mode", type=click.Choice([mode.value for mode in SearchMode]))
@click.argument("query")
@db_option
def search(mode: str, query: str, db_path: Path | None) -> None:
    """Search the library catalog by id, title, or author."""
    store = load_store(db_path)

    try:
        results = search_books(store, mode, query)
    except InvalidInputError as exc:
        console.print(f"[red]{escape(str(exc))}[/red]")
        raise SystemExit(1) from exc

    if not results:
        missing = "Book not found." if mode == SearchMode.ID.value else "No matching books."
        console.print(f"[yellow]{missing}[/yellow]")
        return

    print_records(console, results)
    console.print(f"\n[dim]{len(results)} result(s)[/dim]")
