# ABOUTME: The `lendery ls` command for listing cataloged books.
# ABOUTME: Prints one line per book in catalog order.

from pathlib import Path

import click
from rich.console import Console

from lendery.cli.options import db_option, load_store
from lendery.cli.output import print_records
from lendery.core.loans import list_books

console = Console()


@click.command("ls")
@db_option
@click.option(
    "--on-loan",
    "on_loan_only",
    is_flag=True,
    default=False,
    help="Only show books that are currently issued.",
)
def ls(db_path: Path | None, on_loan_only: bool) -> None:
    """List all books in the library catalog."""
    store = load_store(db_path)
    records = list_books(store)

    if records is None:
        console.print("[yellow]No books in library.[/yellow]")
        return

    shown = print_records(
        console,
        (record for record in records if record.on_loan) if on_loan_only else records,
    )
    console.print(f"\n[dim]{shown} book(s)[/dim]")
