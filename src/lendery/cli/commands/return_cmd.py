# ABOUTME: The `lendery return` command for taking a book back from loan.
# ABOUTME: Reports late days and the fine owed, then saves the catalog.

from pathlib import Path

import click
from rich.console import Console
from rich.markup import escape

from lendery.cli.options import BOOK_ID, build_policy, db_option, load_store, policy_options
from lendery.cli.output import return_message
from lendery.core.loans import return_book
from lendery.db.catalog import CatalogError

console = Console()


@click.command("return")
@click.argument("book_id", type=BOOK_ID)
@db_option
@policy_options
def return_command(
    book_id: int,
    db_path: Path | None,
    loan_days: int,
    fine_per_day: int,
) -> None:
    """Return a book that is on loan."""
    store = load_store(db_path)
    policy = build_policy(loan_days, fine_per_day)

    try:
        receipt = return_book(store, book_id, policy=policy)
    except CatalogError as exc:
        console.print(f"[red]{escape(str(exc))}[/red]")
        raise SystemExit(1) from exc

    style = "green" if receipt.on_time else "yellow"
    console.print(f"[{style}]{return_message(receipt)}[/{style}]")
