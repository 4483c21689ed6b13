# ABOUTME: The `lendery issue` command for lending a book to a borrower.
# ABOUTME: Sets the borrower and due date, then saves the catalog.

from pathlib import Path

import click
from rich.console import Console
from rich.markup import escape

from lendery.cli.options import BOOK_ID, build_policy, db_option, load_store, policy_options
from lendery.core.loans import issue_book
from lendery.db.catalog import CatalogError

console = Console()


@click.command("issue")
@click.argument("book_id", type=BOOK_ID)
@click.argument("borrower")
@db_option
@policy_options
def issue(
    book_id: int,
    borrower: str,
    db_path: Path | None,
    loan_days: int,
    fine_per_day: int,
) -> None:
    """Issue a book to a borrower."""
    store = load_store(db_path)
    policy = build_policy(loan_days, fine_per_day)

    try:
        due = issue_book(store, book_id, borrower, policy=policy)
    except CatalogError as exc:
        console.print(f"[red]{escape(str(exc))}[/red]")
        raise SystemExit(1) from exc

    console.print(
        f"[green]Book issued to {escape(borrower.strip())}. Due date: {due.isoformat()}[/green]"
    )
