# ABOUTME: The `lendery export` command for writing the catalog to a text file.
# ABOUTME: One line per book, the same format `lendery ls` prints.

from pathlib import Path

import click
from rich.console import Console
from rich.markup import escape

from lendery.cli.options import db_option, load_store
from lendery.core.export import DEFAULT_EXPORT_PATH, ExportError, export_books

console = Console()


@click.command("export")
@db_option
@click.option(
    "-o", "--output",
    "output_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=DEFAULT_EXPORT_PATH,
    show_default=True,
    help="File to write the book list to.",
)
def export(db_path: Path | None, output_path: Path) -> None:
    """Export the book list as plain text."""
    store = load_store(db_path)

    try:
        count = export_books(store, output_path)
    except ExportError as exc:
        console.print(f"[red]{escape(str(exc))}[/red]")
        raise SystemExit(1) from exc

    console.print(f"[green]Exported {count} book(s) to {escape(str(output_path))}[/green]")
