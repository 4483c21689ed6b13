# ABOUTME: The `lendery menu` command for the interactive numbered menu.
# ABOUTME: Also runs when `lendery` is invoked without a subcommand.

from pathlib import Path

import click
from rich.console import Console

from lendery.cli.menu import MenuSession
from lendery.cli.options import build_policy, db_option, load_store, policy_options
from lendery.core.export import DEFAULT_EXPORT_PATH

console = Console()


@click.command("menu")
@db_option
@policy_options
@click.option(
    "-o", "--output",
    "output_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=DEFAULT_EXPORT_PATH,
    show_default=True,
    help="File the Export menu entry writes to.",
)
def menu(db_path: Path | None, loan_days: int, fine_per_day: int, output_path: Path) -> None:
    """Manage the library through an interactive menu."""
    store = load_store(db_path)
    session = MenuSession(
        store,
        console=console,
        policy=build_policy(loan_days, fine_per_day),
        export_path=output_path,
    )
    session.run()
