# ABOUTME: CLI package for Lendery, built on Click.
# ABOUTME: Defines the root command group, logging setup, and registers subcommands.

import logging

import click
from rich.console import Console
from rich.logging import RichHandler

from lendery.cli.commands import (
    add_cmd,
    delete_cmd,
    export_cmd,
    issue_cmd,
    ls_cmd,
    menu_cmd,
    return_cmd,
    search_cmd,
)


def configure_logging(verbose: bool) -> None:
    """Route log records to stderr through Rich; DEBUG for lendery when verbose."""
    logging.basicConfig(
        level=logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_time=False, show_path=False)],
    )
    logging.getLogger("lendery").setLevel(logging.DEBUG if verbose else logging.WARNING)


@click.group(invoke_without_command=True)
@click.version_option(package_name="lendery")
@click.option("-v", "--verbose", is_flag=True, default=False, help="Show debug logging.")
@click.pass_context
def cli(ctx: click.Context, verbose: bool) -> None:
    """Lendery - a console library catalog with loans and late fines."""
    configure_logging(verbose)

    if ctx.invoked_subcommand is None:
        menu = menu_cmd.menu
        with menu.make_context(menu.name, [], parent=ctx) as menu_ctx:
            menu.invoke(menu_ctx)


cli.add_command(add_cmd.add)
cli.add_command(ls_cmd.ls)
cli.add_command(search_cmd.search)
cli.add_command(issue_cmd.issue)
cli.add_command(return_cmd.return_command)
cli.add_command(delete_cmd.delete)
cli.add_command(export_cmd.export)
cli.add_command(menu_cmd.menu)
