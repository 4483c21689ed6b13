# ABOUTME: Shared Click options for Lendery CLI commands.
# ABOUTME: Provides reusable decorators for the store path, loan policy flags, and book ids.

from collections.abc import Callable
from pathlib import Path
from typing import Any

import click

from lendery.core.loans import InvalidInputError, parse_book_id
from lendery.core.policy import DEFAULT_FINE_PER_DAY, DEFAULT_LOAN_PERIOD_DAYS, LoanPolicy
from lendery.db.connection import DEFAULT_DB_PATH
from lendery.db.store import CatalogStore

db_option = click.option(
    "--db",
    "db_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    envvar="LENDERY_DB",
    help=f"Path to library catalog (default: {DEFAULT_DB_PATH})",
)

loan_days_option = click.option(
    "--loan-days",
    type=click.IntRange(min=1),
    default=DEFAULT_LOAN_PERIOD_DAYS,
    show_default=True,
    envvar="LENDERY_LOAN_DAYS",
    help="Length of a loan in days.",
)

fine_option = click.option(
    "--fine-per-day",
    type=click.IntRange(min=0),
    default=DEFAULT_FINE_PER_DAY,
    show_default=True,
    envvar="LENDERY_FINE_PER_DAY",
    help="Fine charged for each day a book is returned late.",
)


class BookIdType(click.ParamType):
    """Click parameter type that parses book ids the same way the menu does."""

    name = "book_id"

    def convert(self, value: Any, param: click.Parameter | None, ctx: click.Context | None) -> int:
        if isinstance(value, int):
            return value
        try:
            return parse_book_id(value)
        except InvalidInputError as exc:
            self.fail(str(exc), param, ctx)


BOOK_ID = BookIdType()


def policy_options(func: Callable[..., Any]) -> Callable[..., Any]:
    """Apply both loan policy options to a command."""
    return loan_days_option(fine_option(func))


def build_policy(loan_days: int, fine_per_day: int) -> LoanPolicy:
    """Turn parsed policy options into a LoanPolicy."""
    return LoanPolicy(loan_period_days=loan_days, fine_per_day=fine_per_day)


def load_store(db_path: Path | None) -> CatalogStore:
    """Open the catalog store at db_path (or the default) and load it."""
    store = CatalogStore(db_path or DEFAULT_DB_PATH)
    store.load()
    return store
