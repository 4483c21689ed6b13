# ABOUTME: Shared pytest fixtures for Lendery tests.
# ABOUTME: Provides temporary catalog stores: empty, seeded, and with a book on loan.

from datetime import date, timedelta
from pathlib import Path

import pytest

from lendery.db.catalog import LibraryCatalog
from lendery.db.mapping import BookRecord
from lendery.db.store import CatalogStore

ISSUE_DAY = date(2024, 3, 1)


@pytest.fixture
def db_path(tmp_path: Path) -> Path:
    """Location for a temporary catalog store (not created yet)."""
    return tmp_path / "library.db"


@pytest.fixture
def empty_store(db_path: Path) -> CatalogStore:
    """A store whose file exists but holds no books."""
    store = CatalogStore(db_path)
    store.save()
    return store


@pytest.fixture
def seeded_store(db_path: Path) -> CatalogStore:
    """A store loaded for the first time, holding the three seed books."""
    store = CatalogStore(db_path)
    store.load()
    return store


@pytest.fixture
def loaned_store(db_path: Path) -> CatalogStore:
    """A store with one book on the shelf and one issued on ISSUE_DAY."""
    store = CatalogStore(db_path)
    store.catalog = LibraryCatalog([
        BookRecord(id=1, title="Dune", author="Frank Herbert"),
        BookRecord(
            id=2,
            title="The Name of the Rose",
            author="Umberto Eco",
            available=False,
            borrower="Alice",
            due_date=ISSUE_DAY + timedelta(days=7),
        ),
    ])
    store.save()
    return store
