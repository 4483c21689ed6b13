# ABOUTME: Unit tests for the in-memory LibraryCatalog collection.
# ABOUTME: Validates id assignment, ordering, lookup, and removal.

import pytest

from lendery.db.catalog import BookNotFoundError, DuplicateBookError, LibraryCatalog
from lendery.db.mapping import BookRecord


def _catalog(*ids: int) -> LibraryCatalog:
    return LibraryCatalog(BookRecord(id=i, title=f"Book {i}", author="Anon") for i in ids)


class TestNextId:
    """Tests for LibraryCatalog.next_id."""

    def test_empty_catalog_starts_at_one(self) -> None:
        assert LibraryCatalog().next_id() == 1

    def test_one_more_than_highest_id(self) -> None:
        assert _catalog(4, 9, 2).next_id() == 10

    def test_gap_left_by_removal_is_not_filled(self) -> None:
        """Removing a middle book does not make its id available again."""
        catalog = _catalog(1, 2, 3)
        catalog.remove(2)
        assert catalog.next_id() == 4


class TestOrderAndLookup:
    """Iteration order and get_by_id."""

    def test_iteration_follows_insertion_order(self) -> None:
        catalog = _catalog(5, 1, 3)
        assert [book.id for book in catalog] == [5, 1, 3]

    def test_iteration_is_restartable(self) -> None:
        catalog = _catalog(1, 2)
        assert [book.id for book in catalog] == [book.id for book in catalog]

    def test_len(self) -> None:
        assert len(_catalog(1, 2, 3)) == 3
        assert len(LibraryCatalog()) == 0

    def test_get_by_id(self) -> None:
        record = _catalog(1, 2).get_by_id(2)
        assert record is not None
        assert record.title == "Book 2"

    def test_get_by_id_not_found(self) -> None:
        assert _catalog(1).get_by_id(999) is None


class TestAddRemove:
    """Tests for add and remove."""

    def test_add_appends(self) -> None:
        catalog = _catalog(1)
        catalog.add(BookRecord(id=2, title="New", author="Anon"))
        assert [book.id for book in catalog] == [1, 2]

    def test_duplicate_id_raises(self) -> None:
        catalog = _catalog(1)
        with pytest.raises(DuplicateBookError):
            catalog.add(BookRecord(id=1, title="Again", author="Anon"))
        assert len(catalog) == 1

    def test_remove_returns_record(self) -> None:
        catalog = _catalog(1, 2)
        removed = catalog.remove(1)
        assert removed.id == 1
        assert [book.id for book in catalog] == [2]

    def test_remove_nonexistent_raises(self) -> None:
        catalog = _catalog(1, 2)
        with pytest.raises(BookNotFoundError, match="not found") as excinfo:
            catalog.remove(999)
        assert excinfo.value.book_id == 999
        assert len(catalog) == 2
