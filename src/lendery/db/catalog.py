# ABOUTME: In-memory book collection for the Lendery catalog.
# ABOUTME: Keeps records in insertion order and hands out new book ids.

from collections.abc import Iterable, Iterator

from lendery.db.mapping import BookRecord


class CatalogError(Exception):
    """Base class for all catalog and loan errors."""


class DuplicateBookError(CatalogError):
    """Raised when attempting to add a book whose id is already in the catalog."""


class BookNotFoundError(CatalogError):
    """Raised when no book in the catalog has the requested id."""

    def __init__(self, book_id: int) -> None:
        super().__init__(f"Book with id {book_id} not found")
        self.book_id = book_id


class LibraryCatalog:
    """An ordered collection of BookRecords keyed by id.

    Iteration follows insertion (or load) order and can be repeated; each
    ``iter()`` call walks the live collection from the start.
    """

    def __init__(self, books: Iterable[BookRecord] = ()) -> None:
        self._books: list[BookRecord] = []
        for book in books:
            self.add(book)

    def __iter__(self) -> Iterator[BookRecord]:
        return iter(self._books)

    def __len__(self) -> int:
        return len(self._books)

    def __repr__(self) -> str:
        return f"LibraryCatalog({len(self._books)} book(s))"

    def get_by_id(self, book_id: int) -> BookRecord | None:
        """Retrieve a book by its id."""
        for book in self._books:
            if book.id == book_id:
                return book
        return None

    def next_id(self) -> int:
        """Return one more than the highest id present, or 1 for an empty catalog."""
        return max((book.id for book in self._books), default=0) + 1

    def add(self, record: BookRecord) -> None:
        """Append a record to the end of the catalog.

        Raises:
            DuplicateBookError: If a book with the same id is already present.
        """
        if self.get_by_id(record.id) is not None:
            raise DuplicateBookError(f"Book with id {record.id} already exists")
        self._books.append(record)

    def remove(self, book_id: int) -> BookRecord:
        """Remove a book from the catalog and return it.

        Raises:
            BookNotFoundError: If the book_id does not exist.
        """
        for index, book in enumerate(self._books):
            if book.id == book_id:
                return self._books.pop(index)
        raise BookNotFoundError(book_id)
