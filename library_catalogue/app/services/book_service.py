"""
Business logic for the book catalogue.

``BookService`` converts between the API schemas and the records held
by the in-memory store, and owns the lending rule: a book can only be
lent while it is available, and returning a book always makes it
available again.

Lookups that find nothing return ``None`` or an empty list.  Lend and
return report their outcome through ``BookResult`` so the API layer
can tell a missing book from one that is already lent.
"""

from __future__ import annotations

import enum
import logging
from dataclasses import asdict, dataclass
from typing import Iterable, List, Optional

from library_catalogue.app.core.store import Book, get_store
from library_catalogue.app.schemas.book import BookCreate, BookRead

logger = logging.getLogger(__name__)


class BookError(str, enum.Enum):
    """Reasons a lend or return request can fail."""

    NOT_FOUND = "not_found"
    CONFLICT = "conflict"


@dataclass(frozen=True)
class BookResult:
    """Outcome of a state transition: either ``book`` or ``error`` is set."""

    book: Optional[BookRead] = None
    error: Optional[BookError] = None

    @property
    def ok(self) -> bool:
        return self.error is None


class BookService:
    """Service class for managing catalogue books."""

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------
    @classmethod
    async def get_all_books(cls) -> List[BookRead]:
        return cls._to_read_list(get_store().find_all())

    @classmethod
    async def get_book_by_id(cls, book_id: int) -> Optional[BookRead]:
        book = get_store().find_by_id(book_id)
        if book is None:
            return None
        return cls._to_read(book)

    @classmethod
    async def get_available_books(cls) -> List[BookRead]:
        return cls._to_read_list(get_store().find_available())

    @classmethod
    async def find_by_author(cls, author: str) -> List[BookRead]:
        """Books whose author contains ``author``, ignoring case."""
        return cls._to_read_list(get_store().find_by_author_containing(author))

    @classmethod
    async def find_by_title(cls, title: str) -> List[BookRead]:
        """Books whose title contains ``title``, ignoring case."""
        return cls._to_read_list(get_store().find_by_title_containing(title))

    @classmethod
    async def find_by_title_or_author(cls, text: str) -> List[BookRead]:
        """General search: title or author contains ``text``, ignoring case."""
        return cls._to_read_list(get_store().find_by_title_or_author_containing(text))

    @classmethod
    async def find_by_isbn(cls, isbn: str) -> Optional[BookRead]:
        """Return the first book carrying exactly ``isbn``.

        ISBNs are not unique in the catalogue; when several books share
        one, the earliest stored wins.
        """
        book = get_store().find_by_isbn(isbn)
        if book is None:
            return None
        return cls._to_read(book)

    @classmethod
    async def find_by_publication_year(cls, year: int) -> List[BookRead]:
        return cls._to_read_list(get_store().find_by_publication_year(year))

    @classmethod
    async def find_by_publication_year_range(cls, start: int, end: int) -> List[BookRead]:
        """Books published between ``start`` and ``end``, both inclusive."""
        return cls._to_read_list(get_store().find_by_publication_year_between(start, end))

    # ------------------------------------------------------------------
    # Writes
    # ------------------------------------------------------------------
    @classmethod
    async def create_book(cls, data: BookCreate) -> BookRead:
        """Store a new book and return it with its assigned identifier.

        Any ``id`` present in ``data`` is discarded.
        """
        saved = get_store().save(cls._to_record(data, book_id=None))
        logger.info("Created book %s '%s'", saved.id, saved.title)
        return cls._to_read(saved)

    @classmethod
    async def update_book(cls, book_id: int, data: BookCreate) -> Optional[BookRead]:
        """Replace every field of an existing book except its identifier.

        This is a full replacement: optional fields missing from
        ``data`` are stored as ``None``.  Returns ``None`` without
        touching the store if the book does not exist.
        """
        store = get_store()
        with store.lock():
            if not store.exists_by_id(book_id):
                logger.warning("Update requested for missing book %s", book_id)
                return None
            saved = store.save(cls._to_record(data, book_id=book_id))
        logger.info("Updated book %s", book_id)
        return cls._to_read(saved)

    @classmethod
    async def delete_book(cls, book_id: int) -> bool:
        """Delete a book by ID.

        Returns ``True`` if a record was deleted, ``False`` otherwise.
        """
        deleted = get_store().delete_by_id(book_id)
        if deleted:
            logger.info("Deleted book %s", book_id)
        return deleted

    # ------------------------------------------------------------------
    # Lending
    # ------------------------------------------------------------------
    @classmethod
    async def lend_book(cls, book_id: int) -> BookResult:
        """Mark an available book as lent.

        Fails with ``BookError.CONFLICT`` and leaves the book untouched
        when it is already lent.
        """
        store = get_store()
        with store.lock():
            book = store.find_by_id(book_id)
            if book is None:
                logger.warning("Lend requested for missing book %s", book_id)
                return BookResult(error=BookError.NOT_FOUND)
            if not book.available:
                logger.warning("Book %s is already lent", book_id)
                return BookResult(error=BookError.CONFLICT)
            book.available = False
            saved = store.save(book)
        logger.info("Lent book %s", book_id)
        return BookResult(book=cls._to_read(saved))

    @classmethod
    async def return_book(cls, book_id: int) -> BookResult:
        """Mark a book as available.  Returning an available book is a no-op."""
        store = get_store()
        with store.lock():
            book = store.find_by_id(book_id)
            if book is None:
                logger.warning("Return requested for missing book %s", book_id)
                return BookResult(error=BookError.NOT_FOUND)
            book.available = True
            saved = store.save(book)
        logger.info("Returned book %s", book_id)
        return BookResult(book=cls._to_read(saved))

    # ------------------------------------------------------------------
    # Conversion helpers
    # ------------------------------------------------------------------
    @staticmethod
    def _to_read(book: Book) -> BookRead:
        """Convert a store record to a ``BookRead`` schema instance."""
        return BookRead(**asdict(book))

    @classmethod
    def _to_read_list(cls, books: Iterable[Book]) -> List[BookRead]:
        return [cls._to_read(book) for book in books]

    @staticmethod
    def _to_record(data: BookCreate, book_id: Optional[int]) -> Book:
        return Book(
            id=book_id,
            title=data.title,
            author=data.author,
            description=data.description,
            publication_year=data.publication_year,
            isbn=data.isbn,
            genre=data.genre,
            available=data.available,
        )
