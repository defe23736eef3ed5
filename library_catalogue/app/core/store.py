"""
In-memory storage for book records.

This module provides the process-wide ``BookStore`` (``get_store``)
and the startup hook that rebuilds it (``init_store``).  Records live
in an insertion-ordered dictionary keyed by identifier; identifiers
come from a counter that starts at 1 and is never rewound, so an
identifier freed by a deletion is not handed out again.

Nothing here survives a restart.  To switch to a real database you
would replace ``BookStore`` with a class exposing the same methods.
"""

from __future__ import annotations

import logging
import threading
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Callable, Dict, Iterator, List, Optional

logger = logging.getLogger(__name__)


@dataclass
class Book:
    """A single catalogue item as held by the store."""

    id: Optional[int]
    title: str
    author: str
    description: Optional[str] = None
    publication_year: Optional[int] = None
    isbn: Optional[str] = None
    genre: Optional[str] = None
    available: bool = True


def _contains(haystack: Optional[str], needle: str) -> bool:
    if haystack is None:
        return False
    return needle.casefold() in haystack.casefold()


class BookStore:
    """Authoritative holder of all book records, keyed by identifier.

    Every public method takes the store lock, so the mapping and the
    identifier counter are consistent under concurrent requests.  The
    lock is re-entrant; callers needing a read-modify-write sequence
    can hold it through :meth:`lock`.
    """

    def __init__(self) -> None:
        self._books: Dict[int, Book] = {}
        self._next_id = 1
        self._lock = threading.RLock()

    @contextmanager
    def lock(self) -> Iterator[None]:
        """Hold the store lock for the duration of the ``with`` block."""
        with self._lock:
            yield

    def __len__(self) -> int:
        with self._lock:
            return len(self._books)

    # ------------------------------------------------------------------
    # Basic operations
    # ------------------------------------------------------------------
    def find_all(self) -> List[Book]:
        with self._lock:
            return list(self._books.values())

    def find_by_id(self, book_id: int) -> Optional[Book]:
        with self._lock:
            return self._books.get(book_id)

    def save(self, book: Book) -> Book:
        """Insert or overwrite a record.

        A record without an identifier receives the next one from the
        counter.  A record that already carries an identifier replaces
        whatever is stored under it; no existence check is made.
        """
        with self._lock:
            if book.id is None:
                book.id = self._next_id
                self._next_id += 1
            self._books[book.id] = book
            return book

    def delete_by_id(self, book_id: int) -> bool:
        with self._lock:
            return self._books.pop(book_id, None) is not None

    def exists_by_id(self, book_id: int) -> bool:
        with self._lock:
            return book_id in self._books

    def next_id(self) -> int:
        """Return the identifier the next creation will receive."""
        with self._lock:
            return self._next_id

    # ------------------------------------------------------------------
    # Filtered queries
    # ------------------------------------------------------------------
    def _filter(self, predicate: Callable[[Book], bool]) -> List[Book]:
        with self._lock:
            return [book for book in self._books.values() if predicate(book)]

    def find_by_author_containing(self, text: str) -> List[Book]:
        return self._filter(lambda book: _contains(book.author, text))

    def find_by_title_containing(self, text: str) -> List[Book]:
        return self._filter(lambda book: _contains(book.title, text))

    def find_by_isbn(self, isbn: str) -> Optional[Book]:
        matches = self._filter(lambda book: book.isbn == isbn)
        return matches[0] if matches else None

    def find_available(self) -> List[Book]:
        return self._filter(lambda book: book.available is True)

    def find_by_publication_year(self, year: int) -> List[Book]:
        return self._filter(lambda book: book.publication_year == year)

    def find_by_publication_year_between(self, start: int, end: int) -> List[Book]:
        return self._filter(
            lambda book: book.publication_year is not None
            and start <= book.publication_year <= end
        )

    def find_by_title_or_author_containing(self, text: str) -> List[Book]:
        return self._filter(
            lambda book: _contains(book.title, text) or _contains(book.author, text)
        )


SAMPLE_BOOKS: List[Dict[str, object]] = [
    {
        "title": "Don Quijote de la Mancha",
        "author": "Miguel de Cervantes",
        "description": (
            "Obra maestra de la literatura española que narra las aventuras de un hidalgo "
            "que enloquece por la lectura de libros de caballerías"
        ),
        "publication_year": 1605,
        "isbn": "978-84-376-0494-7",
        "genre": "Novela",
    },
    {
        "title": "Cien años de soledad",
        "author": "Gabriel García Márquez",
        "description": (
            "Novela que cuenta la historia de la familia Buendía a lo largo de siete "
            "generaciones en el pueblo ficticio de Macondo"
        ),
        "publication_year": 1967,
        "isbn": "978-84-397-2071-7",
        "genre": "Realismo mágico",
    },
    {
        "title": "El Señor de los Anillos",
        "author": "J.R.R. Tolkien",
        "description": (
            "Trilogía épica de fantasía que narra la búsqueda del Anillo Único para "
            "destruirlo en el Monte del Destino"
        ),
        "publication_year": 1954,
        "isbn": "978-84-450-7139-9",
        "genre": "Fantasía épica",
    },
    {
        "title": "1984",
        "author": "George Orwell",
        "description": (
            "Novela distópica que describe una sociedad totalitaria bajo la vigilancia "
            "constante del Gran Hermano"
        ),
        "publication_year": 1949,
        "isbn": "978-84-397-2071-7",
        "genre": "Ciencia ficción",
    },
    {
        "title": "El Principito",
        "author": "Antoine de Saint-Exupéry",
        "description": (
            "Cuento poético que trata temas como el amor, la amistad y el sentido de la "
            "vida a través de la historia de un pequeño príncipe"
        ),
        "publication_year": 1943,
        "isbn": "978-84-397-2071-7",
        "genre": "Literatura infantil",
    },
]


_store = BookStore()


def get_store() -> BookStore:
    """Return the process-wide book store."""
    return _store


def init_store(load_sample_data: bool = True) -> BookStore:
    """Replace the process-wide store with a fresh one.

    The new store starts its identifier counter at 1.  When
    ``load_sample_data`` is true the sample books are saved in order
    and receive identifiers 1 to 5.
    """
    global _store
    store = BookStore()
    if load_sample_data:
        for fields in SAMPLE_BOOKS:
            store.save(Book(id=None, **fields))
        logger.info("Loaded %d sample books", len(store))
    _store = store
    return store
