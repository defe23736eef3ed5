import asyncio

import pytest

from library_catalogue.app.schemas.book import BookCreate
from library_catalogue.app.services.book_service import BookError, BookService


def run(coro):
    return asyncio.run(coro)


def create(**fields):
    data = {"title": "Dune", "author": "Frank Herbert", "publicationYear": 1965}
    data.update(fields)
    return run(BookService.create_book(BookCreate(**data)))


def test_create_assigns_id_and_defaults_to_available(store):
    book = create()
    assert book.id == 1
    assert book.available is True
    assert store.find_by_id(1).title == "Dune"


def test_create_ignores_client_supplied_id(store):
    book = create(id=77)
    assert book.id == 1
    assert not store.exists_by_id(77)


def test_get_book_by_id_missing_returns_none():
    assert run(BookService.get_book_by_id(1)) is None


def test_update_replaces_every_field_but_id(store):
    original = create(description="Spice", isbn="978-0-441-17271-9", genre="SF")
    updated = run(
        BookService.update_book(
            original.id,
            BookCreate(title="Dune Messiah", author="Frank Herbert", publicationYear=1969),
        )
    )
    assert updated.id == original.id
    assert updated.title == "Dune Messiah"
    assert updated.publication_year == 1969
    # Full replacement: omitted optional fields are cleared
    assert updated.description is None
    assert updated.isbn is None
    assert updated.genre is None
    assert store.find_by_id(original.id).title == "Dune Messiah"
    assert len(store) == 1


def test_update_takes_availability_from_input(store):
    book = create()
    updated = run(
        BookService.update_book(
            book.id,
            BookCreate(title="Dune", author="Frank Herbert", publicationYear=1965, available=False),
        )
    )
    assert updated.available is False
    assert store.find_by_id(book.id).available is False


def test_update_missing_book_does_not_mutate(store):
    create()
    result = run(
        BookService.update_book(5, BookCreate(title="X", author="Y", publicationYear=2000))
    )
    assert result is None
    assert len(store) == 1
    assert not store.exists_by_id(5)


def test_delete_book(store):
    book = create()
    assert run(BookService.delete_book(book.id)) is True
    assert run(BookService.delete_book(book.id)) is False
    assert run(BookService.get_book_by_id(book.id)) is None


def test_lend_available_book():
    book = create()
    result = run(BookService.lend_book(book.id))
    assert result.ok
    assert result.error is None
    assert result.book.available is False


def test_lend_lent_book_is_a_conflict(store):
    book = create()
    run(BookService.lend_book(book.id))
    result = run(BookService.lend_book(book.id))
    assert result.error is BookError.CONFLICT
    assert result.book is None
    assert not result.ok
    assert store.find_by_id(book.id).available is False


@pytest.mark.parametrize("operation", [BookService.lend_book, BookService.return_book])
def test_lend_and_return_missing_book(operation):
    result = run(operation(404))
    assert result.error is BookError.NOT_FOUND
    assert result.book is None


def test_return_is_idempotent():
    book = create()
    run(BookService.lend_book(book.id))
    first = run(BookService.return_book(book.id))
    second = run(BookService.return_book(book.id))
    assert first.book.available is True
    assert second.book.available is True
    assert second.error is None


def test_dune_lend_cycle():
    book = create()
    assert book.available is True
    assert run(BookService.lend_book(book.id)).book.available is False
    assert run(BookService.lend_book(book.id)).error is BookError.CONFLICT
    assert run(BookService.return_book(book.id)).book.available is True


def test_available_books_excludes_lent(sample_store):
    run(BookService.lend_book(4))
    available = run(BookService.get_available_books())
    assert [book.id for book in available] == [1, 2, 3, 5]


def test_searches_over_sample_books(sample_store):
    assert [b.title for b in run(BookService.find_by_title("1984"))] == ["1984"]
    assert run(BookService.find_by_author("nonexistent")) == []
    assert [b.id for b in run(BookService.find_by_author("garcía"))] == [2]
    assert [b.id for b in run(BookService.find_by_title_or_author("TOLKIEN"))] == [3]
    assert len(run(BookService.get_all_books())) == 5


def test_isbn_and_year_searches(sample_store):
    # Three sample books share this ISBN; the first stored one wins
    assert run(BookService.find_by_isbn("978-84-397-2071-7")).id == 2
    assert run(BookService.find_by_isbn("000")) is None
    assert [b.id for b in run(BookService.find_by_publication_year(1949))] == [4]
    assert [b.id for b in run(BookService.find_by_publication_year_range(1940, 1960))] == [3, 4, 5]
