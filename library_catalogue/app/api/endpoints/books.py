"""
Book endpoints.

These routes expose the catalogue: CRUD on books, text and year
searches, the list of available books and the lend/return actions
(``/prestar`` and ``/devolver``).  List endpoints answer 204 with an
empty body when nothing matches.

Static paths are declared before ``/{book_id}`` so that, for example,
``/available`` is not parsed as an identifier.
"""

from typing import List

from fastapi import APIRouter, HTTPException, Query, Response, status

from library_catalogue.app.schemas.book import BookCreate, BookRead
from library_catalogue.app.services.book_service import BookError, BookResult, BookService

router = APIRouter()


def _list_or_no_content(books: List[BookRead]):
    if not books:
        return Response(status_code=status.HTTP_204_NO_CONTENT)
    return books


def _result_or_error(result: BookResult) -> BookRead:
    if result.ok:
        return result.book
    if result.error is BookError.NOT_FOUND:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Book not found")
    raise HTTPException(
        status_code=status.HTTP_400_BAD_REQUEST,
        detail="Book is not available for lending",
    )


@router.get("", response_model=List[BookRead])
async def list_books():
    """Return every book in the catalogue."""
    return _list_or_no_content(await BookService.get_all_books())


@router.post("", response_model=BookRead, status_code=status.HTTP_201_CREATED)
async def create_book(book_in: BookCreate) -> BookRead:
    """Create a new book.  The identifier is assigned by the server."""
    return await BookService.create_book(book_in)


@router.get("/available", response_model=List[BookRead])
async def list_available_books():
    """Return only the books that can currently be lent."""
    return _list_or_no_content(await BookService.get_available_books())


@router.get("/buscar", response_model=List[BookRead])
async def search_books(q: str = Query(..., description="Text to look for in title or author")):
    """General search over title and author, ignoring case."""
    return _list_or_no_content(await BookService.find_by_title_or_author(q))


@router.get("/search/author", response_model=List[BookRead])
async def search_by_author(author: str = Query(..., description="Part of the author's name")):
    """Books whose author contains the given text, ignoring case."""
    return _list_or_no_content(await BookService.find_by_author(author))


@router.get("/search/title", response_model=List[BookRead])
async def search_by_title(title: str = Query(..., description="Part of the title")):
    """Books whose title contains the given text, ignoring case."""
    return _list_or_no_content(await BookService.find_by_title(title))


@router.get("/search/isbn", response_model=BookRead)
async def search_by_isbn(isbn: str = Query(..., description="Exact ISBN")) -> BookRead:
    """Return the first book with the given ISBN, or 404."""
    book = await BookService.find_by_isbn(isbn)
    if book is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Book not found")
    return book


@router.get("/search/year", response_model=List[BookRead])
async def search_by_year(year: int = Query(..., description="Exact publication year")):
    """Books published in exactly the given year."""
    return _list_or_no_content(await BookService.find_by_publication_year(year))


@router.get("/search/years", response_model=List[BookRead])
async def search_by_year_range(
    start: int = Query(..., description="First publication year, inclusive"),
    end: int = Query(..., description="Last publication year, inclusive"),
):
    """Books published between ``start`` and ``end``.

    Returns HTTP 400 if ``start`` is greater than ``end``.
    """
    if start > end:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="start must not be greater than end",
        )
    return _list_or_no_content(await BookService.find_by_publication_year_range(start, end))


@router.get("/{book_id}", response_model=BookRead)
async def get_book(book_id: int) -> BookRead:
    """Retrieve a single book by its ID.  Raises 404 if it does not exist."""
    book = await BookService.get_book_by_id(book_id)
    if book is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Book not found")
    return book


@router.put("/{book_id}", response_model=BookRead)
async def update_book(book_id: int, book_in: BookCreate) -> BookRead:
    """Replace an existing book.

    Every field except the identifier is overwritten; optional fields
    left out of the body are cleared.
    """
    book = await BookService.update_book(book_id, book_in)
    if book is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Book not found")
    return book


@router.delete("/{book_id}")
async def delete_book(book_id: int) -> Response:
    """Delete a book.  Raises 404 if it does not exist."""
    deleted = await BookService.delete_book(book_id)
    if not deleted:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Book not found")
    return Response(status_code=status.HTTP_200_OK)


@router.post("/{book_id}/prestar", response_model=BookRead)
async def lend_book(book_id: int) -> BookRead:
    """Lend a book.

    Returns HTTP 404 if the book does not exist and HTTP 400 if it is
    already lent.
    """
    return _result_or_error(await BookService.lend_book(book_id))


@router.post("/{book_id}/devolver", response_model=BookRead)
async def return_book(book_id: int) -> BookRead:
    """Return a book.  Returning a book that is not lent is allowed."""
    return _result_or_error(await BookService.return_book(book_id))
