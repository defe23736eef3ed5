"""Library catalogue API client.

This module defines a simple client wrapper around the catalogue's
REST API.  The client uses the ``requests`` library internally to make
HTTP calls and never raises for HTTP or network failures: every
method returns a ``(data, error)`` tuple where ``error`` is ``None``
on success, or a dictionary with ``status_code`` and ``message`` keys
describing what went wrong.

The client exposes high-level methods mirroring the API:

* :meth:`list_books`, :meth:`get_book`, :meth:`create_book`,
  :meth:`update_book` and :meth:`delete_book` for CRUD.
* :meth:`search_by_author`, :meth:`search_by_title`,
  :meth:`search_by_isbn`, :meth:`search_by_year`,
  :meth:`search_by_year_range` and :meth:`search` for lookups.
* :meth:`list_available`, :meth:`lend_book` and :meth:`return_book`
  for lending.

List endpoints answer ``204 No Content`` when nothing matches; the
client turns that into an empty list.

An optional API key is sent as ``Authorization: Bearer <key>``.  The
catalogue itself does not check it, but a gateway in front of it may.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple

import requests


logger = logging.getLogger(__name__)

Error = Dict[str, Any]


class LibraryCatalogueAPI:
    """Client for interacting with the library catalogue API."""

    BOOKS_PATH = "/api/books"

    def __init__(
        self,
        *,
        base_url: str,
        api_key: Optional[str] = None,
        session: Optional[requests.Session] = None,
        timeout: float = 15,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL for the API, e.g. ``http://localhost:8000``.
            api_key: Optional API key sent as a bearer token.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
            timeout: Seconds to wait for each response.
        """
        self.base_url = base_url.rstrip("/")
        self.api_key = api_key
        self.session = session or requests.Session()
        self.timeout = timeout

    # ------------------------------------------------------------------
    # Low level HTTP helpers
    # ------------------------------------------------------------------
    def _request(
        self, method: str, path: str, *, params: Dict[str, Any] | None = None,
        json_body: Any | None = None
    ) -> Tuple[Optional[Any], Optional[Error]]:
        """Perform an HTTP request to the API.

        Args:
            method: HTTP method (``GET``, ``POST``, ``PUT``, ``DELETE``).
            path: Path relative to :attr:`base_url` (e.g. ``/api/books``).
            params: Query parameters to include in the request.
            json_body: JSON body to send with the request.
        Returns:
            A tuple ``(data, error)``.  ``data`` is the parsed JSON
            response, or ``None`` when the response has no body.
        """
        url = f"{self.base_url}{path}"
        headers: Dict[str, str] = {}
        if self.api_key:
            headers["Authorization"] = f"Bearer {self.api_key}"
        try:
            logger.debug("Sending %s request to %s", method, url)
            response = self.session.request(
                method=method,
                url=url,
                params=params,
                json=json_body,
                headers=headers,
                timeout=self.timeout,
            )
            response.raise_for_status()
            if response.content:
                return response.json(), None
            return None, None
        except requests.HTTPError as exc:
            status = exc.response.status_code if exc.response is not None else None
            message = ""
            if exc.response is not None:
                try:
                    err_json = exc.response.json()
                except ValueError:
                    message = exc.response.text
                else:
                    if isinstance(err_json, dict):
                        message = err_json.get("detail") or err_json.get("message") or str(err_json)
                    else:
                        message = str(err_json)
            if not message:
                message = str(exc)
            logger.error("API request failed (%s): %s", status, message)
            return None, {"status_code": status, "message": str(message)}
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "message": str(exc)}

    def _list(self, path: str, params: Dict[str, Any] | None = None) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        data, error = self._request("GET", path, params=params)
        if error:
            return [], error
        if isinstance(data, list):
            return data, None
        return [], None

    def _book_path(self, book_id: Any, suffix: str = "") -> str:
        return f"{self.BOOKS_PATH}/{book_id}{suffix}"

    # ------------------------------------------------------------------
    # CRUD
    # ------------------------------------------------------------------
    def list_books(self) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        """Retrieve every book in the catalogue."""
        return self._list(self.BOOKS_PATH)

    def get_book(self, book_id: Any) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._request("GET", self._book_path(book_id))

    def create_book(self, payload: Dict[str, Any]) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Create a book.

        Args:
            payload: Book fields, using ``publicationYear`` for the year.
        Returns:
            A tuple ``(book, error)``; ``book`` carries the new ``id``.
        """
        return self._request("POST", self.BOOKS_PATH, json_body=payload)

    def update_book(self, book_id: Any, payload: Dict[str, Any]) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Replace a book.  Fields missing from ``payload`` are cleared."""
        return self._request("PUT", self._book_path(book_id), json_body=payload)

    def delete_book(self, book_id: Any) -> Tuple[bool, Optional[Error]]:
        _, error = self._request("DELETE", self._book_path(book_id))
        if error:
            return False, error
        return True, None

    # ------------------------------------------------------------------
    # Searches
    # ------------------------------------------------------------------
    def search_by_author(self, author: str) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        return self._list(f"{self.BOOKS_PATH}/search/author", {"author": author})

    def search_by_title(self, title: str) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        return self._list(f"{self.BOOKS_PATH}/search/title", {"title": title})

    def search_by_isbn(self, isbn: str) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._request("GET", f"{self.BOOKS_PATH}/search/isbn", params={"isbn": isbn})

    def search_by_year(self, year: int) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        return self._list(f"{self.BOOKS_PATH}/search/year", {"year": year})

    def search_by_year_range(self, start: int, end: int) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        return self._list(f"{self.BOOKS_PATH}/search/years", {"start": start, "end": end})

    def search(self, text: str) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        """General search over titles and authors."""
        return self._list(f"{self.BOOKS_PATH}/buscar", {"q": text})

    # ------------------------------------------------------------------
    # Lending
    # ------------------------------------------------------------------
    def list_available(self) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        return self._list(f"{self.BOOKS_PATH}/available")

    def lend_book(self, book_id: Any) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Lend a book.

        A book that is already lent yields an error with
        ``status_code`` 400.
        """
        return self._request("POST", self._book_path(book_id, "/prestar"))

    def return_book(self, book_id: Any) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._request("POST", self._book_path(book_id, "/devolver"))
