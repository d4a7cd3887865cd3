"""
In-memory data store for the catalogue API.

``BookStore`` keeps two lists of ``Book`` instances:

* the *seed*, fetched once from the upstream catalogue the first time
  the listing is requested, and never touched by CRUD operations;
* the *working set*, a copy of the seed that add/update/delete edit in
  place and that ``reset()`` restores from the seed.

A single ``threading.Lock`` guards both lists. Every public method
holds it for its whole duration, including the blocking upstream
fetch, so no two operations ever interleave. A failed fetch leaves the
seed empty and the next listing request tries again.

Identifiers of inserted books are ``len(working set) + 1`` at
insertion time, not a running counter. After a delete this can hand
out an identifier that is still in use (delete id 2 out of three
books, then insert: the new book gets id 3 as well). Update and delete
act on the first match in that case.
"""

from __future__ import annotations

import logging
import threading
from typing import Callable, List

from .errors import BookNotFound
from .fakerapi_service import fetch_books
from .schemas import Book


logger = logging.getLogger(__name__)

Fetcher = Callable[[], List[Book]]


def _copy_books(books: List[Book]) -> List[Book]:
    return [book.model_copy() for book in books]


class BookStore:
    """Seed + working set of books, guarded by one lock."""

    def __init__(self, fetcher: Fetcher = fetch_books):
        self._fetcher = fetcher
        self._lock = threading.Lock()
        self._seed: List[Book] = []
        self._books: List[Book] = []

    # The helpers below expect the lock to be held by the caller.

    def _ensure_seeded(self) -> None:
        if self._seed:
            return
        # FetchError propagates and the seed stays empty.
        books = self._fetcher()
        self._seed = _copy_books(books)
        logger.info("Seeded book store with %d books", len(self._seed))

    def _ensure_working_set(self) -> None:
        if not self._books:
            self._books = _copy_books(self._seed)

    def _index_of(self, book_id: int) -> int:
        for i, book in enumerate(self._books):
            if book.id == book_id:
                return i
        logger.info("Book %s not found in working set", book_id)
        raise BookNotFound(book_id)

    @property
    def seed(self) -> List[Book]:
        with self._lock:
            return _copy_books(self._seed)

    def list_books(self) -> List[Book]:
        """Return a copy of the working set, fetching the seed on first use."""
        with self._lock:
            self._ensure_seeded()
            self._ensure_working_set()
            return _copy_books(self._books)

    def insert(self, book: Book) -> Book:
        """Append ``book`` with identifier ``len(working set) + 1``."""
        with self._lock:
            stored = book.model_copy(update={"id": len(self._books) + 1})
            self._books.append(stored)
            return stored.model_copy()

    def update(self, book_id: int, book: Book) -> Book:
        """Replace the first book whose id is ``book_id``.

        Raises ``BookNotFound`` and leaves the working set untouched
        when there is no such book.
        """
        with self._lock:
            i = self._index_of(book_id)
            stored = book.model_copy(update={"id": book_id})
            self._books[i] = stored
            return stored.model_copy()

    def delete(self, book_id: int) -> None:
        """Remove the first book whose id is ``book_id``."""
        with self._lock:
            i = self._index_of(book_id)
            del self._books[i]

    def reset(self) -> None:
        """Restore the working set to a fresh copy of the seed (no fetch)."""
        with self._lock:
            self._books = _copy_books(self._seed)
            logger.info("Working set reset to %d seed books", len(self._books))
