"""
In-memory data store for the catalogue API.

``BookRegistry`` owns the ordered list of books and every operation
that reads or changes it. The list is seeded from
``settings.seed_books`` when the registry is created and lives only as
long as the process. FastAPI runs the synchronous route handlers on a
thread pool, so all access to the list goes through a single
``threading.Lock``.

New ids follow the ``max(existing ids) + 1`` policy (``1`` for an empty
collection). Deleted ids are not remembered: deleting the book holding
the highest id lets the next created book reuse it.
"""

from __future__ import annotations

import logging
import threading
from typing import Iterable, List, Mapping, Optional

from ..config import settings
from .schemas import Book


logger = logging.getLogger(__name__)

MISSING_FIELDS_MESSAGE = "Missing title or author in request body"
NOTHING_TO_UPDATE_MESSAGE = "Provide title or author to update"
NOT_FOUND_MESSAGE = "Book not found"


class BookRegistryError(Exception):
    """Base class for errors raised by the registry."""


class BookNotFoundError(BookRegistryError, LookupError):
    """No book with the requested id exists."""

    def __init__(self, book_id: object) -> None:
        super().__init__(NOT_FOUND_MESSAGE)
        self.book_id = book_id


class BookValidationError(BookRegistryError, ValueError):
    """Required fields are missing or empty."""


class BookRegistry:
    """Process-local collection of books with CRUD operations."""

    def __init__(self, books: Optional[Iterable[Mapping[str, object]]] = None) -> None:
        self._lock = threading.Lock()
        self._books: List[Book] = []
        self.reset(books)

    def reset(self, books: Optional[Iterable[Mapping[str, object]]] = None) -> None:
        """Replace the contents with ``books`` (the seed data by default)."""
        source = settings.seed_books if books is None else books
        loaded = [Book(**entry) for entry in source]
        with self._lock:
            self._books = loaded
        logger.debug("Registry reset with %d books", len(loaded))

    def __len__(self) -> int:
        with self._lock:
            return len(self._books)

    def _next_id(self) -> int:
        # Caller must hold the lock.
        return max(b.id for b in self._books) + 1 if self._books else 1

    def next_id(self) -> int:
        with self._lock:
            return self._next_id()

    def _index_of(self, book_id: int) -> int:
        # Caller must hold the lock.
        for index, book in enumerate(self._books):
            if book.id == book_id:
                return index
        logger.debug("Book %s not found", book_id)
        raise BookNotFoundError(book_id)

    def list_books(self) -> List[Book]:
        """Return every book in insertion order."""
        with self._lock:
            return list(self._books)

    def get_book(self, book_id: int) -> Book:
        with self._lock:
            return self._books[self._index_of(book_id)]

    def create_book(self, title: Optional[str], author: Optional[str]) -> Book:
        """Append a new book and return it.

        Raises
        ------
        BookValidationError
            If ``title`` or ``author`` is missing or empty. The
            collection is left untouched.
        """
        if not title or not author:
            raise BookValidationError(MISSING_FIELDS_MESSAGE)
        with self._lock:
            book = Book(id=self._next_id(), title=title, author=author)
            self._books.append(book)
        logger.info("Created book %d (%r by %r)", book.id, book.title, book.author)
        return book

    def update_book(
        self,
        book_id: int,
        title: Optional[str] = None,
        author: Optional[str] = None,
    ) -> Book:
        """Replace the supplied fields of an existing book.

        The id is checked before the payload, so an unknown id raises
        ``BookNotFoundError`` even when no field is supplied. Fields that
        are ``None`` or empty keep their stored value.
        """
        with self._lock:
            index = self._index_of(book_id)
            if not title and not author:
                raise BookValidationError(NOTHING_TO_UPDATE_MESSAGE)
            changes = {}
            if title:
                changes["title"] = title
            if author:
                changes["author"] = author
            updated = self._books[index].model_copy(update=changes)
            self._books[index] = updated
        logger.info("Updated book %d (%s)", updated.id, ", ".join(sorted(changes)))
        return updated

    def delete_book(self, book_id: int) -> Book:
        with self._lock:
            removed = self._books.pop(self._index_of(book_id))
        logger.info("Deleted book %d", removed.id)
        return removed
