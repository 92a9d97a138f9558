"""
In-memory book store for the FastAPI application.
"""

import threading
import time
from typing import Callable, Iterable, List, Optional

import structlog

from api.models import Book, BookCreate, BookUpdate

logger = structlog.get_logger(__name__)


SEED_BOOKS = [
    {
        "id": "1",
        "title": "1984",
        "author": "George Orwell",
        "publishedDate": "1949-06-08",
        "isbn": "9780451524935",
    },
    {
        "id": "2",
        "title": "To Kill a Mockingbird",
        "author": "Harper Lee",
        "publishedDate": "1960-07-11",
        "isbn": "9780060935467",
    },
]


class BookNotFoundError(Exception):
    """Raised when no book with the requested id exists."""

    def __init__(self, book_id: str):
        self.book_id = book_id
        super().__init__(f"Book with ID '{book_id}' not found")


def current_millis() -> int:
    """Current wall-clock time in milliseconds."""
    return time.time_ns() // 1_000_000


class BookStore:
    """
    Ordered, process-local collection of books.

    Every operation holds the store lock, so each request's read-modify-write
    is applied as one step regardless of the server's threading model.
    """

    def __init__(
        self,
        books: Optional[Iterable[Book]] = None,
        clock: Callable[[], int] = current_millis
    ):
        self._books: List[Book] = list(books or [])
        self._lock = threading.Lock()
        self._clock = clock
        self._last_id = 0

    @classmethod
    def with_seed_books(cls, **kwargs) -> "BookStore":
        """Create a store holding the two default books."""
        return cls([Book(**data) for data in SEED_BOOKS], **kwargs)

    def _next_id(self) -> str:
        # Strictly increasing, so two creates in the same millisecond never collide
        self._last_id = max(self._clock(), self._last_id + 1)
        return str(self._last_id)

    def _index_of(self, book_id: str) -> int:
        for index, book in enumerate(self._books):
            if book.id == book_id:
                return index
        logger.warning("Book not found", book_id=book_id)
        raise BookNotFoundError(book_id)

    def count(self) -> int:
        with self._lock:
            return len(self._books)

    def list_books(self) -> List[Book]:
        """Return all books in insertion order."""
        with self._lock:
            return list(self._books)

    def get_book(self, book_id: str) -> Book:
        """
        Get a single book by ID.

        Raises:
            BookNotFoundError: If no book has this id
        """
        with self._lock:
            return self._books[self._index_of(book_id)]

    def create_book(self, data: BookCreate) -> Book:
        """
        Add a book to the end of the collection.

        Args:
            data: Client-supplied book fields

        Returns:
            The stored book with its newly assigned id
        """
        with self._lock:
            book = Book(id=self._next_id(), **data.model_dump())
            self._books.append(book)
        logger.info("Book created", book_id=book.id, title=book.title)
        return book

    def update_book(self, book_id: str, data: BookUpdate) -> Book:
        """
        Merge the provided fields onto an existing book.

        Fields absent from ``data`` keep their current values and the id is
        never changed.

        Raises:
            BookNotFoundError: If no book has this id
        """
        changes = data.changes()
        with self._lock:
            index = self._index_of(book_id)
            book = self._books[index].model_copy(update=changes)
            self._books[index] = book
        logger.info("Book updated", book_id=book_id, fields=sorted(changes))
        return book

    def delete_book(self, book_id: str) -> Book:
        """
        Remove a book, keeping the order of the remaining ones.

        Raises:
            BookNotFoundError: If no book has this id
        """
        with self._lock:
            book = self._books.pop(self._index_of(book_id))
        logger.info("Book deleted", book_id=book_id)
        return book
