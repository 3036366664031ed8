import threading
from functools import lru_cache

from app.db.seed import SEED_AUTHORS, SEED_BOOKS
from app.models.author import Author
from app.models.book import Book


class InMemoryStore:
    """
    Ordered, append-only collections of authors and books.

    Ids are `len(collection) + 1` at append time. The length read and the
    append run under one lock so concurrent requests never share an id.
    """

    def __init__(self, seed: bool = True):
        self.authors: list[Author] = []
        self.books: list[Book] = []
        self._lock: threading.Lock = threading.Lock()

        if seed:
            for name in SEED_AUTHORS:
                _ = self.append_author(name)
            for name, author_id in SEED_BOOKS:
                _ = self.append_book(name, author_id)

    def append_author(self, name: str) -> Author:
        with self._lock:
            author = Author(id=len(self.authors) + 1, name=name)
            self.authors.append(author)
        return author

    def append_book(self, name: str, author_id: int) -> Book:
        with self._lock:
            book = Book(id=len(self.books) + 1, name=name, author_id=author_id)
            self.books.append(book)
        return book


# Process-wide store, created on first use and kept for the process lifetime.
@lru_cache()
def get_store() -> InMemoryStore:
    return InMemoryStore()
