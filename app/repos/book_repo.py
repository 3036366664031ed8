from app.db.store import InMemoryStore
from app.models.book import Book
from app.schemas.book import BookCreate


class BookRepository:
    @staticmethod
    # Create a new book
    def create(store: InMemoryStore, data: BookCreate) -> Book:
        return store.append_book(data.name, data.author_id)

    @staticmethod
    # List books
    def list(
        store: InMemoryStore,
        author_id: int | None = None,
    ) -> list[Book]:
        if author_id is None:
            return store.books

        # filters, insertion order kept
        return [b for b in store.books if b.author_id == author_id]

    @staticmethod
    # Get a book by ID
    def get(store: InMemoryStore, book_id: int | None) -> Book | None:
        return next((b for b in store.books if b.id == book_id), None)
