from app.db.store import InMemoryStore
from app.schemas.book import BookCreate
from app.repos.book_repo import BookRepository
from app.models.book import Book
from app.core.logging import get_logger


class BookService:
    @staticmethod
    # Create book
    def create_book(store: InMemoryStore, data: BookCreate) -> Book:
        # author_id is stored as given; orphaned books are allowed
        book = BookRepository.create(store, data)
        get_logger(__name__).info("Book created id=%s author_id=%s", book.id, book.author_id)
        return book

    @staticmethod
    # List books
    def list_books(
        store: InMemoryStore,
        author_id: int | None = None,
    ) -> list[Book]:
        return BookRepository.list(store, author_id=author_id)

    @staticmethod
    # Get book, None when absent
    def get_book(store: InMemoryStore, book_id: int | None) -> Book | None:
        return BookRepository.get(store, book_id)
