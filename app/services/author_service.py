from app.db.store import InMemoryStore
from app.models.author import Author
from app.schemas.author import AuthorCreate
from app.repos.author_repo import AuthorRepository
from app.core.logging import get_logger


class AuthorService:
    @staticmethod
    # Create author
    def create_author(store: InMemoryStore, data: AuthorCreate) -> Author:
        author = AuthorRepository.create(store, data)
        get_logger(__name__).info("Author created id=%s", author.id)
        return author

    @staticmethod
    # List authors
    def list_authors(store: InMemoryStore) -> list[Author]:
        return AuthorRepository.list(store)

    @staticmethod
    # Get author, None when absent
    def get_author(store: InMemoryStore, author_id: int | None) -> Author | None:
        return AuthorRepository.get(store, author_id)
