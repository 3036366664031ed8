from app.db.store import InMemoryStore
from app.models.author import Author
from app.schemas.author import AuthorCreate


class AuthorRepository:

    @staticmethod
    # Create a new author
    def create(store: InMemoryStore, data: AuthorCreate) -> Author:
        return store.append_author(data.name)

    @staticmethod
    # List authors in insertion order
    def list(store: InMemoryStore) -> list[Author]:
        return store.authors

    @staticmethod
    # Get an author by ID
    def get(store: InMemoryStore, author_id: int | None) -> Author | None:
        return next((a for a in store.authors if a.id == author_id), None)
