"""
GraphQL object types.

Book is declared before Author and refers to it by name; the reference is
resolved when the schema is built, so the two types can point at each other.
"""

from __future__ import annotations

import strawberry

from app.graphql.context import store_from
from app.models.author import Author
from app.models.book import Book
from app.services.author_service import AuthorService
from app.services.book_service import BookService


@strawberry.type(name="Book", description="This represents a book written by an author")
class BookType:
    id: int
    name: str
    author_id: int

    @strawberry.field
    def author(self, info: strawberry.Info) -> AuthorType | None:
        author = AuthorService.get_author(store_from(info), self.author_id)
        return AuthorType.from_model(author) if author else None

    @classmethod
    def from_model(cls, book: Book) -> BookType:
        return cls(id=book.id, name=book.name, author_id=book.author_id)


@strawberry.type(name="Author", description="This represents a author of a book")
class AuthorType:
    id: int
    name: str

    @strawberry.field
    def books(self, info: strawberry.Info) -> list[BookType] | None:
        return [
            BookType.from_model(b)
            for b in BookService.list_books(store_from(info), author_id=self.id)
        ]

    @classmethod
    def from_model(cls, author: Author) -> AuthorType:
        return cls(id=author.id, name=author.name)
