from __future__ import annotations

import strawberry

from app.graphql.context import store_from
from app.graphql.types import AuthorType, BookType
from app.services.author_service import AuthorService
from app.services.book_service import BookService


@strawberry.type(description="Root Query")
class Query:
    # An omitted id matches nothing and resolves to null
    @strawberry.field(description="A Single Book")
    def book(self, info: strawberry.Info, id: int | None = None) -> BookType | None:
        book = BookService.get_book(store_from(info), id)
        return BookType.from_model(book) if book else None

    @strawberry.field(description="List of All Books")
    def books(self, info: strawberry.Info) -> list[BookType] | None:
        return [BookType.from_model(b) for b in BookService.list_books(store_from(info))]

    @strawberry.field(description="List of All Authors")
    def authors(self, info: strawberry.Info) -> list[AuthorType] | None:
        return [AuthorType.from_model(a) for a in AuthorService.list_authors(store_from(info))]

    @strawberry.field(description="A Single Author")
    def author(self, info: strawberry.Info, id: int | None = None) -> AuthorType | None:
        author = AuthorService.get_author(store_from(info), id)
        return AuthorType.from_model(author) if author else None
