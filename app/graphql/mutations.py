from __future__ import annotations

import strawberry

from app.graphql.context import store_from
from app.graphql.types import AuthorType, BookType
from app.schemas.author import AuthorCreate
from app.schemas.book import BookCreate
from app.services.author_service import AuthorService
from app.services.book_service import BookService


@strawberry.type(description="Root Mutation")
class Mutation:
    @strawberry.mutation(description="Add a book")
    def add_book(self, info: strawberry.Info, name: str, author_id: int) -> BookType | None:
        data = BookCreate(name=name, author_id=author_id)
        return BookType.from_model(BookService.create_book(store_from(info), data))

    @strawberry.mutation(description="Add an author")
    def add_author(self, info: strawberry.Info, name: str) -> AuthorType | None:
        data = AuthorCreate(name=name)
        return AuthorType.from_model(AuthorService.create_author(store_from(info), data))
