from typing import Annotated
from fastapi import Depends
import strawberry

from app.db.store import InMemoryStore, get_store


def get_context(
    store: Annotated[InMemoryStore, Depends(get_store)],
) -> dict[str, object]:
    """
    Per-request GraphQL context. Merged by the router with request/response.
    """
    return {"store": store}


def store_from(info: strawberry.Info) -> InMemoryStore:
    return info.context["store"]
