import pytest
import uuid
from fastapi.testclient import TestClient

from app.main import app
from app.db.store import InMemoryStore, get_store
from app.graphql import schema


@pytest.fixture
def store():
    """Fresh seeded store for each test."""
    return InMemoryStore()


@pytest.fixture
def empty_store():
    """Store without seed data."""
    return InMemoryStore(seed=False)


@pytest.fixture
def test_client(store):
    """Create a test client for FastAPI app, bound to the per-test store."""
    app.dependency_overrides[get_store] = lambda: store
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


@pytest.fixture
def execute(store):
    """Execute a GraphQL document directly against the schema."""

    def _execute(document: str, variables: dict[str, object] | None = None):
        return schema.execute_sync(
            document,
            variable_values=variables,
            context_value={"store": store},
        )

    return _execute


@pytest.fixture
def post_graphql(test_client):
    """POST a GraphQL document to the endpoint and return the response."""

    def _post(query: str, variables: dict[str, object] | None = None, headers=None):
        payload: dict[str, object] = {"query": query}
        if variables is not None:
            payload["variables"] = variables
        return test_client.post("/graphql", json=payload, headers=headers)

    return _post


@pytest.fixture
def headers_with_correlation():
    """HTTP headers with correlation ID."""
    return {"X-Request-ID": str(uuid.uuid4())}
