"""
GraphQL package: Book/Author types, root Query and Mutation, and the
FastAPI router serving them.
"""

from app.graphql.schema import create_graphql_router, schema

__all__ = ["schema", "create_graphql_router"]
