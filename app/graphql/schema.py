import strawberry
from strawberry.fastapi import GraphQLRouter

from app.core.config import settings
from app.graphql.context import get_context
from app.graphql.mutations import Mutation
from app.graphql.queries import Query

schema = strawberry.Schema(query=Query, mutation=Mutation)


def create_graphql_router(graphiql: bool | None = None) -> GraphQLRouter:
    """
    GraphQL router for FastAPI, with the interactive console when enabled.
    """
    if graphiql is None:
        graphiql = settings.GRAPHIQL
    return GraphQLRouter(
        schema,
        context_getter=get_context,
        graphql_ide="graphiql" if graphiql else None,
    )
