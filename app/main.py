from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from app.core.config import settings
from app.core.middleware_correlation import CorrelationIdMiddleware
from app.core.logging import setup_logging, get_logger
from app.core.errors import register_exception_handlers

# Routers
from app.graphql import create_graphql_router


setup_logging(settings.LOG_LEVEL)

app = FastAPI(
    title=settings.PROJECT_NAME,
    description="Books GraphQL API - authors and books held in memory, queried over GraphQL.",
    version="1.0.0",
)

# CORS middleware - allow the GraphiQL console to make API requests
app.add_middleware(
    CORSMiddleware,
    allow_origins=[f"http://localhost:{settings.PORT}", f"http://127.0.0.1:{settings.PORT}"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Middlewares
app.add_middleware(CorrelationIdMiddleware)

# Root endpoint
@app.get("/")
async def root():
    """API root endpoint with basic information."""
    return {
        "message": "Welcome to Books GraphQL API",
        "version": "1.0.0",
        "graphql_url": settings.GRAPHQL_PATH,
        "graphiql": settings.GRAPHIQL,
        "operations": {
            "query": ["book", "books", "author", "authors"],
            "mutation": ["addBook", "addAuthor"],
        },
    }

register_exception_handlers(app)

# Mount GraphQL
app.include_router(create_graphql_router(), prefix=settings.GRAPHQL_PATH)


def run() -> None:
    import uvicorn

    logger = get_logger(__name__)
    logger.info(
        "Serving GraphQL on http://%s:%s%s", settings.HOST, settings.PORT, settings.GRAPHQL_PATH
    )
    uvicorn.run(app, host=settings.HOST, port=settings.PORT, log_config=None)


if __name__ == "__main__":
    run()
