"""
Main FastAPI application for the Storefront backend
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .. import __version__
from ..config import settings
from ..logging import configure_logging, get_logger
from ..middleware import LoggingContextMiddleware
from ..store.memory import CatalogStore

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager."""
    logger.info(
        "Starting Storefront API...",
        environment=settings.environment,
        products=len(app.state.store.get_products()),
    )
    yield
    logger.info("Shutting down Storefront API...")


def create_app(store: CatalogStore | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        store: Catalog store to serve. Defaults to the seed catalog, or an
            empty store when ``settings.seed_on_startup`` is off.
    """
    configure_logging(debug=settings.debug, log_level=settings.log_level)

    app = FastAPI(
        title="Storefront API",
        description="GraphQL API over an in-memory product catalog",
        version=__version__,
        lifespan=lifespan,
        debug=settings.debug,
    )

    if store is None:
        store = CatalogStore.from_seed() if settings.seed_on_startup else CatalogStore()
    app.state.store = store

    app.add_middleware(LoggingContextMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.get("/health")
    async def health_check():  # pyright: ignore [reportUnusedFunction]
        """Health check endpoint."""
        return {"status": "healthy", "version": __version__}

    try:
        from ..graphql.schema import create_graphql_router, validate_schema

        logger.info("Validating GraphQL schema...")
        validate_schema()

        app.include_router(create_graphql_router(graphiql=settings.graphiql), prefix="")
        logger.info("GraphQL endpoint initialized successfully", endpoint="/graphql")
    except Exception as e:  # pragma: no cover
        logger.error("Failed to initialize GraphQL endpoint", error=str(e))
        raise

    return app


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "storefront.api.app:create_app",
        factory=True,
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.api_reload,
        log_level=settings.log_level.lower(),
    )
