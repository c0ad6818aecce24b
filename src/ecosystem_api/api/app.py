"""
Main FastAPI application for the Ecosystem API
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .. import __version__
from ..config import settings
from ..database import init_database
from ..logging import configure_logging, get_logger
from ..middleware import LoggingContextMiddleware
from ..store import RecordStore, SqlRecordStore

# Configure logging before creating logger
configure_logging(debug=settings.debug, level=settings.log_level)
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager."""
    logger.info("Starting Ecosystem API...")

    if app.state.store is None:
        init_database()
        app.state.store = SqlRecordStore()
        logger.info("Database initialized")

    if not settings.jwt_secret:
        logger.warning(
            "No JWT secret configured; login and privileged mutations will fail",
            env_var="ECOSYSTEM_JWT_SECRET",
        )

    yield

    logger.info("Shutting down Ecosystem API...")


def create_app(store: RecordStore | None = None) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        store: Record store to serve; a SQL store over the configured
            database is created at startup when omitted
    """
    app = FastAPI(
        title="Ecosystem API",
        description="GraphQL API over core units, budget statements and roadmaps",
        version=__version__,
        lifespan=lifespan,
        debug=settings.debug,
    )
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

    from ..graphql.schema import create_graphql_router, validate_schema

    # Fail at startup rather than on the first request
    logger.info("Validating GraphQL schema...")
    validate_schema()

    app.include_router(create_graphql_router(graphiql=settings.debug), prefix="")
    logger.info("GraphQL endpoint initialized", endpoint="/graphql")

    return app


# Create the main application instance
app = create_app()
