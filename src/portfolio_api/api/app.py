"""
Main FastAPI application for the Portfolio API
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse

from .. import __version__
from ..config import settings
from ..database.connection import close_client, get_database
from ..errors import StoreConnectionError
from ..logging import configure_logging, get_logger
from ..middleware import LoggingContextMiddleware

# Configure logging before creating logger
configure_logging(debug=settings.debug, level=settings.log_level)
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager."""
    logger.info("Starting Portfolio API...")

    # Share one client handle with every resolver through the GraphQL context
    try:
        app.state.database = get_database()
    except StoreConnectionError as e:
        # Requests report the failure as field errors; the server keeps running
        app.state.database = None
        logger.error("MongoDB client could not be created", error=str(e))
    else:
        from ..validation import get_startup_recommendations, validate_startup_configuration

        validation_results = await validate_startup_configuration()
        if not validation_results["overall_valid"]:
            logger.error(
                "Startup validation failed - GraphQL fields may return errors",
                database_errors=validation_results["database"]["errors"],
            )
        recommendations = get_startup_recommendations(validation_results)
        if recommendations:
            logger.info("Configuration recommendations", recommendations=recommendations)

    yield

    logger.info("Shutting down Portfolio API...")
    await close_client()


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""

    app = FastAPI(
        title="Portfolio API",
        description="Read-only GraphQL API for personal portfolio content",
        version=__version__,
        lifespan=lifespan,
        debug=settings.debug,
    )

    app.add_middleware(LoggingContextMiddleware)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["GET", "POST"],
        allow_headers=["content-type"],
    )

    @app.get("/", response_class=PlainTextResponse)
    async def root() -> str:  # pyright: ignore [reportUnusedFunction]
        """Fixed greeting used by load balancer health checks."""
        return settings.greeting

    @app.get("/health")
    async def health_check():  # pyright: ignore [reportUnusedFunction]
        """Health check endpoint."""
        return {"status": "healthy", "version": __version__}

    from ..graphql.schema import create_graphql_router, validate_schema

    # Fail fast: the server should not start with a broken schema
    logger.info("Validating GraphQL schema...")
    validate_schema()

    app.include_router(create_graphql_router(), prefix="")
    logger.info("GraphQL endpoint initialized successfully", endpoint="/graphql")

    return app


# Create the main application instance
app = create_app()

if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "portfolio_api.api.app:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.api_reload,
        log_level=settings.log_level.lower(),
    )
