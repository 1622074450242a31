"""
FastAPI Application Entry Point

This module creates and configures the FastAPI application.

Key Concepts:
=============

1. Application Factory Pattern
   - create_app() returns a configured app
   - Tests can build fresh instances

2. Lifespan Events
   - startup/shutdown logging around the application's lifetime

3. Middleware Stack
   - CORS: Allow cross-origin requests from configured origins

4. Exception Handlers
   - RetrieveError → 404 with the descriptive message
   - TransactionError / SQLAlchemyError → 500 with a generic message
   - Anything else → 500 (details only in debug mode)
"""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from lms_catalog.config import get_settings
from lms_catalog.dependencies import DbSession
from lms_catalog.exceptions import RetrieveError, TransactionError
from lms_catalog.routers import authors_router, books_router, publishers_router

# =============================================================================
# Logging Configuration
# =============================================================================
settings = get_settings()

logging.basicConfig(
    level=getattr(logging, settings.log_level),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

DATABASE_ERROR_DETAIL = "A database error occurred. Please try again later."


# =============================================================================
# Lifespan Events
# =============================================================================
@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Application lifespan context manager.

    Code before yield runs on startup, code after yield on shutdown.
    """
    logger.info(f"Starting {settings.app_name}...")
    logger.info(f"Debug mode: {settings.debug}")
    logger.info(f"Environment: {settings.environment}")

    yield

    logger.info(f"Shutting down {settings.app_name}...")


# =============================================================================
# Application Factory
# =============================================================================
def create_app() -> FastAPI:
    """
    Create and configure the FastAPI application.

    Returns:
        Configured FastAPI application instance
    """
    app = FastAPI(
        title=settings.app_name,
        description="""
## LMS Catalog API

Cataloging endpoints for the library-management system.

### Resources
- **Authors**: `/authors`, `/author/{id}`
- **Publishers**: `/publishers`, `/publisher/{id}`
- **Books**: `/books`, `/book/{id}`, with nested author and publisher

### Authentication
Currently open access.
        """,
        version=settings.api_version,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )

    # -------------------------------------------------------------------------
    # CORS Middleware
    # -------------------------------------------------------------------------
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # -------------------------------------------------------------------------
    # Exception Handlers
    # -------------------------------------------------------------------------
    @app.exception_handler(RetrieveError)
    async def retrieve_exception_handler(
        request: Request,
        exc: RetrieveError,
    ) -> JSONResponse:
        """Entity lookups that came back empty become 404s."""
        logger.info(f"{request.method} {request.url.path}: {exc.message}")
        return JSONResponse(
            status_code=status.HTTP_404_NOT_FOUND,
            content={"detail": exc.message},
        )

    @app.exception_handler(TransactionError)
    async def transaction_exception_handler(
        request: Request,
        exc: TransactionError,
    ) -> JSONResponse:
        """
        Handle failures reported by the catalog service.

        The service has already logged the underlying database error and
        rolled back; the client only gets a generic message.
        """
        logger.error(f"{request.method} {request.url.path}: {exc.message}")
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"detail": DATABASE_ERROR_DETAIL},
        )

    @app.exception_handler(SQLAlchemyError)
    async def sqlalchemy_exception_handler(
        request: Request,
        exc: SQLAlchemyError,
    ) -> JSONResponse:
        """Database errors raised outside the catalog service."""
        logger.error(f"Database error: {exc}")
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"detail": DATABASE_ERROR_DETAIL},
        )

    @app.exception_handler(Exception)
    async def general_exception_handler(
        request: Request,
        exc: Exception,
    ) -> JSONResponse:
        """
        Catch-all exception handler.

        In production, hide internal errors from users.
        In debug mode, show more details.
        """
        logger.error(f"Unhandled error: {exc}", exc_info=True)

        if settings.debug:
            return JSONResponse(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                content={"detail": str(exc)},
            )

        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"detail": "An internal error occurred."},
        )

    # -------------------------------------------------------------------------
    # Register Routers
    # -------------------------------------------------------------------------
    # settings.api_prefix is "" by default, so routes live at /authors,
    # /book/{id}, ... Set API_PREFIX=/api/v1 to mount them under a version.
    app.include_router(authors_router, prefix=settings.api_prefix)
    app.include_router(publishers_router, prefix=settings.api_prefix)
    app.include_router(books_router, prefix=settings.api_prefix)

    # -------------------------------------------------------------------------
    # Health Check Endpoint
    # -------------------------------------------------------------------------
    @app.get(
        "/health",
        tags=["Health"],
        summary="Health check",
        description="Check if the API is running and the database answers.",
    )
    def health_check(db: DbSession) -> dict:
        """
        Health check endpoint for load balancers and container orchestrators.

        Reports "unavailable" for the database instead of failing, so the
        caller can tell a dead process from a dead database.
        """
        try:
            db.execute(text("SELECT 1"))
            database = "ok"
        except SQLAlchemyError as exc:
            logger.warning(f"Health check could not reach the database: {exc}")
            database = "unavailable"

        return {
            "status": "healthy",
            "app": settings.app_name,
            "version": settings.api_version,
            "database": database,
        }

    @app.get(
        "/",
        tags=["Root"],
        summary="API root",
        description="Welcome message and API information.",
    )
    async def root() -> dict:
        """Root endpoint with API information."""
        return {
            "message": f"Welcome to {settings.app_name}",
            "version": settings.api_version,
            "docs": "/docs",
            "health": "/health",
        }

    return app


# =============================================================================
# Application Instance
# =============================================================================
# This is what uvicorn imports: uvicorn lms_catalog.main:app

app = create_app()


# =============================================================================
# Development Server
# =============================================================================
# python -m lms_catalog.main

if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "lms_catalog.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
    )
