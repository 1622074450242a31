"""
Database Configuration Module

This module sets up SQLAlchemy 2.0 for the catalog.

PostgreSQL (psycopg2) is the default backend; SQLite URLs are accepted
for local development and tests.

Session Management Pattern
==========================
We use the "session per request" pattern:
1. Request arrives → create a new session
2. The catalog service uses that session for every lookup and write
3. Each service mutation commits its own unit of work
4. Close session when request ends

This is implemented using FastAPI's dependency injection.
"""

from collections.abc import Generator

from sqlalchemy import create_engine
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker

from lms_catalog.config import get_settings

settings = get_settings()


# =============================================================================
# Database Engine
# =============================================================================
# - pool_size / max_overflow: connection pool sizing (not used by SQLite)
# - pool_pre_ping: Test connection health before using
# - echo: Log all SQL statements in debug mode

if settings.is_sqlite:
    engine = create_engine(
        settings.database_url,
        connect_args={"check_same_thread": False},
        echo=settings.debug,
    )
else:
    engine = create_engine(
        settings.database_url,
        pool_size=settings.db_pool_size,
        max_overflow=settings.db_max_overflow,
        pool_pre_ping=True,
        echo=settings.debug,
    )


# =============================================================================
# Session Factory
# =============================================================================
SessionLocal = sessionmaker(
    autocommit=False,
    autoflush=False,
    bind=engine,
)


# =============================================================================
# Base Model Class
# =============================================================================
class Base(DeclarativeBase):
    """
    Base class for all SQLAlchemy models.

    Alembic reads Base.metadata to discover tables for migrations.
    """
    pass


# =============================================================================
# Dependency Injection
# =============================================================================
def get_db() -> Generator[Session, None, None]:
    """
    Database session dependency for FastAPI.

    Creates a session, yields it to the route handler, and closes it
    when the request ends (in the finally block, even on errors).
    Uncommitted changes are discarded when the session closes.

    Usage in Routes:
        from lms_catalog.dependencies import DbSession

        @router.get("/authors")
        def list_authors(db: DbSession):
            ...

    Yields:
        SQLAlchemy Session instance
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


# =============================================================================
# Utility Functions
# =============================================================================
def create_tables() -> None:
    """
    Create all database tables.

    Used by scripts/seed_data.py for development. In production, use Alembic
    migrations instead.
    """
    Base.metadata.create_all(bind=engine)
