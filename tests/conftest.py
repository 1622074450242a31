"""
pytest Fixtures for the LMS Catalog API Tests

Shared fixtures used across all test files.

For database tests, we use:
- session scope for the engine (expensive to create)
- function scope for sessions (isolation between tests)
"""

# =============================================================================
# TEST ENVIRONMENT SETUP
# =============================================================================
# Set environment variables BEFORE importing the app so the application
# engine is built against SQLite instead of PostgreSQL.
import os

os.environ["DATABASE_URL"] = "sqlite:///:memory:"
os.environ["API_PREFIX"] = ""

from collections.abc import Generator

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from lms_catalog.database import Base, get_db
from lms_catalog.main import app
from lms_catalog.models import Author, Book, Publisher

# =============================================================================
# DATABASE FIXTURES
# =============================================================================
# SQLite in-memory: fast, isolated, no external database needed.


@pytest.fixture(scope="session")
def engine():
    """
    Create a SQLite in-memory database engine.

    StaticPool keeps the single connection alive for the whole session;
    without it the in-memory database would vanish between connections.
    """
    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    Base.metadata.create_all(bind=engine)

    yield engine

    Base.metadata.drop_all(bind=engine)


@pytest.fixture(scope="function")
def db_session(engine) -> Generator[Session, None, None]:
    """
    Create a fresh database session for each test.

    The session joins an outer transaction that is rolled back after the
    test, so commits made by the code under test never leak between tests.
    """
    TestSessionLocal = sessionmaker(
        autocommit=False,
        autoflush=False,
        bind=engine,
    )

    connection = engine.connect()
    transaction = connection.begin()
    session = TestSessionLocal(bind=connection)

    yield session

    session.close()
    transaction.rollback()
    connection.close()


@pytest.fixture(scope="function")
def client(db_session: Session) -> Generator[TestClient, None, None]:
    """
    Create a test client with the test database.

    The get_db dependency is overridden to hand out the test session.
    """

    def override_get_db():
        """Provide test database session instead of real one."""
        try:
            yield db_session
        finally:
            pass  # Session cleanup handled by db_session fixture

    app.dependency_overrides[get_db] = override_get_db

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()


# =============================================================================
# SAMPLE DATA FIXTURES
# =============================================================================


@pytest.fixture
def sample_author(db_session: Session) -> Author:
    """Create a sample author for testing."""
    author = Author(name="J.R.R. Tolkien")
    db_session.add(author)
    db_session.commit()
    db_session.refresh(author)
    return author


@pytest.fixture
def second_author(db_session: Session) -> Author:
    """Create a second author for reassignment scenarios."""
    author = Author(name="Ursula K. Le Guin")
    db_session.add(author)
    db_session.commit()
    db_session.refresh(author)
    return author


@pytest.fixture
def sample_publisher(db_session: Session) -> Publisher:
    """Create a sample publisher for testing."""
    publisher = Publisher(
        name="Allen & Unwin",
        address="London",
        phone="020 7946 0000",
    )
    db_session.add(publisher)
    db_session.commit()
    db_session.refresh(publisher)
    return publisher


@pytest.fixture
def second_publisher(db_session: Session) -> Publisher:
    """Create a second publisher for reassignment scenarios."""
    publisher = Publisher(name="Ace Books", address="New York", phone="")
    db_session.add(publisher)
    db_session.commit()
    db_session.refresh(publisher)
    return publisher


@pytest.fixture
def sample_book(
    db_session: Session,
    sample_author: Author,
    sample_publisher: Publisher,
) -> Book:
    """Create a sample book referencing the sample author and publisher."""
    book = Book(
        title="The Hobbit",
        author=sample_author,
        publisher=sample_publisher,
    )
    db_session.add(book)
    db_session.commit()
    db_session.refresh(book)
    return book
