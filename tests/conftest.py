import os

# Point the app at the test database before anything builds the engine.
os.environ["DATABASE_URL"] = os.environ.get(
    "TEST_DATABASE_URL", "sqlite+pysqlite:///:memory:"
)

import pytest
from fastapi.testclient import TestClient

from app.main import app
from app.db.session import engine, SessionLocal
from app.models.base import Base


@pytest.fixture(autouse=True)
def setup_test_database():
    """Fresh tables for every test."""
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def db_session():
    """Create a fresh database session for each test."""
    session = SessionLocal()
    try:
        yield session
    finally:
        session.rollback()
        session.close()


@pytest.fixture
def test_client():
    """Create a test client for FastAPI app."""
    return TestClient(app)


@pytest.fixture
def lenient_client():
    """Test client that returns 500 responses instead of re-raising."""
    return TestClient(app, raise_server_exceptions=False)


@pytest.fixture
def headers_with_correlation():
    """HTTP headers with correlation ID."""
    return {"X-Request-ID": "test-request-123"}


@pytest.fixture
def sample_author(test_client):
    """Create a sample author through the API."""
    response = test_client.post("/api/authors", json={"name": "Ada Lovelace"})
    assert response.status_code == 201, f"Failed to create sample author: {response.text}"
    return response.json()


@pytest.fixture
def sample_book(test_client, sample_author):
    """Create a sample book through the API."""
    book_data = {
        "title": "Notes on the Analytical Engine",
        "authorId": sample_author["id"],
        "year": 1843,
    }
    response = test_client.post("/api/books", json=book_data)
    assert response.status_code == 201, f"Failed to create sample book: {response.text}"
    return response.json()


# Fixtures for service tests that need SQLAlchemy model objects
@pytest.fixture
def sample_author_model(db_session):
    """Create a sample author model for service tests."""
    from app.models.author import Author

    author = Author(name="Grace Hopper")
    db_session.add(author)
    db_session.commit()
    db_session.refresh(author)
    return author


@pytest.fixture
def sample_book_model(db_session, sample_author_model):
    """Create a sample book model for service tests."""
    from app.models.book import Book

    book = Book(title="Compiler Notes", year=1952, author_id=sample_author_model.id)
    db_session.add(book)
    db_session.commit()
    db_session.refresh(book)
    return book
