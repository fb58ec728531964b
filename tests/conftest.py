"""
Shared test fixtures.

Every service test runs twice: once against the in-memory store
and once against SQLite through the SQL store. Both must behave
the same, so the same assertions cover both.
"""

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from bookkeeping.main import app
from bookkeeping.api.dependencies import get_storage
from bookkeeping.models import Base
from bookkeeping.stores.memory import InMemoryStorage
from bookkeeping.stores.sql import SqlStorage


# A single shared in-memory SQLite connection: no file on disk,
# no external database needed.
TEST_DATABASE_URL = "sqlite://"

engine = create_engine(
    TEST_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)

TestSessionLocal = sessionmaker(
    bind=engine,
    autocommit=False,
    autoflush=False,
)


@pytest.fixture(autouse=True)
def setup_database():
    """Create all tables before each test, drop them after."""
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def db_session():
    """Provide a database session for direct service testing."""
    session = TestSessionLocal()
    try:
        yield session
    finally:
        session.rollback()
        session.close()


@pytest.fixture(params=["memory", "sql"])
def storage(request, db_session):
    """A fresh, empty ledger on each backend."""
    if request.param == "memory":
        return InMemoryStorage()
    return SqlStorage(db_session)


@pytest.fixture
def client(storage):
    """
    Provide a test client backed by the test storage.

    We override the get_storage dependency so the FastAPI app
    uses our storage instead of the configured backend.
    """
    app.dependency_overrides[get_storage] = lambda: storage
    yield TestClient(app)
    app.dependency_overrides.clear()
