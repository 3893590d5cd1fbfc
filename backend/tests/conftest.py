"""
Fixtures shared by the test suite: an in-memory SQLite store, a session on it,
and a TestClient bound to the app.
"""
import pytest
from fastapi.testclient import TestClient

from workforce.core.config import reset_settings
from workforce.db.session import Base, create_schema, get_engine, get_session_factory, reset_engine


@pytest.fixture(autouse=True)
def database(monkeypatch):
    """Point the app at a fresh in-memory database for every test."""
    monkeypatch.setenv("DATABASE_URL", "sqlite://")
    monkeypatch.setenv("APPLICATION_NAME", "workforceApp")
    reset_settings()
    reset_engine()
    create_schema()
    yield
    Base.metadata.drop_all(get_engine())
    reset_engine()
    reset_settings()


@pytest.fixture
def db():
    """A session whose work is rolled back after the test."""
    session = get_session_factory()()
    try:
        yield session
    finally:
        session.rollback()
        session.close()


@pytest.fixture
def client():
    from main import app

    with TestClient(app) as c:
        yield c
