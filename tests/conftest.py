"""Shared pytest fixtures for all tests."""

import os

# Must be set before the application modules are imported.
os.environ["URL"] = "sqlite://"
os.environ["DEBUG"] = "true"

import pytest
from fastapi.testclient import TestClient

from models import Base, SessionLocal, engine
from services.base import Services
from tests.helpers import admin_data, client_data, register_admin, register_client


@pytest.fixture
def test_db():
    """Create every table in the in-memory database and drop them afterwards.

    Yields:
        Session: SQLAlchemy session bound to the test database.
    """
    Base.metadata.create_all(bind=engine)
    db = SessionLocal()
    yield db
    db.close()
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def services(test_db):
    """Create a Services container with test database.

    Returns:
        Services: Services container for testing.
    """
    return Services(test_db)


@pytest.fixture
def admin_token(services):
    """Session token of a freshly registered administrator."""
    return register_admin(services)


@pytest.fixture
def client_token(services):
    """Session token of a freshly registered client."""
    return register_client(services)


@pytest.fixture
def http():
    """Factory of HTTP clients over the application, with an empty database.

    Each client keeps its own session cookie, so one client is one user.
    The lifespan is not run: tables are created here and the shared
    in-memory connection must stay open between tests.
    """
    from main import app

    Base.metadata.create_all(bind=engine)
    yield lambda: TestClient(app)
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def admin_http(http):
    """HTTP client logged in as a freshly registered administrator."""
    client = http()
    response = client.post("/api/admins", json=admin_data())
    assert response.status_code == 200
    return client


@pytest.fixture
def client_http(http):
    """HTTP client logged in as a freshly registered client."""
    client = http()
    response = client.post("/api/clients", json=client_data())
    assert response.status_code == 200
    return client
