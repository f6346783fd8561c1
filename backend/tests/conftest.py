"""Pytest configuration and fixtures."""
import pytest
from fastapi.testclient import TestClient

from helpers import bearer, make_principal
from pmo.config import Settings
from pmo.core.permissions import Role
from pmo.main import create_app
from pmo.stores.memory import InMemoryStore


@pytest.fixture
def store():
    """Fresh in-memory store per test."""
    return InMemoryStore()


@pytest.fixture
def app(store):
    return create_app(settings=Settings(LOG_LEVEL="WARNING"), store=store)


@pytest.fixture
def client(app):
    """Test client with the app lifespan running."""
    with TestClient(app) as c:
        yield c


@pytest.fixture
def admin():
    return make_principal(Role.ADMIN)


@pytest.fixture
def staff():
    return make_principal(Role.STAFF)


@pytest.fixture
def client_user():
    return make_principal(Role.CLIENT)


@pytest.fixture
def other_client_user():
    return make_principal(Role.CLIENT)


@pytest.fixture
def auth():
    """Build an Authorization header for a principal."""
    return bearer
