"""
Shared fixtures for the library API tests.
"""
from unittest.mock import AsyncMock

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine

from library_api.api.deps import get_author_store
from library_api.main import app
from library_api.models.author import create_schema


@pytest.fixture
def author_store():
    """Store double; set `get_all_authors.return_value` / `side_effect` per test."""
    store = AsyncMock()
    store.get_all_authors.return_value = []
    return store


@pytest.fixture
def client(author_store):
    app.dependency_overrides[get_author_store] = lambda: author_store
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def engine(tmp_path):
    db_engine = create_engine(f"sqlite:///{tmp_path / 'library.db'}")
    create_schema(db_engine)
    yield db_engine
    db_engine.dispose()
