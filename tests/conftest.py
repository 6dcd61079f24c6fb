"""
Pytest fixtures: JSON-backed stores in a temp dir and a TestClient whose
store dependencies point at them.
"""
import pytest
from fastapi.testclient import TestClient

from Storage.database import get_credential_store, get_feedback_store, open_stores


@pytest.fixture
def stores(tmp_path):
    return open_stores(data_dir=tmp_path)


@pytest.fixture
def credentials(stores):
    return stores[0]


@pytest.fixture
def feedback_store(stores):
    return stores[1]


@pytest.fixture
def client(credentials, feedback_store):
    from main import app

    app.dependency_overrides[get_credential_store] = lambda: credentials
    app.dependency_overrides[get_feedback_store] = lambda: feedback_store
    yield TestClient(app)
    app.dependency_overrides.clear()
