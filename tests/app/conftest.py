from typing import Generator

import pytest
from fastapi.testclient import TestClient

from ironledger.app.app import app
from ironledger.app.dependencies import session_store
from ironledger.session import SessionStore


@pytest.fixture
def client(store: SessionStore) -> Generator[TestClient, None, None]:
    """Test client whose routes share the in-memory `store` fixture."""
    app.dependency_overrides[session_store] = lambda: store
    yield TestClient(app)
    app.dependency_overrides.pop(session_store, None)
