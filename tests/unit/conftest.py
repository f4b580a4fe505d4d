"""Pytest fixtures for API tests."""

import pytest
from fastapi.testclient import TestClient

from contos.api import config
from contos.api.auth.sessions import InMemorySessionStore
from contos.api.dependencies import get_session_store
from contos.api.main import app
from contos.api.store import InMemoryDocumentStore, get_store

TEST_PASSWORD = "test-admin-password"


class FakeClock:
    """Deterministic epoch-ms clock that ticks 1ms per reading."""

    def __init__(self, start: int = 1_700_000_000_000, step: int = 1):
        self.now = start
        self.step = step

    def __call__(self) -> int:
        value = self.now
        self.now += self.step
        return value

    def advance(self, ms: int) -> None:
        self.now += ms


@pytest.fixture(autouse=True)
def admin_password(monkeypatch):
    """Use a known admin password for every test."""
    monkeypatch.setattr(config, "ADMIN_PASSWORD", TEST_PASSWORD)
    return TEST_PASSWORD


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def store():
    """Fresh in-memory document store."""
    return InMemoryDocumentStore()


@pytest.fixture
def sessions():
    """Fresh session store."""
    return InMemorySessionStore()


@pytest.fixture
def client(store, sessions):
    """TestClient wired to the test store and session store."""
    app.dependency_overrides[get_store] = lambda: store
    app.dependency_overrides[get_session_store] = lambda: sessions

    with TestClient(app) as client:
        yield client

    app.dependency_overrides.clear()


@pytest.fixture
def admin_client(client):
    """TestClient holding a logged-in admin session cookie."""
    response = client.post("/api/auth/admin", json={"password": TEST_PASSWORD})
    assert response.status_code == 200
    return client


@pytest.fixture
def story_payload():
    return {
        "title": "A",
        "content": "B",
        "coverImageUrl": "http://x/y.png",
    }
