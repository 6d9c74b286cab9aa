"""Shared fixtures: one fresh SQLite file and one app per test."""

import pytest
from fastapi.testclient import TestClient

from construction_office.config import Settings
from construction_office.main import create_app

from .payloads import ADMIN


@pytest.fixture
def settings(tmp_path):
    return Settings(
        DATABASE_URL=f"sqlite:///{tmp_path / 'test.db'}",
        LOG_LEVEL="WARNING",
        APP_ENV="dev",
    )


@pytest.fixture
def app(settings):
    app = create_app(settings)
    yield app
    app.state.store.dispose()


@pytest.fixture
def client(app):
    """Anonymous client, no session cookie."""
    with TestClient(app) as c:
        yield c


@pytest.fixture
def auth_client(app):
    """Client logged in as the seeded administrator."""
    with TestClient(app) as c:
        r = c.post("/api/login", json=ADMIN)
        assert r.status_code == 200
        yield c
