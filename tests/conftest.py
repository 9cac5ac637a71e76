import pytest
from fastapi.testclient import TestClient
from server.config import Settings
from server.main import create_app


def make_settings(**overrides) -> Settings:
    values = {
        "DATABASE_URL": "sqlite://",
        "LOG_LEVEL": "WARNING",
        "REQUIRE_AUTH_TO_POST": False,
        "ACCESS_TOKEN_TTL_MINUTES": None,
    }
    values.update(overrides)
    return Settings(**values)


@pytest.fixture
def settings():
    return make_settings()


@pytest.fixture
def app(settings):
    return create_app(settings)


@pytest.fixture
def client(app):
    with TestClient(app) as c:
        yield c


@pytest.fixture
def db(app):
    session = app.state.session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def alice(client):
    """Registers alice and returns the registration response payload."""
    res = client.post("/register", json={"username": "alice", "password": "password1"})
    assert res.status_code == 201
    return res.json()["response"]
