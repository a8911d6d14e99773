"""Shared fixtures for web tests."""

import pytest
from fastapi.testclient import TestClient

from jobly.auth import create_token
from jobly.config import AuthConfig, JoblyConfig
from jobly.web.app import create_app


@pytest.fixture
def web_config(tmp_path, monkeypatch):
    monkeypatch.delenv("JOBLY_SECRET_KEY", raising=False)
    return JoblyConfig(db_path=str(tmp_path / "test.db"), auth=AuthConfig(secret_key="web-test"))


@pytest.fixture
def web_app(web_config, db_engine):
    """A test FastAPI app backed by the seeded test DB."""
    app = create_app()
    # Override app state with test DB
    app.state.config = web_config
    app.state.engine = db_engine
    return app


@pytest.fixture
def client(web_app):
    return TestClient(web_app, raise_server_exceptions=False)


@pytest.fixture
def u1_token(web_config):
    return create_token("u1", is_admin=False, config=web_config.auth)


@pytest.fixture
def admin_token(web_config):
    return create_token("admin", is_admin=True, config=web_config.auth)


@pytest.fixture
def u1_headers(u1_token):
    return {"Authorization": f"Bearer {u1_token}"}


@pytest.fixture
def admin_headers(admin_token):
    return {"Authorization": f"Bearer {admin_token}"}
