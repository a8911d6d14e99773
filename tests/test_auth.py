"""Tests for token handling and authorization checks."""

import jwt
import pytest

from jobly.auth import (
    authenticate,
    create_token,
    decode_token,
    ensure_admin,
    ensure_admin_or_self,
    ensure_logged_in,
)
from jobly.config import AuthConfig
from jobly.errors import UnauthorizedError
from jobly.models import Claims


@pytest.fixture
def auth_config(monkeypatch):
    monkeypatch.delenv("JOBLY_SECRET_KEY", raising=False)
    return AuthConfig(secret_key="test-secret")


class TestTokens:
    def test_create_token_payload(self, auth_config):
        token = create_token("test", is_admin=False, config=auth_config)
        payload = jwt.decode(token, "test-secret", algorithms=["HS256"])
        assert payload["username"] == "test"
        assert payload["isAdmin"] is False
        assert isinstance(payload["iat"], int)

    def test_decode_round_trip(self, auth_config):
        claims = decode_token(create_token("u4", is_admin=True, config=auth_config), auth_config)
        assert claims.username == "u4"
        assert claims.is_admin is True
        assert claims.iat is not None

    def test_wrong_key_decodes_to_none(self, auth_config):
        bad = jwt.encode({"username": "test", "isAdmin": False}, "wrong", algorithm="HS256")
        assert decode_token(bad, auth_config) is None

    def test_garbage_decodes_to_none(self, auth_config):
        assert decode_token("not.a.token", auth_config) is None

    def test_missing_username_decodes_to_none(self, auth_config):
        token = jwt.encode({"isAdmin": True}, "test-secret", algorithm="HS256")
        assert decode_token(token, auth_config) is None

    def test_env_secret_overrides_config(self, monkeypatch):
        monkeypatch.setenv("JOBLY_SECRET_KEY", "from-env")
        token = create_token("test", config=AuthConfig(secret_key="ignored"))
        assert jwt.decode(token, "from-env", algorithms=["HS256"])["username"] == "test"


class TestAuthenticate:
    def test_bearer_header(self, auth_config):
        token = create_token("test", config=auth_config)
        claims = authenticate(f"Bearer {token}", auth_config)
        assert claims.username == "test"
        assert claims.is_admin is False

    def test_lowercase_scheme(self, auth_config):
        token = create_token("test", config=auth_config)
        assert authenticate(f"bearer {token}", auth_config).username == "test"

    def test_no_header(self, auth_config):
        assert authenticate(None, auth_config) is None
        assert authenticate("", auth_config) is None

    def test_other_scheme(self, auth_config):
        assert authenticate("Basic dXNlcjpwYXNz", auth_config) is None


class TestEnsureLoggedIn:
    def test_works(self):
        claims = Claims(username="test", is_admin=False)
        assert ensure_logged_in(claims) is claims

    def test_unauth_if_no_login(self):
        with pytest.raises(UnauthorizedError):
            ensure_logged_in(None)


class TestEnsureAdmin:
    def test_works(self):
        ensure_admin(Claims(username="u4", is_admin=True))

    def test_unauth_if_not_admin(self):
        with pytest.raises(UnauthorizedError):
            ensure_admin(Claims(username="u1", is_admin=False))

    def test_unauth_if_anon(self):
        with pytest.raises(UnauthorizedError):
            ensure_admin(None)


class TestEnsureAdminOrSelf:
    def test_works_for_admin(self):
        ensure_admin_or_self(Claims(username="u4", is_admin=True), "u1")

    def test_works_for_self(self):
        ensure_admin_or_self(Claims(username="u1", is_admin=False), "u1")

    def test_unauth_if_not_admin_or_self(self):
        with pytest.raises(UnauthorizedError):
            ensure_admin_or_self(Claims(username="u1", is_admin=False), "u3")

    def test_unauth_if_anon(self):
        with pytest.raises(UnauthorizedError):
            ensure_admin_or_self(None, "u1")
