"""Token issuance, decoding and authorization checks.

An absent or invalid token is not an error here: it decodes to ``None``
and the predicates below decide whether that is acceptable for a route.
"""

import logging
import time

import jwt
from pydantic import ValidationError

from jobly.config import AuthConfig
from jobly.errors import UnauthorizedError
from jobly.models import Claims

logger = logging.getLogger(__name__)


def create_token(username: str, is_admin: bool = False, config: AuthConfig | None = None) -> str:
    """Sign a token carrying username, isAdmin and iat."""
    config = config or AuthConfig()
    payload = {"username": username, "isAdmin": is_admin, "iat": int(time.time())}
    return jwt.encode(payload, config.effective_secret_key, algorithm=config.algorithm)


def decode_token(token: str, config: AuthConfig | None = None) -> Claims | None:
    """Verify and decode a token. Returns None if it is not acceptable."""
    config = config or AuthConfig()
    try:
        payload = jwt.decode(token, config.effective_secret_key, algorithms=[config.algorithm])
        return Claims.model_validate(payload)
    except (jwt.PyJWTError, ValidationError) as e:
        logger.debug("Rejected token: %s", e)
        return None


def authenticate(authorization: str | None, config: AuthConfig | None = None) -> Claims | None:
    """Decode an ``Authorization: Bearer <token>`` header value."""
    if not authorization:
        return None
    scheme, _, token = authorization.strip().partition(" ")
    if scheme.lower() != "bearer" or not token:
        return None
    return decode_token(token.strip(), config)


def ensure_logged_in(claims: Claims | None) -> Claims:
    if claims is None:
        raise UnauthorizedError()
    return claims


def ensure_admin(claims: Claims | None) -> Claims:
    if claims is None or not claims.is_admin:
        raise UnauthorizedError()
    return claims


def ensure_admin_or_self(claims: Claims | None, username: str | None) -> Claims:
    """Pass admins, or the user named in the route."""
    if claims is None:
        raise UnauthorizedError()
    if claims.is_admin or (username is not None and claims.username == username):
        return claims
    raise UnauthorizedError()
