"""FastAPI dependency injection for the Jobly API."""

from typing import Generator

from fastapi import Depends, Header, Request
from sqlalchemy.orm import Session

from jobly.auth import authenticate, ensure_admin, ensure_admin_or_self, ensure_logged_in
from jobly.config import JoblyConfig
from jobly.db import get_session as db_get_session
from jobly.models import Claims


def get_config(request: Request) -> JoblyConfig:
    """Get Jobly configuration from app state."""
    return request.app.state.config


def get_db(request: Request) -> Generator[Session, None, None]:
    """Get a database session, auto-closed after request."""
    session = db_get_session(request.app.state.engine)
    try:
        yield session
    finally:
        session.close()


def get_current_user(
    authorization: str | None = Header(None),
    config: JoblyConfig = Depends(get_config),
) -> Claims | None:
    """Claims from the bearer token, or None when absent or invalid."""
    return authenticate(authorization, config.auth)


def require_logged_in(claims: Claims | None = Depends(get_current_user)) -> Claims:
    return ensure_logged_in(claims)


def require_admin(claims: Claims | None = Depends(get_current_user)) -> Claims:
    return ensure_admin(claims)


def require_admin_or_self(
    username: str,
    claims: Claims | None = Depends(get_current_user),
) -> Claims:
    """For routes with a ``{username}`` path parameter."""
    return ensure_admin_or_self(claims, username)
