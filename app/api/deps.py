"""Shared FastAPI dependencies for API routes."""

from __future__ import annotations

import logging

from fastapi import Cookie, Depends, Header, HTTPException, Request, status
from sqlalchemy.orm import Session

from app.db.session import get_db  # re-export
from app.models.enums import RoleName
from app.models.user import User
from app.services.auth import get_user_from_token
from app.services.role_registry import RoleRegistry, load_role_registry

__all__ = [
    "get_db",
    "get_current_user",
    "get_role_registry",
    "require_auth",
]

logger = logging.getLogger(__name__)

# Cookie name for browser sessions
AUTH_COOKIE = "access_token"


def get_current_user(
    db: Session = Depends(get_db),
    authorization: str | None = Header(None),
    access_token: str | None = Cookie(None),
) -> User | None:
    """Return the authenticated user or None.

    Checks (in order):
    1. Authorization: Bearer <token> header
    2. access_token cookie
    """
    token: str | None = None

    # Check Authorization header
    if authorization and authorization.startswith("Bearer "):
        token = authorization[len("Bearer ") :]

    # Fall back to cookie
    if token is None and access_token:
        token = access_token

    if token is None:
        return None

    return get_user_from_token(db, token)


def require_auth(
    user: User | None = Depends(get_current_user),
) -> User:
    """Dependency that requires authentication. Returns 401 when missing or invalid."""
    if user is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
        )
    return user


def get_role_registry(request: Request, db: Session = Depends(get_db)) -> RoleRegistry:
    """Return the process-wide role registry built at startup.

    When startup did not build it (e.g. lifespan not run), it is loaded once
    from the roles table and kept only if every role is present.
    """
    registry: RoleRegistry | None = getattr(request.app.state, "role_registry", None)
    if registry is not None:
        return registry
    registry = load_role_registry(db)
    if all(role in registry for role in RoleName):
        request.app.state.role_registry = registry
    return registry
