"""Authentication service: registration, login and JWT tokens."""

from __future__ import annotations

import logging
import uuid
from datetime import UTC, datetime, timedelta
from typing import Optional

from jose import JWTError, jwt
from sqlalchemy.orm import Session

from app.config import get_settings
from app.db.session import atomic
from app.models.enums import AccountProvider
from app.models.user import User
from app.repositories import users as users_repo
from app.services.errors import EmailAlreadyRegisteredError, NotFoundError, UnauthorizedError
from app.services.role_registry import RoleRegistry
from app.services.workspace_service import provision_owned_workspace

logger = logging.getLogger(__name__)

# JWT configuration
ALGORITHM = "HS256"

DEFAULT_WORKSPACE_NAME = "My Workspace"


def _default_workspace_description(user: User) -> str:
    return f"Workspace created for {user.name}"


def register_user(
    db: Session,
    registry: RoleRegistry,
    email: str,
    name: str,
    password: str,
) -> tuple[uuid.UUID, uuid.UUID]:
    """Create user, EMAIL account, default workspace and OWNER membership atomically.

    Raises EmailAlreadyRegisteredError if the email is taken.
    Returns (user_id, workspace_id).
    """
    with atomic(db):
        if users_repo.get_user_by_email(db, email) is not None:
            raise EmailAlreadyRegisteredError()
        user = users_repo.create_user(db, email=email, name=name, password=password)
        users_repo.create_account(
            db, user_id=user.id, provider=AccountProvider.EMAIL.value, provider_id=email
        )
        workspace = provision_owned_workspace(
            db,
            registry,
            user,
            DEFAULT_WORKSPACE_NAME,
            _default_workspace_description(user),
        )
        ids = (user.id, workspace.id)
    logger.info("Registered user %s with workspace %s", ids[0], ids[1])
    return ids


def login_or_create_account(
    db: Session,
    registry: RoleRegistry,
    provider: str,
    provider_id: str,
    display_name: str,
    email: str | None = None,
    picture: str | None = None,
) -> User:
    """Return the user for an external-provider profile, creating it on first login.

    The provider account is matched first, then the email. An existing user
    arriving through a new provider gets that provider's account linked. First
    login creates user, provider account, default workspace and OWNER
    membership in one transaction.
    """
    with atomic(db):
        account = users_repo.get_account(db, provider, provider_id)
        user = users_repo.get_user(db, account.user_id) if account is not None else None
        if user is None and email:
            user = users_repo.get_user_by_email(db, email)
        if user is None:
            user = users_repo.create_user(
                db,
                email=email or f"{provider.lower()}-{provider_id}@users.noreply",
                name=display_name,
                profile_picture=picture,
            )
            provision_owned_workspace(
                db,
                registry,
                user,
                DEFAULT_WORKSPACE_NAME,
                _default_workspace_description(user),
            )
            logger.info("Created user %s on first %s login", user.id, provider)
        if account is None:
            users_repo.create_account(
                db, user_id=user.id, provider=provider, provider_id=provider_id
            )
            logger.info("Linked %s account to user %s", provider, user.id)
        user.last_login = datetime.now(UTC)
    return user


def verify_user(
    db: Session,
    email: str,
    password: str,
    provider: str = AccountProvider.EMAIL.value,
) -> User:
    """Check local credentials. Raises NotFoundError or UnauthorizedError on failure."""
    account = users_repo.get_account(db, provider, email)
    if account is None:
        raise NotFoundError("Invalid email or password")
    user = users_repo.get_user(db, account.user_id)
    if user is None:
        raise NotFoundError("User not found for the given account")
    if not user.verify_password(password):
        raise UnauthorizedError("Invalid email or password")
    with atomic(db):
        user.last_login = datetime.now(UTC)
    return user


def create_access_token(data: dict, expires_delta: Optional[timedelta] = None) -> str:
    """Create a signed JWT access token."""
    settings = get_settings()
    to_encode = data.copy()
    expire = datetime.now(UTC) + (
        expires_delta or timedelta(hours=settings.access_token_expire_hours)
    )
    to_encode.update({"exp": expire})
    return jwt.encode(to_encode, settings.secret_key, algorithm=ALGORITHM)


def decode_access_token(token: str) -> Optional[dict]:
    """Decode and validate a JWT token. Returns payload or None."""
    settings = get_settings()
    try:
        payload = jwt.decode(token, settings.secret_key, algorithms=[ALGORITHM])
        return payload
    except JWTError:
        return None


def get_user_from_token(db: Session, token: str) -> Optional[User]:
    """Extract user from a JWT token. Returns None if token invalid or user not found."""
    payload = decode_access_token(token)
    if payload is None:
        return None
    subject: Optional[str] = payload.get("sub")
    if subject is None:
        return None
    try:
        user_id = uuid.UUID(subject)
    except ValueError:
        return None
    user = users_repo.get_user(db, user_id)
    if user is None or not user.is_active:
        return None
    return user
