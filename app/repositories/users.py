"""User and account store."""

from __future__ import annotations

import uuid

from sqlalchemy.orm import Session

from app.models.account import Account
from app.models.user import User


def get_user(db: Session, user_id: uuid.UUID) -> User | None:
    return db.query(User).filter(User.id == user_id).first()


def get_user_by_email(db: Session, email: str) -> User | None:
    return db.query(User).filter(User.email == email).first()


def create_user(
    db: Session,
    *,
    email: str,
    name: str,
    password: str | None = None,
    profile_picture: str | None = None,
) -> User:
    """Insert a user. Password is hashed with bcrypt when given."""
    user = User(email=email, name=name, profile_picture=profile_picture)
    if password:
        user.set_password(password)
    db.add(user)
    db.flush()
    return user


def set_current_workspace(db: Session, user: User, workspace_id: uuid.UUID | None) -> User:
    user.current_workspace_id = workspace_id
    db.flush()
    return user


def get_account(db: Session, provider: str, provider_id: str) -> Account | None:
    return (
        db.query(Account)
        .filter(Account.provider == provider, Account.provider_id == provider_id)
        .first()
    )


def create_account(
    db: Session,
    *,
    user_id: uuid.UUID,
    provider: str,
    provider_id: str,
) -> Account:
    account = Account(user_id=user_id, provider=provider, provider_id=provider_id)
    db.add(account)
    db.flush()
    return account
