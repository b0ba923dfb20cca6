"""Workspace and membership store."""

from __future__ import annotations

import uuid
from datetime import UTC, datetime

from sqlalchemy.orm import Session, joinedload

from app.models.membership import Membership
from app.models.workspace import Workspace


def get_workspace(db: Session, workspace_id: uuid.UUID) -> Workspace | None:
    return db.query(Workspace).filter(Workspace.id == workspace_id).first()


def get_workspace_by_invite_code(db: Session, invite_code: str) -> Workspace | None:
    return db.query(Workspace).filter(Workspace.invite_code == invite_code).first()


def create_workspace(
    db: Session,
    *,
    name: str,
    owner_id: uuid.UUID,
    description: str | None = None,
) -> Workspace:
    workspace = Workspace(name=name, description=description, owner_id=owner_id)
    db.add(workspace)
    db.flush()
    return workspace


def delete_workspace(db: Session, workspace: Workspace) -> None:
    db.delete(workspace)
    db.flush()


def get_membership(
    db: Session, user_id: uuid.UUID, workspace_id: uuid.UUID
) -> Membership | None:
    return (
        db.query(Membership)
        .filter(Membership.user_id == user_id, Membership.workspace_id == workspace_id)
        .first()
    )


def create_membership(
    db: Session,
    *,
    user_id: uuid.UUID,
    workspace_id: uuid.UUID,
    role_id: uuid.UUID,
) -> Membership:
    membership = Membership(
        user_id=user_id,
        workspace_id=workspace_id,
        role_id=role_id,
        joined_at=datetime.now(UTC),
    )
    db.add(membership)
    db.flush()
    return membership


def list_memberships_for_user(db: Session, user_id: uuid.UUID) -> list[Membership]:
    return (
        db.query(Membership)
        .options(joinedload(Membership.workspace))
        .filter(Membership.user_id == user_id)
        .all()
    )


def list_memberships_for_workspace(db: Session, workspace_id: uuid.UUID) -> list[Membership]:
    """Memberships with user and role eagerly loaded, oldest first."""
    return (
        db.query(Membership)
        .options(joinedload(Membership.user), joinedload(Membership.role))
        .filter(Membership.workspace_id == workspace_id)
        .order_by(Membership.joined_at.asc())
        .all()
    )


def first_membership_for_user(db: Session, user_id: uuid.UUID) -> Membership | None:
    return db.query(Membership).filter(Membership.user_id == user_id).first()


def count_memberships(db: Session, workspace_id: uuid.UUID) -> int:
    return db.query(Membership).filter(Membership.workspace_id == workspace_id).count()


def delete_memberships_for_workspace(db: Session, workspace_id: uuid.UUID) -> int:
    """Bulk delete. Returns number of rows removed."""
    return (
        db.query(Membership)
        .filter(Membership.workspace_id == workspace_id)
        .delete(synchronize_session="fetch")
    )
