"""Workspace membership: join by invite code, add a member directly."""

from __future__ import annotations

import logging
import uuid

from sqlalchemy.orm import Session

from app.db.session import atomic
from app.models.enums import RoleName
from app.models.membership import Membership
from app.repositories import users as users_repo
from app.repositories import workspaces as workspaces_repo
from app.services.errors import BadRequestError, NotFoundError
from app.services.role_registry import RoleRegistry

logger = logging.getLogger(__name__)


def _add_membership(
    db: Session,
    registry: RoleRegistry,
    workspace_id: uuid.UUID,
    user_id: uuid.UUID,
    role_name: RoleName | str,
) -> Membership:
    role = registry.get_by_name(role_name)
    if role is None:
        raise NotFoundError(f"Role {role_name} not found")
    if workspaces_repo.get_membership(db, user_id, workspace_id) is not None:
        raise BadRequestError("User is already a member of this workspace")
    return workspaces_repo.create_membership(
        db, user_id=user_id, workspace_id=workspace_id, role_id=role.id
    )


def join_workspace_by_invite(
    db: Session,
    registry: RoleRegistry,
    invite_code: str,
    user_id: uuid.UUID,
) -> Membership:
    """Join the workspace behind invite_code as MEMBER.

    NotFoundError for an unknown code, BadRequestError if already a member.
    """
    with atomic(db):
        workspace = workspaces_repo.get_workspace_by_invite_code(db, invite_code)
        if workspace is None:
            raise NotFoundError("Invalid invite code or workspace not found")
        membership = _add_membership(db, registry, workspace.id, user_id, RoleName.MEMBER)
    logger.info("User %s joined workspace %s by invite", user_id, membership.workspace_id)
    return membership


def add_member(
    db: Session,
    registry: RoleRegistry,
    workspace_id: uuid.UUID,
    email: str,
    role_name: RoleName | str = RoleName.MEMBER,
) -> Membership:
    """Add an existing user (by email) to the workspace with the given role.

    OWNER cannot be granted this way: each workspace has exactly one owner.
    """
    key = role_name.value if isinstance(role_name, RoleName) else role_name
    if key == RoleName.OWNER.value:
        raise BadRequestError("A workspace has exactly one owner")
    with atomic(db):
        if workspaces_repo.get_workspace(db, workspace_id) is None:
            raise NotFoundError("Workspace not found")
        user = users_repo.get_user_by_email(db, email)
        if user is None:
            raise NotFoundError("User not found")
        membership = _add_membership(db, registry, workspace_id, user.id, key)
    logger.info("User %s added to workspace %s as %s", membership.user_id, workspace_id, key)
    return membership
