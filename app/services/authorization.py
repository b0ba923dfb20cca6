"""Workspace authorization: membership lookup plus role permission check.

Every mutating workspace operation except creation calls require_permission()
first. The check is one membership lookup and an in-memory registry lookup;
permissions are a flat set per role, with no inheritance between roles.
"""

from __future__ import annotations

import logging
import uuid

from sqlalchemy.orm import Session

from app.models.enums import Permission
from app.repositories import workspaces as workspaces_repo
from app.services.errors import NotFoundError, UnauthorizedError
from app.services.role_registry import RoleEntry, RoleRegistry

logger = logging.getLogger(__name__)


def _resolve_role(
    db: Session,
    registry: RoleRegistry,
    user_id: uuid.UUID,
    workspace_id: uuid.UUID,
) -> RoleEntry | None:
    membership = workspaces_repo.get_membership(db, user_id, workspace_id)
    if membership is None:
        raise NotFoundError("You are not a member of this workspace")
    return registry.get_by_id(membership.role_id)


def authorize(
    db: Session,
    registry: RoleRegistry,
    user_id: uuid.UUID,
    workspace_id: uuid.UUID,
    permission: Permission | str,
) -> bool:
    """Return True if the user's role in the workspace grants the permission.

    Raises NotFoundError when the user has no membership in the workspace.
    A membership pointing at a role unknown to the registry grants nothing.
    """
    role = _resolve_role(db, registry, user_id, workspace_id)
    if role is None:
        return False
    return role.allows(permission)


def require_permission(
    db: Session,
    registry: RoleRegistry,
    user_id: uuid.UUID,
    workspace_id: uuid.UUID,
    permission: Permission | str,
) -> None:
    """Raise UnauthorizedError unless authorize() allows the action."""
    if not authorize(db, registry, user_id, workspace_id, permission):
        logger.info(
            "Permission %s denied for user %s in workspace %s",
            permission.value if isinstance(permission, Permission) else permission,
            user_id,
            workspace_id,
        )
        raise UnauthorizedError()


def get_member_role_in_workspace(
    db: Session,
    registry: RoleRegistry,
    user_id: uuid.UUID,
    workspace_id: uuid.UUID,
) -> str:
    """Return the caller's role name; used to gate reads to members only.

    NotFoundError if the workspace does not exist or the user is not a member.
    """
    if workspaces_repo.get_workspace(db, workspace_id) is None:
        raise NotFoundError("Workspace not found")
    role = _resolve_role(db, registry, user_id, workspace_id)
    if role is None:
        raise UnauthorizedError("Membership role is not recognised")
    return role.name
