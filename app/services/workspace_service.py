"""Workspace lifecycle: create, read, update, analytics, member role change, delete.

Multi-write operations run inside atomic(db): the workspace, membership and
user writes (or the cascade of deletes) commit together or not at all, and the
error that aborted them reaches the caller unchanged. Callers check
permissions with app.services.authorization before calling the mutating
functions here; delete_workspace additionally requires the exact owner.
"""

from __future__ import annotations

import logging
import uuid
from datetime import UTC, datetime

from sqlalchemy.orm import Session

from app.db.session import atomic
from app.models.enums import RoleName
from app.models.membership import Membership
from app.models.user import User
from app.models.workspace import Workspace
from app.repositories import projects as projects_repo
from app.repositories import roles as roles_repo
from app.repositories import users as users_repo
from app.repositories import workspaces as workspaces_repo
from app.schemas.workspace import (
    MemberRead,
    MembershipRead,
    RoleSummary,
    WorkspaceAnalytics,
    WorkspaceDetail,
    WorkspaceMembersResponse,
    WorkspaceRead,
)
from app.services.errors import BadRequestError, MemberNotInWorkspaceError, NotFoundError
from app.services.role_registry import RoleRegistry

logger = logging.getLogger(__name__)


def provision_owned_workspace(
    db: Session,
    registry: RoleRegistry,
    owner: User,
    name: str,
    description: str | None = None,
) -> Workspace:
    """Write workspace, OWNER membership and the owner's current workspace. No commit.

    Shared by create_workspace and the registration flows, which wrap it in
    their own transaction. Raises RoleSeedError before any write when OWNER
    is not seeded.
    """
    owner_role = registry.require(RoleName.OWNER)
    workspace = workspaces_repo.create_workspace(
        db, name=name, description=description, owner_id=owner.id
    )
    workspaces_repo.create_membership(
        db, user_id=owner.id, workspace_id=workspace.id, role_id=owner_role.id
    )
    users_repo.set_current_workspace(db, owner, workspace.id)
    return workspace


def create_workspace(
    db: Session,
    registry: RoleRegistry,
    owner_id: uuid.UUID,
    name: str,
    description: str | None = None,
) -> Workspace:
    """Create a workspace owned by owner_id and make it their current workspace.

    Raises NotFoundError for an unknown owner, RoleSeedError if OWNER is not seeded.
    """
    with atomic(db):
        owner = users_repo.get_user(db, owner_id)
        if owner is None:
            raise NotFoundError("User not found")
        workspace = provision_owned_workspace(db, registry, owner, name, description)
        workspace_id = workspace.id
    logger.info("Workspace %s created by user %s", workspace_id, owner_id)
    return workspace


def list_workspaces_for_user(db: Session, user_id: uuid.UUID) -> list[Workspace]:
    """Workspaces reachable through the user's memberships, in store order."""
    memberships = workspaces_repo.list_memberships_for_user(db, user_id)
    return [m.workspace for m in memberships if m.workspace is not None]


def get_workspace_detail(db: Session, workspace_id: uuid.UUID) -> WorkspaceDetail:
    workspace = workspaces_repo.get_workspace(db, workspace_id)
    if workspace is None:
        raise NotFoundError("Workspace not found")
    memberships = workspaces_repo.list_memberships_for_workspace(db, workspace_id)
    return WorkspaceDetail(
        **WorkspaceRead.model_validate(workspace).model_dump(),
        members=[MembershipRead.model_validate(m) for m in memberships],
    )


def list_members(db: Session, workspace_id: uuid.UUID) -> WorkspaceMembersResponse:
    """Members with display fields and role name, plus every role (id and name)."""
    memberships = workspaces_repo.list_memberships_for_workspace(db, workspace_id)
    roles = roles_repo.list_roles(db)
    return WorkspaceMembersResponse(
        members=[MemberRead.model_validate(m) for m in memberships],
        roles=[RoleSummary.model_validate(r) for r in roles],
    )


def compute_analytics(
    db: Session,
    workspace_id: uuid.UUID,
    now: datetime | None = None,
) -> WorkspaceAnalytics:
    """Task counters at a point in time. Read-only and not transactional.

    Overdue: due date strictly before now and status not DONE.
    """
    if now is None:
        now = datetime.now(UTC)
    return WorkspaceAnalytics(
        total_tasks=projects_repo.count_tasks(db, workspace_id),
        overdue_tasks=projects_repo.count_overdue_tasks(db, workspace_id, now),
        completed_tasks=projects_repo.count_completed_tasks(db, workspace_id),
    )


def change_member_role(
    db: Session,
    registry: RoleRegistry,
    workspace_id: uuid.UUID,
    member_user_id: uuid.UUID,
    role_id: uuid.UUID,
) -> Membership:
    """Reassign a member's role. Last write wins under concurrent calls.

    Raises NotFoundError for an unknown workspace or role and
    MemberNotInWorkspaceError when the user has no membership here.
    """
    with atomic(db):
        if workspaces_repo.get_workspace(db, workspace_id) is None:
            raise NotFoundError("Workspace not found")
        role = registry.get_by_id(role_id)
        if role is None:
            raise NotFoundError("Role not found")
        membership = workspaces_repo.get_membership(db, member_user_id, workspace_id)
        if membership is None:
            raise MemberNotInWorkspaceError()
        membership.role_id = role.id
        db.flush()
    db.refresh(membership)
    logger.info(
        "User %s role changed to %s in workspace %s", member_user_id, role.name, workspace_id
    )
    return membership


def update_workspace(
    db: Session,
    workspace_id: uuid.UUID,
    name: str | None = None,
    description: str | None = None,
) -> Workspace:
    """Partial update. Each field is replaced only by a non-empty value.

    An empty string behaves exactly like an omitted field, so a description
    cannot be cleared through this call.
    """
    with atomic(db):
        workspace = workspaces_repo.get_workspace(db, workspace_id)
        if workspace is None:
            raise NotFoundError("Workspace not found")
        workspace.name = name or workspace.name
        workspace.description = description or workspace.description
        db.flush()
    db.refresh(workspace)
    return workspace


def delete_workspace(
    db: Session,
    workspace_id: uuid.UUID,
    requesting_user_id: uuid.UUID,
) -> uuid.UUID | None:
    """Delete a workspace and everything scoped to it. Owner only.

    Deletes projects, tasks and memberships, repoints the requester's current
    workspace when it was this one (to another membership's workspace, else
    None), then deletes the workspace, all in one transaction.
    Returns the requester's current workspace id after the delete.
    """
    with atomic(db):
        workspace = workspaces_repo.get_workspace(db, workspace_id)
        if workspace is None:
            raise NotFoundError("Workspace not found")
        if workspace.owner_id != requesting_user_id:
            raise BadRequestError("Only the workspace owner can delete this workspace")
        user = users_repo.get_user(db, requesting_user_id)
        if user is None:
            raise NotFoundError("User not found")

        projects = projects_repo.delete_projects_for_workspace(db, workspace.id)
        tasks = projects_repo.delete_tasks_for_workspace(db, workspace.id)
        members = workspaces_repo.delete_memberships_for_workspace(db, workspace.id)

        if user.current_workspace_id == workspace.id:
            fallback = workspaces_repo.first_membership_for_user(db, user.id)
            users_repo.set_current_workspace(
                db, user, fallback.workspace_id if fallback else None
            )

        workspaces_repo.delete_workspace(db, workspace)
        current_workspace_id = user.current_workspace_id

    logger.info(
        "Workspace %s deleted by owner %s (%d projects, %d tasks, %d memberships)",
        workspace_id,
        requesting_user_id,
        projects,
        tasks,
        members,
    )
    return current_workspace_id
