"""Workspace API routes.

Reads require membership; mutations require the matching permission, checked
before the service runs. Deletion additionally requires the exact owner.
"""

from __future__ import annotations

from uuid import UUID

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from app.api.deps import get_db, get_role_registry, require_auth
from app.models.enums import Permission
from app.models.user import User
from app.schemas.workspace import (
    ChangeMemberRoleRequest,
    DeleteWorkspaceResponse,
    MembershipRead,
    WorkspaceAnalytics,
    WorkspaceCreate,
    WorkspaceDetail,
    WorkspaceListResponse,
    WorkspaceMembersResponse,
    WorkspaceRead,
    WorkspaceUpdate,
)
from app.services import workspace_service
from app.services.authorization import get_member_role_in_workspace, require_permission
from app.services.role_registry import RoleRegistry

router = APIRouter()


@router.post("/create/new", status_code=status.HTTP_201_CREATED)
def api_create_workspace(
    body: WorkspaceCreate,
    db: Session = Depends(get_db),
    registry: RoleRegistry = Depends(get_role_registry),
    user: User = Depends(require_auth),
) -> dict:
    """Create a workspace owned by the caller and switch to it."""
    workspace = workspace_service.create_workspace(
        db, registry, user.id, body.name, body.description
    )
    return {
        "message": "Workspace created successfully",
        "workspace": WorkspaceRead.model_validate(workspace),
    }


@router.get("/all", response_model=WorkspaceListResponse)
def api_list_workspaces(
    db: Session = Depends(get_db),
    user: User = Depends(require_auth),
) -> WorkspaceListResponse:
    """List every workspace the caller is a member of."""
    workspaces = workspace_service.list_workspaces_for_user(db, user.id)
    return WorkspaceListResponse(
        workspaces=[WorkspaceRead.model_validate(w) for w in workspaces]
    )


@router.get("/members/{workspace_id}", response_model=WorkspaceMembersResponse)
def api_list_members(
    workspace_id: UUID,
    db: Session = Depends(get_db),
    registry: RoleRegistry = Depends(get_role_registry),
    user: User = Depends(require_auth),
) -> WorkspaceMembersResponse:
    get_member_role_in_workspace(db, registry, user.id, workspace_id)
    return workspace_service.list_members(db, workspace_id)


@router.get("/analytics/{workspace_id}", response_model=WorkspaceAnalytics)
def api_workspace_analytics(
    workspace_id: UUID,
    db: Session = Depends(get_db),
    registry: RoleRegistry = Depends(get_role_registry),
    user: User = Depends(require_auth),
) -> WorkspaceAnalytics:
    get_member_role_in_workspace(db, registry, user.id, workspace_id)
    return workspace_service.compute_analytics(db, workspace_id)


@router.put("/change/member/role/{workspace_id}")
def api_change_member_role(
    workspace_id: UUID,
    body: ChangeMemberRoleRequest,
    db: Session = Depends(get_db),
    registry: RoleRegistry = Depends(get_role_registry),
    user: User = Depends(require_auth),
) -> dict:
    require_permission(db, registry, user.id, workspace_id, Permission.CHANGE_MEMBER_ROLE)
    membership = workspace_service.change_member_role(
        db, registry, workspace_id, body.member_id, body.role_id
    )
    return {
        "message": "Member role changed successfully",
        "member": MembershipRead.model_validate(membership),
    }


@router.put("/update/{workspace_id}")
def api_update_workspace(
    workspace_id: UUID,
    body: WorkspaceUpdate,
    db: Session = Depends(get_db),
    registry: RoleRegistry = Depends(get_role_registry),
    user: User = Depends(require_auth),
) -> dict:
    require_permission(db, registry, user.id, workspace_id, Permission.EDIT_WORKSPACE)
    workspace = workspace_service.update_workspace(
        db, workspace_id, name=body.name, description=body.description
    )
    return {
        "message": "Workspace updated successfully",
        "workspace": WorkspaceRead.model_validate(workspace),
    }


@router.delete("/delete/{workspace_id}", response_model=DeleteWorkspaceResponse)
def api_delete_workspace(
    workspace_id: UUID,
    db: Session = Depends(get_db),
    registry: RoleRegistry = Depends(get_role_registry),
    user: User = Depends(require_auth),
) -> DeleteWorkspaceResponse:
    require_permission(db, registry, user.id, workspace_id, Permission.DELETE_WORKSPACE)
    current = workspace_service.delete_workspace(db, workspace_id, user.id)
    return DeleteWorkspaceResponse(current_workspace=current)


@router.get("/{workspace_id}", response_model=WorkspaceDetail)
def api_get_workspace(
    workspace_id: UUID,
    db: Session = Depends(get_db),
    registry: RoleRegistry = Depends(get_role_registry),
    user: User = Depends(require_auth),
) -> WorkspaceDetail:
    """Workspace with its members. Registered last so /all is not shadowed."""
    get_member_role_in_workspace(db, registry, user.id, workspace_id)
    return workspace_service.get_workspace_detail(db, workspace_id)
