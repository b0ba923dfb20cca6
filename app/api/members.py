"""Membership API routes: join by invite code, add a member."""

from __future__ import annotations

from uuid import UUID

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from app.api.deps import get_db, get_role_registry, require_auth
from app.models.enums import Permission
from app.models.user import User
from app.schemas.workspace import AddMemberRequest, JoinWorkspaceResponse, MembershipRead
from app.services import member_service
from app.services.authorization import require_permission
from app.services.role_registry import RoleRegistry

router = APIRouter()


@router.post(
    "/workspace/{invite_code}/join",
    response_model=JoinWorkspaceResponse,
    status_code=status.HTTP_201_CREATED,
)
def api_join_workspace(
    invite_code: str,
    db: Session = Depends(get_db),
    registry: RoleRegistry = Depends(get_role_registry),
    user: User = Depends(require_auth),
) -> JoinWorkspaceResponse:
    membership = member_service.join_workspace_by_invite(db, registry, invite_code, user.id)
    role = registry.get_by_id(membership.role_id)
    return JoinWorkspaceResponse(
        workspace_id=membership.workspace_id,
        role=role.name if role else "",
    )


@router.post("/workspace/{workspace_id}/add", status_code=status.HTTP_201_CREATED)
def api_add_member(
    workspace_id: UUID,
    body: AddMemberRequest,
    db: Session = Depends(get_db),
    registry: RoleRegistry = Depends(get_role_registry),
    user: User = Depends(require_auth),
) -> dict:
    require_permission(db, registry, user.id, workspace_id, Permission.ADD_MEMBER)
    membership = member_service.add_member(db, registry, workspace_id, body.email, body.role)
    db.refresh(membership)
    return {
        "message": "Member added successfully",
        "member": MembershipRead.model_validate(membership),
    }
