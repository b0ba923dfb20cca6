"""Workspace and membership schemas for request/response validation."""

from __future__ import annotations

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field


class WorkspaceCreate(BaseModel):
    """Schema for creating a workspace."""

    name: str = Field(..., min_length=1, max_length=255)
    description: str | None = None


class WorkspaceUpdate(BaseModel):
    """Schema for updating a workspace.

    Empty strings and omitted fields both keep the current value.
    """

    name: str | None = Field(None, max_length=255)
    description: str | None = None


class ChangeMemberRoleRequest(BaseModel):
    member_id: UUID
    role_id: UUID


class WorkspaceRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    name: str
    description: str | None
    owner_id: UUID
    invite_code: str
    created_at: datetime
    updated_at: datetime


class WorkspaceListResponse(BaseModel):
    workspaces: list[WorkspaceRead]


class RoleSummary(BaseModel):
    """Role id and name only; used to present assignable roles."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    name: str


class RoleRead(RoleSummary):
    permissions: list[str]


class MembershipRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    user_id: UUID
    workspace_id: UUID
    role: RoleRead
    joined_at: datetime


class WorkspaceDetail(WorkspaceRead):
    """Workspace with its full membership list."""

    members: list[MembershipRead]


class MemberUser(BaseModel):
    """Display fields of a member. Never carries credentials."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    name: str
    email: str
    profile_picture: str | None


class MemberRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    user: MemberUser
    workspace_id: UUID
    role: RoleSummary
    joined_at: datetime


class WorkspaceMembersResponse(BaseModel):
    members: list[MemberRead]
    roles: list[RoleSummary]


class WorkspaceAnalytics(BaseModel):
    """Point-in-time task counters for a workspace."""

    total_tasks: int
    overdue_tasks: int
    completed_tasks: int


class DeleteWorkspaceResponse(BaseModel):
    message: str = "Workspace deleted successfully"
    current_workspace: UUID | None


class AddMemberRequest(BaseModel):
    email: str = Field(..., min_length=3, max_length=255)
    role: str = "MEMBER"


class JoinWorkspaceResponse(BaseModel):
    workspace_id: UUID
    role: str
