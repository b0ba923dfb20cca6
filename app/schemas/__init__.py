"""Pydantic schemas for request/response validation."""

from app.schemas.auth import (
    CurrentUserResponse,
    LoginRequest,
    RegisterRequest,
    RegisterResponse,
    TokenResponse,
    UserRead,
)
from app.schemas.project import (
    ProjectCreate,
    ProjectListResponse,
    ProjectRead,
    TaskCreate,
    TaskListResponse,
    TaskRead,
)
from app.schemas.workspace import (
    AddMemberRequest,
    ChangeMemberRoleRequest,
    DeleteWorkspaceResponse,
    JoinWorkspaceResponse,
    MemberRead,
    MembershipRead,
    RoleRead,
    RoleSummary,
    WorkspaceAnalytics,
    WorkspaceCreate,
    WorkspaceDetail,
    WorkspaceListResponse,
    WorkspaceMembersResponse,
    WorkspaceRead,
    WorkspaceUpdate,
)

__all__ = [
    "AddMemberRequest",
    "ChangeMemberRoleRequest",
    "CurrentUserResponse",
    "DeleteWorkspaceResponse",
    "JoinWorkspaceResponse",
    "LoginRequest",
    "MemberRead",
    "MembershipRead",
    "ProjectCreate",
    "ProjectListResponse",
    "ProjectRead",
    "RegisterRequest",
    "RegisterResponse",
    "RoleRead",
    "RoleSummary",
    "TaskCreate",
    "TaskListResponse",
    "TaskRead",
    "TokenResponse",
    "UserRead",
    "WorkspaceAnalytics",
    "WorkspaceCreate",
    "WorkspaceDetail",
    "WorkspaceListResponse",
    "WorkspaceMembersResponse",
    "WorkspaceRead",
    "WorkspaceUpdate",
]
