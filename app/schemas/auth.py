"""Authentication schemas."""

from __future__ import annotations

from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from app.schemas.workspace import WorkspaceRead

EMAIL_PATTERN = r"^[^@\s]+@[^@\s]+\.[^@\s]+$"


class RegisterRequest(BaseModel):
    """Schema for local registration."""

    email: str = Field(..., max_length=255, pattern=EMAIL_PATTERN)
    name: str = Field(..., min_length=1, max_length=255)
    password: str = Field(..., min_length=4)


class RegisterResponse(BaseModel):
    message: str = "User created successfully"
    user_id: UUID
    workspace_id: UUID


class LoginRequest(BaseModel):
    """Schema for login credentials."""

    email: str = Field(..., min_length=1, max_length=255)
    password: str = Field(..., min_length=1)


class TokenResponse(BaseModel):
    """Schema for JWT token response."""

    access_token: str
    token_type: str = "bearer"
    current_workspace_id: UUID | None = None


class UserRead(BaseModel):
    """Schema for reading user info (response). Never includes the password hash."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    email: str
    name: str
    profile_picture: str | None
    current_workspace_id: UUID | None


class CurrentUserResponse(BaseModel):
    user: UserRead
    current_workspace: WorkspaceRead | None
