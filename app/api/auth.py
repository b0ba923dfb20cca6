"""Authentication API routes."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session

from app.api.deps import AUTH_COOKIE, get_db, get_role_registry, require_auth
from app.models.user import User
from app.schemas.auth import (
    LoginRequest,
    RegisterRequest,
    RegisterResponse,
    TokenResponse,
    UserRead,
)
from app.services.auth import create_access_token, register_user, verify_user
from app.services.role_registry import RoleRegistry

router = APIRouter()


@router.post("/register", response_model=RegisterResponse, status_code=status.HTTP_201_CREATED)
def register(
    body: RegisterRequest,
    db: Session = Depends(get_db),
    registry: RoleRegistry = Depends(get_role_registry),
) -> RegisterResponse:
    """Create a user with a default workspace they own."""
    user_id, workspace_id = register_user(db, registry, body.email, body.name, body.password)
    return RegisterResponse(user_id=user_id, workspace_id=workspace_id)


@router.post("/login", response_model=TokenResponse)
def login(
    body: LoginRequest,
    response: Response,
    db: Session = Depends(get_db),
) -> TokenResponse:
    """Authenticate user and return JWT token.

    Also sets an httponly cookie for browser sessions.
    """
    user = verify_user(db, body.email, body.password)

    token = create_access_token(data={"sub": str(user.id)})

    # Set httponly cookie for browser sessions
    response.set_cookie(
        key=AUTH_COOKIE,
        value=token,
        httponly=True,
        samesite="lax",
        max_age=60 * 60 * 24,  # 24 hours
        path="/",
    )

    return TokenResponse(access_token=token, current_workspace_id=user.current_workspace_id)


@router.post("/logout")
def logout(response: Response) -> dict:
    """Clear the authentication cookie."""
    response.delete_cookie(key=AUTH_COOKIE, path="/")
    return {"detail": "Logged out"}


@router.get("/me", response_model=UserRead)
def me(current_user: User = Depends(require_auth)) -> UserRead:
    """Return the currently authenticated user's information."""
    return UserRead.model_validate(current_user)
