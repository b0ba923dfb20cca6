"""User API routes."""

from __future__ import annotations

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.api.deps import get_db, require_auth
from app.models.user import User
from app.schemas.auth import CurrentUserResponse, UserRead
from app.schemas.workspace import WorkspaceRead
from app.services.user_service import get_current_user

router = APIRouter()


@router.get("/current", response_model=CurrentUserResponse)
def api_current_user(
    db: Session = Depends(get_db),
    user: User = Depends(require_auth),
) -> CurrentUserResponse:
    """Return the caller and their current workspace."""
    current, workspace = get_current_user(db, user.id)
    return CurrentUserResponse(
        user=UserRead.model_validate(current),
        current_workspace=WorkspaceRead.model_validate(workspace) if workspace else None,
    )
