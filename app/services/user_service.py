"""Current-user lookup."""

from __future__ import annotations

import uuid

from sqlalchemy.orm import Session

from app.models.user import User
from app.models.workspace import Workspace
from app.repositories import users as users_repo
from app.repositories import workspaces as workspaces_repo
from app.services.errors import BadRequestError


def get_current_user(db: Session, user_id: uuid.UUID) -> tuple[User, Workspace | None]:
    """Return the user and their resolved current workspace (None if unset or gone)."""
    user = users_repo.get_user(db, user_id)
    if user is None:
        raise BadRequestError("User not found")
    workspace = None
    if user.current_workspace_id is not None:
        workspace = workspaces_repo.get_workspace(db, user.current_workspace_id)
    return user, workspace
