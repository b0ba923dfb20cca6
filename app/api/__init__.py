"""API routes."""

from app.api.auth import router as auth_router
from app.api.members import router as members_router
from app.api.projects import project_router, task_router
from app.api.users import router as users_router
from app.api.workspaces import router as workspaces_router

__all__ = [
    "auth_router",
    "members_router",
    "project_router",
    "task_router",
    "users_router",
    "workspaces_router",
]
