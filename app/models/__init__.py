"""SQLAlchemy models."""

from app.models.account import Account
from app.models.membership import Membership
from app.models.project import Project
from app.models.role import Role
from app.models.task import Task
from app.models.user import User
from app.models.workspace import Workspace

__all__ = [
    "Account",
    "Membership",
    "Project",
    "Role",
    "Task",
    "User",
    "Workspace",
]
