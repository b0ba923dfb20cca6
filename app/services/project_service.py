"""Project and task operations scoped to a workspace."""

from __future__ import annotations

import logging
import uuid
from datetime import datetime

from sqlalchemy.orm import Session

from app.db.session import atomic
from app.models.project import Project
from app.models.task import Task
from app.repositories import projects as projects_repo
from app.repositories import workspaces as workspaces_repo
from app.services.errors import BadRequestError, NotFoundError

logger = logging.getLogger(__name__)


def create_project(
    db: Session,
    workspace_id: uuid.UUID,
    user_id: uuid.UUID,
    name: str,
    description: str | None = None,
    emoji: str | None = None,
) -> Project:
    with atomic(db):
        project = projects_repo.create_project(
            db,
            workspace_id=workspace_id,
            created_by_id=user_id,
            name=name,
            description=description,
            emoji=emoji,
        )
    logger.info("Project %s created in workspace %s", project.id, workspace_id)
    return project


def list_projects(db: Session, workspace_id: uuid.UUID) -> list[Project]:
    return projects_repo.list_projects_for_workspace(db, workspace_id)


def create_task(
    db: Session,
    workspace_id: uuid.UUID,
    project_id: uuid.UUID,
    user_id: uuid.UUID,
    title: str,
    description: str | None = None,
    status: str | None = None,
    priority: str | None = None,
    assigned_to: uuid.UUID | None = None,
    due_date: datetime | None = None,
) -> Task:
    """Create a task in a project of this workspace.

    NotFoundError if the project is not in the workspace; BadRequestError if
    the assignee is not a member of the workspace.
    """
    with atomic(db):
        if projects_repo.get_project(db, project_id, workspace_id) is None:
            raise NotFoundError("Project not found or does not belong to this workspace")
        if assigned_to is not None:
            if workspaces_repo.get_membership(db, assigned_to, workspace_id) is None:
                raise BadRequestError("Assigned user is not a member of this workspace")
        task = projects_repo.create_task(
            db,
            workspace_id=workspace_id,
            project_id=project_id,
            created_by_id=user_id,
            title=title,
            description=description,
            status=status,
            priority=priority,
            assigned_to_id=assigned_to,
            due_date=due_date,
        )
    return task


def list_tasks(
    db: Session,
    workspace_id: uuid.UUID,
    project_id: uuid.UUID | None = None,
) -> list[Task]:
    return projects_repo.list_tasks_for_workspace(db, workspace_id, project_id)
