"""Project and task store (workspace-scoped)."""

from __future__ import annotations

import uuid
from datetime import datetime

from sqlalchemy.orm import Session

from app.models.enums import TaskStatus
from app.models.project import Project
from app.models.task import Task


def get_project(db: Session, project_id: uuid.UUID, workspace_id: uuid.UUID) -> Project | None:
    return (
        db.query(Project)
        .filter(Project.id == project_id, Project.workspace_id == workspace_id)
        .first()
    )


def create_project(
    db: Session,
    *,
    workspace_id: uuid.UUID,
    created_by_id: uuid.UUID,
    name: str,
    description: str | None = None,
    emoji: str | None = None,
) -> Project:
    project = Project(
        workspace_id=workspace_id,
        created_by_id=created_by_id,
        name=name,
        description=description,
    )
    if emoji:
        project.emoji = emoji
    db.add(project)
    db.flush()
    return project


def list_projects_for_workspace(db: Session, workspace_id: uuid.UUID) -> list[Project]:
    return (
        db.query(Project)
        .filter(Project.workspace_id == workspace_id)
        .order_by(Project.created_at.desc())
        .all()
    )


def count_projects(db: Session, workspace_id: uuid.UUID) -> int:
    return db.query(Project).filter(Project.workspace_id == workspace_id).count()


def delete_projects_for_workspace(db: Session, workspace_id: uuid.UUID) -> int:
    return (
        db.query(Project)
        .filter(Project.workspace_id == workspace_id)
        .delete(synchronize_session="fetch")
    )


def create_task(
    db: Session,
    *,
    workspace_id: uuid.UUID,
    project_id: uuid.UUID,
    created_by_id: uuid.UUID,
    title: str,
    description: str | None = None,
    status: str | None = None,
    priority: str | None = None,
    assigned_to_id: uuid.UUID | None = None,
    due_date: datetime | None = None,
) -> Task:
    task = Task(
        workspace_id=workspace_id,
        project_id=project_id,
        created_by_id=created_by_id,
        title=title,
        description=description,
        assigned_to_id=assigned_to_id,
        due_date=due_date,
    )
    if status:
        task.status = status
    if priority:
        task.priority = priority
    db.add(task)
    db.flush()
    return task


def list_tasks_for_workspace(
    db: Session,
    workspace_id: uuid.UUID,
    project_id: uuid.UUID | None = None,
) -> list[Task]:
    query = db.query(Task).filter(Task.workspace_id == workspace_id)
    if project_id is not None:
        query = query.filter(Task.project_id == project_id)
    return query.order_by(Task.created_at.desc()).all()


def count_tasks(db: Session, workspace_id: uuid.UUID) -> int:
    return db.query(Task).filter(Task.workspace_id == workspace_id).count()


def count_overdue_tasks(db: Session, workspace_id: uuid.UUID, now: datetime) -> int:
    """Tasks due strictly before ``now`` that are not DONE. Tasks without a due date never count."""
    return (
        db.query(Task)
        .filter(
            Task.workspace_id == workspace_id,
            Task.due_date.is_not(None),
            Task.due_date < now,
            Task.status != TaskStatus.DONE.value,
        )
        .count()
    )


def count_completed_tasks(db: Session, workspace_id: uuid.UUID) -> int:
    return (
        db.query(Task)
        .filter(Task.workspace_id == workspace_id, Task.status == TaskStatus.DONE.value)
        .count()
    )


def delete_tasks_for_workspace(db: Session, workspace_id: uuid.UUID) -> int:
    return (
        db.query(Task)
        .filter(Task.workspace_id == workspace_id)
        .delete(synchronize_session="fetch")
    )
