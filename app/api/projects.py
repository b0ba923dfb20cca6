"""Project and task API routes."""

from __future__ import annotations

from uuid import UUID

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from app.api.deps import get_db, get_role_registry, require_auth
from app.models.enums import Permission
from app.models.user import User
from app.schemas.project import (
    ProjectCreate,
    ProjectListResponse,
    ProjectRead,
    TaskCreate,
    TaskListResponse,
    TaskRead,
)
from app.services import project_service
from app.services.authorization import get_member_role_in_workspace, require_permission
from app.services.role_registry import RoleRegistry

project_router = APIRouter()
task_router = APIRouter()


@project_router.post(
    "/workspace/{workspace_id}/create",
    response_model=ProjectRead,
    status_code=status.HTTP_201_CREATED,
)
def api_create_project(
    workspace_id: UUID,
    body: ProjectCreate,
    db: Session = Depends(get_db),
    registry: RoleRegistry = Depends(get_role_registry),
    user: User = Depends(require_auth),
) -> ProjectRead:
    require_permission(db, registry, user.id, workspace_id, Permission.CREATE_PROJECT)
    project = project_service.create_project(
        db, workspace_id, user.id, body.name, body.description, body.emoji
    )
    return ProjectRead.model_validate(project)


@project_router.get("/workspace/{workspace_id}/all", response_model=ProjectListResponse)
def api_list_projects(
    workspace_id: UUID,
    db: Session = Depends(get_db),
    registry: RoleRegistry = Depends(get_role_registry),
    user: User = Depends(require_auth),
) -> ProjectListResponse:
    get_member_role_in_workspace(db, registry, user.id, workspace_id)
    projects = project_service.list_projects(db, workspace_id)
    return ProjectListResponse(projects=[ProjectRead.model_validate(p) for p in projects])


@task_router.post(
    "/project/{project_id}/workspace/{workspace_id}/create",
    response_model=TaskRead,
    status_code=status.HTTP_201_CREATED,
)
def api_create_task(
    project_id: UUID,
    workspace_id: UUID,
    body: TaskCreate,
    db: Session = Depends(get_db),
    registry: RoleRegistry = Depends(get_role_registry),
    user: User = Depends(require_auth),
) -> TaskRead:
    require_permission(db, registry, user.id, workspace_id, Permission.CREATE_TASK)
    task = project_service.create_task(
        db,
        workspace_id,
        project_id,
        user.id,
        body.title,
        description=body.description,
        status=body.status.value,
        priority=body.priority.value,
        assigned_to=body.assigned_to,
        due_date=body.due_date,
    )
    return TaskRead.model_validate(task)


@task_router.get("/workspace/{workspace_id}/all", response_model=TaskListResponse)
def api_list_tasks(
    workspace_id: UUID,
    project_id: UUID | None = None,
    db: Session = Depends(get_db),
    registry: RoleRegistry = Depends(get_role_registry),
    user: User = Depends(require_auth),
) -> TaskListResponse:
    get_member_role_in_workspace(db, registry, user.id, workspace_id)
    tasks = project_service.list_tasks(db, workspace_id, project_id)
    return TaskListResponse(tasks=[TaskRead.model_validate(t) for t in tasks])
