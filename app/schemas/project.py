"""Project and task schemas."""

from __future__ import annotations

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from app.models.enums import TaskPriority, TaskStatus


class ProjectCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=255)
    description: str | None = None
    emoji: str | None = Field(None, max_length=16)


class ProjectRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    name: str
    description: str | None
    emoji: str
    workspace_id: UUID
    created_by_id: UUID
    created_at: datetime


class ProjectListResponse(BaseModel):
    projects: list[ProjectRead]


class TaskCreate(BaseModel):
    title: str = Field(..., min_length=1, max_length=255)
    description: str | None = None
    status: TaskStatus = TaskStatus.TODO
    priority: TaskPriority = TaskPriority.MEDIUM
    assigned_to: UUID | None = None
    due_date: datetime | None = None


class TaskRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    task_code: str
    title: str
    description: str | None
    project_id: UUID
    workspace_id: UUID
    status: str
    priority: str
    assigned_to_id: UUID | None
    created_by_id: UUID
    due_date: datetime | None
    created_at: datetime


class TaskListResponse(BaseModel):
    tasks: list[TaskRead]
