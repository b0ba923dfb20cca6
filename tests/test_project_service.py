"""Project and task service tests."""

from __future__ import annotations

import uuid
from datetime import UTC, datetime

import pytest

from app.models.enums import TaskPriority, TaskStatus
from app.services import member_service, project_service, workspace_service
from app.services.errors import BadRequestError, NotFoundError
from tests.test_constants import TEST_MEMBER_EMAIL, TEST_OUTSIDER_EMAIL, TEST_OWNER_EMAIL


@pytest.fixture
def owner(make_user):
    return make_user(TEST_OWNER_EMAIL, "Owner")


@pytest.fixture
def workspace(db, registry, owner):
    return workspace_service.create_workspace(db, registry, owner.id, "Acme")


@pytest.fixture
def project(db, owner, workspace):
    return project_service.create_project(db, workspace.id, owner.id, "Launch", "Q3 launch")


class TestProjects:
    def test_create_project_uses_default_emoji(self, project, owner, workspace):
        assert project.emoji == "📊"
        assert project.workspace_id == workspace.id
        assert project.created_by_id == owner.id

    def test_create_project_with_emoji(self, db, owner, workspace):
        project = project_service.create_project(db, workspace.id, owner.id, "Ops", emoji="🚀")
        assert project.emoji == "🚀"

    def test_list_projects_is_workspace_scoped(self, db, registry, make_user, owner, workspace, project):
        other_owner = make_user(TEST_OUTSIDER_EMAIL)
        other = workspace_service.create_workspace(db, registry, other_owner.id, "Other")
        project_service.create_project(db, other.id, other_owner.id, "Elsewhere")

        names = [p.name for p in project_service.list_projects(db, workspace.id)]
        assert names == ["Launch"]


class TestTasks:
    def test_create_task_defaults(self, db, owner, workspace, project):
        task = project_service.create_task(db, workspace.id, project.id, owner.id, "Write docs")

        assert task.status == TaskStatus.TODO.value
        assert task.priority == TaskPriority.MEDIUM.value
        assert task.task_code.startswith("task-")
        assert task.assigned_to_id is None

    def test_create_task_with_assignee_and_due_date(self, db, registry, make_user, owner, workspace, project):
        assignee = make_user(TEST_MEMBER_EMAIL)
        member_service.add_member(db, registry, workspace.id, TEST_MEMBER_EMAIL)
        due = datetime(2026, 12, 1, tzinfo=UTC)

        task = project_service.create_task(
            db,
            workspace.id,
            project.id,
            owner.id,
            "Ship",
            status=TaskStatus.IN_PROGRESS.value,
            priority=TaskPriority.HIGH.value,
            assigned_to=assignee.id,
            due_date=due,
        )

        assert task.assigned_to_id == assignee.id
        assert task.status == "IN_PROGRESS"
        assert task.priority == "HIGH"

    def test_assignee_must_be_member(self, db, make_user, owner, workspace, project):
        outsider = make_user(TEST_OUTSIDER_EMAIL)
        with pytest.raises(BadRequestError):
            project_service.create_task(
                db, workspace.id, project.id, owner.id, "Ship", assigned_to=outsider.id
            )
        assert project_service.list_tasks(db, workspace.id) == []

    def test_project_must_belong_to_workspace(self, db, registry, make_user, owner, workspace):
        other_owner = make_user(TEST_OUTSIDER_EMAIL)
        other = workspace_service.create_workspace(db, registry, other_owner.id, "Other")
        foreign = project_service.create_project(db, other.id, other_owner.id, "Foreign")

        with pytest.raises(NotFoundError):
            project_service.create_task(db, workspace.id, foreign.id, owner.id, "Sneaky")

    def test_unknown_project(self, db, owner, workspace):
        with pytest.raises(NotFoundError):
            project_service.create_task(db, workspace.id, uuid.uuid4(), owner.id, "Nothing")

    def test_list_tasks_filters_by_project(self, db, owner, workspace, project):
        second = project_service.create_project(db, workspace.id, owner.id, "Second")
        project_service.create_task(db, workspace.id, project.id, owner.id, "A")
        project_service.create_task(db, workspace.id, second.id, owner.id, "B")

        assert len(project_service.list_tasks(db, workspace.id)) == 2
        only_second = project_service.list_tasks(db, workspace.id, second.id)
        assert [t.title for t in only_second] == ["B"]
