"""SQLAlchemy model tests."""

import uuid

import pytest
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.models import Account, Membership, Project, Role, Task, User, Workspace
from app.models.workspace import generate_invite_code
from tests.test_constants import TEST_OWNER_EMAIL


def _user(db: Session, email: str = TEST_OWNER_EMAIL) -> User:
    user = User(email=email, name="Owner")
    db.add(user)
    db.flush()
    return user


def test_invite_code_is_short_hex() -> None:
    code = generate_invite_code()
    assert len(code) == 8
    int(code, 16)
    assert generate_invite_code() != code


def test_user_defaults(db: Session) -> None:
    """New users are active, have no password and no current workspace."""
    user = _user(db)
    db.commit()
    db.refresh(user)
    assert user.is_active is True
    assert user.password_hash is None
    assert user.current_workspace_id is None
    assert user.created_at is not None


def test_user_email_is_unique(db: Session) -> None:
    _user(db)
    with pytest.raises(IntegrityError):
        _user(db)
    db.rollback()


def test_current_workspace_is_a_weak_reference(db: Session) -> None:
    """current_workspace_id may point at a workspace that does not exist."""
    user = _user(db)
    dangling = uuid.uuid4()
    user.current_workspace_id = dangling
    db.commit()
    db.refresh(user)
    assert user.current_workspace_id == dangling


def test_workspace_gets_invite_code_and_owner(db: Session) -> None:
    user = _user(db)
    workspace = Workspace(name="Acme", owner_id=user.id)
    db.add(workspace)
    db.commit()
    db.refresh(workspace)
    assert len(workspace.invite_code) == 8
    assert workspace.owner.email == TEST_OWNER_EMAIL


def test_membership_pair_is_unique(db: Session, registry) -> None:
    user = _user(db)
    workspace = Workspace(name="Acme", owner_id=user.id)
    db.add(workspace)
    db.flush()
    role_id = registry.get_by_name("MEMBER").id
    db.add(Membership(user_id=user.id, workspace_id=workspace.id, role_id=role_id))
    db.flush()

    db.add(Membership(user_id=user.id, workspace_id=workspace.id, role_id=role_id))
    with pytest.raises(IntegrityError):
        db.flush()
    db.rollback()


def test_role_permissions_roundtrip(db: Session) -> None:
    role = Role(name="CUSTOM", permissions=["VIEW_ONLY", "CREATE_TASK"])
    db.add(role)
    db.commit()
    db.refresh(role)
    assert role.permissions == ["VIEW_ONLY", "CREATE_TASK"]


def test_account_provider_pair_is_unique(db: Session) -> None:
    user = _user(db)
    db.add(Account(user_id=user.id, provider="EMAIL", provider_id=user.email))
    db.flush()
    db.add(Account(user_id=user.id, provider="EMAIL", provider_id=user.email))
    with pytest.raises(IntegrityError):
        db.flush()
    db.rollback()


def test_project_and_task_defaults(db: Session) -> None:
    user = _user(db)
    workspace = Workspace(name="Acme", owner_id=user.id)
    db.add(workspace)
    db.flush()
    project = Project(name="Launch", workspace_id=workspace.id, created_by_id=user.id)
    db.add(project)
    db.flush()
    task = Task(
        title="Write docs",
        project_id=project.id,
        workspace_id=workspace.id,
        created_by_id=user.id,
    )
    db.add(task)
    db.commit()

    assert project.emoji == "📊"
    assert task.status == "TODO"
    assert task.priority == "MEDIUM"
    assert task.task_code.startswith("task-")
    assert task.due_date is None
