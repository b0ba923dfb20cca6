"""Tests for joining a workspace by invite code and adding members directly."""

from __future__ import annotations

import uuid

import pytest

from app.models import Membership
from app.models.enums import RoleName
from app.repositories import workspaces as workspaces_repo
from app.services import member_service, workspace_service
from app.services.errors import BadRequestError, NotFoundError
from tests.test_constants import TEST_MEMBER_EMAIL, TEST_OUTSIDER_EMAIL, TEST_OWNER_EMAIL


@pytest.fixture
def owner(make_user):
    return make_user(TEST_OWNER_EMAIL, "Owner")


@pytest.fixture
def workspace(db, registry, owner):
    return workspace_service.create_workspace(db, registry, owner.id, "Acme")


def test_join_by_invite_creates_member_membership(db, registry, make_user, workspace):
    joiner = make_user(TEST_MEMBER_EMAIL)

    membership = member_service.join_workspace_by_invite(
        db, registry, workspace.invite_code, joiner.id
    )

    assert membership.workspace_id == workspace.id
    assert membership.role_id == registry.get_by_name(RoleName.MEMBER).id


def test_join_does_not_change_current_workspace(db, registry, make_user, workspace):
    joiner = make_user(TEST_MEMBER_EMAIL)
    member_service.join_workspace_by_invite(db, registry, workspace.invite_code, joiner.id)
    db.refresh(joiner)
    assert joiner.current_workspace_id is None


def test_join_with_unknown_code_is_not_found(db, registry, make_user, workspace):
    joiner = make_user(TEST_MEMBER_EMAIL)
    with pytest.raises(NotFoundError, match="Invalid invite code"):
        member_service.join_workspace_by_invite(db, registry, "nope0000", joiner.id)


def test_join_twice_is_rejected(db, registry, make_user, workspace):
    joiner = make_user(TEST_MEMBER_EMAIL)
    member_service.join_workspace_by_invite(db, registry, workspace.invite_code, joiner.id)

    with pytest.raises(BadRequestError, match="already a member"):
        member_service.join_workspace_by_invite(db, registry, workspace.invite_code, joiner.id)
    assert (
        db.query(Membership)
        .filter(Membership.workspace_id == workspace.id, Membership.user_id == joiner.id)
        .count()
        == 1
    )


def test_owner_joining_own_workspace_is_rejected(db, registry, owner, workspace):
    with pytest.raises(BadRequestError):
        member_service.join_workspace_by_invite(db, registry, workspace.invite_code, owner.id)


def test_add_member_with_admin_role(db, registry, make_user, workspace):
    user = make_user(TEST_MEMBER_EMAIL)

    membership = member_service.add_member(
        db, registry, workspace.id, TEST_MEMBER_EMAIL, RoleName.ADMIN
    )

    assert membership.user_id == user.id
    stored = workspaces_repo.get_membership(db, user.id, workspace.id)
    assert stored.role.name == "ADMIN"


def test_add_member_defaults_to_member_role(db, registry, make_user, workspace):
    make_user(TEST_MEMBER_EMAIL)
    membership = member_service.add_member(db, registry, workspace.id, TEST_MEMBER_EMAIL)
    assert membership.role_id == registry.get_by_name("MEMBER").id


def test_add_member_cannot_grant_owner(db, registry, make_user, workspace):
    make_user(TEST_MEMBER_EMAIL)
    with pytest.raises(BadRequestError, match="exactly one owner"):
        member_service.add_member(db, registry, workspace.id, TEST_MEMBER_EMAIL, "OWNER")
    assert workspaces_repo.count_memberships(db, workspace.id) == 1


def test_add_member_unknown_role(db, registry, make_user, workspace):
    make_user(TEST_MEMBER_EMAIL)
    with pytest.raises(NotFoundError):
        member_service.add_member(db, registry, workspace.id, TEST_MEMBER_EMAIL, "GUEST")


def test_add_member_unknown_user(db, registry, workspace):
    with pytest.raises(NotFoundError, match="User not found"):
        member_service.add_member(db, registry, workspace.id, TEST_OUTSIDER_EMAIL)


def test_add_member_unknown_workspace(db, registry, make_user):
    make_user(TEST_MEMBER_EMAIL)
    with pytest.raises(NotFoundError, match="Workspace not found"):
        member_service.add_member(db, registry, uuid.uuid4(), TEST_MEMBER_EMAIL)


def test_add_existing_member_is_rejected(db, registry, owner, workspace):
    with pytest.raises(BadRequestError):
        member_service.add_member(db, registry, workspace.id, owner.email)
