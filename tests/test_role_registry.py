"""Role registry and seeding tests."""

from __future__ import annotations

import uuid

import pytest
from sqlalchemy.orm import Session

from app.models import Role
from app.models.enums import Permission, RoleName
from app.services.errors import NotFoundError, RoleSeedError
from app.services.role_registry import (
    ROLE_PERMISSIONS,
    RoleEntry,
    RoleRegistry,
    load_role_registry,
    seed_roles,
)


def test_owner_has_every_permission() -> None:
    assert ROLE_PERMISSIONS[RoleName.OWNER] == frozenset(Permission)


def test_member_permissions_are_minimal() -> None:
    assert ROLE_PERMISSIONS[RoleName.MEMBER] == {
        Permission.VIEW_ONLY,
        Permission.CREATE_TASK,
        Permission.EDIT_TASK,
    }


def test_admin_cannot_delete_or_edit_workspace() -> None:
    admin = ROLE_PERMISSIONS[RoleName.ADMIN]
    assert Permission.DELETE_WORKSPACE not in admin
    assert Permission.EDIT_WORKSPACE not in admin
    assert Permission.CHANGE_MEMBER_ROLE not in admin
    assert Permission.ADD_MEMBER in admin


def test_role_permissions_map_is_read_only() -> None:
    with pytest.raises(TypeError):
        ROLE_PERMISSIONS[RoleName.MEMBER] = frozenset()  # type: ignore[index]


def test_seed_roles_creates_one_row_per_role(db: Session) -> None:
    names = seed_roles(db)
    assert sorted(names) == ["ADMIN", "MEMBER", "OWNER"]
    assert db.query(Role).count() == 3
    member = db.query(Role).filter(Role.name == "MEMBER").one()
    assert sorted(member.permissions) == ["CREATE_TASK", "EDIT_TASK", "VIEW_ONLY"]


def test_seed_roles_is_repeatable(db: Session) -> None:
    """Re-seeding overwrites permissions in place; ids are stable."""
    seed_roles(db)
    owner_id = db.query(Role).filter(Role.name == "OWNER").one().id
    member = db.query(Role).filter(Role.name == "MEMBER").one()
    member.permissions = ["VIEW_ONLY"]
    db.commit()

    seed_roles(db)

    assert db.query(Role).count() == 3
    assert db.query(Role).filter(Role.name == "OWNER").one().id == owner_id
    db.refresh(member)
    assert "CREATE_TASK" in member.permissions


def test_registry_lookups(db: Session) -> None:
    seed_roles(db)
    registry = load_role_registry(db)

    owner = registry.get_by_name(RoleName.OWNER)
    assert owner is not None
    assert registry.get_by_name("OWNER") is owner
    assert registry.get_by_id(owner.id) is owner
    assert owner.allows(Permission.DELETE_WORKSPACE)
    assert RoleName.ADMIN in registry
    assert len(registry) == 3
    assert [e.name for e in registry.entries()] == ["ADMIN", "MEMBER", "OWNER"]


def test_registry_unknown_role_returns_none() -> None:
    registry = RoleRegistry([])
    assert registry.get_by_id(uuid.uuid4()) is None
    assert registry.get_by_name("GUEST") is None


def test_registry_require_missing_owner_raises_seed_error() -> None:
    """Missing OWNER is a configuration error, surfaced as a NotFound kind."""
    registry = RoleRegistry(
        [RoleEntry(id=uuid.uuid4(), name="MEMBER", permissions=frozenset({"VIEW_ONLY"}))]
    )
    with pytest.raises(RoleSeedError) as exc_info:
        registry.require(RoleName.OWNER)
    assert isinstance(exc_info.value, NotFoundError)


def test_load_registry_from_empty_table(db: Session) -> None:
    registry = load_role_registry(db)
    assert len(registry) == 0
    assert RoleName.OWNER not in registry


def test_role_entry_allows_accepts_strings() -> None:
    entry = RoleEntry(id=uuid.uuid4(), name="MEMBER", permissions=frozenset({"VIEW_ONLY"}))
    assert entry.allows("VIEW_ONLY")
    assert entry.allows(Permission.VIEW_ONLY)
    assert not entry.allows(Permission.CREATE_PROJECT)
