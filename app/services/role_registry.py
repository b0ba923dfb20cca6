"""Role registry: immutable role → permission lookup.

ROLE_PERMISSIONS is the seed: it is written to the roles table by seed_roles()
and never changes at runtime. RoleRegistry is a read-only snapshot of the seeded
rows (ids included) built once at startup and injected into the authorization
engine and the workspace service; nothing mutates it after construction.
"""

from __future__ import annotations

import logging
import uuid
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from types import MappingProxyType

from sqlalchemy.orm import Session

from app.models.enums import Permission, RoleName
from app.repositories import roles as roles_repo
from app.services.errors import RoleSeedError

logger = logging.getLogger(__name__)

ROLE_PERMISSIONS: Mapping[RoleName, frozenset[Permission]] = MappingProxyType(
    {
        RoleName.OWNER: frozenset(Permission),
        RoleName.ADMIN: frozenset(
            {
                Permission.ADD_MEMBER,
                Permission.CREATE_PROJECT,
                Permission.EDIT_PROJECT,
                Permission.DELETE_PROJECT,
                Permission.CREATE_TASK,
                Permission.EDIT_TASK,
                Permission.DELETE_TASK,
                Permission.MANAGE_WORKSPACE_SETTINGS,
                Permission.VIEW_ONLY,
            }
        ),
        RoleName.MEMBER: frozenset(
            {
                Permission.VIEW_ONLY,
                Permission.CREATE_TASK,
                Permission.EDIT_TASK,
            }
        ),
    }
)


@dataclass(frozen=True)
class RoleEntry:
    """One seeded role as seen by the registry."""

    id: uuid.UUID
    name: str
    permissions: frozenset[str]

    def allows(self, permission: Permission | str) -> bool:
        value = permission.value if isinstance(permission, Permission) else str(permission)
        return value in self.permissions


class RoleRegistry:
    """Read-only view of the seeded roles, indexed by id and by name."""

    def __init__(self, entries: Iterable[RoleEntry]) -> None:
        entries = tuple(entries)
        self._by_id: Mapping[uuid.UUID, RoleEntry] = MappingProxyType(
            {e.id: e for e in entries}
        )
        self._by_name: Mapping[str, RoleEntry] = MappingProxyType(
            {e.name: e for e in entries}
        )

    @classmethod
    def from_db(cls, db: Session) -> RoleRegistry:
        """Snapshot the roles table."""
        return cls(
            RoleEntry(id=row.id, name=row.name, permissions=frozenset(row.permissions or ()))
            for row in roles_repo.list_roles(db)
        )

    def __len__(self) -> int:
        return len(self._by_id)

    def __contains__(self, name: object) -> bool:
        key = name.value if isinstance(name, RoleName) else name
        return key in self._by_name

    def get_by_id(self, role_id: uuid.UUID) -> RoleEntry | None:
        return self._by_id.get(role_id)

    def get_by_name(self, name: RoleName | str) -> RoleEntry | None:
        key = name.value if isinstance(name, RoleName) else name
        return self._by_name.get(key)

    def require(self, name: RoleName | str) -> RoleEntry:
        """Return the named role or raise RoleSeedError (configuration error)."""
        entry = self.get_by_name(name)
        if entry is None:
            key = name.value if isinstance(name, RoleName) else name
            logger.error("Role %s missing from registry; roles table not seeded?", key)
            raise RoleSeedError(f"Role {key} is not seeded")
        return entry

    def entries(self) -> list[RoleEntry]:
        return sorted(self._by_id.values(), key=lambda e: e.name)


def seed_roles(db: Session) -> list[str]:
    """Write ROLE_PERMISSIONS into the roles table (create or overwrite). Commits.

    Returns the seeded role names.
    """
    seeded: list[str] = []
    try:
        for role_name, permissions in ROLE_PERMISSIONS.items():
            roles_repo.upsert_role(db, role_name.value, sorted(p.value for p in permissions))
            seeded.append(role_name.value)
        db.commit()
    except Exception:
        db.rollback()
        raise
    logger.info("Seeded roles: %s", ", ".join(seeded))
    return seeded


def load_role_registry(db: Session) -> RoleRegistry:
    """Build the process-wide registry from the roles table."""
    registry = RoleRegistry.from_db(db)
    missing = [r.value for r in RoleName if r not in registry]
    if missing:
        logger.warning("Role registry loaded without roles: %s", ", ".join(missing))
    else:
        logger.info("Role registry loaded (%d roles)", len(registry))
    return registry
