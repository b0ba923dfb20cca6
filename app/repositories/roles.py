"""Role store."""

from __future__ import annotations

from sqlalchemy.orm import Session

from app.models.role import Role


def get_role_by_name(db: Session, name: str) -> Role | None:
    return db.query(Role).filter(Role.name == name).first()


def list_roles(db: Session) -> list[Role]:
    return db.query(Role).order_by(Role.name.asc()).all()


def upsert_role(db: Session, name: str, permissions: list[str]) -> Role:
    """Create the role or overwrite its permission list."""
    row = get_role_by_name(db, name)
    if row is None:
        row = Role(name=name, permissions=permissions)
        db.add(row)
    else:
        row.permissions = permissions
    db.flush()
    return row
