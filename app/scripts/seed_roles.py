"""Seed (or refresh) the roles table from the built-in role permission map.

Usage:
    python -m app.scripts.seed_roles
"""

from __future__ import annotations

from app.db.session import SessionLocal
from app.services.role_registry import seed_roles


def main() -> None:
    db = SessionLocal()
    try:
        names = seed_roles(db)
        print(f"Seeded roles: {', '.join(names)}")
    finally:
        db.close()


if __name__ == "__main__":
    main()
