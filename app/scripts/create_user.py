"""Register a TeamSync user with a default workspace.

Usage:
    python -m app.scripts.create_user --email admin@example.com --name Admin --password <password>
"""

from __future__ import annotations

import argparse
import sys

from app.db.session import SessionLocal
from app.services.auth import register_user
from app.services.errors import AppError
from app.services.role_registry import load_role_registry


def main() -> None:
    parser = argparse.ArgumentParser(description="Create a TeamSync user")
    parser.add_argument("--email", required=True, help="Email (login) for the new user")
    parser.add_argument("--name", required=True, help="Display name")
    parser.add_argument("--password", required=True, help="Password for the new user")
    args = parser.parse_args()

    db = SessionLocal()
    try:
        registry = load_role_registry(db)
        try:
            user_id, workspace_id = register_user(
                db, registry, args.email, args.name, args.password
            )
        except AppError as e:
            print(f"Could not create user '{args.email}': {e.message}")
            sys.exit(1)
        print(f"User '{args.email}' created (id={user_id}, workspace={workspace_id}).")
    finally:
        db.close()


if __name__ == "__main__":
    main()
