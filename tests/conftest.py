"""
Pytest configuration and fixtures.
"""

from __future__ import annotations

import os

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import Session
from sqlalchemy.pool import StaticPool

from tests.test_constants import TEST_PASSWORD, TEST_SECRET_KEY

# In-memory SQLite unless TEST_DATABASE_URL points at a real database;
# don't inherit DATABASE_URL from .env (avoids polluting teamsync_dev)
os.environ["DATABASE_URL"] = os.getenv("TEST_DATABASE_URL", "sqlite://")
os.environ.setdefault("SECRET_KEY", TEST_SECRET_KEY)
os.environ["SEED_ROLES_ON_STARTUP"] = "false"


@pytest.fixture
def client() -> TestClient:
    """FastAPI test client."""
    from app.main import app

    return TestClient(app)


@pytest.fixture
def db_engine():
    """Fresh schema per test. SQLite shares one connection so every session sees it."""
    import app.models  # noqa: F401
    from app.db.session import Base

    url = os.environ["DATABASE_URL"]
    if url.startswith("sqlite"):
        engine = create_engine(
            url,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )
    else:
        engine = create_engine(url)
    Base.metadata.create_all(engine)
    try:
        yield engine
    finally:
        Base.metadata.drop_all(engine)
        engine.dispose()


@pytest.fixture
def db(db_engine) -> Session:
    """Database session for service and model tests."""
    session = Session(bind=db_engine, expire_on_commit=False)
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def registry(db: Session):
    """Seed the roles table and return the registry built from it."""
    from app.services.role_registry import load_role_registry, seed_roles

    seed_roles(db)
    return load_role_registry(db)


@pytest.fixture
def make_user(db: Session):
    """Factory: committed user with a bcrypt password and no workspace."""
    from app.repositories import users as users_repo

    def _make(email: str, name: str | None = None):
        user = users_repo.create_user(
            db, email=email, name=name or email.split("@")[0], password=TEST_PASSWORD
        )
        db.commit()
        return user

    return _make


@pytest.fixture
def auth_headers():
    """Factory: Authorization header carrying a real JWT for the given user."""
    from app.services.auth import create_access_token

    def _headers(user) -> dict[str, str]:
        token = create_access_token(data={"sub": str(user.id)})
        return {"Authorization": f"Bearer {token}"}

    return _headers


@pytest.fixture
def api_client(db: Session, registry):
    """TestClient on a fresh app with get_db and the role registry bound to the test db."""
    from app.api.deps import get_role_registry
    from app.db.session import get_db
    from app.main import create_app

    app = create_app()

    def override_get_db():
        yield db

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_role_registry] = lambda: registry
    client = TestClient(app, raise_server_exceptions=False)
    yield client
    app.dependency_overrides.clear()
