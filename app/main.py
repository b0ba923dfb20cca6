"""
TeamSync FastAPI application entry point.

Users → workspaces (memberships with roles) → projects → tasks
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app import __version__
from app.config import get_settings
from app.db.session import SessionLocal, check_db_connection, engine
from app.services.errors import AppError

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan: startup and shutdown."""
    logger.info("TeamSync starting")
    try:
        try:
            check_db_connection()
            logger.info("Database connection verified")
        except Exception as e:
            logger.critical("Database unreachable: %s", e)
            raise

        # Roles are configuration: seed them and freeze the registry before
        # serving requests, so a missing OWNER role surfaces here and not on
        # the first registration.
        from app.services.role_registry import load_role_registry, seed_roles

        db = SessionLocal()
        try:
            if get_settings().seed_roles_on_startup:
                seed_roles(db)
            app.state.role_registry = load_role_registry(db)
        except Exception as e:
            logger.critical("Role registry setup failed: %s", e)
            raise
        finally:
            db.close()

        yield
    finally:
        logger.info("TeamSync shutting down")
        engine.dispose()
        logger.info("Database connection pool closed")


async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    """Translate domain errors into JSON responses."""
    if exc.status_code >= 500:
        logger.error("Unhandled domain error on %s: %s", request.url.path, exc.message)
    return JSONResponse(
        status_code=exc.status_code,
        content={"detail": exc.message, "error_code": exc.error_code},
    )


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    settings = get_settings()
    app = FastAPI(
        title=settings.app_name,
        version=__version__,
        lifespan=lifespan,
        docs_url="/docs" if settings.debug else None,
        redoc_url="/redoc" if settings.debug else None,
    )
    app.add_exception_handler(AppError, app_error_handler)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=[settings.frontend_origin],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Mount API routes
    from app.api import (
        auth_router,
        members_router,
        project_router,
        task_router,
        users_router,
        workspaces_router,
    )

    base = settings.base_path
    app.include_router(auth_router, prefix=f"{base}/auth", tags=["auth"])
    app.include_router(users_router, prefix=f"{base}/user", tags=["user"])
    app.include_router(workspaces_router, prefix=f"{base}/workspace", tags=["workspace"])
    app.include_router(members_router, prefix=f"{base}/member", tags=["member"])
    app.include_router(project_router, prefix=f"{base}/project", tags=["project"])
    app.include_router(task_router, prefix=f"{base}/task", tags=["task"])

    @app.get("/health")
    def health() -> dict:
        """Health check endpoint. Confirms DB connectivity."""
        from sqlalchemy import text

        try:
            with engine.connect() as conn:
                conn.execute(text("SELECT 1"))
            return {
                "status": "ok",
                "version": __version__,
                "database": "connected",
            }
        except Exception:
            return JSONResponse(
                status_code=503,
                content={
                    "status": "unhealthy",
                    "version": __version__,
                    "database": "disconnected",
                },
            )

    return app


app = create_app()
