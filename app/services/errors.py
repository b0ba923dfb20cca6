"""Domain errors raised by services and translated to HTTP responses in app.main.

Services never raise HTTPException; routes and the exception handler map these
by ``status_code``. A failed multi-write operation re-raises whatever error
triggered the rollback, unchanged, so there is no dedicated transaction error.
"""

from __future__ import annotations


class AppError(Exception):
    """Base class for errors surfaced to API callers."""

    status_code: int = 500
    error_code: str = "INTERNAL_SERVER_ERROR"

    def __init__(self, message: str | None = None, error_code: str | None = None) -> None:
        self.message = message or self.default_message
        if error_code is not None:
            self.error_code = error_code
        super().__init__(self.message)

    default_message = "Internal Server Error"


class NotFoundError(AppError):
    """Referenced user, workspace, role or invite code does not exist."""

    status_code = 404
    error_code = "RESOURCE_NOT_FOUND"
    default_message = "Resource not found"


class RoleSeedError(NotFoundError):
    """A required role row is missing: the roles table was never seeded."""

    error_code = "ROLE_NOT_SEEDED"
    default_message = "Required role is not seeded"


class BadRequestError(AppError):
    status_code = 400
    error_code = "BAD_REQUEST"
    default_message = "Bad request"


class EmailAlreadyRegisteredError(BadRequestError):
    error_code = "AUTH_EMAIL_ALREADY_EXISTS"
    default_message = "Email already registered"


class UnauthorizedError(AppError):
    """Caller lacks credentials or the permission required for the action."""

    status_code = 401
    error_code = "ACCESS_UNAUTHORIZED"
    default_message = "You do not have the necessary permissions to perform this action"


class MemberNotInWorkspaceError(AppError):
    """Target user has no membership in the workspace (relationship, not entity, missing)."""

    status_code = 404
    error_code = "MEMBER_NOT_IN_WORKSPACE"
    default_message = "Member not found in the workspace"
