# File: portal/core/exceptions.py

"""
Typed errors for the portal API.

Every failure that leaves the data-access layer is one of these. Route
handlers never catch them; the handler registered in main.py turns them
into a JSON error response.
"""

import logging
from typing import Any

from fastapi import Request, status
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


class PortalError(Exception):
    """Base class for errors that carry their own HTTP status."""

    def __init__(
        self,
        message: str,
        code: str = "PORTAL_ERROR",
        status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.status_code = status_code
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        result = {
            "detail": self.message,
            "code": self.code,
        }
        if self.details:
            result["details"] = self.details
        return result


class UserNotFoundError(PortalError):
    """No user document matches the given id."""

    def __init__(self, user_id: str):
        super().__init__(
            message=f"User not found: {user_id}",
            code="USER_NOT_FOUND",
            status_code=status.HTTP_404_NOT_FOUND,
            details={"user_id": user_id},
        )


class DuplicateEmailError(PortalError):
    """The email is already taken by another user."""

    def __init__(self, email: str):
        super().__init__(
            message=f"A user with email '{email}' already exists",
            code="DUPLICATE_EMAIL",
            status_code=status.HTTP_409_CONFLICT,
            details={"email": email},
        )


class DatabaseOperationError(PortalError):
    """Connectivity or query failure reported by the database client."""

    def __init__(self, operation: str, error: str):
        super().__init__(
            message=f"Database operation failed: {operation}",
            code="DATABASE_ERROR",
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            details={"operation": operation, "error": error},
        )


async def portal_exception_handler(request: Request, exc: PortalError) -> JSONResponse:
    """
    Shared error stage for every route.

    Client errors are logged as warnings, server errors as errors.
    """
    if exc.status_code >= 500:
        logger.error("%s %s failed: %s (%s)", request.method, request.url.path, exc.message, exc.details)
    else:
        logger.warning("%s %s rejected: %s", request.method, request.url.path, exc.message)

    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())
