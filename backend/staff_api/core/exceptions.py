"""
Error taxonomy for the staff service and the handlers that render it.

Every error reaches the client as ``{"message": <detail>}`` so that the
frontend only has one shape to deal with.
"""
import logging
from typing import Optional

from fastapi import FastAPI, HTTPException, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

logger = logging.getLogger(__name__)

INTERNAL_ERROR_MESSAGE = "Something went wrong while processing the request."


class StaffServiceError(HTTPException):
    """Base error with a stable error code next to the HTTP status."""

    def __init__(self, status_code: int, detail: str, error_code: Optional[str] = None):
        super().__init__(status_code=status_code, detail=detail)
        self.error_code = error_code


class ValidationError(StaffServiceError):
    def __init__(self, detail: str = "Validation failed", error_code: str = "VALIDATION_ERROR"):
        super().__init__(status.HTTP_400_BAD_REQUEST, detail, error_code)


class ConflictError(StaffServiceError):
    # Duplicates and role limits are reported as bad requests, not 409.
    def __init__(self, detail: str = "Conflict", error_code: str = "CONFLICT"):
        super().__init__(status.HTTP_400_BAD_REQUEST, detail, error_code)


class NotFoundError(StaffServiceError):
    def __init__(self, detail: str = "Staff not found!", error_code: str = "NOT_FOUND"):
        super().__init__(status.HTTP_404_NOT_FOUND, detail, error_code)


class AuthenticationError(StaffServiceError):
    def __init__(self, detail: str = "Invalid email or password!", error_code: str = "AUTH_FAILED"):
        super().__init__(status.HTTP_401_UNAUTHORIZED, detail, error_code)


class RoleDirectoryError(StaffServiceError):
    """The role service could not be reached or answered garbage."""

    def __init__(self, detail: str = INTERNAL_ERROR_MESSAGE, error_code: str = "ROLE_DIRECTORY_ERROR"):
        super().__init__(status.HTTP_500_INTERNAL_SERVER_ERROR, detail, error_code)


def _first_error_message(exc: RequestValidationError) -> str:
    errors = exc.errors()
    if not errors:
        return "Invalid request"
    err = errors[0]
    loc = [str(p) for p in err.get("loc", ()) if p != "body"]
    return f"{'.'.join(loc)}: {err.get('msg')}" if loc else str(err.get("msg"))


async def staff_error_handler(request: Request, exc: StaffServiceError) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc.error_code)
    return JSONResponse(
        status_code=exc.status_code,
        content={"message": exc.detail},
        headers=getattr(exc, "headers", None),
    )


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"message": _first_error_message(exc)},
    )


async def database_error_handler(request: Request, exc: SQLAlchemyError) -> JSONResponse:
    logger.exception("Database error on %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"message": INTERNAL_ERROR_MESSAGE},
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(StaffServiceError, staff_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(SQLAlchemyError, database_error_handler)
