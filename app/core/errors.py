"""
Error taxonomy and the single place where it is mapped to HTTP.

Services raise these; routes never build status codes for them by hand.

    ValidationError         400  missing/invalid field, rejected upload
    ConflictError           400  duplicate email
    InvalidCredentialsError 400  bad login
    NotFoundError           404  unknown id on update/delete
    UpstreamError           500  store or filesystem failure (detail hidden)
"""

import logging
from typing import List, Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

logger = logging.getLogger(__name__)

GENERIC_ERROR = "Internal server error"


class AppError(Exception):
    status_code = 500
    default_detail = GENERIC_ERROR

    def __init__(self, detail: Optional[str] = None):
        self.detail = detail or self.default_detail
        super().__init__(self.detail)


class ValidationError(AppError):
    status_code = 400
    default_detail = "Invalid request"

    def __init__(self, detail: Optional[str] = None, errors: Optional[List[dict]] = None):
        super().__init__(detail)
        self.errors = errors or []


class FileRejectedError(ValidationError):
    default_detail = "Only PDF files are allowed"


class ConflictError(AppError):
    status_code = 400
    default_detail = "Email already registered"


class InvalidCredentialsError(AppError):
    status_code = 400
    default_detail = "Invalid email or password"


class NotFoundError(AppError):
    status_code = 404
    default_detail = "Not found"


class UpstreamError(AppError):
    status_code = 500


def _field_errors(exc: RequestValidationError) -> List[dict]:
    errors = []
    for err in exc.errors():
        # loc is ("body", "fullName") or ("body",) for a missing body
        loc = [str(part) for part in err.get("loc", ()) if part not in ("body", "query", "path", "form")]
        errors.append({"field": ".".join(loc) or None, "message": err.get("msg")})
    return errors


def register_exception_handlers(app: FastAPI) -> None:
    """Install the error -> status code mapping on the app."""

    @app.exception_handler(AppError)
    async def app_error_handler(request: Request, exc: AppError):
        if exc.status_code >= 500:
            logger.error("%s %s failed: %s", request.method, request.url.path, exc.detail)
            return JSONResponse(status_code=exc.status_code, content={"detail": GENERIC_ERROR})
        content = {"detail": exc.detail}
        if isinstance(exc, ValidationError) and exc.errors:
            content["errors"] = exc.errors
        return JSONResponse(status_code=exc.status_code, content=content)

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        return JSONResponse(
            status_code=400,
            content={"detail": "Validation failed", "errors": _field_errors(exc)},
        )

    @app.exception_handler(SQLAlchemyError)
    async def database_error_handler(request: Request, exc: SQLAlchemyError):
        logger.exception("Database failure on %s %s", request.method, request.url.path)
        return JSONResponse(status_code=500, content={"detail": GENERIC_ERROR})
