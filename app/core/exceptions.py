"""Application error taxonomy and FastAPI exception handlers."""

from typing import Optional

import structlog
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = structlog.get_logger(__name__)


class AppError(Exception):
    """Base class for errors rendered as client-facing payloads."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    code: str = "INTERNAL_ERROR"
    default_message: str = "An error occurred"

    def __init__(self, message: Optional[str] = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class Unauthorized(AppError):
    """No credential was presented."""

    status_code = status.HTTP_401_UNAUTHORIZED
    code = "UNAUTHORIZED"
    default_message = "Unauthorized"


class Forbidden(AppError):
    """Credential is invalid, the account is suspended, or the role is insufficient."""

    status_code = status.HTTP_403_FORBIDDEN
    code = "FORBIDDEN"
    default_message = "Forbidden"


class InvalidCredentials(AppError):
    status_code = status.HTTP_401_UNAUTHORIZED
    code = "INVALID_CREDENTIALS"
    default_message = "Invalid credentials"


class Conflict(AppError):
    """Uniqueness violation (username or email already taken)."""

    # Registration reports conflicts as a plain bad request
    status_code = status.HTTP_400_BAD_REQUEST
    code = "CONFLICT"
    default_message = "Username or email already exists"


class NotFound(AppError):
    status_code = status.HTTP_404_NOT_FOUND
    code = "NOT_FOUND"
    default_message = "Not found"


class ValidationError(AppError):
    status_code = status.HTTP_400_BAD_REQUEST
    code = "VALIDATION_ERROR"
    default_message = "Missing fields"


def _error_response(status_code: int, code: str, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"detail": message, "code": code})


def register_exception_handlers(app: FastAPI, debug: bool = False) -> None:
    """Attach handlers for the error taxonomy, request validation and the catch-all."""

    @app.exception_handler(AppError)
    async def app_error_handler(request: Request, exc: AppError):
        return _error_response(exc.status_code, exc.code, exc.message)

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        errors = exc.errors()
        fields = [".".join(str(part) for part in err.get("loc", ())[1:]) for err in errors]
        missing = [f for f, err in zip(fields, errors) if err.get("type") == "missing"]
        if missing:
            message = f"Missing fields: {', '.join(missing)}"
        else:
            message = "; ".join(
                f"{field}: {err.get('msg')}" if field else str(err.get("msg"))
                for field, err in zip(fields, errors)
            )
        return _error_response(status.HTTP_400_BAD_REQUEST, ValidationError.code, message)

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        logger.error(
            "unhandled_exception",
            path=request.url.path,
            method=request.method,
            error_type=type(exc).__name__,
            exc_info=exc,
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={
                "detail": "Internal server error",
                "message": str(exc) if debug else "An error occurred",
            },
        )
