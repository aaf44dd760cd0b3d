from typing import Any, Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

from agroconnect.core.logger import logger


class AgroConnectError(Exception):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message = "Internal server error"

    def __init__(self, message: Optional[str] = None, error: Any = None):
        self.message = message or self.default_message
        self.error = error
        super().__init__(self.message)


class ValidationError(AgroConnectError):
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Invalid request data"


class AuthenticationError(AgroConnectError):
    status_code = status.HTTP_401_UNAUTHORIZED
    default_message = "Token is invalid or expired"


class AuthorizationError(AgroConnectError):
    status_code = status.HTTP_403_FORBIDDEN
    default_message = "Not enough permissions"


class NotFoundError(AgroConnectError):
    status_code = status.HTTP_404_NOT_FOUND
    default_message = "Not found"


class ConflictError(AgroConnectError):
    # Reported as a plain bad request, not 409.
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Conflicting state"


class StorageError(AgroConnectError):
    default_message = "Storage failure"


def error_body(message: str, error: Any = None) -> dict:
    body = {"success": False, "message": message}
    if error is not None:
        body["error"] = error
    return body


async def agroconnect_error_handler(request: Request, exc: AgroConnectError):
    headers = None
    if isinstance(exc, AuthenticationError):
        headers = {"WWW-Authenticate": "Bearer"}
    return JSONResponse(
        status_code=exc.status_code,
        content=error_body(exc.message, exc.error),
        headers=headers,
    )


async def request_validation_handler(request: Request, exc: RequestValidationError):
    errors = exc.errors()
    first = errors[0] if errors else {}
    field = ".".join(str(part) for part in first.get("loc", ()) if part not in ("body", "query", "path"))
    message = first.get("msg", "Invalid request data")
    if field:
        message = f"{field}: {message}"
    details = [{"loc": list(e.get("loc", ())), "msg": e.get("msg"), "type": e.get("type")} for e in errors]
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=error_body(message, details),
    )


async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    return JSONResponse(
        status_code=exc.status_code,
        content=error_body(str(exc.detail)),
        headers=getattr(exc, "headers", None),
    )


async def storage_error_handler(request: Request, exc: SQLAlchemyError):
    logger.exception(
        "Storage failure",
        extra={"request_id": request.scope.get("request_id"), "path": request.url.path},
    )
    return JSONResponse(
        status_code=StorageError.status_code,
        content=error_body(StorageError.default_message, str(exc.__class__.__name__)),
    )


async def unhandled_error_handler(request: Request, exc: Exception):
    logger.exception(
        "Unhandled exception in request",
        extra={"request_id": request.scope.get("request_id"), "path": request.url.path},
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=error_body("Internal server error", str(exc)),
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(AgroConnectError, agroconnect_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(SQLAlchemyError, storage_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
