"""
Central error handling for the UnoFit dashboard

Every error leaves the API as ``{"error": <message>, "code": <ErrorCode>}``,
with a ``details`` field added outside production for system errors.
"""
import enum
import logging
from typing import Optional

from fastapi import HTTPException, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from unofit.core.config import settings

logger = logging.getLogger(__name__)

NOT_FOUND_MESSAGE = "Ruta no encontrada"
SYSTEM_ERROR_MESSAGE = "Error del sistema. Por favor intenta de nuevo."


class ErrorCode(str, enum.Enum):
    UNAUTHORIZED = "UNAUTHORIZED"
    NOT_FOUND = "NOT_FOUND"
    SYSTEM_ERROR = "SYSTEM_ERROR"


class ApiError(HTTPException):
    """HTTPException carrying the API error code alongside the message."""

    def __init__(self, status_code: int, message: str, code: ErrorCode):
        super().__init__(status_code=status_code, detail=message)
        self.code = code


class PermissionDenied(ApiError):
    def __init__(self, message: str):
        super().__init__(status.HTTP_403_FORBIDDEN, message, ErrorCode.UNAUTHORIZED)


def error_response(
    status_code: int,
    message: str,
    code: ErrorCode,
    details: Optional[str] = None,
) -> JSONResponse:
    content = {"error": message, "code": code.value}
    if details is not None:
        content["details"] = details
    return JSONResponse(status_code=status_code, content=content)


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """
    Handle HTTP exceptions raised by handlers and by routing

    Routing misses (unknown path, or a known path with the wrong method)
    are both reported as NOT_FOUND.
    """
    if isinstance(exc, ApiError):
        return error_response(exc.status_code, exc.detail, exc.code)

    if exc.status_code in (status.HTTP_404_NOT_FOUND, status.HTTP_405_METHOD_NOT_ALLOWED):
        logger.info("No route for %s %s", request.method, request.url.path)
        return error_response(status.HTTP_404_NOT_FOUND, NOT_FOUND_MESSAGE, ErrorCode.NOT_FOUND)

    logger.warning("HTTP %s on %s %s: %s", exc.status_code, request.method, request.url.path, exc.detail)
    return error_response(exc.status_code, SYSTEM_ERROR_MESSAGE, ErrorCode.SYSTEM_ERROR)


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """
    Handle request bodies that cannot be parsed

    Reported as a system error; the validation detail is only exposed
    outside production.
    """
    logger.warning("Unparseable request to %s %s: %s", request.method, request.url.path, exc.errors())
    details = None if settings.is_production else str(exc.errors())
    return error_response(
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        SYSTEM_ERROR_MESSAGE,
        ErrorCode.SYSTEM_ERROR,
        details,
    )


async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """
    Handle unexpected exceptions (store failures included)

    Does not leak internal error details in production.
    """
    logger.error("Unhandled exception on %s %s: %s", request.method, request.url.path, exc, exc_info=True)
    details = None if settings.is_production else str(exc)
    return error_response(
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        SYSTEM_ERROR_MESSAGE,
        ErrorCode.SYSTEM_ERROR,
        details,
    )
