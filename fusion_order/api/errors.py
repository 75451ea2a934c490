"""Exception handlers that render every failure in the response envelope"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from ..application.dtos.common_dtos import ApiResponse
from ..domain.errors import DomainError, ErrorKind


logger = logging.getLogger(__name__)

GENERIC_ERROR_MESSAGE = "Internal server error"

_STATUS_BY_KIND = {
    ErrorKind.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorKind.VALIDATION: status.HTTP_400_BAD_REQUEST,
    ErrorKind.DUPLICATE_USERNAME: status.HTTP_400_BAD_REQUEST,
    ErrorKind.DUPLICATE_EMAIL: status.HTTP_400_BAD_REQUEST,
    ErrorKind.INVALID_CREDENTIALS: status.HTTP_400_BAD_REQUEST,
    ErrorKind.ACCOUNT_DISABLED: status.HTTP_400_BAD_REQUEST,
    ErrorKind.PRODUCT_NOT_FOUND: status.HTTP_400_BAD_REQUEST,
    ErrorKind.PRODUCT_IN_USE: status.HTTP_400_BAD_REQUEST,
    ErrorKind.AUTHENTICATION_FAILED: status.HTTP_401_UNAUTHORIZED,
    ErrorKind.ACCESS_DENIED: status.HTTP_403_FORBIDDEN,
    ErrorKind.UNEXPECTED: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def status_for(kind: ErrorKind) -> int:
    return _STATUS_BY_KIND[kind]


def envelope(code: int, message: str) -> JSONResponse:
    body = ApiResponse.error(code, message)
    return JSONResponse(status_code=code, content=body.model_dump(mode="json"))


def format_validation_error(exc: RequestValidationError) -> str:
    """Render the first failing field as ``field: message``"""
    errors = exc.errors()
    if not errors:
        return "Invalid request"
    first = errors[0]
    location = [str(part) for part in first.get("loc", ()) if part not in ("body", "query", "path", "header")]
    message = first.get("msg", "Invalid value")
    return f"{'.'.join(location)}: {message}" if location else message


async def domain_error_handler(request: Request, exc: DomainError) -> JSONResponse:
    code = status_for(exc.kind)
    if code >= 500:
        logger.error("Unexpected domain failure on %s %s: %s", request.method, request.url.path, exc.message)
        return envelope(code, GENERIC_ERROR_MESSAGE)
    return envelope(code, exc.message)


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    message = format_validation_error(exc)
    logger.info("Rejected %s %s: %s", request.method, request.url.path, message)
    return envelope(status.HTTP_400_BAD_REQUEST, message)


async def http_error_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return envelope(exc.status_code, str(exc.detail))


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return envelope(status.HTTP_500_INTERNAL_SERVER_ERROR, GENERIC_ERROR_MESSAGE)


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(DomainError, domain_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
