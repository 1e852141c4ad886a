"""
Error taxonomy and the JSON error envelope.

Every failure leaves the API as ``{"success": false, "error": "..."}``.
Services raise the ``ApiError`` subclasses below; the handlers
registered by ``register_exception_handlers`` turn them, and the
framework's own routing and body errors, into that envelope.
"""

import logging
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)

GENERIC_SERVER_ERROR = "서버 오류가 발생했습니다."


class ApiError(Exception):
    """Base class for errors that map onto an HTTP status."""

    status_code = 500
    default_message = GENERIC_SERVER_ERROR

    def __init__(self, message: Optional[str] = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(ApiError):
    """A required field is missing or empty."""

    status_code = 400
    default_message = "필수 입력 항목이 누락되었습니다."


class Unauthorized(ApiError):
    status_code = 401
    default_message = "인증에 실패했습니다."


class NotFound(ApiError):
    status_code = 404
    default_message = "요청한 항목을 찾을 수 없습니다."


class UnsupportedRoute(NotFound):
    default_message = "지원하지 않는 경로입니다."


class MalformedRequest(ApiError):
    """The request body is not parseable JSON; answered as a server error."""

    status_code = 500


class ServerMisconfigured(ApiError):
    """The admin secret is required but not configured."""

    status_code = 500
    default_message = "서버에 관리자 비밀키가 설정되지 않았습니다."


def error_response(status_code: int, message: str) -> JSONResponse:
    """Build the failure envelope."""
    return JSONResponse(status_code=status_code, content={"success": False, "error": message})


async def api_error_handler(request: Request, exc: ApiError) -> JSONResponse:
    return error_response(exc.status_code, exc.message)


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Convert routing failures into the unsupported-path envelope.

    Starlette answers 405 when the path exists under another method;
    the route table treats method and path together, so both cases
    are a 404.
    """
    if exc.status_code in (404, 405):
        return error_response(UnsupportedRoute.status_code, UnsupportedRoute.default_message)
    return error_response(exc.status_code, str(exc.detail))


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    logger.error("[api] request validation failed on %s %s: %s", request.method, request.url.path, exc.errors())
    return error_response(500, GENERIC_SERVER_ERROR)


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ApiError, api_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
