"""
HTTP middleware: CORS preflight, CORS headers and the 500 envelope.

Every response, success or failure, carries permissive CORS headers.
An ``OPTIONS`` request to any path is answered with ``204`` before
routing.  Any exception that escapes a handler is logged and turned
into the generic ``{"success": false}`` 500 envelope, so nothing
reaches the server unconverted.
"""

import logging

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import Response

from kmca_api.app.core.config import ADMIN_HEADER
from kmca_api.app.core.errors import GENERIC_SERVER_ERROR, error_response

logger = logging.getLogger(__name__)

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "GET,POST,DELETE,PATCH,OPTIONS",
    "Access-Control-Allow-Headers": f"Content-Type, {ADMIN_HEADER}",
}


def preflight_response() -> Response:
    return Response(status_code=204, media_type="text/plain; charset=utf-8", headers=CORS_HEADERS)


class KmcaHttpMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next) -> Response:
        if request.method == "OPTIONS":
            return preflight_response()
        try:
            response = await call_next(request)
        except Exception:
            logger.exception("[api] unhandled error on %s %s", request.method, request.url.path)
            response = error_response(500, GENERIC_SERVER_ERROR)
        response.headers.update(CORS_HEADERS)
        return response
