"""
HRMS Backend - Request ID Middleware
=====================================

What:  Tags each request with an ID that appears in logs, error handlers
       and the X-Request-ID response header.
How:   resolve_request_id() picks the client's X-Request-ID (trimmed and
       length-capped) or a fresh 8-hex-character ID. The ID is bound to a
       ContextVar for the duration of the downstream call and unbound after.
When:  Outermost of the project middleware, so RequestLoggingMiddleware and
       the exception handlers in main.py see the ID.
"""

import uuid
from contextvars import ContextVar
from typing import Optional

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

REQUEST_ID_HEADER = "X-Request-ID"
MAX_REQUEST_ID_LENGTH = 64

request_id_var: ContextVar[str] = ContextVar("request_id", default="")


def resolve_request_id(header_value: Optional[str]) -> str:
    """
    Return the client-supplied ID if it has any non-blank content, else a
    generated one. Client IDs longer than MAX_REQUEST_ID_LENGTH are cut.
    """
    if header_value:
        candidate = header_value.strip()[:MAX_REQUEST_ID_LENGTH]
        if candidate:
            return candidate
    return uuid.uuid4().hex[:8]


class RequestIDMiddleware(BaseHTTPMiddleware):
    """Binds the request ID for the downstream call and echoes it back."""

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        rid = resolve_request_id(request.headers.get(REQUEST_ID_HEADER))
        request.state.request_id = rid

        token = request_id_var.set(rid)
        try:
            response = await call_next(request)
        finally:
            request_id_var.reset(token)

        response.headers[REQUEST_ID_HEADER] = rid
        return response
