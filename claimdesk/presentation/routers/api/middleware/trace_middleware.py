"""Request correlation.

Each request gets an id: the caller's ``X-Request-Id`` when present,
otherwise a fresh UUIDv7. The id is echoed in the response header, bound
into structlog context for every log line emitted while handling the
request, and readable through ``get_trace_id()`` for audit context.
"""

from __future__ import annotations

from contextvars import ContextVar
from typing import Awaitable, Callable

import structlog
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response
from uuid_extensions import uuid7

REQUEST_ID_HEADER = "X-Request-Id"

_request_id: ContextVar[str | None] = ContextVar("request_id", default=None)


def get_trace_id() -> str | None:
    """Id of the request being handled; None outside a request."""
    return _request_id.get()


class TraceMiddleware(BaseHTTPMiddleware):
    async def dispatch(
        self, request: Request, call_next: Callable[[Request], Awaitable[Response]]
    ) -> Response:
        request_id = request.headers.get(REQUEST_ID_HEADER) or str(uuid7())
        reset_token = _request_id.set(request_id)
        structlog.contextvars.bind_contextvars(request_id=request_id)
        try:
            response = await call_next(request)
        finally:
            structlog.contextvars.unbind_contextvars("request_id")
            _request_id.reset(reset_token)
        response.headers[REQUEST_ID_HEADER] = request_id
        return response
