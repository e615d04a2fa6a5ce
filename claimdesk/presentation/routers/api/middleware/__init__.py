"""API middleware and request dependencies."""

from claimdesk.presentation.routers.api.middleware.auth_dependencies import (
    client_metadata,
    require_session,
)
from claimdesk.presentation.routers.api.middleware.trace_middleware import (
    TraceMiddleware,
    get_trace_id,
)

__all__ = [
    "TraceMiddleware",
    "client_metadata",
    "get_trace_id",
    "require_session",
]
