"""ASGI entry point: ``uvicorn claimdesk.main:app``.

Shutdown waits for pending fire-and-forget work (audit rows, email jobs,
activity refreshes) before the connection pool is closed, so nothing
started by a request is cut off mid-write.
"""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from claimdesk.core.config import settings
from claimdesk.core.container import get_background_tasks, get_database, get_logger
from claimdesk.presentation.routers.api.middleware.trace_middleware import (
    TraceMiddleware,
)
from claimdesk.presentation.routers.api.v1.errors import register_exception_handlers
from claimdesk.presentation.routers.api.v1.router import v1_router


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    logger = get_logger()
    logger.info(
        "application_started",
        environment=settings.environment.value,
        version=settings.app_version,
    )
    try:
        yield
    finally:
        tasks = get_background_tasks()
        if tasks.pending:
            logger.info("draining_background_tasks", pending=tasks.pending)
        await tasks.drain()
        await get_database().close()
        logger.info("application_stopped")


def create_app() -> FastAPI:
    application = FastAPI(
        title=settings.app_name,
        description="ClaimDesk authentication API",
        version=settings.app_version,
        debug=settings.debug,
        lifespan=lifespan,
    )
    application.add_middleware(TraceMiddleware)
    register_exception_handlers(application)
    application.include_router(v1_router)
    application.add_api_route("/health", health, methods=["GET"])
    return application


async def health() -> dict[str, str]:
    """Liveness plus database reachability, for load balancers."""
    database_ok = await get_database().check_connection()
    return {
        "status": "healthy" if database_ok else "degraded",
        "database": "ok" if database_ok else "unreachable",
    }


app = create_app()
