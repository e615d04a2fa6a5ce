"""In-process job dispatcher.

Implements JobDispatcherProtocol with a dictionary-based handler registry
(job kind → async handler). Each enqueued job runs as a tracked background
task; failures are logged and never reach the caller.

For multi-process deployments, swap in a queue-backed adapter with the same
``enqueue`` signature.
"""

import asyncio
from collections.abc import Awaitable, Callable
from typing import Any

from claimdesk.core.background import BackgroundTasks
from claimdesk.domain.protocols.logger_protocol import LoggerProtocol

type JobHandler = Callable[[dict[str, Any]], Awaitable[None]]


class UnknownJobError(LookupError):
    """Raised inside the job task when no handler is registered for a kind."""


class InProcessJobDispatcher:
    """Job dispatcher running handlers on the current event loop.

    Attributes:
        _handlers: Registered handlers by job kind.
        _tasks: Background task registry.
        _logger: Logger for job lifecycle and failures.

    Example:
        >>> dispatcher = InProcessJobDispatcher(tasks=tasks, logger=logger)
        >>> dispatcher.register("email:password-reset", send_reset_email)
        >>> dispatcher.enqueue("email:password-reset", {"to": "a@b.test", ...})
    """

    def __init__(self, tasks: BackgroundTasks, logger: LoggerProtocol) -> None:
        self._handlers: dict[str, JobHandler] = {}
        self._tasks = tasks
        self._logger = logger

    def register(self, kind: str, handler: JobHandler) -> None:
        """Register the handler for a job kind (replaces any previous one)."""
        self._handlers[kind] = handler

    def enqueue(self, kind: str, payload: dict[str, Any]) -> asyncio.Future[None]:
        """Schedule a job and return its task.

        Args:
            kind: Job name.
            payload: Job arguments.

        Returns:
            asyncio.Future: Resolves when the job finishes. Never raises;
                failures are logged.
        """
        return self._tasks.spawn(self._run(kind, payload), name=f"job:{kind}")

    async def _run(self, kind: str, payload: dict[str, Any]) -> None:
        handler = self._handlers.get(kind)
        try:
            if handler is None:
                raise UnknownJobError(kind)
            await handler(payload)
        except Exception as e:
            self._logger.error("job_failed", error=e, job=kind)
            return
        self._logger.debug("job_completed", job=kind)
