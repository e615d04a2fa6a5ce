"""Fire-and-forget task tracking.

Side effects that must never block or fail the request path (audit writes,
job dispatch, session activity refreshes) are scheduled as detached asyncio
tasks through ``BackgroundTasks``.

Behavior:
    - Strong references are held until each task completes, so the event
      loop cannot garbage-collect a pending task.
    - Task exceptions are logged (ERROR) and discarded, never re-raised.
    - ``drain()`` awaits everything still pending (shutdown, tests).

Usage:
    from claimdesk.core.container import get_background_tasks

    tasks = get_background_tasks()
    tasks.spawn(audit_writer(entry), name="audit:LOGIN")
"""

import asyncio
from collections.abc import Coroutine
from typing import Any

from claimdesk.domain.protocols.logger_protocol import LoggerProtocol


class BackgroundTasks:
    """Registry of detached asyncio tasks with fail-open error logging.

    Attributes:
        _tasks: Pending tasks (strong references).
        _logger: Logger for task failures.
    """

    def __init__(self, logger: LoggerProtocol) -> None:
        self._tasks: set[asyncio.Task[Any]] = set()
        self._logger = logger

    def spawn[T](
        self, coro: Coroutine[Any, Any, T], *, name: str | None = None
    ) -> asyncio.Task[T]:
        """Schedule a coroutine on the running loop without awaiting it.

        Args:
            coro: Coroutine to run in the background.
            name: Optional task name, included in failure logs.

        Returns:
            asyncio.Task: The scheduled task. Callers may await it, but the
                request path never does.
        """
        task = asyncio.create_task(coro, name=name)
        self._tasks.add(task)
        task.add_done_callback(self._on_done)
        return task

    def _on_done(self, task: asyncio.Task[Any]) -> None:
        self._tasks.discard(task)
        if task.cancelled():
            return
        error = task.exception()
        if error is not None:
            self._logger.error(
                "background_task_failed",
                error=error if isinstance(error, Exception) else None,
                task_name=task.get_name(),
            )

    @property
    def pending(self) -> int:
        """Number of tasks not yet finished."""
        return len(self._tasks)

    async def drain(self) -> None:
        """Wait until every tracked task (including ones spawned meanwhile) is done."""
        while self._tasks:
            await asyncio.gather(*list(self._tasks), return_exceptions=True)
