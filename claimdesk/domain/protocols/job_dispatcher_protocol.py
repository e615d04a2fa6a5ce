"""Job dispatcher protocol (port).

Jobs are named units of background work (e.g. ``email:account-locked``)
with a JSON-like payload. Dispatching never blocks the request path.
"""

import asyncio
from typing import Any, Protocol


class JobDispatcherProtocol(Protocol):
    """Protocol for background job dispatch.

    Implementations:
        - InProcessJobDispatcher: runs registered handlers as asyncio tasks
    """

    def enqueue(self, kind: str, payload: dict[str, Any]) -> asyncio.Future[None]:
        """Schedule a job.

        Args:
            kind: Job name, e.g. ``email:password-reset``.
            payload: Job arguments.

        Returns:
            asyncio.Future: Completes when the job finishes. Callers on the
                request path do not await it.
        """
        ...
