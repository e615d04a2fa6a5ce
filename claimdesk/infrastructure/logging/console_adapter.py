"""structlog-backed implementation of LoggerProtocol.

Output goes to stdout, one event per line:
- development: colored key=value lines (``structlog.dev.ConsoleRenderer``)
- testing, ci, production: JSON objects for log shippers

Request-scoped values bound with ``structlog.contextvars`` (the request id
set by TraceMiddleware) are merged into every event.

Satisfies LoggerProtocol structurally; there is no inheritance.
"""

from __future__ import annotations

import logging
import sys
from typing import Any

import structlog


def _configure(*, use_json: bool, level: str) -> None:
    renderer: structlog.types.Processor = (
        structlog.processors.JSONRenderer()
        if use_json
        else structlog.dev.ConsoleRenderer(colors=True)
    )
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(
            logging.getLevelNamesMapping().get(level.upper(), logging.INFO)
        ),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stdout),
        cache_logger_on_first_use=True,
    )


def _with_error(context: dict[str, Any], error: Exception | None) -> dict[str, Any]:
    # Exceptions are flattened so JSON output stays serializable.
    if error is not None:
        context["error_type"] = type(error).__name__
        context["error_message"] = str(error)
    return context


class ConsoleAdapter:
    """Structured stdout logger.

    Args:
        use_json: Render JSON instead of the colored development format.
        level: Minimum level name (``DEBUG``, ``INFO``, ...).

    Example:
        >>> logger = ConsoleAdapter(use_json=True)
        >>> logger.bind(module="auth").info("login_succeeded", user_id=str(user.id))
    """

    def __init__(self, *, use_json: bool = False, level: str = "INFO") -> None:
        _configure(use_json=use_json, level=level)
        self._logger = structlog.get_logger()

    def debug(self, message: str, /, **context: Any) -> None:
        self._logger.debug(message, **context)

    def info(self, message: str, /, **context: Any) -> None:
        self._logger.info(message, **context)

    def warning(self, message: str, /, **context: Any) -> None:
        self._logger.warning(message, **context)

    def error(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        """Log at ERROR, adding ``error_type`` / ``error_message`` for ``error``."""
        self._logger.error(message, **_with_error(context, error))

    def critical(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        """Log at CRITICAL, adding ``error_type`` / ``error_message`` for ``error``."""
        self._logger.critical(message, **_with_error(context, error))

    def bind(self, **context: Any) -> ConsoleAdapter:
        """Return a child logger that adds ``context`` to every event.

        The parent is unchanged and structlog is not reconfigured.
        """
        child = ConsoleAdapter.__new__(ConsoleAdapter)
        child._logger = self._logger.bind(**context)
        return child
