"""Structured logging port.

Events are short snake_case names plus key-value context. Passwords and
raw tokens never appear in either; identify people by ``user_id`` or
``session_id`` rather than by email wherever possible.

Usage:
    logger = get_logger().bind(module="auth", request_id=request_id)
    logger.warning("account_locked", user_id=str(user_id), attempts=5)
"""

from __future__ import annotations

from typing import Any, Protocol


class LoggerProtocol(Protocol):
    def debug(self, message: str, /, **context: Any) -> None: ...

    def info(self, message: str, /, **context: Any) -> None: ...

    def warning(self, message: str, /, **context: Any) -> None: ...

    def error(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        """``error`` is flattened into ``error_type`` and ``error_message``."""
        ...

    def critical(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None: ...

    def bind(self, **context: Any) -> LoggerProtocol:
        """Child logger carrying ``context`` on every event; self is unchanged."""
        ...
