"""LoggerProtocol: the structured logging port used across the catalog.

Every call is an event name plus key-value context. The dispatcher binds
``request_type`` and ``request_id`` once per request, so every line it and
the publisher emit for that request carries them.

Usage:
    from product_catalog.core.container import get_logger

    log = get_logger().bind(request_type="CreateProduct")
    log.info("request_completed")
    log.warning("event_handler_failed", handler_name="audit")
"""

from __future__ import annotations

from typing import Any, Protocol


class LoggerProtocol(Protocol):
    """Structured logger: debug, info, warning, error, critical and bind()."""

    def debug(self, message: str, /, **context: Any) -> None: ...

    def info(self, message: str, /, **context: Any) -> None: ...

    def warning(self, message: str, /, **context: Any) -> None: ...

    def error(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        """Log a failed operation.

        Args:
            message: Event name.
            error: Exception whose type and message are added to the line.
            **context: Structured key-value context fields.
        """
        ...

    def critical(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        """Same shape as error(), at CRITICAL level."""
        ...

    def bind(self, **context: Any) -> LoggerProtocol:
        """Return a new logger that adds ``context`` to every line.

        The receiver is left unchanged.
        """
        ...
