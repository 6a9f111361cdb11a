"""LoggerProtocol for logging result translations.

Structured, backend-agnostic logging interface. Log calls take a message plus
key-value context. ``for_result()`` returns a logger with the outcome of a
failed Result (status, correlation id, error counts, validation errors)
bound to every event, so call sites only add what they know about the
translation itself.

Usage:
    from result_edge.core.container import get_logger

    log = get_logger().for_result(result)
    log.warning("Result translated to client error", http_status=404)
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from result_edge.domain.protocols.result_protocol import ResultProtocol


class LoggerProtocol(Protocol):
    """Protocol for structured logging adapters."""

    def warning(self, message: str, /, **context: Any) -> None:
        """Log a warning-level message (client-side failures)."""
        ...

    def error(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        """Log an error-level message (server-side failures).

        Args:
            message: Human-readable message (avoid f-strings; use context).
            error: Optional exception; implementations add error_type and
                error_message fields.
            **context: Structured key-value context fields.
        """
        ...

    def bind(self, **context: Any) -> LoggerProtocol:
        """Return a new logger with permanently bound context."""
        ...

    def for_result(self, result: ResultProtocol) -> LoggerProtocol:
        """Return a new logger bound to the outcome of ``result``.

        Bound fields: result_status, error_count, validation_error_count,
        plus correlation_id and validation_errors when present.
        """
        ...
