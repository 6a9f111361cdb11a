"""Console logging adapter for result translation events.

Outputs structured logs to stdout using structlog.
- Development: human-readable console renderer with colors
- Testing/CI/Production: JSON renderer for machine parsing

Validation errors bound through ``for_result()`` are rendered as plain dicts
so both renderers show identifier, message, code and severity.

Structural implementation of LoggerProtocol (no inheritance).
"""

from __future__ import annotations

import logging
import sys
from collections.abc import MutableMapping
from typing import TYPE_CHECKING, Any

import structlog

from result_edge.core.errors import ValidationError

if TYPE_CHECKING:
    from result_edge.domain.protocols import ResultProtocol


def render_validation_errors(
    _logger: Any, _method_name: str, event_dict: MutableMapping[str, Any]
) -> MutableMapping[str, Any]:
    """structlog processor turning ValidationError records into dicts."""
    validation_errors = event_dict.get("validation_errors")
    if validation_errors:
        event_dict["validation_errors"] = [
            {
                "identifier": error.identifier,
                "message": error.message,
                "code": error.code,
                "severity": error.severity.value,
            }
            if isinstance(error, ValidationError)
            else error
            for error in validation_errors
        ]
    return event_dict


class ConsoleAdapter:
    """Console logger.

    Args:
        use_json (bool): JSON output when True, human-readable when False.
        level (int): Minimum level emitted (stdlib logging level number).
    """

    def __init__(self, *, use_json: bool = False, level: int = logging.INFO) -> None:
        processors: list[structlog.types.Processor] = [
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            render_validation_errors,
        ]
        processors.append(
            structlog.processors.JSONRenderer()
            if use_json
            else structlog.dev.ConsoleRenderer(colors=True)
        )

        structlog.configure(
            processors=processors,
            wrapper_class=structlog.make_filtering_bound_logger(level),
            context_class=dict,
            logger_factory=structlog.PrintLoggerFactory(file=sys.stdout),
            cache_logger_on_first_use=True,
        )

        self._logger = structlog.get_logger()

    def warning(self, message: str, /, **context: Any) -> None:
        self._logger.warning(message, **context)

    def error(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        if error is not None:
            context["error_type"] = type(error).__name__
            context["error_message"] = str(error)
        self._logger.error(message, **context)

    def bind(self, **context: Any) -> ConsoleAdapter:
        bound_adapter = ConsoleAdapter.__new__(ConsoleAdapter)
        bound_adapter._logger = self._logger.bind(**context)
        return bound_adapter

    def for_result(self, result: ResultProtocol) -> ConsoleAdapter:
        """Bind the outcome of a result to every subsequent event.

        Args:
            result: Result being logged (any payload type).

        Returns:
            ConsoleAdapter: New adapter with the result context bound.
        """
        context: dict[str, Any] = {
            "result_status": result.status.value,
            "error_count": len(result.errors),
            "validation_error_count": len(result.validation_errors),
        }
        if result.correlation_id:
            context["correlation_id"] = result.correlation_id
        if result.validation_errors:
            context["validation_errors"] = result.validation_errors
        return self.bind(**context)
