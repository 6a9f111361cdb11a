"""Dependency factories (composition root).

Adapter selection is centralized here so that callers depend only on
protocols. Factories are ``lru_cache``d application-scoped singletons.

Usage:
    from result_edge.core.container import get_logger

    logger = get_logger().for_result(result)
    logger.warning("Result translated to client error", http_status=404)
"""

import logging
from functools import lru_cache
from typing import TYPE_CHECKING

from result_edge.core.config import settings
from result_edge.core.enums import Environment

if TYPE_CHECKING:
    from result_edge.domain.protocols import LoggerProtocol


_JSON_ENVIRONMENTS = frozenset(
    {Environment.TESTING, Environment.CI, Environment.PRODUCTION}
)


@lru_cache()
def get_logger() -> "LoggerProtocol":
    """Return the application-scoped logger singleton.

    Adapter selection:
    - development: ConsoleAdapter (human-readable)
    - testing/ci/production: ConsoleAdapter (JSON)

    Returns:
        LoggerProtocol: Logger instance implementing the protocol.
    """
    from result_edge.infrastructure.logging.console_adapter import ConsoleAdapter

    level = logging.getLevelName(settings.effective_log_level)

    use_json = settings.environment in _JSON_ENVIRONMENTS
    return ConsoleAdapter(use_json=use_json, level=level)
