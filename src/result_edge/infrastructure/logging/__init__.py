"""Logging adapters implementing LoggerProtocol."""

from result_edge.infrastructure.logging.console_adapter import ConsoleAdapter

__all__ = ["ConsoleAdapter"]
