"""Structural interfaces (PEP 544).

Usage:
    from result_edge.domain.protocols import LoggerProtocol, ResultProtocol
"""

from result_edge.domain.protocols.logger_protocol import LoggerProtocol
from result_edge.domain.protocols.result_protocol import ResultProtocol

__all__ = ["LoggerProtocol", "ResultProtocol"]
