"""Core enums package.

Exports all core-level enums for convenient importing.

Usage:
    from result_edge.core.enums import ResultStatus, ValidationSeverity
"""

from result_edge.core.enums.environment import Environment
from result_edge.core.enums.result_status import ResultStatus
from result_edge.core.enums.validation_severity import ValidationSeverity

__all__ = ["Environment", "ResultStatus", "ValidationSeverity"]
