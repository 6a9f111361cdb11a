"""Core shared kernel.

This module provides the foundational value types:
- ResultStatus taxonomy and ValidationSeverity
- ValidationError records and ResultStateError
- Result for railway-oriented programming
- PagedInfo and PagedResult for paged collection queries

Configuration and the logger composition root live in ``core.config`` and
``core.container`` and are not imported here.
"""

from result_edge.core.enums import ResultStatus, ValidationSeverity
from result_edge.core.errors import ResultStateError, ValidationError
from result_edge.core.paged_info import PagedInfo
from result_edge.core.paged_result import PagedResult
from result_edge.core.result import Result

__all__ = [
    "PagedInfo",
    "PagedResult",
    "Result",
    "ResultStateError",
    "ResultStatus",
    "ValidationError",
    "ValidationSeverity",
]
