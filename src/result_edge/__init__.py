"""result-edge: status-tagged outcome values.

Public API:
    - Result: Generic outcome container with per-status factories and map()
    - PagedResult / PagedInfo: Paged collection results
    - ResultStatus: Closed outcome taxonomy
    - ValidationError / ValidationSeverity: Structured validation failures
    - ResultStateError: Raised when a result is used against its status
    - ResultProtocol: Non-generic capability interface
"""

from result_edge.core import (
    PagedInfo,
    PagedResult,
    Result,
    ResultStateError,
    ResultStatus,
    ValidationError,
    ValidationSeverity,
)
from result_edge.domain.protocols import ResultProtocol

__all__ = [
    "PagedInfo",
    "PagedResult",
    "Result",
    "ResultProtocol",
    "ResultStateError",
    "ResultStatus",
    "ValidationError",
    "ValidationSeverity",
]
