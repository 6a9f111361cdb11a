"""Core errors package.

Exports the validation error record and the result state exception.

Usage:
    from result_edge.core.errors import ResultStateError, ValidationError
"""

from result_edge.core.errors.result_state_error import ResultStateError
from result_edge.core.errors.validation_error import ValidationError

__all__ = ["ResultStateError", "ValidationError"]
