"""RFC 7807 translation of failed results.

Framework-agnostic: builds Pydantic ProblemDetails models that a web layer
can serialize. No web framework is imported here.

Exports:
    ErrorDetail: Individual validation failure
    ProblemDetails: RFC 7807 compliant error response schema
    ErrorResponseBuilder: Utility for building RFC 7807 responses
    http_status_for: ResultStatus to HTTP status code mapping
"""

from result_edge.presentation.error_response_builder import (
    ErrorResponseBuilder,
    http_status_for,
)
from result_edge.presentation.problem_details import ErrorDetail, ProblemDetails

__all__ = [
    "ErrorDetail",
    "ErrorResponseBuilder",
    "ProblemDetails",
    "http_status_for",
]
