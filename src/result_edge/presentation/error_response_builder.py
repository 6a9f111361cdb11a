"""Error response builder for RFC 7807 Problem Details.

Translates failed Results into ProblemDetails without depending on any web
framework. Callers serialize with ``problem.model_dump(exclude_none=True)``
and set the HTTP status from ``problem.status``.

Exports:
    ErrorResponseBuilder: Utility class for building RFC 7807 responses
    http_status_for: ResultStatus to HTTP status code mapping
"""

from http import HTTPStatus
from typing import Any

from result_edge.core.config import settings
from result_edge.core.enums import ResultStatus
from result_edge.core.errors import ResultStateError
from result_edge.domain.protocols import LoggerProtocol, ResultProtocol
from result_edge.presentation.problem_details import ErrorDetail, ProblemDetails

_STATUS_CODES: dict[ResultStatus, HTTPStatus] = {
    ResultStatus.OK: HTTPStatus.OK,
    ResultStatus.ERROR: HTTPStatus.UNPROCESSABLE_ENTITY,
    ResultStatus.FORBIDDEN: HTTPStatus.FORBIDDEN,
    ResultStatus.UNAUTHORIZED: HTTPStatus.UNAUTHORIZED,
    ResultStatus.INVALID: HTTPStatus.BAD_REQUEST,
    ResultStatus.NOT_FOUND: HTTPStatus.NOT_FOUND,
    ResultStatus.CONFLICT: HTTPStatus.CONFLICT,
    ResultStatus.CRITICAL_ERROR: HTTPStatus.INTERNAL_SERVER_ERROR,
    ResultStatus.UNAVAILABLE: HTTPStatus.SERVICE_UNAVAILABLE,
}

_TITLES: dict[ResultStatus, str] = {
    ResultStatus.ERROR: "Operation Failed",
    ResultStatus.FORBIDDEN: "Access Denied",
    ResultStatus.UNAUTHORIZED: "Authentication Required",
    ResultStatus.INVALID: "Validation Failed",
    ResultStatus.NOT_FOUND: "Resource Not Found",
    ResultStatus.CONFLICT: "Resource Conflict",
    ResultStatus.CRITICAL_ERROR: "Internal Server Error",
    ResultStatus.UNAVAILABLE: "Service Unavailable",
}


def http_status_for(status: ResultStatus) -> int:
    """Map a ResultStatus to its HTTP status code.

    Args:
        status: Result status.

    Returns:
        HTTP status code (200 for OK, 400-599 for failures).

    Example:
        >>> http_status_for(ResultStatus.NOT_FOUND)
        404
    """
    return int(_STATUS_CODES[status])


class ErrorResponseBuilder:
    """Build RFC 7807 Problem Details from failed results.

    Example:
        >>> result = Result.not_found("User 123 does not exist")
        >>> problem = ErrorResponseBuilder.from_result(result, instance="/users/123")
        >>> problem.status
        404
    """

    @staticmethod
    def from_result(
        result: ResultProtocol,
        instance: str,
        trace_id: str | None = None,
        logger: LoggerProtocol | None = None,
    ) -> ProblemDetails:
        """Convert a failed Result to RFC 7807 ProblemDetails.

        Args:
            result: Failed result to convert (any payload type)
            instance: URI reference of the failing occurrence (request path)
            trace_id: Trace ID; defaults to the result's correlation id
            logger: Logger for the translation event; defaults to get_logger()

        Returns:
            ProblemDetails describing the failure

        Raises:
            ResultStateError: If the result is successful
        """
        if result.is_success:
            raise ResultStateError(
                "Cannot build problem details from a successful result",
                status=result.status,
            )

        status_code = http_status_for(result.status)
        title = _TITLES[result.status]

        problem = ProblemDetails(
            type=ErrorResponseBuilder._get_type(result.status),
            title=title,
            status=status_code,
            detail="; ".join(result.errors) or title,
            instance=instance,
            errors=None,
            trace_id=trace_id or result.correlation_id or None,
        )

        if result.validation_errors:
            problem.errors = [
                ErrorDetail(
                    field=error.identifier,
                    code=error.code,
                    message=error.message,
                    severity=error.severity,
                )
                for error in result.validation_errors
            ]

        ErrorResponseBuilder._log(problem, result, logger)
        return problem

    @staticmethod
    def _get_type(status: ResultStatus) -> str:
        """Build the problem type URI for a status.

        Example:
            >>> ErrorResponseBuilder._get_type(ResultStatus.INVALID)
            'about:blank'
        """
        if not settings.problem_base_url:
            return "about:blank"
        return f"{settings.problem_base_url}/errors/{status.value}"

    @staticmethod
    def _log(
        problem: ProblemDetails,
        result: ResultProtocol,
        logger: LoggerProtocol | None,
    ) -> None:
        if logger is None:
            from result_edge.core.container import get_logger

            logger = get_logger()

        log = logger.for_result(result)
        context: dict[str, Any] = {
            "http_status": problem.status,
            "instance": problem.instance,
        }
        if problem.trace_id:
            context["trace_id"] = problem.trace_id

        if problem.status >= HTTPStatus.INTERNAL_SERVER_ERROR:
            log.error("Result translated to server error", **context)
        else:
            log.warning("Result translated to client error", **context)
