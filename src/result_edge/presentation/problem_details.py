"""RFC 7807 Problem Details for HTTP APIs.

Pydantic models describing a failed Result in the Problem Details format.

RFC 7807: https://tools.ietf.org/html/rfc7807

Exports:
    ErrorDetail: Individual validation failure
    ProblemDetails: RFC 7807 compliant error response schema
"""

from pydantic import BaseModel, Field

from result_edge.core.enums import ValidationSeverity


class ErrorDetail(BaseModel):
    """Individual validation failure.

    Mirrors one ValidationError of an INVALID result.

    Attributes:
        field: Field the failure pertains to (None for document-level failures)
        code: Machine-readable failure code
        message: Human-readable failure message
        severity: Failure severity

    Examples:
        >>> detail = ErrorDetail(
        ...     field="email",
        ...     code="EMAIL_001",
        ...     message="Invalid email format",
        ... )
    """

    field: str | None = Field(None, description="Field name")
    code: str | None = Field(None, description="Machine-readable error code")
    message: str | None = Field(None, description="Human-readable error message")
    severity: ValidationSeverity = Field(
        ValidationSeverity.ERROR, description="Failure severity"
    )


class ProblemDetails(BaseModel):
    """RFC 7807 Problem Details for HTTP APIs.

    Attributes:
        type: URI reference identifying the problem type
        title: Short, human-readable summary of the problem type
        status: HTTP status code for this occurrence
        detail: Human-readable explanation specific to this occurrence
        instance: URI reference identifying the specific occurrence
        errors: Optional list of validation failures
        trace_id: Optional trace/correlation ID for support

    Examples:
        >>> problem = ProblemDetails(
        ...     type="about:blank",
        ...     title="Resource Not Found",
        ...     status=404,
        ...     detail="User 123 does not exist",
        ...     instance="/users/123",
        ...     trace_id="correlation-123",
        ... )
    """

    type: str = Field(
        ...,
        description="URI reference identifying the problem type",
        examples=["https://api.example.com/errors/invalid"],
    )
    title: str = Field(
        ...,
        description="Short, human-readable summary",
        examples=["Validation Failed"],
    )
    status: int = Field(
        ...,
        description="HTTP status code",
        examples=[400],
    )
    detail: str = Field(
        ...,
        description="Human-readable explanation",
        examples=["The email address format is invalid"],
    )
    instance: str = Field(
        ...,
        description="URI reference identifying this occurrence",
        examples=["/users/register"],
    )
    errors: list[ErrorDetail] | None = Field(
        None,
        description="List of validation failures",
    )
    trace_id: str | None = Field(
        None,
        description="Trace/correlation ID for debugging",
    )
