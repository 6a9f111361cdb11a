"""Structured validation failure carried by INVALID results.

ValidationError is data, not an exception: it is produced by upstream
validation logic and stored verbatim in ``Result.validation_errors``.
Unlike Result, it is deliberately mutable so callers can fill it in
field by field.

Usage:
    from result_edge.core.errors import ValidationError
    from result_edge.core.enums import ValidationSeverity

    error = ValidationError(
        identifier="email",
        message="Invalid email format",
        code="EMAIL_001",
        severity=ValidationSeverity.WARNING,
    )
    error.message = "Email address is malformed"
"""

from dataclasses import dataclass

from result_edge.core.enums import ValidationSeverity


@dataclass(slots=True, kw_only=True)
class ValidationError:
    """Single validation failure.

    Attributes:
        identifier: Field or parameter the failure pertains to (None for
            document-level failures).
        message: Human-readable description.
        code: Machine-readable failure code.
        severity: Failure severity (defaults to ERROR).
    """

    identifier: str | None = None
    message: str | None = None
    code: str | None = None
    severity: ValidationSeverity = ValidationSeverity.ERROR

    def __str__(self) -> str:
        """String representation of validation error."""
        message = self.message or ""
        if self.identifier:
            return f"{self.identifier}: {message}"
        return message
