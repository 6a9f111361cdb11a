"""ResultProtocol for call sites that hold a non-generic result.

Exposes only the status/error surface plus a type-erased payload accessor,
so code such as response translators can inspect any Result (or
PagedResult) without knowing its payload type.

Usage:
    from result_edge.domain.protocols import ResultProtocol

    def describe(result: ResultProtocol) -> str:
        if result.is_success:
            return f"ok ({result.value_type.__name__})"
        return f"{result.status.value}: {list(result.errors)}"
"""

from typing import Any, Protocol, runtime_checkable

from result_edge.core.enums import ResultStatus
from result_edge.core.errors import ValidationError


@runtime_checkable
class ResultProtocol(Protocol):
    """Capability interface shared by every Result."""

    @property
    def status(self) -> ResultStatus:
        """Outcome kind."""
        ...

    @property
    def is_success(self) -> bool:
        """True if and only if status is OK."""
        ...

    @property
    def errors(self) -> tuple[str, ...]:
        """Plain error messages, in order."""
        ...

    @property
    def validation_errors(self) -> tuple[ValidationError, ...]:
        """Structured validation failures, in order."""
        ...

    @property
    def correlation_id(self) -> str:
        """Tracing/support identifier, empty when unset."""
        ...

    @property
    def value_type(self) -> type:
        """Runtime type of the payload."""
        ...

    def get_value(self) -> Any:
        """Return the payload as an untyped handle."""
        ...
