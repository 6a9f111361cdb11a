"""Status-tagged result type for railway-oriented programming.

Every operation returns a Result instead of raising or returning a bare
value. Success, business-rule failure and infrastructural failure share one
shape: a ResultStatus, an optional payload, plain error messages, structured
validation errors, and metadata (success message, correlation id).

Usage:
    def find_user(user_id: int) -> Result[User]:
        user = repository.get(user_id)
        if user is None:
            return Result.not_found(f"User {user_id} does not exist")
        return Result.success(user)

    result = find_user(42).map(lambda user: user.email)
    match result:
        case Result(status=ResultStatus.OK, value=email):
            print(f"Email: {email}")
        case Result(status=ResultStatus.NOT_FOUND, errors=errors):
            print(f"Missing: {errors}")

A void-style operation returns ``Result[None]`` built with ``Result.success()``.
Failures short-circuit ``map`` chains: transforms are skipped and the first
failure's status and errors ride through unchanged.
"""

from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Generic, TypeVar

from result_edge.core.enums import ResultStatus
from result_edge.core.errors import ResultStateError, ValidationError

if TYPE_CHECKING:
    from result_edge.core.paged_info import PagedInfo
    from result_edge.core.paged_result import PagedResult

T = TypeVar("T")  # Payload type
U = TypeVar("U")  # Mapped payload type


@dataclass(frozen=True, slots=True, kw_only=True)
class Result(Generic[T]):
    """Outcome of an operation.

    Attributes:
        status: Outcome kind. OK is the only success status.
        value: Payload, present for successful results.
        errors: Plain error messages, in order.
        validation_errors: Structured validation failures, in order.
        success_message: Optional message set by success factories.
        correlation_id: Identifier correlating a failure with tracing/support.
    """

    status: ResultStatus = ResultStatus.OK
    value: T | None = None
    errors: tuple[str, ...] = ()
    validation_errors: tuple[ValidationError, ...] = ()
    success_message: str = ""
    correlation_id: str = ""

    def __post_init__(self) -> None:
        """Normalize collections and enforce the success invariant.

        Raises:
            TypeError: If an error is not a str or a validation error is not a
                ValidationError.
            ValueError: If an OK result carries errors or validation errors.
        """
        object.__setattr__(self, "status", ResultStatus(self.status))
        object.__setattr__(self, "errors", tuple(self.errors))
        object.__setattr__(self, "validation_errors", tuple(self.validation_errors))

        for message in self.errors:
            if not isinstance(message, str):
                raise TypeError(
                    f"Error messages must be str, got {type(message).__name__}"
                )
        for validation_error in self.validation_errors:
            if not isinstance(validation_error, ValidationError):
                raise TypeError(
                    "Validation errors must be ValidationError, "
                    f"got {type(validation_error).__name__}"
                )

        if self.status is ResultStatus.OK and (self.errors or self.validation_errors):
            raise ValueError("A successful result cannot carry errors")

    # ------------------------------------------------------------------
    # Factories
    # ------------------------------------------------------------------

    @classmethod
    def success(cls, value: T | None = None, message: str = "") -> "Result[T]":
        """Create a successful result.

        Called without arguments this is the void-style success.

        Args:
            value: Payload.
            message: Optional success message.

        Returns:
            Result with status OK.
        """
        return cls(value=value, success_message=message)

    @classmethod
    def success_with_message(cls, message: str) -> "Result[T]":
        """Create a successful void result carrying a success message."""
        return cls(success_message=message)

    @classmethod
    def from_value(cls, value: T) -> "Result[T]":
        """Convert a bare value into a successful result."""
        return cls(value=value)

    @classmethod
    def error(cls, *messages: str) -> "Result[T]":
        """Create an ERROR result with zero or more messages.

        Messages are separate ``str`` arguments; unpack a list with
        ``Result.error(*messages)``.

        Raises:
            TypeError: If a message is not a str.
        """
        return cls(status=ResultStatus.ERROR, errors=messages)

    @classmethod
    def error_with_correlation_id(
        cls, correlation_id: str, *messages: str
    ) -> "Result[T]":
        """Create an ERROR result tagged with a correlation id.

        Args:
            correlation_id: Tracing/support identifier.
            *messages: Error messages.

        Returns:
            Result with status ERROR and correlation_id set.
        """
        return cls(
            status=ResultStatus.ERROR,
            errors=messages,
            correlation_id=correlation_id,
        )

    @classmethod
    def invalid(
        cls, *validation_errors: ValidationError | Iterable[ValidationError]
    ) -> "Result[T]":
        """Create an INVALID result.

        Accepts a single ValidationError, several of them, or one list/tuple.
        Order is preserved.

        Raises:
            TypeError: If an argument or one of its elements is not a
                ValidationError.
            ValueError: If no validation error is given.
        """
        flattened: list[ValidationError] = []
        for item in validation_errors:
            if isinstance(item, ValidationError):
                flattened.append(item)
            elif isinstance(item, str | bytes) or not isinstance(item, Iterable):
                raise TypeError(
                    "invalid() takes ValidationError instances, "
                    f"got {type(item).__name__}"
                )
            else:
                flattened.extend(item)

        if not flattened:
            raise ValueError("invalid() requires at least one validation error")

        return cls(status=ResultStatus.INVALID, validation_errors=flattened)

    @classmethod
    def not_found(cls, *messages: str) -> "Result[T]":
        """Create a NOT_FOUND result with zero or more messages."""
        return cls(status=ResultStatus.NOT_FOUND, errors=messages)

    @classmethod
    def forbidden(cls) -> "Result[T]":
        return cls(status=ResultStatus.FORBIDDEN)

    @classmethod
    def unauthorized(cls) -> "Result[T]":
        return cls(status=ResultStatus.UNAUTHORIZED)

    @classmethod
    def conflict(cls, *messages: str) -> "Result[T]":
        """Create a CONFLICT result with zero or more messages."""
        return cls(status=ResultStatus.CONFLICT, errors=messages)

    @classmethod
    def critical_error(cls, *messages: str) -> "Result[T]":
        """Create a CRITICAL_ERROR result.

        Raises:
            ValueError: If no message is given.
        """
        if not messages:
            raise ValueError("critical_error() requires at least one message")
        return cls(status=ResultStatus.CRITICAL_ERROR, errors=messages)

    @classmethod
    def unavailable(cls, *messages: str) -> "Result[T]":
        """Create an UNAVAILABLE result.

        Raises:
            ValueError: If no message is given.
        """
        if not messages:
            raise ValueError("unavailable() requires at least one message")
        return cls(status=ResultStatus.UNAVAILABLE, errors=messages)

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------

    @property
    def is_success(self) -> bool:
        return self.status is ResultStatus.OK

    @property
    def value_type(self) -> type:
        """Runtime type of the payload (NoneType when absent)."""
        return type(self.value)

    def get_value(self) -> Any:
        """Return the payload as an untyped handle."""
        return self.value

    def unwrap(self) -> T:
        """Extract the payload of a successful result.

        Returns:
            The payload (None for void results).

        Raises:
            ResultStateError: If the result is not successful.
        """
        if not self.is_success:
            raise ResultStateError(
                f"Cannot extract value from a {self.status.value} result",
                status=self.status,
                errors=self.errors,
            )
        return self.value  # type: ignore[return-value]

    # ------------------------------------------------------------------
    # Transformations
    # ------------------------------------------------------------------

    def propagate_failure(self) -> "Result[Any]":
        """Re-type a failed result for any payload type.

        Status, errors, validation errors and correlation id carry over;
        the payload is dropped.

        Raises:
            ResultStateError: If the result is successful.
        """
        if self.is_success:
            raise ResultStateError(
                "Cannot propagate a successful result as a failure",
                status=self.status,
            )
        return Result(
            status=self.status,
            errors=self.errors,
            validation_errors=self.validation_errors,
            correlation_id=self.correlation_id,
        )

    def map(self, transform: Callable[[T], U]) -> "Result[U]":
        """Transform the payload of a successful result.

        On success, ``transform`` is applied to the value and the result keeps
        its success message and correlation id. Exceptions raised by
        ``transform`` are not caught. On failure, ``transform`` is never
        called and the failure is propagated unchanged.

        Args:
            transform: Function from the current payload to the new payload.

        Returns:
            New Result with the transformed payload or the same failure.

        Example:
            >>> Result.success(5).map(lambda x: x * 2).map(lambda x: x + 1).value
            11
        """
        if not self.is_success:
            return self.propagate_failure()

        return Result(
            value=transform(self.value),  # type: ignore[arg-type]
            success_message=self.success_message,
            correlation_id=self.correlation_id,
        )

    def to_paged_result(self, paged_info: "PagedInfo") -> "PagedResult[T]":
        """Wrap this result, success or failure, with pagination metadata."""
        from result_edge.core.paged_result import PagedResult

        return PagedResult.from_result(self, paged_info)
