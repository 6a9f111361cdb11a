"""Exception raised when a Result is used against its status.

Outcomes themselves are never raised. ResultStateError signals a
programming error at the call site: reading the payload out of a failed
result, or treating a successful result as a failure.
"""

from collections.abc import Sequence

from result_edge.core.enums import ResultStatus


class ResultStateError(Exception):
    """Operation is not valid for the result's current status.

    Attributes:
        status: Status of the offending result.
        errors: Plain error messages of the offending result.
    """

    def __init__(
        self,
        message: str,
        *,
        status: ResultStatus,
        errors: Sequence[str] = (),
    ) -> None:
        super().__init__(message)
        self.status = status
        self.errors = tuple(errors)
