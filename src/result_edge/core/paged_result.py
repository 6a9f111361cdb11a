"""Result specialization for paged collection queries.

A PagedResult is a Result plus a PagedInfo. Built from a raw payload it is
successful; built from an existing Result it inherits that result's full
status and error state, so a failed paged query is representable. Check
``is_success`` before treating ``value``/``paged_info`` as page data.

The PagedInfo is held by reference, not copied: changes made through the
original instance's fluent setters remain visible via ``paged_info``.
"""

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import TypeVar

from result_edge.core.paged_info import PagedInfo
from result_edge.core.result import Result

T = TypeVar("T")
U = TypeVar("U")


@dataclass(frozen=True, slots=True, kw_only=True)
class PagedResult(Result[T]):
    """Result carrying pagination metadata.

    Attributes:
        paged_info: Pagination metadata (zeroed when not supplied).
    """

    paged_info: PagedInfo = field(default_factory=PagedInfo)

    @classmethod
    def create(cls, paged_info: PagedInfo, value: T) -> "PagedResult[T]":
        """Create a successful paged result.

        Args:
            paged_info: Pagination metadata.
            value: Page payload (usually a list of records).

        Returns:
            PagedResult with status OK.
        """
        return cls(value=value, paged_info=paged_info)

    @classmethod
    def from_result(
        cls, result: Result[T], paged_info: PagedInfo
    ) -> "PagedResult[T]":
        """Copy a Result's full state into a PagedResult.

        Args:
            result: Source result, successful or not.
            paged_info: Pagination metadata.

        Returns:
            PagedResult with the same status, value, errors, validation
            errors, success message and correlation id.
        """
        return cls(
            status=result.status,
            value=result.value,
            errors=result.errors,
            validation_errors=result.validation_errors,
            success_message=result.success_message,
            correlation_id=result.correlation_id,
            paged_info=paged_info,
        )

    def map(self, transform: Callable[[T], U]) -> "PagedResult[U]":
        """Transform the page payload, keeping the same paged_info."""
        mapped: Result[U] = Result.map(self, transform)
        return PagedResult.from_result(mapped, self.paged_info)
