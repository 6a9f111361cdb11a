"""Pagination metadata attached to paged results.

PagedInfo is a plain, mutable metadata record. It performs no validation:
zero, negative or inconsistent values (page_number beyond total_pages) are
accepted as-is. Fields are read through properties and changed only through
the fluent setters, which mutate in place and return the same instance.

Usage:
    info = PagedInfo(1, 10, 5, 50).set_page_number(2).set_total_records(100)
    assert info.page_number == 2
"""

from dataclasses import dataclass
from typing import Self


@dataclass(slots=True, init=False, repr=False)
class PagedInfo:
    """Page position metadata for a collection result.

    Args:
        page_number: Current page number.
        page_size: Items per page.
        total_pages: Total number of pages.
        total_records: Total records available.
    """

    _page_number: int
    _page_size: int
    _total_pages: int
    _total_records: int

    def __init__(
        self,
        page_number: int = 0,
        page_size: int = 0,
        total_pages: int = 0,
        total_records: int = 0,
    ) -> None:
        self._page_number = page_number
        self._page_size = page_size
        self._total_pages = total_pages
        self._total_records = total_records

    @classmethod
    def from_total_records(
        cls, page_number: int, page_size: int, total_records: int
    ) -> "PagedInfo":
        """Create pagination metadata, deriving total pages.

        Args:
            page_number: Current page number.
            page_size: Items per page.
            total_records: Total records available.

        Returns:
            PagedInfo with total_pages rounded up (0 when page_size is 0).
        """
        total_pages = (
            (total_records + page_size - 1) // page_size if page_size > 0 else 0
        )
        return cls(page_number, page_size, total_pages, total_records)

    @property
    def page_number(self) -> int:
        return self._page_number

    @property
    def page_size(self) -> int:
        return self._page_size

    @property
    def total_pages(self) -> int:
        return self._total_pages

    @property
    def total_records(self) -> int:
        return self._total_records

    @property
    def has_previous_page(self) -> bool:
        """True when the current page is past the first page."""
        return self._page_number > 1

    @property
    def has_next_page(self) -> bool:
        """True when pages remain after the current page."""
        return self._page_number < self._total_pages

    def set_page_number(self, page_number: int) -> Self:
        self._page_number = page_number
        return self

    def set_page_size(self, page_size: int) -> Self:
        self._page_size = page_size
        return self

    def set_total_pages(self, total_pages: int) -> Self:
        self._total_pages = total_pages
        return self

    def set_total_records(self, total_records: int) -> Self:
        self._total_records = total_records
        return self

    def __repr__(self) -> str:
        return (
            f"PagedInfo(page_number={self._page_number}, "
            f"page_size={self._page_size}, "
            f"total_pages={self._total_pages}, "
            f"total_records={self._total_records})"
        )
