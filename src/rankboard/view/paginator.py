"""
Page window computation for ordered sequences.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, Sequence, TypeVar

from .entities import ContractViolation

T = TypeVar("T")


@dataclass(frozen=True)
class PageWindow(Generic[T]):
    """Visible slice of an ordered sequence plus pagination metadata."""

    items: tuple[T, ...]
    total_pages: int
    effective_page: int
    total_items: int
    start_index: int

    @property
    def has_previous(self) -> bool:
        return self.effective_page > 1

    @property
    def has_next(self) -> bool:
        return self.effective_page < self.total_pages


def validate_page_size(page_size: int) -> int:
    if isinstance(page_size, bool) or not isinstance(page_size, int) or page_size <= 0:
        raise ContractViolation(f"page_size must be a positive integer, got {page_size!r}")
    return page_size


def count_pages(total_items: int, page_size: int) -> int:
    """Return ceil(total_items / page_size); an empty sequence has 0 pages."""
    validate_page_size(page_size)
    if total_items <= 0:
        return 0
    return (total_items + page_size - 1) // page_size


def clamp_page(requested_page: int, total_pages: int) -> int:
    """
    Clamp a requested 1-based page into the displayable range.

    With no pages at all, page 1 is still displayable (and empty).
    """
    if isinstance(requested_page, bool) or not isinstance(requested_page, int):
        raise ContractViolation(f"page must be an integer, got {requested_page!r}")
    if requested_page < 1:
        raise ContractViolation(f"page must be >= 1, got {requested_page}")
    return min(requested_page, max(total_pages, 1))


def paginate(items: Sequence[T], page_size: int, requested_page: int = 1) -> PageWindow[T]:
    """Slice *items* into the window for *requested_page*, clamped to range."""
    total_items = len(items)
    total_pages = count_pages(total_items, page_size)
    effective_page = clamp_page(requested_page, total_pages)
    start = (effective_page - 1) * page_size
    end = min(start + page_size, total_items)
    return PageWindow(
        items=tuple(items[start:end]),
        total_pages=total_pages,
        effective_page=effective_page,
        total_items=total_items,
        start_index=start,
    )
