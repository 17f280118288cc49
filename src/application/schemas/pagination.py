"""Detached snapshots of a paginator's current page.

``PageSnapshot`` copies the items of the current page together with the
metadata a caller needs to render or forward it, so it stays valid after
the paginator moves on.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Generic, List, TypeVar

from domain.services.paginator import Paginator
from domain.utils.conditions import check

T = TypeVar("T")


@dataclass(frozen=True)
class PageSnapshot(Generic[T]):
    """Immutable view of one page.

    ``page`` is 1-based.  ``total`` counts every element, not just this page.
    """

    items: List[T] = field(default_factory=list)
    total: int = 0
    page: int = 1
    size: int = 1

    def __post_init__(self) -> None:
        check(self.size > 0, "the page size must be higher than zero")
        check(self.total >= 0, "the total must not be negative")

    @classmethod
    def of(cls, paginator: Paginator[T]) -> PageSnapshot[T]:
        return cls(
            items=list(paginator.stream()),
            total=paginator.total_slot,
            page=paginator.current_page,
            size=paginator.slot_per_page,
        )

    @property
    def pages(self) -> int:
        """Total number of pages (0 when there is no data)."""
        if self.total == 0:
            return 0
        return math.ceil(self.total / self.size)

    @property
    def has_next(self) -> bool:
        return self.page < self.pages

    @property
    def has_previous(self) -> bool:
        return self.page > 1
