"""Application service that builds paginators from configured defaults.

``PaginationService`` resolves the page size from ``PaginationSettings``
when the caller does not pass one, and hands out detached page snapshots.
Each debug event carries the paginator's position.
"""

from __future__ import annotations

from typing import Any, Optional, Sequence, TypeVar

import structlog

from domain.services.paginator import Paginator
from infrastructure.observability.logging_config import get_logger
from infrastructure.settings import PaginationSettings, get_settings

from application.schemas.pagination import PageSnapshot

T = TypeVar("T")


def paginator_context(paginator: Paginator[Any]) -> dict[str, int]:
    """Log fields describing where *paginator* currently stands."""
    return {
        "current_page": paginator.current_page,
        "total_page": paginator.total_page,
        "slot_per_page": paginator.slot_per_page,
        "total_slot": paginator.total_slot,
    }


class PaginationService:

    def __init__(self, settings: Optional[PaginationSettings] = None) -> None:
        self._settings = settings if settings is not None else get_settings()
        self._logger: structlog.stdlib.BoundLogger = get_logger("pagination")

    @property
    def default_slot_per_page(self) -> int:
        return self._settings.default_slot_per_page

    def paginate(self, data: Sequence[T], slot: Optional[int] = None, page: int = 1) -> Paginator[T]:
        """Create a paginator over *data* and open *page*.

        *slot* falls back to ``default_slot_per_page``.
        """
        paginator = Paginator(data, slot if slot is not None else self.default_slot_per_page)
        paginator.open(page)
        self._logger.bind(**paginator_context(paginator)).debug(
            "paginator_created", requested_page=page
        )
        return paginator

    def snapshot(self, paginator: Paginator[T]) -> PageSnapshot[T]:
        snapshot = PageSnapshot.of(paginator)
        self._logger.bind(**paginator_context(paginator)).debug(
            "page_snapshot_taken", items=len(snapshot.items)
        )
        return snapshot
