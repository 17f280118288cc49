"""Split a fixed sequence of data into equally sized pages.

Every page has the same number of slots and each slot holds one element;
only the last page may be partially filled. Page indices start at one.
"""

from __future__ import annotations

from typing import Callable, Generic, Iterator, Optional, Sequence, TypeVar

from domain.utils.conditions import arg_not_null, check, check_state
from domain.utils.math_util import clamp_int

T = TypeVar("T")


class PageStream(Generic[T]):
    """Lazy view over one page of a backing sequence.

    The bounds are fixed when the stream is created; every call to
    ``iter()`` indexes them again, so the stream can be consumed repeatedly
    and reading a page never touches elements outside it.
    """

    def __init__(self, data: Sequence[T], start: int = 0, stop: int = 0) -> None:
        self._data = data
        self._start = start
        self._stop = max(start, stop)

    def __iter__(self) -> Iterator[T]:
        return (self._data[index] for index in range(self._start, self._stop))

    def __len__(self) -> int:
        return self._stop - self._start


class Paginator(Generic[T]):
    """Fixed-size pages over a sequence, with a cursor on the current page."""

    def __init__(self, data: Sequence[T], slot: int) -> None:
        arg_not_null("data", data)
        check(slot > 0, "the slot number must be higher than zero")
        self._data = data
        self._slot_per_page = slot
        self._total_slot = len(data)
        self._current_page = 1
        if self._total_slot % slot == 0:
            self._total_page = self._total_slot // slot
        else:
            self._total_page = self._total_slot // slot + 1

    def __repr__(self) -> str:
        return (
            f"Paginator(page={self._current_page}/{self._total_page}, "
            f"slot_per_page={self._slot_per_page}, total_slot={self._total_slot})"
        )

    # ------------------------------------------------------------------
    # Navigation
    # ------------------------------------------------------------------

    def open(self, index: int) -> Paginator[T]:
        """Open the page at *index* (starting from one).

        An out-of-range index selects the first or the last page instead.
        """
        self._current_page = clamp_int(index, 1, self._total_page)
        return self

    def next(self) -> Paginator[T]:
        return self.open(self._current_page + 1)

    def prev(self) -> Paginator[T]:
        return self.open(self._current_page - 1)

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------

    @property
    def data(self) -> Sequence[T]:
        """The backing sequence itself, not a copy."""
        return self._data

    @property
    def slot_per_page(self) -> int:
        return self._slot_per_page

    @property
    def total_slot(self) -> int:
        return self._total_slot

    @property
    def current_page(self) -> int:
        return self._current_page

    @property
    def total_page(self) -> int:
        """Total number of pages (0 if the data is empty)."""
        return self._total_page

    @property
    def has_next(self) -> bool:
        return self._current_page < self._total_page

    @property
    def has_previous(self) -> bool:
        return self._current_page > 1

    # ------------------------------------------------------------------
    # Retrieval
    # ------------------------------------------------------------------

    def _page_bounds(self) -> tuple[int, int]:
        start = (self._current_page - 1) * self._slot_per_page
        stop = min(self._total_slot, self._current_page * self._slot_per_page)
        return start, stop

    def collect(self) -> list[T]:
        """Return a new list holding every element of the current page.

        Raises ``IllegalStateError`` when there are no pages.
        """
        check_state(self._total_page > 0, "cannot collect while total_page == 0")
        start, stop = self._page_bounds()
        return list(self._data[start:stop])

    def stream(self) -> PageStream[T]:
        """Return a lazy stream over the current page, empty if there is no data."""
        if self._total_page == 0:
            return PageStream(self._data)
        start, stop = self._page_bounds()
        return PageStream(self._data, start, stop)

    def each(self, action: Optional[Callable[[T], object]]) -> Paginator[T]:
        """Call *action* on every element of the current page, in order."""
        if action is not None and self._total_page > 0:
            for element in self.collect():
                action(element)
        return self
