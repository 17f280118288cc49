"""Tests for src/application/schemas/pagination.py"""

import dataclasses

import pytest

from application.schemas.pagination import PageSnapshot
from domain.exceptions import InvalidArgumentError
from domain.services.paginator import Paginator


class TestPageSnapshot:
    def test_of_copies_current_page(self, paginator):
        snapshot = PageSnapshot.of(paginator.open(2))
        assert snapshot.items == [4, 5, 6]
        assert snapshot.total == 10
        assert snapshot.page == 2
        assert snapshot.size == 3
        assert snapshot.pages == 4

    def test_detached_from_paginator(self, paginator, numbers):
        snapshot = PageSnapshot.of(paginator)
        paginator.next()
        numbers[0] = 99
        assert snapshot.items == [1, 2, 3]
        assert snapshot.page == 1

    def test_empty_paginator(self, empty_paginator):
        snapshot = PageSnapshot.of(empty_paginator)
        assert snapshot.items == []
        assert snapshot.pages == 0
        assert snapshot.has_next is False
        assert snapshot.has_previous is False

    @pytest.mark.parametrize(
        "page, has_next, has_previous",
        [(1, True, False), (2, True, True), (4, False, True)],
    )
    def test_neighbours(self, paginator, page, has_next, has_previous):
        snapshot = PageSnapshot.of(paginator.open(page))
        assert snapshot.has_next is has_next
        assert snapshot.has_previous is has_previous

    def test_is_frozen(self):
        snapshot = PageSnapshot.of(Paginator([1], 1))
        with pytest.raises(dataclasses.FrozenInstanceError):
            snapshot.page = 2

    @pytest.mark.parametrize("size", [0, -1])
    def test_non_positive_size_rejected(self, size):
        with pytest.raises(InvalidArgumentError):
            PageSnapshot(items=[], total=0, page=1, size=size)

    def test_negative_total_rejected(self):
        with pytest.raises(InvalidArgumentError):
            PageSnapshot(total=-1)

    def test_direct_construction(self):
        snapshot = PageSnapshot(items=[1, 2], total=5, page=1, size=2)
        assert snapshot.pages == 3
        assert snapshot.has_next is True
