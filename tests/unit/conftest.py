"""Shared fixtures for unit tests."""

from __future__ import annotations

import io
import logging
import sys
from pathlib import Path

import pytest
import structlog

# Ensure src is importable
sys.path.insert(0, str(Path(__file__).resolve().parents[2] / "src"))

from application.services.pagination_service import PaginationService
from domain.services.paginator import Paginator
from infrastructure.observability.logging_config import LIBRARY_LOGGER
from infrastructure.settings import PaginationSettings

TEN_NUMBERS = list(range(1, 11))


@pytest.fixture
def numbers() -> list[int]:
    return list(TEN_NUMBERS)


@pytest.fixture
def paginator(numbers: list[int]) -> Paginator[int]:
    return Paginator(numbers, 3)


@pytest.fixture
def empty_paginator() -> Paginator[int]:
    return Paginator([], 5)


@pytest.fixture
def settings() -> PaginationSettings:
    return PaginationSettings(default_slot_per_page=4)


@pytest.fixture
def pagination_service(settings: PaginationSettings) -> PaginationService:
    return PaginationService(settings)


@pytest.fixture
def log_stream():
    stream = io.StringIO()
    yield stream
    structlog.reset_defaults()
    library_logger = logging.getLogger(LIBRARY_LOGGER)
    for handler in list(library_logger.handlers):
        library_logger.removeHandler(handler)
    library_logger.setLevel(logging.NOTSET)
    library_logger.propagate = True
