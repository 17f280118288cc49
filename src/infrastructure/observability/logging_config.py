"""structlog wiring for the pagination helpers.

The helpers never configure logging on import. An embedding application
calls :func:`configure_logging` with its :class:`PaginationSettings`, which
routes ``pagekit`` events through the stdlib ``pagekit`` logger and renders
them as JSON or as plain console lines.
"""

from __future__ import annotations

import logging
import sys
from typing import Any, Optional, TextIO

import structlog

from infrastructure.settings import PaginationSettings

LIBRARY_LOGGER: str = "pagekit"


def tag_library(logger: Any, method_name: str, event_dict: dict[str, Any]) -> dict[str, Any]:
    """Mark events coming from this library."""
    event_dict.setdefault("library", LIBRARY_LOGGER)
    return event_dict


def _renderer(settings: PaginationSettings) -> structlog.types.Processor:
    if settings.log_json:
        return structlog.processors.JSONRenderer(sort_keys=True)
    return structlog.dev.ConsoleRenderer(colors=False)


def configure_logging(
    settings: Optional[PaginationSettings] = None,
    stream: Optional[TextIO] = None,
) -> logging.Logger:
    """Route structlog events to the stdlib ``pagekit`` logger.

    Only the ``pagekit`` logger is touched; the root logger and its
    handlers are left to the application. Calling this again replaces the
    handler installed by the previous call. Returns the configured logger.
    """
    settings = settings if settings is not None else PaginationSettings()
    level = logging.getLevelName(settings.log_level.upper())
    if not isinstance(level, int):
        level = logging.INFO

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            tag_library,  # type: ignore[list-item]
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                _renderer(settings),
            ],
        )
    )

    library_logger = logging.getLogger(LIBRARY_LOGGER)
    for existing in list(library_logger.handlers):
        if isinstance(existing.formatter, structlog.stdlib.ProcessorFormatter):
            library_logger.removeHandler(existing)
    library_logger.addHandler(handler)
    library_logger.setLevel(level)
    library_logger.propagate = False
    return library_logger


def get_logger(name: str, **context: Any) -> structlog.stdlib.BoundLogger:
    """Return a structlog logger named ``pagekit.<name>`` bound to *context*."""
    if name == LIBRARY_LOGGER or name.startswith(f"{LIBRARY_LOGGER}."):
        qualified = name
    else:
        qualified = f"{LIBRARY_LOGGER}.{name}"
    logger: structlog.stdlib.BoundLogger = structlog.get_logger(qualified)
    return logger.bind(**context) if context else logger
