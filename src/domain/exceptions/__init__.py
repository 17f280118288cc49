from domain.exceptions.pagination_exceptions import (
    IllegalStateError,
    InvalidArgumentError,
    PaginationError,
)

__all__ = [
    "IllegalStateError",
    "InvalidArgumentError",
    "PaginationError",
]
