from __future__ import annotations


class PaginationError(Exception):
    """Base class for all errors raised by the pagination helpers.

    Carries a human-readable ``title`` next to the ``detail`` message so
    callers can report failures without knowing exception internals.
    """

    def __init__(self, detail: str = "", *, title: str = "Pagination Error") -> None:
        super().__init__(detail)
        self.detail = detail
        self.title = title


class InvalidArgumentError(PaginationError, ValueError):
    def __init__(self, detail: str = "", *, argument: str = "") -> None:
        self.argument = argument
        super().__init__(detail, title="Invalid Argument")


class IllegalStateError(PaginationError, RuntimeError):
    def __init__(self, detail: str = "") -> None:
        super().__init__(detail, title="Illegal State")
