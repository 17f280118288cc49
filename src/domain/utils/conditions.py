"""Precondition checks shared by the pagination helpers.

Each check raises a distinguishable exception kind so callers can tell a
bad argument apart from an operation attempted in the wrong state.
"""

from __future__ import annotations

from typing import TypeVar

from domain.exceptions import IllegalStateError, InvalidArgumentError

T = TypeVar("T")


def arg_not_null(name: str, value: T | None) -> T:
    """Return *value*, or raise ``InvalidArgumentError`` if it is ``None``."""
    if value is None:
        raise InvalidArgumentError(f"the argument '{name}' must not be None", argument=name)
    return value


def check(condition: bool, message: str) -> None:
    """Raise ``InvalidArgumentError`` with *message* when *condition* is false."""
    if not condition:
        raise InvalidArgumentError(message)


def check_state(condition: bool, message: str) -> None:
    """Raise ``IllegalStateError`` with *message* when *condition* is false."""
    if not condition:
        raise IllegalStateError(message)
