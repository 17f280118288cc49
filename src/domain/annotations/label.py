"""Attach string labels to classes, fields, functions and methods.

Labels are plain metadata read by other helpers at runtime. A label placed
on a class is inherited by its subclasses. Dataclass fields carry their
labels in the field metadata, see :func:`labelled_field`.
"""

from __future__ import annotations

import dataclasses
import inspect
from typing import Any, Callable, Optional, TypeVar

from domain.exceptions import InvalidArgumentError

F = TypeVar("F")

# Used during deep comparison. On a class it says the class has field
# restriction; on a field it marks which fields are restricted.
COMPARISON_LABEL: str = "ObjectUtil#deepCompare"

_LABELS_ATTR = "__labels__"


def _normalize(values: tuple[Any, ...]) -> tuple[str, ...]:
    if not values:
        return ("",)
    for value in values:
        if not isinstance(value, str):
            raise InvalidArgumentError(f"labels must be strings, got {value!r}", argument="values")
    return tuple(dict.fromkeys(values))


def _merge(current: tuple[str, ...], values: tuple[str, ...]) -> tuple[str, ...]:
    return tuple(dict.fromkeys(current + values))


def _own_labels(target: Any) -> tuple[str, ...]:
    if inspect.isclass(target):
        return tuple(target.__dict__.get(_LABELS_ATTR, ()))
    return tuple(getattr(target, _LABELS_ATTR, ()))


def _field_labels(target: Any, field_name: str) -> tuple[str, ...]:
    if dataclasses.is_dataclass(target):
        for item in dataclasses.fields(target):
            if item.name == field_name:
                return tuple(item.metadata.get(_LABELS_ATTR, ()))
    member = getattr(target, field_name, None)
    if member is None:
        raise InvalidArgumentError(
            f"{getattr(target, '__name__', target)!r} has no field or member {field_name!r}",
            argument="field_name",
        )
    return _own_labels(member)


def get_labels(target: Any, field_name: Optional[str] = None) -> tuple[str, ...]:
    """Return every label of *target*, including those inherited by a class.

    With *field_name*, return the labels of that dataclass field (or
    member) of *target* instead.
    """
    if field_name is not None:
        return _field_labels(target, field_name)
    if not inspect.isclass(target):
        return _own_labels(target)
    labels: tuple[str, ...] = ()
    for klass in reversed(target.__mro__):
        labels = _merge(labels, _own_labels(klass))
    return labels


def has_label(target: Any, value: str, field_name: Optional[str] = None) -> bool:
    return value in get_labels(target, field_name)


def labelled_fields(target: Any, value: str) -> tuple[str, ...]:
    """Names of the dataclass fields of *target* carrying the label *value*."""
    if not dataclasses.is_dataclass(target):
        raise InvalidArgumentError(
            f"{getattr(target, '__name__', target)!r} is not a dataclass", argument="target"
        )
    return tuple(
        item.name
        for item in dataclasses.fields(target)
        if value in item.metadata.get(_LABELS_ATTR, ())
    )


def labelled_field(*values: str, **kwargs: Any) -> Any:
    """``dataclasses.field`` whose metadata records *values* as labels::

        @label(COMPARISON_LABEL)
        @dataclass
        class Account:
            owner: str = labelled_field(COMPARISON_LABEL, default="")
            balance: int = 0
    """
    labels = _normalize(values)
    metadata = dict(kwargs.pop("metadata", None) or {})
    metadata[_LABELS_ATTR] = _merge(tuple(metadata.get(_LABELS_ATTR, ())), labels)
    return dataclasses.field(metadata=metadata, **kwargs)


def label(*values: str) -> Callable[[F], F]:
    """Decorator recording *values* as labels of the decorated object.

    Without arguments the single default label ``""`` is recorded.
    """
    labels = _normalize(values)

    def decorate(target: F) -> F:
        if not (inspect.isclass(target) or callable(target)):
            raise InvalidArgumentError(
                f"cannot label {type(target).__name__} objects", argument="target"
            )
        try:
            setattr(target, _LABELS_ATTR, _merge(_own_labels(target), labels))
        except (AttributeError, TypeError) as exc:
            raise InvalidArgumentError(
                f"cannot attach labels to {target!r}", argument="target"
            ) from exc
        return target

    return decorate
