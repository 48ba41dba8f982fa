"""Predicates that decide how a value is converted to text."""

from __future__ import annotations

import numbers
from collections.abc import Iterable, Iterator

__all__ = [
    "has_to_string",
    "is_container",
    "is_numeric",
    "is_pair_like",
    "is_quotable_string",
    "is_streamable",
]


def has_to_string(value: object) -> bool:
    """True if the value offers a callable ``to_string`` method."""
    return callable(getattr(value, "to_string", None))


def is_streamable(value: object) -> bool:
    """True if the value's type defines its own text representation."""
    cls = type(value)
    return cls.__str__ is not object.__str__ or cls.__repr__ is not object.__repr__


def is_numeric(value: object) -> bool:
    """True for numbers, excluding booleans."""
    return isinstance(value, numbers.Number) and not isinstance(value, bool)


def is_container(value: object) -> bool:
    """True if the value can be iterated over repeatedly.

    One-shot iterators such as generators do not count.
    """
    return isinstance(value, Iterable) and not isinstance(value, Iterator)


def is_quotable_string(value: object) -> bool:
    """True for values that are quoted when shown inside a collection."""
    return isinstance(value, str)


def is_pair_like(value: object) -> bool:
    """True for two-element tuples and objects with ``first`` and ``second``."""
    if isinstance(value, tuple) and len(value) == 2:
        return True
    return hasattr(value, "first") and hasattr(value, "second")