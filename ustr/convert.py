"""Conversion of arbitrary values to their text representation."""

from __future__ import annotations

import numbers
from collections.abc import Iterable, Mapping

from .quoting import NULL_STRING, quoted_str
from .traits import (
    has_to_string,
    is_container,
    is_numeric,
    is_pair_like,
    is_quotable_string,
    is_streamable,
)

__all__ = ["quote_if_needed", "to_string", "to_string_range"]


def _format_number(value: numbers.Number) -> str:
    if isinstance(value, numbers.Integral):
        return str(int(value))
    if isinstance(value, numbers.Real):
        return f"{float(value):.6f}"
    return str(value)


def _pair_parts(value: object) -> tuple[object, object]:
    if isinstance(value, tuple):
        first, second = value
        return first, second
    return value.first, value.second  # type: ignore[attr-defined]


def _format_tuple(values: Iterable[object]) -> str:
    return "(" + ", ".join(quote_if_needed(item) for item in values) + ")"


def quote_if_needed(value: object) -> str:
    """Convert a value, wrapping it in double quotes if it is a string."""
    if is_quotable_string(value):
        return quoted_str(to_string(value))
    return to_string(value)


def to_string_range(items: Iterable[object]) -> str:
    """Format a sequence of items as ``[a, b]`` or, for pairs, ``{k: v}``.

    A mapping contributes its key-value pairs.  When every item is pair-like
    the result uses the key-value form; otherwise the list form.
    """
    if isinstance(items, Mapping):
        elements: list[object] = list(items.items())
    else:
        elements = list(items)

    if elements and all(is_pair_like(item) for item in elements):
        entries = []
        for item in elements:
            key, val = _pair_parts(item)
            entries.append(f"{quote_if_needed(key)}: {quote_if_needed(val)}")
        return "{" + ", ".join(entries) + "}"
    return "[" + ", ".join(quote_if_needed(item) for item in elements) + "]"


def to_string(value: object) -> str:
    """Convert any value to text, choosing the strategy from its kind.

    In order: ``None`` gives ``"null"``, strings are returned unchanged,
    booleans give ``"true"``/``"false"``, a ``to_string`` method is used when
    present, numbers are formatted (floats with six decimals), tuples and
    pair-like objects give ``(a, b)``, containers are formatted by
    :func:`to_string_range`, values with their own ``str`` use it, and
    anything else gives its type name and identity.
    """
    if value is None:
        return NULL_STRING
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if has_to_string(value):
        return str(value.to_string())  # type: ignore[attr-defined]
    if is_numeric(value):
        return _format_number(value)  # type: ignore[arg-type]
    if isinstance(value, tuple):
        return _format_tuple(value)
    if is_pair_like(value):
        return _format_tuple(_pair_parts(value))
    if is_container(value):
        return to_string_range(value)  # type: ignore[arg-type]
    if is_streamable(value):
        return str(value)
    return f"[{type(value).__qualname__} at {hex(id(value))}]"