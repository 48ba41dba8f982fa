"""Per-type formatting rules that override the default conversion."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from .convert import to_string as default_to_string

__all__ = ["FormatContext", "Formatter"]


@dataclass(frozen=True)
class Formatter:
    """Turns a value into text with a given function.

    Subclasses may override :meth:`format` instead of passing a function.
    """

    func: Callable[[Any], str]

    def format(self, value: Any) -> str:
        """Format ``value`` with the wrapped function."""
        return self.func(value)


class FormatContext:
    """A set of formatters, each bound to one exact type.

    A value whose type has no formatter is converted the default way.
    Lookup uses the exact type, so a formatter for ``int`` does not apply
    to ``bool``.
    """

    def __init__(self) -> None:
        self._formatters: dict[type, Formatter] = {}

    def set_formatter(
        self, type_: type, formatter: Formatter | Callable[[Any], str]
    ) -> None:
        """Use ``formatter`` for values of exactly ``type_``."""
        if not isinstance(type_, type):
            raise TypeError(f"expected a type, got {type_!r}")
        if not isinstance(formatter, Formatter):
            if not callable(formatter):
                raise TypeError(
                    f"formatter must be a Formatter or callable, got {formatter!r}"
                )
            formatter = Formatter(formatter)
        self._formatters[type_] = formatter

    def to_string(self, value: Any) -> str:
        """Convert ``value`` with its type's formatter, or the default way."""
        formatter = self._formatters.get(type(value))
        if formatter is not None:
            return formatter.format(value)
        return default_to_string(value)

    def has_formatter(self, type_: type) -> bool:
        """True if a formatter is set for ``type_``."""
        return type_ in self._formatters

    def remove_formatter(self, type_: type) -> None:
        """Drop the formatter for ``type_``, if any."""
        self._formatters.pop(type_, None)

    def clear(self) -> None:
        """Drop every formatter."""
        self._formatters.clear()

    def __enter__(self) -> FormatContext:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.clear()