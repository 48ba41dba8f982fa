"""A walk through the conversion functions, printed to standard output."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass

from .context import FormatContext
from .convert import to_string, to_string_range
from .traits import has_to_string, is_numeric, is_streamable

__all__ = [
    "Color",
    "Point",
    "Rectangle",
    "Temperature",
    "format_error",
    "main",
]


@dataclass(frozen=True)
class Point:
    """A point in the plane that knows how to describe itself."""

    x: float
    y: float

    def to_string(self) -> str:
        """Describe the point with both coordinates to six decimals."""
        return f"Point({to_string(float(self.x))}, {to_string(float(self.y))})"


@dataclass(frozen=True)
class Rectangle:
    """A rectangle that has a text form but no ``to_string`` method."""

    top_left: Point
    bottom_right: Point

    def __str__(self) -> str:
        return (
            f"Rectangle[{self.top_left.to_string()}"
            f" to {self.bottom_right.to_string()}]"
        )


class Color:
    """An RGB colour with no text form of its own."""

    __slots__ = ("red", "green", "blue")

    def __init__(self, red: int, green: int, blue: int) -> None:
        for name, component in (("red", red), ("green", green), ("blue", blue)):
            if not 0 <= component <= 255:
                raise ValueError(f"{name} must be in 0..255, got {component}")
        self.red = red
        self.green = green
        self.blue = blue


@dataclass(frozen=True)
class Temperature:
    """A temperature with both a ``to_string`` method and a text form."""

    celsius: float

    def to_string(self) -> str:
        """Describe the temperature in degrees Celsius, six decimals."""
        return f"{to_string(float(self.celsius))}°C"

    def __str__(self) -> str:
        return f"{self.celsius:g} degrees Celsius"


def format_error(operation: str, error_code: object, timestamp: object) -> str:
    """Build an error message naming the operation, code and time."""
    return (
        f"Error in {operation}"
        f" (code: {to_string(error_code)}, time: {to_string(timestamp)})"
    )


def _debug_log(message: str, value: object) -> None:
    print(f"[DEBUG] {message}: {to_string(value)}")


def _print_rows(
    rows: Iterable[tuple[str, object]],
    convert: Callable[[object], str] = to_string,
) -> None:
    """Print each template with its value converted and filled in."""
    for template, value in rows:
        print(template.format(convert(value)))


def _show_basic_types() -> None:
    print("\n=== Basic Type Conversions ===")
    rows = [
        ("Integer: {}", 42),
        ("Negative integer: {}", -123),
        ("Float: {}", 3.14159),
        ("Double: {}", 2.718281828),
        ("Long: {}", 1234567890),
        ("Unsigned: {}", 4294967295),
        ("Boolean true: {}", True),
        ("Boolean false: {}", False),
        ("Character: {}", "A"),
        ("Special char (newline): '{}' (newline)", "\n"),
        ("Special char (tab): '{}' (tab)", "\t"),
        ("std::string: {}", "Hello, World!"),
        ("String literal: {}", "Hello from literal"),
        ("Char array: {}", "Char array string"),
    ]
    _print_rows(rows)


def _show_custom_classes() -> None:
    print("\n=== Custom Class Conversions ===")
    print(f"Point with to_string(): {to_string(Point(1.5, 2.7))}")
    rect = Rectangle(Point(0.0, 0.0), Point(10.0, 5.0))
    print(f"Streamable Rectangle: {to_string(rect)}")
    print(f"Non-streamable Color: {to_string(Color(255, 0, 0))}")
    print(f"Temperature (to_string precedence): {to_string(Temperature(23.5))}")


def _show_type_traits() -> None:
    print("\n=== Type Trait Demonstrations ===")
    point = Point(0.0, 0.0)
    rect = Rectangle(point, point)
    color = Color(0, 0, 0)
    print(f"Point has_to_string: {to_string(has_to_string(point))}")
    print(f"Rectangle has_to_string: {to_string(has_to_string(rect))}")
    print(f"Color has_to_string: {to_string(has_to_string(color))}")
    print(f"int has_to_string: {to_string(has_to_string(0))}")

    print(f"\nRectangle is_streamable: {to_string(is_streamable(rect))}")
    print(f"Color is_streamable: {to_string(is_streamable(color))}")
    print(f"int is_streamable: {to_string(is_streamable(0))}")
    print(f"std::string is_streamable: {to_string(is_streamable(''))}")

    print(f"\nint is_numeric: {to_string(is_numeric(0))}")
    print(f"double is_numeric: {to_string(is_numeric(0.0))}")
    print(f"bool is_numeric: {to_string(is_numeric(True))}")
    print(f"char is_numeric: {to_string(is_numeric('A'))}")


def _show_edge_cases() -> None:
    print("\n=== Edge Cases ===")
    values = [
        ("Zero int: {}", 0),
        ("Zero double: {}", 0.0),
        ("Empty string: '{}'", ""),
        ("Large number: {}", 1234567890123456789),
        ("Scientific notation: {}", 1.23e-10),
        ("Infinity: {}", float("inf")),
        ("NaN: {}", float("nan")),
    ]
    _print_rows(values)

    print("\n--- nullptr Conversion ---")
    null_value = None
    nulls = [
        ("nullptr literal: {}", None),
        ("std::nullptr_t variable: {}", null_value),
        ("null char pointer: {}", None),
    ]
    _print_rows(nulls)


def _show_real_world_usage() -> None:
    print("\n=== Real-World Usage Examples ===")
    _debug_log("User ID", 12345)
    _debug_log("Account balance", 1234.56)
    _debug_log("Is premium user", True)
    _debug_log("Username", "john_doe")
    _debug_log("User location", Point(40.7128, -74.0060))

    print("\n--- Configuration Display ---")
    config = {
        "max_connections": to_string(100),
        "timeout_seconds": to_string(30.5),
        "debug_mode": to_string(True),
        "server_name": to_string("web-server-01"),
    }
    for key, value in sorted(config.items()):
        print(f"{key} = {value}")

    print("\n--- Error Message Formatting ---")
    print(format_error("file_read", 404, 1703701234.567))
    print(format_error("network_connect", -1, 1703701235.123))


def _show_range_conversion() -> None:
    print("\n=== Iterator-Based Conversion Demo ===")
    numbers = [1, 2, 3, 4, 5]
    colors = {"red": "#FF0000", "green": "#00FF00", "blue": "#0000FF"}
    rows = [
        ("Vector of ints: {}", numbers),
        ("Vector of strings: {}", ["hello", "world", "iterator", "conversion"]),
        ("Empty vector: {}", []),
        ("Vector of pairs: {}", [("one", 1), ("two", 2), ("three", 3)]),
        ("Map container: {}", dict(sorted(colors.items()))),
        ("Subset of vector: {}", numbers[1:-1]),
    ]
    _print_rows(rows, to_string_range)


def _show_scoped_formatting() -> None:
    print("\n=== Format Context Demo ===")
    with FormatContext() as ctx:
        ctx.set_formatter(bool, lambda b: "✅ YES" if b else "❌ NO")
        ctx.set_formatter(float, lambda d: f"{d:.3e}")

        print("Using custom formatters:")
        print(f"  bool true:  {ctx.to_string(True)}")
        print(f"  bool false: {ctx.to_string(False)}")
        print(f"  float pi:   {ctx.to_string(3.14159)}")
        print(f"  double e:   {ctx.to_string(2.71828)}")
        print(f"  int (default): {ctx.to_string(42)}")

        print("\nUsing default formatting:")
        print(f"  bool true:  {to_string(True)}")
        print(f"  bool false: {to_string(False)}")
        print(f"  float pi:   {to_string(3.14159)}")
        print(f"  double e:   {to_string(2.71828)}")

        print("\nPractical example - Configuration Display:")
        print(f"Debug Mode: {ctx.to_string(True)}")
        print(f"Verbose Logging: {ctx.to_string(False)}")
        print(f"Timeout: {ctx.to_string(30.5)}")
        print(f"Precision: {ctx.to_string(0.001)}")
        print(f"Max Connections: {ctx.to_string(100)}")


def main(argv: Sequence[str] | None = None) -> int:
    """Print every demonstration section and return an exit code."""
    parser = argparse.ArgumentParser(
        description="Show how values of many kinds are converted to text."
    )
    parser.parse_args(argv)

    print("USTR Library Demo - Universal String Conversion")
    print("===============================================")
    try:
        _show_basic_types()
        _show_custom_classes()
        _show_type_traits()
        _show_edge_cases()
        _show_real_world_usage()
        _show_range_conversion()
        _show_scoped_formatting()
        print("\n=== Demo completed successfully! ===")
    except Exception as exc:  # noqa: BLE001 - report any failure and exit non-zero
        print(f"Error during demo: {exc}", file=sys.stderr)
        return 1
    return 0