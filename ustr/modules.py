"""Two independent users of the conversion functions, run together."""

from __future__ import annotations

import argparse
from collections.abc import Sequence
from dataclasses import dataclass

from .convert import to_string, to_string_range

__all__ = [
    "main",
    "module1_convert_values",
    "module1_run_test",
    "module2_convert_complex_values",
    "module2_run_test",
]


def _module1_checks_pass() -> bool:
    return to_string(None) == "null"


def module1_convert_values() -> str:
    """Convert a few basic values and return them one per line."""
    lines = [
        f"nullptr: {to_string(None)}",
        f"null char*: {to_string(None)}",
        f"int: {to_string(42)}",
        f"bool: {to_string(True)}",
        f"double: {to_string(3.14159)}",
    ]
    return "".join(line + "\n" for line in lines)


def module1_run_test() -> bool:
    """Check null handling, report the outcome and return it."""
    print("Running Module1 nullptr handling test...")
    success = _module1_checks_pass()
    print("Module1 test passed!" if success else "Module1 test failed!")
    return success


@dataclass(frozen=True)
class _Module2Point:
    x: int
    y: int

    def to_string(self) -> str:
        return f"Point({to_string(self.x)},{to_string(self.y)})"


def _module2_checks_pass() -> bool:
    return to_string_range([1, 2, 3]) == "[1, 2, 3]" and to_string(None) == "null"


def module2_convert_complex_values() -> str:
    """Convert null, a custom object and two containers, one per line."""
    lines = [
        f"nullptr: {to_string(None)}",
        f"Point: {to_string(_Module2Point(10, 20))}",
        f"Vector: {to_string_range(['hello', 'world'])}",
        f"Map: {to_string_range({'one': 1, 'two': 2})}",
    ]
    return "".join(line + "\n" for line in lines)


def module2_run_test() -> bool:
    """Check container and null handling, report the outcome and return it."""
    print("Running Module2 complex types handling test...")
    success = _module2_checks_pass()
    print("Module2 test passed!" if success else "Module2 test failed!")
    return success


def main(argv: Sequence[str] | None = None) -> int:
    """Run both modules' checks, print their conversions, return an exit code."""
    parser = argparse.ArgumentParser(
        description="Run the checks and conversions of both modules."
    )
    parser.parse_args(argv)

    print("USTR Multi-Module Demo")
    print("=====================\n")

    print("Running tests from Module 1...")
    module1_success = module1_run_test()

    print("\nRunning tests from Module 2...")
    module2_success = module2_run_test()

    print("\nModule 1 Conversions:")
    print("-------------------")
    print(module1_convert_values(), end="")

    print("\nModule 2 Conversions:")
    print("-------------------")
    print(module2_convert_complex_values(), end="")

    if module1_success and module2_success:
        print("\nAll tests passed successfully!")
        return 0
    print("\nSome tests failed!")
    return 1