"""Conversion of values to readable strings, quoting, type checks and per-type formatters."""

__version__ = "1.0.0"

__all__ = ["context", "convert", "demo", "modules", "quoting", "traits"]