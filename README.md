# ustr

`ustr` turns any Python value into a readable string. It picks a
conversion strategy from what the value is and what it offers, quotes
strings nested inside collections, and lets you override formatting per
type with a `FormatContext`.

It has no dependencies beyond the standard library.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Converting values

```python
from ustr.convert import to_string, to_string_range

to_string(42)              # "42"
to_string(3.14)            # "3.140000"
to_string(True)            # "true"
to_string(None)            # "null"
to_string("hello")         # "hello"
to_string((1, "a"))        # '(1, "a")'
to_string([1, 2, 3])       # "[1, 2, 3]"
to_string(["a", "b"])      # '["a", "b"]'
to_string({"a": 1})        # '{"a": 1}'
to_string({1: "one"})      # '{1: "one"}'
```

`to_string(value)` chooses its strategy in this order:

1. `None` gives `"null"`;
2. a string is returned unchanged;
3. a boolean gives `"true"` or `"false"`;
4. an object with a callable `to_string()` method uses it;
5. integers are shown in decimal, other real numbers with six decimals
   (`0.0` gives `"0.000000"`);
6. a tuple is shown as `(a, b, ...)`, and an object with `first` and
   `second` attributes as `(first, second)`;
7. any other re-iterable container is formatted by `to_string_range`;
8. an object whose type defines `__str__` or `__repr__` uses `str()`;
9. anything else gives `[TypeName at 0x...]`, its type name and identity.

`to_string_range(items)` formats an iterable. A mapping contributes its
key/value pairs. If the iterable is non-empty and every item is pair-like
(a two-element tuple or an object with `first` and `second`), the result
is `{key: value, ...}`; otherwise it is `[a, b, ...]`. One-shot iterators
such as generators are accepted here, though `to_string` does not treat
them as containers.

Strings nested inside tuples, pairs and containers are wrapped in double
quotes, with embedded double quotes and backslashes escaped; a top-level
string is left as it is. `quote_if_needed(value)` applies the same rule to
a single value.

## Quoting strings

```python
from ustr.quoting import quoted_str

quoted_str("hello")                              # '"hello"'
quoted_str("say [hi]", "[", "]", "/")            # "[say /[hi/]]"
quoted_str('a "b"', '"', '"', "\0")              # '"a "b""' (no escaping)
quoted_str(None)                                 # "null"
```

`quoted_str(s, start_delim, end_delim, escape, is_utf8)` surrounds `s`
with the two delimiters and prefixes every occurrence of either delimiter
or of the escape character with the escape character. The defaults are a
double quote for both delimiters, a backslash as escape and `is_utf8`
false. An escape of `None`, `""` or `"\0"` turns escaping off. With
`is_utf8` set, only ASCII characters are escaped; others pass through
unchanged. Delimiters and escape must be single characters, otherwise
`ValueError` is raised; a non-string `s` raises `TypeError`.

## Type checks

`ustr.traits` holds the checks used to choose a strategy. Each takes a
value and returns a `bool`:

- `has_to_string` — the value has a callable `to_string` attribute;
- `is_streamable` — its type defines its own `__str__` or `__repr__`;
- `is_numeric` — it is a number, booleans excluded;
- `is_container` — it is iterable but not a one-shot iterator;
- `is_quotable_string` — it is a `str`;
- `is_pair_like` — it is a two-element tuple or has `first` and `second`.

## Per-type formatters

A `FormatContext` maps exact types to formatters and falls back to
`to_string` for every other type. Lookup is by exact type, so a formatter
for `int` is not used for `bool`.

```python
from ustr.context import FormatContext

ctx = FormatContext()
ctx.set_formatter(bool, lambda b: "YES" if b else "NO")
ctx.set_formatter(int, lambda i: f"INT:{i}")

ctx.to_string(True)        # "YES"
ctx.to_string(42)          # "INT:42"
ctx.to_string(3.14)        # "3.140000" (no float formatter set)

ctx.has_formatter(bool)    # True
ctx.remove_formatter(bool)
ctx.to_string(True)        # "true"
ctx.clear()
```

A formatter is either a plain callable or a `Formatter` instance, which
wraps a function and exposes `format(value)`. `set_formatter` raises
`TypeError` if its first argument is not a type or its second is neither.
Used as a context manager, a `FormatContext` clears all its formatters on
exit:

```python
with FormatContext() as ctx:
    ctx.set_formatter(float, lambda f: f"{f:.2f}")
    ctx.to_string(3.14159)   # "3.14"
```

## Demos

Two commands are installed with the package:

```
ustr-demo
ustr-multi-module-demo
```

`ustr-demo` (`ustr.demo.main`) prints a walk through basic values, custom
classes (`Point`, `Rectangle`, `Color`, `Temperature`), the type checks,
edge cases, container formatting and a format context. It exits with
status 0, or 1 after reporting an error.

`ustr-multi-module-demo` (`ustr.modules.main`) runs two small self-checks
(`module1_run_test`, `module2_run_test`), prints the conversions from
`module1_convert_values` and `module2_convert_complex_values`, and exits
with status 0 when both checks pass and 1 otherwise.

## What it does not do

Conversion is one way only: nothing parses the produced text back into
values, and there are no width, alignment or locale options beyond what a
custom formatter provides.