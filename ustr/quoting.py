"""Quoting and escaping of strings between delimiters."""

from __future__ import annotations

__all__ = [
    "DEFAULT_DELIMITER",
    "DEFAULT_ESCAPE",
    "DEFAULT_IS_UTF8",
    "NULL_STRING",
    "quoted_str",
]

DEFAULT_DELIMITER = '"'
DEFAULT_ESCAPE = "\\"
DEFAULT_IS_UTF8 = False
NULL_STRING = "null"

# Values of ``escape`` that switch escaping off.
_NO_ESCAPE = (None, "", "\0")


def _require_char(name: str, value: object) -> str:
    if not isinstance(value, str) or len(value) != 1:
        raise ValueError(f"{name} must be a single character, got {value!r}")
    return value


def quoted_str(
    s: str | None,
    start_delim: str = DEFAULT_DELIMITER,
    end_delim: str = DEFAULT_DELIMITER,
    escape: str | None = DEFAULT_ESCAPE,
    is_utf8: bool = DEFAULT_IS_UTF8,
) -> str:
    """Wrap ``s`` in delimiters, escaping delimiters and the escape character.

    ``None`` as the string gives ``"null"`` unquoted.  An ``escape`` of
    ``None``, ``""`` or ``"\\0"`` turns escaping off.  With ``is_utf8`` set,
    only ASCII characters are candidates for escaping; any other character
    is copied through unchanged.
    """
    if s is None:
        return NULL_STRING
    if not isinstance(s, str):
        raise TypeError(f"expected a string, got {type(s).__name__}")
    _require_char("start_delim", start_delim)
    _require_char("end_delim", end_delim)

    if escape in _NO_ESCAPE:
        return f"{start_delim}{s}{end_delim}"
    _require_char("escape", escape)

    special = {start_delim, end_delim, escape}

    def needs_escape(ch: str) -> bool:
        return ch in special and (not is_utf8 or ord(ch) < 0x80)

    body = "".join(escape + ch if needs_escape(ch) else ch for ch in s)
    return f"{start_delim}{body}{end_delim}"