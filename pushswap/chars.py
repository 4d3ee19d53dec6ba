"""Character classification, case mapping and integer/text conversion."""

from __future__ import annotations

from typing import Union

Char = Union[int, str]

_WHITESPACE = " \t\n\v\f\r"
_INT_MIN = -(2**31)
_INT_RANGE = 2**32


def _code(c: Char) -> int:
    """Return the code point of a one-character string, or the integer itself."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    return int(c)


def _wrap_int32(value: int) -> int:
    """Reduce a value to the range of a signed 32-bit integer, wrapping around."""
    return (value - _INT_MIN) % _INT_RANGE + _INT_MIN


def _is_lower(code: int) -> bool:
    return ord("a") <= code <= ord("z")


def _is_upper(code: int) -> bool:
    return ord("A") <= code <= ord("Z")


def isalpha(c: Char) -> bool:
    """True for an ASCII letter."""
    code = _code(c)
    return _is_lower(code) or _is_upper(code)


def isdigit(c: Char) -> bool:
    """True for an ASCII decimal digit."""
    return ord("0") <= _code(c) <= ord("9")


def isalnum(c: Char) -> bool:
    """True for an ASCII letter or digit."""
    return isalpha(c) or isdigit(c)


def isascii(c: Char) -> bool:
    """True for a code in the 7-bit ASCII range."""
    return 0 <= _code(c) <= 127


def isprint(c: Char) -> bool:
    """True for a printable ASCII character, space included."""
    return 32 <= _code(c) <= 126


def _convert_case(c: Char, shift: int, applies) -> Char:
    code = _code(c)
    if applies(code):
        code += shift
    return chr(code) if isinstance(c, str) else code


def tolower(c: Char) -> Char:
    """Lower-case an ASCII upper-case letter; anything else is returned unchanged."""
    return _convert_case(c, 32, _is_upper)


def toupper(c: Char) -> Char:
    """Upper-case an ASCII lower-case letter; anything else is returned unchanged."""
    return _convert_case(c, -32, _is_lower)


def atoi(text: str) -> int:
    """Parse a leading decimal integer the way the C library routine does.

    Leading whitespace is skipped, one optional sign is accepted and digits
    are read until the first non-digit. Text with no digits gives 0. The
    result wraps to a signed 32-bit integer.
    """
    rest = text.lstrip(_WHITESPACE)
    sign = 1
    if rest[:1] in ("+", "-"):
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]
    end = 0
    for ch in rest:
        if not isdigit(ch):
            break
        end += 1
    value = int(rest[:end]) if end else 0
    return _wrap_int32(sign * value)


def itoa(n: int) -> str:
    """Render an integer in decimal, with a leading minus sign when negative."""
    return str(int(n))