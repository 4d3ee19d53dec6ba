"""A small formatted-output routine supporting %c %s %d %i %u %x %X %p and %%."""

from __future__ import annotations

import sys
from typing import Any, Callable, Optional, TextIO

_INT32_SPAN = 1 << 32
_INT32_MIN = -(1 << 31)
_POINTER_SPAN = 1 << 64


def _signed32(value: Any) -> int:
    return (int(value) - _INT32_MIN) % _INT32_SPAN + _INT32_MIN


def _unsigned32(value: Any) -> int:
    return int(value) % _INT32_SPAN


def _char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError(f"%c expects a single character, got {value!r}")
        return value
    return chr(int(value) & 0xFF)


def _string(value: Any) -> str:
    return "(null)" if value is None else str(value)


def _pointer(value: Any) -> str:
    if value is None or int(value) == 0:
        return "(nil)"
    return "0x" + format(int(value) % _POINTER_SPAN, "x")


_CONVERSIONS: dict[str, Callable[[Any], str]] = {
    "c": _char,
    "s": _string,
    "d": lambda value: str(_signed32(value)),
    "i": lambda value: str(_signed32(value)),
    "u": lambda value: str(_unsigned32(value)),
    "x": lambda value: format(_unsigned32(value), "x"),
    "X": lambda value: format(_unsigned32(value), "X"),
    "p": _pointer,
}


def render(fmt: str, *args: Any) -> str:
    """Return the text that printf would write for this format and arguments.

    Unknown conversion letters produce nothing and consume no argument.
    Raises TypeError when arguments run out and ValueError when the format
    ends with a lone '%'.
    """
    pieces = []
    values = iter(args)
    chars = iter(fmt)
    for ch in chars:
        if ch != "%":
            pieces.append(ch)
            continue
        spec = next(chars, None)
        if spec is None:
            raise ValueError("format ends with a lone '%'")
        if spec == "%":
            pieces.append("%")
            continue
        convert = _CONVERSIONS.get(spec)
        if convert is None:
            continue
        try:
            value = next(values)
        except StopIteration:
            raise TypeError(f"not enough arguments for %{spec}") from None
        pieces.append(convert(value))
    return "".join(pieces)


def printf(fmt: str, *args: Any, stream: Optional[TextIO] = None) -> int:
    """Write the formatted text to the stream (standard output by default).

    Returns the number of characters written.
    """
    out = sys.stdout if stream is None else stream
    text = render(fmt, *args)
    out.write(text)
    return len(text)