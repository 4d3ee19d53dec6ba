"""Writing characters, strings and numbers to a text stream."""

from __future__ import annotations

from typing import TextIO, Union

from pushswap.chars import itoa

Char = Union[int, str]


def _as_char(c: Char) -> str:
    """Return c as a one-character string; integers are truncated to a byte."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    return chr(int(c) & 0xFF)


def _require_text(text: str) -> str:
    if text is None:
        raise TypeError("expected a string, got None")
    return text


def putchar_fd(c: Char, stream: TextIO) -> None:
    """Write one character to the stream."""
    stream.write(_as_char(c))


def putstr_fd(text: str, stream: TextIO) -> None:
    """Write a string to the stream."""
    stream.write(_require_text(text))


def putendl_fd(text: str, stream: TextIO) -> None:
    """Write a string followed by a newline to the stream."""
    stream.write(_require_text(text) + "\n")


def putnbr_fd(n: int, stream: TextIO) -> None:
    """Write an integer in decimal to the stream."""
    stream.write(itoa(n))