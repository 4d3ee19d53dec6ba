"""String routines with C-library semantics, expressed over Python strings.

Where the C routines hand back a pointer into a string, these return an
index (or None where the C routine returns a null pointer). Where they write
into a caller's buffer, these return the resulting text instead.
"""

from __future__ import annotations

from itertools import islice, zip_longest
from typing import Callable, Optional, Union

Char = Union[int, str]


def _as_char(c: Char) -> str:
    """Return c as a one-character string; integers are truncated to a byte."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    return chr(int(c) & 0xFF)


def _check_non_negative(name: str, value: int) -> None:
    if value < 0:
        raise ValueError(f"{name} must not be negative, got {value}")


def split(text: str, sep: Char) -> list[str]:
    """Split text on a separator character, dropping empty pieces."""
    separator = _as_char(sep)
    return [piece for piece in text.split(separator) if piece]


def strchr(text: str, c: Char) -> Optional[int]:
    """Index of the first occurrence of c, or None.

    Searching for the NUL character finds the end of the string.
    """
    ch = _as_char(c)
    index = text.find(ch)
    if index >= 0:
        return index
    return len(text) if ch == "\0" else None


def strrchr(text: str, c: Char) -> Optional[int]:
    """Index of the last occurrence of c, or None.

    Searching for the NUL character finds the end of the string.
    """
    ch = _as_char(c)
    if ch == "\0":
        return len(text)
    index = text.rfind(ch)
    return None if index < 0 else index


def strdup(text: str) -> str:
    """Return a copy of the text."""
    return "".join(text)


def striteri(text: str, func: Callable[[int, str], Optional[str]]) -> str:
    """Call func(index, char) for every character, in order.

    func may return a replacement character, or None to keep the one it was
    given. The text with all replacements applied is returned.
    """
    result = []
    for index, ch in enumerate(text):
        replacement = func(index, ch)
        result.append(ch if replacement is None else replacement)
    return "".join(result)


def strmapi(text: str, func: Callable[[int, str], str]) -> str:
    """Build a new string from func(index, char) applied to every character."""
    return "".join(func(index, ch) for index, ch in enumerate(text))


def strjoin(first: str, second: str) -> str:
    """Concatenate two strings."""
    if first is None or second is None:
        raise TypeError("strjoin needs two strings")
    return first + second


def strlcpy(src: str, size: int) -> tuple[str, int]:
    """Copy src into a buffer of size characters, terminator included.

    Returns the text that fits (at most size - 1 characters) and the full
    length of src, which tells whether the copy was truncated.
    """
    _check_non_negative("size", size)
    copied = src[: size - 1] if size > 0 else ""
    return copied, len(src)


def strlcat(dst: str, src: str, size: int) -> tuple[str, int]:
    """Append src to dst within a buffer of size characters, terminator included.

    Returns the resulting text and the length the full result would have had.
    When dst already fills the buffer it is returned unchanged, and the
    length reported is size plus the length of src.
    """
    _check_non_negative("size", size)
    used = min(len(dst), size)
    if used >= size:
        return dst, size + len(src)
    room = size - 1 - used
    return dst + src[:room], used + len(src)


def strlen(text: str) -> int:
    """Number of characters in the text."""
    return len(text)


def _compare(first: str, second: str, limit: Optional[int]) -> int:
    pairs = zip_longest(map(ord, first), map(ord, second), fillvalue=0)
    if limit is not None:
        pairs = islice(pairs, limit)
    for a, b in pairs:
        if a != b or a == 0:
            return a - b
    return 0


def strncmp(first: str, second: str, n: int) -> int:
    """Compare at most n characters; return the difference of the first unequal pair."""
    _check_non_negative("n", n)
    return _compare(first, second, n)


def strcmp(first: str, second: str) -> int:
    """Compare two strings; return the difference of the first unequal pair."""
    return _compare(first, second, None)


def strnstr(big: str, little: str, length: int) -> Optional[int]:
    """Index of little within the first length characters of big, or None.

    An empty needle is found at index 0.
    """
    _check_non_negative("length", length)
    if not little:
        return 0
    index = big[:length].find(little)
    return None if index < 0 else index


def strtrim(text: str, chars: str) -> str:
    """Remove characters found in chars from both ends of the text."""
    if text is None or chars is None:
        raise TypeError("strtrim needs a text and a set of characters")
    return text.strip(chars)


def substr(text: str, start: int, length: int) -> str:
    """Return up to length characters of text beginning at start.

    A start at or beyond the end gives an empty string.
    """
    _check_non_negative("start", start)
    _check_non_negative("length", length)
    if start >= len(text):
        return ""
    return text[start : start + length]