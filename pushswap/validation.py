"""Checking command-line arguments and turning them into stack values."""

from __future__ import annotations

from typing import Sequence

from pushswap.chars import atoi, isdigit

_INT_MAX_DIGITS = "2147483647"
_INT_MIN_DIGITS = "2147483648"


class InputError(ValueError):
    """Raised when the arguments are not a list of distinct 32-bit integers."""


def check_int(args: Sequence[str]) -> bool:
    """True when every argument is an optional sign followed by one or more digits."""
    for arg in args:
        digits = arg[1:] if arg[:1] in ("-", "+") else arg
        if not digits or not all(isdigit(ch) for ch in digits):
            return False
    return True


def _exceeds(digits: str, limit: str) -> bool:
    if len(digits) != len(limit):
        return len(digits) > len(limit)
    return digits > limit


def is_overflow(args: Sequence[str]) -> bool:
    """True when any argument is a bare sign or lies outside the 32-bit range.

    The test is on the text: a number longer than the limit's digits counts
    as out of range, leading zeros and a plus sign included.
    """
    for arg in args:
        if arg in ("-", "+"):
            return True
        if arg.startswith("-"):
            if _exceeds(arg[1:], _INT_MIN_DIGITS):
                return True
        elif _exceeds(arg, _INT_MAX_DIGITS):
            return True
    return False


def has_duplicate(args: Sequence[str]) -> bool:
    """True when two arguments denote the same integer."""
    seen = set()
    for arg in args:
        value = atoi(arg)
        if value in seen:
            return True
        seen.add(value)
    return False


def validate(args: Sequence[str]) -> None:
    """Raise InputError unless the arguments are distinct, well-formed 32-bit integers."""
    if not check_int(args):
        raise InputError("argument is not an integer")
    if is_overflow(args):
        raise InputError("argument is out of range")
    if has_duplicate(args):
        raise InputError("duplicate argument")


def parse_values(args: Sequence[str]) -> list[int]:
    """Convert the arguments to integers, first argument first."""
    return [atoi(arg) for arg in args]