"""Command-line entry point: print the operations that sort the given integers."""

from __future__ import annotations

import sys
from typing import Optional, Sequence

from pushswap.sorting import big_sort
from pushswap.stacks import Stacks, is_sorted
from pushswap.validation import InputError, parse_values, validate


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Validate the arguments, sort them and print each operation used.

    Returns 0 on success and 1 after writing "Error" to standard error when
    the arguments are invalid.
    """
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        return 0
    try:
        validate(args)
    except InputError:
        sys.stderr.write("Error\n")
        return 1
    stacks = Stacks(parse_values(args), out=sys.stdout)
    if not is_sorted(stacks.a):
        big_sort(stacks)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())