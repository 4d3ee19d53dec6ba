"""Sorting strategies that drive the stack operations."""

from __future__ import annotations

from pushswap.finder import (
    find_max_position,
    find_max_value,
    find_min_value,
    find_next_in_range,
)
from pushswap.stacks import Stacks, is_sorted


def _truncating_div(numerator: int, denominator: int) -> int:
    """Integer division rounding toward zero."""
    quotient = abs(numerator) // abs(denominator)
    return quotient if (numerator >= 0) == (denominator > 0) else -quotient


def calculate_chunks(size: int) -> int:
    """Number of value ranges to split a stack of this size into."""
    if size <= 100:
        return 5
    if size <= 200:
        return 7
    if size <= 300:
        return 9
    return 11


def _sort_two(stacks: Stacks) -> None:
    a = stacks.a
    if len(a) >= 2 and a[0] > a[1]:
        stacks.sa()


def _sort_three(stacks: Stacks) -> None:
    if len(stacks.a) < 3:
        return
    one, two, three = stacks.a[0], stacks.a[1], stacks.a[2]
    if one > two and two < three and one < three:
        stacks.sa()
    elif one > two and two < three and one > three:
        stacks.ra()
    elif one < two and two > three and one < three:
        stacks.sa()
        stacks.ra()
    elif one < two and two > three and one > three:
        stacks.rra()
    elif one > two and two > three:
        stacks.sa()
        stacks.rra()


def _move_min_to_b(stacks: Stacks) -> None:
    a = stacks.a
    total = len(a)
    index = min(range(total), key=lambda i: (a[i], i))
    target = a[index]
    # The position counts from 1 for every element but the first.
    position = index + 1 if index else 0
    rotate = stacks.ra if position <= total // 2 else stacks.rra
    while a[0] != target:
        rotate()
    stacks.pb()


def _sort_four_five(stacks: Stacks) -> None:
    for _ in range(len(stacks.a) - 3):
        _move_min_to_b(stacks)
    _sort_three(stacks)
    while stacks.b:
        stacks.pa()


def small_sort(stacks: Stacks) -> None:
    """Sort stack a when it holds at most five values."""
    count = len(stacks.a)
    if count == 2:
        _sort_two(stacks)
    elif count == 3:
        _sort_three(stacks)
    elif count in (4, 5):
        _sort_four_five(stacks)


def move_max_to_top_b(stacks: Stacks) -> None:
    """Rotate b the shorter way until its largest value is on top."""
    b = stacks.b
    if not b:
        return
    position = find_max_position(b)
    size = len(b)
    if position == 0:
        return
    if position <= size // 2:
        for _ in range(position):
            stacks.rb()
    else:
        for _ in range(size - position):
            stacks.rrb()


def push_chunk_to_b(stacks: Stacks, low: int, high: int) -> None:
    """Push every value of a within [low, high] to b.

    Each value is brought to the top of a the cheaper way; after the push,
    values in the lower half of the range are rotated to the bottom of b.
    """
    middle = _truncating_div(low + high, 2)
    while True:
        position = find_next_in_range(stacks.a, low, high)
        if position is None:
            break
        size_a = len(stacks.a)
        if position <= size_a // 2:
            for _ in range(position):
                stacks.ra()
        else:
            for _ in range(size_a - position):
                stacks.rra()
        stacks.pb()
        if stacks.b[0] < middle and len(stacks.b) > 1:
            stacks.rb()


def process_chunks(stacks: Stacks, low: int, high: int, chunks: int) -> None:
    """Split [low, high] into equal ranges and push each range to b in turn."""
    chunk_size = _truncating_div(high - low, chunks) + 1
    for index in range(chunks):
        range_min = low + index * chunk_size
        range_max = high if index == chunks - 1 else range_min + chunk_size - 1
        push_chunk_to_b(stacks, range_min, range_max)


def push_chunks_to_b(stacks: Stacks) -> None:
    """Move all of a to b, range by range."""
    size = len(stacks.a)
    low = find_min_value(stacks.a)
    high = find_max_value(stacks.a)
    process_chunks(stacks, low, high, calculate_chunks(size))


def medium_sort(stacks: Stacks) -> None:
    """Sort a by pushing it to b in ranges and pulling back the maximum each time."""
    if not stacks.a or is_sorted(stacks.a):
        return
    if len(stacks.a) <= 5:
        small_sort(stacks)
        return
    push_chunks_to_b(stacks)
    while stacks.b:
        move_max_to_top_b(stacks)
        stacks.pa()


def big_sort(stacks: Stacks) -> None:
    """Sort stack a, choosing the strategy by its size."""
    if not stacks.a or is_sorted(stacks.a):
        return
    if len(stacks.a) <= 5:
        small_sort(stacks)
    else:
        medium_sort(stacks)