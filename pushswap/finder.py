"""Searching a stack for positions and extreme values."""

from __future__ import annotations

from typing import Optional, Sequence


def min_distance(position: int, size: int) -> int:
    """Rotations needed to bring position to the top, going whichever way is shorter."""
    return position if position < size - position else size - position


def find_next_in_range(stack: Sequence[int], low: int, high: int) -> Optional[int]:
    """Position of the value in [low, high] that is cheapest to bring to the top.

    Cost is the rotation distance from min_distance; on a tie the earlier
    position wins. Returns None when no value lies in the range.
    """
    size = len(stack)
    best_position: Optional[int] = None
    best_distance = size
    for position, value in enumerate(stack):
        if low <= value <= high:
            distance = min_distance(position, size)
            if distance < best_distance:
                best_position = position
                best_distance = distance
    return best_position


def find_max_position(stack: Sequence[int]) -> int:
    """Position of the first occurrence of the largest value; 0 for an empty stack."""
    best_position = 0
    for position, value in enumerate(stack):
        if value > stack[best_position]:
            best_position = position
    return best_position


def find_min_value(stack: Sequence[int]) -> int:
    """Smallest value in the stack; 0 for an empty stack."""
    return min(stack, default=0)


def find_max_value(stack: Sequence[int]) -> int:
    """Largest value in the stack; 0 for an empty stack."""
    return max(stack, default=0)