"""The two stacks of the puzzle and the operations that move values between them."""

from __future__ import annotations

import sys
from collections import deque
from typing import Iterable, Optional, TextIO


def is_sorted(values: Iterable[int]) -> bool:
    """True when the values are in non-decreasing order from first to last."""
    items = list(values)
    return all(left <= right for left, right in zip(items, items[1:]))


class Stacks:
    """Stacks a and b, with the top of each at index 0.

    Every operation that changes a stack writes its name, one per line, to
    the output stream. An operation that cannot apply (too few values)
    writes nothing and changes nothing.
    """

    def __init__(self, values: Iterable[int] = (), out: Optional[TextIO] = None) -> None:
        self.a: deque[int] = deque(values)
        self.b: deque[int] = deque()
        self.out = sys.stdout if out is None else out

    def _emit(self, name: str) -> None:
        self.out.write(name + "\n")

    @staticmethod
    def _swap(stack: deque[int]) -> bool:
        if len(stack) < 2:
            return False
        stack[0], stack[1] = stack[1], stack[0]
        return True

    @staticmethod
    def _move(source: deque[int], target: deque[int]) -> bool:
        if not source:
            return False
        target.appendleft(source.popleft())
        return True

    @staticmethod
    def _rotate(stack: deque[int], steps: int) -> bool:
        if len(stack) < 2:
            return False
        stack.rotate(steps)
        return True

    def sa(self) -> None:
        """Swap the top two values of a."""
        if self._swap(self.a):
            self._emit("sa")

    def sb(self) -> None:
        """Swap the top two values of b."""
        if self._swap(self.b):
            self._emit("sb")

    def ss(self) -> None:
        """Swap the top two values of both stacks."""
        self.sa()
        self.sb()
        self._emit("ss")

    def pa(self) -> None:
        """Move the top of b onto a."""
        if self._move(self.b, self.a):
            self._emit("pa")

    def pb(self) -> None:
        """Move the top of a onto b."""
        if self._move(self.a, self.b):
            self._emit("pb")

    def ra(self) -> None:
        """Rotate a upwards: the top value goes to the bottom."""
        if self._rotate(self.a, -1):
            self._emit("ra")

    def rb(self) -> None:
        """Rotate b upwards: the top value goes to the bottom."""
        if self._rotate(self.b, -1):
            self._emit("rb")

    def rr(self) -> None:
        """Rotate both stacks upwards."""
        self.ra()
        self.rb()
        self._emit("rr")

    def rra(self) -> None:
        """Rotate a downwards: the bottom value comes to the top."""
        if self._rotate(self.a, 1):
            self._emit("rra")

    def rrb(self) -> None:
        """Rotate b downwards: the bottom value comes to the top."""
        if self._rotate(self.b, 1):
            self._emit("rrb")

    def rrr(self) -> None:
        """Rotate both stacks downwards."""
        self.rra()
        self.rrb()
        self._emit("rrr")