"""A growable stack of integers with summary queries."""

from __future__ import annotations


class StackEmpty(Exception):
    """Raised when an operation needs an item but the stack is empty."""


class StackFull(Exception):
    """Raised when the stack is full and cannot grow."""


class StackInvalidPeek(Exception):
    """Raised when a peek asks for a position that does not exist."""


class Stack:
    """A stack of integers with a capacity that doubles when it fills up."""

    def __init__(self, capacity: int) -> None:
        if capacity < 0:
            raise ValueError(f"capacity must not be negative: {capacity}")
        self._capacity = capacity
        self._items: list[int] = []

    def push(self, value: int) -> None:
        """Push value, doubling the capacity first if the stack is full."""
        if self.is_full():
            grown = self._capacity * 2
            if grown <= len(self._items):
                raise StackFull(f"cannot grow a stack of capacity {self._capacity}")
            self._capacity = grown
        self._items.append(value)

    def pop(self) -> None:
        """Remove the top value."""
        if not self._items:
            raise StackEmpty("pop from an empty stack")
        self._items.pop()

    def is_empty(self) -> bool:
        return not self._items

    def is_full(self) -> bool:
        return len(self._items) == self._capacity

    def make_empty(self) -> None:
        """Remove every value, keeping the capacity."""
        self._items.clear()

    def top(self) -> int:
        """Return the top value without removing it."""
        if not self._items:
            raise StackEmpty("top of an empty stack")
        return self._items[-1]

    def __len__(self) -> int:
        return len(self._items)

    def max(self) -> int:
        """Return the largest value below the top, or the only value if there is one."""
        if not self._items:
            raise StackEmpty("max of an empty stack")
        return max(self._items[:-1] or self._items)

    def min(self) -> int:
        """Return the smallest value below the top, or the only value if there is one."""
        if not self._items:
            raise StackEmpty("min of an empty stack")
        return min(self._items[:-1] or self._items)

    def peek(self, n: int) -> int:
        """Return the value n levels below the top; peek(0) is the top."""
        if not 0 <= n < len(self._items):
            raise StackInvalidPeek(f"no value {n} levels below the top")
        return self._items[-1 - n]

    def capacity(self) -> int:
        """Return how many values fit before the stack must grow."""
        return self._capacity

    def render(self) -> str:
        """Return the values from top to bottom, each followed by a space."""
        body = "".join(f"{value} " for value in reversed(self._items))
        return f"Top {{ {body}}} Bottom"

    def __repr__(self) -> str:
        return f"Stack(capacity={self._capacity}, items={self._items!r})"