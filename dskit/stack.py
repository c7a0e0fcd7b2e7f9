"""A fixed-capacity last-in, first-out stack."""

from __future__ import annotations

import sys
from typing import Generic, Sequence, TypeVar

T = TypeVar("T")

DEFAULT_CAPACITY = 100


class StackFullError(Exception):
    """Raised when pushing onto a stack that has no room left."""


class StackEmptyError(Exception):
    """Raised when popping or peeking an empty stack."""


class Stack(Generic[T]):
    """A LIFO stack holding at most ``capacity`` values."""

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self._capacity = capacity
        self._items: list[T] = []

    @property
    def capacity(self) -> int:
        """The maximum number of values the stack holds."""
        return self._capacity

    def push(self, value: T) -> None:
        """Put ``value`` on top of the stack."""
        if self.is_full():
            raise StackFullError("stack is full")
        self._items.append(value)

    def pop(self) -> T:
        """Remove and return the top value."""
        if not self._items:
            raise StackEmptyError("stack is empty")
        return self._items.pop()

    def peek(self) -> T:
        """Return the top value without removing it."""
        if not self._items:
            raise StackEmptyError("stack is empty")
        return self._items[-1]

    def clear(self) -> None:
        """Remove every value."""
        self._items.clear()

    def __len__(self) -> int:
        return len(self._items)

    def is_full(self) -> bool:
        """Whether the stack holds ``capacity`` values."""
        return len(self._items) == self._capacity

    def is_empty(self) -> bool:
        """Whether the stack holds no values."""
        return not self._items

    def __repr__(self) -> str:
        return f"Stack(capacity={self._capacity}, items={self._items!r})"


def _check_state(stack: Stack[int]) -> None:
    if stack.is_full():
        print("\nstack is full\n", file=sys.stderr)
    elif stack.is_empty():
        print("\nstack is empty\n", file=sys.stderr)


def _display(stack: Stack[int]) -> None:
    if stack:
        print(f"numValues: {len(stack)}\tpeeked: {stack.peek()}")
    else:
        print(f"numValues: {len(stack)}")
    _check_state(stack)


def main(argv: Sequence[str] | None = None) -> int:
    """Push ten values onto a stack of ten, then pop them all."""
    if argv is None:
        argv = sys.argv[1:]
    stack: Stack[int] = Stack(10)
    _check_state(stack)

    for value in range(10, 101, 10):
        try:
            stack.push(value)
        except StackFullError:
            _check_state(stack)
            continue
        print(f"pushed: {value}")
        _display(stack)

    while True:
        try:
            value = stack.pop()
        except StackEmptyError:
            break
        print(f"popped: {value}")
        _display(stack)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())