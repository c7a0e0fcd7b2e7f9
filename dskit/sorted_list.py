"""A singly linked list that keeps its values in ascending order."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import Generic, Iterable, Iterator, Optional, Sequence, TypeVar

T = TypeVar("T")


@dataclass
class _Node(Generic[T]):
    data: T
    next: Optional[_Node[T]] = None


class SortedLinkedList(Generic[T]):
    """A linked list whose values are always kept in ascending order.

    A new value goes in front of any stored values equal to it. Searches
    stop as soon as they pass the place where the value would be.
    """

    def __init__(self, values: Iterable[T] = ()) -> None:
        self._front: Optional[_Node[T]] = None
        for value in values:
            self.insert(value)

    def _locate(self, value: T) -> tuple[Optional[_Node[T]], Optional[_Node[T]]]:
        """Return the node before the first node not less than ``value``, and that node."""
        before: Optional[_Node[T]] = None
        current = self._front
        while current is not None and current.data < value:  # type: ignore[operator]
            before = current
            current = current.next
        return before, current

    def insert(self, value: T) -> None:
        """Insert ``value`` at its place in ascending order."""
        before, current = self._locate(value)
        node = _Node(value, current)
        if before is None:
            self._front = node
        else:
            before.next = node

    def remove(self, value: T) -> T:
        """Remove and return the first stored value equal to ``value``."""
        before, current = self._locate(value)
        if current is None or current.data != value:
            raise ValueError(f"{value!r} not in list")
        if before is None:
            self._front = current.next
        else:
            before.next = current.next
        return current.data

    def retrieve(self, value: T) -> T:
        """Return the first stored value equal to ``value``."""
        _, current = self._locate(value)
        if current is None or current.data != value:
            raise ValueError(f"{value!r} not in list")
        return current.data

    def front(self) -> T:
        """Return the smallest value."""
        if self._front is None:
            raise IndexError("list is empty")
        return self._front.data

    def rear(self) -> T:
        """Return the largest value."""
        node = self._front
        if node is None:
            raise IndexError("list is empty")
        while node.next is not None:
            node = node.next
        return node.data

    def __len__(self) -> int:
        return sum(1 for _ in self)

    def __iter__(self) -> Iterator[T]:
        node = self._front
        while node is not None:
            yield node.data
            node = node.next

    def __str__(self) -> str:
        return " -> ".join(str(value) for value in self)

    def __repr__(self) -> str:
        return f"SortedLinkedList({list(self)!r})"

    def is_empty(self) -> bool:
        """Whether the list holds no values."""
        return self._front is None


def _check_state(values: SortedLinkedList[int]) -> None:
    if values.is_empty():
        print("\nlist is empty\n")


def _display(values: SortedLinkedList[int]) -> None:
    print(values)
    if values:
        print(
            f"numValues: {len(values)}\tfront: {values.front()}"
            f"\trear: {values.rear()}"
        )
    else:
        print(f"numValues: {len(values)}")
    _check_state(values)


def main(argv: Sequence[str] | None = None) -> int:
    """Insert five values, look up two of them, then remove all five."""
    if argv is None:
        argv = sys.argv[1:]
    values: SortedLinkedList[int] = SortedLinkedList()
    _check_state(values)

    for value in range(10, 51, 10):
        values.insert(value)
        print(f"inserted {value}")
        _display(values)

    print()

    for target in (10, 20):
        try:
            found = values.retrieve(target)
        except ValueError:
            _check_state(values)
            continue
        print(f"retrieved {found}")
        _display(values)

    print()

    for target in range(50, 9, -10):
        try:
            removed = values.remove(target)
        except ValueError:
            _check_state(values)
            continue
        print(f"removed {removed}")
        _display(values)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())