"""An array-backed list that grows by half its capacity when full."""

from __future__ import annotations

import sys
from typing import Generic, Iterator, Sequence, TypeVar

T = TypeVar("T")

DEFAULT_CAPACITY = 5
MIN_CAPACITY = 2


class AList(Generic[T]):
    """A list with an explicit capacity that grows by 50% whenever it fills up.

    Positional operations raise ``IndexError`` when the position is out of
    range or the list is empty; searches by value raise ``ValueError`` when
    no equal element is stored.
    """

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        self._capacity = max(capacity, MIN_CAPACITY)
        self._items: list[T] = []

    @property
    def capacity(self) -> int:
        """The number of slots currently reserved."""
        return self._capacity

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __repr__(self) -> str:
        return f"AList(capacity={self._capacity}, items={self._items!r})"

    def _grow_if_full(self) -> None:
        if self.is_full():
            self._capacity += self._capacity // 2

    def _require_items(self) -> None:
        if not self._items:
            raise IndexError("list is empty")

    def _check_index(self, index: int) -> None:
        if not 0 <= index < len(self._items):
            raise IndexError(f"index {index} out of range")

    def _find(self, value: T) -> int:
        for position, item in enumerate(self._items):
            if item == value:
                return position
        raise ValueError(f"{value!r} not in list")

    def insert_front(self, value: T) -> None:
        """Insert ``value`` before every other element."""
        self.insert_at(value, 0)

    def insert_back(self, value: T) -> None:
        """Append ``value`` after every other element."""
        self._grow_if_full()
        self._items.append(value)

    def insert_at(self, value: T, index: int) -> None:
        """Insert ``value`` at ``index``, where ``0 <= index <= len(self)``."""
        if not 0 <= index <= len(self._items):
            raise IndexError(f"index {index} out of range")
        self._grow_if_full()
        self._items.insert(index, value)

    def remove_front(self) -> T:
        """Remove and return the first element."""
        self._require_items()
        return self._items.pop(0)

    def remove_back(self) -> T:
        """Remove and return the last element."""
        self._require_items()
        return self._items.pop()

    def remove_at(self, index: int) -> T:
        """Remove and return the element at ``index``."""
        self._check_index(index)
        return self._items.pop(index)

    def remove(self, value: T) -> T:
        """Remove and return the first element equal to ``value``."""
        return self._items.pop(self._find(value))

    def retrieve_front(self) -> T:
        """Return the first element."""
        self._require_items()
        return self._items[0]

    def retrieve_back(self) -> T:
        """Return the last element."""
        self._require_items()
        return self._items[-1]

    def retrieve_at(self, index: int) -> T:
        """Return the element at ``index``."""
        self._check_index(index)
        return self._items[index]

    def retrieve(self, value: T) -> T:
        """Return the first stored element equal to ``value``."""
        return self._items[self._find(value)]

    def update_front(self, value: T) -> None:
        """Replace the first element with ``value``."""
        self._require_items()
        self._items[0] = value

    def update_back(self, value: T) -> None:
        """Replace the last element with ``value``."""
        self._require_items()
        self._items[-1] = value

    def update_at(self, value: T, index: int) -> None:
        """Replace the element at ``index`` with ``value``."""
        self._check_index(index)
        self._items[index] = value

    def update(self, value: T) -> None:
        """Replace the first element equal to ``value`` with ``value``."""
        self._items[self._find(value)] = value

    def smallest(self) -> T:
        """Return the smallest element; the earliest one wins ties."""
        if not self._items:
            raise ValueError("list is empty")
        return min(self._items)  # type: ignore[type-var]

    def display_lines(self) -> list[str]:
        """Return one ``[index]  value`` line per element."""
        return [f"[{position}]  {item}" for position, item in enumerate(self._items)]

    def is_empty(self) -> bool:
        """Whether no elements are stored."""
        return not self._items

    def is_full(self) -> bool:
        """Whether every reserved slot is in use."""
        return len(self._items) == self._capacity

    def clear(self) -> None:
        """Remove every element, keeping the current capacity."""
        self._items.clear()


def _check_state(alist: AList[int]) -> None:
    if alist.is_full():
        print("list is full\n", file=sys.stderr)
    elif alist.is_empty():
        print("list is empty\n", file=sys.stderr)


def _display(alist: AList[int]) -> None:
    for line in alist.display_lines():
        print(line)
    if alist:
        print(
            f"capacity: {alist.capacity}\tnumVal: {len(alist)}"
            f"\tsmallest: {alist.smallest()}"
        )
    else:
        print(f"capacity: {alist.capacity}\tnumValues: {len(alist)}")
    print()
    _check_state(alist)


def _show_inserts(alist: AList[int]) -> None:
    alist.insert_front(10)
    print("insert front: 10")
    _display(alist)

    alist.insert_at(20, 0)
    print("insert index 0: 20")
    _display(alist)

    for value in (30, 40, 50):
        alist.insert_back(value)
        print(f"insert back: {value}")
        _display(alist)


def _show_updates(alist: AList[int]) -> None:
    alist.update_front(1)
    print("\nupdate front: 1")
    _display(alist)

    alist.update_at(2, 1)
    print("update index 1: 2")
    _display(alist)

    alist.update_back(4)
    print("update back: 4")
    _display(alist)

    alist.update(30)
    print("update value 30: 30")
    _display(alist)


def _show_retrieves(alist: AList[int]) -> None:
    value = alist.retrieve_front()
    print(f"\nretrieve front: {value}")
    _display(alist)

    value = alist.retrieve_back()
    print(f"retrieve back: {value}")
    _display(alist)

    value = alist.retrieve_at(2)
    print(f"retrieve index 2: {value}")
    _display(alist)

    value = alist.retrieve(value)
    print(f"retrieve value {value}: {value}")
    _display(alist)


def _show_removes(alist: AList[int]) -> None:
    value = alist.remove_front()
    print(f"\nremove front: {value}")
    _display(alist)

    value = alist.remove_at(0)
    print(f"remove index 0: {value}")
    _display(alist)

    value = alist.remove_back()
    print(f"remove back: {value}")
    _display(alist)

    for target in (30, 40):
        value = alist.remove(target)
        print(f"remove value {value}: {value}")
        _display(alist)


def main(argv: Sequence[str] | None = None) -> int:
    """Exercise inserts, updates, retrieves and removes on a list of capacity 3."""
    if argv is None:
        argv = sys.argv[1:]
    alist: AList[int] = AList(3)
    _check_state(alist)
    _show_inserts(alist)
    _show_updates(alist)
    _show_retrieves(alist)
    _show_removes(alist)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())