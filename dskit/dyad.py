"""A pair of two values of the same type."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import Generic, Iterator, Sequence, TypeVar

T = TypeVar("T")


@dataclass
class Dyad(Generic[T]):
    """Exactly two values of one type, which can be swapped in place."""

    first: T = 0  # type: ignore[assignment]
    second: T = 0  # type: ignore[assignment]

    def __iter__(self) -> Iterator[T]:
        """Yield the first value, then the second."""
        yield self.first
        yield self.second

    def swap(self) -> None:
        """Exchange the two stored values."""
        self.first, self.second = self.second, self.first


def _show(label: str, dyad: Dyad[object], lead: str = "") -> None:
    print(f"{lead}First {label}: {dyad.first}")
    print(f"Second {label}: {dyad.second}")
    dyad.swap()
    first, second = dyad
    print(f"\nFirst {label} after swap: {first}")
    print(f"Second {label} after swap: {second}")


def main(argv: Sequence[str] | None = None) -> int:
    """Show and swap pairs of ints, floats and characters."""
    if argv is None:
        argv = sys.argv[1:]
    _show("int", Dyad(1, 2))
    _show("double", Dyad(1.5, 2.5), lead="\n")
    _show("char", Dyad("A", "B"), lead="\n")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())