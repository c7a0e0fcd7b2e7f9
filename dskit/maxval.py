"""Pick the larger of two values of any ordered type."""

from __future__ import annotations

import sys
from typing import Callable, Sequence, TypeVar

T = TypeVar("T")

MAX_STRING_LENGTH = 99


def find_max(a: T, b: T) -> T:
    """Return the larger of ``a`` and ``b``; ``a`` wins ties."""
    return b if a < b else a  # type: ignore[operator]


def format_max(a: T, b: T, largest: T) -> str:
    """Describe two inputs and their maximum, one field per line."""
    return (
        f"Type: {type(a).__name__}\n"
        f"First: {a}\n"
        f"Second: {b}\n"
        f"Max: {largest}"
    )


def _read_char(prompt: str) -> str:
    text = input(prompt).strip()
    if not text:
        raise ValueError("expected a character")
    return text[0]


def _read_string(prompt: str) -> str:
    return input(prompt)[:MAX_STRING_LENGTH]


def _read_pair(label: str, reader: Callable[[str], T]) -> tuple[T, T]:
    print(f"\nEnter two {label}")
    first = reader("First: ")
    second = reader("Second: ")
    return first, second


def main(argv: Sequence[str] | None = None) -> int:
    """Read pairs of ints, floats, characters and strings and show each maximum."""
    if argv is None:
        argv = sys.argv[1:]
    pairs = [
        _read_pair("ints", lambda p: int(input(p))),
        _read_pair("doubles", lambda p: float(input(p))),
        _read_pair("chars", _read_char),
        _read_pair("c-strings", _read_string),
    ]
    for a, b in pairs:
        print()
        print(format_max(a, b, find_max(a, b)))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())