"""Framed message output with default arguments."""

from __future__ import annotations

import sys
from typing import Sequence

DEFAULT_MESSAGE = "Decide. Commit. Succeed."
DEFAULT_SYMBOL = " "
DEFAULT_COUNT = 10


def format_msg(
    msg: str = DEFAULT_MESSAGE,
    symbol: str = DEFAULT_SYMBOL,
    num: int = DEFAULT_COUNT,
) -> str:
    """Return ``msg`` framed by ``num`` copies of ``symbol`` on each side."""
    if len(symbol) != 1:
        raise ValueError("symbol must be a single character")
    frame = symbol * max(num, 0)
    return f"{frame}{msg}{frame}"


def display_msg(
    msg: str = DEFAULT_MESSAGE,
    symbol: str = DEFAULT_SYMBOL,
    num: int = DEFAULT_COUNT,
) -> None:
    """Print the framed message on its own line."""
    print(format_msg(msg, symbol, num))


def main(argv: Sequence[str] | None = None) -> int:
    """Show the message with every combination of defaults."""
    if argv is None:
        argv = sys.argv[1:]
    display_msg("I will decide.", "*", 15)
    display_msg("I will commit.", "+")
    display_msg("I will succeed.")
    display_msg()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())