"""A widget that reports each step of its lifecycle and counts live instances."""

from __future__ import annotations

import sys
from typing import ClassVar, Sequence


class Widget:
    """A named, numbered object that keeps a shared count of live instances.

    Every construction, copy, assignment and close is reported on standard
    output, so the lifecycle of each widget can be followed.
    """

    _count: ClassVar[int] = 0

    def __init__(self, widget_id: int | None = None, name: str | None = None) -> None:
        default = widget_id is None and name is None
        self._id = 0 if widget_id is None else widget_id
        self.name = "" if name is None else name
        self._closed = False
        Widget._count += 1
        kind = "default-constructed" if default else "parameterized-constructed"
        self._report(f"{kind}. Total count={Widget._count}")

    @property
    def widget_id(self) -> int:
        """The widget's number; zero once its contents were taken."""
        return self._id

    @classmethod
    def live_count(cls) -> int:
        """Return how many widgets are currently alive."""
        return cls._count

    def _report(self, text: str) -> None:
        print(f"[Widget#{self._id}] {text}")

    def copy(self) -> Widget:
        """Return a new live widget with the same number and name."""
        clone = Widget.__new__(Widget)
        clone._id = self._id
        clone.name = self.name
        clone._closed = False
        Widget._count += 1
        clone._report(
            f"copy-constructed from Widget#{self._id} . Total count={Widget._count}"
        )
        return clone

    __copy__ = copy

    def assign(self, other: Widget) -> Widget:
        """Copy ``other``'s number and name into this widget."""
        if self is not other:
            self._id = other._id
            self.name = other.name
        self._report(f"copy-assigned from Widget#{other._id}")
        return self

    def take(self, other: Widget) -> Widget:
        """Move ``other``'s number and name into this widget, resetting ``other``."""
        if self is not other:
            self._id = other._id
            self.name = other.name
            other._id = 0
            other.name = ""
        self._report(f"move-assigned. Other reset to #{other._id}")
        return self

    def close(self) -> None:
        """Retire the widget; closing twice has no further effect."""
        if self._closed:
            return
        self._closed = True
        Widget._count -= 1
        self._report(f"destructed. Remaining count={Widget._count}")

    @property
    def closed(self) -> bool:
        """Whether the widget has been closed."""
        return self._closed

    def __enter__(self) -> Widget:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def __str__(self) -> str:
        return f"Widget#{self._id} [{self.name}]"

    def __repr__(self) -> str:
        return f"Widget({self._id!r}, {self.name!r})"


def main(argv: Sequence[str] | None = None) -> int:
    """Walk through construction, copying, moving and closing of widgets."""
    if argv is None:
        argv = sys.argv[1:]
    print("--- Creating w1 with default ctor ---")
    w1 = Widget()

    print("\n--- Creating w2 with param ctor ---")
    w2 = Widget(100, "Gizmo")

    print("\n--- Copy-constructing w3 from w2 ---")
    w3 = w2.copy()

    print("\n--- Move-constructing w4 from temporary ---")
    w4 = Widget(200, "Flux")

    print("\n--- Assigning w1 = w2 (copy) ---")
    w1.assign(w2)

    print("\n--- Assigning w1 = move(w3) (move) ---")
    w1.take(w3)

    print("\n--- Printing objects with operator<< ---")
    for widget in (w1, w2, w3, w4):
        print(widget)

    print("\n--- Static count check ---")
    print(f"Current live Widget count: {Widget.live_count()}")

    print("\n--- Exiting main() — destructors will run in reverse order ---")
    for widget in (w4, w3, w2, w1):
        widget.close()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())