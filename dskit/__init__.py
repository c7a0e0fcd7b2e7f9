"""Classic data structures (array list, sorted linked list, stack, pair) and small programs built on them."""

__version__ = "0.1.0"