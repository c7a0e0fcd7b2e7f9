# dskit

A small collection of classic data structures and the short programs that
exercise them:

- `dskit.alist.AList` – an array-backed list with a starting capacity
  (at least 2, default 5) that grows by half its capacity when full; insert,
  remove, retrieve and update at the front, the back, an index or by value.
  Positional operations raise `IndexError`, searches by value raise
  `ValueError`.
- `dskit.sorted_list.SortedLinkedList` – a singly linked list that keeps its
  values in ascending order; its text form joins the values with `" -> "`.
- `dskit.stack.Stack` – a bounded last-in, first-out stack (default capacity
  100) that raises `StackFullError` and `StackEmptyError`.
- `dskit.dyad.Dyad` – a pair of values that can be unpacked and swapped in
  place.
- `dskit.widget.Widget` – an object that reports its construction, copying,
  assignment and closing, and keeps a count of live instances
  (`Widget.live_count()`).
- `dskit.maxval` – `find_max(a, b)` returns the larger of two ordered values
  (the first wins ties); `format_max` describes the inputs and the result.
- `dskit.messages` – `format_msg` / `display_msg` frame a message with a
  repeated symbol on each side.
- `dskit.rpn` – evaluation of integer Reverse Polish Notation expressions
  ended by `;`, with `+ - * / %` (division truncates toward zero).

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Using the structures

```python
from dskit.stack import Stack, StackEmptyError

stack = Stack(10)
stack.push(10)
stack.push(20)
top = stack.peek()      # 20
value = stack.pop()     # 20
remaining = len(stack)  # 1
```

```python
from dskit.alist import AList

items = AList(3)
items.insert_front(10)
items.insert_at(20, 0)
items.insert_back(30)
smallest = items.smallest()   # 10
values = list(items)          # [20, 10, 30]
```

```python
from dskit.sorted_list import SortedLinkedList

numbers = SortedLinkedList()
for n in (30, 10, 20):
    numbers.insert(n)
print(numbers)   # 10 -> 20 -> 30
```

```python
from dskit.rpn import evaluate, evaluate_text

evaluate("2 4 * 5 +".split())           # 13
results = evaluate_text("3 4 + ; 1 + ;")
[r.valid for r in results]              # [True, False]
```

## Demonstration commands

Each module comes with a short demonstration program:

```
dskit-messages
dskit-max
dskit-widget
dskit-stack
dskit-alist
dskit-dyad
dskit-sorted-list
dskit-rpn
```

`dskit-max` reads two ints, two floats, two characters and two strings from
standard input and prints the maximum of each pair.

`dskit-rpn [EXPRESSIONS] [RESULTS]` reads whitespace-separated tokens from
`EXPRESSIONS` (default `expressions.txt`), prints each expression with its
result (or `invalid` on standard error), and writes a token-by-token trace of
the stack to `RESULTS` (default `results.txt`). See `dskit-rpn --help`.

## What is not included

The package has no queue type, no complex-number type and no palindrome
checker; it provides only the structures and programs listed above.