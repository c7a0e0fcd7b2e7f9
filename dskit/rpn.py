"""Evaluate integer expressions written in reverse Polish notation."""

from __future__ import annotations

import argparse
import operator
import re
import string
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Iterable, Sequence

from dskit.stack import Stack, StackFullError

STACK_CAPACITY = 100
TERMINATOR = ";"
_NUMBER = re.compile(r"[0-9]+")


class RPNError(Exception):
    """Raised when an expression cannot be evaluated."""


@dataclass(frozen=True)
class ExpressionResult:
    """The outcome of one expression.

    ``steps`` holds, for each token, the stack actions it caused; tokens
    skipped after an error, or not understood, have an empty step.
    """

    tokens: tuple[str, ...]
    steps: tuple[str, ...]
    value: int | None = None
    error: str | None = None

    @property
    def valid(self) -> bool:
        """Whether the expression was evaluated without error."""
        return self.error is None


def _divide(left: int, right: int) -> int:
    """Integer division that truncates toward zero."""
    if right == 0:
        raise RPNError("division by zero")
    quotient = abs(left) // abs(right)
    return -quotient if (left < 0) != (right < 0) else quotient


def _remainder(left: int, right: int) -> int:
    """Remainder whose sign follows the dividend."""
    return left - right * _divide(left, right)


_OPERATIONS: dict[str, Callable[[int, int], int]] = {
    "*": operator.mul,
    "+": operator.add,
    "-": operator.sub,
    "/": _divide,
    "%": _remainder,
}


def _step(token: str, stack: Stack[int]) -> str:
    lead = token[0]
    if lead in string.digits:
        match = _NUMBER.match(token)
        assert match is not None
        number = int(match.group())
        try:
            stack.push(number)
        except StackFullError:
            raise RPNError("stack overflow") from None
        return f"Push {number}"
    if lead in string.punctuation:
        if len(stack) < 2:
            raise RPNError("not enough operands")
        right = stack.pop()
        left = stack.pop()
        operation = _OPERATIONS.get(lead)
        if operation is None:
            raise RPNError(f"unknown operator {lead!r}")
        result = operation(left, right)
        stack.push(result)
        return f"Pop  {right}\tPop  {left}\tPush {result}"
    return ""


def _run(tokens: Iterable[str]) -> ExpressionResult:
    token_list = tuple(tokens)
    stack: Stack[int] = Stack(STACK_CAPACITY)
    steps: list[str] = []
    error: str | None = None
    for token in token_list:
        if error is not None or not token:
            steps.append("")
            continue
        try:
            steps.append(_step(token, stack))
        except RPNError as exc:
            error = str(exc)
            steps.append("")
    if error is None and len(stack) > 1:
        error = "too many operands"
    if error is not None:
        return ExpressionResult(token_list, tuple(steps), error=error)
    value = stack.pop() if stack else None
    return ExpressionResult(token_list, tuple(steps), value=value)


def split_expressions(text: str) -> list[list[str]]:
    """Split whitespace-separated tokens into expressions ended by ``;``.

    Tokens after the last terminator belong to no expression and are dropped.
    """
    expressions: list[list[str]] = []
    current: list[str] = []
    for token in text.split():
        if token.startswith(TERMINATOR):
            expressions.append(current)
            current = []
        else:
            current.append(token)
    return expressions


def evaluate(tokens: Iterable[str]) -> int:
    """Evaluate one expression given as tokens, without its terminator."""
    result = _run(tokens)
    if result.error is not None:
        raise RPNError(result.error)
    if result.value is None:
        raise RPNError("empty expression")
    return result.value


def evaluate_text(text: str) -> list[ExpressionResult]:
    """Evaluate every terminated expression in ``text``."""
    return [_run(tokens) for tokens in split_expressions(text)]


def _conclusion(result: ExpressionResult) -> str:
    if result.error is not None:
        return f"\n\t\tInvalid RPN expression - {result.error}\n\n"
    if result.value is not None:
        return f"Pop  {result.value}\n\t\tValid:  result = {result.value}\n\n"
    return ""


def format_report(results: Iterable[ExpressionResult]) -> str:
    """Return the token-by-token trace of every expression."""
    parts: list[str] = []
    for result in results:
        for token, step in zip(result.tokens, result.steps):
            parts.append(f"\n(Token: {token})\t\t{step}")
        parts.append(f"\n(Token: {TERMINATOR})\t\t")
        parts.append(_conclusion(result))
    return "".join(parts)


def _echo(result: ExpressionResult) -> None:
    print("".join(f"{token} " for token in result.tokens), end="", flush=True)
    if result.error is not None:
        print("\t\tinvalid", file=sys.stderr, flush=True)
    elif result.value is not None:
        print(f"= {result.value}", flush=True)


def main(argv: Sequence[str] | None = None) -> int:
    """Evaluate a file of expressions and write a trace of the evaluation."""
    parser = argparse.ArgumentParser(
        prog="dskit-rpn",
        description="Evaluate reverse Polish notation expressions ended by ';'.",
    )
    parser.add_argument("expressions", nargs="?", default="expressions.txt")
    parser.add_argument("results", nargs="?", default="results.txt")
    args = parser.parse_args(argv)

    try:
        text = Path(args.expressions).read_text(encoding="latin-1")
    except OSError as exc:
        print(f"cannot read {args.expressions}: {exc.strerror}", file=sys.stderr)
        return 1

    results = evaluate_text(text)
    for result in results:
        _echo(result)
    Path(args.results).write_text(format_report(results), encoding="latin-1")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())