"""A bounded stack and an interactive command loop for exercising it."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable, Iterator
from typing import Any, TextIO

CAPACITY = 10
PROMPT = "-2:Exit -1:Pop, *:Push ? "


class FullError(Exception):
    """Raised when an item is added to a container with no free slot."""


class EmptyError(Exception):
    """Raised when an item is taken from a container that holds none."""


def _check_capacity(capacity: int) -> None:
    if capacity < 1:
        raise ValueError("capacity must be positive")


class Stack:
    """Last-in, first-out container holding at most ``capacity`` items."""

    def __init__(self, capacity: int = CAPACITY) -> None:
        _check_capacity(capacity)
        self.capacity = capacity
        self._items: list[Any] = []

    def __len__(self) -> int:
        return len(self._items)

    def is_empty(self) -> bool:
        return not self._items

    def is_full(self) -> bool:
        return len(self._items) >= self.capacity

    def push(self, item: Any) -> None:
        """Put ``item`` on top; raise FullError when there is no room."""
        if self.is_full():
            raise FullError("stack is full")
        self._items.append(item)

    def pop(self) -> Any:
        """Remove and return the top item; raise EmptyError when empty."""
        if self.is_empty():
            raise EmptyError("stack is empty")
        return self._items.pop()

    def render(self) -> str:
        """Draw the stack top first, as a column of boxed cells."""
        lines = ["|    |"]
        lines.extend(f"|{item:>3} |" for item in reversed(self._items))
        lines.append("+----+")
        return "\n".join(lines) + "\n\n"


def _prompted_ints(prompt: str, stream: TextIO) -> Iterator[int]:
    """Prompt for and yield integers until input ends or is not a number."""
    tokens = (token for line in stream for token in line.split())
    while True:
        print(prompt, end="", flush=True)
        token = next(tokens, None)
        if token is None:
            return
        try:
            yield int(token)
        except ValueError:
            return


def _report(noun: str, operation: Callable[[], Any], describe: Callable[[Any], str]) -> str:
    """Run ``operation`` and describe its outcome, including full or empty."""
    try:
        result = operation()
    except FullError:
        return f"***** {noun} is full. *****"
    except EmptyError:
        return f"***** {noun} is empty. *****"
    return describe(result)


def _put_or_take(
    noun: str, put: Callable[[Any], None], take: Callable[[], Any], value: int
) -> str:
    """Take an item for -1, otherwise put ``value``; return the message."""
    if value == -1:
        return _report(noun, take, lambda item: f"{item} is deleted")
    return _report(noun, lambda: put(value), lambda _: f"{value} is inserted")


def _capacity_parser(prog: str, description: str) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog=prog, description=description)
    parser.add_argument("--capacity", type=int, default=CAPACITY)
    return parser


def _run(
    prompt: str,
    stop_below: int,
    dispatch: Callable[[int], str],
    render: Callable[[], str],
) -> int:
    """Feed integers from standard input to ``dispatch`` until one is too small."""
    for value in _prompted_ints(prompt, sys.stdin):
        if value < stop_below:
            break
        print(dispatch(value))
        print(render(), end="")
    return 0


def main(argv: list[str] | None = None) -> int:
    """Read integers from standard input and push or pop them."""
    args = _capacity_parser("boundedds-stack", "Interactive bounded stack.").parse_args(argv)
    stack = Stack(args.capacity)
    return _run(
        PROMPT,
        -1,
        lambda value: _put_or_take("Stack", stack.push, stack.pop, value),
        stack.render,
    )


if __name__ == "__main__":
    sys.exit(main())