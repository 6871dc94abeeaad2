"""Print a message forwards and backwards by passing it through bounded containers.

The containers keep their fixed capacities, so characters beyond what a
container can hold are dropped, exactly as a full container refuses them.
"""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable, Iterable, Iterator
from contextlib import suppress
from typing import Any, Protocol, TextIO

from boundedds.deque import CAPACITY as DEQUE_CAPACITY
from boundedds.deque import Deque
from boundedds.stack import CAPACITY as STACK_CAPACITY
from boundedds.stack import FullError, Stack

PROMPT = "Message ? "


class _Container(Protocol):
    def is_empty(self) -> bool: ...


def _load(put: Callable[[Any], None], items: Iterable[Any]) -> None:
    for item in items:
        with suppress(FullError):
            put(item)


def _drain(container: _Container, take: Callable[[], Any]) -> Iterator[Any]:
    while not container.is_empty():
        yield take()


def forward_stack(message: str) -> str:
    """Restore the original order by pouring one stack into another."""
    first = Stack(STACK_CAPACITY)
    _load(first.push, message)
    second = Stack(STACK_CAPACITY)
    _load(second.push, _drain(first, first.pop))
    return "".join(_drain(second, second.pop))


def backward_stack(message: str) -> str:
    """Reverse the message by pushing it onto a stack and popping it off."""
    stack = Stack(STACK_CAPACITY)
    _load(stack.push, message)
    return "".join(_drain(stack, stack.pop))


def forward_deque(message: str) -> str:
    """Add at the rear and delete from the front."""
    deque = Deque(DEQUE_CAPACITY)
    _load(deque.add, message)
    return "".join(_drain(deque, deque.delete))


def backward_deque(message: str) -> str:
    """Add at the rear and take back from the rear."""
    deque = Deque(DEQUE_CAPACITY)
    _load(deque.add, message)
    return "".join(_drain(deque, deque.yield_item))


def forward_jump_in(message: str) -> str:
    """Insert at the front and take from the rear."""
    deque = Deque(DEQUE_CAPACITY)
    _load(deque.jump_in, message)
    return "".join(_drain(deque, deque.yield_item))


def backward_jump_in(message: str) -> str:
    """Insert at the front and delete from the front."""
    deque = Deque(DEQUE_CAPACITY)
    _load(deque.jump_in, message)
    return "".join(_drain(deque, deque.delete))


MODES = {
    "stack": (forward_stack, backward_stack),
    "deque": (forward_deque, backward_deque),
    "jump-in": (forward_jump_in, backward_jump_in),
}


def _prompted_lines(prompt: str, stream: TextIO) -> Iterator[str]:
    while True:
        print(prompt, end="", flush=True)
        line = stream.readline()
        if not line:
            return
        yield line.rstrip("\r\n")


def main(argv: list[str] | None = None) -> int:
    """Read messages until an empty line and print each forwards and backwards."""
    parser = argparse.ArgumentParser(
        prog="boundedds-reverse",
        description="Print messages forwards and backwards through a container.",
    )
    parser.add_argument("--mode", choices=sorted(MODES), default="stack")
    args = parser.parse_args(argv)

    forward, backward = MODES[args.mode]
    for message in _prompted_lines(PROMPT, sys.stdin):
        if not message:
            break
        print(f" Forward: {forward(message)}")
        print(f"Backward: {backward(message)}")
        print()
    print("\nBye, ...")
    return 0


if __name__ == "__main__":
    sys.exit(main())