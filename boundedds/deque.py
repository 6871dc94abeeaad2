"""A bounded ring-buffer double-ended queue and a command loop for it."""

from __future__ import annotations

import sys
from typing import Any

from boundedds.queues import CircularQueue
from boundedds.stack import (
    CAPACITY,
    EmptyError,
    FullError,
    _capacity_parser,
    _report,
    _run,
)

PROMPT = "-3:끝, -2:양보, -1:삭제, 0~999:삽입, *:새치기 ? "


class Deque(CircularQueue):
    """Ring-buffer deque; one slot stays unused to tell full from empty."""

    _noun = "deque"

    def __init__(self, capacity: int = CAPACITY) -> None:
        super().__init__(capacity)

    def __len__(self) -> int:
        return (self._rear - self._front) % self.capacity

    def is_empty(self) -> bool:
        return self._front == self._rear

    def is_full(self) -> bool:
        return (self._rear + 1) % self.capacity == self._front

    def add(self, item: Any) -> None:
        """Append ``item`` at the rear; raise FullError when there is no room."""
        if self.is_full():
            raise FullError("deque is full")
        self._rear = (self._rear + 1) % self.capacity
        self._slots[self._rear] = item

    def delete(self) -> Any:
        """Remove and return the front item; raise EmptyError when empty."""
        if self.is_empty():
            raise EmptyError("deque is empty")
        self._front = (self._front + 1) % self.capacity
        return self._slots[self._front]

    def jump_in(self, item: Any) -> None:
        """Insert ``item`` at the front; raise FullError when there is no room."""
        if self.is_full():
            raise FullError("deque is full")
        self._slots[self._front] = item
        self._front = (self._front - 1) % self.capacity

    def yield_item(self) -> Any:
        """Remove and return the rear item; raise EmptyError when empty."""
        if self.is_empty():
            raise EmptyError("deque is empty")
        item = self._slots[self._rear]
        self._rear = (self._rear - 1) % self.capacity
        return item

    def render(self) -> str:
        """Draw the held items with their ring indices, front to rear."""
        return super().render()


def main(argv: list[str] | None = None) -> int:
    """Read integers from standard input and operate on both ends of a deque."""
    args = _capacity_parser("boundedds-deque", "Interactive bounded deque.").parse_args(argv)
    deque = Deque(args.capacity)
    removals = {-2: (deque.yield_item, "양보"), -1: (deque.delete, "삭제")}

    def dispatch(value: int) -> str:
        if value in removals:
            take, label = removals[value]
            return _report("Deque", take, lambda item: f"{item} is deleted({label})")
        if value < 1000:
            put, label = deque.add, "삽입"
        else:
            value %= 1000
            put, label = deque.jump_in, "새치기"
        return _report("Deque", lambda: put(value), lambda _: f"{value} is inserted({label})")

    return _run(PROMPT, -2, dispatch, deque.render)


if __name__ == "__main__":
    sys.exit(main())