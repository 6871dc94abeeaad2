"""Array-backed bounded queues in several flavours, with a command loop."""

from __future__ import annotations

import enum
import sys
from collections.abc import Iterable, Iterator
from typing import Any

from boundedds.stack import (
    CAPACITY,
    EmptyError,
    FullError,
    _capacity_parser,
    _check_capacity,
    _put_or_take,
    _run,
)

PROMPT = "-2:Exit -1:Delete, *:Add ? "


def _render_slots(cells: Iterable[tuple[int, Any]]) -> str:
    cells = list(cells)
    head = "".join(f"--{index}-" for index, _ in cells) + "--\n"
    body = "".join(f"{item:>3} " for _, item in cells) + "\n"
    foot = "----" * len(cells) + "--\n\n"
    return head + body + foot


class LinearQueue:
    """FIFO queue whose front and rear only ever move forward.

    Slots freed by deletion are not reused, so the queue can report full
    while holding few or no items.
    """

    _noun = "queue"
    _origin = -1

    def __init__(self, capacity: int = CAPACITY) -> None:
        _check_capacity(capacity)
        self.capacity = capacity
        self._slots: list[Any] = [None] * capacity
        self._front = self._origin
        self._rear = self._origin

    def _step(self, index: int) -> int:
        return index + 1

    def _positions(self) -> Iterator[int]:
        return iter(range(self._front + 1, self._rear + 1))

    def __len__(self) -> int:
        return self._rear - self._front

    def is_empty(self) -> bool:
        return self._front == self._rear

    def is_full(self) -> bool:
        return self._rear >= self.capacity - 1

    def add(self, item: Any) -> None:
        """Append ``item`` at the rear; raise FullError when there is no room."""
        if self.is_full():
            raise FullError(f"{self._noun} is full")
        self._rear = self._step(self._rear)
        self._slots[self._rear] = item

    def delete(self) -> Any:
        """Remove and return the front item; raise EmptyError when empty."""
        if self.is_empty():
            raise EmptyError(f"{self._noun} is empty")
        self._front = self._step(self._front)
        return self._slots[self._front]

    def render(self) -> str:
        """Draw the held items with their array indices, front to rear."""
        return _render_slots((i, self._slots[i]) for i in self._positions())


class ResetQueue(LinearQueue):
    """Linear queue that rewinds to the start whenever it drains."""

    def is_full(self) -> bool:
        if self._front == self._rear and self._front != -1:
            self._front = self._rear = -1
        return self._rear >= self.capacity - 1


class ShiftQueue(LinearQueue):
    """Linear queue that slides its items to the start when the rear hits the end."""

    def _cannot_shift(self) -> bool:
        if self._front != -1:
            moved = self._slots[self._front + 1 :]
            self._slots = moved + [None] * (self.capacity - len(moved))
            self._front = -1
            self._rear = len(moved) - 1
        return self._rear == self.capacity - 1

    def is_full(self) -> bool:
        return self._rear >= self.capacity - 1 and self._cannot_shift()


class CircularQueue(LinearQueue):
    """Ring-buffer FIFO queue; one slot stays unused to tell full from empty."""

    _origin = 0

    def __init__(self, capacity: int = CAPACITY) -> None:
        super().__init__(capacity)

    def _step(self, index: int) -> int:
        return (index + 1) % self.capacity

    def _positions(self) -> Iterator[int]:
        return ((self._front + i) % self.capacity for i in range(1, len(self) + 1))

    def __len__(self) -> int:
        return (self._rear - self._front) % self.capacity

    def is_empty(self) -> bool:
        return self._front == self._rear

    def is_full(self) -> bool:
        return (self._rear + 1) % self.capacity == self._front

    def add(self, item: Any) -> None:
        """Append ``item`` at the rear; raise FullError when there is no room."""
        if self.is_full():
            raise FullError(f"{self._noun} is full")
        self._rear = self._step(self._rear)
        self._slots[self._rear] = item

    def delete(self) -> Any:
        """Remove and return the front item; raise EmptyError when empty."""
        if self.is_empty():
            raise EmptyError(f"{self._noun} is empty")
        self._front = self._step(self._front)
        return self._slots[self._front]

    def render(self) -> str:
        """Draw the held items with their ring indices, front to rear."""
        return _render_slots((i, self._slots[i]) for i in self._positions())


class _LastOp(enum.Enum):
    ADD = 1
    DELETE = 2


class TagQueue(CircularQueue):
    """Ring-buffer FIFO queue that uses every slot.

    The last operation is remembered so that equal front and rear can be
    told apart as full (after an add) or empty (after a delete).
    """

    def __init__(self, capacity: int = CAPACITY) -> None:
        super().__init__(capacity)
        self._last = _LastOp.DELETE

    def __len__(self) -> int:
        return super().__len__() + (self.capacity if self.is_full() else 0)

    def is_empty(self) -> bool:
        return self._front == self._rear and self._last is _LastOp.DELETE

    def is_full(self) -> bool:
        return self._front == self._rear and self._last is _LastOp.ADD

    def add(self, item: Any) -> None:
        """Append ``item`` at the rear; raise FullError when there is no room."""
        super().add(item)
        self._last = _LastOp.ADD

    def delete(self) -> Any:
        """Remove and return the front item; raise EmptyError when empty."""
        item = super().delete()
        self._last = _LastOp.DELETE
        return item

    def render(self) -> str:
        """Draw every held item, including all slots when the queue is full."""
        return _render_slots((i, self._slots[i]) for i in self._positions())


KINDS = {
    "linear": LinearQueue,
    "reset": ResetQueue,
    "shift": ShiftQueue,
    "circular": CircularQueue,
    "tag": TagQueue,
}


def main(argv: list[str] | None = None) -> int:
    """Read integers from standard input and add or delete them."""
    parser = _capacity_parser("boundedds-queue", "Interactive bounded queue.")
    parser.add_argument("--kind", choices=sorted(KINDS), default="linear")
    args = parser.parse_args(argv)
    queue = KINDS[args.kind](args.capacity)
    return _run(
        PROMPT,
        -1,
        lambda value: _put_or_take("Queue", queue.add, queue.delete, value),
        queue.render,
    )


if __name__ == "__main__":
    sys.exit(main())