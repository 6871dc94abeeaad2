"""Depth-first path finding through a walled grid maze using a bounded stack."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence
from dataclasses import dataclass

from boundedds.stack import Stack

# Row and column offsets tried in this order from each cell.
MOVES: tuple[tuple[int, int], ...] = (
    (1, 1),    # south-east
    (1, 0),    # south
    (0, 1),    # east
    (-1, 1),   # north-east
    (1, -1),   # south-west
    (-1, 0),   # west
    (0, -1),   # north
    (-1, -1),  # north-west
)

DEFAULT_MAZE: tuple[tuple[int, ...], ...] = (
    (1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1),
    (1, 0, 1, 0, 0, 0, 1, 1, 0, 0, 0, 1, 1, 1, 1, 1, 1),
    (1, 1, 0, 0, 0, 1, 1, 0, 1, 1, 1, 0, 0, 1, 1, 1, 1),
    (1, 0, 1, 1, 0, 0, 0, 0, 1, 1, 1, 1, 0, 0, 1, 1, 1),
    (1, 1, 1, 0, 1, 1, 1, 1, 0, 1, 1, 0, 1, 1, 0, 0, 1),
    (1, 1, 1, 0, 1, 0, 0, 1, 0, 1, 1, 1, 1, 1, 1, 1, 1),
    (1, 0, 0, 1, 1, 0, 1, 1, 1, 0, 1, 0, 0, 1, 0, 1, 1),
    (1, 0, 1, 1, 1, 1, 0, 0, 1, 1, 1, 1, 1, 1, 1, 1, 1),
    (1, 0, 0, 1, 1, 0, 1, 1, 0, 1, 1, 1, 1, 1, 0, 1, 1),
    (1, 1, 1, 0, 0, 0, 1, 1, 0, 1, 1, 0, 0, 0, 0, 0, 1),
    (1, 0, 0, 1, 1, 1, 1, 1, 0, 0, 0, 1, 1, 1, 1, 0, 1),
    (1, 0, 1, 0, 0, 1, 1, 1, 1, 1, 0, 1, 1, 1, 1, 0, 1),
    (1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1),
)


@dataclass
class Step:
    """A cell of the maze and the next direction to try from it."""

    row: int
    col: int
    direction: int = 0


class Maze:
    """A grid of 0 (open) and 1 (wall) cells surrounded by a wall border.

    The search starts at (1, 1) and aims for the last interior cell,
    (rows - 2, cols - 2).
    """

    def __init__(self, grid: Sequence[Sequence[int]]) -> None:
        rows = [list(row) for row in grid]
        if len(rows) < 3 or not rows[0] or len(rows[0]) < 3:
            raise ValueError("maze needs at least 3 rows and 3 columns")
        width = len(rows[0])
        if any(len(row) != width for row in rows):
            raise ValueError("maze rows must all have the same length")
        self._grid = rows
        self._rows = len(rows)
        self._cols = width
        self._goal = (self._rows - 2, self._cols - 2)
        self._marks = [[False] * width for _ in rows]
        self.path: list[Step] = []

    def _can_go(self, step: Step) -> bool:
        inside = 0 <= step.row < self._rows and 0 <= step.col < self._cols
        return inside and self._grid[step.row][step.col] == 0

    def _is_marked(self, step: Step) -> bool:
        return self._marks[step.row][step.col]

    def _mark(self, step: Step) -> None:
        self._marks[step.row][step.col] = True

    def _is_goal(self, step: Step) -> bool:
        return (step.row, step.col) == self._goal

    def find_path(self) -> bool:
        """Search for a path; on success store it in ``path`` and return True."""
        self._marks = [[False] * self._cols for _ in range(self._rows)]
        self.path = []
        stack = Stack(self._rows * self._cols)

        current = Step(1, 1, 0)
        self._mark(current)
        stack.push(current)
        while not stack.is_empty():
            current = stack.pop()
            while current.direction < len(MOVES):
                d_row, d_col = MOVES[current.direction]
                following = Step(current.row + d_row, current.col + d_col, 0)
                if self._is_goal(following):
                    stack.push(current)
                    stack.push(following)
                    self.path = list(reversed([stack.pop() for _ in range(len(stack))]))
                    return True
                if self._can_go(following) and not self._is_marked(following):
                    current.direction += 1
                    stack.push(current)
                    current = following
                    self._mark(current)
                else:
                    current.direction += 1
        return False

    def render_path(self) -> str:
        """Draw the maze: walls '1', open '0', visited '*', path 'x'."""
        canvas = [
            ["*" if marked else str(cell) for cell, marked in zip(row, marks)]
            for row, marks in zip(self._grid, self._marks)
        ]
        for step in self.path:
            canvas[step.row][step.col] = "x"
        return "".join("".join(row) + "\n" for row in canvas)


def main(argv: list[str] | None = None) -> int:
    """Solve the built-in maze and print the path found."""
    parser = argparse.ArgumentParser(
        prog="boundedds-maze", description="Find a path through a grid maze."
    )
    parser.parse_args(argv)

    maze = Maze(DEFAULT_MAZE)
    if maze.find_path():
        print(maze.render_path(), end="")
    else:
        print("No path has been found.")
    return 0


if __name__ == "__main__":
    sys.exit(main())