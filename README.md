# boundedds

Small containers built on a fixed-size array, showing how the classic
textbook structures behave at their limits.

- `boundedds.stack.Stack` – a bounded LIFO stack (`push`, `pop`). Pushing
  onto a full stack raises `FullError`; popping from an empty one raises
  `EmptyError`. Both exceptions live in `boundedds.stack` and are raised by
  every container in the package.
- `boundedds.queues` – bounded FIFO queues (`add`, `delete`) that differ in
  how they manage the array:
  - `LinearQueue` – front and rear only move forward, so slots freed by
    deletions are never reused; it can report full while holding few items.
  - `ResetQueue` – rewinds both indices to the start once the queue drains.
  - `ShiftQueue` – slides the remaining items to the start of the array when
    the rear reaches the end.
  - `CircularQueue` – wraps around; one slot is kept unused to tell full from
    empty, so a queue of capacity 10 holds 9 items.
  - `TagQueue` – wraps around and remembers whether the last operation was an
    add or a delete, so every slot can be used.
- `boundedds.deque.Deque` – a circular double-ended queue with `add` (at the
  rear), `delete` (from the front), `jump_in` (at the front) and `yield_item`
  (from the rear). Like `CircularQueue`, it keeps one slot unused.
- `boundedds.reverse` – `forward_stack`, `backward_stack`, `forward_deque`,
  `backward_deque`, `forward_jump_in` and `backward_jump_in` return a message
  passed through a container of capacity 10. Characters a full container
  refuses are dropped, so long messages are cut short.
- `boundedds.maze` – `Maze` finds a path through a walled grid by
  backtracking with a stack, trying eight directions; `Step` is one cell of
  the path.

The default capacity of every container is 10. Every container supports
`len()`, `is_empty()`, `is_full()` and `render()`, which returns a text
picture of its current contents.

## Installation

```
pip install .
```

## Library use

```python
from boundedds.stack import Stack, FullError
from boundedds.deque import Deque

stack = Stack(3)
stack.push(1)
stack.push(2)
print(stack.pop())        # 2

deque = Deque(10)
deque.add(5)
deque.jump_in(7)          # 7 now sits at the front
print(deque.delete())     # 7
print(deque.yield_item()) # 5
```

```python
from boundedds.reverse import forward_stack, backward_stack

print(forward_stack("hello"))   # hello
print(backward_stack("hello"))  # olleh
```

```python
from boundedds.maze import Maze

grid = [
    [1, 1, 1, 1, 1],
    [1, 0, 0, 0, 1],
    [1, 1, 1, 0, 1],
    [1, 1, 1, 0, 1],
    [1, 1, 1, 1, 1],
]
maze = Maze(grid)
if maze.find_path():
    print(maze.render_path())
```

The outer ring of the grid is a wall; `0` is open and `1` is blocked. The
search starts at row 1, column 1 and aims for the last interior cell. After a
successful `find_path()` the steps are in `maze.path`. In the rendered maze,
visited cells are drawn as `*` and the path as `x`.

## Commands

The interactive commands prompt for input on standard input and stop at the
exit value, at end of input, or at anything that is not a number. After each
operation they print the outcome and the container's current contents.

```
boundedds-stack [--capacity N]
    # -2 or less exits, -1 pops, any other number is pushed
boundedds-queue [--capacity N] [--kind {circular,linear,reset,shift,tag}]
    # -2 or less exits, -1 deletes, any other number is added
boundedds-deque [--capacity N]
    # -3 or less exits, -2 takes from the rear, -1 takes from the front,
    # 0..999 is added at the rear, 1000 and above jumps in at the front
    # with the value modulo 1000
boundedds-reverse [--mode {deque,jump-in,stack}]
    # type a message to see it forwards and backwards; an empty line exits
boundedds-maze
    # solves the built-in maze and prints the path
```

## Limits

`boundedds-maze` only solves its built-in maze; it does not read a maze from
a file or from the command line. Use the `Maze` class to solve other grids.

## Running the tests

```
pip install ".[test]"
pytest
```