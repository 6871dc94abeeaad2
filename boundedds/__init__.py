"""Fixed-capacity stacks, queues and deques, message reversal and a backtracking maze solver."""

__version__ = "0.1.0"

__all__ = ["deque", "maze", "queues", "reverse", "stack"]