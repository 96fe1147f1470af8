"""Queue, stack, circular list, ring buffer and graph types, with small command-line exercises."""

__version__ = "1.0.0"

__all__ = [
    "delivery",
    "elements",
    "fifo",
    "grades",
    "graph",
    "linkedlist",
    "ringbuffer",
    "search",
    "stack",
    "vertex",
]