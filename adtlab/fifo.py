"""A bounded first-in first-out queue."""

from __future__ import annotations

from collections import deque
from typing import Any, Callable, Iterator


class QueueFullError(Exception):
    """Raised when pushing onto a queue that has no room left."""


class QueueEmptyError(IndexError):
    """Raised when reading from an empty queue."""


class Queue:
    """FIFO queue holding at most ``CAPACITY`` non-None items."""

    # Ring of 100 slots; the full check leaves 8 of them unused.
    CAPACITY = 92

    def __init__(self) -> None:
        self._items: deque[Any] = deque()

    def push(self, item: Any) -> None:
        """Add ``item`` at the back."""
        if item is None:
            raise ValueError("cannot push None onto a queue")
        if len(self._items) >= self.CAPACITY:
            raise QueueFullError("queue is full")
        self._items.append(item)

    def pop(self) -> Any:
        """Remove and return the front item."""
        if not self._items:
            raise QueueEmptyError("pop from an empty queue")
        return self._items.popleft()

    def front(self) -> Any:
        """Return the front item without removing it."""
        if not self._items:
            raise QueueEmptyError("queue is empty")
        return self._items[0]

    def back(self) -> Any:
        """Return the back item without removing it."""
        if not self._items:
            raise QueueEmptyError("queue is empty")
        return self._items[-1]

    def __len__(self) -> int:
        return len(self._items)

    def __bool__(self) -> bool:
        return bool(self._items)

    def __iter__(self) -> Iterator[Any]:
        return iter(tuple(self._items))

    def format(self, formatter: Callable[[Any], str]) -> str:
        """Render every item front to back, then a newline."""
        return "".join(formatter(item) for item in self._items) + "\n"