"""A growable last-in first-out stack."""

from __future__ import annotations

from typing import Any, Callable, Iterator


class StackEmptyError(IndexError):
    """Raised when reading from an empty stack."""


class Stack:
    """LIFO stack of non-None items."""

    def __init__(self) -> None:
        self._items: list[Any] = []

    def push(self, item: Any) -> None:
        """Put ``item`` on top."""
        if item is None:
            raise ValueError("cannot push None onto a stack")
        self._items.append(item)

    def pop(self) -> Any:
        """Remove and return the top item."""
        if not self._items:
            raise StackEmptyError("pop from an empty stack")
        return self._items.pop()

    def top(self) -> Any:
        """Return the top item without removing it."""
        if not self._items:
            raise StackEmptyError("stack is empty")
        return self._items[-1]

    def __len__(self) -> int:
        return len(self._items)

    def __bool__(self) -> bool:
        return bool(self._items)

    def __iter__(self) -> Iterator[Any]:
        """Iterate from the top down to the bottom."""
        return iter(self._items[::-1])

    def format(self, formatter: Callable[[Any], str]) -> str:
        """Render each item on its own line, top first."""
        return "".join(formatter(item) + "\n" for item in reversed(self._items))