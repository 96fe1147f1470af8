"""A singly linked circular list reachable through its last node."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Iterator, Optional


class EmptyListError(IndexError):
    """Raised when reading from or printing an empty list."""


@dataclass
class _Node:
    data: Any
    next: Optional[_Node] = None


class CircularList:
    """Circular list of non-None items; the last node links back to the first."""

    def __init__(self) -> None:
        self._last: Optional[_Node] = None
        self._size = 0

    @staticmethod
    def _check(item: Any) -> None:
        if item is None:
            raise ValueError("cannot insert None into a list")

    def _insert_into_empty(self, node: _Node) -> None:
        node.next = node
        self._last = node
        self._size = 1

    def push_front(self, item: Any) -> None:
        """Insert ``item`` before the first element."""
        self._check(item)
        node = _Node(item)
        if self._last is None:
            self._insert_into_empty(node)
            return
        node.next = self._last.next
        self._last.next = node
        self._size += 1

    def push_back(self, item: Any) -> None:
        """Insert ``item`` after the last element."""
        self._check(item)
        node = _Node(item)
        if self._last is None:
            self._insert_into_empty(node)
            return
        node.next = self._last.next
        self._last.next = node
        self._last = node
        self._size += 1

    def push_in_order(
        self, item: Any, compare: Callable[[Any, Any], int], order: int
    ) -> None:
        """Insert ``item`` keeping the list sorted.

        A positive ``order`` keeps the list ascending, a negative one
        descending. The item goes before the first element it does not
        strictly follow, so it lands ahead of any equal elements.
        """
        self._check(item)
        if order == 0:
            raise ValueError("order must be positive or negative, not zero")
        node = _Node(item)
        if self._last is None:
            self._insert_into_empty(node)
            return
        if order * compare(item, self._last.data) > 0:
            node.next = self._last.next
            self._last.next = node
            self._last = node
            self._size += 1
            return
        prev = self._last
        while order * compare(item, prev.next.data) > 0:
            prev = prev.next
        node.next = prev.next
        prev.next = node
        self._size += 1

    def pop_front(self) -> Any:
        """Remove and return the first element."""
        if self._last is None:
            raise EmptyListError("pop from an empty list")
        first = self._last.next
        if first is self._last:
            self._last = None
        else:
            self._last.next = first.next
        self._size -= 1
        return first.data

    def pop_back(self) -> Any:
        """Remove and return the last element."""
        if self._last is None:
            raise EmptyListError("pop from an empty list")
        last = self._last
        if last.next is last:
            self._last = None
        else:
            prev = last.next
            while prev.next is not last:
                prev = prev.next
            prev.next = last.next
            self._last = prev
        self._size -= 1
        return last.data

    def __len__(self) -> int:
        return self._size

    def __bool__(self) -> bool:
        return self._last is not None

    def __iter__(self) -> Iterator[Any]:
        """Iterate from the first element to the last."""
        if self._last is None:
            return
        node = self._last.next
        while True:
            yield node.data
            if node is self._last:
                return
            node = node.next

    def format(self, formatter: Callable[[Any], str]) -> str:
        """Render the size line, then each element followed by a space."""
        if self._last is None:
            raise EmptyListError("cannot print an empty list")
        body = "".join(formatter(item) + " " for item in self)
        return f"SIZE: {len(self)}\n{body}\n"