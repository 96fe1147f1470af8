"""A fixed-capacity circular buffer of characters."""

from __future__ import annotations


class CharRing:
    """Circular character buffer that keeps one of its ``capacity`` slots free.

    Slots are never cleared, so :meth:`front` and :meth:`rear` read whatever
    a slot last held (a NUL character if it was never written).
    """

    def __init__(self, capacity: int) -> None:
        if capacity <= 0:
            raise ValueError(f"capacity must be positive: {capacity}")
        self._capacity = capacity
        self._slots = ["\0"] * capacity
        self._front = 0
        self._rear = 0

    @property
    def capacity(self) -> int:
        """Number of slots in the buffer."""
        return self._capacity

    def is_empty(self) -> bool:
        """Whether no characters are waiting."""
        return self._front == self._rear

    def is_full(self) -> bool:
        """Whether another push would overrun the front."""
        return self._front == (self._rear + 1) % self._capacity

    def push(self, char: str) -> None:
        """Store one character at the rear."""
        if len(char) != 1:
            raise ValueError("push expects a single character")
        if self.is_full():
            raise OverflowError("ring buffer is full")
        self._slots[self._rear] = char
        self._rear = (self._rear + 1) % self._capacity

    def pop(self) -> str:
        """Drop the front character and return the one in the new front slot."""
        if self.is_empty():
            raise IndexError("pop from an empty ring buffer")
        self._front = (self._front + 1) % self._capacity
        return self._slots[self._front]

    def front(self) -> str:
        """Character in the front slot."""
        return self._slots[self._front]

    def rear(self) -> str:
        """Character in the slot just before the rear position."""
        return self._slots[(self._rear - 1) % self._capacity]