"""Graph vertices described by an id, a tag, a visit state and an index."""

from __future__ import annotations

import enum
import re
from dataclasses import dataclass, replace

TAG_LENGTH = 64

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


class Label(enum.IntEnum):
    """Visit state of a vertex."""

    WHITE = 0
    BLACK = 1
    ERROR_VERTEX = 2


def _leading_int(text: str) -> int:
    """Parse the integer prefix of ``text``, or 0 if there is none."""
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


@dataclass
class Vertex:
    """A vertex with a non-negative id, a short tag, a state and an index."""

    id: int = 0
    tag: str = ""
    state: Label = Label.WHITE
    index: int = 0

    def __post_init__(self) -> None:
        if self.id < 0:
            raise ValueError(f"vertex id must not be negative: {self.id}")
        if len(self.tag) > TAG_LENGTH:
            raise ValueError(f"vertex tag longer than {TAG_LENGTH} characters")
        if self.index < 0:
            raise ValueError(f"vertex index must not be negative: {self.index}")
        self.state = Label(self.state)

    @classmethod
    def from_string(cls, descr: str) -> Vertex:
        """Build a vertex from whitespace-separated ``key:value`` pairs.

        Recognised keys are ``id``, ``tag`` and ``state``; unknown keys,
        tokens without a colon and invalid values are ignored.
        """
        vertex = cls()
        for token in descr.split():
            key, sep, value = token.partition(":")
            if sep:
                vertex._set_field(key, value)
        return vertex

    def _set_field(self, key: str, value: str) -> bool:
        if key == "id":
            number = _leading_int(value)
            if number < 0:
                return False
            self.id = number
            return True
        if key == "tag":
            if len(value) > TAG_LENGTH:
                return False
            self.tag = value
            return True
        if key == "state":
            try:
                self.state = Label(_leading_int(value))
            except ValueError:
                return False
            return True
        return False

    def compare(self, other: Vertex) -> int:
        """Order by id, then by tag: negative, zero or positive."""
        if self.id != other.id:
            return -1 if self.id < other.id else 1
        return (self.tag > other.tag) - (self.tag < other.tag)

    def copy(self) -> Vertex:
        """Return an independent copy of this vertex."""
        return replace(self)

    def __str__(self) -> str:
        return f"[{self.id}, {self.tag}, {int(self.state)}, {self.index}]"