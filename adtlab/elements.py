"""Element conversion, comparison and formatting, and line-based file reading."""

from __future__ import annotations

import re
from typing import Any, Callable, TextIO

BUFFER_SIZE = 512

INT_MAX = 2**31 - 1
INT_MIN = -(2**31)
LONG_MAX = 2**63 - 1
LONG_MIN = -(2**63)

_INT_PREFIX = re.compile(r"\s*[+-]?\d+")
_FLOAT = re.compile(
    r"\s*[+-]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|inf(?:inity)?|nan)",
    re.IGNORECASE,
)


def parse_int(text: str) -> int:
    """Parse a whole decimal integer that fits a 32-bit signed int."""
    match = _INT_PREFIX.match(text)
    if match is None:
        raise ValueError(f"{text}: not a decimal number")
    if match.end() != len(text):
        raise ValueError(
            f"{text}: extra characters at end of input: {text[match.end():]}"
        )
    value = int(match.group())
    if value > LONG_MAX or value < LONG_MIN:
        raise ValueError(f"{text} out of range of type long")
    if value > INT_MAX:
        raise ValueError(f"{value} greater than INT_MAX")
    if value < INT_MIN:
        raise ValueError(f"{value} less than INT_MIN")
    return value


def parse_str(text: str) -> str:
    """Return the text itself as the element."""
    return str(text)


def parse_char(text: str) -> str:
    """Return the first character of ``text``, or NUL for an empty string."""
    return text[0] if text else "\0"


def parse_float(text: str) -> float:
    """Parse a whole floating-point number."""
    if _FLOAT.fullmatch(text) is None:
        raise ValueError(f"{text}: not a float number")
    return float(text)


def compare_values(a: Any, b: Any) -> int:
    """Three-way comparison: negative, zero or positive."""
    return (a > b) - (a < b)


def format_int(value: int) -> str:
    """Render an integer in decimal."""
    return f"{value:d}"


def format_char(value: str) -> str:
    """Render a single character."""
    return value[:1]


def format_float(value: float) -> str:
    """Render a float with six decimals."""
    return f"{value:f}"


def read_line(stream: TextIO) -> str:
    """Read up to ``BUFFER_SIZE - 1`` characters of a line, dropping its line end.

    Returns an empty string both at end of input and for an empty line.
    """
    line = stream.readline(BUFFER_SIZE - 1)
    if line.endswith("\n"):
        line = line[:-1]
    if line.endswith("\r"):
        line = line[:-1]
    return line


def read_collection(
    container: Any,
    path: str,
    convert: Callable[[str], Any],
    insert: Callable[[Any, Any], None],
    is_empty: Callable[[Any], bool],
) -> int:
    """Fill an empty ``container`` with one converted element per line of ``path``.

    Reading stops at the first empty line or at end of file. Returns the
    number of elements inserted.
    """
    if container is None or not is_empty(container):
        raise ValueError("the container must exist and be empty")
    count = 0
    with open(path, encoding="utf-8") as stream:
        while line := read_line(stream):
            insert(container, convert(line))
            count += 1
    return count