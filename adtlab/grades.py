"""Read grades, scatter them into a circular list and gather them back in order."""

from __future__ import annotations

import re
import struct
import sys
from typing import List, Optional, Sequence, TextIO

from adtlab.elements import compare_values, format_float, parse_float
from adtlab.linkedlist import CircularList

_LEADING_INT = re.compile(r"[+-]?\d+")


def _single_precision(value: float) -> float:
    return struct.unpack("f", struct.pack("f", value))[0]


def read_grades(stream: TextIO) -> List[float]:
    """Read a count followed by that many numbers, as single-precision floats."""
    tokens = stream.read().split()
    total = 0
    if tokens:
        match = _LEADING_INT.match(tokens[0])
        if match is not None:
            total = int(match.group())
    if total <= 0:
        return []
    values = tokens[1 : 1 + total]
    if len(values) < total:
        raise ValueError(f"expected {total} grades, found {len(values)}")
    return [_single_precision(parse_float(token)) for token in values]


def sort_grades(values: Sequence[float], order: int, out: TextIO) -> CircularList:
    """Insert ``values`` alternately at back and front, then move them into a sorted list.

    A positive ``order`` sorts ascending, a negative one descending. Progress
    is written to ``out``; the sorted list is returned.
    """
    scattered = CircularList()
    for position, value in enumerate(values):
        if position % 2:
            scattered.push_front(value)
        else:
            scattered.push_back(value)
    if scattered:
        out.write(scattered.format(format_float))

    out.write(
        "Finished inserting. Now we extract from the beginning and insert in order:\n"
    )
    ordered = CircularList()
    half = len(values) // 2
    for _ in range(half):
        value = scattered.pop_front()
        out.write(format_float(value) + " ")
        ordered.push_in_order(value, compare_values, order)
    out.write("\n")

    out.write("Now we extract from the end and insert in order:\n")
    for _ in range(len(values) - half):
        value = scattered.pop_back()
        out.write(format_float(value) + " ")
        ordered.push_in_order(value, compare_values, order)
    out.write("\n")

    if ordered:
        out.write(ordered.format(format_float))
    return ordered


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Sort the grades in a file; the second argument is 1 or -1."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 2:
        sys.stderr.write("Format should be: ./p3_e3 <text_file> 1 or -1\n")
        return 1
    try:
        with open(args[0], encoding="utf-8") as stream:
            values = read_grades(stream)
    except (OSError, ValueError):
        return 1

    match = _LEADING_INT.match(args[1].lstrip())
    order = int(match.group()) if match else 0
    try:
        sort_grades(values, order, sys.stdout)
    except ValueError:
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())