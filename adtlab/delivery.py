"""Deliveries: a named product carried along a queue of locations."""

from __future__ import annotations

import os
import re
import sys
from typing import Any, Callable, List, Optional, Sequence, TextIO

from adtlab.fifo import Queue, QueueFullError
from adtlab.vertex import Vertex

_LEADING_INT = re.compile(r"[+-]?\d+")


def _cmp(a: Any, b: Any) -> int:
    return (a > b) - (a < b)


class Delivery:
    """A delivery of one product, with a plan of locations to visit in order."""

    def __init__(self, name: str, product_name: str) -> None:
        if name is None or product_name is None:
            raise ValueError("a delivery needs a name and a product name")
        self.name = name
        self.product_name = product_name
        self.plan = Queue()

    def add(self, out: TextIO, item: Any, formatter: Callable[[Any], str]) -> None:
        """Append ``item`` to the plan and report it on ``out``."""
        self.plan.push(item)
        out.write(f"Adding : {formatter(item)} to delivery {self.name}\n")

    def run_plan(self, out: TextIO, formatter: Callable[[Any], str]) -> List[Any]:
        """Show the plan, then deliver to every location in order, emptying it.

        Returns the locations in the order they were delivered to.
        """
        out.write(self.plan.format(formatter))
        delivered = []
        while self.plan:
            item = self.plan.pop()
            out.write(
                f"Delivering {self.product_name} requested by {self.name} "
                f"to {formatter(item)}\n"
            )
            delivered.append(item)
        return delivered

    def compare(self, other: Delivery) -> int:
        """Order by name, then product name, then plan length."""
        result = _cmp(self.name, other.name)
        if result == 0:
            result = _cmp(self.product_name, other.product_name)
            if result == 0:
                result = len(self.plan) - len(other.plan)
        return result

    def copy(self) -> Delivery:
        """Return a delivery with the same names and a new plan of the same items."""
        duplicate = Delivery(self.name, self.product_name)
        for item in self.plan:
            duplicate.plan.push(item)
        return duplicate

    def format(self, formatter: Callable[[Any], str]) -> str:
        """Render the header line followed by the plan."""
        header = f"{self.name} delivers {self.product_name}\n"
        return header + self.plan.format(formatter)


def build_delivery(stream: TextIO, out: TextIO) -> Delivery:
    """Read a delivery description and add its locations, reporting each on ``out``.

    The input holds a name, a product and a count of locations, followed by
    one vertex description per line.
    """
    tokens: List[str] = []
    while len(tokens) < 3:
        line = stream.readline()
        if not line:
            break
        tokens.extend(line.split()[: 3 - len(tokens)])
    if len(tokens) < 2:
        raise ValueError("expected a delivery name and a product name")

    delivery = Delivery(tokens[0], tokens[1])
    count = 0
    if len(tokens) == 3:
        match = _LEADING_INT.match(tokens[2])
        if match is not None:
            count = int(match.group())

    for position in range(count):
        line = stream.readline()
        if not line:
            raise ValueError(f"expected {count} location lines, found {position}")
        delivery.add(out, Vertex.from_string(line), str)
    return delivery


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Read a delivery from the file named in ``argv`` and run its plan."""
    args = sys.argv[1:] if argv is None else list(argv)
    if not args:
        prog = os.path.basename(sys.argv[0]) if sys.argv and sys.argv[0] else "delivery"
        sys.stderr.write(f"Format should be: {prog} <File1>\n")
        return 1
    try:
        with open(args[0], encoding="utf-8") as stream:
            delivery = build_delivery(stream, sys.stdout)
    except (OSError, ValueError, QueueFullError):
        return 1

    sys.stdout.write("Running delivery plan queue: \n")
    delivery.run_plan(sys.stdout, str)
    return 0


if __name__ == "__main__":
    sys.exit(main())