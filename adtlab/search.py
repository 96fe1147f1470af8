"""Run depth- and breadth-first searches over a graph read from a file."""

from __future__ import annotations

import os
import re
import sys
from typing import List, Optional, Sequence, TextIO, Tuple

from adtlab.graph import Graph, GraphError
from adtlab.vertex import Vertex

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def _leading_int(text: str) -> int:
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


def _write_header(out: TextIO, title: str, origin: int, destination: int) -> None:
    out.write(f"--------{title}--------\n")
    out.write("Input:\n")
    out.write(f"From Vertex id: {origin}\n")
    out.write(f"To Vertex id: {destination}\n")
    out.write("Output\n")


def run_searches(
    graph: Graph, origin: int, destination: int, out: TextIO
) -> Tuple[List[Vertex], List[Vertex]]:
    """Run DFS then BFS from ``origin`` to ``destination``, printing visited vertices.

    Returns the vertices visited by each search. Raises ``GraphError`` if a
    search cannot run.
    """
    _write_header(out, "DFS", origin, destination)
    depth = graph.depth_search(origin, destination)
    out.write("".join(f"{vertex}\n" for vertex in depth))

    _write_header(out, "BFS", origin, destination)
    breadth = graph.breadth_search(origin, destination)
    out.write("".join(f"{vertex}\n" for vertex in breadth))
    return depth, breadth


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Read a graph file and search it between two vertex ids."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) < 3:
        prog = os.path.basename(sys.argv[0]) if sys.argv and sys.argv[0] else "search"
        sys.stderr.write(
            f"Format should be: {prog} <File1> <ID_origin> <ID_destination> \n"
        )
        return 1
    try:
        with open(args[0], encoding="utf-8") as stream:
            graph = Graph.from_stream(stream)
    except (OSError, GraphError, ValueError):
        return 1

    origin = _leading_int(args[1])
    destination = _leading_int(args[2])
    try:
        run_searches(graph, origin, destination, sys.stdout)
    except GraphError:
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())