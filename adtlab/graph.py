"""Directed graphs of tagged vertices with depth- and breadth-first search."""

from __future__ import annotations

import re
from typing import Iterator, List, Set, TextIO, Tuple, Union

from adtlab.fifo import Queue, QueueFullError
from adtlab.stack import Stack
from adtlab.vertex import Label, Vertex

MAX_VTX = 4096

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")
_EDGE = re.compile(r"\s*([+-]?\d+)(?!\d)\s*([+-]?\d+)")


class GraphError(Exception):
    """Raised for malformed graph input or an impossible graph operation."""


class Graph:
    """Directed graph of vertices with unique ids in ``0 .. MAX_VTX - 1``."""

    def __init__(self) -> None:
        self._vertices: List[Vertex] = []
        self._edges: Set[Tuple[int, int]] = set()

    @classmethod
    def from_stream(cls, stream: TextIO) -> Graph:
        """Build a graph from a text description (see :meth:`read`)."""
        graph = cls()
        graph.read(stream)
        return graph

    def read(self, stream: TextIO) -> None:
        """Fill the graph from a text description.

        The first line holds the number of vertices, then one line per
        vertex description, then one ``orig dest`` pair per line.
        """
        header = stream.readline()
        if not header:
            raise GraphError("missing vertex count")
        match = _LEADING_INT.match(header)
        if match is None:
            raise GraphError(f"invalid vertex count: {header.strip()!r}")
        count = int(match.group(1))
        if count <= 0:
            raise GraphError(f"vertex count must be positive: {count}")

        for position in range(count):
            line = stream.readline()
            if not line:
                raise GraphError(
                    f"expected {count} vertex lines, found {position}"
                )
            self.add_vertex(line)
            if position < len(self._vertices):
                self._vertices[position].index = position

        for line in stream:
            edge = _EDGE.match(line)
            if edge is None:
                raise GraphError(f"invalid edge line: {line.rstrip()!r}")
            self.add_edge(int(edge.group(1)), int(edge.group(2)))

    @property
    def num_vertices(self) -> int:
        """Number of vertices in the graph."""
        return len(self._vertices)

    @property
    def num_edges(self) -> int:
        """Number of distinct directed edges in the graph."""
        return len(self._edges)

    def add_vertex(self, desc: str) -> Vertex:
        """Add a vertex described by ``key:value`` pairs.

        If a vertex with the same id is already present, nothing is added
        and the existing vertex is returned.
        """
        vertex = Vertex.from_string(desc)
        for existing in self._vertices:
            if existing.id == vertex.id:
                return existing
        if len(self._vertices) >= MAX_VTX:
            raise GraphError(f"graph cannot hold more than {MAX_VTX} vertices")
        vertex.index = len(self._vertices)
        self._vertices.append(vertex)
        return vertex

    def add_edge(self, orig: int, dest: int) -> None:
        """Connect ``orig`` to ``dest``; an existing edge is left as it is."""
        for vertex_id in (orig, dest):
            if not 0 <= vertex_id < MAX_VTX:
                raise GraphError(f"vertex id out of range: {vertex_id}")
        self._edges.add((orig, dest))

    def contains(self, vertex_id: int) -> bool:
        """Whether a vertex with ``vertex_id`` is in the graph."""
        return any(vertex.id == vertex_id for vertex in self._vertices)

    def connection_exists(self, orig: int, dest: int) -> bool:
        """Whether there is an edge from ``orig`` to ``dest``."""
        return (orig, dest) in self._edges

    def connections_from_id(self, vertex_id: int) -> List[int]:
        """Ids of the vertices that ``vertex_id`` connects to, in vertex order."""
        return [
            vertex.id
            for vertex in self._vertices
            if (vertex_id, vertex.id) in self._edges
        ]

    def connections_from_tag(self, tag: str) -> List[int]:
        """Ids of the vertices that the first vertex tagged ``tag`` connects to."""
        for vertex in self._vertices:
            if vertex.tag == tag:
                return self.connections_from_id(vertex.id)
        raise KeyError(tag)

    def vertex(self, vertex_id: int) -> Vertex:
        """Return the vertex with ``vertex_id``."""
        for vertex in self._vertices:
            if vertex.id == vertex_id:
                return vertex
        raise KeyError(vertex_id)

    def __iter__(self) -> Iterator[Vertex]:
        return iter(tuple(self._vertices))

    def format(self) -> str:
        """One line per vertex: the vertex, `` : `` and the vertices it reaches."""
        lines = []
        for vertex in self._vertices:
            targets = "".join(
                str(target)
                for target in self._vertices
                if (vertex.id, target.id) in self._edges
            )
            lines.append(f"{vertex} : {targets}\n")
        return "".join(lines)

    def depth_search(self, start: int, goal: int) -> List[Vertex]:
        """Depth-first search; returns the vertices in the order visited."""
        return self._search(start, goal, Stack())

    def breadth_search(self, start: int, goal: int) -> List[Vertex]:
        """Breadth-first search; returns the vertices in the order visited."""
        return self._search(start, goal, Queue())

    def _search(
        self, start: int, goal: int, frontier: Union[Stack, Queue]
    ) -> List[Vertex]:
        if start < 0 or goal < 0:
            raise GraphError("vertex ids must not be negative")
        try:
            origin = self.vertex(start)
            target = self.vertex(goal)
        except KeyError as exc:
            raise GraphError(f"no vertex with id {exc.args[0]}") from None

        for vertex in self._vertices:
            vertex.state = Label.WHITE

        visited: List[Vertex] = []
        origin.state = Label.BLACK
        try:
            frontier.push(origin)
            while frontier:
                current = frontier.pop()
                visited.append(current)
                if current.compare(target) == 0:
                    break
                for neighbour_id in self.connections_from_id(current.id):
                    neighbour = self.vertex(neighbour_id)
                    if neighbour.state == Label.WHITE:
                        neighbour.state = Label.BLACK
                        frontier.push(neighbour)
        except QueueFullError as exc:
            raise GraphError("search frontier overflowed") from exc
        return visited