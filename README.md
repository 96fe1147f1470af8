# adtlab

A small collection of classic abstract data types, plus three command-line
exercises that put them to work.

| Module | What it provides |
| --- | --- |
| `adtlab.vertex` | `Vertex` (id, tag, state, index) and the `Label` states (`WHITE`, `BLACK`, `ERROR_VERTEX`) |
| `adtlab.fifo` | `Queue`, a bounded FIFO queue, with `QueueFullError` and `QueueEmptyError` |
| `adtlab.stack` | `Stack`, a growable LIFO stack, with `StackEmptyError` |
| `adtlab.linkedlist` | `CircularList`, a circular singly linked list, with `EmptyListError` |
| `adtlab.graph` | `Graph`, a directed graph with depth-first and breadth-first search, and `GraphError` |
| `adtlab.ringbuffer` | `CharRing`, a fixed-size ring buffer of characters |
| `adtlab.elements` | parsing, comparing and formatting helpers for element values, and line-by-line file loading |
| `adtlab.delivery` | `Delivery`, a named delivery plan backed by a queue; the `adtlab-delivery` command |
| `adtlab.search` | `run_searches`; the `adtlab-search` command |
| `adtlab.grades` | `read_grades`, `sort_grades`; the `adtlab-grades` command |

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Using the library

```python
from adtlab.vertex import Vertex
from adtlab.fifo import Queue
from adtlab.stack import Stack
from adtlab.linkedlist import CircularList
from adtlab.elements import compare_values

v = Vertex.from_string("id:1 tag:Madrid")
print(v)                      # [1, Madrid, 0, 0]

q = Queue()
q.push("a")
q.push("b")
q.pop()                       # "a"

s = Stack()
s.push(1)
s.push(2)
s.pop()                       # 2

lst = CircularList()
for x in (3.0, 1.0, 2.0):
    lst.push_in_order(x, compare_values, 1)
list(lst)                     # [1.0, 2.0, 3.0]
```

`Vertex.from_string` reads whitespace-separated `key:value` pairs with the keys
`id`, `tag` and `state`; other tokens and invalid values are ignored. Vertices
compare by id, then by tag (`Vertex.compare`).

Containers refuse `None` items with `ValueError`. Reading from an empty
container raises `QueueEmptyError`, `StackEmptyError` or `EmptyListError`
(all subclasses of `IndexError`); pushing onto a full queue raises
`QueueFullError`. Each container has a `format(formatter)` method that renders
its items as text using the given function.

`CharRing(capacity)` keeps one of its slots free, so it holds at most
`capacity - 1` characters; `push` on a full ring raises `OverflowError` and
`pop` on an empty one raises `IndexError`.

### Element helpers

`adtlab.elements` offers `parse_int` (whole 32-bit decimal integers),
`parse_float`, `parse_char` and `parse_str`, which raise `ValueError` on
malformed text; `format_int`, `format_char` and `format_float` (six decimals);
`compare_values`, a three-way comparison; `read_line`, which reads one line
and drops its line ending; and `read_collection`, which fills an empty
container with one converted element per line of a file and returns how many
it inserted.

### Graphs

A graph file starts with the number of vertices, then one vertex description
per line, then one `origin destination` pair per line:

```
4
id:1 tag:Madrid
id:2 tag:Toledo
id:3 tag:Avila
id:4 tag:Segovia
1 2
1 3
2 4
4 3
```

```python
from adtlab.graph import Graph

with open("city_graph.txt") as fh:
    g = Graph.from_stream(fh)

g.num_vertices, g.num_edges   # (4, 4)
g.connections_from_id(1)      # [2, 3]
g.depth_search(1, 3)          # list of vertices visited, in order
g.breadth_search(1, 3)
print(g.format())
```

Malformed input, unknown search endpoints and vertex ids outside
`0 .. 4095` raise `GraphError`. `Graph.vertex` and
`Graph.connections_from_tag` raise `KeyError` for an unknown id or tag.

## Command-line tools

Each command exits with status 0 on success and 1 on bad arguments, an
unreadable file or invalid input.

### adtlab-delivery

```
adtlab-delivery requests.txt
```

The file holds the delivery name and the product, then the number of stops,
then one vertex description per stop. Each stop is announced as it is added to
the plan; the plan is then printed and every stop is delivered to in order.

### adtlab-search

```
adtlab-search city_graph.txt 100 700
```

Reads a graph file and prints the vertices visited by a depth-first search and
then a breadth-first search from the origin id to the destination id.

### adtlab-grades

```
adtlab-grades grades.txt 1
adtlab-grades grades.txt -1
```

The file holds a count followed by that many numbers. They are loaded into a
circular list (alternating back and front insertion) and printed, then moved
one by one into a second list kept in ascending (`1`) or descending (`-1`)
order, and the sorted list is printed.

## Limits

- A `Queue` holds at most 92 items.
- A `Graph` holds at most 4096 vertices and lives only in memory; there is no
  way to write a graph back to a file.