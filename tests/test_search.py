import io

import pytest

from adtlab.graph import Graph, GraphError
from adtlab.search import main, run_searches

CITY_GRAPH = (
    "4\n"
    "id:1 tag:Madrid\n"
    "id:2 tag:Toledo\n"
    "id:3 tag:Avila\n"
    "id:4 tag:Segovia\n"
    "1 2\n"
    "1 3\n"
    "2 4\n"
    "4 3\n"
)


def _graph():
    return Graph.from_stream(io.StringIO(CITY_GRAPH))


def test_searches_start_at_origin_and_end_at_destination():
    out = io.StringIO()
    depth, breadth = run_searches(_graph(), 1, 4, out)
    for visited in (depth, breadth):
        assert visited[0].id == 1
        assert visited[-1].id == 4
        ids = [v.id for v in visited]
        assert len(ids) == len(set(ids))


def test_pinned_visit_orders():
    depth, breadth = run_searches(_graph(), 1, 3, io.StringIO())
    assert [v.id for v in depth] == [1, 3]
    assert [v.id for v in breadth] == [1, 2, 3]


def test_output_layout():
    out = io.StringIO()
    depth, breadth = run_searches(_graph(), 1, 3, out)
    text = out.getvalue()
    assert text.startswith("--------DFS--------\nInput:\nFrom Vertex id: 1\n")
    assert "To Vertex id: 3\nOutput\n" in text
    assert text.index("--------DFS--------") < text.index("--------BFS--------")
    bfs_part = text.split("--------BFS--------\n", 1)[1]
    assert bfs_part.endswith("".join(f"{v}\n" for v in breadth))


def test_unknown_vertex_raises():
    with pytest.raises(GraphError):
        run_searches(_graph(), 1, 9, io.StringIO())


def test_main_success(tmp_path, capsys):
    path = tmp_path / "city_graph.txt"
    path.write_text(CITY_GRAPH, encoding="utf-8")
    assert main([str(path), "1", "4"]) == 0
    output = capsys.readouterr().out
    assert "From Vertex id: 1" in output
    assert output.count("Output\n") == 2


def test_main_bad_destination(tmp_path):
    path = tmp_path / "city_graph.txt"
    path.write_text(CITY_GRAPH, encoding="utf-8")
    assert main([str(path), "1", "42"]) == 1


def test_main_too_few_arguments(capsys):
    assert main(["graph.txt"]) == 1
    assert "Format should be:" in capsys.readouterr().err


def test_main_bad_file(tmp_path):
    path = tmp_path / "broken.txt"
    path.write_text("0\n", encoding="utf-8")
    assert main([str(path), "1", "2"]) == 1