import io

import pytest
from hypothesis import given
from hypothesis import strategies as st

from algokit.graphs import Graph, main, parse_graph


def tree_graph():
    graph = Graph(5)
    for a, b in [(0, 1), (0, 2), (1, 3), (2, 4)]:
        graph.add_edge(a, b)
    return graph


def test_bfs_order_on_tree():
    assert tree_graph().bfs() == [0, 1, 2, 3, 4]


def test_dfs_order_on_tree():
    assert tree_graph().dfs(0) == [0, 1, 3, 2, 4]


def test_edges_are_undirected():
    graph = Graph(3)
    graph.add_edge(0, 2)
    assert graph.neighbours(0) == (2,)
    assert graph.neighbours(2) == (0,)
    assert graph.neighbours(1) == ()


def test_bfs_covers_disconnected_components():
    graph = Graph(4)
    graph.add_edge(2, 3)
    order = graph.bfs()
    assert sorted(order) == list(range(4))
    assert order.index(2) + 1 == order.index(3)


def test_dfs_only_reaches_component_of_start():
    graph = Graph(4)
    graph.add_edge(0, 1)
    graph.add_edge(2, 3)
    assert sorted(graph.dfs(0)) == [0, 1]
    assert graph.dfs(3)[0] == 3


edge_lists = st.integers(1, 12).flatmap(
    lambda n: st.tuples(
        st.just(n),
        st.lists(st.tuples(st.integers(0, n - 1), st.integers(0, n - 1)), max_size=30),
    )
)


@given(edge_lists)
def test_bfs_visits_each_vertex_once(case):
    size, edges = case
    graph = Graph(size)
    for a, b in edges:
        graph.add_edge(a, b)
    assert sorted(graph.bfs()) == list(range(size))


@given(edge_lists)
def test_dfs_preorder_parent_invariant(case):
    size, edges = case
    graph = Graph(size)
    for a, b in edges:
        graph.add_edge(a, b)
    order = graph.dfs(0)
    assert order[0] == 0
    assert len(set(order)) == len(order)
    for position, vertex in enumerate(order[1:], start=1):
        assert any(p in graph.neighbours(vertex) for p in order[:position])


def test_add_edge_rejects_unknown_vertex():
    with pytest.raises(ValueError):
        Graph(2).add_edge(0, 2)


def test_dfs_rejects_unknown_start():
    with pytest.raises(ValueError):
        Graph(0).dfs(0)


def test_negative_size():
    with pytest.raises(ValueError):
        Graph(-1)


def test_parse_graph_round_trip():
    graph = parse_graph("5 4\n0 1\n0 2\n1 3\n2 4\n")
    assert graph.size == 5
    assert graph.bfs() == tree_graph().bfs()
    assert graph.dfs(0) == tree_graph().dfs(0)


@pytest.mark.parametrize("text", ["", "3", "3 2 0 1", "3 1 a b", "3 1 0 5"])
def test_parse_graph_rejects_bad_input(text):
    with pytest.raises(ValueError):
        parse_graph(text)


def test_main_bfs(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("5 4 0 1 0 2 1 3 2 4"))
    assert main([]) == 0
    printed = [int(t) for t in capsys.readouterr().out.split()]
    assert printed == tree_graph().bfs()


def test_main_dfs_with_start(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("5 4 0 1 0 2 1 3 2 4"))
    assert main(["dfs", "--start", "3"]) == 0
    printed = [int(t) for t in capsys.readouterr().out.split()]
    assert printed == tree_graph().dfs(3)


def test_main_bad_input_exits(monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("2 1 0"))
    with pytest.raises(SystemExit) as excinfo:
        main(["bfs"])
    assert excinfo.value.code == 2