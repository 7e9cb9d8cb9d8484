# File: tests/test_graph.py
"""
Test the TrussGraph contract.

The graph defines member ORDER for the whole package (forces are reported
in that order), so insertion order is checked explicitly.
"""

import pytest

from michell.graph import TrussGraph


def test_empty_graph():
    g = TrussGraph(0)
    assert g.V == 0
    assert g.E == 0
    assert list(g.edges()) == []


def test_negative_vertex_count_rejected():
    with pytest.raises(ValueError):
        TrussGraph(-1)


def test_add_edge_counts_and_order():
    g = TrussGraph(4)
    g.add_edge(0, 3)
    g.add_edge(0, 1)
    g.add_edge(2, 0)

    assert g.E == 3
    assert list(g.adj(0)) == [3, 1]  # insertion order, not sorted
    assert list(g.adj(1)) == []
    assert list(g.edges()) == [(0, 3), (0, 1), (2, 0)]


@pytest.mark.parametrize("v, w", [(-1, 0), (0, -1), (3, 0), (0, 3)])
def test_add_edge_out_of_range(v, w):
    g = TrussGraph(3)
    with pytest.raises(IndexError):
        g.add_edge(v, w)
    assert g.E == 0


@pytest.mark.parametrize("v", [-1, 5])
def test_adj_out_of_range(v):
    g = TrussGraph(5)
    with pytest.raises(IndexError):
        g.adj(v)


def test_adj_is_restartable():
    """Each call to adj() starts again from the first successor."""
    g = TrussGraph(3)
    g.add_edge(0, 1)
    g.add_edge(0, 2)

    first = list(g.adj(0))
    second = list(g.adj(0))
    assert first == second == [1, 2]


def test_adj_result_can_be_walked_twice():
    g = TrussGraph(2)
    g.add_edge(0, 1)

    successors = g.adj(0)
    assert list(successors) == [1]
    assert list(successors) == [1]
    # later edges do not leak into an earlier result
    g.add_edge(0, 0)
    assert list(successors) == [1]
    assert g.adj(0) == (1, 0)


def test_duplicates_and_self_loops_allowed():
    g = TrussGraph(2)
    g.add_edge(0, 1)
    g.add_edge(0, 1)
    g.add_edge(1, 1)
    assert g.E == 3
    assert list(g.adj(0)) == [1, 1]
    assert list(g.adj(1)) == [1]


def test_string_dump():
    g = TrussGraph(3)
    g.add_edge(0, 2)
    g.add_edge(1, 2)
    text = str(g)
    assert text.startswith("3 vertices, 2 edges")
    assert "0: 2 " in text
    assert "1: 2 " in text
    assert "2: \n" in text
