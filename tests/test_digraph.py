from __future__ import annotations

import networkx as nx
import pytest

from socnet.exceptions import InvalidVertexError
from socnet.graph import DirectedGraph


def make_graph():
    graph = DirectedGraph()
    for vertex in (0, 1, 2):
        graph.add_vertex(vertex)
    graph.add_edge(0, 1)
    graph.add_edge(0, 2)
    graph.add_edge(1, 2)
    return graph


@pytest.mark.unit
def test_counts():
    graph = make_graph()
    assert graph.vertex_count() == 3
    assert graph.edge_count() == 3


@pytest.mark.unit
def test_add_vertex_is_idempotent():
    graph = make_graph()
    graph.add_vertex(1)
    assert graph.vertex_count() == 3
    assert graph.adjacent(1) == {2}


@pytest.mark.unit
def test_duplicate_edge_is_ignored():
    graph = make_graph()
    graph.add_edge(0, 1)
    assert graph.edge_count() == 3
    assert graph.adjacent(0) == {1, 2}


@pytest.mark.unit
def test_edge_direction_matters():
    graph = make_graph()
    assert graph.has_edge(0, 1)
    assert not graph.has_edge(1, 0)
    assert graph.adjacent(2) == frozenset()


@pytest.mark.unit
def test_adjacent_of_unknown_vertex_is_empty():
    assert make_graph().adjacent(99) == frozenset()
    assert make_graph().out_degree(99) == 0


@pytest.mark.unit
@pytest.mark.parametrize("source,target", [(0, 5), (5, 0), (5, 6)])
def test_edge_with_unregistered_endpoint_raises(source, target):
    graph = make_graph()
    with pytest.raises(InvalidVertexError):
        graph.add_edge(source, target)
    assert graph.edge_count() == 3
    assert graph.vertex_count() == 3


@pytest.mark.unit
def test_to_networkx_returns_a_copy():
    graph = make_graph()
    nx_graph = graph.to_networkx()
    nx_graph.add_edge(2, 0)
    assert not graph.has_edge(2, 0)
    assert set(nx_graph.successors(0)) == {1, 2}


@pytest.mark.unit
def test_view_is_live_and_read_only():
    graph = make_graph()
    view = graph.view
    graph.add_vertex(3)
    graph.add_edge(2, 3)
    assert view.has_edge(2, 3)
    with pytest.raises(nx.NetworkXError):
        view.add_edge(3, 0)
    assert not graph.has_edge(3, 0)
