import networkx as nx
import numpy as np
import pytest

from linegraph.ungraph import UnGraph, is_isomorphic


def test_handles_are_dense_and_ordered():
    g = UnGraph()
    assert [g.add_node(w) for w in "abc"] == [0, 1, 2]
    assert g.add_edge(0, 1, 10) == 0
    assert g.add_edge(1, 2, 20) == 1
    assert g.node_weight(2) == "c"
    assert g.edge_weight(1) == 20
    assert g.edge_endpoints(1) == (1, 2)
    assert list(g.node_references()) == [(0, "a"), (1, "b"), (2, "c")]
    assert list(g.edge_references()) == [(0, 0, 1, 10), (1, 1, 2, 20)]


def test_add_edge_to_missing_node_raises():
    g = UnGraph(nodes=[None])
    with pytest.raises(IndexError):
        g.add_edge(0, 1)
    assert g.edge_count() == 0


def test_from_edges_creates_nodes():
    g = UnGraph.from_edges([(0, 3), (1, 2, "w")])
    assert g.node_count() == 4
    assert g.node_weight(3) is None
    assert g.edge_weight(0) is None
    assert g.edge_weight(1) == "w"


def test_incidence_lists_keep_insertion_order():
    g = UnGraph.from_edges([(0, 1), (2, 0), (0, 1), (0, 0)])
    assert g.edges(0) == [0, 1, 2, 3]
    assert g.edges(1) == [0, 2]
    # self-loop is listed once
    assert g.degree(0) == 4


def test_adjacency_matrix_counts_multiplicity():
    g = UnGraph.from_edges([(0, 1), (0, 1), (1, 1)])
    np.testing.assert_array_equal(g.adjacency_matrix(), [[0, 2], [2, 1]])


def test_networkx_round_trip_keeps_parallel_edges():
    g = UnGraph(nodes=["x", "y"], edges=[(0, 1, 1.5), (0, 1, 2.5), (1, 1, 0.0)])
    G = g.to_networkx()
    assert isinstance(G, nx.MultiGraph)
    assert G.number_of_edges(0, 1) == 2
    assert G.nodes[0]["weight"] == "x"

    back = UnGraph.from_networkx(G)
    assert back.node_count() == 2
    assert sorted(w for *_, w in back.edge_references()) == [0.0, 1.5, 2.5]


def test_from_networkx_relabels_nodes():
    G = nx.Graph()
    G.add_edge("a", "b", weight=3)
    G.add_edge("b", "c")
    g = UnGraph.from_networkx(G)
    assert g.node_count() == 3
    assert list(g.edge_references()) == [(0, 0, 1, 3), (1, 1, 2, None)]


def test_is_isomorphic_sees_multiplicity():
    single = UnGraph.from_edges([(0, 1)])
    double = UnGraph.from_edges([(0, 1), (1, 0)])
    assert is_isomorphic(double, UnGraph.from_edges([(1, 0), (0, 1)]))
    assert not is_isomorphic(single, double)
