"""Construct the line graph of an undirected graph.

Every edge of the input becomes a node of the line graph, and two such nodes
are joined once for every endpoint their edges share. Node weights become
edge weights and edge weights become node weights.

Two edges that share both endpoints (parallel edges) are therefore joined by
two edges in the line graph, one per shared endpoint.
"""

import logging
from typing import Any, Iterable, Iterator, Protocol, Tuple

import numpy as np

from linegraph.ungraph import UnGraph

logger = logging.getLogger(__name__)


class UndirectedGraph(Protocol):
    """Read access the line graph construction needs from a container

    ``edges(n)`` may list a self-loop at n once or twice.
    """

    def node_references(self) -> Iterable[Tuple[int, Any]]: ...

    def edge_references(self) -> Iterator[Tuple[int, int, int, Any]]: ...

    def edges(self, n: int) -> Iterable[int]: ...

    def edge_count(self) -> int: ...


def line_graph(g: UndirectedGraph) -> UnGraph:
    """Line graph of g; node i of the result stands for edge i of g"""
    lg = UnGraph()
    vertex_of = {}
    for eid, _, _, weight in g.edge_references():
        vertex_of[eid] = lg.add_node(weight)

    for nid, weight in g.node_references():
        # an edge listed more than once at nid (a self-loop) still counts once
        incident = list(dict.fromkeys(g.edges(nid)))
        for s, e1 in enumerate(incident):
            for e2 in incident[s + 1 :]:
                lg.add_edge(vertex_of[e1], vertex_of[e2], weight)

    logger.debug(
        "line graph: %d edges in -> %d nodes, %d edges out",
        g.edge_count(),
        lg.node_count(),
        lg.edge_count(),
    )
    return lg


def line_graph_edges(edges):
    """Line graph of a plain edge list, in edge numbers

    Args:
        edges: iterable of (u, v) pairs over any hashable node labels

    Returns:
        (pairs, edge_to_id, numbered): the line graph as (i, j) pairs of edge
        numbers, the mapping from each input pair to its number, and the
        input edges indexed by number. Edges are numbered in input order;
        for repeated pairs edge_to_id keeps the first number, numbered keeps
        all of them.
    """
    edges = [tuple(e) for e in edges]
    g = UnGraph()
    node_id = {}
    for u, v in edges:
        for n in (u, v):
            if n not in node_id:
                node_id[n] = g.add_node(n)
        g.add_edge(node_id[u], node_id[v])

    lg = line_graph(g)
    pairs = [lg.edge_endpoints(e) for e in range(lg.edge_count())]
    edge_to_id = {}
    for i, e in enumerate(edges):
        edge_to_id.setdefault(e, i)
    return pairs, edge_to_id, edges


def normalize_digraph(A):
    """Divide every column of A by its sum; all-zero columns are left as is"""
    Dl = np.sum(A, 0)
    return A / np.where(Dl > 0, Dl, 1)


def line_graph_adjacency(g, self_loops=False, normalize=False):
    """Adjacency matrix of the line graph of g, shape (edge_count, edge_count)

    Entry (i, j) counts the endpoints edges i and j share. With
    ``self_loops`` the identity is added; with ``normalize`` every column is
    divided by its sum.
    """
    A = line_graph(g).adjacency_matrix().astype(float)
    if self_loops:
        A += np.eye(A.shape[0])
    if normalize:
        A = normalize_digraph(A)
    return A
