import networkx as nx
import numpy as np


class UnGraph:
    """Undirected multigraph stored as dense node and edge arrays

    Nodes and edges are identified by integer handles handed out in insertion
    order. Parallel edges and self-loops are allowed.

    Args:
        nodes (list): node weights, node ``i`` carries ``nodes[i]``
        edges (list): ``(a, b, weight)`` triples, edge ``i`` is ``edges[i]``

    """

    def __init__(self, nodes=None, edges=None):
        self._nodes = []
        self._edges = []
        self._adj = []
        for weight in nodes or ():
            self.add_node(weight)
        for a, b, weight in edges or ():
            self.add_edge(a, b, weight)

    @classmethod
    def from_edges(cls, pairs):
        """Build from (a, b) or (a, b, weight) tuples, creating nodes as needed"""
        g = cls()
        for pair in pairs:
            a, b = pair[0], pair[1]
            weight = pair[2] if len(pair) > 2 else None
            while g.node_count() <= max(a, b):
                g.add_node()
            g.add_edge(a, b, weight)
        return g

    @classmethod
    def from_networkx(cls, G):
        """Copy a networkx graph; nodes are renumbered in G's node order"""
        g = cls()
        index = {}
        for node, data in G.nodes(data=True):
            index[node] = g.add_node(data.get("weight"))
        for u, v, data in G.edges(data=True):
            g.add_edge(index[u], index[v], data.get("weight"))
        return g

    def __repr__(self):
        return f"UnGraph(nodes={self.node_count()}, edges={self.edge_count()})"

    def add_node(self, weight=None):
        nid = len(self._nodes)
        self._nodes.append(weight)
        self._adj.append([])
        return nid

    def add_edge(self, a, b, weight=None):
        for n in (a, b):
            if not 0 <= n < len(self._nodes):
                raise IndexError(f"node {n} does not exist")
        eid = len(self._edges)
        self._edges.append((a, b, weight))
        self._adj[a].append(eid)
        # a self-loop is listed once at its node
        if b != a:
            self._adj[b].append(eid)
        return eid

    def node_count(self):
        return len(self._nodes)

    def edge_count(self):
        return len(self._edges)

    def node_weight(self, n):
        return self._nodes[n]

    def edge_weight(self, e):
        return self._edges[e][2]

    def edge_endpoints(self, e):
        a, b, _ = self._edges[e]
        return a, b

    def degree(self, n):
        return len(self._adj[n])

    def edges(self, n):
        """Incident edge handles of node n, in insertion order"""
        return list(self._adj[n])

    def node_references(self):
        return enumerate(self._nodes)

    def edge_references(self):
        for eid, (a, b, weight) in enumerate(self._edges):
            yield eid, a, b, weight

    def adjacency_matrix(self):
        """Edge multiplicity between node pairs; a self-loop counts once"""
        A = np.zeros((self.node_count(), self.node_count()), dtype=np.int64)
        for a, b, _ in self._edges:
            A[a, b] += 1
            if a != b:
                A[b, a] += 1
        return A

    def to_networkx(self):
        G = nx.MultiGraph()
        for nid, weight in self.node_references():
            G.add_node(nid, weight=weight)
        for eid, a, b, weight in self.edge_references():
            G.add_edge(a, b, key=eid, weight=weight)
        return G


def is_isomorphic(g1, g2):
    """Structural isomorphism, counting parallel edges and self-loops"""
    return nx.is_isomorphic(g1.to_networkx(), g2.to_networkx())
