"""Labelled weighted graph model consumed by the MST builders."""
import math
from functools import total_ordering
from typing import Dict, Hashable, Optional, Set


@total_ordering
class GraphNode:
    """A graph node identified by its label: equal labels, same node."""

    __slots__ = ("label",)

    def __init__(self, label: Hashable):
        if label is None:
            raise TypeError("node label is None")
        self.label = label

    def __eq__(self, other):
        if not isinstance(other, GraphNode):
            return NotImplemented
        return self.label == other.label

    def __lt__(self, other):
        if not isinstance(other, GraphNode):
            return NotImplemented
        return self.label < other.label

    def __hash__(self):
        return hash(self.label)

    def __repr__(self):
        return f"GraphNode({self.label!r})"


class GraphEdge:
    """Edge between two nodes, with an optional real weight.

    Undirected edges compare equal in both orientations. The weight is not
    part of equality or hashing.
    """

    def __init__(self, node1: GraphNode, node2: GraphNode, directed: bool = False,
                 weight: Optional[float] = None):
        if node1 is None or node2 is None:
            raise TypeError("edge endpoint is None")
        self.node1 = node1
        self.node2 = node2
        self.directed = directed
        self.weight = weight

    def has_weight(self) -> bool:
        return self.weight is not None and not math.isnan(self.weight)

    def is_directed(self) -> bool:
        return self.directed

    @property
    def nodes(self) -> tuple:
        return self.node1, self.node2

    def other(self, node: GraphNode) -> GraphNode:
        if node == self.node1:
            return self.node2
        if node == self.node2:
            return self.node1
        raise ValueError(f"{node!r} is not an endpoint of {self!r}")

    def __eq__(self, other):
        if not isinstance(other, GraphEdge):
            return NotImplemented
        if self.directed != other.directed:
            return False
        if self.node1 == other.node1 and self.node2 == other.node2:
            return True
        return not self.directed and self.node1 == other.node2 and self.node2 == other.node1

    def __hash__(self):
        if self.directed:
            return hash((True, self.node1, self.node2))
        return hash((False, frozenset((self.node1, self.node2))))

    def __repr__(self):
        arrow = "-->" if self.directed else "--"
        if self.has_weight():
            return f"GraphEdge({self.node1.label!r} {arrow} {self.node2.label!r}, w={self.weight:g})"
        return f"GraphEdge({self.node1.label!r} {arrow} {self.node2.label!r})"


class Graph:
    """Graph stored as an adjacency map ``node -> {neighbour -> edge}``.

    Undirected edges are registered under both endpoints. Nodes can be
    passed either as GraphNode instances or as raw labels.
    """

    def __init__(self, directed: bool = False):
        self.directed = directed
        self.adjacency: Dict[GraphNode, Dict[GraphNode, GraphEdge]] = {}

    def _as_node(self, node_or_label) -> GraphNode:
        if node_or_label is None:
            raise TypeError("node is None")
        if isinstance(node_or_label, GraphNode):
            return node_or_label
        return GraphNode(node_or_label)

    def is_directed(self) -> bool:
        return self.directed

    def node_count(self) -> int:
        return len(self.adjacency)

    def edge_count(self) -> int:
        return len(self.get_edges())

    def add_node(self, node_or_label) -> bool:
        node = self._as_node(node_or_label)
        if node in self.adjacency:
            return False
        self.adjacency[node] = {}
        return True

    def contains_node(self, node_or_label) -> bool:
        return self._as_node(node_or_label) in self.adjacency

    def get_node(self, node_or_label) -> Optional[GraphNode]:
        node = self._as_node(node_or_label)
        return node if node in self.adjacency else None

    def get_nodes(self) -> Set[GraphNode]:
        return set(self.adjacency)

    def add_edge(self, edge: GraphEdge) -> bool:
        if edge is None:
            raise TypeError("edge is None")
        if edge.is_directed() != self.directed:
            raise ValueError("edge directedness does not match the graph")
        if edge.node1 not in self.adjacency or edge.node2 not in self.adjacency:
            raise ValueError(f"endpoint of {edge!r} is not in the graph")
        existing = self.adjacency[edge.node1].get(edge.node2)
        if existing is not None and existing == edge:
            return False
        self.adjacency[edge.node1][edge.node2] = edge
        if not self.directed:
            self.adjacency[edge.node2][edge.node1] = edge
        return True

    def add_weighted_edge(self, first, second, weight: float) -> bool:
        edge = GraphEdge(self._as_node(first), self._as_node(second), self.directed, weight)
        return self.add_edge(edge)

    def get_edge(self, first, second) -> Optional[GraphEdge]:
        node1 = self._as_node(first)
        node2 = self._as_node(second)
        if node1 not in self.adjacency or node2 not in self.adjacency:
            raise ValueError("node is not in the graph")
        return self.adjacency[node1].get(node2)

    def get_edges(self) -> Set[GraphEdge]:
        edges: Set[GraphEdge] = set()
        for neighbours in self.adjacency.values():
            edges.update(neighbours.values())
        return edges

    def get_adjacent_nodes(self, node_or_label) -> Set[GraphNode]:
        node = self._as_node(node_or_label)
        if node not in self.adjacency:
            raise ValueError(f"{node!r} is not in the graph")
        return set(self.adjacency[node])

    def get_edges_of(self, node_or_label) -> Set[GraphEdge]:
        node = self._as_node(node_or_label)
        if node not in self.adjacency:
            raise ValueError(f"{node!r} is not in the graph")
        return set(self.adjacency[node].values())

    def is_weighted(self) -> bool:
        return all(edge.has_weight() for edge in self.get_edges())

    def clear(self) -> None:
        self.adjacency.clear()

    def __repr__(self):
        kind = "directed" if self.directed else "undirected"
        return f"Graph({kind}, nodes={self.node_count()}, edges={self.edge_count()})"
