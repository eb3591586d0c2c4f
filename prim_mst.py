"""Prim's minimum spanning tree, used to cross-check Kruskal."""
import heapq
from itertools import count
from typing import Dict, Optional, Set

from graph import Graph, GraphEdge, GraphNode
from kruskal_mst import validate_graph


class PrimMST:
    """Grows a minimum spanning tree from a source node with a binary heap.

    Without a source every component is grown in turn, giving a spanning
    forest just like Kruskal.
    """

    def compute_mst(self, graph: Graph, source=None) -> Set[GraphEdge]:
        previous = self._grow(graph, source)
        mst: Set[GraphEdge] = set()
        for node, parent in previous.items():
            if parent is not None:
                mst.add(graph.get_edge(parent, node))
        return mst

    def predecessors(self, graph: Graph, source) -> Dict[GraphNode, Optional[GraphNode]]:
        """Return ``node -> parent`` for the tree rooted at ``source`` (root maps to None)."""
        if source is None:
            raise TypeError("source node is None")
        return self._grow(graph, source)

    @staticmethod
    def _grow(graph: Graph, source) -> Dict[GraphNode, Optional[GraphNode]]:
        validate_graph(graph)
        if source is not None:
            start = graph.get_node(source)
            if start is None:
                raise ValueError(f"source {source!r} is not in the graph")
            roots = [start]
        else:
            roots = list(graph.get_nodes())

        previous: Dict[GraphNode, Optional[GraphNode]] = {}
        tiebreak = count()
        for root in roots:
            if root in previous:
                continue
            previous[root] = None
            heap = []
            for edge in graph.get_edges_of(root):
                heapq.heappush(heap, (edge.weight, next(tiebreak), root, edge.other(root)))
            while heap:
                _, _, parent, node = heapq.heappop(heap)
                if node in previous:
                    continue
                previous[node] = parent
                for edge in graph.get_edges_of(node):
                    neighbour = edge.other(node)
                    if neighbour not in previous:
                        heapq.heappush(heap, (edge.weight, next(tiebreak), node, neighbour))
        return previous
