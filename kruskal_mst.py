"""Kruskal's minimum spanning tree over a weighted undirected graph."""
import json
import math
import numbers
import os
from typing import Iterable, Iterator, List, NamedTuple, Optional, Set

from dsu import DisjointSetForest
from graph import Graph, GraphEdge
from metrics import Metrics
from mst_errors import InvalidGraphError, NullGraphError


class KruskalStep(NamedTuple):
    """One examined edge: whether it joined two components, and the state after."""
    index: int
    edge: GraphEdge
    accepted: bool
    components: int
    mst_size: int


def validate_graph(graph: Graph) -> None:
    """Reject graphs Kruskal (or Prim) cannot handle, before touching any state."""
    if graph is None:
        raise NullGraphError("graph is None")
    if graph.is_directed():
        raise InvalidGraphError("graph is directed")
    for edge in graph.get_edges():
        if edge.weight is not None and (isinstance(edge.weight, bool)
                                        or not isinstance(edge.weight, numbers.Real)):
            raise InvalidGraphError(f"{edge!r} has non-numeric weight {edge.weight!r}")
        if not edge.has_weight():
            raise InvalidGraphError(f"{edge!r} has no weight")
        if edge.weight < 0:
            raise InvalidGraphError(f"{edge!r} has negative weight {edge.weight}")


def total_weight(edges: Iterable[GraphEdge]) -> float:
    return math.fsum(edge.weight for edge in edges)


class KruskalMST:
    """Greedy Kruskal builder.

    Holds no state between calls: each computation uses its own
    DisjointSetForest unless the caller passes one in, in which case nodes
    already present in it are left as they are.
    """

    def compute_mst(self, graph: Graph, forest: Optional[DisjointSetForest] = None) -> Set[GraphEdge]:
        """Return the edges of a minimum spanning forest of ``graph``.

        With a fresh forest the result holds ``node_count - components``
        edges; for a connected graph that is a spanning tree. Nodes already
        merged in a caller-supplied forest count as connected, so only edges
        joining still-separate sets are returned: a second call with the same
        forest returns an empty set. Pass a fresh or cleared forest to
        recompute from scratch.
        """
        return {step.edge for step in self.iter_steps(graph, forest) if step.accepted}

    def iter_steps(self, graph: Graph, forest: Optional[DisjointSetForest] = None) -> Iterator[KruskalStep]:
        """Validate ``graph`` now, then lazily yield one KruskalStep per sorted edge."""
        validate_graph(graph)
        if forest is None:
            forest = DisjointSetForest()
        return self._steps(graph, forest)

    @staticmethod
    def _steps(graph: Graph, forest: DisjointSetForest) -> Iterator[KruskalStep]:
        for node in graph.get_nodes():
            if not forest.is_present(node):
                forest.make_set(node)
        components = forest.num_components()
        sorted_edges = sorted(graph.get_edges(), key=lambda e: e.weight)
        mst_size = 0
        for index, edge in enumerate(sorted_edges):
            u, v = edge.nodes
            accepted = forest.find_set(u) != forest.find_set(v)
            if accepted:
                forest.union(u, v)
                mst_size += 1
                components -= 1
            yield KruskalStep(index, edge, accepted, components, mst_size)


def run_kruskal(graph: Graph, out_dir: str):
    """Run Kruskal with metrics and write its results into ``out_dir``.

    Files: mst_kruskal.txt (edge list), metrics.txt, step_log.jsonl.
    """
    step_iter = KruskalMST().iter_steps(graph)
    os.makedirs(out_dir, exist_ok=True)
    print(f"[kruskal] Starting on {graph.node_count()} nodes, {graph.edge_count()} edges...", flush=True)

    metrics = Metrics()
    metrics.start()
    steps: List[KruskalStep] = []
    while True:
        metrics.start_step()
        step = next(step_iter, None)
        if step is None:
            break
        metrics.end_step(step.accepted)
        steps.append(step)
    metrics.stop()

    mst_edges = [step.edge for step in steps if step.accepted]
    total_w = total_weight(mst_edges)
    components = steps[-1].components if steps else graph.node_count()

    with open(os.path.join(out_dir, 'mst_kruskal.txt'), 'w') as f:
        f.write("KRUSKAL MINIMUM SPANNING TREE\n")
        f.write("=" * 45 + "\n")
        f.write("Edge List (Node -- Node: Weight)\n")
        f.write("-" * 45 + "\n")
        for edge in mst_edges:
            u, v = edge.nodes
            f.write(f"{u.label!s:>3} -- {v.label!s:>3}: {edge.weight:12.6f}\n")
        f.write("-" * 45 + "\n")
        f.write(f"Total MST Weight: {total_w:.6f}\n")
        f.write(f"Number of Edges: {len(mst_edges)}\n")
        f.write(f"Components: {components}\n")

    summary = metrics.summary()
    with open(os.path.join(out_dir, 'metrics.txt'), 'w') as f:
        f.write("KRUSKAL PERFORMANCE METRICS\n")
        f.write("=" * 40 + "\n")
        for k, v in summary.items():
            if k in ('total_time', 'avg_step_time') and v is not None:
                f.write(f"{k}: {float(v):.6f} seconds\n")
            else:
                f.write(f"{k}: {v}\n")

    with open(os.path.join(out_dir, 'step_log.jsonl'), 'w') as f:
        for step in steps:
            u, v = step.edge.nodes
            obj = {"step": step.index + 1, "u": u.label, "v": v.label, "weight": step.edge.weight,
                   "accepted": step.accepted, "components": step.components, "mst_size": step.mst_size}
            f.write(json.dumps(obj, default=str) + "\n")

    print(f"[kruskal] Complete: {len(mst_edges)} edges, weight {total_w:.6f}, components {components}")
    print(f"[kruskal] Results: {out_dir}")

    return {
        'mst_edges': set(mst_edges),
        'total_weight': total_w,
        'components': components,
        'metrics': summary,
        'steps': steps,
    }
