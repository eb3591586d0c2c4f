#!/usr/bin/env python3
"""Validate MSTs: check the spanning-forest shape and compare against reference weights."""
import argparse
import math
import sys
from itertools import combinations
from typing import Iterable

import networkx as nx

from dsu import DisjointSetForest
from graph import Graph, GraphEdge
from graph_utils import load_graph, to_networkx
from kruskal_mst import KruskalMST, total_weight
from mst_errors import MSTError
from prim_mst import PrimMST

# Edge subsets grow combinatorially; keep brute force for toy graphs.
BRUTE_FORCE_MAX_EDGES = 16
TOLERANCE = 1e-6


def count_components(graph: Graph) -> int:
    if graph.node_count() == 0:
        return 0
    return nx.number_connected_components(to_networkx(graph))


def is_spanning_forest(graph: Graph, edges: Iterable[GraphEdge]) -> bool:
    """True when ``edges`` are graph edges, acyclic, and connect every component."""
    edges = list(edges)
    graph_edges = graph.get_edges()
    if any(edge not in graph_edges for edge in edges):
        return False
    if len(edges) != graph.node_count() - count_components(graph):
        return False
    ds = DisjointSetForest()
    for node in graph.get_nodes():
        ds.make_set(node)
    # n - c merges with no cycle means the same partition as the graph itself
    return all(ds.union(*edge.nodes) for edge in edges)


def reference_mst_weight(graph: Graph) -> float:
    """MST (spanning forest) weight computed by networkx as ground truth."""
    G = to_networkx(graph)
    optimal = nx.minimum_spanning_tree(G, algorithm='kruskal')
    return math.fsum(data['weight'] for _, _, data in optimal.edges(data=True))


def brute_force_mst_weight(graph: Graph) -> float:
    """Try every (n - c)-edge subset and keep the lightest acyclic one."""
    edges = list(graph.get_edges())
    if len(edges) > BRUTE_FORCE_MAX_EDGES:
        raise ValueError(f"brute force limited to {BRUTE_FORCE_MAX_EDGES} edges, got {len(edges)}")
    k = graph.node_count() - count_components(graph)
    best = math.inf
    for subset in combinations(edges, k):
        ds = DisjointSetForest()
        for node in graph.get_nodes():
            ds.make_set(node)
        if all(ds.union(*edge.nodes) for edge in subset):
            best = min(best, total_weight(subset))
    return 0.0 if k == 0 else best


def verify_mst(graph: Graph, edges: Iterable[GraphEdge]):
    """Compare an MST edge set with the networkx optimum."""
    edges = list(edges)
    optimal_weight = reference_mst_weight(graph)
    mst_weight = total_weight(edges)
    return {
        'optimal_weight': optimal_weight,
        'mst_weight': mst_weight,
        'num_edges': len(edges),
        'expected_edges': graph.node_count() - count_components(graph),
        'is_forest': is_spanning_forest(graph, edges),
        'is_optimal': abs(mst_weight - optimal_weight) < TOLERANCE,
    }


def main(argv=None):
    p = argparse.ArgumentParser(description="Validate Kruskal and Prim MSTs on a graph file")
    p.add_argument("graph_file", help="edge list file: 'num_nodes num_edges' header, then 'u v w' lines")
    args = p.parse_args(argv)

    graph = load_graph(args.graph_file)
    try:
        kruskal = verify_mst(graph, KruskalMST().compute_mst(graph))
        prim = verify_mst(graph, PrimMST().compute_mst(graph))
    except MSTError as e:
        print(f"[validate] ERROR: {e}")
        return 1

    print(f"Graph: {args.graph_file} nodes={graph.node_count()} edges={graph.edge_count()}")
    print(f"Optimal (networkx): weight={kruskal['optimal_weight']:.6f} edges={kruskal['expected_edges']}")
    print(f"Kruskal: weight={kruskal['mst_weight']:.6f} edges={kruskal['num_edges']}")
    print(f"Prim: weight={prim['mst_weight']:.6f} edges={prim['num_edges']}")

    ok = True
    for name, result in (("Kruskal", kruskal), ("Prim", prim)):
        if result['is_forest'] and result['is_optimal']:
            print(f"{name} matches optimal MST.")
        else:
            print(f"{name} DOES NOT match optimal MST.")
            ok = False
    return 0 if ok else 1


if __name__ == '__main__':
    sys.exit(main())
