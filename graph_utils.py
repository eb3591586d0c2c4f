"""Graph loading, saving, generation and networkx conversion helpers."""
import random
from typing import List

import networkx as nx

from graph import Graph, GraphEdge, GraphNode


def load_graph(path: str) -> Graph:
    """Load an undirected weighted graph from a simple edge list file.

    Expected format:
    Line 1: num_nodes num_edges
    Remaining lines: u v w (edge between u and v with weight w)

    Nodes 0..num_nodes-1 are always created, so isolated nodes survive.
    """
    graph = Graph()
    with open(path, 'r') as fh:
        lines = fh.readlines()
    if not lines:
        return graph

    first_line = lines[0].strip().split()
    num_nodes = int(first_line[0])
    for i in range(num_nodes):
        graph.add_node(i)

    for line in lines[1:]:
        line = line.strip()
        if not line or line.startswith('#'):
            continue
        parts = line.split()
        if len(parts) < 3:
            continue
        u = int(parts[0])
        v = int(parts[1])
        w = float(parts[2])
        graph.add_node(u)
        graph.add_node(v)
        graph.add_weighted_edge(u, v, w)
    return graph


def save_graph_file(graph: Graph, filename: str):
    """Save graph to file in the format read by load_graph."""
    edges = sorted(graph.get_edges(), key=lambda e: (e.node1.label, e.node2.label))
    with open(filename, 'w') as f:
        f.write(f"{graph.node_count()} {len(edges)}\n")
        for edge in edges:
            f.write(f"{edge.node1.label} {edge.node2.label} {edge.weight}\n")


def to_networkx(graph: Graph) -> nx.Graph:
    G = nx.DiGraph() if graph.is_directed() else nx.Graph()
    G.add_nodes_from(node.label for node in graph.get_nodes())
    for edge in graph.get_edges():
        u, v = edge.nodes
        if edge.has_weight():
            G.add_edge(u.label, v.label, weight=edge.weight)
        else:
            G.add_edge(u.label, v.label)
    return G


def from_networkx(G: nx.Graph, weight: str = 'weight') -> Graph:
    """Build a Graph from a networkx graph; missing weights stay missing."""
    graph = Graph(directed=G.is_directed())
    for n in G.nodes():
        graph.add_node(n)
    for u, v, data in G.edges(data=True):
        graph.add_edge(GraphEdge(GraphNode(u), GraphNode(v), graph.is_directed(), data.get(weight)))
    return graph


def generate_graph(n: int, extra_edges: int = None, seed: int = 42, offset: int = 0) -> Graph:
    """Generate a connected random weighted graph with NetworkX.

    Args:
        n: Number of nodes
        extra_edges: Number of extra edges beyond the spanning tree (default: n//2)
        seed: Random seed for reproducibility
        offset: First node label; nodes are labelled offset..offset+n-1
    """
    rng = random.Random(seed)
    # Start with a random tree to ensure connectivity
    G = nx.random_labeled_tree(n, seed=seed) if n > 0 else nx.Graph()
    if extra_edges is None:
        extra_edges = max(0, n // 2)
    nodes = list(G.nodes())
    for _ in range(extra_edges if nodes else 0):
        u = rng.choice(nodes)
        v = rng.choice(nodes)
        if u == v or G.has_edge(u, v):
            continue
        G.add_edge(u, v)

    for (u, v) in G.edges():
        G[u][v]['weight'] = rng.uniform(1.0, 100.0)

    G = nx.relabel_nodes(G, {node: int(node) + offset for node in G.nodes()})
    print(f"[graph_utils] Generated CONNECTED graph: {n} nodes, {G.number_of_edges()} edges", flush=True)
    return from_networkx(G)


def generate_forest(component_sizes: List[int], seed: int = 42) -> Graph:
    """Generate a disconnected graph: one connected random component per size."""
    graph = Graph()
    offset = 0
    for i, size in enumerate(component_sizes):
        part = generate_graph(size, seed=seed + i, offset=offset)
        for node in part.get_nodes():
            graph.add_node(node)
        for edge in part.get_edges():
            graph.add_edge(edge)
        offset += size
    print(f"[graph_utils] Generated graph with {len(component_sizes)} components, "
          f"{graph.node_count()} nodes", flush=True)
    return graph
