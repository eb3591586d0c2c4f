#!/usr/bin/env python3
"""
Benchmark Runner for Kruskal MST performance

Times KruskalMST.compute_mst on generated graphs of increasing size and
plots time vs input size.
"""

import argparse
import json
import os
import time

import matplotlib as mpl

mpl.use('Agg')
import matplotlib.pyplot as plt  # noqa: E402

from graph_utils import generate_graph  # noqa: E402
from kruskal_mst import KruskalMST  # noqa: E402

# Configuration
NODES_TESTS = [50, 100, 200, 500, 1000, 2000]  # Sizes to test for Time vs N
EXTRA_EDGE_FACTOR = 4                          # Extra edges per node beyond the tree
REPEATS = 3
RESULTS_FILE = "benchmark_results.json"
SEED = 42                                      # Fixed seed for reproducibility


def run_experiment(nodes: int, repeats: int = REPEATS, seed: int = SEED):
    """Time one graph size; report the best of ``repeats`` runs."""
    print(f"  Running N={nodes}...", flush=True)
    graph = generate_graph(nodes, extra_edges=nodes * EXTRA_EDGE_FACTOR, seed=seed)
    builder = KruskalMST()
    timings = []
    for _ in range(repeats):
        start = time.perf_counter()
        mst = builder.compute_mst(graph)
        timings.append(time.perf_counter() - start)
    return {
        'nodes': nodes,
        'edges': graph.edge_count(),
        'mst_edges': len(mst),
        'best_time': min(timings),
        'mean_time': sum(timings) / len(timings),
    }


def plot_results(results, out_dir: str) -> str:
    ns = [r['nodes'] for r in results]
    fig, ax = plt.subplots(figsize=(6, 4))
    ax.plot(ns, [r['best_time'] for r in results], marker='o', label='best')
    ax.plot(ns, [r['mean_time'] for r in results], marker='x', linestyle='--', label='mean')
    ax.set_xlabel('Number of nodes')
    ax.set_ylabel('Time (seconds)')
    ax.set_title('Kruskal MST: Time vs Input Size')
    ax.legend()
    path = os.path.join(out_dir, 'time_vs_n.png')
    fig.tight_layout()
    fig.savefig(path, dpi=150)
    plt.close(fig)
    return path


def main(argv=None):
    p = argparse.ArgumentParser(description="Benchmark Kruskal MST")
    p.add_argument("--sizes", type=int, nargs='+', default=NODES_TESTS, help="Node counts to test")
    p.add_argument("--repeats", type=int, default=REPEATS, help="Runs per size")
    p.add_argument("--seed", type=int, default=SEED, help="Random seed")
    p.add_argument("--out", default="benchmarks", help="Output directory")
    args = p.parse_args(argv)

    os.makedirs(args.out, exist_ok=True)
    print("[benchmark] Time vs N")
    results = [run_experiment(n, args.repeats, args.seed) for n in args.sizes]

    results_path = os.path.join(args.out, RESULTS_FILE)
    with open(results_path, 'w') as f:
        json.dump(results, f, indent=2)
    chart = plot_results(results, args.out)
    print(f"[benchmark] Results: {results_path}")
    print(f"[benchmark] Chart: {chart}")
    return results


if __name__ == "__main__":
    main()
