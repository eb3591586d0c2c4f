#!/usr/bin/env python3
"""Main orchestrator: load or generate a graph, run Kruskal, cross-check with Prim, verify and plot."""
import argparse
import os
import sys
import time

from graph_utils import generate_graph, load_graph, save_graph_file
from kruskal_mst import run_kruskal, total_weight
from mst_errors import MSTError
from prim_mst import PrimMST
from validate_mst import verify_mst
from visualization import build_gif, save_animation, save_growth_chart, save_mst_plot


def write_summary(summary_file: str, verification, prim_weight: float, metrics):
    """Write verification and performance summary."""
    with open(summary_file, 'w') as f:
        f.write("Kruskal MST Summary\n")
        f.write("=" * 50 + "\n\n")

        f.write("MST VERIFICATION\n")
        f.write("-" * 20 + "\n")
        f.write(f"Optimal MST Weight (networkx): {verification['optimal_weight']:.6f}\n")
        f.write(f"Kruskal Weight: {verification['mst_weight']:.6f}\n")
        f.write(f"Prim Weight: {prim_weight:.6f}\n")
        f.write(f"Spanning Forest: {'YES' if verification['is_forest'] else 'NO'}\n")
        f.write(f"Kruskal: {'OPTIMAL' if verification['is_optimal'] else 'SUBOPTIMAL'}\n")
        f.write(f"MST Edges: {verification['num_edges']} (expected {verification['expected_edges']})\n\n")

        f.write("PERFORMANCE METRICS\n")
        f.write("-" * 20 + "\n")
        total = metrics.get('total_time')
        f.write(f"Kruskal total_time: {float(total) if total is not None else 0.0:.6f} seconds\n")
        f.write(f"Edges examined: {metrics['edges_examined']}\n")
        f.write(f"Edges accepted: {metrics['edges_accepted']}\n")
        f.write(f"Edges rejected: {metrics['edges_rejected']}\n")
    print(f"Summary written: {summary_file}")


def main(argv=None):
    p = argparse.ArgumentParser(description="Kruskal MST with disjoint-set forest")
    p.add_argument("--graph", help="Edge list file to load instead of generating a graph")
    p.add_argument("--nodes", type=int, default=40, help="Number of nodes for a generated graph")
    p.add_argument("--extra-edges", type=int, default=None, help="Extra edges beyond the random tree")
    p.add_argument("--seed", type=int, default=42, help="Random seed")
    p.add_argument("--out", default="results", help="Parent directory for results")
    p.add_argument("--animate", action="store_true", help="Generate step animation and growth chart")
    p.add_argument("--no-plot", action="store_true", help="Skip the MST plot")
    args = p.parse_args(argv)

    print("=" * 60)
    print("MST ANALYSIS: Kruskal with disjoint-set forest")
    print("=" * 60)

    if args.graph:
        print(f"Loading graph: {args.graph}")
        graph = load_graph(args.graph)
    else:
        print(f"Generating graph: {args.nodes} nodes, seed {args.seed}")
        graph = generate_graph(args.nodes, extra_edges=args.extra_edges, seed=args.seed)

    timestamp = time.strftime('%Y%m%d-%H%M%S')
    results_dir = os.path.join(args.out, timestamp)
    os.makedirs(results_dir, exist_ok=True)
    graph_file = os.path.join(results_dir, f"graph_n{graph.node_count()}_s{args.seed}.txt")
    save_graph_file(graph, graph_file)
    print(f"Graph saved: {graph_file}")

    kruskal_dir = os.path.join(results_dir, 'kruskal')
    try:
        result = run_kruskal(graph, kruskal_dir)
        prim_edges = PrimMST().compute_mst(graph)
    except MSTError as e:
        print(f"[main] ERROR: {e}")
        return 1

    print("\nVerifying MST correctness...")
    verification = verify_mst(graph, result['mst_edges'])
    write_summary(os.path.join(results_dir, 'summary.txt'), verification,
                  total_weight(prim_edges), result['metrics'])

    if not args.no_plot:
        try:
            save_mst_plot(graph, result['mst_edges'], os.path.join(kruskal_dir, 'mst_visualization.png'))
        except (OSError, ValueError) as e:
            print(f"[main] Warning: Could not save MST plot: {e}")

    if args.animate:
        print("\nGenerating visualizations...")
        try:
            chart_path = save_growth_chart(result['steps'], kruskal_dir)
            if chart_path:
                print(f"   Growth chart saved: {chart_path}")
            frames = save_animation(graph, result['steps'], os.path.join(kruskal_dir, 'frames'))
            if frames:
                gif_path = build_gif(frames, os.path.join(kruskal_dir, 'mst_animation.gif'), duration=0.5)
                print(f"   Animation saved: {gif_path}")
            else:
                print("   No animation frames produced")
        except (OSError, ValueError) as e:
            print(f"[main] Warning: Animation failed: {e}")

    ok = verification['is_forest'] and verification['is_optimal']
    print("\n" + "=" * 60)
    print("ANALYSIS COMPLETE" if ok else "ANALYSIS FAILED: MST is not optimal")
    print("=" * 60)
    print(f"Results directory: {results_dir}")
    return 0 if ok else 1


if __name__ == "__main__":
    sys.exit(main())
