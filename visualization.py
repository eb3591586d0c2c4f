"""Matplotlib visualization and animation of the Kruskal MST building process."""
import os
from typing import Dict, Iterable, List, Optional, Sequence

import imageio.v2 as imageio
import matplotlib as mpl
import networkx as nx

mpl.use('Agg')
import matplotlib.pyplot as plt  # noqa: E402

from graph import Graph, GraphEdge  # noqa: E402
from graph_utils import to_networkx  # noqa: E402
from kruskal_mst import KruskalStep, total_weight  # noqa: E402

MAX_PLOT_NODES = 50


def _layout(G: nx.Graph, seed: int = 42) -> Dict:
    n = max(G.number_of_nodes(), 1)
    return nx.spring_layout(G, seed=seed, k=1/n**0.5, iterations=50)


def _edge_list(edges: Iterable[GraphEdge]):
    return [(e.node1.label, e.node2.label) for e in edges]


def save_mst_plot(graph: Graph, mst_edges: Iterable[GraphEdge], output_path: str,
                  title: str = 'Kruskal') -> Optional[str]:
    """Save the input graph next to its MST. Returns None when the graph is too large."""
    if graph.node_count() > MAX_PLOT_NODES:
        print(f"[visualization] Skipping MST plot (n={graph.node_count()} > {MAX_PLOT_NODES} nodes)")
        return None
    mst_edges = list(mst_edges)
    G = to_networkx(graph)
    pos = _layout(G)

    fig, (ax1, ax2) = plt.subplots(1, 2, figsize=(20, 9))

    # LEFT PLOT: original graph with all edges
    ax1.set_title(f'Original Graph\n{graph.node_count()} nodes, {graph.edge_count()} edges',
                  fontsize=14, fontweight='bold', pad=15)
    nx.draw_networkx_nodes(G, pos, node_color='lightblue', node_size=500, alpha=0.9,
                           linewidths=2, edgecolors='darkblue', ax=ax1)
    nx.draw_networkx_edges(G, pos, alpha=0.3, width=1.5, edge_color='gray', ax=ax1)
    nx.draw_networkx_labels(G, pos, font_size=9, font_weight='bold', ax=ax1)
    ax1.axis('off')

    # RIGHT PLOT: MST only
    ax2.set_title(f'Minimum Spanning Tree\n{len(mst_edges)} edges, weight = {total_weight(mst_edges):.2f}',
                  fontsize=14, fontweight='bold', pad=15)
    nx.draw_networkx_nodes(G, pos, node_color='lightgreen', node_size=500, alpha=0.9,
                           linewidths=2, edgecolors='darkgreen', ax=ax2)
    nx.draw_networkx_edges(G, pos, edgelist=_edge_list(mst_edges), edge_color='red',
                           width=3, alpha=0.8, ax=ax2)
    nx.draw_networkx_labels(G, pos, font_size=9, font_weight='bold', ax=ax2)
    mst_edge_labels = {(e.node1.label, e.node2.label): f'{e.weight:.1f}' for e in mst_edges}
    nx.draw_networkx_edge_labels(G, pos, mst_edge_labels, font_size=7,
                                 bbox=dict(boxstyle='round,pad=0.2', facecolor='yellow', alpha=0.7), ax=ax2)
    ax2.axis('off')

    plt.suptitle(f'{title} MST', fontsize=16, fontweight='bold', y=0.98)
    plt.tight_layout()
    plt.savefig(output_path, dpi=150, bbox_inches='tight', facecolor='white', edgecolor='none')
    plt.close(fig)
    print(f"[visualization] MST plot saved to: {output_path}")
    return output_path


def save_animation(graph: Graph, steps: Sequence[KruskalStep], out_dir: str,
                   title: str = 'Kruskal', max_frames: int = 60) -> List[str]:
    """Save one PNG per accepted edge (sampled down to max_frames) and return their paths."""
    if graph.node_count() > MAX_PLOT_NODES:
        print(f"[visualization] Skipping animation (n={graph.node_count()} > {MAX_PLOT_NODES} nodes)")
        return []
    os.makedirs(out_dir, exist_ok=True)
    G = to_networkx(graph)
    pos = _layout(G)

    accepted = [step for step in steps if step.accepted]
    indices = list(range(len(accepted)))
    if max_frames and 0 < max_frames < len(accepted):
        stride = (len(accepted) - 1) / (max_frames - 1) if max_frames > 1 else len(accepted)
        indices = sorted({round(k * stride) for k in range(max_frames)})

    fig, ax = plt.subplots(figsize=(6, 6))
    frame_paths = []
    for frame_no, idx in enumerate(indices, 1):
        step = accepted[idx]
        so_far = [s.edge for s in accepted[:idx + 1]]
        ax.clear()
        ax.set_title(f"{title} (edge {step.index + 1})")
        ax.set_axis_off()
        nx.draw_networkx_edges(G, pos, alpha=0.3, width=0.5, edge_color='lightgray', ax=ax)
        if len(so_far) > 1:
            nx.draw_networkx_edges(G, pos, edgelist=_edge_list(so_far[:-1]), edge_color='tab:blue',
                                   width=1.5, ax=ax)
        nx.draw_networkx_edges(G, pos, edgelist=_edge_list([step.edge]), edge_color='red',
                               width=3.0, ax=ax)
        nx.draw_networkx_nodes(G, pos, node_size=60, node_color='black', ax=ax)
        ax.text(0.02, 0.98,
                f"MST edges {step.mst_size}\ncomponents {step.components}\n"
                f"weight {total_weight(so_far):.2f}",
                transform=ax.transAxes, va='top', ha='left', fontsize=7,
                bbox=dict(boxstyle='round', fc='white', alpha=0.75))
        frame_path = os.path.join(out_dir, f"frame_{frame_no:03d}.png")
        fig.savefig(frame_path, dpi=120, bbox_inches='tight')
        frame_paths.append(frame_path)
    plt.close(fig)
    return frame_paths


def build_gif(frame_paths: List[str], gif_path: str, duration: float = 0.6):
    """Build a GIF from saved frame image paths."""
    images = [imageio.imread(p) for p in frame_paths]
    if images:
        fps = 1.0 / duration if duration > 0 else 1.0
        imageio.mimsave(gif_path, images, fps=fps, loop=0)
    return gif_path


def save_growth_chart(steps: Sequence[KruskalStep], out_dir: str) -> Optional[str]:
    """Save a curve of MST edge accumulation and component count decay per examined edge."""
    if not steps:
        return None
    xs = [step.index + 1 for step in steps]
    fig, ax1 = plt.subplots(figsize=(6, 4))
    ax1.plot(xs, [step.mst_size for step in steps], color='#1f77b4', label='MST edges')
    ax1.set_xlabel('Edges examined')
    ax1.set_ylabel('MST edge count', color='#1f77b4')
    ax1.tick_params(axis='y', labelcolor='#1f77b4')
    ax2 = ax1.twinx()
    ax2.plot(xs, [step.components for step in steps], color='#d62728', label='Components')
    ax2.set_ylabel('Components', color='#d62728')
    ax2.tick_params(axis='y', labelcolor='#d62728')
    fig.suptitle('Kruskal Progress')
    lines = ax1.get_lines() + ax2.get_lines()
    labels = [line.get_label() for line in lines]
    fig.legend(lines, labels, loc='upper center', ncol=2)
    path = os.path.join(out_dir, 'growth_curve.png')
    fig.tight_layout(rect=[0, 0, 1, 0.92])
    fig.savefig(path, dpi=150)
    plt.close(fig)
    return path
