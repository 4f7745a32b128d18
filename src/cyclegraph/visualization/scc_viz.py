"""Cycle-group visualization helpers for cyclegraph."""
from __future__ import annotations

from typing import Any, Callable, Optional, Tuple

from matplotlib.patches import Patch
import matplotlib.pyplot as plt
import networkx as nx

from cyclegraph.core.graph import Graph, Node
from cyclegraph.core.scc import find_strongly_connected_components
from ._layout import component_palette, compute_layout

ACYCLIC_COLOR = "#4c566a"


def _default_label(node: Node) -> str:
    payload = node.payload
    if payload is None:
        return "<gone>"
    return str(payload)


def to_networkx(
    graph: Graph,
    *,
    label: Optional[Callable[[Node], Any]] = None,
    strategy: Optional[str] = None,
) -> nx.DiGraph:
    """
    Convert a Graph into a networkx DiGraph keyed by the member nodes.

    Each vertex carries ``label``, ``component`` (index in SCC emission order)
    and ``cyclic``. Edges leading outside the graph are left out.
    """
    label = label or _default_label
    comps = find_strongly_connected_components(graph, strategy=strategy)
    result = nx.DiGraph()
    for idx, comp in enumerate(comps):
        cyclic = comp.is_cycle
        for node in comp:
            result.add_node(node, label=label(node), component=idx, cyclic=cyclic)
    for node in graph:
        for target in node.iter_target_nodes():
            if target in graph:
                result.add_edge(node, target)
    return result


def plot_components(
    graph: Graph,
    *,
    figsize: Tuple[int, int] = (8, 6),
    node_size: int = 700,
    with_labels: bool = True,
    cmap_name: str = "tab10",
    layout: str = "spring",
    background_color: str = "#0b0e14",
    seed: int = 0,
    label: Optional[Callable[[Node], Any]] = None,
    ax: Optional[plt.Axes] = None,
) -> plt.Axes:
    """
    Render a Graph with networkx + matplotlib.

    Nodes in a cycle group share a color; nodes on no cycle are grey.
    """
    nx_graph = to_networkx(graph, label=label)
    if nx_graph.number_of_nodes() == 0:
        raise ValueError("Graph has no nodes to draw.")

    if ax is None:
        _, ax = plt.subplots(figsize=figsize)

    pos = compute_layout(nx_graph, layout, seed=seed)
    ax.set_facecolor(background_color)
    ax.figure.set_facecolor(background_color)

    cyclic_ids = sorted({data["component"] for _, data in nx_graph.nodes(data=True) if data["cyclic"]})
    palette = component_palette(len(cyclic_ids), cmap_name)
    colors_by_comp = {comp_id: palette[i] for i, comp_id in enumerate(cyclic_ids)}
    node_colors = [
        colors_by_comp.get(nx_graph.nodes[node]["component"], ACYCLIC_COLOR) for node in nx_graph.nodes
    ]

    nx.draw_networkx_nodes(
        nx_graph,
        pos,
        ax=ax,
        node_size=node_size,
        node_color=node_colors,
        edgecolors="#d8dee9",
        linewidths=1.0,
    )
    nx.draw_networkx_edges(
        nx_graph,
        pos,
        ax=ax,
        arrows=True,
        arrowstyle="-|>",
        arrowsize=14,
        edge_color="#d8dee9",
        width=1.5,
        alpha=0.9,
    )
    if with_labels:
        labels = {node: nx_graph.nodes[node]["label"] for node in nx_graph.nodes}
        nx.draw_networkx_labels(
            nx_graph,
            pos,
            labels,
            font_size=8,
            font_color="#f0f4ff",
            bbox=dict(boxstyle="round,pad=0.2", facecolor="#00000055", edgecolor="none"),
            ax=ax,
        )

    legend_handles = [
        Patch(facecolor=colors_by_comp[comp_id], edgecolor="none", label=f"Cycle group {n + 1}")
        for n, comp_id in enumerate(cyclic_ids)
    ]
    legend_handles.append(Patch(facecolor=ACYCLIC_COLOR, edgecolor="none", label="No cycle"))
    ax.legend(handles=legend_handles, loc="upper right", frameon=False, fontsize=8, labelcolor="#e6e1cf")

    ax.axis("off")
    ax.set_title(
        f"Strongly connected components ({len(cyclic_ids)} cyclic)",
        color="#e6e1cf",
        fontsize=11,
        loc="left",
    )
    return ax


def save_components_png(
    graph: Graph,
    out_path: str,
    *,
    figsize: Tuple[int, int] = (8, 6),
    **plot_kwargs,
) -> str:
    """Render a Graph's components and save them as a PNG."""
    fig, ax = plt.subplots(figsize=figsize)
    plot_components(graph, ax=ax, figsize=figsize, **plot_kwargs)
    fig.tight_layout()
    fig.savefig(out_path, dpi=150)
    plt.close(fig)
    return out_path
