"""Internal helpers shared across component visualizations."""
from __future__ import annotations

from typing import Dict, Hashable, Tuple

import matplotlib.pyplot as plt
import networkx as nx

LAYOUTS = ("spring", "kamada-kawai", "spectral", "circular", "shell", "planar", "random")


def component_palette(count: int, cmap_name: str) -> Dict[int, Tuple[float, float, float, float]]:
    """Assign deterministic colors to component indices."""
    if count <= 0:
        return {}
    cmap = plt.get_cmap(cmap_name)
    if count == 1:
        return {0: cmap(0.1)}
    return {idx: cmap(idx / (count - 1)) for idx in range(count)}


def compute_layout(graph: nx.DiGraph, layout: str, seed: int = 0) -> Dict[Hashable, Tuple[float, float]]:
    """Return node positions for the requested layout."""
    layout = layout.lower()
    if layout not in LAYOUTS:
        raise ValueError(f"Unknown layout {layout!r}; expected one of {', '.join(LAYOUTS)}")
    if layout == "kamada-kawai":
        return nx.kamada_kawai_layout(graph)
    if layout == "spectral":
        return nx.spectral_layout(graph)
    if layout == "circular":
        return nx.circular_layout(graph)
    if layout == "shell":
        return nx.shell_layout(graph)
    if layout == "planar" and nx.check_planarity(graph)[0]:
        return nx.planar_layout(graph)
    if layout == "random":
        return nx.random_layout(graph, seed=seed)
    return nx.spring_layout(graph, seed=seed)
