"""Visualization helpers for cyclegraph."""
from __future__ import annotations

from .scc_viz import plot_components, save_components_png, to_networkx

__all__ = [
    "to_networkx",
    "plot_components",
    "save_components_png",
]
