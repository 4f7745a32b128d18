"""
Core graph engine for cyclegraph.

The core package includes the node/graph containers, the Tarjan SCC
finder with its condensation helper, and invariant checks for SCC results.
"""

from . import graph, scc, invariants  # noqa: F401

__all__ = ["graph", "scc", "invariants"]
