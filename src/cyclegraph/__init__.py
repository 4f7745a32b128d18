"""cyclegraph core package."""

from importlib import metadata

from . import config, core
from .core.graph import Graph, Node
from .core.invariants import (
    InvariantViolation,
    PartitionViolation,
    ReachabilityViolation,
    assert_invariants,
)
from .core.scc import (
    StronglyConnectedComponent,
    condensation,
    find_strongly_connected_components,
)

try:  # pragma: no cover - metadata only at runtime
    __version__ = metadata.version("cyclegraph")
except metadata.PackageNotFoundError:  # pragma: no cover - source tree / editable installs
    __version__ = "0.0.0"

__all__ = [
    "config",
    "core",
    "Node",
    "Graph",
    "StronglyConnectedComponent",
    "find_strongly_connected_components",
    "condensation",
    "InvariantViolation",
    "PartitionViolation",
    "ReachabilityViolation",
    "assert_invariants",
    "__version__",
]
