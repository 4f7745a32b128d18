"""Invariant checks for strongly connected component results."""

from __future__ import annotations

from typing import Dict, Iterable, Sequence, Set

from .graph import Graph, Node
from .scc import StronglyConnectedComponent


class InvariantViolation(RuntimeError):
    """Base error for invariant violations."""


class PartitionViolation(InvariantViolation):
    """Raised when components do not cover the graph exactly once."""


class ReachabilityViolation(InvariantViolation):
    """Raised when a component groups nodes that are not mutually reachable."""


def _reachable_within(graph: Graph, start: Node) -> Set[Node]:
    """Nodes reachable from ``start`` using only edges between members."""

    seen = {start}
    stack = [start]
    while stack:
        node = stack.pop()
        for target in node.iter_target_nodes():
            if target in graph and target not in seen:
                seen.add(target)
                stack.append(target)
    return seen


def validate_partition(graph: Graph, components: Iterable[StronglyConnectedComponent]) -> None:
    """Ensure every member sits in exactly one component and nothing else does."""

    counts: Dict[Node, int] = {}
    for comp in components:
        for node in comp:
            if node not in graph:
                raise PartitionViolation(f"{node!r} is not a member of the graph")
            counts[node] = counts.get(node, 0) + 1
            if counts[node] > 1:
                raise PartitionViolation(f"{node!r} appears in more than one component")
    missing = len(graph) - len(counts)
    if missing:
        raise PartitionViolation(f"{missing} graph member(s) missing from the components")


def validate_mutual_reachability(
    graph: Graph, components: Iterable[StronglyConnectedComponent]
) -> None:
    """Check that each node of a component reaches every other node of it."""

    for comp in components:
        if len(comp) < 2:
            continue
        members = set(comp)
        for node in comp:
            reach = _reachable_within(graph, node)
            if not members <= reach:
                raise ReachabilityViolation(
                    f"{node!r} cannot reach {len(members - reach)} node(s) of its component"
                )


def validate_singletons(graph: Graph, components: Sequence[StronglyConnectedComponent]) -> None:
    """A node with no path back to itself must sit alone in its component."""

    for comp in components:
        if len(comp) < 2:
            continue
        for node in comp:
            on_cycle = any(
                target in graph and node in _reachable_within(graph, target)
                for target in node.iter_target_nodes()
            )
            if not on_cycle:
                raise ReachabilityViolation(f"{node!r} is on no cycle but shares a component")


def assert_invariants(graph: Graph, components: Sequence[StronglyConnectedComponent]) -> None:
    """Run all invariant checks."""

    validate_partition(graph, components)
    validate_mutual_reachability(graph, components)
    validate_singletons(graph, components)
