"""Strongly connected component utilities."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, Iterator, List, Optional, Set, Tuple

from ..config import resolve_scc_strategy, validation_enabled
from .graph import Graph, Node

LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class StronglyConnectedComponent:
    """Group of mutually reachable nodes, in stack pop order."""

    nodes: Tuple[Node, ...]

    def __len__(self) -> int:
        return len(self.nodes)

    def __iter__(self) -> Iterator[Node]:
        return iter(self.nodes)

    def __contains__(self, node: object) -> bool:
        return any(member is node for member in self.nodes)

    @property
    def payloads(self) -> Tuple[Any, ...]:
        return tuple(node.payload for node in self.nodes)

    @property
    def is_cycle(self) -> bool:
        """True for groups of two or more, or a single node pointing at itself."""
        if len(self.nodes) > 1:
            return True
        if not self.nodes:
            return False
        node = self.nodes[0]
        return node.has_target_node(node)


class _TarjanState:
    """Bookkeeping shared by both traversal strategies."""

    def __init__(self, graph: Graph) -> None:
        self.members = graph.nodes
        self.index: Dict[Node, int] = {}
        self.lowlink: Dict[Node, int] = {}
        self.onstack: Set[Node] = set()
        self.stack: List[Node] = []
        self.counter = 0
        self.sccs: List[StronglyConnectedComponent] = []

    def discover(self, v: Node) -> None:
        self.index[v] = self.counter
        self.lowlink[v] = self.counter
        self.counter += 1
        self.stack.append(v)
        self.onstack.add(v)

    def successors(self, v: Node) -> Iterator[Node]:
        # targets outside the graph are boundary only
        for w in v.iter_target_nodes():
            if w in self.members:
                yield w

    def close(self, v: Node) -> None:
        if self.lowlink[v] != self.index[v]:
            return
        comp: List[Node] = []
        while True:
            w = self.stack.pop()
            self.onstack.remove(w)
            comp.append(w)
            if w is v:
                break
        self.sccs.append(StronglyConnectedComponent(tuple(comp)))


def _tarjan_recursive(graph: Graph) -> List[StronglyConnectedComponent]:
    state = _TarjanState(graph)

    def strongconnect(v: Node) -> None:
        state.discover(v)
        for w in state.successors(v):
            if w not in state.index:
                strongconnect(w)
                state.lowlink[v] = min(state.lowlink[v], state.lowlink[w])
            elif w in state.onstack:
                state.lowlink[v] = min(state.lowlink[v], state.index[w])
        state.close(v)

    for vertex in graph:
        if vertex not in state.index:
            strongconnect(vertex)
    return state.sccs


def _tarjan_iterative(graph: Graph) -> List[StronglyConnectedComponent]:
    state = _TarjanState(graph)

    for root in graph:
        if root in state.index:
            continue
        state.discover(root)
        work: List[Tuple[Node, Iterator[Node]]] = [(root, state.successors(root))]
        while work:
            v, successors = work[-1]
            for w in successors:
                if w not in state.index:
                    state.discover(w)
                    work.append((w, state.successors(w)))
                    break
                if w in state.onstack:
                    state.lowlink[v] = min(state.lowlink[v], state.index[w])
            else:
                # all edges of v handled: same point where the recursive call returns
                work.pop()
                state.close(v)
                if work:
                    parent = work[-1][0]
                    state.lowlink[parent] = min(state.lowlink[parent], state.lowlink[v])
    return state.sccs


_STRATEGIES = {
    "iterative": _tarjan_iterative,
    "recursive": _tarjan_recursive,
}


def find_strongly_connected_components(
    graph: Graph, *, strategy: Optional[str] = None
) -> List[StronglyConnectedComponent]:
    """
    Tarjan's SCC algorithm over the members of ``graph``.

    Components are emitted in completion order, which is reverse topological
    order of the condensed graph: a component appears before every component
    that has an edge into it. Within a component nodes are listed in pop
    order (reverse discovery order).

    ``strategy`` selects the traversal: ``"iterative"`` uses an explicit work
    stack, ``"recursive"`` uses the call stack. Both yield identical results.
    When omitted the configured default applies (see
    :func:`cyclegraph.config.resolve_scc_strategy`).
    """
    name = resolve_scc_strategy(strategy)
    sccs = _STRATEGIES[name](graph)
    LOGGER.debug(
        "find_strongly_connected_components strategy=%s nodes=%d components=%d cyclic=%d",
        name,
        len(graph),
        len(sccs),
        sum(1 for comp in sccs if comp.is_cycle),
    )
    if validation_enabled():
        from .invariants import assert_invariants

        assert_invariants(graph, sccs)
    return sccs


def condensation(
    graph: Graph, *, strategy: Optional[str] = None
) -> Tuple[List[StronglyConnectedComponent], Dict[int, Set[int]]]:
    """Return SCCs and the adjacency of the condensed graph (by component index)."""

    comps = find_strongly_connected_components(graph, strategy=strategy)
    comp_index = {node: i for i, comp in enumerate(comps) for node in comp}
    dag: Dict[int, Set[int]] = {i: set() for i in range(len(comps))}
    for node in graph:
        cu = comp_index[node]
        for target in node.iter_target_nodes():
            cv = comp_index.get(target)
            if cv is not None and cu != cv:
                dag[cu].add(cv)
    return comps, dag


__all__ = [
    "StronglyConnectedComponent",
    "find_strongly_connected_components",
    "condensation",
]
