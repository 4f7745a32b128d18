"""Node and graph containers used by the cycle finder."""

from __future__ import annotations

import weakref
from typing import Any, Dict, Iterable, Iterator, List, Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from .scc import StronglyConnectedComponent


class Node:
    """
    Graph vertex wrapping an externally owned payload.

    Payloads that support weak references are held weakly: once the owner
    drops one, ``payload`` reads as ``None``. Values that cannot be weakly
    referenced (ints, strings, dicts, lists, ...) are stored as given and
    never go stale. Target nodes are held in an insertion-ordered set; nodes
    hash and compare by identity.
    """

    __slots__ = ("_payload_ref", "_payload_value", "_targets", "__weakref__")

    def __init__(self, payload: Any = None, target_nodes: Iterable["Node"] = ()) -> None:
        self._payload_ref: Optional[weakref.ref] = None
        self._payload_value: Any = None
        if payload is not None:
            try:
                self._payload_ref = weakref.ref(payload)
            except TypeError:
                self._payload_value = payload
        # dict keeps insertion order; values unused
        self._targets: Dict[Node, None] = {}
        for node in target_nodes:
            self.add_target_node(node)

    # ------------------------------------------------------------------ #
    # Payload
    # ------------------------------------------------------------------ #
    @property
    def payload(self) -> Any:
        """The wrapped object, or ``None`` once a weakly held one is collected."""
        if self._payload_ref is None:
            return self._payload_value
        return self._payload_ref()

    @property
    def payload_alive(self) -> bool:
        return self.payload is not None

    # ------------------------------------------------------------------ #
    # Edges
    # ------------------------------------------------------------------ #
    def add_target_node(self, node: "Node") -> None:
        if not isinstance(node, Node):
            raise TypeError(f"target must be a Node, got {type(node).__name__}")
        self._targets[node] = None

    def remove_target_node(self, node: "Node") -> None:
        self._targets.pop(node, None)

    def remove_all_target_nodes(self) -> None:
        self._targets.clear()

    def has_target_node(self, node: "Node") -> bool:
        return node in self._targets

    def iter_target_nodes(self) -> Iterator["Node"]:
        """Yield targets in the order they were added."""
        return iter(list(self._targets))

    @property
    def target_nodes(self) -> frozenset:
        return frozenset(self._targets)

    # ------------------------------------------------------------------ #
    # Reachability
    # ------------------------------------------------------------------ #
    def iter_connected_nodes(self) -> Iterator["Node"]:
        """
        Yield every node reachable from this one, starting with itself.

        Depth-first preorder following edges in insertion order. Uses an
        explicit stack and a visited set, so cycles and long chains are safe.
        """
        visited = {self}
        yield self
        stack: List[Iterator[Node]] = [self.iter_target_nodes()]
        while stack:
            for node in stack[-1]:
                if node not in visited:
                    visited.add(node)
                    yield node
                    stack.append(node.iter_target_nodes())
                    break
            else:
                stack.pop()

    def connected_nodes(self) -> frozenset:
        """Transitive closure of outgoing edges, including this node."""
        return frozenset(self.iter_connected_nodes())

    def __repr__(self) -> str:
        payload = self.payload
        shown = "<gone>" if payload is None and self._payload_ref is not None else repr(payload)
        return f"Node(payload={shown}, targets={len(self._targets)})"


class Graph:
    """
    Fixed set of nodes over which cycle queries run.

    Membership is decided once at construction; the edges of the member
    nodes stay live, so later edge changes show up in later queries.
    """

    __slots__ = ("_members", "_nodes")

    def __init__(self, nodes: Iterable[Node] = ()) -> None:
        members: Dict[Node, None] = {}
        for node in nodes:
            if not isinstance(node, Node):
                raise TypeError(f"graph members must be Nodes, got {type(node).__name__}")
            members[node] = None
        self._members = tuple(members)
        self._nodes = frozenset(self._members)

    @classmethod
    def from_node(cls, root: Node) -> "Graph":
        """Build a graph from everything reachable from ``root`` (inclusive)."""
        if not isinstance(root, Node):
            raise TypeError(f"root must be a Node, got {type(root).__name__}")
        return cls(root.iter_connected_nodes())

    @property
    def nodes(self) -> frozenset:
        return self._nodes

    def __len__(self) -> int:
        return len(self._members)

    def __iter__(self) -> Iterator[Node]:
        return iter(self._members)

    def __contains__(self, node: object) -> bool:
        return node in self._nodes

    # ------------------------------------------------------------------ #
    # Cycle queries
    # ------------------------------------------------------------------ #
    def find_strongly_connected_components(
        self, strategy: Optional[str] = None
    ) -> List["StronglyConnectedComponent"]:
        from .scc import find_strongly_connected_components

        return find_strongly_connected_components(self, strategy=strategy)

    def cyclic_components(self, strategy: Optional[str] = None) -> List["StronglyConnectedComponent"]:
        """Components that form a genuine cycle group."""
        return [comp for comp in self.find_strongly_connected_components(strategy) if comp.is_cycle]

    def has_cycles(self) -> bool:
        return bool(self.cyclic_components())

    def __repr__(self) -> str:
        return f"Graph(num_nodes={len(self._members)})"


__all__ = ["Node", "Graph"]
