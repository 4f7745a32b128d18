from cyclegraph.core.graph import Node


class Payload:
    """Weak-referenceable stand-in for an externally owned object."""

    def __init__(self, name: str) -> None:
        self.name = name

    def __repr__(self) -> str:
        return self.name


def make_nodes(*names: str):
    payloads = [Payload(name) for name in names]
    return payloads, [Node(payload) for payload in payloads]


def names(component) -> list:
    return [node.payload.name for node in component]
