import pytest

from cyclegraph.core import invariants, scc
from cyclegraph.core.graph import Graph
from cyclegraph.core.scc import StronglyConnectedComponent

try:  # pragma: no cover
    from tests.helpers import make_nodes
except ModuleNotFoundError:  # pragma: no cover
    from helpers import make_nodes


def build_simple_graph():
    payloads, (a, b, c) = make_nodes("a", "b", "c")
    a.add_target_node(b)
    b.add_target_node(a)
    b.add_target_node(c)
    return payloads, Graph([a, b, c]), (a, b, c)


def test_finder_output_passes():
    _payloads, graph, _nodes = build_simple_graph()
    comps = scc.find_strongly_connected_components(graph)
    invariants.assert_invariants(graph, comps)


def test_partition_detects_missing_member():
    _payloads, graph, (a, b, c) = build_simple_graph()
    comps = [StronglyConnectedComponent((b, a))]
    with pytest.raises(invariants.PartitionViolation):
        invariants.validate_partition(graph, comps)


def test_partition_detects_duplicates():
    _payloads, graph, (a, b, c) = build_simple_graph()
    comps = [StronglyConnectedComponent((c,)), StronglyConnectedComponent((b, a)), StronglyConnectedComponent((a,))]
    with pytest.raises(invariants.PartitionViolation):
        invariants.validate_partition(graph, comps)


def test_partition_detects_outsider():
    _payloads, graph, (a, b, c) = build_simple_graph()
    _extra, (z,) = make_nodes("z")
    comps = [StronglyConnectedComponent((c,)), StronglyConnectedComponent((b, a)), StronglyConnectedComponent((z,))]
    with pytest.raises(invariants.PartitionViolation):
        invariants.validate_partition(graph, comps)


def test_reachability_detects_bad_grouping():
    _payloads, graph, (a, b, c) = build_simple_graph()
    comps = [StronglyConnectedComponent((c, b, a))]
    invariants.validate_partition(graph, comps)
    with pytest.raises(invariants.ReachabilityViolation):
        invariants.validate_mutual_reachability(graph, comps)
    with pytest.raises(invariants.ReachabilityViolation):
        invariants.validate_singletons(graph, comps)


def test_reachability_ignores_edges_leaving_graph():
    _payloads, (a, b, x) = make_nodes("a", "b", "x")
    a.add_target_node(x)
    x.add_target_node(b)
    b.add_target_node(a)
    graph = Graph([a, b])
    comps = [StronglyConnectedComponent((b, a))]
    with pytest.raises(invariants.ReachabilityViolation):
        invariants.validate_mutual_reachability(graph, comps)
    invariants.assert_invariants(graph, scc.find_strongly_connected_components(graph))
