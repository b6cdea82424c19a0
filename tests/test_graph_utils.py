from __future__ import annotations

from augflow.graph_utils import (
    min_cut_capacity,
    reference_max_flow,
    residual_reachable,
    to_networkx,
    verify_flow_conservation,
)
from augflow.solver import compute_max_flow, resolve_terminals

from conftest import make_graph


def test_to_networkx_merges_parallel_edges():
    graph = make_graph([("s", "t", 2), ("s", "t", 3), ("s", "a", 1)])
    s, t = resolve_terminals(graph, "s", "t")
    graph.increase_flow(s, t, 2)
    nx_graph = to_networkx(graph)
    assert nx_graph.number_of_nodes() == 3
    assert nx_graph.number_of_edges() == 2
    assert nx_graph[s][t] == {"capacity": 5, "flow": 2}
    assert nx_graph.nodes[s]["name"] == "s"


def test_reference_max_flow(diamond):
    s, t = resolve_terminals(diamond, "s", "t")
    assert reference_max_flow(diamond, s, t) == 10


def test_reference_ignores_negative_capacities():
    graph = make_graph([("s", "t", -5), ("s", "a", 2), ("a", "t", 2)])
    s, t = resolve_terminals(graph, "s", "t")
    assert reference_max_flow(graph, s, t) == 2


def test_conservation_detects_imbalance():
    graph = make_graph([("s", "a", 5), ("a", "t", 5)])
    s, t = resolve_terminals(graph, "s", "t")
    a = graph.lookup_node("a")
    graph.increase_flow(s, a, 3)
    assert not verify_flow_conservation(graph, s, t)
    graph.increase_flow(a, t, 3)
    assert verify_flow_conservation(graph, s, t)


def test_min_cut_matches_flow_after_solving(diamond):
    s, t = resolve_terminals(diamond, "s", "t")
    flow = compute_max_flow(diamond, s, t)
    reachable = residual_reachable(diamond, s)
    assert s in reachable
    assert t not in reachable
    assert min_cut_capacity(diamond, s) == flow


def test_residual_reachable_before_solving(diamond):
    s, _ = resolve_terminals(diamond, "s", "t")
    assert residual_reachable(diamond, s) == set(range(diamond.num_nodes))
