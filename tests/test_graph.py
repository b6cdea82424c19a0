from __future__ import annotations

import pytest

from augflow.exceptions import AugflowFlowError, AugflowGraphError
from augflow.graph import FlowGraph, ResidualEdge

from conftest import make_graph


def test_ensure_node_assigns_dense_ids_in_first_seen_order():
    graph = FlowGraph()
    assert graph.ensure_node("x") == 0
    assert graph.ensure_node("y") == 1
    assert graph.ensure_node("x") == 0
    assert graph.num_nodes == 2
    assert [node.name for node in graph.nodes] == ["x", "y"]


def test_lookup_does_not_create_nodes():
    graph = FlowGraph()
    assert graph.lookup_node("missing") is None
    assert graph.num_nodes == 0


def test_node_name():
    graph = make_graph([("s", "t", 1)])
    assert graph.node_name(graph.lookup_node("s")) == "s"
    assert graph.node_name(42) is None
    assert graph.node_name(-1) is None


def test_add_edge_registers_dest_before_source():
    graph = make_graph([("s", "a", 3)])
    assert graph.lookup_node("a") == 0
    assert graph.lookup_node("s") == 1
    assert graph.nodes[1].edges == [ResidualEdge(target=0, flow=0, capacity=3)]


def test_parallel_edges_are_kept_separately():
    graph = make_graph([("s", "t", 3), ("s", "t", 4)])
    s = graph.lookup_node("s")
    assert len(graph.nodes[s].edges) == 2
    assert graph.num_edges == 2
    assert graph.flow_out(s) == (0, 7)


def test_flow_in_and_out_aggregate_over_all_edges():
    graph = make_graph([("a", "c", 3), ("b", "c", 4), ("c", "d", 5), ("a", "c", 1)])
    a, b, c = (graph.lookup_node(name) for name in "abc")
    graph.increase_flow(a, c, 2)
    graph.increase_flow(b, c, 4)
    assert graph.flow_in(c) == (6, 8)
    assert graph.flow_out(c) == (0, 5)
    assert graph.flow_out(a) == (2, 4)
    assert graph.flow_in(a) == (0, 0)


def test_residual_capacity_and_increase_flow():
    graph = make_graph([("s", "t", 7)])
    s, t = graph.lookup_node("s"), graph.lookup_node("t")
    assert graph.residual_capacity(s, t) == 7
    graph.increase_flow(s, t, 5)
    assert graph.residual_capacity(s, t) == 2
    graph.increase_flow(s, t, 2)
    assert graph.residual_capacity(s, t) == 0
    assert graph.nodes[s].edges[0].saturated


def test_increase_flow_above_capacity_is_fatal():
    graph = make_graph([("s", "t", 7)])
    s, t = graph.lookup_node("s"), graph.lookup_node("t")
    graph.increase_flow(s, t, 6)
    with pytest.raises(AugflowFlowError):
        graph.increase_flow(s, t, 2)
    assert graph.nodes[s].edges[0].flow == 6


def test_increase_flow_below_zero_is_fatal():
    graph = make_graph([("s", "t", 7)])
    s, t = graph.lookup_node("s"), graph.lookup_node("t")
    with pytest.raises(AugflowFlowError):
        graph.increase_flow(s, t, -1)


def test_missing_edge_is_a_graph_error():
    graph = make_graph([("s", "a", 1), ("a", "t", 1)])
    s, t = graph.lookup_node("s"), graph.lookup_node("t")
    with pytest.raises(AugflowGraphError):
        graph.residual_capacity(s, t)
    with pytest.raises(AugflowGraphError):
        graph.increase_flow(s, t, 1)
    with pytest.raises(AugflowGraphError):
        graph.flow_out(99)


def test_parallel_edge_updates_skip_saturated_edges():
    graph = make_graph([("s", "t", 2), ("s", "t", 3)])
    s, t = graph.lookup_node("s"), graph.lookup_node("t")
    graph.increase_flow(s, t, 2)
    assert graph.residual_capacity(s, t) == 3
    graph.increase_flow(s, t, 3)
    assert [edge.flow for edge in graph.nodes[s].edges] == [2, 3]
    # All saturated: queries fall back to the first edge.
    assert graph.residual_capacity(s, t) == 0


def test_negative_capacity_is_stored_as_is():
    graph = make_graph([("s", "t", -3)])
    s = graph.lookup_node("s")
    assert graph.nodes[s].edges[0].capacity == -3
    assert graph.nodes[s].edges[0].saturated


def test_edges_enumerates_every_edge_with_its_source():
    graph = make_graph([("s", "a", 1), ("a", "t", 2), ("s", "t", 3)])
    listed = [(graph.node_name(u), graph.node_name(e.target), e.capacity) for u, e in graph.edges()]
    assert sorted(listed) == [("a", "t", 2), ("s", "a", 1), ("s", "t", 3)]


def test_unknown_node_ids_raise_for_both_aggregates():
    graph = make_graph([("s", "t", 1)])
    for node_id in (-1, 2):
        with pytest.raises(AugflowGraphError):
            graph.flow_in(node_id)
        with pytest.raises(AugflowGraphError):
            graph.flow_out(node_id)
    assert graph.node(graph.lookup_node("s")).name == "s"
