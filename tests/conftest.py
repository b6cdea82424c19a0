from __future__ import annotations

import pytest

from augflow.edge_list import build_graph
from augflow.graph import FlowGraph


def make_graph(edges: list[tuple[str, str, int]]) -> FlowGraph:
    graph = FlowGraph()
    for source, dest, capacity in edges:
        graph.add_edge(source, dest, capacity)
    return graph


@pytest.fixture
def diamond() -> FlowGraph:
    """s splits into a and b, which both join at t."""
    return build_graph([("s", "a", 10), ("a", "t", 5), ("s", "b", 5), ("b", "t", 10)])


@pytest.fixture
def single_edge() -> FlowGraph:
    return build_graph([("s", "t", 7)])


@pytest.fixture
def disconnected() -> FlowGraph:
    return build_graph([("s", "a", 4), ("b", "t", 4)])


def all_edges_within_capacity(graph: FlowGraph) -> bool:
    return all(0 <= edge.flow <= edge.capacity for _, edge in graph.edges())
