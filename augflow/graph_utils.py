# Copyright (C) 2023 Jae-Won Chung <jwnchung@umich.edu>
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""Helpers that check or summarize a solved `FlowGraph`."""

from __future__ import annotations

import logging

import networkx as nx  # type: ignore
from networkx.algorithms.flow import edmonds_karp  # type: ignore

from augflow.graph import FlowGraph

logger = logging.getLogger(__name__)


def to_networkx(graph: FlowGraph) -> nx.DiGraph:
    """Convert the graph into a networkx DiGraph.

    Parallel edges are merged into one edge whose `capacity` and `flow` are
    the sums over the parallel edges. Nodes keep their integer IDs and carry
    their name as the `name` attribute.
    """
    nx_graph = nx.DiGraph()
    for node in graph.nodes:
        nx_graph.add_node(node.id, name=node.name)
    for source_id, edge in graph.edges():
        if nx_graph.has_edge(source_id, edge.target):
            attrs = nx_graph[source_id][edge.target]
            attrs["capacity"] += edge.capacity
            attrs["flow"] += edge.flow
        else:
            nx_graph.add_edge(
                source_id, edge.target, capacity=edge.capacity, flow=edge.flow
            )
    return nx_graph


def reference_max_flow(graph: FlowGraph, source: int, sink: int) -> int:
    """Maximum flow computed by networkx on the original capacities.

    Current edge flows are ignored. Negative capacities are clamped to zero.
    """
    if source == sink:
        raise ValueError("Source and sink must differ for the reference max flow.")
    nx_graph = to_networkx(graph)
    for _, _, attrs in nx_graph.edges(data=True):
        attrs["capacity"] = max(attrs["capacity"], 0)
    flow_value, _ = nx.maximum_flow(
        nx_graph, source, sink, capacity="capacity", flow_func=edmonds_karp
    )
    return int(flow_value)


def verify_flow_conservation(graph: FlowGraph, source: int, sink: int) -> bool:
    """Check that flow in equals flow out at every node but the source and sink."""
    for node in graph.nodes:
        if node.id in (source, sink):
            continue
        in_flow = graph.flow_in(node.id)[0]
        out_flow = graph.flow_out(node.id)[0]
        if in_flow != out_flow:
            logger.debug(
                "Flow not conserved at %s (in: %d, out: %d)", node.name, in_flow, out_flow
            )
            return False
    return True


def residual_reachable(graph: FlowGraph, source: int) -> set[int]:
    """IDs of the nodes reachable from `source` over edges with residual capacity."""
    reachable = {source}
    stack = [source]
    while stack:
        for edge in graph.nodes[stack.pop()].edges:
            if edge.residual > 0 and edge.target not in reachable:
                reachable.add(edge.target)
                stack.append(edge.target)
    return reachable


def min_cut_capacity(graph: FlowGraph, source: int) -> int:
    """Total capacity of edges leaving the residual-reachable set of `source`.

    After the solver terminates every edge leaving the set is saturated, so
    this equals the returned flow as long as no flow crosses the cut backwards.
    """
    s_set = residual_reachable(graph, source)
    return sum(
        edge.capacity
        for source_id, edge in graph.edges()
        if source_id in s_set and edge.target not in s_set
    )
