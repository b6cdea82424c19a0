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

"""Render a `FlowGraph` as text diagrams or draw it with matplotlib."""

from __future__ import annotations

from typing import Any

import networkx as nx  # type: ignore
from matplotlib.axes import Axes  # type: ignore

from augflow.constants import (
    DEFAULT_CUT_NODE_ARGS,
    DEFAULT_EDGE_ARGS,
    DEFAULT_LABEL_ARGS,
    DEFAULT_NODE_ARGS,
    DEFAULT_SATURATED_EDGE_ARGS,
    MERMAID_FOOTER,
    MERMAID_HEADER,
)
from augflow.graph import FlowGraph
from augflow.graph_utils import residual_reachable, to_networkx


def to_mermaid(graph: FlowGraph) -> str:
    """Render the graph as a Mermaid state diagram labeled with flow/capacity."""
    lines = [MERMAID_HEADER]
    for source_id, edge in graph.edges():
        lines.append(
            f"{graph.nodes[source_id].name} --> {graph.nodes[edge.target].name}: "
            f"{edge.flow}/{edge.capacity}\n"
        )
    lines.append(MERMAID_FOOTER)
    return "".join(lines)


def to_debug_string(graph: FlowGraph) -> str:
    """Render the node table followed by one line per edge."""
    lines = ["".join(f"[{node.id}]={node.name}, " for node in graph.nodes), "\n"]
    for source_id, edge in graph.edges():
        lines.append(
            f"\t{graph.nodes[source_id].name} --> {graph.nodes[edge.target].name}"
            f"\t : {edge.flow}/{edge.capacity}\n"
        )
    return "".join(lines)


class FlowVisualizer:
    """Draws a `FlowGraph` with matplotlib."""

    # pylint: disable=dangerous-default-value
    def __init__(
        self,
        graph: FlowGraph,
        node_args: dict[str, Any] = DEFAULT_NODE_ARGS,
        label_args: dict[str, Any] = DEFAULT_LABEL_ARGS,
        edge_args: dict[str, Any] = DEFAULT_EDGE_ARGS,
        saturated_edge_args: dict[str, Any] = DEFAULT_SATURATED_EDGE_ARGS,
        cut_node_args: dict[str, Any] = DEFAULT_CUT_NODE_ARGS,
        seed: int | None = 0,
    ) -> None:
        """Save the graph and matplotlib arguments.

        Arguments:
            graph: The graph to draw. Parallel edges are drawn merged.
            node_args: Arguments passed to `networkx.draw_networkx_nodes`
            label_args: Arguments passed to `networkx.draw_networkx_labels`
            edge_args: Arguments passed to `networkx.draw_networkx_edges` for
                edges with residual capacity left
            saturated_edge_args: Same as `edge_args`, for saturated edges
            cut_node_args: Arguments passed to `networkx.draw_networkx_nodes`
                for the source side of the minimum cut
            seed: Seed for the spring layout, so repeated drawings match
        """
        self.graph = graph
        self.node_args = node_args
        self.label_args = label_args
        self.edge_args = edge_args
        self.saturated_edge_args = saturated_edge_args
        self.cut_node_args = cut_node_args

        self.nx_graph = to_networkx(graph)
        self.pos = nx.spring_layout(self.nx_graph, seed=seed)

    def draw(self, ax: Axes, draw_edge_labels: bool = True) -> None:
        """Draw nodes and edges on the given Axes object.

        Args:
            ax: The Axes object to draw on.
            draw_edge_labels: Whether to annotate edges with `flow/capacity`.
        """
        saturated, open_ = [], []
        for u, v, attrs in self.nx_graph.edges(data=True):
            (saturated if attrs["flow"] >= attrs["capacity"] else open_).append((u, v))

        names = {node_id: name for node_id, name in self.nx_graph.nodes(data="name")}
        nx.draw_networkx_nodes(self.nx_graph, self.pos, ax=ax, **self.node_args)
        nx.draw_networkx_labels(
            self.nx_graph, self.pos, labels=names, ax=ax, **self.label_args
        )
        nx.draw_networkx_edges(
            self.nx_graph, self.pos, edgelist=open_, ax=ax, **self.edge_args
        )
        nx.draw_networkx_edges(
            self.nx_graph, self.pos, edgelist=saturated, ax=ax, **self.saturated_edge_args
        )
        if draw_edge_labels:
            edge_labels = {
                (u, v): f"{attrs['flow']}/{attrs['capacity']}"
                for u, v, attrs in self.nx_graph.edges(data=True)
            }
            nx.draw_networkx_edge_labels(
                self.nx_graph, self.pos, edge_labels=edge_labels, ax=ax
            )
        ax.set_axis_off()

    def draw_min_cut(self, ax: Axes, source: int) -> None:
        """Highlight the nodes still reachable from `source` in the residual graph.

        Arguments:
            ax: The Axes object to draw on.
            source: Node ID of the flow source.
        """
        s_set = sorted(residual_reachable(self.graph, source))
        nx.draw_networkx_nodes(
            self.nx_graph, self.pos, nodelist=s_set, ax=ax, **self.cut_node_args
        )
        nx.draw_networkx_labels(
            self.nx_graph,
            self.pos,
            labels={node_id: self.graph.nodes[node_id].name for node_id in s_set},
            ax=ax,
            **self.label_args,
        )
