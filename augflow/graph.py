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

"""The residual graph: a node registry plus per-node residual edge lists."""

from __future__ import annotations

import logging
from collections.abc import Iterator

from attrs import define, field

from augflow.exceptions import AugflowFlowError, AugflowGraphError

logger = logging.getLogger(__name__)


@define
class ResidualEdge:
    """A directed edge owned by its source node's adjacency list.

    Attributes:
        target: ID of the node this edge points to.
        flow: Flow currently routed along this edge.
        capacity: Total capacity of the edge.
    """

    target: int
    flow: int
    capacity: int

    @property
    def residual(self) -> int:
        """Capacity left on this edge."""
        return self.capacity - self.flow

    @property
    def saturated(self) -> bool:
        """Whether no more flow can be pushed along this edge."""
        return self.flow >= self.capacity


@define
class Node:
    """A named node and the residual edges leaving it."""

    id: int
    name: str
    edges: list[ResidualEdge] = field(factory=list)


class FlowGraph:
    """Capacitated directed graph with residual flow bookkeeping.

    Nodes are kept in an arena and addressed by dense, zero-based integer IDs
    assigned in first-seen order. Each node owns its list of outgoing edges.
    Parallel edges between the same pair of nodes are kept separately.
    """

    def __init__(self) -> None:
        """Create an empty graph."""
        self.nodes: list[Node] = []
        self._ids: dict[str, int] = {}

    def __len__(self) -> int:
        return len(self.nodes)

    @property
    def num_nodes(self) -> int:
        return len(self.nodes)

    @property
    def num_edges(self) -> int:
        return sum(len(node.edges) for node in self.nodes)

    def ensure_node(self, name: str) -> int:
        """Return the ID of the node called `name`, creating it if needed."""
        if (node_id := self._ids.get(name)) is not None:
            return node_id
        node_id = len(self.nodes)
        self.nodes.append(Node(node_id, name))
        self._ids[name] = node_id
        return node_id

    def lookup_node(self, name: str) -> int | None:
        """Return the ID of the node called `name`, or None if there is none."""
        return self._ids.get(name)

    def node_name(self, node_id: int) -> str | None:
        """Return the name of the node with ID `node_id`, or None if there is none."""
        if 0 <= node_id < len(self.nodes):
            return self.nodes[node_id].name
        return None

    def add_edge(self, source: str, dest: str, capacity: int) -> None:
        """Append a new edge with zero flow from `source` to `dest`.

        Both endpoints are created if they do not exist yet. The destination is
        registered before the source. The sign of `capacity` is not checked; an
        edge with non-positive capacity is simply never traversable.
        """
        dest_id = self.ensure_node(dest)
        source_id = self.ensure_node(source)
        self.nodes[source_id].edges.append(ResidualEdge(dest_id, 0, capacity))

    def edges(self) -> Iterator[tuple[int, ResidualEdge]]:
        """Yield `(source ID, edge)` for every edge in the graph."""
        for node in self.nodes:
            for edge in node.edges:
                yield node.id, edge

    def flow_in(self, node_id: int) -> tuple[int, int]:
        """Total flow and capacity over all edges pointing to `node_id`."""
        self.node(node_id)
        total_flow, total_capacity = 0, 0
        for _, edge in self.edges():
            if edge.target == node_id:
                total_flow += edge.flow
                total_capacity += edge.capacity
        return total_flow, total_capacity

    def flow_out(self, node_id: int) -> tuple[int, int]:
        """Total flow and capacity over all edges leaving `node_id`."""
        total_flow, total_capacity = 0, 0
        for edge in self.node(node_id).edges:
            total_flow += edge.flow
            total_capacity += edge.capacity
        return total_flow, total_capacity

    def find_edge(self, source: int, dest: int) -> ResidualEdge:
        """Return the edge from `source` to `dest` that flow updates apply to.

        Among parallel edges, this is the first one with residual capacity left,
        or the first one overall when all of them are saturated. This is the
        edge the path search traversed, so a saturated parallel edge cannot end
        the augmentation loop early with a zero bottleneck.

        Raises:
            AugflowGraphError: When there is no edge from `source` to `dest`.
        """
        first = None
        for edge in self.node(source).edges:
            if edge.target != dest:
                continue
            if edge.residual > 0:
                return edge
            if first is None:
                first = edge
        if first is None:
            raise AugflowGraphError(
                f"No edge from {self.node_name(source)!r} to {self.node_name(dest)!r}."
            )
        return first

    def residual_capacity(self, source: int, dest: int) -> int:
        """Capacity left on the edge from `source` to `dest`."""
        return self.find_edge(source, dest).residual

    def increase_flow(self, source: int, dest: int, amount: int) -> None:
        """Push `amount` more flow along the edge from `source` to `dest`.

        Raises:
            AugflowFlowError: When the new flow would leave `[0, capacity]`.
                This means the caller computed a wrong bottleneck.
        """
        edge = self.find_edge(source, dest)
        new_flow = edge.flow + amount
        if new_flow > edge.capacity or new_flow < 0:
            logger.error(
                "%s -> %s out of bounds (flow: %d, capacity: %d, amount: %d)",
                self.node_name(source),
                self.node_name(dest),
                edge.flow,
                edge.capacity,
                amount,
            )
            raise AugflowFlowError(
                f"Flow {new_flow} on {self.node_name(source)!r} -> "
                f"{self.node_name(dest)!r} is outside [0, {edge.capacity}]."
            )
        edge.flow = new_flow

    def node(self, node_id: int) -> Node:
        """Return the node with ID `node_id`.

        Raises:
            AugflowGraphError: When there is no such node.
        """
        if not 0 <= node_id < len(self.nodes):
            raise AugflowGraphError(f"Unknown node ID {node_id}.")
        return self.nodes[node_id]
