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

"""A maximum flow solver based on repeated augmenting paths."""

from __future__ import annotations

import logging
from collections.abc import Generator

from attrs import define

from augflow.constants import DEFAULT_FRONTIER, FRONTIER_DISCIPLINES
from augflow.exceptions import AugflowGraphError, AugflowInputError
from augflow.graph import FlowGraph
from augflow.search import find_path

logger = logging.getLogger(__name__)


@define
class Augmentation:
    """A POD to hold the path and amount of one flow augmentation."""

    path: list[int]
    bottleneck: int


class FordFulkerson:
    """Pushes flow along augmenting paths until the sink is unreachable.

    Flow is only ever added to explicit edges; no reverse residual edges are
    created, so previously routed flow is never cancelled. The result is the
    true maximum flow whenever no cancellation is needed to reach it, e.g. on
    networks where augmenting paths never cross.
    """

    def __init__(
        self,
        graph: FlowGraph,
        source: int,
        sink: int,
        frontier: str = DEFAULT_FRONTIER,
    ) -> None:
        """Initialize the solver.

        Args:
            graph: The graph to solve. Edge flows are modified in place.
            source: Node ID of the flow source.
            sink: Node ID of the flow sink.
            frontier: Search order of the path finder. `"fifo"` searches for
                the shortest augmenting path each round.
        """
        for role, node_id in (("source", source), ("sink", sink)):
            if graph.node_name(node_id) is None:
                raise AugflowGraphError(f"Unknown {role} node ID {node_id}.")
        if frontier not in FRONTIER_DISCIPLINES:
            raise ValueError(f"Unknown frontier discipline: {frontier!r}")

        self.graph = graph
        self.source = source
        self.sink = sink
        self.frontier = frontier
        self.num_augmentations = 0

    def find_augmenting_path(self) -> list[int] | None:
        """Find a source-to-sink path over edges with residual capacity."""
        return find_path(
            self.graph,
            self.source,
            lambda node: node.id == self.sink,
            frontier=self.frontier,
        )

    def bottleneck(self, path: list[int]) -> int | None:
        """Smallest residual capacity along `path`, or None for a single-node path."""
        if len(path) < 2:
            return None
        return min(
            self.graph.residual_capacity(u, v) for u, v in zip(path[:-1], path[1:])
        )

    def augment(self, path: list[int], amount: int) -> None:
        """Add `amount` of flow to every edge along `path`."""
        for u, v in zip(path[:-1], path[1:]):
            self.graph.increase_flow(u, v, amount)

    def run(self) -> Generator[Augmentation, None, None]:
        """Run the algorithm and yield each augmentation after it is applied."""
        logger.info(
            "Starting augmenting path solver from %s to %s (%s frontier).",
            self.graph.node_name(self.source),
            self.graph.node_name(self.sink),
            self.frontier,
        )
        logger.debug("Number of nodes: %d", self.graph.num_nodes)
        logger.debug("Number of edges: %d", self.graph.num_edges)

        while (path := self.find_augmenting_path()) is not None:
            amount = self.bottleneck(path)
            if amount is None:
                logger.info("Source and sink are the same node.")
                break
            if amount == 0:
                logger.warning("Found an augmenting path with zero bottleneck.")
                break

            self.augment(path, amount)
            self.num_augmentations += 1
            logger.debug(
                "Path %s: pushed %d",
                " -> ".join(str(self.graph.node_name(node_id)) for node_id in path),
                amount,
            )
            yield Augmentation(path, amount)

        logger.info("No augmenting path left after %d augmentations.", self.num_augmentations)

    def compute_max_flow(self) -> int:
        """Run the algorithm to completion and return the total flow out of the source."""
        for _ in self.run():
            pass
        flow = self.graph.flow_out(self.source)[0]
        logger.info("Maximum flow: %d", flow)
        return flow


def compute_max_flow(
    graph: FlowGraph,
    source: int,
    sink: int,
    frontier: str = DEFAULT_FRONTIER,
) -> int:
    """Compute the maximum flow from `source` to `sink`, updating edge flows in place."""
    return FordFulkerson(graph, source, sink, frontier).compute_max_flow()


def resolve_terminals(graph: FlowGraph, source: str, sink: str) -> tuple[int, int]:
    """Look up the node IDs of the source and sink names.

    Raises:
        AugflowInputError: When either name is not in the graph.
    """
    ids = []
    for role, name in (("source", source), ("sink", sink)):
        if (node_id := graph.lookup_node(name)) is None:
            raise AugflowInputError(f"The {role} node {name!r} is not in the graph.")
        ids.append(node_id)
    return ids[0], ids[1]
