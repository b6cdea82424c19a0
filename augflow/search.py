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

"""Search the residual graph for augmenting paths."""

from __future__ import annotations

from collections import deque
from collections.abc import Callable

from augflow.constants import FIFO, LIFO, DEFAULT_FRONTIER
from augflow.graph import FlowGraph, Node


def find_path(
    graph: FlowGraph,
    start: int,
    is_goal: Callable[[Node], bool],
    frontier: str = DEFAULT_FRONTIER,
) -> list[int] | None:
    """Find a path from `start` to the first node that satisfies `is_goal`.

    Only edges with positive residual capacity are followed. Every node is
    discovered at most once, and the node that discovered it is remembered so
    that the path can be walked back from the goal.

    Args:
        graph: The residual graph to search.
        start: ID of the node to start from.
        is_goal: Predicate called on each node as it is taken off the frontier.
        frontier: `"fifo"` for breadth-first search, which returns a path with
            the fewest edges, or `"lifo"` for depth-first order, which still finds
            a path whenever one exists.

    Returns:
        Node IDs along the path, starting with `start` and ending with the goal.
        None if no reachable node satisfies `is_goal`.

    Raises:
        AugflowGraphError: When `start` is not a node ID of `graph`.
    """
    if frontier == FIFO:
        take = deque.popleft
    elif frontier == LIFO:
        take = deque.pop
    else:
        raise ValueError(f"Unknown frontier discipline: {frontier!r}")
    graph.node(start)

    discovered_from: list[int | None] = [None] * graph.num_nodes
    discovered = [False] * graph.num_nodes
    discovered[start] = True
    queue: deque[int] = deque([start])

    while queue:
        node = graph.nodes[take(queue)]
        if is_goal(node):
            return _walk_back(discovered_from, node.id)

        for edge in node.edges:
            if edge.flow < edge.capacity and not discovered[edge.target]:
                discovered[edge.target] = True
                discovered_from[edge.target] = node.id
                queue.append(edge.target)

    return None


def _walk_back(discovered_from: list[int | None], goal: int) -> list[int]:
    path = [goal]
    while (prev := discovered_from[path[-1]]) is not None:
        path.append(prev)
    path.reverse()
    return path
