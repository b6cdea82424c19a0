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

"""Read, write and synthesize edge lists of `source,dest,capacity` lines."""

from __future__ import annotations

import logging
import re
import string
from collections.abc import Iterable
from pathlib import Path

import numpy as np

from augflow.constants import (
    DEFAULT_SINK_NAME,
    DEFAULT_SOURCE_NAME,
    EDGE_LIST_DELIMITER,
    RANDOM_INNER_EDGES,
    RANDOM_MAX_CAPACITY,
    RANDOM_NAME_POOL,
    RANDOM_SINK_EDGES,
    RANDOM_SOURCE_EDGES,
)
from augflow.exceptions import AugflowInputError
from augflow.graph import FlowGraph

logger = logging.getLogger(__name__)

EdgeTriple = tuple[str, str, int]


def parse_edge_list(text: str) -> list[EdgeTriple]:
    """Parse one `source,dest,capacity` triple per line.

    Blank lines are ignored. Lines with fewer than three fields or a capacity
    that is not a plain ASCII integer (optional sign, digits only) are skipped
    with a warning. Fields past the third are ignored.
    """
    triples: list[EdgeTriple] = []
    for lineno, line in enumerate(text.splitlines(), start=1):
        if not line.strip():
            continue
        fields = line.split(EDGE_LIST_DELIMITER)
        if len(fields) < 3:
            logger.warning("Line %d: expected 3 fields, skipping %r", lineno, line)
            continue
        if not re.fullmatch(r"[+-]?\d+", fields[2].strip(), re.ASCII):
            logger.warning("Line %d: bad capacity, skipping %r", lineno, line)
            continue
        triples.append((fields[0].strip(), fields[1].strip(), int(fields[2])))
    return triples


def read_edge_list(path: str | Path) -> list[EdgeTriple]:
    """Read and parse an edge list file.

    Raises:
        AugflowInputError: When the file cannot be read.
    """
    try:
        text = Path(path).read_text()
    except OSError as e:
        raise AugflowInputError(f"Cannot read edge list {str(path)!r}: {e}") from e
    logger.info("Read edge list from %s", path)
    return parse_edge_list(text)


def format_edge_list(triples: Iterable[EdgeTriple]) -> str:
    """Render triples as edge list text, one line each."""
    return "".join(
        f"{source}{EDGE_LIST_DELIMITER}{dest}{EDGE_LIST_DELIMITER}{capacity}\n"
        for source, dest, capacity in triples
    )


def random_edge_list(
    rng: np.random.Generator | None = None,
    num_inner_edges: int = RANDOM_INNER_EDGES,
    num_source_edges: int = RANDOM_SOURCE_EDGES,
    num_sink_edges: int = RANDOM_SINK_EDGES,
    max_capacity: int = RANDOM_MAX_CAPACITY,
    source: str = DEFAULT_SOURCE_NAME,
    sink: str = DEFAULT_SINK_NAME,
) -> list[EdgeTriple]:
    """Synthesize a small random network.

    Inner nodes are single lowercase letters from the start of the alphabet.
    Edges are generated in three groups: between inner nodes, from `source`
    to inner nodes, and from inner nodes to `sink`. Capacities are drawn
    uniformly from `[0, max_capacity)`. Self loops are dropped, so the result
    may hold fewer edges than requested.

    Args:
        rng: Random number generator. A fresh unseeded one is used if None.
        num_inner_edges: Number of edges between inner nodes.
        num_source_edges: Number of edges leaving `source`.
        num_sink_edges: Number of edges entering `sink`.
        max_capacity: Exclusive upper bound of edge capacities.
        source: Name of the source node.
        sink: Name of the sink node.
    """
    if rng is None:
        rng = np.random.default_rng()
    names = list(string.ascii_lowercase[:RANDOM_NAME_POOL])

    def name() -> str:
        return names[rng.integers(len(names))]

    def capacity() -> int:
        return int(rng.integers(max_capacity))

    triples: list[EdgeTriple] = []
    triples.extend((name(), name(), capacity()) for _ in range(num_inner_edges))
    triples.extend((source, name(), capacity()) for _ in range(num_source_edges))
    triples.extend((name(), sink, capacity()) for _ in range(num_sink_edges))
    return [triple for triple in triples if triple[0] != triple[1]]


def build_graph(triples: Iterable[EdgeTriple]) -> FlowGraph:
    """Build a `FlowGraph` with one edge per triple, in order."""
    graph = FlowGraph()
    for source, dest, capacity in triples:
        if capacity < 0:
            logger.warning(
                "Edge %s -> %s has negative capacity %d and will never carry flow.",
                source,
                dest,
                capacity,
            )
        graph.add_edge(source, dest, capacity)
    logger.debug(
        "Built graph with %d nodes and %d edges.", graph.num_nodes, graph.num_edges
    )
    return graph
