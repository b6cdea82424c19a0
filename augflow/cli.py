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

"""Command line entry point: solve an edge list file or a random network."""

from __future__ import annotations

import argparse
import logging
from collections.abc import Sequence

import matplotlib.pyplot as plt  # type: ignore
import numpy as np

from augflow.constants import (
    DEFAULT_FRONTIER,
    DEFAULT_SINK_NAME,
    DEFAULT_SOURCE_NAME,
    FRONTIER_DISCIPLINES,
)
from augflow.edge_list import build_graph, format_edge_list, random_edge_list, read_edge_list
from augflow.exceptions import AugflowInputError
from augflow.graph_utils import reference_max_flow
from augflow.solver import FordFulkerson, resolve_terminals
from augflow.visualizer import FlowVisualizer, to_mermaid

logger = logging.getLogger(__name__)


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog="augflow", description="Maximum flow with augmenting paths."
    )
    parser.add_argument("edge_list", type=str, nargs="?", help="Path for a file of source,dest,capacity lines. A random network is generated if omitted.")
    parser.add_argument("--source", type=str, default=DEFAULT_SOURCE_NAME, help="Name of the source node")
    parser.add_argument("--sink", type=str, default=DEFAULT_SINK_NAME, help="Name of the sink node")
    parser.add_argument("--frontier", type=str, default=DEFAULT_FRONTIER, choices=FRONTIER_DISCIPLINES, help="Order in which the path search visits nodes")
    parser.add_argument("--seed", type=int, help="Seed for the random network generator")
    parser.add_argument("--draw", type=str, help="Path for a PNG drawing of the final graph")
    parser.add_argument("--verify", action="store_true", help="Compare the result with networkx's maximum flow")
    parser.add_argument("--log_level", type=str, default="WARNING", choices=["DEBUG", "INFO", "WARNING", "ERROR"], help="Logging level")
    parser.add_argument("--log_file", type=str, help="Path for an additional log file")
    return parser.parse_args(argv)


def setup_logging(level: str, log_file: str | None) -> None:
    """Log to stderr and, optionally, a file."""
    handlers: list[logging.Handler] = [logging.StreamHandler()]
    if log_file is not None:
        handlers.append(logging.FileHandler(log_file, mode="a"))
    logging.basicConfig(
        format="%(asctime)s %(levelname)-8s [%(filename)s:%(lineno)d] %(message)s",
        datefmt="(%m-%d) %H:%M:%S",
        level=level,
        handlers=handlers,
        force=True,
    )


def main(argv: Sequence[str] | None = None) -> int:
    args = parse_args(argv)
    setup_logging(args.log_level, args.log_file)
    logger.info("Arguments: %s", args)

    try:
        if args.edge_list is not None:
            triples = read_edge_list(args.edge_list)
        else:
            triples = random_edge_list(np.random.default_rng(args.seed))
            print(f"Input:\n{format_edge_list(triples)}")
        graph = build_graph(triples)
        source, sink = resolve_terminals(graph, args.source, args.sink)
    except AugflowInputError as e:
        logger.error(e.message)
        return 1

    print(f"Graph: {to_mermaid(graph)}")

    solver = FordFulkerson(graph, source, sink, frontier=args.frontier)
    flow = solver.compute_max_flow()
    print(f"Flow: {flow}")
    print(f"\nFinal Graph:\n{to_mermaid(graph)}")

    if args.verify and source != sink:
        expected = reference_max_flow(graph, source, sink)
        if expected != flow:
            logger.warning(
                "Flow %d differs from networkx's maximum flow %d. "
                "The network needs flow cancellation, which this solver does not do.",
                flow,
                expected,
            )
        else:
            logger.info("Flow matches networkx's maximum flow.")

    if args.draw is not None:
        vis = FlowVisualizer(graph)
        fig, ax = plt.subplots(figsize=(8, 6), tight_layout=True)
        vis.draw(ax)
        vis.draw_min_cut(ax, source)
        fig.savefig(args.draw, format="PNG")
        plt.close(fig)
        logger.info("Saved drawing to %s", args.draw)

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
