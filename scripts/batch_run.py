"""Solve many random networks and compare against networkx's maximum flow."""

import argparse
import datetime
import time
import multiprocessing
from pathlib import Path

import numpy as np
import pandas as pd

from augflow import (
    FordFulkerson,
    build_graph,
    random_edge_list,
    reference_max_flow,
    resolve_terminals,
    verify_flow_conservation,
)


def run_task(task: dict) -> dict:
    triples = random_edge_list(np.random.default_rng(task["seed"]), max_capacity=task["max_capacity"])
    graph = build_graph(triples)
    result = dict(task, num_nodes=graph.num_nodes, num_edges=graph.num_edges)
    source, sink = resolve_terminals(graph, "s", "t")

    solver = FordFulkerson(graph, source, sink, frontier=task["frontier"])
    start = time.time()
    flow = solver.compute_max_flow()
    elapsed = time.time() - start
    return dict(
        result,
        flow=flow,
        reference=reference_max_flow(graph, source, sink),
        augmentations=solver.num_augmentations,
        conserved=verify_flow_conservation(graph, source, sink),
        time_s=elapsed,
    )


def main():
    parser = argparse.ArgumentParser()
    parser.add_argument("--num_graphs", type=int, default=100, help="Number of random networks per frontier discipline")
    parser.add_argument("--first_seed", type=int, default=0, help="Seed of the first network, the rest are consecutive")
    parser.add_argument("--max_capacity", type=int, default=20, help="Exclusive upper bound of edge capacities")
    parser.add_argument("--output_dir", type=str, required=True, help="Path for output results, this will contain a timestamped CSV summary")
    args = parser.parse_args()

    time_stamp = datetime.datetime.fromtimestamp(
        time.time()).strftime('%m%d_%H%M%S')
    output_dir = Path(args.output_dir) / time_stamp
    output_dir.mkdir(parents=True, exist_ok=False)

    tasks = []
    for frontier in ["fifo", "lifo"]:
        for seed in range(args.first_seed, args.first_seed + args.num_graphs):
            tasks.append(dict(seed=seed, frontier=frontier, max_capacity=args.max_capacity))

    results = []
    with multiprocessing.Pool() as p:
        res_itr = p.imap_unordered(run_task, tasks)
        for i, res in enumerate(res_itr):
            results.append(res)
            print(f'Completed {i+1}/{len(tasks)}', end='\r')
        print('\n')

    df = pd.DataFrame(results).sort_values(["frontier", "seed"])
    df["optimal"] = df.flow == df.reference
    df.to_csv(output_dir / "summary.csv", index=False)
    print(df.groupby("frontier")[["optimal", "augmentations"]].mean())


if __name__ == "__main__":
    main()
