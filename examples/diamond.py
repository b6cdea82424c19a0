import matplotlib.pyplot as plt

from augflow import FordFulkerson, FlowVisualizer, build_graph, resolve_terminals, to_mermaid


# Build the graph from (source, dest, capacity) triples.
graph = build_graph([("s", "a", 10), ("a", "t", 5), ("s", "b", 5), ("b", "t", 10)])
source, sink = resolve_terminals(graph, "s", "t")

# Run the solver one augmentation at a time.
# Pass frontier="lifo" for depth-first path search.
solver = FordFulkerson(graph, source, sink)
for augmentation in solver.run():
    path = " -> ".join(graph.node_name(node_id) for node_id in augmentation.path)
    print(f"{path}: +{augmentation.bottleneck}")
print(f"Flow: {graph.flow_out(source)[0]}")
print(to_mermaid(graph))

# Draw the final flow and the source side of the minimum cut.
vis = FlowVisualizer(graph)
fig, ax = plt.subplots(figsize=(8, 6), tight_layout=True)
vis.draw(ax)
vis.draw_min_cut(ax, source)
fig.savefig("diamond.png")
