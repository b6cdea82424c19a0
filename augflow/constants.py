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

"""Constants used throughout the package."""

# Node names the command line looks up when none are given.
DEFAULT_SOURCE_NAME = "s"
DEFAULT_SINK_NAME = "t"

# Frontier disciplines understood by `augflow.search.find_path`.
FIFO = "fifo"
LIFO = "lifo"
FRONTIER_DISCIPLINES = (FIFO, LIFO)
DEFAULT_FRONTIER = FIFO

# Random network generator. Inner node names are drawn from the first
# `RANDOM_NAME_POOL` lowercase letters.
RANDOM_NAME_POOL = 10
RANDOM_INNER_EDGES = 10
RANDOM_SOURCE_EDGES = 5
RANDOM_SINK_EDGES = 5
RANDOM_MAX_CAPACITY = 20

# Edge-list text format.
EDGE_LIST_DELIMITER = ","

# Mermaid diagram framing.
MERMAID_HEADER = "```mermaid\nstateDiagram-v2\n"
MERMAID_FOOTER = "```"

# The default arguments for networkx.draw_networkx_nodes.
DEFAULT_NODE_ARGS = dict(node_color="#2a4b89", node_size=600, edgecolors="#000000")

# The default arguments for networkx.draw_networkx_labels.
DEFAULT_LABEL_ARGS = dict(font_color="#ffffff", font_size=10.0)

# The default arguments for networkx.draw_networkx_edges.
DEFAULT_EDGE_ARGS = dict(edge_color="#9fc887", width=1.5, arrowsize=15)

# Edges with no residual capacity left are drawn with these instead.
DEFAULT_SATURATED_EDGE_ARGS = dict(edge_color="#f542a4", width=3.0, arrowsize=15)

# The default arguments for highlighting the source side of the minimum cut.
DEFAULT_CUT_NODE_ARGS = dict(node_color="#00a6ff", node_size=800, edgecolors="#000000")
