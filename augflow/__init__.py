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

"""Maximum flow with augmenting paths over a residual graph."""

__version__ = "0.0.1"

from augflow.exceptions import (
    AugflowBaseError,
    AugflowFlowError,
    AugflowGraphError,
    AugflowInputError,
)
from augflow.graph import FlowGraph, Node, ResidualEdge
from augflow.search import find_path
from augflow.solver import Augmentation, FordFulkerson, compute_max_flow, resolve_terminals
from augflow.edge_list import (
    build_graph,
    format_edge_list,
    parse_edge_list,
    random_edge_list,
    read_edge_list,
)
from augflow.graph_utils import (
    min_cut_capacity,
    reference_max_flow,
    residual_reachable,
    to_networkx,
    verify_flow_conservation,
)
from augflow.visualizer import FlowVisualizer, to_debug_string, to_mermaid

__all__ = [
    "AugflowBaseError",
    "AugflowFlowError",
    "AugflowGraphError",
    "AugflowInputError",
    "FlowGraph",
    "Node",
    "ResidualEdge",
    "find_path",
    "Augmentation",
    "FordFulkerson",
    "compute_max_flow",
    "resolve_terminals",
    "build_graph",
    "format_edge_list",
    "parse_edge_list",
    "random_edge_list",
    "read_edge_list",
    "min_cut_capacity",
    "reference_max_flow",
    "residual_reachable",
    "to_networkx",
    "verify_flow_conservation",
    "FlowVisualizer",
    "to_debug_string",
    "to_mermaid",
]
