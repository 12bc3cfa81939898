# -*- coding: utf-8 -*-
"""
`netpaths` — build weighted graphs from edge lists, query shortest paths, analyze structure.

The three entry points are re-exported here:

- `build_graph(edges)`            – validated, immutable adjacency-list graph
- `find_paths(graph, start, end)` – shortest path between two nodes (Dijkstra)
- `analyze_graph(graph)`          – node/edge counts, components, connectivity, density

Every entry point returns ``Ok(value)`` or ``Err(error)`` (from the `result` package)
instead of raising.

Subpackages:

- `netpaths.pre`       – edge list validation, graph construction, DataFrame ingestion
- `netpaths.analysis`  – shortest paths and structural analysis
- `netpaths.post`      – export to Pandas and NetworkX
"""

from __future__ import annotations

from result import Err, Ok, Result, UnwrapError

from netpaths.utils.config import GraphConfig
from netpaths.utils.errors import EmptyGraph, GraphError, InvalidGraph, NodeNotFound, NoPath, PathError
from netpaths.utils.types import (
    Edge,
    Graph,
    GraphAnalysis,
    Node,
    ShortestPath,
    Weight,
    is_valid_node,
    is_valid_weight,
)
from netpaths.pre import build_graph
from netpaths.analysis import analyze_graph, find_paths

__all__ = [
    "pre",
    "analysis",
    "post",
    "__version__",
    "build_graph",
    "find_paths",
    "analyze_graph",
    "GraphConfig",
    "Edge",
    "Graph",
    "GraphAnalysis",
    "Node",
    "ShortestPath",
    "Weight",
    "is_valid_node",
    "is_valid_weight",
    "EmptyGraph",
    "InvalidGraph",
    "NodeNotFound",
    "NoPath",
    "GraphError",
    "PathError",
    "Ok",
    "Err",
    "Result",
    "UnwrapError",
]

# Optional version placeholder; replace at build time if needed
__version__ = "0.1.0"
