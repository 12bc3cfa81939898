# -*- coding: utf-8 -*-
"""
Export of a built graph to other graph and table libraries.

- `edges_to_pandas` – one row per directed edge, with the configured column names.
- `to_networkx` – a NetworkX ``MultiDiGraph`` (parallel edges kept), for plotting or
  for cross-checking results with the NetworkX algorithms.
"""

from __future__ import annotations

from typing import Optional, Union

import networkx as nx
import pandas as pd

from netpaths.utils.config import GraphConfig, resolve_config
from netpaths.utils.types import Graph
from netpaths.utils.utils import echo

__all__ = ["edges_to_pandas", "to_networkx"]


def edges_to_pandas(
    graph: Graph,
    *,
    config: Optional[Union[dict, GraphConfig]] = None,
) -> pd.DataFrame:
    """
    Flatten the adjacency list into an edge list table.

    Parameters
    ----------
    graph : Graph
        Graph built by ``build_graph``.
    config : dict or GraphConfig, optional
        Provides the column names (``source_column``, ``target_column``, ``weight_column``).

    Returns
    -------
    pd.DataFrame
        Columns ``[source, target, weight]``, rows in stored edge order. Node columns
        use the ``object`` dtype so that text and numeric nodes can be mixed.
    """
    config = resolve_config(config)

    edges = list(graph.edges())
    return pd.DataFrame(
        {
            config.source_column: pd.Series([e.source for e in edges], dtype="object"),
            config.target_column: pd.Series([e.target for e in edges], dtype="object"),
            config.weight_column: pd.Series([e.weight for e in edges], dtype="float64"),
        }
    )


def to_networkx(
    graph: Graph,
    *,
    config: Optional[Union[dict, GraphConfig]] = None,
) -> nx.MultiDiGraph:
    """
    Build a NetworkX ``MultiDiGraph`` with the same nodes and edges.

    Parameters
    ----------
    graph : Graph
        Graph built by ``build_graph``.
    config : dict or GraphConfig, optional
        The edge attribute holding the weight is named after ``weight_column``.

    Returns
    -------
    networkx.MultiDiGraph
        Parallel edges are separate multi-edges.

    Examples
    --------
    >>> from netpaths import build_graph
    >>> graph = build_graph([("A", "B", 4), ("B", "E", 7), ("A", "E", 12)]).unwrap()
    >>> nx_graph = to_networkx(graph)
    >>> nx.dijkstra_path_length(nx_graph, "A", "E", weight="weight")
    11.0
    """
    config = resolve_config(config)

    edgelist_df = edges_to_pandas(graph, config=config)
    nx_graph = nx.from_pandas_edgelist(
        edgelist_df,
        source=config.source_column,
        target=config.target_column,
        edge_attr=config.weight_column,
        create_using=nx.MultiDiGraph,
    )
    nx_graph.add_nodes_from(graph)

    echo(
        f"\nNetworkX graph created successfully with {nx_graph.number_of_nodes()} nodes "
        f"and {nx_graph.number_of_edges()} edges.",
        config,
    )
    return nx_graph
