# -*- coding: utf-8 -*-
"""
Graph construction from an edge list.

`build_graph` is the entry point of the package: it rejects empty input, validates the
edges (see `netpaths.pre.validator`) and builds the immutable adjacency-list ``Graph``
consumed by ``find_paths`` and ``analyze_graph``.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional, Sequence, Union

from result import Err, Ok, Result

from netpaths.pre.validator import validate_edges
from netpaths.utils.config import GraphConfig, resolve_config
from netpaths.utils.errors import EmptyGraph, GraphError
from netpaths.utils.types import Edge, Graph, Node
from netpaths.utils.utils import echo, to_engineering_notation

__all__ = ["build_graph"]


def _build_adjacency(edges: Sequence[Edge]) -> Graph:
    adjacency: Dict[Node, List[Edge]] = {}
    for edge in edges:
        adjacency.setdefault(edge.source, []).append(edge)
        # Destination-only nodes get an empty outgoing list
        adjacency.setdefault(edge.target, [])
    return Graph(adjacency)


def build_graph(
    edges: Sequence[Any],
    *,
    config: Optional[Union[dict, GraphConfig]] = None,
) -> Result[Graph, GraphError]:
    """
    Build an immutable adjacency-list graph from raw edges.

    Parameters
    ----------
    edges : sequence
        Raw directed edges: ``Edge`` instances, ``(source, target, weight)`` tuples
        or ``{'from', 'to', 'weight'}`` records. Undirected links need both directions.
    config : dict or GraphConfig, optional
        Only ``main_print`` is used here.

    Returns
    -------
    Ok(Graph)
        Every edge endpoint is a key. Each node keeps its outgoing edges in input
        order, parallel edges included.
    Err(EmptyGraph)
        If `edges` is empty (checked before validation).
    Err(InvalidGraph)
        The first validation failure, unchanged (see ``validate_edges``).

    Examples
    --------
    >>> graph = build_graph([("A", "B", 4), ("A", "C", 2)]).unwrap()
    >>> list(graph)
    ['A', 'B', 'C']
    """
    config = resolve_config(config)

    if len(edges) == 0:
        echo("Graph not built: the edge list is empty.", config)
        return Err(EmptyGraph())

    validated = validate_edges(edges)
    if validated.is_err():
        echo(f"Graph not built: {validated.err_value.reason}.", config)
        return validated

    graph = _build_adjacency(validated.ok_value)
    echo(
        f"\nDirected graph created successfully with {to_engineering_notation(graph.number_of_nodes())} nodes "
        f"and {to_engineering_notation(graph.number_of_edges())} edges.",
        config,
    )
    return Ok(graph)
