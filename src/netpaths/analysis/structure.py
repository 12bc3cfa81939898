# -*- coding: utf-8 -*-
"""
Structural analysis of a graph: counts, connected components and density.

Components are computed under undirected reachability: for this pass only, every
directed edge ``u -> v`` also links ``v`` back to ``u``. The analysis reads the graph
through a temporary NetworkX view and never modifies it. Edge count and
density stay directed.
"""

from __future__ import annotations

from typing import Dict, List, Mapping, Optional, Sequence, Tuple, Union

import networkx as nx
from result import Err, Ok, Result

from netpaths.utils.config import GraphConfig, resolve_config
from netpaths.utils.errors import EmptyGraph, GraphError
from netpaths.utils.types import Edge, GraphAnalysis, Node
from netpaths.utils.utils import echo, to_engineering_notation

__all__ = ["analyze_graph"]


def _collect_nodes(graph: Mapping[Node, Sequence[Edge]]) -> List[Node]:
    """Keys first, then destinations never seen as keys, in order of appearance."""
    nodes: Dict[Node, None] = dict.fromkeys(graph)
    for outgoing in graph.values():
        for edge in outgoing:
            nodes.setdefault(edge.target)
    return list(nodes)


def _undirected_view(graph: Mapping[Node, Sequence[Edge]], nodes: List[Node]) -> nx.MultiDiGraph:
    """Transient NetworkX copy of the graph topology; weights are not needed here."""
    view = nx.MultiDiGraph()
    view.add_nodes_from(nodes)
    view.add_edges_from((node, edge.target) for node, outgoing in graph.items() for edge in outgoing)
    return view


def _connected_components(
    graph: Mapping[Node, Sequence[Edge]], nodes: List[Node]
) -> List[Tuple[Node, ...]]:
    # Weak components of the directed view are the undirected components
    position = {node: index for index, node in enumerate(nodes)}
    view = _undirected_view(graph, nodes)
    return [
        tuple(sorted(component, key=position.__getitem__))
        for component in nx.weakly_connected_components(view)
    ]


def _density(node_count: int, edge_count: int) -> float:
    # Directed formula, not clamped to [0, 1]
    if node_count <= 1:
        return 0.0
    return edge_count / (node_count * (node_count - 1))


def analyze_graph(
    graph: Mapping[Node, Sequence[Edge]],
    *,
    config: Optional[Union[dict, GraphConfig]] = None,
) -> Result[GraphAnalysis, GraphError]:
    """
    Compute node and edge counts, connected components, connectivity and density.

    Parameters
    ----------
    graph : Graph
        Graph built by ``build_graph``. Only read.
    config : dict or GraphConfig, optional
        Only ``main_print`` is used here.

    Returns
    -------
    Ok(GraphAnalysis)
        See ``GraphAnalysis`` for the meaning of each metric.
    Err(EmptyGraph)
        If the graph has no node.

    Notes
    -----
    - ``edge_count`` counts directed edges, parallel edges and self-loops included.
    - ``density = edge_count / (n * (n - 1))`` is not clamped: with parallel edges or
      self-loops it can exceed 1.
    - Components are listed in discovery order (starting from the first key); nodes inside
      a component follow the same order (keys first, then destination-only nodes).
    - Components come from ``networkx.weakly_connected_components`` on a transient
      ``MultiDiGraph`` copy of the topology.
    """
    config = resolve_config(config)

    if len(graph) == 0:
        echo("Analysis aborted: the graph is empty.", config)
        return Err(EmptyGraph())

    nodes = _collect_nodes(graph)
    node_count = len(nodes)
    edge_count = sum(len(outgoing) for outgoing in graph.values())
    components = _connected_components(graph, nodes)

    analysis = GraphAnalysis(
        node_count=node_count,
        edge_count=edge_count,
        is_connected=len(components) == 1,
        components=tuple(tuple(component) for component in components),
        density=_density(node_count, edge_count),
    )

    echo(
        f"Graph analysed: {to_engineering_notation(node_count)} nodes, "
        f"{to_engineering_notation(edge_count)} edges, {len(components)} component(s), "
        f"density {analysis.density:.3f}.",
        config,
    )
    return Ok(analysis)
