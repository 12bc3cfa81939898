# -*- coding: utf-8 -*-
"""
Shortest-path queries using Dijkstra over the adjacency-list graph.

`find_paths` answers one ``start -> target`` query. Each call runs its own search with
a private `Frontier` and private bookkeeping, and only reads the graph, so the same
``Graph`` can be queried from several threads at once.

Notes
-----
- Weights are non-negative (guaranteed by ``build_graph``), which Dijkstra requires.
- Stale frontier entries (nodes queued again after a shorter distance was found) are
  skipped when extracted, giving O((V + E) log V) overall.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Dict, Mapping, Optional, Sequence, Union

from result import Err, Ok, Result

from netpaths.analysis.frontier import Frontier
from netpaths.utils.config import GraphConfig, resolve_config
from netpaths.utils.errors import NodeNotFound, NoPath, PathError
from netpaths.utils.types import Edge, Node, ShortestPath, is_valid_node
from netpaths.utils.utils import echo, format_path

__all__ = ["find_paths"]


@dataclass
class _SearchState:
    distances: Dict[Node, float]
    previous: Dict[Node, Optional[Node]]


def _run_dijkstra(graph: Mapping[Node, Sequence[Edge]], start: Node) -> _SearchState:
    """
    Single-source Dijkstra from `start`.

    Every node of the graph (keys and edge destinations) ends up in ``distances``;
    unreachable nodes keep ``math.inf``.
    """
    distances: Dict[Node, float] = {}
    previous: Dict[Node, Optional[Node]] = {}
    for node, outgoing in graph.items():
        distances.setdefault(node, math.inf)
        previous.setdefault(node, None)
        for edge in outgoing:
            distances.setdefault(edge.target, math.inf)
            previous.setdefault(edge.target, None)
    distances[start] = 0

    visited = set()
    frontier = Frontier.empty().insert(start, 0)

    while not frontier.is_empty():
        current, frontier = frontier.extract_min()
        if current in visited:
            continue  # stale entry
        visited.add(current)

        current_distance = distances[current]
        for edge in graph.get(current, ()):
            if edge.target in visited:
                continue
            candidate = current_distance + edge.weight
            # Strict comparison: on ties the first edge in stored order wins
            if candidate < distances[edge.target]:
                distances[edge.target] = candidate
                previous[edge.target] = current
                frontier = frontier.insert(edge.target, candidate)

    return _SearchState(distances, previous)


def _reconstruct_path(state: _SearchState, start: Node, target: Node) -> Result[ShortestPath, PathError]:
    if not is_valid_node(target) or target not in state.distances:
        return Err(NodeNotFound(node=target))

    distance = state.distances[target]
    if distance == math.inf:
        return Err(NoPath(source=start, target=target))

    path = [target]
    while path[-1] != start:
        path.append(state.previous[path[-1]])
    path.reverse()
    return Ok(ShortestPath(path=tuple(path), distance=distance))


def find_paths(
    graph: Mapping[Node, Sequence[Edge]],
    start: Node,
    target: Node,
    *,
    config: Optional[Union[dict, GraphConfig]] = None,
) -> Result[ShortestPath, PathError]:
    """
    Find the shortest path from `start` to `target`.

    Parameters
    ----------
    graph : Graph
        Graph built by ``build_graph``. Only read.
    start : Node
        Source node; must have an entry in the graph.
    target : Node
        Destination node.
    config : dict or GraphConfig, optional
        Only ``main_print`` is used here.

    Returns
    -------
    Ok(ShortestPath)
        Nodes from `start` to `target` inclusive, and the total distance.
        ``start == target`` gives ``([start], 0)`` without searching.
    Err(NodeNotFound)
        With ``node=start`` if the graph is empty or `start` is not in it;
        with ``node=target`` if `target` is not in the graph.
    Err(NoPath)
        If both nodes exist but `target` is unreachable from `start`.

    Examples
    --------
    >>> from netpaths import build_graph
    >>> graph = build_graph([("A", "B", 4), ("A", "C", 2), ("C", "B", 1)]).unwrap()
    >>> find_paths(graph, "A", "B").unwrap()
    ShortestPath(path=('A', 'C', 'B'), distance=3)
    """
    config = resolve_config(config)

    if len(graph) == 0 or not is_valid_node(start) or start not in graph:
        echo(f"Path search aborted: start node {start!r} is not in the graph.", config)
        return Err(NodeNotFound(node=start))

    if start == target:
        return Ok(ShortestPath(path=(start,), distance=0))

    state = _run_dijkstra(graph, start)
    result = _reconstruct_path(state, start, target)

    if result.is_ok():
        echo(
            f"Shortest path found: {format_path(result.ok_value.path)} "
            f"(distance {result.ok_value.distance}, {result.ok_value.nb_edges} edges).",
            config,
        )
    else:
        echo(f"Path search failed: {result.err_value}", config)
    return result
