# -*- coding: utf-8 -*-
"""
Data model shared by every netpaths subpackage.

This module defines:

- ``Node`` and ``Weight`` aliases, with their well-formedness predicates
  (`is_valid_node`, `is_valid_weight`).
- ``Edge`` – a directed, weighted connection ``(source, target, weight)``.
- ``Graph`` – the immutable adjacency-list mapping built by ``netpaths.pre.build_graph``.
- ``ShortestPath`` and ``GraphAnalysis`` – result records of the analysis subpackage.

Notes
-----
* ``bool`` is never accepted as a node or a weight, although Python treats it as an ``int``.
* Node equality follows Python value semantics, so ``1`` and ``1.0`` are the same node.
"""

from __future__ import annotations

import math
import numbers
from dataclasses import dataclass
from collections.abc import Mapping
from types import MappingProxyType
from typing import Any, Iterable, Iterator, NamedTuple, Optional, Tuple, Union

__all__ = [
    "Node",
    "Weight",
    "Edge",
    "Graph",
    "ShortestPath",
    "GraphAnalysis",
    "is_valid_node",
    "is_valid_weight",
    "is_finite_number",
]

Node = Union[str, int, float]
Weight = float


# -----------------------------------------------------------------------------
# Predicates
# -----------------------------------------------------------------------------
def is_finite_number(value: Any) -> bool:
    """
    Return True for a real, finite number (``bool`` excluded).

    Parameters
    ----------
    value : Any
        Candidate value.

    Returns
    -------
    bool

    Notes
    -----
    - Integers (and other rationals) are always finite, even beyond the float range
      where ``math.isfinite`` would overflow.
    """
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        return False
    if isinstance(value, numbers.Rational):
        return True
    return math.isfinite(value)


def is_valid_node(node: Any) -> bool:
    """
    Check that `node` can identify a vertex: a text label or a finite number.

    >>> is_valid_node("A"), is_valid_node(3), is_valid_node(None), is_valid_node(float("nan"))
    (True, True, False, False)
    """
    return isinstance(node, str) or is_finite_number(node)


def is_valid_weight(weight: Any) -> bool:
    """
    Check that `weight` is a finite, non-negative number.

    >>> is_valid_weight(0), is_valid_weight(2.5), is_valid_weight(-1), is_valid_weight(float("inf"))
    (True, True, False, False)
    """
    return is_finite_number(weight) and weight >= 0


# -----------------------------------------------------------------------------
# Edge
# -----------------------------------------------------------------------------
class Edge(NamedTuple):
    """
    Directed, weighted edge. A bidirectional link needs two edges.

    Attributes
    ----------
    source : Node
        Start node of the edge.
    target : Node
        End node of the edge.
    weight : Weight
        Non-negative finite cost of the edge.
    """

    source: Node
    target: Node
    weight: Weight


# -----------------------------------------------------------------------------
# Graph
# -----------------------------------------------------------------------------
class Graph(Mapping):
    """
    Immutable adjacency list: a mapping from each node to the tuple of its outgoing edges.

    Key order and outgoing edge order follow the edge list the graph was built from.
    Parallel edges between the same pair of nodes are kept. Nodes without outgoing
    edges map to an empty tuple.

    The graph exposes no mutating method, so the same instance can be shared by
    concurrent readers (path queries, analysis) without copying.

    Parameters
    ----------
    adjacency : Mapping[Node, Iterable[Edge]], optional
        Outgoing edges per node. Copied on construction.

    Notes
    -----
    - Use ``netpaths.pre.build_graph`` to obtain a validated graph. Building a ``Graph``
      directly skips validation and the endpoint invariant.
    """

    __slots__ = ("_adjacency",)

    def __init__(self, adjacency: Optional[Mapping[Node, Iterable[Edge]]] = None) -> None:
        adjacency = adjacency or {}
        self._adjacency = MappingProxyType(
            {node: tuple(edges) for node, edges in adjacency.items()}
        )

    def __getitem__(self, node: Node) -> Tuple[Edge, ...]:
        return self._adjacency[node]

    def __iter__(self) -> Iterator[Node]:
        return iter(self._adjacency)

    def __len__(self) -> int:
        return len(self._adjacency)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(nodes={self.number_of_nodes()}, "
            f"edges={self.number_of_edges()})"
        )

    def edges(self) -> Iterator[Edge]:
        """Iterate over every edge, node by node, in stored order."""
        for outgoing in self._adjacency.values():
            yield from outgoing

    def number_of_nodes(self) -> int:
        return len(self._adjacency)

    def number_of_edges(self) -> int:
        return sum(len(outgoing) for outgoing in self._adjacency.values())


# -----------------------------------------------------------------------------
# Results
# -----------------------------------------------------------------------------
@dataclass(frozen=True)
class ShortestPath:
    """
    Shortest path between two nodes.

    Attributes
    ----------
    path : tuple of Node
        Nodes from source to target, both included. A single node when source == target.
    distance : float
        Sum of the edge weights along `path` (0 when source == target).
    """

    path: Tuple[Node, ...]
    distance: float

    @property
    def nb_edges(self) -> int:
        """Number of edges travelled: ``len(path) - 1``."""
        return len(self.path) - 1


@dataclass(frozen=True)
class GraphAnalysis:
    """
    Structural metrics of a graph.

    Attributes
    ----------
    node_count : int
        Number of distinct nodes (edge sources and destinations).
    edge_count : int
        Number of directed edges, parallel edges and self-loops counted individually.
    is_connected : bool
        True when a single component covers every node.
    components : tuple of tuple of Node
        Connected components under undirected reachability. Every node is in exactly one.
    density : float
        ``edge_count / (node_count * (node_count - 1))``, 0 for a single node.
        Not capped: parallel edges or self-loops can push it above 1.
    """

    node_count: int
    edge_count: int
    is_connected: bool
    components: Tuple[Tuple[Node, ...], ...]
    density: float

    def describe(self) -> None:
        """
        Display a summary of the analysis.
        """
        print("\nGraphAnalysis:")
        print(f" - Nodes                    : {self.node_count}")
        print(f" - Edges                    : {self.edge_count}")
        print(f" - Connected                : {self.is_connected}")
        print(f" - Components               : {len(self.components)}")
        print(f" - Component sizes          : {[len(c) for c in self.components]}")
        print(f" - Density                  : {self.density:.3f}")
