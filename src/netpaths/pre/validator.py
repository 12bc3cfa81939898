# -*- coding: utf-8 -*-
"""
Edge list validation.

`validate_edges` scans raw edges in input order and stops at the first violation.
For a given edge the node check comes before the weight checks, so an edge with both
a bad node and a bad weight reports ``"Invalid node type"``.

Raw edges may be ``Edge`` instances, ``(source, target, weight)`` tuples or lists, or
records (mappings) with the keys ``'from'``, ``'to'`` and ``'weight'``.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Optional, Sequence, Tuple

from result import Err, Ok, Result

from netpaths.utils.constant import (
    REASON_INVALID_EDGE,
    REASON_INVALID_NODE,
    REASON_INVALID_WEIGHT,
    REASON_NEGATIVE_WEIGHT,
)
from netpaths.utils.errors import GraphError, InvalidGraph
from netpaths.utils.types import Edge, is_finite_number, is_valid_node

__all__ = ["validate_edges", "as_edge"]


def as_edge(raw: Any) -> Optional[Edge]:
    """
    Normalize one raw edge into an ``Edge`` without checking its values.

    Returns None when `raw` has none of the accepted shapes.
    """
    if isinstance(raw, Edge):
        return raw
    if isinstance(raw, Mapping):
        return Edge(raw.get("from"), raw.get("to"), raw.get("weight"))
    if isinstance(raw, (tuple, list)) and len(raw) == 3:
        return Edge(*raw)
    return None


def _check_edge(edge: Edge) -> Optional[str]:
    if not is_valid_node(edge.source) or not is_valid_node(edge.target):
        return REASON_INVALID_NODE
    if not is_finite_number(edge.weight):
        return REASON_INVALID_WEIGHT
    if edge.weight < 0:
        return REASON_NEGATIVE_WEIGHT
    return None


def validate_edges(edges: Sequence[Any]) -> Result[Tuple[Edge, ...], GraphError]:
    """
    Check raw edges for node and weight well-formedness.

    Parameters
    ----------
    edges : sequence
        Raw edges, scanned in order.

    Returns
    -------
    Ok(tuple of Edge)
        The normalized edges, in input order, when every edge is valid.
    Err(InvalidGraph)
        For the first invalid edge, with one of the reasons:

        - ``"Invalid edge format"`` – the edge has none of the accepted shapes.
        - ``"Invalid node type"`` – an endpoint is not a text label or a finite number.
        - ``"Invalid weight: NaN or Infinity"`` – the weight is not a finite number.
        - ``"Invalid weight: negative value"`` – the weight is below zero.

    Notes
    -----
    - An empty sequence is valid here; emptiness is checked by ``build_graph``.
    """
    normalized = []
    for raw in edges:
        edge = as_edge(raw)
        if edge is None:
            return Err(InvalidGraph(reason=REASON_INVALID_EDGE))

        reason = _check_edge(edge)
        if reason is not None:
            return Err(InvalidGraph(reason=reason))
        normalized.append(edge)

    return Ok(tuple(normalized))
