# -*- coding: utf-8 -*-
"""
Pre-processing subpackage: edge list validation and graph construction.

This subpackage re-exports user-facing functions so they can be imported directly:

- `validate_edges` – check raw edges before building
- `build_graph` – build the immutable adjacency-list graph
- `edges_from_frame`, `build_graph_from_frame` – read edge lists from Polars/Pandas tables
"""

from __future__ import annotations

from .validator import validate_edges
from .builder import build_graph
from .frames import edges_from_frame, build_graph_from_frame

__all__ = [
    "validate_edges",
    "build_graph",
    "edges_from_frame",
    "build_graph_from_frame",
]
