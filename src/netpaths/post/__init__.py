# -*- coding: utf-8 -*-
"""
Post-processing subpackage: export of built graphs.

This subpackage re-exports user-facing functions so they can be imported directly:

- `edges_to_pandas` – edge list table (Pandas) of a graph
- `to_networkx` – NetworkX ``MultiDiGraph`` of a graph
"""

from __future__ import annotations

from .export import edges_to_pandas, to_networkx

__all__ = ["edges_to_pandas", "to_networkx"]
