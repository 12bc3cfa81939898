# -*- coding: utf-8 -*-
"""
Analysis subpackage: shortest-path queries and structural analysis.

For most users, `find_paths` and `analyze_graph` are the entry points. The class
`Frontier` in `netpaths.analysis.frontier` is the priority queue behind the path
search; it is intentionally not re-exported here.
"""

from __future__ import annotations

from .paths import find_paths
from .structure import analyze_graph
# Advanced (not re-exported): from .frontier import Frontier  # import explicitly if needed

__all__ = ["find_paths", "analyze_graph"]
