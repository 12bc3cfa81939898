# -*- coding: utf-8 -*-
"""
Core constants for netpaths.

This module centralizes:

- the validation failure reasons reported by ``InvalidGraph`` (``REASON_*``).
- the default edge list column names (``DEFAULT_COLUMNS``).

Notes
-----
* The ``REASON_*`` strings are part of the public contract: callers compare them.
"""

from __future__ import annotations

from typing import Dict

__all__ = [
    "REASON_INVALID_NODE",
    "REASON_INVALID_WEIGHT",
    "REASON_NEGATIVE_WEIGHT",
    "REASON_INVALID_EDGE",
    "REASON_MISSING_COLUMNS",
    "DEFAULT_COLUMNS",
]


# -----------------------------------------------------------------------------
# Validation reasons
# -----------------------------------------------------------------------------
REASON_INVALID_NODE: str = "Invalid node type"
REASON_INVALID_WEIGHT: str = "Invalid weight: NaN or Infinity"
REASON_NEGATIVE_WEIGHT: str = "Invalid weight: negative value"

# Raw edge that is neither an Edge, a 3-item sequence nor a record
REASON_INVALID_EDGE: str = "Invalid edge format"

# Prefix, followed by the comma-separated missing column names
REASON_MISSING_COLUMNS: str = "Missing required columns"


# -----------------------------------------------------------------------------
# Edge list columns
# -----------------------------------------------------------------------------
# Keys are the GraphConfig field names, values the default column names.
DEFAULT_COLUMNS: Dict[str, str] = {
    "source_column": "from",
    "target_column": "to",
    "weight_column": "weight",
}
