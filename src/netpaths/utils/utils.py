# -*- coding: utf-8 -*-
"""
General-purpose utilities for netpaths.

This module provides small helpers for:

- console output gated by ``GraphConfig.main_print`` (`echo`).
- lightweight formatting (`to_engineering_notation`, `format_path`).
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterable

if TYPE_CHECKING:  # noqa: F401
    from netpaths.utils.config import GraphConfig
    from netpaths.utils.types import Node

__all__ = [
    "echo",
    "to_engineering_notation",
    "format_path",
]


# -----------------------------------------------------------------------------
# Console UX
# -----------------------------------------------------------------------------
def echo(message: str, config: GraphConfig) -> None:
    """
    Print `message` when ``config.main_print`` is enabled.
    """
    if config.main_print:
        print(message)


# -----------------------------------------------------------------------------
# Formatting helpers
# -----------------------------------------------------------------------------
def to_engineering_notation(count: int) -> str:
    """
    Shorten a node or edge count for the console summaries (``12500`` -> ``"12.5k"``).

    Counts below one thousand are printed as is; larger ones get a ``k``, ``M``, ``G``,
    ``T`` or ``P`` suffix with three significant digits.

    >>> to_engineering_notation(7), to_engineering_notation(1500), to_engineering_notation(2_340_000)
    ('7', '1.5k', '2.34M')
    """
    suffixes = ["", "k", "M", "G", "T", "P"]
    magnitude = min(len(suffixes) - 1, (len(str(abs(count))) - 1) // 3)
    if magnitude == 0:
        return str(count)
    return f"{count / 10 ** (3 * magnitude):.3g}{suffixes[magnitude]}"


def format_path(path: Iterable[Node]) -> str:
    """
    Render a node sequence as ``"A -> B -> C"``.

    >>> format_path(["A", "B", 3])
    'A -> B -> 3'
    """
    return " -> ".join(str(node) for node in path)
