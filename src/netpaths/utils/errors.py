# -*- coding: utf-8 -*-
"""
Error variants carried by ``Err`` results (`result` package).

Two closed families:

- ``GraphError`` – ``EmptyGraph`` | ``InvalidGraph(reason)``, returned by graph construction
  and analysis.
- ``PathError``  – ``NodeNotFound(node)`` | ``NoPath(source, target)``, returned by path queries.

The variants are plain frozen dataclasses, not exceptions: they are returned inside
``Err`` and never raised. Each one carries a ``kind`` tag with its variant name.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Union

from netpaths.utils.types import Node

__all__ = [
    "EmptyGraph",
    "InvalidGraph",
    "NodeNotFound",
    "NoPath",
    "GraphError",
    "PathError",
]


# -----------------------------------------------------------------------------
# Graph errors
# -----------------------------------------------------------------------------
@dataclass(frozen=True)
class EmptyGraph:
    """The edge list (or the graph) holds no edge at all."""

    kind: str = field(default="EmptyGraph", init=False, repr=False)

    def __str__(self) -> str:
        return "EmptyGraph: the graph contains no edges."


@dataclass(frozen=True)
class InvalidGraph:
    """An input edge failed validation; ``reason`` names the first violation."""

    reason: str
    kind: str = field(default="InvalidGraph", init=False, repr=False)

    def __str__(self) -> str:
        return f"InvalidGraph: {self.reason}"


# -----------------------------------------------------------------------------
# Path errors
# -----------------------------------------------------------------------------
@dataclass(frozen=True)
class NodeNotFound:
    """``node`` is not part of the graph."""

    node: Node
    kind: str = field(default="NodeNotFound", init=False, repr=False)

    def __str__(self) -> str:
        return f"NodeNotFound: {self.node!r} is not in the graph."


@dataclass(frozen=True)
class NoPath:
    """Both nodes exist but ``target`` cannot be reached from ``source``."""

    source: Node
    target: Node
    kind: str = field(default="NoPath", init=False, repr=False)

    def __str__(self) -> str:
        return f"NoPath: no path from {self.source!r} to {self.target!r}."


GraphError = Union[EmptyGraph, InvalidGraph]
PathError = Union[NodeNotFound, NoPath]
