# -*- coding: utf-8 -*-
"""
Priority frontier used by the shortest-path search.

`Frontier` is a value: ``insert`` and ``extract_min`` return a new frontier and leave
the receiver untouched, so two searches can never share or corrupt each other's state.
It is implemented as a persistent leftist heap: new frontiers share the unchanged
subtrees of the old one, and both operations cost O(log n).

Notes
-----
- Equal priorities come out in insertion order.
- There is no decrease-key: the same item may be queued several times with different
  priorities. Discarding the stale copies is left to the caller.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, NamedTuple, Optional, Tuple

__all__ = ["Frontier"]


class _HeapNode(NamedTuple):
    rank: int
    key: Tuple[float, int]  # (priority, insertion sequence)
    item: Any
    left: Optional[_HeapNode]
    right: Optional[_HeapNode]


def _rank(node: Optional[_HeapNode]) -> int:
    return 0 if node is None else node.rank


def _merge(a: Optional[_HeapNode], b: Optional[_HeapNode]) -> Optional[_HeapNode]:
    if a is None:
        return b
    if b is None:
        return a
    if b.key < a.key:
        a, b = b, a

    # Only the right spine is rebuilt; a.left is shared as-is
    merged = _merge(a.right, b)
    left = a.left
    if _rank(left) < _rank(merged):
        left, merged = merged, left
    return _HeapNode(_rank(merged) + 1, a.key, a.item, left, merged)


@dataclass(frozen=True)
class Frontier:
    """
    Immutable min-priority queue.

    Examples
    --------
    >>> frontier = Frontier.empty().insert("B", 4).insert("C", 2)
    >>> item, rest = frontier.extract_min()
    >>> item, len(rest), len(frontier)
    ('C', 1, 2)
    """

    _root: Optional[_HeapNode] = None
    _size: int = 0
    _sequence: int = 0

    @classmethod
    def empty(cls) -> Frontier:
        """Frontier with no items."""
        return cls()

    def insert(self, item: Any, priority: float) -> Frontier:
        """Return a new frontier holding `item` at `priority` on top of the current items."""
        single = _HeapNode(1, (priority, self._sequence), item, None, None)
        return Frontier(_merge(self._root, single), self._size + 1, self._sequence + 1)

    def extract_min(self) -> Tuple[Any, Frontier]:
        """
        Take the lowest-priority item.

        Returns
        -------
        tuple
            ``(item, frontier_without_item)``, or ``(None, self)`` when empty.
        """
        root = self._root
        if root is None:
            return None, self
        rest = Frontier(_merge(root.left, root.right), self._size - 1, self._sequence)
        return root.item, rest

    def is_empty(self) -> bool:
        return self._root is None

    def __len__(self) -> int:
        return self._size
