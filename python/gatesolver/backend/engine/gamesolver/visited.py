"""Visited-state sets keyed by encoded states.

``insert(key)`` returns True iff *key* had not been seen before.  Three
flavours share that contract:

- ``RadixTree``: a binary radix (Patricia) tree over the packed bit
  string.  Similar piece layouts share long prefixes, so most of a key
  is stored once.
- ``HashVisitedSet``: a plain ``set`` of keys.
- ``NullVisitedSet``: dedup disabled, every key counts as new.
"""

from __future__ import annotations

import sys
from typing import Protocol

from gatesolver.backend.engine.gamesolver.encoding import get_bit


class VisitedSet(Protocol):
    def insert(self, key: bytes) -> bool: ...

    def memory_usage(self) -> int: ...

    def clear(self) -> None: ...

    def __len__(self) -> int: ...


# ======================================================================
#  Radix tree
# ======================================================================


class _Node:
    """Covers bits ``[start, end)`` of ``key``; children split on bit ``end``."""

    __slots__ = ("key", "start", "end", "children")

    def __init__(
        self,
        key: bytes,
        start: int,
        end: int,
        children: list[_Node | None] | None = None,
    ) -> None:
        self.key = key
        self.start = start
        self.end = end
        self.children: list[_Node | None] = children or [None, None]


class RadixTree:
    """Binary radix tree over fixed-length keys of *bits* bits."""

    def __init__(self, bits: int) -> None:
        self.bits = bits
        self._root: _Node | None = None
        self._count = 0
        self._nodes = 0
        self._key_bytes = 0

    def __len__(self) -> int:
        return self._count

    def _leaf(self, key: bytes, start: int) -> _Node:
        self._nodes += 1
        self._key_bytes += sys.getsizeof(key)
        self._count += 1
        return _Node(key, start, self.bits)

    def insert(self, key: bytes) -> bool:
        if self._root is None:
            self._root = self._leaf(key, 0)
            return True

        node = self._root
        while True:
            j = node.start
            while j < node.end and get_bit(key, j) == get_bit(node.key, j):
                j += 1

            if j < node.end:
                # Diverges inside this node's segment: split it at bit j.
                tail = _Node(node.key, j, node.end, node.children)
                self._nodes += 1
                node.end = j
                node.children = [None, None]
                node.children[get_bit(tail.key, j)] = tail
                node.children[get_bit(key, j)] = self._leaf(key, j)
                return True

            if j == self.bits:
                return False

            b = get_bit(key, j)
            child = node.children[b]
            if child is None:
                node.children[b] = self._leaf(key, j)
                return True
            node = child

    def __contains__(self, key: bytes) -> bool:
        node = self._root
        while node is not None:
            for j in range(node.start, node.end):
                if get_bit(key, j) != get_bit(node.key, j):
                    return False
            if node.end == self.bits:
                return True
            node = node.children[get_bit(key, node.end)]
        return False

    def memory_usage(self) -> int:
        """Approximate bytes held: node objects, child lists and stored keys."""
        per_node = sys.getsizeof(_Node(b"", 0, 0)) + sys.getsizeof([None, None])
        return self._nodes * per_node + self._key_bytes

    def clear(self) -> None:
        self._root = None
        self._count = 0
        self._nodes = 0
        self._key_bytes = 0


# ======================================================================
#  Flat alternatives
# ======================================================================


class HashVisitedSet:
    def __init__(self) -> None:
        self._keys: set[bytes] = set()
        self._key_bytes = 0

    def __len__(self) -> int:
        return len(self._keys)

    def __contains__(self, key: bytes) -> bool:
        return key in self._keys

    def insert(self, key: bytes) -> bool:
        if key in self._keys:
            return False
        self._keys.add(key)
        self._key_bytes += sys.getsizeof(key)
        return True

    def memory_usage(self) -> int:
        return sys.getsizeof(self._keys) + self._key_bytes

    def clear(self) -> None:
        self._keys.clear()
        self._key_bytes = 0


class NullVisitedSet:
    """Deduplication switched off: nothing is remembered."""

    def __len__(self) -> int:
        return 0

    def insert(self, key: bytes) -> bool:
        return True

    def memory_usage(self) -> int:
        return 0

    def clear(self) -> None:
        pass
