"""A Fenwick tree of counts used as a multiset of small integers."""

from __future__ import annotations

from typing import Iterable


class FenwickTree:
    """Binary indexed tree over positions ``1..size``."""

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError("size must not be negative")
        self.size = size
        self._tree = [0] * (size + 1)

    def add(self, index: int, delta: int) -> None:
        """Add ``delta`` at position ``index``."""
        if not 1 <= index <= self.size:
            raise IndexError(f"index {index} outside 1..{self.size}")
        while index <= self.size:
            self._tree[index] += delta
            index += index & -index

    def prefix_sum(self, index: int) -> int:
        """Sum of positions ``1..index``; ``index`` 0 gives 0."""
        if not 0 <= index <= self.size:
            raise IndexError(f"index {index} outside 0..{self.size}")
        total = 0
        while index > 0:
            total += self._tree[index]
            index -= index & -index
        return total

    def range_sum(self, l: int, r: int) -> int:
        """Sum of positions ``l..r``."""
        if l < 1:
            raise IndexError(f"index {l} below 1")
        return self.prefix_sum(r) - self.prefix_sum(l - 1)

    def kth_smallest(self, k: int) -> int:
        """Smallest position whose prefix sum reaches ``k`` (counts must be non-negative)."""
        if k < 1:
            raise IndexError("k must be at least 1")
        position = 0
        remaining = k
        step = 1 << (self.size.bit_length() - 1) if self.size else 0
        while step:
            candidate = position + step
            if candidate <= self.size and self._tree[candidate] < remaining:
                position = candidate
                remaining -= self._tree[candidate]
            step >>= 1
        if position + 1 > self.size:
            raise IndexError(f"fewer than {k} elements stored")
        return position + 1


def process_multiset(n: int, values: Iterable[int], queries: Iterable[int]) -> int:
    """Run the queries on a multiset of values in ``1..n`` and report one survivor.

    A positive query inserts that value; a query ``-k`` removes the k-th
    smallest element.  Returns the smallest remaining value, or 0 if empty.
    """
    tree = FenwickTree(n)
    for value in values:
        tree.add(value, 1)
    for query in queries:
        if query > 0:
            tree.add(query, 1)
        else:
            tree.add(tree.kth_smallest(-query), -1)
    if tree.prefix_sum(n) > 0:
        return tree.kth_smallest(1)
    return 0