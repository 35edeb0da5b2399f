"""Interval counting, AND range queries and a few range problems."""

from __future__ import annotations

import bisect
import math
from typing import Sequence

_INT_MAX = 2**31 - 1


class CountIntervals:
    """Keeps a set of integer intervals and the number of points they cover."""

    def __init__(self) -> None:
        self._intervals: list[tuple[int, int]] = []
        self._total = 0

    def add(self, left: int, right: int) -> None:
        """Add ``[left, right]``, folding in stored intervals that it reaches."""
        position = bisect.bisect_left(self._intervals, (left, left - 1))

        if position == len(self._intervals):
            self._total += right - left + 1
            self._intervals.insert(position, (left, right))
            return

        if position > 0:
            position -= 1

        end = position
        for start, stop in self._intervals[position:]:
            if start > right:
                break
            self._total -= stop - start + 1
            right = max(right, stop)
            left = min(left, start)
            end += 1
        del self._intervals[position:end]

        self._total += right - left + 1
        bisect.insort(self._intervals, (left, right))

    def count(self) -> int:
        """Number of integer points covered."""
        return self._total


class AndSparseTable:
    """Sparse table answering bitwise-AND queries over inclusive ranges."""

    def __init__(self, values: Sequence[int]) -> None:
        n = len(values)
        if n == 0:
            raise ValueError("sparse table needs at least one value")
        self._n = n
        levels = math.ceil(math.log2(n))
        self._table: list[list[int]] = [list(values)]
        for j in range(1, levels + 1):
            half = 1 << (j - 1)
            previous = self._table[-1]
            row = [_INT_MAX] * n
            for i in range(n - half):
                row[i] = previous[i] & previous[i + half]
            self._table.append(row)

    def query(self, l: int, r: int) -> int:
        """Bitwise AND of ``values[l..r]``."""
        if not 0 <= l <= r < self._n:
            raise IndexError(f"invalid range [{l}, {r}]")
        power = (r - l + 1).bit_length() - 1
        row = self._table[power]
        return row[l] & row[r - (1 << power) + 1]


def _search(start: int, stop: int, k: int, keep_lowest: bool) -> int:
    found = -1
    lo, hi = start, stop
    while lo <= hi:
        mid = (lo + hi) // 2
        if mid == k:
            found = mid
            if keep_lowest:
                hi = mid - 1
            else:
                lo = mid + 1
        elif mid < k:
            hi = mid - 1
        else:
            lo = mid + 1
    return found


def count_subarrays(nums: Sequence[int], k: int) -> int:
    """Sum over start positions of the end positions the search settles on.

    For each start the end index is searched by comparing the candidate
    position itself with ``k``.
    """
    last = len(nums) - 1
    total = 0
    for start in range(len(nums)):
        low = _search(start, last, k, keep_lowest=True)
        high = _search(start, last, k, keep_lowest=False)
        if low != -1 and high != -1:
            total += high - low + 1
    return total


def axis_distance(a: int, b: int, c: int) -> int:
    """Smallest total distance from three points on a line to a meeting point."""
    return max(a, b, c) - min(a, b, c)