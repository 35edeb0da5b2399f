"""Whether mountain heights of two kinds can be made to sum equally."""

from __future__ import annotations

import math
from typing import Sequence


def _mark(cell: object) -> int:
    if cell in ("0", 0):
        return 0
    if cell in ("1", 1):
        return 1
    raise ValueError(f"type must be 0 or 1, got {cell!r}")


def can_balance_mountains(
    heights: Sequence[Sequence[int]],
    types: Sequence[Sequence[object]],
    k: int,
) -> bool:
    """Whether adding constants to ``k`` x ``k`` squares can equalise both sums.

    ``types`` holds one row per row of ``heights``, each cell ``0``/``1`` or
    ``"0"``/``"1"`` (a row may be a string such as ``"010"``).  Adding ``c`` to
    a square changes the difference of the two sums by ``c`` times the number
    of type-0 cells minus type-1 cells in it, so the answer depends on the gcd
    of those counts.
    """
    if k < 1:
        raise ValueError("k must be at least 1")
    n = len(heights)
    m = len(heights[0]) if n else 0
    if len(types) != n:
        raise ValueError("heights and types must have the same number of rows")

    marks = [[_mark(cell) for cell in row] for row in types]
    for height_row, mark_row in zip(heights, marks):
        if len(height_row) != m or len(mark_row) != m:
            raise ValueError("every row must have the same length")

    sum_marked = sum_plain = 0
    for height_row, mark_row in zip(heights, marks):
        for height, mark in zip(height_row, mark_row):
            if mark:
                sum_marked += height
            else:
                sum_plain += height

    prefix = [[0] * (m + 1) for _ in range(n + 1)]
    for i, mark_row in enumerate(marks, start=1):
        for j, mark in enumerate(mark_row, start=1):
            prefix[i][j] = mark + prefix[i - 1][j] + prefix[i][j - 1] - prefix[i - 1][j - 1]

    divisor = 0
    found = False
    for i in range(k, n + 1):
        for j in range(k, m + 1):
            ones = prefix[i][j] - prefix[i - k][j] - prefix[i][j - k] + prefix[i - k][j - k]
            diff = k * k - 2 * ones
            if diff:
                divisor = math.gcd(divisor, diff)
                found = True

    imbalance = abs(sum_marked - sum_plain)
    if not found:
        return imbalance == 0
    return imbalance % divisor == 0