"""Brute force over subsets of keys."""

from __future__ import annotations

from typing import Iterable, Sequence


def count_key_combinations(
    n: int, k: int, tests: Iterable[tuple[Sequence[int], bool]]
) -> int:
    """Count which of the ``2**n`` real/dummy key choices agree with every test.

    Each test lists 1-based key numbers inserted into the door and whether it
    opened; the door opens when at least ``k`` of the inserted keys are real.
    """
    checks = []
    for keys, opened in tests:
        indices = []
        for key in keys:
            if not 1 <= key <= n:
                raise ValueError(f"key {key} outside 1..{n}")
            indices.append(key - 1)
        checks.append((indices, bool(opened)))

    return sum(
        1
        for mask in range(1 << n)
        if all(
            (sum(1 for i in indices if mask >> i & 1) >= k) == opened
            for indices, opened in checks
        )
    )