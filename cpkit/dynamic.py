"""Classic dynamic-programming problems."""

from __future__ import annotations

from typing import Iterable, Sequence

MOD = 10**9 + 7


def frog_min_cost(heights: Sequence[int], k: int) -> int:
    """Least total cost for a frog to reach the last stone jumping up to ``k`` stones.

    A jump from stone ``j`` to stone ``i`` costs ``|heights[i] - heights[j]|``.
    """
    if not heights:
        raise ValueError("heights must not be empty")
    if k < 1 and len(heights) > 1:
        raise ValueError("k must be at least 1")

    costs = [0]
    for i in range(1, len(heights)):
        current = heights[i]
        costs.append(
            min(
                abs(current - heights[j]) + costs[j]
                for j in range(max(0, i - k), i)
            )
        )
    return costs[-1]


def vacation_max_happiness(days: Iterable[Sequence[int]]) -> int:
    """Most happiness over the days when no activity is done two days running.

    Each day gives the happiness of its three activities.
    """
    best: list[int] | None = None
    for day in days:
        if len(day) != 3:
            raise ValueError("each day must list exactly three activities")
        if best is None:
            best = list(day)
            continue
        previous = best
        best = [
            gain + max(previous[other] for other in range(3) if other != activity)
            for activity, gain in enumerate(day)
        ]
    if best is None:
        raise ValueError("days must not be empty")
    return max(best)


def knapsack_max_value(items: Iterable[Sequence[int]], capacity: int) -> int:
    """Largest total value of ``(weight, value)`` items fitting in ``capacity``."""
    if capacity < 0:
        raise ValueError("capacity must not be negative")
    best = [0] * (capacity + 1)
    for weight, value in items:
        previous = best
        best = [
            max(previous[j], value + previous[j - weight]) if 0 <= weight <= j and j else previous[j]
            for j in range(capacity + 1)
        ]
    return best[capacity]


def array_description_count(values: Sequence[int], m: int) -> int:
    """Ways, modulo 10**9 + 7, to fill the zeros so neighbours differ by at most 1.

    Every value must lie in ``1..m``; zeros mark unknown entries.
    """
    if not values:
        raise ValueError("values must not be empty")
    for value in values:
        if not 0 <= value <= m:
            raise ValueError(f"value {value} outside 0..{m}")

    ways = [0] * (m + 2)
    first = values[0]
    if first == 0:
        for j in range(1, m + 1):
            ways[j] = 1
    else:
        ways[first] = 1

    for value in values[1:]:
        previous = ways
        ways = [0] * (m + 2)
        targets = range(1, m + 1) if value == 0 else (value,)
        for j in targets:
            ways[j] = (previous[j - 1] + previous[j] + previous[j + 1]) % MOD
    return sum(ways) % MOD