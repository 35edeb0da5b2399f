"""Short single-formula and greedy problems."""

from __future__ import annotations

from typing import Iterable


def catch_the_coin(x: int, y: int) -> bool:
    """Whether a coin starting at ``(x, y)`` and falling one unit per move can be caught."""
    distance = max(abs(x), abs(y))
    time_taken = y + distance
    return distance - 1 <= time_taken


def count_takahashi(names: Iterable[str]) -> int:
    """Number of names that are exactly ``"Takahashi"``."""
    return sum(1 for name in names if name == "Takahashi")


def only_pluses(a: int, b: int, c: int) -> int:
    """Largest product after adding one to the smallest value five times."""
    values = [a, b, c]
    for _ in range(5):
        values.sort()
        values[0] += 1
    first, second, third = values
    return first * second * third


def sanitize_hands(amounts: Iterable[int], m: int) -> int:
    """How many people in order can use the sanitizer before ``m`` runs short."""
    served = 0
    for amount in amounts:
        if amount > m:
            break
        m -= amount
        served += 1
    return served


def soccer(l1: int, r1: int, l2: int, r2: int) -> bool:
    """Whether the score can go from ``l1:r1`` to ``l2:r2`` without a tie on the way."""
    crossed = (l1 <= r1 and r2 <= l2) or (r1 <= l1 and l2 <= r2)
    return not crossed


def stair_peak(a: int, b: int, c: int) -> str:
    """Classify three digits as ``"STAIR"``, ``"PEAK"`` or ``"NONE"``."""
    if a < b < c:
        return "STAIR"
    if a < b > c:
        return "PEAK"
    return "NONE"


def subsegment_reverse(n: int, l: int, r: int) -> list[int]:
    """The sequence ``1..n`` with the positions ``l..r`` reversed."""
    return [*range(1, l), *range(r, l - 1, -1), *range(r + 1, n + 1)]


def upload_more_ram(n: int, k: int) -> int:
    """Seconds to upload ``n`` units with at most one unit per ``k`` seconds."""
    return (n - 1) * k + 1