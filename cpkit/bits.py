"""Removing elements so the rest OR to a full low-bit mask."""

from __future__ import annotations

from typing import Sequence


def min_removals_for_full_mask(values: Sequence[int]) -> int:
    """Fewest removals so the kept values OR to ``2**p - 1`` and none exceeds it.

    Masks with ``p`` from 0 to 31 are tried; with no values the answer is 0.
    """
    best = len(values)
    for power in range(32):
        mask = (1 << power) - 1
        combined = 0
        removed = 0
        for value in values:
            if value <= mask:
                combined |= value
            else:
                removed += 1
        if combined == mask:
            best = min(best, removed)
    return best