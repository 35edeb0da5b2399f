"""Greedy, counting and string problems of moderate size."""

from __future__ import annotations

from typing import Iterable, Sequence


def angry_monk(pieces: Iterable[int]) -> int:
    """Operations needed to join all pieces back into the largest one.

    Every piece except a largest one is split into unit pieces and then
    merged back, costing ``2 * size - 1`` operations.
    """
    ordered = sorted(pieces, reverse=True)
    return sum(2 * piece - 1 for piece in ordered[1:])


def _truncated_mod(x: int, y: int) -> int:
    remainder = abs(x) % abs(y)
    return -remainder if x < 0 else remainder


def collatz_remainder(x: int, y: int, k: int) -> int:
    """The part of ``x`` that is a whole multiple of ``y``.

    ``k`` is accepted for the problem's input shape but does not change the
    result.  A zero ``y`` raises :class:`ZeroDivisionError`.
    """
    if y == 0:
        raise ZeroDivisionError("y must be non-zero")
    return x - _truncated_mod(x, y)


def count_couples(values: Sequence[int]) -> int:
    """Number of positions whose value equals the value two places later."""
    return sum(1 for first, third in zip(values, values[2:]) if first == third)


def k_sort_cost(values: Sequence[int]) -> int:
    """Minimum coins to make ``values`` non-decreasing with the K-sort operation."""
    if not values:
        raise ValueError("values must not be empty")

    deficits: list[int] = []
    highest = values[0]
    for value in values[1:]:
        if value < highest:
            deficits.append(highest - value)
        highest = max(highest, value)

    total = 0
    operations = 0
    for deficit in deficits:
        if deficit <= operations:
            total += deficit
            continue
        total += 2 * (deficit - operations) + operations
        operations = deficit
    return total


def nutrients_sufficient(
    required: Sequence[int], foods: Iterable[Sequence[int]]
) -> bool:
    """Whether the foods together give at least the required amount of every nutrient."""
    remaining = list(required)
    for food in foods:
        for index, amount in enumerate(food[: len(remaining)]):
            remaining[index] -= amount
    return all(value <= 0 for value in remaining)


def _matched_prefix(a: str, b: str) -> int:
    """Length of the prefix of ``b`` found greedily as a subsequence of ``a``."""
    matched = 0
    for char in a:
        if matched == len(b):
            break
        if char == b[matched]:
            matched += 1
    return matched


def min_superstring_length(a: str, b: str) -> int:
    """Shortest string holding ``a`` as a substring and ``b`` as a subsequence."""
    if not b:
        return len(a)
    n1, n2 = len(a), len(b)
    return min(
        n1 + n2 - _matched_prefix(a, b[start : start + n1]) for start in range(n2)
    )


def normalize_case(s: str) -> str:
    """Make ``s`` all upper case if most letters are upper case, else all lower case.

    Only the ASCII letters are changed; any other character counts as lower case.
    """
    upper = sum(1 for char in s if "A" <= char <= "Z")
    lower = len(s) - upper
    if upper > lower:
        return "".join(char.upper() if "a" <= char <= "z" else char for char in s)
    return "".join(char.lower() if "A" <= char <= "Z" else char for char in s)