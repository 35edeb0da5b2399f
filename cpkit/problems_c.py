"""Grid, simulation and greedy problems."""

from __future__ import annotations

from typing import Sequence


def upscaled_checkerboard(n: int) -> list[str]:
    """A ``2n`` by ``2n`` checkerboard of 2x2 cells, ``'#'`` in the top-left cell."""
    size = 2 * n
    rows: list[str] = []
    for block_row in range(n):
        row = "".join(
            "#" if (block_row + block_col) % 2 == 0 else "." for block_col in range(n)
            for _ in range(2)
        )
        rows.extend([row, row])
    assert all(len(row) == size for row in rows)
    return rows


def basil_garden(heights: Sequence[int]) -> int:
    """Seconds until every flower's height reaches zero, as the estimate computes it.

    Waiting times are built from the rightmost flower leftwards; the answer is
    the largest waiting time plus height, or 0 for an empty garden.
    """
    count = len(heights)
    waiting = [0] * count
    for i in range(count - 2, -1, -1):
        current, following = heights[i], heights[i + 1]
        if current > following:
            diff = current - following
            waiting[i] = diff - waiting[i + 1] + 1 if diff >= waiting[i + 1] else 0
        else:
            waiting[i] = waiting[i + 1] + (following - current + 1)
    return max((wait + height for wait, height in zip(waiting, heights)), default=0)


def boring_day_rounds(cards: Sequence[int], low: int, high: int) -> int:
    """Rounds won by taking cards from the top while the window sum is in ``[low, high]``."""
    rounds = 0
    window_start = 0
    window_sum = 0
    for i, card in enumerate(cards):
        window_sum += card
        if window_sum > high:
            while window_start <= i and window_sum > high:
                window_sum -= cards[window_start]
                window_start += 1
        if low <= window_sum <= high:
            rounds += 1
            window_start = i + 1
            window_sum = 0
    return rounds


def gorilla_permutation(n: int, m: int, k: int) -> list[int]:
    """Permutation of ``1..n``: values above ``m`` descending, then ``1..m`` ascending.

    ``k`` belongs to the problem's input and does not change the arrangement.
    """
    return [*range(n, m, -1), *range(1, m + 1)]


def two_movies_rating(a: Sequence[int], b: Sequence[int]) -> int:
    """Largest possible minimum rating of two movies reviewed by the same viewers.

    Each viewer's opinion of the first and second movie is -1, 0 or 1.
    """
    if len(a) != len(b):
        raise ValueError("a and b must have the same length")

    first = second = 0
    both_liked = both_disliked = 0
    for x, y in zip(a, b):
        if x == 1 or y == 1:
            if x == 1 and y == 1:
                both_liked += 1
            elif x == 1:
                first += 1
            else:
                second += 1
        elif x == 0 or y == 0:
            continue
        else:
            both_disliked += 1

    for _ in range(both_liked):
        if first > second:
            second += 1
        else:
            first += 1
    for _ in range(both_disliked):
        if first > second:
            first -= 1
        else:
            second -= 1
    return min(first, second)


def update_queries(s: str, indices: Sequence[int], letters: str) -> str:
    """Smallest string after writing the letters at the (0-based) indices in any order.

    Sorted letters go to sorted indices, so a repeated index ends up with the
    later, larger letter.
    """
    if len(indices) != len(letters):
        raise ValueError("indices and letters must have the same length")
    chars = list(s)
    for index, letter in zip(sorted(indices), sorted(letters)):
        if not 0 <= index < len(chars):
            raise IndexError(f"index {index} out of range")
        chars[index] = letter
    return "".join(chars)