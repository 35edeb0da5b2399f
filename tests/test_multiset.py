import random

import pytest

from cpkit.multiset import FenwickTree, process_multiset


def test_all_removed_gives_zero():
    assert process_multiset(5, [1, 2, 3, 4, 5], [-1, -1, -1, -1, -1]) == 0


def test_removals_by_rank():
    assert process_multiset(5, [1, 2, 3, 4, 5], [-5, -1, -3, -1]) == 3


def test_insertions_only():
    assert process_multiset(6, [1, 1, 1, 2, 3, 4], [5, 6]) == 1


def test_random_operations_match_sorted_list():
    rng = random.Random(3)
    for _ in range(30):
        n = rng.randint(1, 10)
        items = [rng.randint(1, n) for _ in range(rng.randint(1, 8))]
        queries = []
        current = sorted(items)
        for _ in range(rng.randint(0, 10)):
            if current and rng.random() < 0.5:
                k = rng.randint(1, len(current))
                queries.append(-k)
                del current[k - 1]
            else:
                value = rng.randint(1, n)
                queries.append(value)
                current.append(value)
                current.sort()
        expected = current[0] if current else 0
        assert process_multiset(n, items, queries) == expected


def test_sums_match_counts():
    rng = random.Random(5)
    size = 12
    tree = FenwickTree(size)
    counts = [0] * (size + 1)
    for _ in range(50):
        index = rng.randint(1, size)
        delta = rng.randint(-3, 3)
        tree.add(index, delta)
        counts[index] += delta
    for r in range(size + 1):
        assert tree.prefix_sum(r) == sum(counts[: r + 1])
    for l in range(1, size + 1):
        for r in range(l, size + 1):
            assert tree.range_sum(l, r) == sum(counts[l : r + 1])


def test_kth_smallest_matches_sorted_values():
    rng = random.Random(9)
    size = 15
    tree = FenwickTree(size)
    stored = []
    for _ in range(25):
        value = rng.randint(1, size)
        tree.add(value, 1)
        stored.append(value)
    ordered = sorted(stored)
    for k in range(1, len(ordered) + 1):
        assert tree.kth_smallest(k) == ordered[k - 1]


def test_kth_smallest_beyond_total_raises():
    tree = FenwickTree(3)
    tree.add(1, 1)
    with pytest.raises(IndexError):
        tree.kth_smallest(2)
    with pytest.raises(IndexError):
        tree.kth_smallest(0)


def test_add_out_of_range_raises():
    tree = FenwickTree(4)
    with pytest.raises(IndexError):
        tree.add(0, 1)
    with pytest.raises(IndexError):
        tree.add(5, 1)


def test_removal_from_empty_raises():
    with pytest.raises(IndexError):
        process_multiset(3, [], [-1])