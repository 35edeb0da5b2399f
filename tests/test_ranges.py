import pytest

from cpkit.ranges import (
    AndSparseTable,
    CountIntervals,
    axis_distance,
    count_subarrays,
)


def test_count_intervals_starts_empty():
    assert CountIntervals().count() == 0


def test_count_intervals_disjoint_increasing():
    counter = CountIntervals()
    counter.add(1, 3)
    counter.add(10, 12)
    counter.add(20, 20)
    assert counter.count() == 3 + 3 + 1


def test_count_intervals_insert_before_existing():
    counter = CountIntervals()
    counter.add(10, 20)
    counter.add(1, 5)
    assert counter.count() == 11 + 5


def test_count_intervals_bridging_interval_merges():
    counter = CountIntervals()
    counter.add(10, 20)
    counter.add(1, 5)
    counter.add(3, 12)
    assert counter.count() == len(range(1, 21))


def test_count_intervals_same_interval_twice():
    counter = CountIntervals()
    counter.add(10, 20)
    counter.add(1, 5)
    counter.add(1, 5)
    assert counter.count() == 16


def test_sparse_table_matches_direct_and():
    values = [12, 14, 7, 15, 255, 6, 13, 31, 9]
    table = AndSparseTable(values)
    for l in range(len(values)):
        for r in range(l, len(values)):
            expected = values[l]
            for v in values[l + 1 : r + 1]:
                expected &= v
            assert table.query(l, r) == expected


def test_sparse_table_single_value():
    assert AndSparseTable([42]).query(0, 0) == 42


def test_sparse_table_empty_rejected():
    with pytest.raises(ValueError):
        AndSparseTable([])


def test_sparse_table_bad_range():
    table = AndSparseTable([1, 2, 3])
    with pytest.raises(IndexError):
        table.query(2, 1)
    with pytest.raises(IndexError):
        table.query(0, 3)


def test_count_subarrays_single_element():
    assert count_subarrays([1], 0) == 1


@pytest.mark.parametrize("k", [4, 10, -1, -7])
def test_count_subarrays_out_of_range_k_is_zero(k):
    assert count_subarrays([1, 1, 2, 3], k) == 0


def test_count_subarrays_empty():
    assert count_subarrays([], 0) == 0


@pytest.mark.parametrize("a, b, c", [(1, 10, 5), (5, 5, 5), (-3, 7, 0)])
def test_axis_distance_is_order_independent(a, b, c):
    result = axis_distance(a, b, c)
    assert result == axis_distance(c, a, b) == axis_distance(b, c, a)
    assert result == max(a, b, c) - min(a, b, c)


def test_axis_distance_equal_points():
    assert axis_distance(5, 5, 5) == 0