import pytest

from cpkit.subsets import count_key_combinations


def test_worked_example():
    tests = [([1, 2, 3], True), ([2, 3], False)]
    assert count_key_combinations(3, 2, tests) == 2


def test_no_tests_allows_every_choice():
    assert count_key_combinations(4, 1, []) == 2**4


def test_all_keys_needed_and_opened():
    n = 5
    assert count_key_combinations(n, n, [(list(range(1, n + 1)), True)]) == 1


def test_all_keys_needed_and_stayed_shut():
    n = 5
    assert count_key_combinations(n, n, [(list(range(1, n + 1)), False)]) == 2**n - 1


def test_contradictory_tests():
    tests = [([1], True), ([1], False)]
    assert count_key_combinations(2, 1, tests) == 0


def test_opened_and_shut_partition_choices():
    n, k, keys = 4, 2, [1, 3, 4]
    opened = count_key_combinations(n, k, [(keys, True)])
    shut = count_key_combinations(n, k, [(keys, False)])
    assert opened + shut == 2**n


def test_key_out_of_range():
    with pytest.raises(ValueError):
        count_key_combinations(2, 1, [([3], True)])