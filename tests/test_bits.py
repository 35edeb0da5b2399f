import random

from cpkit.bits import min_removals_for_full_mask


def test_empty_needs_nothing():
    assert min_removals_for_full_mask([]) == 0


def test_full_mask_already_present():
    assert min_removals_for_full_mask([1, 2, 4]) == 0
    assert min_removals_for_full_mask([0, 0, 0]) == 0


def test_gap_in_bits_needs_removal():
    assert min_removals_for_full_mask([1, 4]) == 1


def test_result_bounded_by_positive_count():
    rng = random.Random(1)
    for _ in range(50):
        values = [rng.randint(0, 100) for _ in range(rng.randint(0, 10))]
        result = min_removals_for_full_mask(values)
        assert 0 <= result <= sum(1 for v in values if v > 0)


def test_zeros_do_not_change_result():
    rng = random.Random(2)
    for _ in range(50):
        values = [rng.randint(0, 64) for _ in range(rng.randint(1, 8))]
        assert min_removals_for_full_mask(values + [0, 0]) == min_removals_for_full_mask(
            values
        )


def test_order_does_not_matter():
    rng = random.Random(4)
    for _ in range(50):
        values = [rng.randint(0, 64) for _ in range(rng.randint(1, 8))]
        shuffled = values[:]
        rng.shuffle(shuffled)
        assert min_removals_for_full_mask(shuffled) == min_removals_for_full_mask(values)


def test_all_masks_up_to_power_need_no_removal():
    for power in range(1, 10):
        values = list(range(1, 1 << power))
        assert min_removals_for_full_mask(values) == 0