import pytest

from dsalgo.dynamic import (
    count_coin_change,
    longest_common_subsequence,
    min_moves_to_k_equal,
    subset_sum,
)


def test_coin_change_zero_amount_has_one_way():
    assert count_coin_change([2, 5], 0) == 1


def test_coin_change_no_coins():
    assert count_coin_change([], 5) == 0


def test_coin_change_single_unit_coin():
    assert count_coin_change([1], 37) == 1


def test_coin_change_small_example():
    assert count_coin_change([1, 2, 3], 4) == 4


def test_coin_change_order_does_not_matter():
    assert count_coin_change([5, 1, 2], 20) == count_coin_change([1, 2, 5], 20)


def test_coin_change_large_coin_ignored():
    assert count_coin_change([1, 2, 100], 10) == count_coin_change([1, 2], 10)


@pytest.mark.parametrize("coins,amount", [([1], -1), ([0, 1], 3), ([-2], 4)])
def test_coin_change_rejects_bad_input(coins, amount):
    with pytest.raises(ValueError):
        count_coin_change(coins, amount)


def test_lcs_worked_example():
    assert longest_common_subsequence("AGGTAB", "GXTXAYB") == "GTAB"


def _is_subsequence(short, long):
    it = iter(long)
    return all(ch in it for ch in short)


@pytest.mark.parametrize(
    "a,b", [("ABCBDAB", "BDCABA"), ("hello", "yellow"), ("abc", "xyz"), ("", "abc")]
)
def test_lcs_is_common_and_symmetric_in_length(a, b):
    result = longest_common_subsequence(a, b)
    assert _is_subsequence(result, a)
    assert _is_subsequence(result, b)
    assert len(result) == len(longest_common_subsequence(b, a))


def test_lcs_with_itself():
    assert longest_common_subsequence("banana", "banana") == "banana"


def test_subset_sum_source_example():
    assert subset_sum([3, 3, 3, 3], 6) is True


def test_subset_sum_unreachable():
    assert subset_sum([3, 3, 3, 3], 5) is False


def test_subset_sum_zero_always_reachable():
    assert subset_sum([], 0) is True


def test_subset_sum_whole_set():
    values = [4, 9, 1, 7]
    assert subset_sum(values, sum(values)) is True
    assert subset_sum(values, sum(values) + 1) is False


@pytest.mark.parametrize("values,total", [([1, -2], 3), ([1, 2], -1)])
def test_subset_sum_rejects_negatives(values, total):
    with pytest.raises(ValueError):
        subset_sum(values, total)


def test_min_moves_source_example():
    assert min_moves_to_k_equal([1, 2, 3, 4, 5], 3, 2) == 2


def test_min_moves_k_one_is_free():
    assert min_moves_to_k_equal([17, 40, 3], 1, 3) == 0


def test_min_moves_equal_values_are_free():
    assert min_moves_to_k_equal([6, 6, 6], 3, 2) == 0


@pytest.mark.parametrize(
    "values,k,d", [([1, 2], 3, 2), ([1, 2], 2, 1), ([-1, 2], 1, 2), ([1], -1, 2)]
)
def test_min_moves_rejects_bad_input(values, k, d):
    with pytest.raises(ValueError):
        min_moves_to_k_equal(values, k, d)