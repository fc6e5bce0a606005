import random

import pytest

from dsalgo.sorting import (
    Shift,
    bubble_sort,
    merge_sort,
    selection_sort,
    shell_sort,
    shifting_sort,
)

SAMPLES = [
    [],
    [1],
    [12, 11, 13, 5, 6, 7],
    [12, 34, 54, 2, 3],
    [5, 5, 1, 5, 0, -3],
    list(range(10)),
    list(range(10, 0, -1)),
    random.Random(7).sample(range(1000), 60),
    [random.Random(3).randint(-5, 5) for _ in range(40)],
]


@pytest.mark.parametrize("sample", SAMPLES)
def test_sorts_match_builtin(sample):
    expected = sorted(sample)
    assert bubble_sort(sample) == expected
    assert merge_sort(sample) == expected
    assert shell_sort(sample) == expected
    assert selection_sort(sample) == expected
    assert shifting_sort(sample)[0] == expected


def test_input_is_not_modified():
    data = [3, 1, 2]
    assert bubble_sort(data) == [1, 2, 3]
    assert merge_sort(data) == [1, 2, 3]
    assert shell_sort(data) == [1, 2, 3]
    assert selection_sort(data) == [1, 2, 3]
    assert shifting_sort(data)[0] == [1, 2, 3]
    assert data == [3, 1, 2]


def test_accepts_any_iterable():
    expected = sorted((9, 4, 7))
    assert bubble_sort(iter((9, 4, 7))) == expected
    assert merge_sort(iter((9, 4, 7))) == expected
    assert shell_sort(iter((9, 4, 7))) == expected
    assert selection_sort(iter((9, 4, 7))) == expected
    assert shifting_sort(iter((9, 4, 7)))[0] == expected


def test_merge_sort_is_stable():
    pairs = [(2, "a"), (1, "b"), (2, "c"), (1, "d")]

    class Key:
        def __init__(self, pair):
            self.pair = pair

        def __le__(self, other):
            return self.pair[0] <= other.pair[0]

    result = [k.pair for k in merge_sort(Key(p) for p in pairs)]
    assert result == sorted(pairs, key=lambda p: p[0])


def _apply(values, shift):
    start = shift.left - 1
    segment = values[start:shift.right]
    segment = segment[shift.offset:] + segment[:shift.offset]
    return values[:start] + segment + values[shift.right:]


@pytest.mark.parametrize("sample", SAMPLES)
def test_shifts_sort_the_original(sample):
    result, shifts = shifting_sort(sample)
    current = list(sample)
    for shift in shifts:
        assert 1 <= shift.left < shift.right <= len(sample)
        assert shift.offset == shift.right - shift.left
        current = _apply(current, shift)
    assert current == result == sorted(sample)
    assert len(shifts) <= len(sample)


def test_sorted_input_needs_no_shifts():
    result, shifts = shifting_sort([1, 2, 3, 4])
    assert shifts == []
    assert result == [1, 2, 3, 4]


def test_shift_fields():
    _, shifts = shifting_sort([2, 1])
    assert shifts == [Shift(1, 2, 1)]