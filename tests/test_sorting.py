import random

import pytest

from algoplay.sorting import (
    counting_sort,
    insertion_sort,
    main,
    merge_sort,
    quick_sort,
    radix_sort,
)

SAMPLES = [
    [],
    [7],
    [3, 1, 2],
    [5, 5, 5, 1, 1],
    [9, 8, 7, 6, 5, 4, 3, 2, 1, 0],
    [0, 1, 2, 3, 4, 5],
    [12, 4, 31, 4, 0, 27, 19, 4, 8],
]


@pytest.mark.parametrize("sort", [insertion_sort, merge_sort, quick_sort, radix_sort])
@pytest.mark.parametrize("values", SAMPLES)
def test_sorts_match_sorted(sort, values):
    original = list(values)
    assert sort(values) == sorted(values)
    assert values == original


@pytest.mark.parametrize("values", SAMPLES)
def test_counting_sort(values):
    assert counting_sort(values, 32) == sorted(values)


@pytest.mark.parametrize("sort", [insertion_sort, merge_sort, quick_sort])
def test_random_with_negatives(sort):
    rng = random.Random(11)
    values = [rng.randint(-500, 500) for _ in range(300)]
    assert sort(values) == sorted(values)


def test_radix_sort_four_digit_values():
    rng = random.Random(5)
    values = [rng.randrange(1000, 10000) for _ in range(200)]
    assert radix_sort(values) == sorted(values)


def test_radix_sort_only_looks_at_requested_digits():
    assert radix_sort([10000, 1], passes=4) == [10000, 1]
    assert radix_sort([10000, 1], passes=5) == [1, 10000]


def test_radix_sort_rejects_negative():
    with pytest.raises(ValueError):
        radix_sort([3, -1])


def test_counting_sort_rejects_out_of_range():
    with pytest.raises(ValueError):
        counting_sort([1, 5], 5)
    with pytest.raises(ValueError):
        counting_sort([-1], 5)
    with pytest.raises(ValueError):
        counting_sort([], 0)


def test_merge_sort_is_stable():
    class Key(int):
        pass

    first, second = Key(3), Key(3)
    result = merge_sort([second, Key(1), first])
    assert result[1] is second and result[2] is first


@pytest.mark.parametrize("algorithm", ["quick", "merge", "insertion", "counting", "radix"])
def test_main_prints_sorted_second_line(capsys, algorithm):
    assert main([algorithm, "25", "--seed", "3"]) == 0
    lines = capsys.readouterr().out.splitlines()
    drawn = [int(t) for t in lines[0].split()]
    result = [int(t) for t in lines[1].split()]
    assert len(drawn) == 25
    assert result == sorted(drawn)