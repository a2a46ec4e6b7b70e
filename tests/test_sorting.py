import math
import random

import pytest

from dsakit.sorting import (
    bubble_sort,
    count_inversions,
    counting_sort,
    heap_sort,
    insertion_sort,
    merge_sort,
    quick_sort,
    quick_sort_first_pivot,
    selection_sort,
    sort_012,
)

SOURCE_ARRAYS = [
    [9, 4, 6, 2, 45, 23, 90, 7],
    [45, 67, 72, 20, 89, 12],
    [34, 67, 12, 89, 32, 49, 88, 17, 44],
    [5, 4, 3, 6, 1, 2, 7],
]


def _random_lists():
    rng = random.Random(1234)
    return [[rng.randint(-50, 50) for _ in range(size)] for size in (0, 1, 2, 7, 31, 100)]


@pytest.mark.parametrize("values", SOURCE_ARRAYS + _random_lists())
def test_general_sorts_match_builtin(values):
    expected = sorted(values)
    assert bubble_sort(values) == expected
    assert insertion_sort(values) == expected
    assert selection_sort(values) == expected
    assert merge_sort(values) == expected
    assert quick_sort(values) == expected
    assert quick_sort_first_pivot(values) == expected
    assert heap_sort(values) == expected


def test_sorts_do_not_modify_input():
    values = [3, 1, 2, 3, 0]
    snapshot = list(values)
    expected = [0, 1, 2, 3, 3]
    assert bubble_sort(values) == expected
    assert values == snapshot
    assert insertion_sort(values) == expected
    assert values == snapshot
    assert selection_sort(values) == expected
    assert values == snapshot
    assert merge_sort(values) == expected
    assert values == snapshot
    assert quick_sort(values) == expected
    assert values == snapshot
    assert quick_sort_first_pivot(values) == expected
    assert values == snapshot
    assert heap_sort(values) == expected
    assert values == snapshot


def test_sorts_handle_duplicates_and_presorted():
    values = [7] * 20 + list(range(30)) + list(range(30, 0, -1))
    expected = sorted(values)
    assert bubble_sort(values) == expected
    assert insertion_sort(values) == expected
    assert selection_sort(values) == expected
    assert merge_sort(values) == expected
    assert quick_sort(values) == expected
    assert quick_sort_first_pivot(values) == expected
    assert heap_sort(values) == expected


def test_quick_sorts_survive_large_sorted_input():
    values = list(range(3000))
    assert quick_sort(values) == values
    assert quick_sort(reversed(values)) == values
    assert quick_sort_first_pivot(values) == values
    assert quick_sort_first_pivot(reversed(values)) == values


@pytest.mark.parametrize(
    "values",
    [
        [0, 1, 2, 2, 1, 1, 1],
        [0, 1, 0, 2, 1, 1, 1],
        [2, 1, 1, 0, 1, 2, 2, 1, 1, 1],
        [2, 1, 0, 0, 2, 1, 2, 0, 1, 1, 0, 2, 0, 2],
        [],
    ],
)
def test_sort_012_source_cases(values):
    assert sort_012(values) == sorted(values)


def test_sort_012_keeps_counts():
    values = [2, 0, 1] * 10
    result = sort_012(values)
    assert [result.count(v) for v in (0, 1, 2)] == [values.count(v) for v in (0, 1, 2)]


def test_counting_sort_matches_builtin():
    rng = random.Random(99)
    values = [rng.randint(0, 255) for _ in range(500)]
    assert counting_sort(values) == sorted(values)


@pytest.mark.parametrize("bad", [[256], [-1], [3, 300]])
def test_counting_sort_rejects_out_of_range(bad):
    with pytest.raises(ValueError):
        counting_sort(bad)


def test_counting_sort_rejects_non_integers():
    with pytest.raises(TypeError):
        counting_sort([1.5])


def test_merge_sort_is_stable():
    class Keyed:
        def __init__(self, key, tag):
            self.key, self.tag = key, tag

        def __le__(self, other):
            return self.key <= other.key

        def __lt__(self, other):
            return self.key < other.key

    items = [Keyed(1, "a"), Keyed(0, "b"), Keyed(1, "c"), Keyed(0, "d")]
    result = merge_sort(items)
    assert [item.tag for item in result] == ["b", "d", "a", "c"]


def test_count_inversions_sorted_is_zero():
    assert count_inversions(sorted([5, 4, 3, 6, 1, 2, 7])) == 0


def test_count_inversions_reversed_is_all_pairs():
    values = list(range(25, 0, -1))
    assert count_inversions(values) == math.comb(len(values), 2)


@pytest.mark.parametrize("values", SOURCE_ARRAYS)
def test_count_inversions_complements_reverse(values):
    total = count_inversions(values) + count_inversions(list(reversed(values)))
    assert total == math.comb(len(values), 2)


def test_count_inversions_does_not_modify_input():
    values = [5, 4, 3, 6, 1, 2, 7]
    count_inversions(values)
    assert values == [5, 4, 3, 6, 1, 2, 7]