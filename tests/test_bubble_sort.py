"""Tests for the bubble sort generator."""
import os
import random
import sys
from collections import Counter

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from algorithms.bubble_sort import bubble_sort
from algorithms.step import COMPARE, SORTED, SWAP


def test_reverse_ish_scenario():
    """[5,3,1,4,2] sorts to [1..5]; passes 1-3 swap, pass 4 only compares."""
    values = [5, 3, 1, 4, 2]
    steps = list(bubble_sort(values))

    assert values == [1, 2, 3, 4, 5]
    final = steps[-1]
    assert final.kind == SORTED
    assert final.is_final
    assert final.values == (1, 2, 3, 4, 5)
    assert final.metrics == {"comparisons": 10, "swaps": 7, "passes": 4}

    swaps_per_pass = Counter(s.metrics["passes"] for s in steps if s.kind == SWAP)
    assert swaps_per_pass == {1: 4, 2: 2, 3: 1}


def test_already_sorted_exits_after_one_pass():
    values = [1, 2, 3, 4, 5]
    steps = list(bubble_sort(values))
    assert [s.kind for s in steps].count(COMPARE) == 4
    assert [s.kind for s in steps].count(SWAP) == 0
    assert steps[-1].metrics["passes"] == 1


def test_early_exit_takes_fewer_steps():
    nearly = list(bubble_sort([2, 1, 3, 4, 5, 6]))
    worst = list(bubble_sort([6, 5, 4, 3, 2, 1]))
    assert nearly[-1].metrics["passes"] == 2
    assert worst[-1].metrics["passes"] == 5
    assert len(nearly) < len(worst)


def test_random_arrays_sorted_permutation():
    rng = random.Random(7)
    for _ in range(100):
        values = [rng.randint(1, 30) for _ in range(rng.randint(5, 25))]
        original = list(values)
        steps = list(bubble_sort(values))
        assert values == sorted(original)
        assert steps[-1].metrics["passes"] <= len(original) - 1


def test_compare_and_swap_markers():
    steps = list(bubble_sort([2, 1, 3]))
    assert steps[0].kind == COMPARE
    assert steps[0].marker.active_index == 0
    assert steps[0].log_line == "Compare index 0 and 1"
    assert steps[0].values == (2, 1, 3)

    assert steps[1].kind == SWAP
    assert steps[1].marker.active_index == 1
    assert steps[1].log_line == "Swap → [1 , 2]"
    assert steps[1].values == (1, 2, 3)


def test_equal_elements_never_swap():
    steps = list(bubble_sort([4, 4, 4, 4, 4]))
    assert all(s.kind != SWAP for s in steps)


def test_delays():
    steps = list(bubble_sort([3, 2, 1]))
    assert all(s.delay_ms == 80 for s in steps[:-1])
    assert steps[-1].delay_ms == 0
    assert steps[-1].status == "Array sorted (Bubble Sort). Now Binary Search will work correctly."


def test_tiny_arrays():
    assert [s.kind for s in bubble_sort([])] == [SORTED]
    assert [s.kind for s in bubble_sort([9])] == [SORTED]


def _end_of_pass_snapshots(steps):
    """{k: array after pass k}: the last compare/swap frame tagged with pass k."""
    snapshots = {}
    for s in steps:
        if not s.is_final:
            snapshots[s.metrics["passes"]] = s.values
    return snapshots


def test_each_pass_fixes_the_largest_remaining_value():
    """After pass k the last k elements hold their final sorted values."""
    rng = random.Random(21)
    cases = [[5, 3, 1, 4, 2], [6, 5, 4, 3, 2, 1], [2, 2, 1, 1]]
    cases += [[rng.randint(1, 20) for _ in range(rng.randint(5, 20))] for _ in range(50)]
    for original in cases:
        expected = sorted(original)
        n = len(original)
        for k, snap in _end_of_pass_snapshots(list(bubble_sort(list(original)))).items():
            assert list(snap[n - k:]) == expected[n - k:]
