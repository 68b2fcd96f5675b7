"""Tests for the binary search generator."""
import os
import random
import sys

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from algorithms.binary_search import binary_search
from algorithms.step import FOUND, NOT_FOUND, PROBE


def _probes(steps):
    return [s for s in steps if s.kind == PROBE]


def test_scenario_found_on_third_probe():
    """[1,2,3,4,5], target 2: mid 2 → go left, mid 0 → go right, mid 1 found."""
    steps = list(binary_search([1, 2, 3, 4, 5], 2))
    probes = _probes(steps)
    assert [p.marker.active_index for p in probes] == [2, 0, 1]
    assert [(p.marker.low, p.marker.high) for p in probes] == [(0, 4), (0, 1), (1, 1)]

    final = steps[-1]
    assert final.kind == FOUND
    assert final.found_index == 1
    assert final.status == "Found 2 at index 1 using Binary Search."


def test_not_found_above_and_below():
    above = list(binary_search([1, 2, 3, 4, 5], 6))
    assert [p.marker.active_index for p in _probes(above)] == [2, 3, 4]
    assert above[-1].kind == NOT_FOUND
    assert above[-1].status == "6 not found using Binary Search."

    below = list(binary_search([1, 2, 3, 4, 5], 0))
    assert [p.marker.active_index for p in _probes(below)] == [2, 0]
    assert below[-1].kind == NOT_FOUND


def test_mid_rounds_down():
    steps = list(binary_search([10, 20, 30, 40], 99))
    assert _probes(steps)[0].marker.active_index == 1


def test_result_matches_membership_on_sorted_arrays():
    rng = random.Random(5)
    for _ in range(300):
        values = sorted(rng.randint(1, 40) for _ in range(rng.randint(5, 50)))
        target = rng.randint(0, 41)
        steps = list(binary_search(values, target))
        final = steps[-1]
        if target in values:
            assert final.kind == FOUND
            assert values[final.found_index] == target
        else:
            assert final.kind == NOT_FOUND
        # log2(50) < 6
        assert len(_probes(steps)) <= 6


def test_duplicates():
    steps = list(binary_search([1, 2, 2, 2, 3], 2))
    assert steps[-1].found_index == 2


def test_probe_log_and_delay():
    steps = list(binary_search([1, 3, 5], 3))
    assert steps[0].log_line == "low=0, high=2, mid=1 (value=3)"
    assert steps[0].delay_ms == 160
    assert steps[-1].delay_ms == 0


def test_empty_array():
    steps = list(binary_search([], 3))
    assert len(steps) == 1
    assert steps[0].kind == NOT_FOUND
